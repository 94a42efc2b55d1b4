# SPDX-License-Identifier: MIT
"""Small string and precondition helpers shared by the version modules."""

from __future__ import annotations

from typing import Iterable


def require_non_empty(value: object, name: str = "value") -> str:
    """Return ``value`` if it is a non-empty string, else raise ValueError."""
    if not isinstance(value, str):
        raise ValueError(f"{name} must be a string, got {type(value).__name__}")
    if not value:
        raise ValueError(f"{name} cannot be empty")
    return value


def require_non_negative(number: int, name: str = "number") -> int:
    """Return ``number`` if it is an int >= 0, else raise ValueError."""
    if isinstance(number, bool) or not isinstance(number, int):
        raise ValueError(f"{name} must be an integer, got {type(number).__name__}")
    if number < 0:
        raise ValueError(f"{name} must be non-negative, got {number}")
    return number


def require_non_negative_all(numbers: Iterable[int], name: str = "numbers") -> tuple[int, ...]:
    """Validate a non-empty sequence of non-negative integers."""
    result = tuple(numbers)
    if not result:
        raise ValueError(f"{name} cannot be empty")
    for number in result:
        require_non_negative(number, name)
    return result


def split(text: str, delimiter: str) -> list[str]:
    """Split ``text`` on a single delimiter character.

    Unlike :meth:`str.split` with no arguments, empty parts are kept, so
    ``split("-b5", "-")`` yields ``["", "b5"]``.
    """
    if len(delimiter) != 1:
        raise ValueError(f"delimiter must be a single character, got {delimiter!r}")
    return text.split(delimiter)


def substring_after(text: str, marker: str) -> str:
    """Return the part of ``text`` after the first ``marker``.

    The whole string is returned when ``marker`` does not occur.
    """
    head, sep, tail = text.partition(marker)
    return tail if sep else text
