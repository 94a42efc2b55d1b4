# SPDX-License-Identifier: MIT
"""Parsing of version strings with chained subversions.

Supported forms include:
- 1.2.0, v1.2.0
- 1.2.0a3, 1.2.0b2, 1.2.0rc5 (inline development stage and build)
- 1.2.0-b5 (final build number)
- 1.2.0-b5-SNAPSHOT
- 1.2.0-UNIQUE3.2a3 (named subversion)
- 1.2.0rc5-UNIQUE3.2-b102
- 1.2.0rc5-UNIQUE3.2b102-SNAPSHOT

Grammar:
    version      := ["v"] numbers [stage-suffix | "-b" digits] ("-" subversion)* ["-SNAPSHOT"]
    subversion   := UPPER+ numbers [stage-suffix]
    numbers      := digits ("." digits)*
    stage-suffix := ("a" | "b" | "rc") digits
"""

from __future__ import annotations

import logging
import re

from ._util import require_non_empty, split, substring_after
from .errors import InvalidVersionFormat
from .model import Subversion, Version, VersionNode
from .render import SNAPSHOT_MARKER
from .stage import DevelopmentStage

logger = logging.getLogger(__name__)

# Root segment: everything before the first dash
ROOT_SEGMENT_PATTERN = re.compile(
    r"^v?(?P<numbers>[0-9]+(?:\.[0-9]+)*)"
    r"(?P<suffix>(?P<stage>a|b|rc)[0-9]+)?$"
)

# Subversion segment: identifier immediately followed by its numbers
SUBVERSION_SEGMENT_PATTERN = re.compile(
    r"^(?P<identifier>[A-Z]+)"
    r"(?P<numbers>[0-9]+(?:\.[0-9]+)*)"
    r"(?P<suffix>(?P<stage>a|b|rc)[0-9]+)?$"
)

# Trailing "-b<N>" build number
FINAL_BUILD_PATTERN = re.compile(r"^b(?P<build>[0-9]+)$")

SEGMENT_DELIMITER = "-"

# Stage code that a trailing SNAPSHOT may not follow on an unforked root
_AMBIGUOUS_SNAPSHOT_CODE = DevelopmentStage.BETA.code


def _to_int(digits: str, text: str) -> int:
    try:
        return int(digits)
    except ValueError as e:
        # Digit strings beyond the interpreter's conversion limit
        raise InvalidVersionFormat(text, f"Number too large in {text}: {e}") from e


def parse_version_numbers(text: str) -> tuple[int, ...]:
    """Convert dot-separated numbers into a tuple of ints.

    Examples:
        >>> parse_version_numbers("1.2.0")
        (1, 2, 0)

    Raises:
        InvalidVersionFormat: If any group is not made of digits only, or
            is too long to convert
    """
    numbers = []
    for part in split(text, "."):
        if not part.isdigit() or not part.isascii():
            raise InvalidVersionFormat(
                text, f"This string has unexpected alphanumeric characters: {text}"
            )
        numbers.append(_to_int(part, text))
    return tuple(numbers)


def _has_alphanumeric_groups(segment: str) -> bool:
    parts = split(segment[1:] if segment.startswith("v") else segment, ".")
    return all(part.isalnum() for part in parts) and not all(part.isdigit() for part in parts)


def _build_node(match: re.Match[str], default_build: int, text: str) -> VersionNode:
    stage = DevelopmentStage.STABLE
    build = default_build
    code = match.group("stage")
    if code is not None:
        stage = DevelopmentStage.from_code(code)
        build = _to_int(substring_after(match.group("suffix"), code), text)
    try:
        numbers = parse_version_numbers(match.group("numbers"))
    except InvalidVersionFormat as e:
        raise InvalidVersionFormat(text, e.message) from e
    return VersionNode(numbers, stage=stage, build=build)


def parse_version(version_string: str) -> Version:
    """Parse a version string into a Version object.

    Args:
        version_string: A string following the version grammar

    Returns:
        The root Version with its subversions in chain order

    Raises:
        InvalidVersionFormat: If the string does not follow the grammar

    Examples:
        >>> v = parse_version("1.2.0rc5")
        >>> v.numbers, v.stage, v.build
        ((1, 2, 0), <DevelopmentStage.RELEASE_CANDIDATE: ('release-candidate', 'rc')>, 5)

        >>> parse_version("1.2.0-UNIQUE3.2a3").identifiers
        ('UNIQUE',)
    """
    try:
        require_non_empty(version_string, "Version")
    except ValueError as e:
        raise InvalidVersionFormat(str(version_string), str(e)) from e

    text = version_string.strip()
    if not text:
        raise InvalidVersionFormat(version_string, "Version string cannot be empty")

    tokens = split(text, SEGMENT_DELIMITER)
    match = ROOT_SEGMENT_PATTERN.fullmatch(tokens[0])
    if not match:
        message = f"Invalid version input: {text}"
        if _has_alphanumeric_groups(tokens[0]):
            message += f". This string has unexpected alphanumeric characters: {tokens[0]}"
        raise InvalidVersionFormat(text, message)

    root = _build_node(match, default_build=1, text=text)
    subversions: list[Subversion] = []
    # The node that a trailing build number or snapshot marker applies to
    last = root
    last_index = len(tokens) - 1

    for index in range(1, len(tokens)):
        token = tokens[index]
        logger.debug("Parsing version token %d of %r: %r", index, text, token)

        if token == SNAPSHOT_MARKER:
            if index != last_index:
                raise InvalidVersionFormat(
                    text, f"The {SNAPSHOT_MARKER} marker must be at the very end: {text}"
                )
            # "1.2.0b1-SNAPSHOT" reads like a final build, so it is refused
            if not subversions and root.stage.code == _AMBIGUOUS_SNAPSHOT_CODE:
                raise InvalidVersionFormat(
                    text,
                    f"A {SNAPSHOT_MARKER} marker cannot follow a beta build "
                    f"on the root version: {text}",
                )
            last = last.with_snapshot()
            continue

        build_match = FINAL_BUILD_PATTERN.fullmatch(token)
        if build_match:
            remaining = tokens[index + 1 :]
            if remaining and remaining != [SNAPSHOT_MARKER]:
                raise InvalidVersionFormat(
                    text, f"The final build number should be at the very end: {text}"
                )
            if last.stage.has_code:
                raise InvalidVersionFormat(
                    text,
                    "There cannot be both a final build number and a development stage "
                    f"build number on one node: {text}",
                )
            last = last.with_build(_to_int(build_match.group("build"), text))
            if remaining:
                last = last.with_snapshot()
            break

        match = SUBVERSION_SEGMENT_PATTERN.fullmatch(token)
        if not match:
            raise InvalidVersionFormat(text, f"Malformed subversion {token!r} in {text}")

        identifier = match.group("identifier")
        if any(subversion.identifier == identifier for subversion in subversions):
            raise InvalidVersionFormat(
                text, f"Duplicate subversion identifier {identifier!r} in {text}"
            )
        last = _build_node(match, default_build=0, text=text)
        subversions.append(Subversion(identifier, last))

    # The final node may have picked up a build number or snapshot marker
    if subversions:
        subversions[-1] = Subversion(subversions[-1].identifier, last)
    else:
        root = last

    return Version(root, tuple(subversions))


def is_valid_version(version_string: str) -> bool:
    """Check if a string is a valid version.

    Examples:
        >>> is_valid_version("1.2.0-b5-SNAPSHOT")
        True
        >>> is_valid_version("1.2.x")
        False
    """
    try:
        parse_version(version_string)
    except InvalidVersionFormat:
        return False
    return True
