# SPDX-License-Identifier: MIT
"""Version comparison and fork identity.

Two versions belong to the same fork when their roots match (numbers, build
and stage), they carry the same subversion identifiers in the same order, and
every subversion except the last has matching numbers. Ordering is only
defined inside a fork: it is decided by the last node of the chain.

Node ordering compares version numbers element by element, then the number
of elements. A deep comparison of equally long numbers then compares the
build number and, only if the builds are equal, the development stage.
"""

from __future__ import annotations

from typing import Union

from .errors import ForkMismatch
from .model import Version, VersionNode
from .parser import parse_version

VersionLike = Union[str, Version]


def _as_version(version: VersionLike) -> Version:
    return parse_version(version) if isinstance(version, str) else version


def _as_node(version: Union[VersionLike, VersionNode]) -> VersionNode:
    if isinstance(version, VersionNode):
        return version
    return _as_version(version).node


def _sign(left: int, right: int) -> int:
    return (left > right) - (left < right)


def compare_numbers(
    version1: Union[VersionLike, VersionNode],
    version2: Union[VersionLike, VersionNode],
    deep: bool = False,
) -> int:
    """Compare the root nodes of two versions, ignoring subversions.

    Args:
        version1: First version (string, Version or VersionNode)
        version2: Second version (string, Version or VersionNode)
        deep: Also compare build numbers and development stages

    Returns:
        -1 if version1 < version2
        0 if version1 == version2
        1 if version1 > version2

    Note:
        Build numbers are compared before development stages, so
        ``1.0a5`` compares greater than ``1.0b2``.

    Examples:
        >>> compare_numbers("1.2", "1.2.0")
        -1
        >>> compare_numbers("1.2.0rc2", "1.2.0-b5", deep=True)
        -1
    """
    node1 = _as_node(version1)
    node2 = _as_node(version2)

    for number1, number2 in zip(node1.numbers, node2.numbers):
        if number1 != number2:
            return _sign(number1, number2)

    if not deep or len(node1.numbers) != len(node2.numbers):
        return _sign(len(node1.numbers), len(node2.numbers))
    if node1.build != node2.build:
        return _sign(node1.build, node2.build)
    return _sign(node1.stage.rank, node2.stage.rank)


def is_same_fork(version1: VersionLike, version2: VersionLike) -> bool:
    """Return True if both versions belong to the same fork.

    Snapshot flags are ignored. The contents of the last subversion are not
    compared, only its identifier.

    Examples:
        >>> is_same_fork("1.2.0-UNIQUE3.2", "1.2.0-UNIQUE4.0")
        True
        >>> is_same_fork("1.2.0-UNIQUE3.2", "1.2.0-OTHER3.2")
        False
    """
    v1 = _as_version(version1)
    v2 = _as_version(version2)

    if compare_numbers(v1.node, v2.node, deep=True) != 0:
        return False
    if len(v1.subversions) != len(v2.subversions):
        return False

    last = len(v1.subversions) - 1
    for index, (sub1, sub2) in enumerate(zip(v1.subversions, v2.subversions)):
        if sub1.identifier != sub2.identifier:
            return False
        if index < last and compare_numbers(sub1.node, sub2.node) != 0:
            return False
    return True


def matches(
    version1: VersionLike,
    version2: VersionLike,
    match_build_and_stage: bool = True,
    full_match: bool = True,
) -> bool:
    """Return True if two versions match.

    Args:
        version1: First version
        version2: Second version
        match_build_and_stage: Also match build numbers and development stages
        full_match: Require the same fork and compare the last subversions.
            When False, subversions are ignored and only the roots compared.

    Examples:
        >>> matches("1.2.0", "v1.2.0")
        True
        >>> matches("1.2.0-b5", "1.2.0-b6", match_build_and_stage=False)
        True
    """
    v1 = _as_version(version1)
    v2 = _as_version(version2)

    if full_match and (v1.subversions or v2.subversions):
        if not is_same_fork(v1, v2):
            return False
        return compare_numbers(v1.last_node, v2.last_node, match_build_and_stage) == 0
    return compare_numbers(v1.node, v2.node, match_build_and_stage) == 0


def compare_versions(
    version1: VersionLike, version2: VersionLike, full_match: bool = True
) -> int:
    """Compare two versions of the same fork.

    Args:
        version1: First version
        version2: Second version
        full_match: Require the same fork and compare the last subversions.
            When False, subversions are ignored and only the roots compared.

    Returns:
        -1, 0 or 1 as for :func:`compare_numbers` with ``deep=True``

    Raises:
        ForkMismatch: If ``full_match`` is set and the forks differ
        InvalidVersionFormat: If either version string is invalid

    Examples:
        >>> compare_versions("1.2.0-UNIQUE3.2", "1.2.0-UNIQUE3.3")
        -1
    """
    v1 = _as_version(version1)
    v2 = _as_version(version2)

    if full_match and (v1.subversions or v2.subversions):
        if not is_same_fork(v1, v2):
            raise ForkMismatch(str(v1), str(v2))
        return compare_numbers(v1.last_node, v2.last_node, deep=True)
    return compare_numbers(v1.node, v2.node, deep=True)


def is_less_than(version1: VersionLike, version2: VersionLike, full_match: bool = True) -> bool:
    """Return True if version1 < version2. Raises ForkMismatch across forks."""
    return compare_versions(version1, version2, full_match) < 0


def is_at_most(version1: VersionLike, version2: VersionLike, full_match: bool = True) -> bool:
    """Return True if version1 <= version2. Raises ForkMismatch across forks."""
    return compare_versions(version1, version2, full_match) <= 0


def is_greater_than(version1: VersionLike, version2: VersionLike, full_match: bool = True) -> bool:
    """Return True if version1 > version2. Raises ForkMismatch across forks."""
    return compare_versions(version1, version2, full_match) > 0


def is_at_least(version1: VersionLike, version2: VersionLike, full_match: bool = True) -> bool:
    """Return True if version1 >= version2. Raises ForkMismatch across forks."""
    return compare_versions(version1, version2, full_match) >= 0


def _node_key(node: VersionNode) -> tuple:
    return (node.numbers, node.build, node.stage.rank)


def version_key(version: VersionLike) -> tuple:
    """Return a sort key for a version.

    Within one fork the key orders versions the same way as
    :func:`compare_versions`. Versions of different forks are grouped by
    root and subversion identifiers.

    Examples:
        >>> sorted(["1.2.0-b5", "1.1.0", "1.2.0rc2"], key=version_key)
        ['1.1.0', '1.2.0rc2', '1.2.0-b5']
    """
    v = _as_version(version)
    if not v.subversions:
        return (_node_key(v.node), (), (), ())

    middle = tuple(subversion.node.numbers for subversion in v.subversions[:-1])
    return (_node_key(v.node), v.identifiers, middle, _node_key(v.last_node))
