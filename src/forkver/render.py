# SPDX-License-Identifier: MIT
"""Canonical string rendering of versions.

Plain form:  v1.2.0
Full form:   v1.2.0rc5-UNIQUE3.2b102-SNAPSHOT
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .model import Version, VersionNode

# Marks the final node of a version chain as an in-progress build
SNAPSHOT_MARKER = "SNAPSHOT"


def render_plain(node: "VersionNode", prefix: str = "v") -> str:
    """Return ``prefix`` followed by the dot-joined version numbers.

    Examples:
        >>> render_plain(VersionNode((1, 2, 0)))
        'v1.2.0'
        >>> render_plain(VersionNode((3, 2)), prefix="UNIQUE")
        'UNIQUE3.2'
    """
    return prefix + ".".join(str(number) for number in node.numbers)


def _render_node(node: "VersionNode", prefix: str, final_build: bool) -> str:
    output = render_plain(node, prefix)
    if node.stage.has_code:
        output += f"{node.stage.code}{node.build}"
    elif final_build and node.build > 1:
        output += f"-b{node.build}"
    return output


def render(version: "Version", full: bool = True) -> str:
    """Render a version as a string.

    Args:
        version: The version to render
        full: When False only the root's plain number is returned. When True
            the development stage, build number, every subversion and the
            snapshot marker are included.

    Returns:
        The rendered version string

    Note:
        A stable root only shows a ``-b<build>`` suffix when it has no
        subversions, so that build is lost for forked versions. A stable
        subversion with a build above 1 always shows ``-b<build>``, even in
        the middle of the chain (``v1-A1-b5-B2``). The parser only accepts a
        final build at the end, so such a string does not parse back.
    """
    if not full:
        return render_plain(version.node)

    output = _render_node(version.node, "v", final_build=not version.subversions)
    for subversion in version.subversions:
        output += "-" + _render_node(subversion.node, subversion.identifier, final_build=True)

    if version.last_node.snapshot:
        output += f"-{SNAPSHOT_MARKER}"
    return output
