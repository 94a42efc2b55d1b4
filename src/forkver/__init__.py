# SPDX-License-Identifier: MIT
"""Parsing and comparison of versions with chained subversions.

A version has a root number with an optional development stage and build,
followed by any number of named subversions and an optional snapshot marker,
e.g. ``1.2.0rc5-UNIQUE3.2b102-SNAPSHOT``.

Example:
    >>> from forkver import parse_version, is_same_fork, is_less_than
    >>>
    >>> version = parse_version("1.2.0-UNIQUE3.2a3")
    >>> version.numbers
    (1, 2, 0)
    >>> version.get_subversion("UNIQUE").build
    3
    >>>
    >>> is_same_fork("1.2.0-UNIQUE3.2", "1.2.0-UNIQUE3.3")
    True
    >>> is_less_than("1.2.0-UNIQUE3.2", "1.2.0-UNIQUE3.3")
    True
"""

__version__ = "0.1.0"

from .stage import DevelopmentStage
from .errors import (
    VersionError,
    InvalidVersionFormat,
    NestedSubversionNotAllowed,
    ForkMismatch,
)
from .model import (
    Version,
    VersionNode,
    Subversion,
)
from .parser import (
    parse_version,
    parse_version_numbers,
    is_valid_version,
    ROOT_SEGMENT_PATTERN,
    SUBVERSION_SEGMENT_PATTERN,
    FINAL_BUILD_PATTERN,
)
from .render import (
    render,
    render_plain,
    SNAPSHOT_MARKER,
)
from .compare import (
    compare_numbers,
    compare_versions,
    is_same_fork,
    matches,
    is_less_than,
    is_at_most,
    is_greater_than,
    is_at_least,
    version_key,
)

__all__ = [
    # Model
    "DevelopmentStage",
    "Version",
    "VersionNode",
    "Subversion",
    # Errors
    "VersionError",
    "InvalidVersionFormat",
    "NestedSubversionNotAllowed",
    "ForkMismatch",
    # Parsing
    "parse_version",
    "parse_version_numbers",
    "is_valid_version",
    "ROOT_SEGMENT_PATTERN",
    "SUBVERSION_SEGMENT_PATTERN",
    "FINAL_BUILD_PATTERN",
    # Rendering
    "render",
    "render_plain",
    "SNAPSHOT_MARKER",
    # Comparison
    "compare_numbers",
    "compare_versions",
    "is_same_fork",
    "matches",
    "is_less_than",
    "is_at_most",
    "is_greater_than",
    "is_at_least",
    "version_key",
]
