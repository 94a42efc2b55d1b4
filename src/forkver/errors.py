# SPDX-License-Identifier: MIT
"""Exceptions raised while parsing, building and comparing versions."""

from __future__ import annotations


class VersionError(Exception):
    """Base class for all version errors."""

    pass


class InvalidVersionFormat(VersionError):
    """Raised when a version string does not follow the version grammar."""

    def __init__(self, version: str, message: str = ""):
        self.version = version
        self.message = message or f"Invalid version input: {version}"
        super().__init__(self.message)


class NestedSubversionNotAllowed(VersionError):
    """Raised when a subversion would get a subversion of its own."""

    def __init__(self, message: str = "A subversion cannot have a subversion of its own"):
        self.message = message
        super().__init__(message)


class ForkMismatch(VersionError):
    """Raised when ordering two versions that belong to different forks."""

    def __init__(self, left: str, right: str):
        self.left = left
        self.right = right
        self.message = f'The forks "{left}" and "{right}" are not the same'
        super().__init__(self.message)
