# SPDX-License-Identifier: MIT
"""Development stages and their short codes.

Ordering follows declaration order:
pre-alpha < alpha < beta < release candidate < stable < end of life
"""

from __future__ import annotations

from enum import Enum
from typing import Optional


class DevelopmentStage(Enum):
    """One of the stages of software development."""

    PRE_ALPHA = ("pre-alpha", "a")
    ALPHA = ("alpha", "a")
    BETA = ("beta", "b")
    RELEASE_CANDIDATE = ("release-candidate", "rc")
    STABLE = ("stable", None)
    END_OF_LIFE = ("end-of-life", None)

    def __init__(self, label: str, code: Optional[str]) -> None:
        self.label = label
        self.code = code

    @property
    def has_code(self) -> bool:
        """Return True for stages written inline as ``a``, ``b`` or ``rc``."""
        return self.code is not None

    @property
    def rank(self) -> int:
        """Return the position of this stage in the release cycle."""
        return _RANKS[self]

    @classmethod
    def from_code(cls, code: Optional[str]) -> Optional["DevelopmentStage"]:
        """Return the stage for an inline short code.

        ``"a"`` always maps to ALPHA, never PRE_ALPHA.

        Examples:
            >>> DevelopmentStage.from_code("rc")
            <DevelopmentStage.RELEASE_CANDIDATE: ('release-candidate', 'rc')>
            >>> DevelopmentStage.from_code("x") is None
            True
        """
        return _BY_CODE.get(code) if code is not None else None

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, DevelopmentStage):
            return NotImplemented
        return self.rank < other.rank

    def __le__(self, other: object) -> bool:
        if not isinstance(other, DevelopmentStage):
            return NotImplemented
        return self.rank <= other.rank

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, DevelopmentStage):
            return NotImplemented
        return self.rank > other.rank

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, DevelopmentStage):
            return NotImplemented
        return self.rank >= other.rank


_RANKS = {stage: index for index, stage in enumerate(DevelopmentStage)}

_BY_CODE = {
    "a": DevelopmentStage.ALPHA,
    "b": DevelopmentStage.BETA,
    "rc": DevelopmentStage.RELEASE_CANDIDATE,
}
