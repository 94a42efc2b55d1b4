# SPDX-License-Identifier: MIT
"""In-memory model of a version and its chain of named subversions.

A version is a root node followed by an ordered, flat list of subversions:

    1.2.0rc5-UNIQUE3.2-FORK1.0b4
    ^^^^^^^^ ^^^^^^^^^ ^^^^^^^^^
    root     subversion subversion

Subversions can only hold a plain :class:`VersionNode`, so a subversion can
never carry subversions of its own. All objects are immutable; the
``with_*`` and ``*_subversion`` methods return updated copies.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field, replace
from typing import Iterable, Optional, Union

from ._util import require_non_negative, require_non_negative_all
from .errors import NestedSubversionNotAllowed
from .render import render, render_plain
from .stage import DevelopmentStage

IDENTIFIER_PATTERN = re.compile(r"^[A-Z]+$")


@dataclass(frozen=True, slots=True)
class VersionNode:
    """A single version number with its stage, build and snapshot flag.

    Attributes:
        numbers: Version numbers, e.g. (1, 2, 0) for 1.2.0
        stage: Development stage (default STABLE)
        build: Build number (default 1)
        snapshot: Whether this is an in-progress snapshot build
    """

    numbers: tuple[int, ...]
    stage: DevelopmentStage = DevelopmentStage.STABLE
    build: int = 1
    snapshot: bool = False

    def __post_init__(self) -> None:
        object.__setattr__(self, "numbers", require_non_negative_all(self.numbers, "version numbers"))
        require_non_negative(self.build, "build")
        if not isinstance(self.stage, DevelopmentStage):
            raise ValueError(f"stage must be a DevelopmentStage, got {self.stage!r}")

    @property
    def major(self) -> int:
        """Return the first version number."""
        return self.numbers[0]

    @property
    def minor(self) -> int:
        """Return the second version number, or 0 if there is none."""
        return self.numbers[1] if len(self.numbers) > 1 else 0

    @property
    def plain(self) -> str:
        """Return the plain ``v1.2.0`` form of the numbers."""
        return render_plain(self)

    def with_stage(self, stage: DevelopmentStage) -> "VersionNode":
        return replace(self, stage=stage)

    def with_build(self, build: int) -> "VersionNode":
        return replace(self, build=build)

    def with_snapshot(self, snapshot: bool = True) -> "VersionNode":
        return replace(self, snapshot=snapshot)


@dataclass(frozen=True, slots=True)
class Subversion:
    """A named subversion chained onto a root version.

    A node without a stage code and the root's default build of 1 is stored
    with build 0, the default a parsed subversion gets.
    """

    identifier: str
    node: VersionNode

    def __post_init__(self) -> None:
        if not isinstance(self.identifier, str) or not IDENTIFIER_PATTERN.fullmatch(self.identifier):
            raise ValueError(
                f"Subversion identifier must be one or more uppercase letters, got {self.identifier!r}"
            )
        if not isinstance(self.node, VersionNode):
            raise ValueError(f"Subversion node must be a VersionNode, got {type(self.node).__name__}")
        # A subversion without a stage suffix has build 0, as when parsed
        if not self.node.stage.has_code and self.node.build == 1:
            object.__setattr__(self, "node", self.node.with_build(0))


SubversionChild = Union[VersionNode, "Version"]


@dataclass(frozen=True, slots=True)
class Version:
    """A root version plus its ordered subversions.

    Attributes:
        node: The root version node
        subversions: Subversions in chain order; the order defines the fork
    """

    node: VersionNode
    subversions: tuple[Subversion, ...] = field(default=())

    def __post_init__(self) -> None:
        subversions = tuple(self.subversions)
        seen: set[str] = set()
        for subversion in subversions:
            if subversion.identifier in seen:
                raise ValueError(f"Duplicate subversion identifier: {subversion.identifier}")
            seen.add(subversion.identifier)
        object.__setattr__(self, "subversions", subversions)

    @classmethod
    def create(
        cls,
        *numbers: int,
        stage: DevelopmentStage = DevelopmentStage.STABLE,
        build: int = 1,
        snapshot: bool = False,
    ) -> "Version":
        """Create a root version without subversions.

        Examples:
            >>> str(Version.create(1, 2, 0, stage=DevelopmentStage.BETA, build=3))
            'v1.2.0b3'
        """
        return cls(VersionNode(numbers, stage=stage, build=build, snapshot=snapshot))

    def __str__(self) -> str:
        """Return the full rendering of the version."""
        return render(self)

    # Root shortcuts

    @property
    def numbers(self) -> tuple[int, ...]:
        return self.node.numbers

    @property
    def stage(self) -> DevelopmentStage:
        return self.node.stage

    @property
    def build(self) -> int:
        return self.node.build

    @property
    def is_snapshot(self) -> bool:
        """Return True if the root node is marked as a snapshot."""
        return self.node.snapshot

    @property
    def major(self) -> int:
        return self.node.major

    @property
    def minor(self) -> int:
        return self.node.minor

    @property
    def plain(self) -> str:
        """Return the plain form of the root numbers."""
        return render(self, full=False)

    @property
    def is_forked(self) -> bool:
        """Return True if this version has at least one subversion."""
        return bool(self.subversions)

    @property
    def identifiers(self) -> tuple[str, ...]:
        """Return the subversion identifiers in chain order."""
        return tuple(subversion.identifier for subversion in self.subversions)

    @property
    def last_node(self) -> VersionNode:
        """Return the final node of the chain (last subversion, else the root)."""
        if self.subversions:
            return self.subversions[-1].node
        return self.node

    def with_stage(self, stage: DevelopmentStage) -> "Version":
        return replace(self, node=self.node.with_stage(stage))

    def with_build(self, build: int) -> "Version":
        return replace(self, node=self.node.with_build(build))

    def with_snapshot(self, snapshot: bool = True) -> "Version":
        return replace(self, node=self.node.with_snapshot(snapshot))

    # Subversions

    def _find(self, identifier: str) -> Optional[int]:
        for index, subversion in enumerate(self.subversions):
            if subversion.identifier == identifier:
                return index
        return None

    def get_subversion(self, identifier: str) -> Optional[VersionNode]:
        """Return the node of the named subversion, or None if absent."""
        index = self._find(identifier)
        return None if index is None else self.subversions[index].node

    def has_subversion(self, identifier: str) -> bool:
        return self._find(identifier) is not None

    def add_subversion(self, identifier: str, child: SubversionChild) -> "Version":
        """Return a copy with ``child`` appended as subversion ``identifier``.

        Raises:
            NestedSubversionNotAllowed: If ``child`` has subversions of its own
            ValueError: If ``identifier`` is invalid or already present
        """
        if self._find(identifier) is not None:
            raise ValueError(f"Subversion {identifier} already exists in {self}")
        entry = Subversion(identifier, _as_leaf(child))
        return replace(self, subversions=self.subversions + (entry,))

    def replace_subversion(self, identifier: str, child: SubversionChild) -> "Version":
        """Return a copy with the named subversion's node swapped for ``child``.

        The subversion keeps its position in the chain.

        Raises:
            KeyError: If no subversion has that identifier
        """
        index = self._find(identifier)
        if index is None:
            raise KeyError(identifier)
        subversions = list(self.subversions)
        subversions[index] = Subversion(identifier, _as_leaf(child))
        return replace(self, subversions=tuple(subversions))

    def remove_subversion(self, identifier: str) -> "Version":
        """Return a copy without the named subversion.

        Raises:
            KeyError: If no subversion has that identifier
        """
        index = self._find(identifier)
        if index is None:
            raise KeyError(identifier)
        return replace(
            self, subversions=self.subversions[:index] + self.subversions[index + 1 :]
        )

    def with_subversions(self, subversions: Iterable[Subversion]) -> "Version":
        return replace(self, subversions=tuple(subversions))


def _as_leaf(child: SubversionChild) -> VersionNode:
    if isinstance(child, Version):
        if child.subversions:
            raise NestedSubversionNotAllowed()
        return child.node
    if isinstance(child, VersionNode):
        return child
    raise ValueError(f"Subversion must be a Version or VersionNode, got {type(child).__name__}")
