"""Entry records, name matching and verdict types for dirdiff."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Generic, Iterable, Protocol, TypeVar, Union


@dataclass(frozen=True)
class DirectoryEntry:
    """A subdirectory found while listing a directory."""

    name: str
    path: Path


@dataclass(frozen=True)
class FileEntry:
    """A regular file found while listing a directory."""

    name: str
    path: Path
    size: int


class _Named(Protocol):
    name: str


E = TypeVar("E", bound=_Named)


@dataclass(frozen=True)
class MatchSet(Generic[E]):
    """Result of matching two entry collections by name.

    ``common`` pairs follow the left side's order. ``left_only`` and
    ``right_only`` follow their own side's order.
    """

    common: tuple[tuple[E, E], ...]
    left_only: tuple[E, ...]
    right_only: tuple[E, ...]


def match_entries(left: Iterable[E], right: Iterable[E]) -> MatchSet[E]:
    """Match ``left`` against ``right`` by exact, case-sensitive name."""
    left = list(left)
    right = list(right)
    right_by_name = {entry.name: entry for entry in right}
    left_names = {entry.name for entry in left}

    common: list[tuple[E, E]] = []
    left_only: list[E] = []
    for entry in left:
        other = right_by_name.get(entry.name)
        if other is None:
            left_only.append(entry)
        else:
            common.append((entry, other))

    right_only = [entry for entry in right if entry.name not in left_names]
    return MatchSet(tuple(common), tuple(left_only), tuple(right_only))


@dataclass(frozen=True)
class LeftOnly:
    path: Path


@dataclass(frozen=True)
class RightOnly:
    path: Path


@dataclass(frozen=True)
class Different:
    left: Path
    right: Path


Verdict = Union[LeftOnly, RightOnly, Different]
