"""Registry-driven matching of unit names and prefixes.

Candidates are tried as an ordered choice, longest first: the first candidate
that is a prefix of the remaining input is taken and shorter candidates are
never considered afterwards. A shorter name that is a textual prefix of a
longer one must therefore come later in the list, or the longer name could
never match.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Optional, Protocol, Tuple

from .source import Source
from .tree import DIMENSIONLESS_NAME


class UnitNameSource(Protocol):
    """Read-only queries the grammar needs from a unit registry."""

    def names_sorted_longest_first(self) -> Iterable[str]:
        ...

    def prefixes_sorted_longest_first(self) -> Iterable[str]:
        ...


def _longest_first(values: Iterable[str]) -> Tuple[str, ...]:
    # stable, so equal-length entries keep the registry's order
    return tuple(sorted(values, key=len, reverse=True))


@dataclass(frozen=True)
class RegistrySnapshot:
    """Unit names and prefixes captured for the duration of one parse."""

    names: Tuple[str, ...]
    prefixes: Tuple[str, ...]

    @classmethod
    def from_registry(cls, registry: UnitNameSource) -> "RegistrySnapshot":
        return cls(
            names=_longest_first(registry.names_sorted_longest_first()),
            prefixes=_longest_first(registry.prefixes_sorted_longest_first()),
        )

    @classmethod
    def of(cls, names: Iterable[str], prefixes: Iterable[str] = ()) -> "RegistrySnapshot":
        return cls(names=_longest_first(names), prefixes=_longest_first(prefixes))


def candidates_for(sorted_candidates: Tuple[str, ...], remaining: int) -> Tuple[str, ...]:
    """Return candidates no longer than ``remaining``, order preserved.

    Falls back to the dimensionless name ``"1"`` when nothing fits.
    """

    fitting = tuple(c for c in sorted_candidates if c and len(c) <= remaining)
    return fitting or (DIMENSIONLESS_NAME,)


def _match_first(source: Source, candidates: Tuple[str, ...], description: str) -> Optional[str]:
    for candidate in candidates:
        if source.text.startswith(candidate, source.pos):
            source.pos += len(candidate)
            return candidate
    source.expect(description)
    return None


def match_name(source: Source, snapshot: RegistrySnapshot) -> Optional[str]:
    return _match_first(source, candidates_for(snapshot.names, source.chars_left), "unit name")


def match_prefix(source: Source, snapshot: RegistrySnapshot) -> Optional[str]:
    return _match_first(source, candidates_for(snapshot.prefixes, source.chars_left), "unit prefix")


__all__ = [
    "RegistrySnapshot",
    "UnitNameSource",
    "candidates_for",
    "match_name",
    "match_prefix",
]
