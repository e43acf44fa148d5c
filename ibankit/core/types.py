"""Core types: FrozenMap, IdentifierRange."""

from __future__ import annotations

from bisect import bisect_left
from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field
from typing import Any, ClassVar, final

from ibankit.core.result import Err, Ok


@final
@dataclass(frozen=True, slots=True)
class FrozenMap[K, V]:
    """Immutable sorted mapping.

    Entries are stored as a sorted tuple of (key, value) pairs, which gives
    deterministic iteration and canonical serialization. Lookups bisect the
    sorted keys.
    """

    _entries: tuple[tuple[K, V], ...]
    _keys: tuple[K, ...] = field(init=False, repr=False, compare=False)

    EMPTY: ClassVar[FrozenMap[Any, Any]]  # Assigned after class definition

    def __post_init__(self) -> None:
        object.__setattr__(self, "_keys", tuple(k for k, _ in self._entries))

    @staticmethod
    def create(items: dict[K, V] | Iterable[tuple[K, V]]) -> Ok[FrozenMap[K, V]] | Err[str]:
        """Create a FrozenMap. Duplicate keys: last value wins."""
        d = items if isinstance(items, dict) else dict(items)
        try:
            entries = tuple(sorted(d.items(), key=lambda kv: kv[0]))
        except TypeError as e:
            return Err(f"FrozenMap keys must be comparable: {e}")
        return Ok(FrozenMap(_entries=entries))

    def _index(self, key: object) -> int | None:
        keys = self._keys
        try:
            i = bisect_left(keys, key)
        except TypeError:
            return None
        if i < len(keys) and keys[i] == key:
            return i
        return None

    def get(self, key: K, default: V | None = None) -> V | None:
        i = self._index(key)
        return default if i is None else self._entries[i][1]

    def __getitem__(self, key: K) -> V:
        i = self._index(key)
        if i is None:
            raise KeyError(key)
        return self._entries[i][1]

    def __contains__(self, key: object) -> bool:
        return self._index(key) is not None

    def __iter__(self) -> Iterator[K]:
        return (k for k, _ in self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def items(self) -> tuple[tuple[K, V], ...]:
        return self._entries

    def to_dict(self) -> dict[K, V]:
        """Convert to a regular dict (for serialization boundaries)."""
        return dict(self._entries)


FrozenMap.EMPTY = FrozenMap(_entries=())


@final
@dataclass(frozen=True, slots=True)
class IdentifierRange:
    """Inclusive character offsets of a sub-field, e.g. the bank code."""

    start: int
    end: int

    def __post_init__(self) -> None:
        if self.start < 0 or self.end < self.start:
            raise TypeError(
                f"IdentifierRange requires 0 <= start <= end, got {self.start}-{self.end}"
            )

    @staticmethod
    def parse(raw: str) -> Ok[IdentifierRange] | Err[str]:
        """Parse the registry notation "start-end"."""
        start, sep, end = raw.partition("-")
        if not sep or not start.isdigit() or not end.isdigit():
            return Err(f"IdentifierRange must look like 'start-end', got '{raw}'")
        if int(end) < int(start):
            return Err(f"IdentifierRange end before start: '{raw}'")
        return Ok(IdentifierRange(start=int(start), end=int(end)))

    def slice(self, text: str) -> str:
        return text[self.start : self.end + 1]
