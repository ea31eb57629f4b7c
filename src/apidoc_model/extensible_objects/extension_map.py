"""Insertion-ordered container for vendor extension fields."""

from __future__ import annotations

import copy
from collections.abc import Collection, Iterable, Iterator, Mapping
from enum import Enum
from typing import Any

ExtensionPairs = Mapping[str, Any] | Iterable[tuple[str, Any]]

VENDOR_EXTENSION_PREFIX = "x-"


class ExtensionKeyConflict(ValueError):
    """Raised when an extension key equals a typed field's wire key."""

    def __init__(self, key: str, object_name: str = ""):
        self.key = key
        self.object_name = object_name
        owner = f" of {object_name}" if object_name else ""
        super().__init__(f"Extension key '{key}' collides with a typed field{owner}.")


class ExtensionPolicy(str, Enum):
    """Which unknown wire keys are kept as extensions during deserialization."""

    KEEP_ALL = "keep_all"
    VENDOR_PREFIXED = "vendor_prefixed"

    def admits(self, key: str) -> bool:
        """Return True when the unknown key should be kept."""
        if self is ExtensionPolicy.VENDOR_PREFIXED:
            return key.startswith(VENDOR_EXTENSION_PREFIX)
        return True


class ExtensionMap(Mapping[str, Any]):
    """Read-only ordered mapping of extension keys to generic values.

    Values are deep-copied on the way in, so the map never shares mutable
    state with the caller. Equality is order-sensitive: two maps are equal
    only when they hold the same entries in the same insertion order.
    Comparing against a plain mapping uses that mapping's iteration order.
    Hashing fails when a value is itself unhashable.
    """

    __slots__ = ("_entries",)

    def __init__(self, entries: ExtensionPairs = ()):
        self._entries: dict[str, Any] = {
            key: copy.deepcopy(value) for key, value in dict(entries).items()
        }

    def __getitem__(self, key: str) -> Any:
        return self._entries[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Mapping):
            return list(self._entries.items()) == list(other.items())
        return NotImplemented

    def __hash__(self) -> int:
        return hash(tuple(self._entries.items()))

    def __repr__(self) -> str:
        return f"ExtensionMap({self._entries!r})"

    def merged(self, pairs: ExtensionPairs) -> ExtensionMap:
        """Return a new map with the pairs applied; existing keys keep their position."""
        merged = ExtensionMap()
        merged._entries = dict(self._entries)
        merged._entries.update(ExtensionMap(pairs)._entries)
        return merged

    def first_conflict(self, reserved_keys: Collection[str]) -> str | None:
        """Return the first key that is also a reserved wire key, if any."""
        for key in self._entries:
            if key in reserved_keys:
                return key
        return None
