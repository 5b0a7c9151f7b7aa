from __future__ import annotations

from typing import Iterator, List, Protocol, Set

from guidmanifest.model.guid import GUID


class GuidCollection(Protocol):
    def insert(self, guid: GUID) -> None: ...

    def __iter__(self) -> Iterator[GUID]: ...

    def __len__(self) -> int: ...


class SortedUniqueCollection:
    """Distinct GUIDs, iterated in ascending order."""

    def __init__(self) -> None:
        self._items: Set[GUID] = set()

    def insert(self, guid: GUID) -> None:
        self._items.add(guid)

    def __iter__(self) -> Iterator[GUID]:
        return iter(sorted(self._items))

    def __len__(self) -> int:
        return len(self._items)


class OrderedCollection:
    """Every GUID in discovery order, repeats included."""

    def __init__(self) -> None:
        self._items: List[GUID] = []

    def insert(self, guid: GUID) -> None:
        self._items.append(guid)

    def __iter__(self) -> Iterator[GUID]:
        return iter(self._items)

    def __len__(self) -> int:
        return len(self._items)


def make_collection(non_sorted: bool = False) -> GuidCollection:
    if non_sorted:
        return OrderedCollection()
    return SortedUniqueCollection()
