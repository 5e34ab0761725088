"""An ordered, indexable collection of describable museum items."""

from __future__ import annotations

from typing import Generic, Iterator, Protocol, TypeVar


class _Describable(Protocol):
    def describe(self) -> str: ...


T = TypeVar("T", bound=_Describable)


class MuseumCollection(Generic[T]):
    """Items kept in the order they were added, numbered from zero."""

    def __init__(self) -> None:
        self._items: list[T] = []

    def add_item(self, item: T) -> None:
        """Append an item to the collection."""
        self._items.append(item)

    def describe(self) -> str:
        """A count of the items followed by each item's description."""
        parts = [f"Total Items: {len(self._items)}"]
        for number, item in enumerate(self._items):
            parts.append(f"\nItem #{number}:")
            parts.append(item.describe())
        return "\n".join(parts)

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[T]:
        return iter(self._items)

    def __getitem__(self, index: int) -> T:
        if not 0 <= index < len(self._items):
            raise IndexError(f"no item at index {index}")
        return self._items[index]