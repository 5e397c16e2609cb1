"""Identifier type and the identifier-keyed store shared by the file and asset stores."""

from dataclasses import dataclass
from typing import Dict, Generic, Iterator, Optional, Tuple, Type, TypeVar


@dataclass(frozen=True, order=True)
class StoreId:
    """
    Opaque handle handed out by a store.

    Wraps a per-store counter value. Ids of different store types never
    compare equal, even when they wrap the same value.
    """
    value: int

    def __str__(self) -> str:
        return str(self.value)


IdT = TypeVar("IdT", bound=StoreId)
ItemT = TypeVar("ItemT")


class IndexedStore(Generic[IdT, ItemT]):
    """
    In-memory mapping of store ids to records with a monotonic id counter.

    Ids are allocated from 0 upwards and are never handed out twice, even
    after the record they named has been removed.
    """

    id_type: Type[IdT]

    def __init__(self):
        self._items: Dict[IdT, ItemT] = {}
        self._next_id: int = 0

    def _allocate_id(self) -> IdT:
        new_id = self.id_type(self._next_id)
        self._next_id += 1
        return new_id

    def _insert(self, item_id: IdT, item: ItemT) -> None:
        self._items[item_id] = item

    def get(self, item_id: IdT) -> Optional[ItemT]:
        """
        Look up a record by id.

        Args:
            item_id: Id previously handed out by this store

        Returns:
            The record, or None if it does not exist (or no longer exists)
        """
        return self._items.get(item_id)

    def count(self) -> int:
        """Number of live records."""
        return len(self._items)

    def items(self) -> Iterator[Tuple[IdT, ItemT]]:
        """
        Iterate over (id, record) pairs.

        The order is not meaningful. The pairs are snapshotted, so the store
        may be modified while iterating.
        """
        return iter(list(self._items.items()))

    def __len__(self) -> int:
        return len(self._items)

    def __contains__(self, item_id: object) -> bool:
        return item_id in self._items
