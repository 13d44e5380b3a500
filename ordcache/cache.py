"""Bounded least-recently-used cache with explicit recency tracking.

Entries live in a doubly-linked list between two sentinel nodes, indexed by a
dict from key to node. The node right after the head sentinel is the
least-recently-used entry; the node right before the tail sentinel is the
most-recently-used one. ``get`` and ``put`` re-link the touched node to the
tail, and ``put`` evicts the head node once the size exceeds capacity.

The cache does no locking. Owners sharing an instance across threads must
serialize every ``get``/``put`` themselves, since both mutate the order.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable, Dict, Generic, Hashable, Iterator, List, Optional, Tuple, TypeVar

from .constants import DEFAULT_CAPACITY
from .errors import InvalidCapacityError

logger = logging.getLogger(__name__)

K = TypeVar("K", bound=Hashable)
V = TypeVar("V")


@dataclass
class CacheStats:
    """Counters for lookups served by ``get`` and entries dropped by eviction."""

    hits: int = 0
    misses: int = 0
    evictions: int = 0

    @property
    def requests(self) -> int:
        return self.hits + self.misses

    @property
    def hit_rate(self) -> float:
        if self.requests == 0:
            return 0.0
        return self.hits / self.requests


class _Node:
    __slots__ = ("key", "value", "prev", "next")

    def __init__(self, key=None, value=None):
        self.key = key
        self.value = value
        self.prev: Optional[_Node] = None
        self.next: Optional[_Node] = None


class BoundedOrderedCache(Generic[K, V]):
    """Fixed-capacity key/value store that evicts the least-recently-used entry.

    Args:
        capacity: Maximum number of entries; must be a positive int.
        on_evict: Optional callable ``(key, value)`` invoked once for every
            entry removed to satisfy the capacity bound.

    Raises:
        InvalidCapacityError: If ``capacity`` is not a positive int.
    """

    def __init__(
        self,
        capacity: int = DEFAULT_CAPACITY,
        on_evict: Optional[Callable[[K, V], None]] = None,
    ):
        if isinstance(capacity, bool) or not isinstance(capacity, int):
            raise InvalidCapacityError(f"capacity must be an int, got {type(capacity).__name__}")
        if capacity <= 0:
            raise InvalidCapacityError(f"capacity must be > 0, got {capacity}")
        self._capacity = capacity
        self._on_evict = on_evict
        self._index: Dict[K, _Node] = {}
        self._head = _Node()
        self._tail = _Node()
        self._head.next = self._tail
        self._tail.prev = self._head
        self.stats = CacheStats()

    @property
    def capacity(self) -> int:
        return self._capacity

    # ============== LINKED LIST ==============

    def _unlink(self, node: _Node) -> None:
        node.prev.next = node.next
        node.next.prev = node.prev
        node.prev = node.next = None

    def _append(self, node: _Node) -> None:
        last = self._tail.prev
        last.next = node
        node.prev = last
        node.next = self._tail
        self._tail.prev = node

    def _promote(self, node: _Node) -> None:
        if node.next is self._tail:
            return
        self._unlink(node)
        self._append(node)

    def _evict_oldest(self) -> None:
        oldest = self._head.next
        self._unlink(oldest)
        del self._index[oldest.key]
        self.stats.evictions += 1
        if logger.isEnabledFor(logging.DEBUG):
            logger.debug(f"Evicted key {oldest.key!r} (capacity {self._capacity})")
        if self._on_evict is not None:
            self._on_evict(oldest.key, oldest.value)

    # ============== PUBLIC API ==============

    def put(self, key: K, value: V) -> None:
        """Insert or update ``key`` and mark it most-recently-used.

        Updating an existing key never evicts. Inserting a new key into a full
        cache evicts exactly one entry, the least-recently-used one.
        """
        node = self._index.get(key)
        if node is not None:
            node.value = value
            self._promote(node)
            return

        node = _Node(key, value)
        self._index[key] = node
        self._append(node)
        if len(self._index) > self._capacity:
            self._evict_oldest()

    def get(self, key: K, default: Optional[V] = None) -> Optional[V]:
        """Return the value for ``key`` and promote it, or ``default`` if absent.

        A miss leaves the cache untouched apart from the miss counter.
        """
        node = self._index.get(key)
        if node is None:
            self.stats.misses += 1
            return default
        self.stats.hits += 1
        self._promote(node)
        return node.value

    def peek(self, key: K, default: Optional[V] = None) -> Optional[V]:
        """Return the value for ``key`` without touching recency or stats."""
        node = self._index.get(key)
        if node is None:
            return default
        return node.value

    def pop(self, key: K, default: Optional[V] = None) -> Optional[V]:
        """Remove ``key`` and return its value, or ``default`` if absent."""
        node = self._index.pop(key, None)
        if node is None:
            return default
        self._unlink(node)
        return node.value

    def size(self) -> int:
        return len(self._index)

    def clear(self) -> None:
        """Drop every entry. Statistics are kept; see ``reset_stats``."""
        self._index.clear()
        self._head.next = self._tail
        self._tail.prev = self._head

    def reset_stats(self) -> None:
        self.stats = CacheStats()

    def _iter_nodes(self) -> Iterator[_Node]:
        node = self._head.next
        while node is not self._tail:
            yield node
            node = node.next

    def keys_in_order(self) -> List[K]:
        """Keys from least- to most-recently-used."""
        return [node.key for node in self._iter_nodes()]

    def items_in_order(self) -> List[Tuple[K, V]]:
        return [(node.key, node.value) for node in self._iter_nodes()]

    def to_dict(self) -> Dict[K, V]:
        return dict(self.items_in_order())

    def __contains__(self, key: object) -> bool:
        return key in self._index

    def __len__(self) -> int:
        return len(self._index)

    def __iter__(self) -> Iterator[K]:
        return iter(self.keys_in_order())

    def __repr__(self) -> str:
        return f"{type(self).__name__}(capacity={self._capacity}, keys={self.keys_in_order()!r})"
