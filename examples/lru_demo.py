"""
LRU Cache Demo

Walks through the canonical capacity-3 scenario: reads promote entries,
and each insert into a full cache evicts the least-recently-used key.
"""

from ordcache import BoundedOrderedCache


def main() -> None:
    evicted = []
    cache = BoundedOrderedCache(3, on_evict=lambda key, value: evicted.append(key))

    cache.put(1, "One")
    cache.put(2, "Two")
    cache.put(3, "Three")
    print(f"Initial cache: {cache.keys_in_order()}")  # [1, 2, 3]

    print(f"Accessing key 1 -> {cache.get(1)!r}")
    cache.put(4, "Four")
    print(f"Adding key 4, evicts key {evicted[-1]}. Cache: {cache.keys_in_order()}")  # [3, 1, 4]

    print(f"Accessing key 3 -> {cache.get(3)!r}")
    cache.put(5, "Five")
    print(f"Adding key 5, evicts key {evicted[-1]}. Cache: {cache.keys_in_order()}")  # [4, 3, 5]

    print(f"Accessing key 99 -> {cache.get(99)!r}")
    print(f"Stats: {cache.stats}")


if __name__ == "__main__":
    main()
