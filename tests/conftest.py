"""Shared test fixtures for ordcache."""

import pytest

from ordcache import BoundedOrderedCache


@pytest.fixture
def numbers_cache() -> BoundedOrderedCache:
    """Capacity-3 cache holding 1, 2, 3 in insertion order."""
    cache = BoundedOrderedCache(3)
    cache.put(1, "One")
    cache.put(2, "Two")
    cache.put(3, "Three")
    return cache


@pytest.fixture
def trace_file(tmp_path) -> str:
    """Small trace file with a comment and blank lines."""
    path = tmp_path / "trace.txt"
    path.write_text("# recorded requests\na\nb\n\na\nc\nb\n  d  \na\n")
    return str(path)
