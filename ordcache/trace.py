"""Trace generation and replay for measuring cache hit rates."""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Callable, Dict, Iterable, List, Optional, Union

import numpy as np
from tqdm import tqdm

from .cache import BoundedOrderedCache
from .constants import (
    DEFAULT_TRACE_DISTRIBUTION,
    DEFAULT_ZIPF_EXPONENT,
    TRACE_COMMENT_PREFIX,
    TRACE_DISTRIBUTIONS,
)
from .errors import InputError

logger = logging.getLogger(__name__)

_MISSING = object()


@dataclass
class ReplayResult:
    capacity: int
    requests: int
    hits: int
    misses: int
    evictions: int
    elapsed: float = 0.0

    @property
    def hit_rate(self) -> float:
        if self.requests == 0:
            return 0.0
        return self.hits / self.requests

    def as_dict(self) -> Dict[str, Any]:
        return {
            "capacity": self.capacity,
            "requests": self.requests,
            "hits": self.hits,
            "misses": self.misses,
            "evictions": self.evictions,
            "hit_rate": self.hit_rate,
            "elapsed": self.elapsed,
        }


def generate_trace(
    num_requests: int,
    key_space: int,
    distribution: str = DEFAULT_TRACE_DISTRIBUTION,
    zipf_exponent: float = DEFAULT_ZIPF_EXPONENT,
    seed: Optional[int] = None,
) -> np.ndarray:
    """
    Generate a synthetic access trace of integer keys.

    Args:
        num_requests: Number of keys in the trace
        key_space: Keys are drawn from [0, key_space)
        distribution: One of "zipf", "uniform" or "sequential"
        zipf_exponent: Skew of the zipf distribution (must be > 1)
        seed: Seed for numpy's default generator

    Returns:
        int64 array of shape (num_requests,)
    """
    if num_requests <= 0:
        raise InputError(f"num_requests must be > 0, got {num_requests}")
    if key_space <= 0:
        raise InputError(f"key_space must be > 0, got {key_space}")
    distribution = distribution.lower()
    if distribution not in TRACE_DISTRIBUTIONS:
        raise InputError(
            f"Unsupported distribution: {distribution!r}. Allowed: {list(TRACE_DISTRIBUTIONS)}"
        )

    rng = np.random.default_rng(seed)
    if distribution == "zipf":
        if zipf_exponent <= 1.0:
            raise InputError(f"zipf_exponent must be > 1, got {zipf_exponent}")
        # zipf samples start at 1; fold the unbounded tail into the key space
        keys = (rng.zipf(zipf_exponent, size=num_requests) - 1) % key_space
    elif distribution == "uniform":
        keys = rng.integers(0, key_space, size=num_requests)
    else:
        keys = np.arange(num_requests) % key_space

    logger.info(f"Generated {distribution} trace: {num_requests} requests over {key_space} keys")
    return keys.astype(np.int64)


def load_trace(path: Union[str, Path]) -> List[str]:
    """Read a trace file with one key per line. Blank lines and comments are skipped."""
    path = Path(path)
    if not path.is_file():
        raise InputError(f"Trace file not found: {path}")
    try:
        with open(path, "r", encoding="utf-8") as f:
            keys = [
                line.strip() for line in f
                if line.strip() and not line.strip().startswith(TRACE_COMMENT_PREFIX)
            ]
    except (OSError, UnicodeDecodeError) as e:
        raise InputError(f"Cannot read trace file {path}: {e}") from e
    if not keys:
        raise InputError(f"Trace file contains no keys: {path}")
    logger.info(f"Loaded {len(keys)} requests from {path}")
    return keys


def replay(
    cache: BoundedOrderedCache,
    keys: Iterable,
    loader: Optional[Callable[[Any], Any]] = None,
    progress: bool = False,
) -> ReplayResult:
    """
    Run every key of a trace through ``cache`` as a read-through workload.

    A miss stores ``loader(key)`` (or the key itself when no loader is given).
    Counts are taken as the change in ``cache.stats`` over this call, so an
    already warm cache can be replayed again.
    """
    before = (cache.stats.hits, cache.stats.misses, cache.stats.evictions)
    iterator = tqdm(keys, desc="Replaying", unit="req") if progress else keys

    start = time.perf_counter()
    for key in iterator:
        if isinstance(key, np.generic):
            key = key.item()
        if cache.get(key, _MISSING) is _MISSING:
            cache.put(key, loader(key) if loader is not None else key)
    elapsed = time.perf_counter() - start

    hits = cache.stats.hits - before[0]
    misses = cache.stats.misses - before[1]
    return ReplayResult(
        capacity=cache.capacity,
        requests=hits + misses,
        hits=hits,
        misses=misses,
        evictions=cache.stats.evictions - before[2],
        elapsed=elapsed,
    )


def sweep_capacities(
    keys: Iterable,
    capacities: Iterable[int],
    progress: bool = False,
) -> List[ReplayResult]:
    """Replay the same trace against a fresh cache for each capacity."""
    if not isinstance(keys, (np.ndarray, list, tuple)):
        # one-shot iterators would be exhausted after the first capacity
        keys = list(keys)
    results = []
    for capacity in capacities:
        result = replay(BoundedOrderedCache(capacity), keys, progress=progress)
        logger.info(
            f"capacity={capacity}: hit_rate={result.hit_rate:.4f} "
            f"({result.hits}/{result.requests}), evictions={result.evictions}"
        )
        results.append(result)
    return results
