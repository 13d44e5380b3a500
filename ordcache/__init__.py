"""ordcache - Bounded least-recently-used cache with trace replay tooling."""

# --- Cache ---
from .cache import BoundedOrderedCache, CacheStats

# --- Trace replay ---
from .trace import ReplayResult, generate_trace, load_trace, replay, sweep_capacities

# --- Infrastructure ---
from .errors import OrdcacheError, InvalidCapacityError, InputError
from . import constants

__version__ = "0.1.0"

__all__ = [
    "BoundedOrderedCache", "CacheStats",
    "ReplayResult", "generate_trace", "load_trace", "replay", "sweep_capacities",
    "OrdcacheError", "InvalidCapacityError", "InputError",
    "constants",
]
