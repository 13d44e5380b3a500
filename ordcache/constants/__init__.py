"""Constants package for ordcache."""

from .runtime import (
    DEFAULT_CAPACITY,
    TRACE_DISTRIBUTIONS,
    DEFAULT_TRACE_DISTRIBUTION,
    DEFAULT_ZIPF_EXPONENT,
    DEFAULT_TRACE_REQUESTS,
    DEFAULT_KEY_SPACE,
    TRACE_COMMENT_PREFIX,
)

__all__ = [
    "DEFAULT_CAPACITY",
    "TRACE_DISTRIBUTIONS",
    "DEFAULT_TRACE_DISTRIBUTION",
    "DEFAULT_ZIPF_EXPONENT",
    "DEFAULT_TRACE_REQUESTS",
    "DEFAULT_KEY_SPACE",
    "TRACE_COMMENT_PREFIX",
]
