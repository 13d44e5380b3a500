"""Shared error types for ordcache."""

from __future__ import annotations


class OrdcacheError(Exception):
    """Base error type for ordcache."""


class InvalidCapacityError(OrdcacheError, ValueError):
    """Raised when a cache is constructed with a non-positive capacity."""


class InputError(OrdcacheError, ValueError):
    """Raised when trace or CLI input is invalid or unsupported."""
