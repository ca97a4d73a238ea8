"""Expensive capability probes with memoized, fail-safe answers"""
from .currency import AdvancedCurrencyManagementProbe
from .isolation import TestIsolationProbe
from .partition import CachePartitionResolver
from .platform_cache import PlatformCacheAvailabilityCheck

__all__ = [
    'AdvancedCurrencyManagementProbe',
    'TestIsolationProbe',
    'CachePartitionResolver',
    'PlatformCacheAvailabilityCheck',
]
