"""Platform cache availability"""
from logging_config import get_logger, log_probe_failure
from tenant.sources import CacheReachabilityProbe
from .isolation import TestIsolationProbe
from .partition import CachePartitionResolver

logger = get_logger(__name__)


class PlatformCacheAvailabilityCheck:
    """Decides whether the platform cache can be used, defaulting to False.

    The cache is unavailable when it is disabled by override, when a test run
    sees the full dataset, when no partition exists, or when the partition
    cannot be reached. ``is_enabled`` never raises.
    """

    def __init__(self, isolation: TestIsolationProbe, partitions: CachePartitionResolver,
                 reachability: CacheReachabilityProbe, disabled: bool = False):
        self._isolation = isolation
        self._partitions = partitions
        self._reachability = reachability
        self.disabled = disabled

    def is_enabled(self) -> bool:
        if self.disabled:
            return False

        try:
            return self._check()
        except Exception as e:
            log_probe_failure(logger, "platform_cache", e)
            return False

    def _check(self) -> bool:
        if self._isolation.see_all_data():
            logger.debug("Platform cache unavailable with full dataset visible",
                         event_type="cache_skipped")
            return False

        partition_id = self._partitions.resolve()
        if partition_id is None:
            return False

        try:
            self._reachability.check(partition_id)
        except Exception as e:
            logger.warning("Cache partition unreachable", partition_id=partition_id,
                           error=str(e), error_type=type(e).__name__,
                           event_type="cache_unreachable")
            return False
        return True
