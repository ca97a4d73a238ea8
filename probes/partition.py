"""Cache partition discovery"""
from typing import Optional
from logging_config import get_logger, log_probe_failure
from tenant.sources import CachePartitionMetadataSource
from utils.once import OnceSlot, SlotState

logger = get_logger(__name__)

LOCAL_NAMESPACE = "local"


class CachePartitionResolver:
    """Finds the cache partition usable by this context.

    The metadata lookup runs at most once per resolver. A miss or a lookup
    error is remembered as a failure, so later calls return None without
    querying again.
    """

    def __init__(self, source: CachePartitionMetadataSource,
                 local_namespace: str = LOCAL_NAMESPACE):
        self._source = source
        self._local_namespace = local_namespace
        self._slot: OnceSlot[str] = OnceSlot("cache_partition")

    @property
    def state(self) -> SlotState:
        return self._slot.state

    def resolve(self) -> Optional[str]:
        """Return the partition identifier as ``<scope>.<developer name>``, or None"""
        return self._slot.get_or_compute(self._lookup)

    def _lookup(self) -> Optional[str]:
        try:
            partitions = list(self._source.find_partitions(namespace_prefix=None, limit=1))
        except Exception as e:
            log_probe_failure(logger, "cache_partition", e)
            return None

        if not partitions:
            logger.info("No cache partition found", event_type="partition_lookup_failed")
            return None

        partition = partitions[0]
        scope = partition.namespace_prefix or self._local_namespace
        partition_id = f"{scope}.{partition.developer_name}"
        logger.debug("Cache partition resolved", partition_id=partition_id,
                     event_type="partition_resolved")
        return partition_id
