"""Interfaces of the external collaborators the capability probes call out to"""
import abc
from typing import Any, Mapping, Optional, Sequence
from dataclasses import dataclass
from .outcome import ProbeOutcome


@dataclass(frozen=True)
class PartitionDescriptor:
    """A provisioned cache partition as described by the metadata store"""
    developer_name: str
    namespace_prefix: Optional[str] = None


class EnvironmentDescriptorSource(abc.ABC):
    """Supplies the attribute record of the current environment"""

    @abc.abstractmethod
    def fetch_environment(self) -> Sequence[Mapping[str, Any]]:
        """Return the environment records; a well-formed environment has exactly one"""
        pass


class CachePartitionMetadataSource(abc.ABC):
    """Looks up cache partition definitions"""

    @abc.abstractmethod
    def find_partitions(self, namespace_prefix: Optional[str],
                        limit: int) -> Sequence[PartitionDescriptor]:
        """Return at most ``limit`` partitions in the given namespace scope"""
        pass


class CacheReachabilityProbe(abc.ABC):
    """Live check against the cache subsystem"""

    @abc.abstractmethod
    def check(self, partition_id: str) -> None:
        """Return normally if the partition is usable, raise otherwise"""
        pass


class SessionInfoSource(abc.ABC):
    """Facts about the current session and user"""

    @abc.abstractmethod
    def user_id(self) -> str:
        pass

    @abc.abstractmethod
    def ui_theme(self) -> str:
        pass

    @abc.abstractmethod
    def is_running_test(self) -> bool:
        pass

    @abc.abstractmethod
    def is_multi_currency_enabled(self) -> bool:
        pass


class SocialAPIProbe(abc.ABC):
    """Side-effecting social API call that is refused under data isolation"""

    @abc.abstractmethod
    def probe(self) -> ProbeOutcome:
        """OK when the call went through, UNSUPPORTED when isolation refused it,
        ERROR for anything else"""
        pass


class CurrencyConversionRateSource(abc.ABC):
    """Dated currency conversion rates, only queryable with the advanced extension"""

    @abc.abstractmethod
    def query_dated_rates(self, limit: int) -> Sequence[Mapping[str, Any]]:
        """Return at most ``limit`` rate records; raises when the record type does not exist"""
        pass
