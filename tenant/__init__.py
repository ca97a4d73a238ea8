"""Environment snapshot and the collaborator contract of the capability probes"""
from .errors import CapabilityError, SnapshotLoadError, UnsupportedOperationError
from .outcome import ProbeOutcome, ProbeStatus
from .snapshot import EnvironmentSnapshot, EnvironmentSnapshotLoader
from .sources import (
    CachePartitionMetadataSource,
    CacheReachabilityProbe,
    CurrencyConversionRateSource,
    EnvironmentDescriptorSource,
    PartitionDescriptor,
    SessionInfoSource,
    SocialAPIProbe,
)

__all__ = [
    'CapabilityError',
    'SnapshotLoadError',
    'UnsupportedOperationError',
    'ProbeOutcome',
    'ProbeStatus',
    'EnvironmentSnapshot',
    'EnvironmentSnapshotLoader',
    'CachePartitionMetadataSource',
    'CacheReachabilityProbe',
    'CurrencyConversionRateSource',
    'EnvironmentDescriptorSource',
    'PartitionDescriptor',
    'SessionInfoSource',
    'SocialAPIProbe',
]
