"""Capability context: environment attributes and optional feature checks"""
from typing import Any, Dict, Optional
from config import Config
from logging_config import get_logger, log_capability_report, log_probe_failure
from probes.currency import AdvancedCurrencyManagementProbe
from probes.isolation import TestIsolationProbe
from probes.partition import LOCAL_NAMESPACE, CachePartitionResolver
from probes.platform_cache import PlatformCacheAvailabilityCheck
from tenant.snapshot import EnvironmentSnapshot, EnvironmentSnapshotLoader
from tenant.sources import (
    CachePartitionMetadataSource,
    CacheReachabilityProbe,
    CurrencyConversionRateSource,
    EnvironmentDescriptorSource,
    SessionInfoSource,
    SocialAPIProbe,
)

logger = get_logger(__name__)

DEFAULT_MODERN_THEME = "Theme4"


class CapabilityContext:
    """Entry point for environment attributes and capability checks.

    One context covers one logical request or transaction. Everything it
    memoizes (the environment snapshot and the cache partition lookup) lives
    on the instance and is never refreshed; use ``fresh()`` for a new view.

    The environment properties are projections of ``get_snapshot()``, so the
    first one read fetches the snapshot. They raise ``SnapshotLoadError``
    when it cannot be loaded. The ``is_*_enabled`` checks never raise.
    ``is_see_all_data_true()`` lets an unexpected social API error through,
    since it signals a broken environment rather than isolation.
    """

    def __init__(self,
                 environment: EnvironmentDescriptorSource,
                 session: SessionInfoSource,
                 partitions: CachePartitionMetadataSource,
                 reachability: CacheReachabilityProbe,
                 social: SocialAPIProbe,
                 rates: CurrencyConversionRateSource,
                 disable_platform_cache: bool = False,
                 memoize_currency_probe: bool = False,
                 modern_theme_identifier: str = DEFAULT_MODERN_THEME,
                 local_partition_namespace: str = LOCAL_NAMESPACE):
        self._sources = {
            "environment": environment,
            "session": session,
            "partitions": partitions,
            "reachability": reachability,
            "social": social,
            "rates": rates,
        }
        self._settings = {
            "disable_platform_cache": disable_platform_cache,
            "memoize_currency_probe": memoize_currency_probe,
            "modern_theme_identifier": modern_theme_identifier,
            "local_partition_namespace": local_partition_namespace,
        }
        self._session = session
        self._modern_theme = modern_theme_identifier

        self._loader = EnvironmentSnapshotLoader(environment)
        self._isolation = TestIsolationProbe(session, social)
        self._partitions = CachePartitionResolver(partitions, local_partition_namespace)
        self._platform_cache = PlatformCacheAvailabilityCheck(
            self._isolation, self._partitions, reachability,
            disabled=disable_platform_cache
        )
        self._currency = AdvancedCurrencyManagementProbe(
            session, rates, memoize=memoize_currency_probe
        )

    @classmethod
    def from_config(cls, config: Config, **sources) -> "CapabilityContext":
        """Create a context whose probe settings come from ``config``"""
        return cls(
            disable_platform_cache=config.disable_platform_cache,
            memoize_currency_probe=config.memoize_currency_probe,
            modern_theme_identifier=config.modern_theme_identifier,
            local_partition_namespace=config.local_partition_namespace,
            **sources
        )

    def fresh(self) -> "CapabilityContext":
        """Create a new context over the same collaborators, with nothing memoized"""
        settings = dict(self._settings)
        settings["disable_platform_cache"] = self.platform_cache_disabled
        return CapabilityContext(**self._sources, **settings)

    def get_snapshot(self) -> EnvironmentSnapshot:
        """Return the environment snapshot.

        The first call fetches it from the environment source; later calls
        return the stored snapshot.
        """
        return self._loader.get()

    # Environment attributes

    @property
    def id(self) -> str:
        return self.get_snapshot().id

    @property
    def name(self) -> str:
        return self.get_snapshot().name

    @property
    def namespace_prefix(self) -> Optional[str]:
        return self.get_snapshot().namespace_prefix

    @property
    def has_namespace_prefix(self) -> bool:
        return self.get_snapshot().has_namespace_prefix

    @property
    def org_type(self) -> str:
        return self.get_snapshot().organization_type

    @property
    def is_sandbox(self) -> bool:
        return self.get_snapshot().is_sandbox

    @property
    def is_read_only(self) -> bool:
        return self.get_snapshot().is_read_only

    @property
    def instance_name(self) -> str:
        return self.get_snapshot().instance_name

    @property
    def pod_name(self) -> str:
        """Alias of instance_name"""
        return self.instance_name

    @property
    def fiscal_year_start_month(self) -> int:
        return self.get_snapshot().fiscal_year_start_month

    @property
    def locale(self) -> str:
        return self.get_snapshot().locale_key

    @property
    def time_zone_key(self) -> str:
        return self.get_snapshot().timezone_key

    # Session attributes

    @property
    def user_id(self) -> str:
        return self._session.user_id()

    @property
    def multi_currency_enabled(self) -> bool:
        return bool(self._session.is_multi_currency_enabled())

    @property
    def lightning_enabled(self) -> bool:
        """True when the UI theme in use is the modern one"""
        theme = self._session.ui_theme() or ""
        return self._modern_theme.lower() in theme.lower()

    # Capability checks

    @property
    def platform_cache_disabled(self) -> bool:
        """Override that makes is_platform_cache_enabled() return False"""
        return self._platform_cache.disabled

    @platform_cache_disabled.setter
    def platform_cache_disabled(self, value: bool):
        self._platform_cache.disabled = bool(value)

    def is_platform_cache_enabled(self) -> bool:
        return self._platform_cache.is_enabled()

    def is_see_all_data_true(self) -> bool:
        """True when running under test with the full dataset visible.

        Issues the social API probe on every call made under test. An ERROR
        outcome from the social API re-raises the exception it carries.
        """
        return self._isolation.see_all_data()

    def is_advanced_multi_currency_management_enabled(self) -> bool:
        return self._currency.is_enabled()

    def describe(self) -> Dict[str, Any]:
        """Collect environment attributes and capability answers into one report.

        Raises ``SnapshotLoadError`` when the environment cannot be loaded;
        the capability answers never raise.
        """
        report: Dict[str, Any] = {
            "environment": self.get_snapshot().to_dict(),
            "user_id": self.user_id,
            "lightning_enabled": self.lightning_enabled,
            "multi_currency_enabled": self.multi_currency_enabled,
            "see_all_data": self._see_all_data_or_false(),
            "platform_cache_enabled": self.is_platform_cache_enabled(),
            "advanced_multi_currency_management_enabled":
                self.is_advanced_multi_currency_management_enabled(),
        }
        log_capability_report(logger, report)
        return report

    def _see_all_data_or_false(self) -> bool:
        try:
            return self._isolation.see_all_data()
        except Exception as e:
            log_probe_failure(logger, "see_all_data", e)
            return False
