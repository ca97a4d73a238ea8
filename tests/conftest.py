"""Shared fixtures: mocked collaborators for a well-formed test environment"""
from unittest.mock import Mock
import pytest

from capabilities import CapabilityContext
from tenant import (
    CachePartitionMetadataSource,
    CacheReachabilityProbe,
    CurrencyConversionRateSource,
    EnvironmentDescriptorSource,
    PartitionDescriptor,
    ProbeOutcome,
    SessionInfoSource,
    SocialAPIProbe,
)


@pytest.fixture
def environment_record():
    return {
        "id": "00D000000000001",
        "name": "Acme Corp",
        "namespace_prefix": "",
        "organization_type": "Developer Edition",
        "is_sandbox": True,
        "is_read_only": False,
        "instance_name": "NA42",
        "fiscal_year_start_month": 4,
        "locale_key": "en_US",
        "timezone_key": "America/Los_Angeles",
    }


@pytest.fixture
def sources(environment_record):
    """Collaborators under which every capability check succeeds outside a test run"""
    environment = Mock(spec=EnvironmentDescriptorSource)
    environment.fetch_environment.return_value = [environment_record]

    session = Mock(spec=SessionInfoSource)
    session.user_id.return_value = "005000000000001"
    session.ui_theme.return_value = "Theme4d"
    session.is_running_test.return_value = False
    session.is_multi_currency_enabled.return_value = True

    partitions = Mock(spec=CachePartitionMetadataSource)
    partitions.find_partitions.return_value = [PartitionDescriptor(developer_name="Main")]

    reachability = Mock(spec=CacheReachabilityProbe)
    reachability.check.return_value = None

    social = Mock(spec=SocialAPIProbe)
    social.probe.return_value = ProbeOutcome.unsupported()

    rates = Mock(spec=CurrencyConversionRateSource)
    rates.query_dated_rates.return_value = [{"id": "04w000000000001", "iso_code": "EUR"}]

    return {
        "environment": environment,
        "session": session,
        "partitions": partitions,
        "reachability": reachability,
        "social": social,
        "rates": rates,
    }


@pytest.fixture
def context(sources):
    return CapabilityContext(**sources)
