"""Environment snapshot and its load-once loader"""
from typing import Any, Dict, Mapping, Optional
from dataclasses import asdict, dataclass
from logging_config import get_logger
from utils.once import OnceSlot
from .errors import SnapshotLoadError
from .sources import EnvironmentDescriptorSource

logger = get_logger(__name__)


def _require_bool(record: Mapping[str, Any], key: str) -> bool:
    value = record[key]
    if not isinstance(value, bool):
        raise TypeError(f"{key} must be a bool, got {type(value).__name__}: {value!r}")
    return value


@dataclass(frozen=True)
class EnvironmentSnapshot:
    """Immutable attributes of the environment a context runs in"""
    id: str
    name: str
    namespace_prefix: Optional[str]
    organization_type: str
    is_sandbox: bool
    is_read_only: bool
    instance_name: str
    fiscal_year_start_month: int
    locale_key: str
    timezone_key: str

    def __post_init__(self):
        if not 1 <= self.fiscal_year_start_month <= 12:
            raise ValueError(
                f"fiscal_year_start_month must be between 1 and 12, got {self.fiscal_year_start_month}"
            )
        # Empty prefix means "no namespace"
        if self.namespace_prefix == "":
            object.__setattr__(self, "namespace_prefix", None)

    @property
    def has_namespace_prefix(self) -> bool:
        return bool(self.namespace_prefix)

    @classmethod
    def from_record(cls, record: Mapping[str, Any]) -> "EnvironmentSnapshot":
        """Build a snapshot from one environment record.

        Raises KeyError for a missing attribute, TypeError for a flag that is
        not a bool and ValueError for a bad value.
        """
        return cls(
            id=str(record["id"]),
            name=str(record["name"]),
            namespace_prefix=record.get("namespace_prefix"),
            organization_type=str(record["organization_type"]),
            is_sandbox=_require_bool(record, "is_sandbox"),
            is_read_only=_require_bool(record, "is_read_only"),
            instance_name=str(record["instance_name"]),
            fiscal_year_start_month=int(record["fiscal_year_start_month"]),
            locale_key=str(record["locale_key"]),
            timezone_key=str(record["timezone_key"]),
        )

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


class EnvironmentSnapshotLoader:
    """Fetches the environment snapshot from its source once per context"""

    def __init__(self, source: EnvironmentDescriptorSource):
        self._source = source
        self._slot: OnceSlot[EnvironmentSnapshot] = OnceSlot("environment_snapshot")

    @property
    def loaded(self) -> bool:
        return self._slot.is_set

    def get(self) -> EnvironmentSnapshot:
        """Return the snapshot, fetching it from the source on the first call.

        Any failure raises SnapshotLoadError and is not remembered, so a later
        call fetches again.
        """
        return self._slot.get_or_compute(self._load)

    def _load(self) -> EnvironmentSnapshot:
        try:
            records = list(self._source.fetch_environment())
        except Exception as e:
            raise SnapshotLoadError(f"Could not fetch environment record: {e}") from e

        if len(records) != 1:
            raise SnapshotLoadError(f"Expected exactly one environment record, got {len(records)}")

        try:
            snapshot = EnvironmentSnapshot.from_record(records[0])
        except (KeyError, TypeError, ValueError) as e:
            raise SnapshotLoadError(f"Malformed environment record: {e!r}") from e

        logger.info(
            "Environment snapshot loaded",
            environment_id=snapshot.id,
            organization_type=snapshot.organization_type,
            is_sandbox=snapshot.is_sandbox,
            instance_name=snapshot.instance_name
        )
        return snapshot
