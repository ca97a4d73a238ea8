"""Advanced multi-currency management detection"""
from logging_config import get_logger
from tenant.sources import CurrencyConversionRateSource, SessionInfoSource
from utils.once import OnceSlot

logger = get_logger(__name__)


class AdvancedCurrencyManagementProbe:
    """Checks whether dated currency conversion rates are available.

    Evaluated on every call unless ``memoize`` is set, in which case the first
    answer is kept for the probe's lifetime.
    """

    def __init__(self, session: SessionInfoSource, rates: CurrencyConversionRateSource,
                 memoize: bool = False):
        self._session = session
        self._rates = rates
        self._slot = OnceSlot("advanced_currency") if memoize else None

    @property
    def memoized(self) -> bool:
        return self._slot is not None

    def is_enabled(self) -> bool:
        if self._slot is not None:
            return self._slot.get_or_compute(self._probe)
        return self._probe()

    def _probe(self) -> bool:
        try:
            if not self._session.is_multi_currency_enabled():
                return False
            rows = self._rates.query_dated_rates(limit=1)
            return len(list(rows)) > 0
        except Exception as e:
            # Record type missing without the extension
            logger.debug("Dated conversion rate query failed", error=str(e),
                         error_type=type(e).__name__, event_type="currency_probe_failed")
            return False
