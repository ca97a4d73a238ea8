"""Detection of data-isolated test runs"""
from logging_config import get_logger
from tenant.outcome import ProbeStatus
from tenant.sources import SessionInfoSource, SocialAPIProbe

logger = get_logger(__name__)


class TestIsolationProbe:
    """Tells whether a test run sees the full dataset or only test-created data.

    Outside a test run the answer is always False and the social API is not
    touched. Inside one, the social API call is refused exactly when the run is
    data-isolated. Evaluated on every call.
    """

    # Not a pytest test class
    __test__ = False

    def __init__(self, session: SessionInfoSource, social: SocialAPIProbe):
        self._session = session
        self._social = social

    def see_all_data(self) -> bool:
        """True when running under test with the full dataset visible.

        An ERROR outcome from the social API re-raises the exception it carries.
        """
        if not self._session.is_running_test():
            return False

        outcome = self._social.probe()
        if outcome.status is ProbeStatus.OK:
            return True
        if outcome.status is ProbeStatus.UNSUPPORTED:
            logger.debug("Social API refused, test run is data-isolated",
                         event_type="isolation_detected")
            return False

        if outcome.error is not None:
            raise outcome.error
        raise RuntimeError("Social API probe failed without an error")
