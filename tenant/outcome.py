"""Tagged outcome of a side-effecting probe call"""
from typing import Callable, Optional, Tuple, Type
from dataclasses import dataclass
from enum import Enum
from .errors import UnsupportedOperationError


class ProbeStatus(Enum):
    """Status of a probe call"""
    OK = "ok"
    UNSUPPORTED = "unsupported"
    ERROR = "error"


@dataclass(frozen=True)
class ProbeOutcome:
    """Result of a probe call.

    UNSUPPORTED is a signal, not a failure: the call was refused because of
    the mode the context runs in. ERROR carries the exception that was raised.
    """
    status: ProbeStatus
    error: Optional[BaseException] = None

    @property
    def is_ok(self) -> bool:
        return self.status is ProbeStatus.OK

    @property
    def is_unsupported(self) -> bool:
        return self.status is ProbeStatus.UNSUPPORTED

    @classmethod
    def ok(cls) -> "ProbeOutcome":
        return cls(status=ProbeStatus.OK)

    @classmethod
    def unsupported(cls, error: Optional[BaseException] = None) -> "ProbeOutcome":
        return cls(status=ProbeStatus.UNSUPPORTED, error=error)

    @classmethod
    def failed(cls, error: BaseException) -> "ProbeOutcome":
        return cls(status=ProbeStatus.ERROR, error=error)

    @classmethod
    def from_call(cls, call: Callable[[], object],
                  unsupported: Tuple[Type[BaseException], ...] = (UnsupportedOperationError,)
                  ) -> "ProbeOutcome":
        """Run ``call`` and turn the way it ends into an outcome.

        Returning normally is OK, raising one of ``unsupported`` is
        UNSUPPORTED, and any other exception is ERROR.
        """
        try:
            call()
        except unsupported as e:
            return cls.unsupported(e)
        except Exception as e:
            return cls.failed(e)
        return cls.ok()
