"""Compute-once slot with distinct unset, resolved and failed states"""
import threading
from enum import Enum
from typing import Callable, Generic, Optional, TypeVar

T = TypeVar("T")


class SlotState(Enum):
    """State of a compute-once slot"""
    UNSET = "unset"
    RESOLVED = "resolved"
    FAILED = "failed"


class OnceSlot(Generic[T]):
    """Holds the outcome of one expensive computation for the lifetime of its owner.

    ``compute`` returning a value records RESOLVED, returning ``None`` records
    FAILED. Both are final: later calls return the stored outcome without
    calling ``compute`` again. If ``compute`` raises, nothing is recorded and
    the exception propagates, so the next call tries again.

    Writes are guarded by a lock with a double check, so concurrent callers
    sharing the slot trigger ``compute`` at most once.
    """

    def __init__(self, name: str = ""):
        self.name = name
        self._state = SlotState.UNSET
        self._value: Optional[T] = None
        self._lock = threading.Lock()

    @property
    def state(self) -> SlotState:
        return self._state

    @property
    def is_set(self) -> bool:
        """True once an outcome (value or failure) has been recorded"""
        return self._state is not SlotState.UNSET

    def get_or_compute(self, compute: Callable[[], Optional[T]]) -> Optional[T]:
        if self._state is not SlotState.UNSET:
            return self._value

        with self._lock:
            if self._state is not SlotState.UNSET:
                return self._value

            value = compute()
            self._value = value
            self._state = SlotState.FAILED if value is None else SlotState.RESOLVED
            return value

    def __repr__(self) -> str:
        return f"OnceSlot(name={self.name!r}, state={self._state.value})"
