import threading

from pydantic import Field

from ..models.base import FrozenModel
from ..models.enums import Severity
from ..models.message import FormattedMessage
from .abstract import Sink


class EmittedRecord(FrozenModel):
    """One message as received by a ``MemorySink``."""

    severity: Severity = Field(..., description="Severity of the call.")
    logger_name: str = Field(..., description="Emitting logger name.")
    message: FormattedMessage = Field(..., description="Formatted message.")


class MemorySink(Sink):
    """Keeps every emitted message in a list. Used by tests and examples."""

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._records: list[EmittedRecord] = []

    def emit(
        self, severity: Severity, logger_name: str, message: FormattedMessage
    ) -> None:
        record = EmittedRecord(
            severity=severity, logger_name=logger_name, message=message
        )
        with self._lock:
            self._records.append(record)

    @property
    def records(self) -> list[EmittedRecord]:
        with self._lock:
            return list(self._records)

    def messages(self) -> list[str]:
        return [r.message.text for r in self.records]

    def clear(self) -> None:
        with self._lock:
            self._records.clear()
