"""Abstract base class for output sinks.

A sink receives finished messages only. It owns everything that happens
after formatting: where the text goes, timestamps, ordering, durability.
"""

from abc import ABC, abstractmethod

from lazylog.models.enums import Severity
from lazylog.models.message import FormattedMessage


class Sink(ABC):
    """Interface for writing formatted log messages."""

    @abstractmethod
    def emit(
        self, severity: Severity, logger_name: str, message: FormattedMessage
    ) -> None:
        """Writes one formatted message.

        Args:
            severity: Severity of the originating call.
            logger_name: Name of the logger that emitted it.
            message: The formatted text and its detached exception, if any.
        """
        pass  # pragma: no cover
