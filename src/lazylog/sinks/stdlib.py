"""Sink that hands formatted messages to the standard ``logging`` module."""

import logging

from ..models.enums import Severity
from ..models.message import FormattedMessage
from .abstract import Sink


class StdlibSink(Sink):
    """Forwards each message to ``logging.getLogger(prefix + logger_name)``.

    The text is passed without arguments, so ``logging`` performs no
    %-interpolation on it. A trailing error becomes ``exc_info`` and is
    rendered by the handler's formatter as a traceback.
    """

    def __init__(self, prefix: str = ""):
        self.prefix = prefix

    def emit(
        self, severity: Severity, logger_name: str, message: FormattedMessage
    ) -> None:
        target = logging.getLogger(f"{self.prefix}{logger_name}")
        target.log(
            severity.to_stdlib(),
            message.text,
            exc_info=message.exc_info,
            extra={"extra_fields": {"severity": severity.value}},
        )
