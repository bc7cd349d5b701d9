"""Logger facade and factory.

Loggers are obtained from a ``LoggerFactory`` built once with a
``LevelConfig`` and a ``Sink``. Each logger resolves its threshold when it is
created and checks it before any argument is looked at::

    factory = LoggerFactory(load_level_config(), StdlibSink())
    log = factory.get_logger(__name__)
    log.debug("Loaded {} rows from {}", count, table)
"""

import sys
import threading
from typing import Any, Optional, Sequence, Union

from lazylog.config import LevelConfig, load_level_config
from lazylog.formatting.arguments import as_argument_list, render_argument
from lazylog.formatting.formatter import check_template, format_event, should_emit
from lazylog.models.enums import Severity
from lazylog.models.message import SUPPRESSED, FormattedMessage, LogEvent
from lazylog.sinks.abstract import Sink
from lazylog.sinks.stdlib import StdlibSink


def logger_name_for(target: Any) -> str:
    """Derives a logger name from a string, class, module or instance."""
    if isinstance(target, str):
        return target
    if isinstance(target, type):
        return f"{target.__module__}.{target.__qualname__}"
    module_name = getattr(target, "__name__", None)
    if isinstance(module_name, str):
        return module_name
    cls = type(target)
    return f"{cls.__module__}.{cls.__qualname__}"


class Logger:
    """Named logger with a fixed threshold.

    Attributes:
        name: Logger name, usually a dotted module or class path.
        threshold: Minimum severity that gets formatted and emitted.
        sink: Receiver of formatted messages.
    """

    def __init__(self, name: str, threshold: Severity, sink: Sink):
        self.name = name
        self.threshold = threshold
        self.sink = sink

    def __repr__(self) -> str:
        return f"<Logger {self.name} ({self.threshold.value})>"

    def is_enabled(self, severity: Severity) -> bool:
        return should_emit(self.threshold, severity)

    def is_trace_enabled(self) -> bool:
        return self.is_enabled(Severity.TRACE)

    def is_debug_enabled(self) -> bool:
        return self.is_enabled(Severity.DEBUG)

    def is_info_enabled(self) -> bool:
        return self.is_enabled(Severity.INFO)

    def is_warn_enabled(self) -> bool:
        return self.is_enabled(Severity.WARN)

    def is_error_enabled(self) -> bool:
        return self.is_enabled(Severity.ERROR)

    def log(
        self,
        severity: Severity,
        template: str,
        args: Optional[Sequence[Any]] = (),
        trailing_error: Optional[BaseException] = None,
    ) -> FormattedMessage:
        """Formats and emits one message if ``severity`` passes the threshold.

        Args:
            severity: Severity of this call.
            template: Message template with ``{}`` placeholders.
            args: Ordered argument values; a trailing exception is detached.
            trailing_error: Exception to attach explicitly.

        Returns:
            The emitted message, or ``SUPPRESSED`` if gated out.

        Raises:
            InvalidTemplateError: If ``template`` is None or not a string,
                whatever the severity.
        """
        check_template(template)
        if not self.is_enabled(severity):
            return SUPPRESSED

        event = LogEvent(
            severity=severity,
            logger_name=self.name,
            template=template,
            args=tuple(as_argument_list(args)),
            trailing_error=trailing_error,
        )
        message = format_event(event)
        self.sink.emit(severity, self.name, message)
        return message

    def trace(self, template: str, *args: Any) -> FormattedMessage:
        return self.log(Severity.TRACE, template, args)

    def debug(self, template: str, *args: Any) -> FormattedMessage:
        return self.log(Severity.DEBUG, template, args)

    def info(self, template: str, *args: Any) -> FormattedMessage:
        return self.log(Severity.INFO, template, args)

    def warn(self, template: str, *args: Any) -> FormattedMessage:
        return self.log(Severity.WARN, template, args)

    warning = warn

    def error(self, template: str, *args: Any) -> FormattedMessage:
        return self.log(Severity.ERROR, template, args)

    def exception(self, template: str, *args: Any) -> FormattedMessage:
        """Logs at ERROR, attaching the exception currently being handled."""
        return self.log(
            Severity.ERROR, template, args, trailing_error=sys.exc_info()[1]
        )

    def log_joined(self, severity: Severity, *parts: Any) -> FormattedMessage:
        """Concatenates ``parts`` into one message, only when enabled.

        Each part is rendered like a placeholder argument. The joined text
        is emitted verbatim, so any ``{}`` inside a part stays as it is.
        """
        if not self.is_enabled(severity):
            return SUPPRESSED
        text = "".join(render_argument(part) for part in parts)
        message = FormattedMessage(text=text)
        self.sink.emit(severity, self.name, message)
        return message


class LoggerFactory:
    """Hands out named loggers bound to one configuration and one sink.

    Loggers are cached by name, so repeated lookups return the same instance.
    """

    def __init__(self, config: LevelConfig, sink: Sink):
        self.config = config
        self.sink = sink
        self._lock = threading.Lock()
        self._loggers: dict[str, Logger] = {}

    @classmethod
    def from_environment(cls, sink: Optional[Sink] = None) -> "LoggerFactory":
        """Builds a factory from ``load_level_config()`` and a stdlib sink."""
        return cls(load_level_config(), sink or StdlibSink())

    def get_logger(self, target: Union[str, type, Any]) -> Logger:
        name = logger_name_for(target)
        with self._lock:
            logger = self._loggers.get(name)
            if logger is None:
                logger = Logger(name, self.config.level_for(name), self.sink)
                self._loggers[name] = logger
            return logger
