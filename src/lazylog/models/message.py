"""Data models for log calls and their formatted output.

A ``LogEvent`` is built per call once the severity gate has accepted it,
handed to the formatter and then dropped. The formatter produces a
``FormattedMessage``, which is what sinks receive.
"""

from typing import Any, Optional

from pydantic import Field

from lazylog.models.base import FrozenModel
from lazylog.models.enums import Severity


class LogEvent(FrozenModel):
    """A single log call before formatting.

    Attributes:
        severity: Severity of the call.
        logger_name: Name of the logger that received the call.
        template: Message template with ``{}`` placeholders.
        args: Ordered argument values. Never rendered by the model itself.
        trailing_error: Exception passed explicitly by the caller, if any.
    """

    severity: Severity = Field(..., description="Severity of the call.")
    logger_name: str = Field(
        ..., description="Name of the logger that received the call."
    )
    template: str = Field(
        ..., description="Message template with {} placeholders."
    )
    args: tuple[Any, ...] = Field(
        default=(), description="Ordered argument values."
    )
    trailing_error: Optional[BaseException] = Field(
        default=None,
        description="Exception passed explicitly by the caller, if any.",
    )


class FormattedMessage(FrozenModel):
    """The final text of a log call plus its detached exception.

    Attributes:
        text: Message with all matched placeholders substituted.
        trailing_error: Exception to be rendered separately (e.g. traceback).
        suppressed: True only for the result of a gated-out call.
    """

    text: str = Field(..., description="Fully substituted message text.")
    trailing_error: Optional[BaseException] = Field(
        default=None,
        description="Exception to be rendered separately by the sink.",
    )
    suppressed: bool = Field(
        default=False,
        description="True when the call was rejected by the severity gate.",
    )

    @property
    def exc_info(self):
        """Returns a ``(type, value, traceback)`` triple for ``logging``."""
        if self.trailing_error is None:
            return None
        err = self.trailing_error
        return (type(err), err, err.__traceback__)

    def __bool__(self) -> bool:
        return not self.suppressed


SUPPRESSED = FormattedMessage(text="", suppressed=True)
"""Result returned for calls whose severity is below the threshold."""
