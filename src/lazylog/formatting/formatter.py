"""Lazy, level-gated message formatting.

A template holds ``{}`` placeholders that are substituted, in order, with
the call's arguments. ``\\{}`` renders a literal ``{}`` without consuming an
argument, and ``\\\\{}`` renders a single backslash followed by a normal
substitution.

Formatting is pure and keeps no state between calls.
"""

from typing import Any, Optional, Sequence

from lazylog.formatting.arguments import render_argument, split_trailing_error
from lazylog.models.enums import Severity
from lazylog.models.message import SUPPRESSED, FormattedMessage, LogEvent

PLACEHOLDER = "{}"
ESCAPE_CHAR = "\\"


class InvalidTemplateError(ValueError):
    pass


def should_emit(threshold: Severity, severity: Severity) -> bool:
    """Returns True iff ``severity`` is at or above ``threshold``."""
    return severity.rank >= threshold.rank


def check_template(template: Any) -> str:
    if template is None:
        raise InvalidTemplateError("Log message template must not be None")
    if not isinstance(template, str):
        raise InvalidTemplateError(
            f"Log message template must be a str, got {type(template).__name__}"
        )
    return template


def substitute(template: str, values: Sequence[Any]) -> str:
    """Replaces placeholders in ``template`` with rendered ``values``.

    Placeholders without a matching value stay literal; values without a
    matching placeholder are never rendered.
    """
    out: list[str] = []
    pos = 0
    next_arg = 0

    while True:
        idx = template.find(PLACEHOLDER, pos)
        if idx == -1:
            out.append(template[pos:])
            break

        escaped = idx >= 1 and template[idx - 1] == ESCAPE_CHAR
        double_escaped = escaped and idx >= 2 and template[idx - 2] == ESCAPE_CHAR

        if escaped and not double_escaped:
            out.append(template[pos : idx - 1])
            out.append(PLACEHOLDER)
        else:
            # A double escape keeps one backslash.
            out.append(template[pos : idx - 1] if double_escaped else template[pos:idx])
            if next_arg < len(values):
                out.append(render_argument(values[next_arg]))
                next_arg += 1
            else:
                out.append(PLACEHOLDER)
        pos = idx + len(PLACEHOLDER)

    return "".join(out)


def format_message(
    template: str,
    args: Optional[Sequence[Any]] = (),
    trailing_error: Optional[BaseException] = None,
) -> FormattedMessage:
    """Builds the final message for an accepted log call.

    Must only be reached once the severity gate has accepted the call:
    every argument that is substituted gets rendered here.

    Args:
        template: Message template with ``{}`` placeholders.
        args: Ordered argument values. An exception in the last position is
            detached and never substituted.
        trailing_error: Exception to attach explicitly. Takes precedence
            over one detached from ``args``.

    Returns:
        The formatted message with the detached exception attached.

    Raises:
        InvalidTemplateError: If ``template`` is None or not a string.
    """
    template = check_template(template)
    values, detached = split_trailing_error(args)
    text = substitute(template, values)
    return FormattedMessage(
        text=text,
        trailing_error=trailing_error if trailing_error is not None else detached,
    )


def format_event(event: LogEvent) -> FormattedMessage:
    return format_message(event.template, event.args, event.trailing_error)


def format_if_enabled(
    threshold: Severity,
    severity: Severity,
    template: str,
    args: Optional[Sequence[Any]] = (),
    trailing_error: Optional[BaseException] = None,
) -> FormattedMessage:
    """Formats the message only when ``severity`` passes ``threshold``.

    The template is validated first, regardless of the gate.

    Returns:
        The formatted message, or ``SUPPRESSED`` when gated out. No
        argument is touched in the suppressed case.
    """
    check_template(template)
    if not should_emit(threshold, severity):
        return SUPPRESSED
    return format_message(template, args, trailing_error)
