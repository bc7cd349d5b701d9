import itertools
from concurrent.futures import ThreadPoolExecutor

import pytest

from lazylog.demo_data import RenderSpy
from lazylog.formatting.formatter import (
    InvalidTemplateError,
    format_event,
    format_if_enabled,
    format_message,
    should_emit,
    substitute,
)
from lazylog.models.enums import Severity
from lazylog.models.message import SUPPRESSED, LogEvent

ORDER = [Severity.TRACE, Severity.DEBUG, Severity.INFO, Severity.WARN, Severity.ERROR]


def test_should_emit_matches_rank_order():
    for threshold, severity in itertools.product(ORDER, ORDER):
        expected = ORDER.index(severity) >= ORDER.index(threshold)
        assert should_emit(threshold, severity) is expected


class TestFormatMessage:
    def test_positional_substitution(self):
        assert format_message("{} and {}", ["a", "b"]).text == "a and b"

    def test_too_few_arguments_leaves_placeholders(self):
        assert format_message("{} and {}", ["a"]).text == "a and {}"
        assert format_message("msg: {}, {}.", ["Hello"]).text == "msg: Hello, {}."

    def test_too_many_arguments_are_ignored(self):
        spy = RenderSpy("never")
        assert format_message("{}", ["a", spy]).text == "a"
        assert spy.calls == 0

    def test_no_placeholders(self):
        assert format_message("plain text", ["ignored"]).text == "plain text"
        assert format_message("", []).text == ""

    def test_trailing_error_is_detached(self):
        err = RuntimeError("boom")
        msg = format_message("msg {} {}", ["x", err])
        assert msg.text == "msg x {}"
        assert msg.trailing_error is err

    def test_trailing_error_never_fills_a_placeholder(self):
        err = RuntimeError("Wrong way to log an exception.")
        msg = format_message("msg: {}, {}", ["Hello", err])
        assert "Wrong way" not in msg.text
        assert msg.text == "msg: Hello, {}"
        assert msg.trailing_error is err

    def test_only_an_error_argument(self):
        err = RuntimeError("Here in exception.")
        msg = format_message("Info Logging Parameter Exception: ", [err])
        assert msg.text == "Info Logging Parameter Exception: "
        assert msg.trailing_error is err

    def test_error_not_in_last_position_is_substituted(self):
        err = ValueError("inner")
        msg = format_message("{} then {}", [err, "b"])
        assert msg.text == "inner then b"
        assert msg.trailing_error is None

    def test_explicit_trailing_error_wins(self):
        detached = RuntimeError("detached")
        explicit = ValueError("explicit")
        msg = format_message("{} {}", ["a", detached], trailing_error=explicit)
        assert msg.text == "a {}"
        assert msg.trailing_error is explicit

    def test_escaped_placeholder(self):
        msg = format_message("literal \\{} here", [])
        assert msg.text == "literal {} here"

    def test_escaped_placeholder_consumes_no_argument(self):
        assert format_message("\\{} is {}", ["x"]).text == "{} is x"

    def test_double_escape_keeps_backslash_and_substitutes(self):
        assert format_message("path C:\\\\{}", ["dir"]).text == "path C:\\dir"

    def test_malformed_endings_are_literal(self):
        assert format_message("open {", ["a"]).text == "open {"
        assert format_message("slash \\", ["a"]).text == "slash \\"
        assert format_message("{}{", ["a"]).text == "a{"

    def test_adjacent_placeholders(self):
        assert format_message("{}{}{}", [1, 2, 3]).text == "123"

    def test_argument_text_is_not_rescanned(self):
        assert format_message("{} {}", ["{}", "b"]).text == "{} b"

    def test_arguments_are_rendered(self):
        spy = RenderSpy({"42": "Yep"})
        msg = format_message("answer: {}", [spy])
        assert msg.text == "answer: {'42': 'Yep'}"
        assert spy.calls == 1

    def test_none_args(self):
        assert format_message("{}", None).text == "{}"

    def test_idempotent(self):
        err = RuntimeError("e")
        first = format_message("{} {} {}", ["a", 1, err])
        second = format_message("{} {} {}", ["a", 1, err])
        assert first == second

    def test_none_template_rejected(self):
        with pytest.raises(InvalidTemplateError):
            format_message(None, ["a"])

    def test_non_string_template_rejected(self):
        with pytest.raises(InvalidTemplateError):
            format_message(42, [])

    def test_invalid_template_is_value_error(self):
        assert issubclass(InvalidTemplateError, ValueError)

    def test_render_failure_propagates(self):
        class Broken:
            def __str__(self):
                raise KeyError("broken")

        with pytest.raises(KeyError):
            format_message("{}", [Broken()])

    def test_unused_broken_argument_is_not_rendered(self):
        class Broken:
            def __str__(self):
                raise KeyError("broken")

        assert format_message("{}", ["ok", Broken()]).text == "ok"


class TestFormatIfEnabled:
    def test_suppressed_never_renders(self):
        spy = RenderSpy("x")
        result = format_if_enabled(Severity.INFO, Severity.TRACE, "{}", [spy])
        assert result is SUPPRESSED
        assert spy.calls == 0

    def test_emitted_renders_once(self):
        spy = RenderSpy("x")
        result = format_if_enabled(Severity.INFO, Severity.ERROR, "v={}", [spy])
        assert result.text == "v=x"
        assert not result.suppressed
        assert spy.calls == 1

    def test_template_checked_even_when_suppressed(self):
        with pytest.raises(InvalidTemplateError):
            format_if_enabled(Severity.ERROR, Severity.TRACE, None, [])


def test_substitute_directly():
    assert substitute("{}-{}", ("a",)) == "a-{}"


def test_format_event():
    err = RuntimeError("e")
    event = LogEvent(
        severity=Severity.INFO,
        logger_name="n",
        template="{} {}",
        args=("a",),
        trailing_error=err,
    )
    msg = format_event(event)
    assert msg.text == "a {}"
    assert msg.trailing_error is err


def test_container_holding_a_spy():
    spy = RenderSpy("v")
    msg = format_message("{}", [{"k": spy}])
    assert msg.text == "{'k': RenderSpy('v', calls=0)}"


def test_string_args_is_a_single_argument():
    assert format_message("v={}", "hello").text == "v=hello"
    assert format_message("{} {}", "hello").text == "hello {}"


def test_concurrent_formatting_matches_sequential():
    err = RuntimeError("e")
    cases = [
        ("{} and {}", ["a", "b"]),
        ("{} and {}", ["a"]),
        ("literal \\{} here {}", [42]),
        ("msg {} {}", ["x", err]),
        ("{}", [[1, (2, 3)]]),
    ]
    expected = [format_message(t, a) for t, a in cases]
    failures = []

    def worker():
        for _ in range(200):
            for (template, args), want in zip(cases, expected):
                got = format_message(template, args)
                if got != want:
                    failures.append((template, got.text))

    with ThreadPoolExecutor(max_workers=8) as pool:
        for future in [pool.submit(worker) for _ in range(8)]:
            future.result()

    assert failures == []


def test_concurrent_should_emit():
    pairs = list(itertools.product(ORDER, ORDER))
    expected = [should_emit(t, s) for t, s in pairs]

    def worker(_):
        return [should_emit(t, s) for t, s in pairs]

    with ThreadPoolExecutor(max_workers=8) as pool:
        results = list(pool.map(worker, range(32)))

    assert all(r == expected for r in results)
