import random

import pytest

from lazylog.demo_data import (
    ALPHANUM,
    LongLogMessageObject,
    RandomString,
    RenderSpy,
    UltimateAnswer,
    random_alpha_string,
)


class TestRandomString:
    def test_default_length(self):
        value = RandomString().next_string()
        assert len(value) == 21
        assert all(c in ALPHANUM for c in value)

    def test_custom_symbols(self):
        gen = RandomString(50, random.Random(1), symbols="ab")
        assert set(gen.next_string()) <= {"a", "b"}

    def test_seeded_generator_is_reproducible(self):
        a = RandomString(10, random.Random(7)).next_string()
        b = RandomString(10, random.Random(7)).next_string()
        assert a == b

    def test_invalid_length(self):
        with pytest.raises(ValueError):
            RandomString(0)

    def test_too_few_symbols(self):
        with pytest.raises(ValueError):
            RandomString(5, symbols="a")


def test_random_alpha_string():
    value = random_alpha_string(10, random.Random(3))
    assert len(value) == 10
    assert value.isalpha() and value.isupper()


class TestLongLogMessageObject:
    def test_str_renders_map(self):
        obj = LongLogMessageObject(entries=5, rng=random.Random(0))
        assert len(obj.big_ugly_map) == 5
        assert str(obj) == str(obj.big_ugly_map)

    def test_longer_message(self):
        obj = LongLogMessageObject(entries=2, rng=random.Random(0))
        message = obj.longer_logging_message()
        assert message.startswith("This is a longer logging message")
        assert message.endswith(str(obj))


def test_ultimate_answer():
    answer = UltimateAnswer()
    assert "'42': 'Yep'" in str(answer)
    assert "Ultimate Answer" in answer.to_trace_logging_string()


def test_render_spy_counts():
    spy = RenderSpy(42)
    assert spy.calls == 0
    assert spy.render() == "42"
    assert str(spy) == "42"
    assert spy.calls == 2
