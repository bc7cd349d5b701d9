"""Generators of expensive-to-render objects for demos and tests.

None of these affect formatting; they exist to make the cost of eager
rendering visible.
"""

import random
import secrets
import string
from typing import Any, Optional

from lazylog.formatting.arguments import Renderable

UPPER = string.ascii_uppercase
LOWER = string.ascii_lowercase
DIGITS = string.digits
ALPHANUM = UPPER + LOWER + DIGITS


class RandomString:
    """Produces random strings of a fixed length.

    Args:
        length: Number of characters per string. Must be at least 1.
        rng: Random generator. Defaults to ``secrets.SystemRandom()``.
        symbols: Characters to choose from. Needs at least two.
    """

    def __init__(
        self,
        length: int = 21,
        rng: Optional[random.Random] = None,
        symbols: str = ALPHANUM,
    ):
        if length < 1:
            raise ValueError("length must be at least 1")
        if len(symbols) < 2:
            raise ValueError("symbols must contain at least two characters")
        self.length = length
        self.rng = rng or secrets.SystemRandom()
        self.symbols = symbols

    def next_string(self) -> str:
        return "".join(self.rng.choice(self.symbols) for _ in range(self.length))


def random_alpha_string(count: int, rng: Optional[random.Random] = None) -> str:
    """Returns ``count`` random upper-case letters."""
    rng = rng or random.Random()
    return "".join(rng.choice(UPPER) for _ in range(count))


class LongLogMessageObject:
    """An object that does little more than produce an ugly, long ``str()``."""

    def __init__(self, entries: int = 1000, rng: Optional[random.Random] = None):
        rng = rng or random.Random()
        self.big_ugly_map = {
            random_alpha_string(10, rng): random_alpha_string(10, rng)
            for _ in range(entries)
        }

    def __str__(self) -> str:
        return str(self.big_ugly_map)

    def longer_logging_message(self) -> str:
        return (
            "This is a longer logging message even though it doesn't add "
            f"anything to str(): {self}"
        )


class UltimateAnswer:
    ANSWERS = {"41": "Almost", "42": "Yep", "43": "Too Far"}

    def __str__(self) -> str:
        return str(self.ANSWERS)

    def to_trace_logging_string(self) -> str:
        return (
            "Trying to figure out the Ultimate Answer to Life, "
            "the Universe and Everything."
        )


class RenderSpy(Renderable):
    """Renderable that counts how often its text was produced."""

    __slots__ = ("value", "calls")

    def __init__(self, value: Any = "spy"):
        self.value = value
        self.calls = 0
        super().__init__(self._produce)

    def __repr__(self) -> str:
        return f"RenderSpy({self.value!r}, calls={self.calls})"

    def _produce(self) -> Any:
        self.calls += 1
        return self.value
