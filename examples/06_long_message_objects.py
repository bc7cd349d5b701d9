"""Timing eager versus lazy rendering of a large object.

This example demonstrates:
1. Building a ``LongLogMessageObject`` with a thousand random entries.
2. Comparing suppressed trace calls that pre-render against ones that don't.
"""

import random
import time

from lazylog.config import LevelConfig
from lazylog.demo_data import LongLogMessageObject, RandomString
from lazylog.logger import LoggerFactory
from lazylog.sinks.memory import MemorySink

ITERATIONS = 200


def run_example():
    rng = random.Random(42)
    big = LongLogMessageObject(rng=rng)
    logger = LoggerFactory(LevelConfig(), MemorySink()).get_logger("example.long")

    start = time.perf_counter()
    for _ in range(ITERATIONS):
        logger.trace("Eager: {}", big.longer_logging_message())
    eager = time.perf_counter() - start

    start = time.perf_counter()
    for _ in range(ITERATIONS):
        logger.trace("Lazy: {}", big)
    lazy = time.perf_counter() - start

    print(f"Eager rendering, {ITERATIONS} suppressed calls: {eager * 1000:.2f} ms")
    print(f"Lazy rendering,  {ITERATIONS} suppressed calls: {lazy * 1000:.2f} ms")

    session_ids = RandomString(rng=rng)
    logger.info("Session {} created", session_ids.next_string())


if __name__ == "__main__":
    run_example()
