"""Hello world with an explicit level guard.

This example demonstrates:
1. Building a logger factory with an injected configuration and sink.
2. Guarding a call with ``is_info_enabled()``.
3. Passing the value as an argument instead of pre-rendering it.
"""

from lazylog.config import LevelConfig
from lazylog.logger import LoggerFactory
from lazylog.sinks.memory import MemorySink


class HelloWorld:
    pass


def run_example():
    sink = MemorySink()
    factory = LoggerFactory(LevelConfig(), sink)
    logger = factory.get_logger(HelloWorld)

    s = "Log this."

    # The guard is redundant here: info() checks the same threshold.
    if logger.is_info_enabled():
        logger.info("Hello World {}", s)

    for record in sink.records:
        print(f"[{record.severity.value}] {record.logger_name}: {record.message.text}")


if __name__ == "__main__":
    run_example()
