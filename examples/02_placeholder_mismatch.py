"""Placeholder and argument counts that do not line up.

This example demonstrates:
1. Two placeholders with a single argument: the second stays literal.
2. Matching counts.
3. More arguments than placeholders: the extras are ignored.
4. Escaping a placeholder with a backslash.
"""

from lazylog.config import LevelConfig
from lazylog.logger import LoggerFactory
from lazylog.sinks.memory import MemorySink


def run_example():
    sink = MemorySink()
    logger = LoggerFactory(LevelConfig(), sink).get_logger("example.mismatch")

    # Invalid: 2 placeholders, 1 argument.
    logger.info("msg: {}, {}.", "Hello")

    # Valid
    logger.info("msg: {}, {}.", "Hello", "World")

    # Invalid: the third argument is never used.
    logger.info("msg: {}, {}.", "Hello", "World", "Again")

    # An array spread over placeholders.
    args = ["one", "two", "three"]
    logger.info("Here is an array : {} {} {}", *args)

    # Escaped marker, no argument consumed.
    logger.info("A literal \\{} and a value {}", 42)

    for text in sink.messages():
        print(text)


if __name__ == "__main__":
    run_example()
