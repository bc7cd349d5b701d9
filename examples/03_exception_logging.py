"""Logging exceptions as the trailing argument.

This example demonstrates:
1. The wrong way: giving the exception its own placeholder.
2. The right way: the exception goes last, without a placeholder.
3. ``logger.exception()`` inside an ``except`` block.
"""

from lazylog.config import LevelConfig
from lazylog.logger import LoggerFactory
from lazylog.observability.logging import setup_logging
from lazylog.sinks.stdlib import StdlibSink


def run_example():
    setup_logging(level="DEBUG")
    logger = LoggerFactory(LevelConfig(), StdlibSink()).get_logger(
        "example.exceptions"
    )

    # Invalid: the exception does not need a placeholder. It is detached
    # anyway and the second {} is left in the text.
    logger.error("msg: {}, {}", "Hello", RuntimeError("Wrong way to log an exception."))

    # Valid. The exception, including its message, is rendered as a traceback.
    logger.error("msg: {}", "Hello", RuntimeError("Correct way to log an exception."))

    # Valid, no placeholders at all.
    logger.info("Info Logging Parameter Exception: ", RuntimeError("Here in exception."))

    try:
        1 / 0  # type: ignore
    except ZeroDivisionError:
        logger.exception("Division failed for {}", "demo")

    print("\n--- Example Complete ---")


if __name__ == "__main__":
    run_example()
