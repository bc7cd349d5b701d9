"""String concatenation versus parameterized messages.

This example demonstrates:
1. Concatenating before the call renders the object even when the level
   is off.
2. Calling ``str()`` on the argument has the same problem.
3. Passing the object as an argument defers rendering until it is needed.
"""

from lazylog.config import LevelConfig
from lazylog.demo_data import RenderSpy
from lazylog.logger import LoggerFactory
from lazylog.models.enums import Severity
from lazylog.sinks.memory import MemorySink


def run_example():
    sink = MemorySink()
    logger = LoggerFactory(LevelConfig(root=Severity.INFO), sink).get_logger(
        "example.concat"
    )
    answer = RenderSpy({"41": "Almost", "42": "Yep", "43": "Too Far"})

    # Don't do this: the concatenation renders the answer before info() is called.
    logger.info("Info Logging String Concatenation: " + str(answer))
    print(f"After concatenation (INFO, emitted): {answer.calls} render(s)")

    # Don't do this: trace is off, but str() has already run.
    logger.trace("Trace Logging str(): {}", str(answer))
    print(f"After trace with str() (suppressed): {answer.calls} render(s)")

    # Do this: nothing is rendered while trace is off.
    logger.trace("Trace Logging Parameter: {}", answer)
    print(f"After trace with parameter (suppressed): {answer.calls} render(s)")

    # Do this: rendered once, because info is on.
    logger.info("Info Logging Parameter: {}", answer)
    print(f"After info with parameter (emitted): {answer.calls} render(s)")

    # Primitive arithmetic is cheap; pass the result directly.
    a, b = 12, 222
    logger.info("Here is a calc : {}", a - b)

    logger.info("Logging with \n formatting!")

    print()
    for text in sink.messages():
        print(text)


if __name__ == "__main__":
    run_example()
