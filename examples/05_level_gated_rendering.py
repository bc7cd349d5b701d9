"""Level-gated rendering with explicit deferred arguments.

This example demonstrates:
1. ``deferred()`` for values that need a custom rendering method.
2. An explicit ``is_debug_enabled()`` guard for work that cannot be deferred.
3. ``log_joined()``, which concatenates only when the level is enabled.
"""

from lazylog.config import LevelConfig
from lazylog.demo_data import RenderSpy, UltimateAnswer
from lazylog.formatting.arguments import deferred
from lazylog.logger import LoggerFactory
from lazylog.models.enums import Severity
from lazylog.sinks.memory import MemorySink


def run_example():
    sink = MemorySink()
    config = LevelConfig(root=Severity.INFO, loggers={"example.gated.verbose": Severity.TRACE})
    factory = LoggerFactory(config, sink)
    quiet = factory.get_logger("example.gated")
    verbose = factory.get_logger("example.gated.verbose")
    answer = UltimateAnswer()

    # The bound method is not called while trace is off.
    quiet.trace("Custom string: {}", deferred(answer.to_trace_logging_string))
    verbose.trace("Custom string: {}", deferred(answer.to_trace_logging_string))

    # Guard work that has to happen before the call.
    if quiet.is_debug_enabled():
        quiet.debug("Expensive summary: {}", answer.to_trace_logging_string())

    spy = RenderSpy("joined")
    quiet.log_joined(Severity.DEBUG, "parts: ", spy, ", ", 42)
    verbose.log_joined(Severity.DEBUG, "parts: ", spy, ", ", 42)
    print(f"Spy rendered {spy.calls} time(s)")

    for record in sink.records:
        print(f"{record.logger_name} [{record.severity.value}] {record.message.text}")


if __name__ == "__main__":
    run_example()
