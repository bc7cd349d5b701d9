"""Loading level configuration and writing to different sinks.

This example demonstrates:
1. Loading per-logger levels from a YAML file.
2. Hierarchical lookup of a logger's effective level.
3. Writing the same calls to stdout (JSONL) and to a JSONL file.
"""

import tempfile
from pathlib import Path

from lazylog.config import load_level_config
from lazylog.logger import LoggerFactory
from lazylog.observability.logging import setup_logging
from lazylog.sinks.jsonl import JsonlSink
from lazylog.sinks.stdlib import StdlibSink

CONFIG_YAML = """\
root: WARN
loggers:
  app.db: DEBUG
  app.db.pool: TRACE
"""


def run_example():
    setup_logging(level="TRACE")

    with tempfile.TemporaryDirectory() as tmp:
        config_path = Path(tmp) / "levels.yaml"
        config_path.write_text(CONFIG_YAML, encoding="utf-8")
        config = load_level_config(config_path, environ={})

        for name in ("app", "app.db", "app.db.pool", "app.db.query"):
            print(f"{name}: {config.level_for(name).value}")

        stdout_factory = LoggerFactory(config, StdlibSink())
        stdout_factory.get_logger("app.db.query").debug("Query took {} ms", 12)
        stdout_factory.get_logger("app").info("Not emitted, root is WARN")

        file_sink = JsonlSink(str(Path(tmp) / "out.jsonl"))
        file_factory = LoggerFactory(config, file_sink)
        file_factory.get_logger("app.db.pool").trace("Pool size {}", 8)
        file_factory.get_logger("app").error("Failed", ValueError("boom"))

        print("\n--- JSONL file ---")
        print(file_sink.path.read_text(encoding="utf-8"))


if __name__ == "__main__":
    run_example()
