import json
import threading
import traceback
from datetime import datetime, timezone
from pathlib import Path
from typing import Any

from ..models.enums import Severity
from ..models.message import FormattedMessage
from .abstract import Sink


class JsonlSink(Sink):
    def __init__(self, path: str = "./lazylog.jsonl") -> None:
        self.path = Path(path)
        self._lock = threading.Lock()

    def emit(
        self, severity: Severity, logger_name: str, message: FormattedMessage
    ) -> None:
        record: dict[str, Any] = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": severity.value,
            "logger": logger_name,
            "message": message.text,
        }
        err = message.trailing_error
        if err is not None:
            record["exception"] = {
                "type": type(err).__name__,
                "message": str(err),
                "traceback": "".join(
                    traceback.format_exception(type(err), err, err.__traceback__)
                ),
            }
        line = json.dumps(record, ensure_ascii=False) + "\n"
        with self._lock:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            with self.path.open("a", encoding="utf-8") as f:
                f.write(line)
