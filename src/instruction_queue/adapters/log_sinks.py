from __future__ import annotations

import json
from dataclasses import dataclass
from pathlib import Path

from instruction_queue.observability.logging import LogMessage, level_index, log_to_dict
from instruction_queue.ports.log_sink import LogSink


class StdoutLogSink(LogSink):
    # Compact JSON object per line on stdout.
    def emit(self, message: LogMessage) -> None:
        print(_dumps(message), flush=True)


class JsonlLogSink(LogSink):
    # File-backed structured log sink; appends and flushes per message.
    def __init__(self, path: Path) -> None:
        self._path = path
        self._path.parent.mkdir(parents=True, exist_ok=True)
        self._file = self._path.open("a", encoding="utf-8")

    def emit(self, message: LogMessage) -> None:
        self._file.write(_dumps(message) + "\n")
        self._file.flush()

    def close(self) -> None:
        if not self._file.closed:
            self._file.close()


@dataclass(frozen=True, slots=True)
class LevelFilteredLogSink(LogSink):
    # Drops messages below the configured threshold before they reach the inner sink.
    inner: LogSink
    level: str = "info"

    def __post_init__(self) -> None:
        level_index(self.level)

    def emit(self, message: LogMessage) -> None:
        if level_index(message.level) >= level_index(self.level):
            self.inner.emit(message)

    def close(self) -> None:
        close = getattr(self.inner, "close", None)
        if callable(close):
            close()


def _dumps(message: LogMessage) -> str:
    return json.dumps(log_to_dict(message), separators=(",", ":"), ensure_ascii=False, default=str)
