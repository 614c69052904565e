from __future__ import annotations

from typing import Protocol, runtime_checkable

from instruction_queue.observability.logging import LogMessage


# LogSink port receives structured log messages from the ingestion shell.
@runtime_checkable
class LogSink(Protocol):
    def emit(self, message: LogMessage) -> None:
        """Publish one structured log message."""
        # Port contract has no implementation; calling it directly is a wiring error.
        raise NotImplementedError("LogSink is a port; use a concrete adapter.")
