from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from typing import Literal

from instruction_queue.domain.errors import ParsingError, ValidationError
from instruction_queue.domain.messages import RawLine
from instruction_queue.observability.logging import LogMessage
from instruction_queue.ports.log_sink import LogSink
from instruction_queue.ports.message_receiver import MessageReceiver
from instruction_queue.ports.output_sink import OutputSink
from instruction_queue.services.instruction_queue import InstructionQueue
from instruction_queue.usecases.parser import format_instruction


@dataclass(frozen=True, slots=True)
class IngestReport:
    accepted: int
    rejected: int


@dataclass(frozen=True, slots=True)
class DrainInstructions:
    """Batch shell around a receiver: feed lines in, then drain the queue out.

    Rejected lines are reported through the log sink. With ``on_error="fail"`` the
    rejection is re-raised after it has been logged; with ``"skip"`` the batch goes on.
    """

    receiver: MessageReceiver
    queue: InstructionQueue
    log_sink: LogSink
    on_error: Literal["skip", "fail"] = "skip"

    def ingest(self, lines: Iterable[RawLine]) -> IngestReport:
        accepted = 0
        rejected = 0
        for line in lines:
            try:
                self.receiver.receive(line.raw_text)
            except ValueError as exc:  # ParsingError, ValidationError and token conversion
                rejected += 1
                self.log_sink.emit(_rejection(line, exc))
                if self.on_error == "fail":
                    raise
                continue
            accepted += 1

        self.log_sink.emit(
            LogMessage(
                level="info",
                message="ingest finished",
                fields={"accepted": accepted, "rejected": rejected, "queued": self.queue.count()},
            )
        )
        return IngestReport(accepted=accepted, rejected=rejected)

    def drain(self, output_sink: OutputSink) -> int:
        written = 0
        while not self.queue.is_empty():
            instruction = self.queue.dequeue()
            assert instruction is not None
            output_sink.write_line(format_instruction(instruction))
            written += 1
        return written


def error_reasons(exc: Exception) -> list[str]:
    if isinstance(exc, ValidationError):
        return exc.reasons
    if isinstance(exc, ParsingError):
        return [exc.reason]
    return [str(exc)]


def _rejection(line: RawLine, exc: Exception) -> LogMessage:
    return LogMessage(
        level="warning",
        message="instruction rejected",
        fields={"line_no": line.line_no, "error": type(exc).__name__, "reasons": error_reasons(exc)},
    )
