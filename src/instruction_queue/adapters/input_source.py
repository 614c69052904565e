from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from pathlib import Path

from instruction_queue.domain.messages import RawLine
from instruction_queue.ports.input_source import InputSource

_DECODE_ERRORS = {"strict", "replace"}


@dataclass(frozen=True, slots=True)
class FileInputSource(InputSource):
    # File-based InputSource adapter; one wire message per physical line.
    path: Path
    encoding: str = "utf-8"
    decode_errors: str = "strict"

    def __post_init__(self) -> None:
        # Unsupported decode policy must fail fast during adapter construction.
        if self.decode_errors not in _DECODE_ERRORS:
            raise ValueError(f"Unsupported decode_errors policy: {self.decode_errors!r}")

    def read(self) -> Iterable[RawLine]:
        # Streamed line-by-line; only the line terminator is stripped.
        with self.path.open("r", encoding=self.encoding, errors=self.decode_errors, newline=None) as handle:
            for idx, line in enumerate(handle, start=1):
                yield RawLine(line_no=idx, raw_text=line.rstrip("\r\n"))
