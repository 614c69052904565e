from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class RawLine:
    # RawLine keeps the input order through line_no (1-based).
    line_no: int
    raw_text: str
