from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from enum import Enum


class InstructionType(str, Enum):
    # Priority classes; C and D share the lowest rank.
    A = "A"
    B = "B"
    C = "C"
    D = "D"

    @property
    def rank(self) -> int:
        return _RANKS[self]


_RANKS = {
    InstructionType.A: 3,
    InstructionType.B: 2,
    InstructionType.C: 1,
    InstructionType.D: 1,
}


@dataclass(frozen=True, slots=True)
class Instruction:
    # Instruction is immutable once built; the parser fills it without any range checks.
    type: str | None
    product_code: str | None
    quantity: int
    uom: int
    timestamp: datetime | None

    @property
    def priority(self) -> int:
        """Rank of the instruction's type; only meaningful for validated instructions."""
        return InstructionType(self.type).rank
