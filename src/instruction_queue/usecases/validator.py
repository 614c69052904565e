from __future__ import annotations

import re
from collections.abc import Callable
from datetime import UTC, datetime

from instruction_queue.domain.errors import ValidationError
from instruction_queue.domain.instruction import Instruction
from instruction_queue.domain.violations import ViolationCode

UNIX_EPOCH = datetime(1970, 1, 1, tzinfo=UTC)
UOM_MIN_VALUE = 0
UOM_MAX_VALUE = 256

_TYPE_PATTERN = re.compile(r"[A-D]")
_PRODUCT_CODE_PATTERN = re.compile(r"[A-Z]{2}[0-9]{2}")


def utc_now() -> datetime:
    return datetime.now(tz=UTC)


class InstructionValidator:
    """Checks business rules of a parsed instruction.

    All field checks run; violations are collected in a fixed order (type, product
    code, quantity, uom, timestamp) and raised together as one ValidationError.
    """

    def __init__(self, clock: Callable[[], datetime] = utc_now) -> None:
        self._clock = clock

    def validate(self, instruction: Instruction | None) -> None:
        violations = self.violations(instruction)
        if violations:
            raise ValidationError(violations)

    def violations(self, instruction: Instruction | None) -> list[ViolationCode]:
        if instruction is None:
            return [ViolationCode.INSTRUCTION_MISSING]

        violations: list[ViolationCode] = []
        if not _matches(_TYPE_PATTERN, instruction.type):
            violations.append(ViolationCode.INVALID_TYPE)
        if not _matches(_PRODUCT_CODE_PATTERN, instruction.product_code):
            violations.append(ViolationCode.INVALID_PRODUCT_CODE)
        if instruction.quantity <= 0:
            violations.append(ViolationCode.INVALID_QUANTITY)
        if not UOM_MIN_VALUE <= instruction.uom < UOM_MAX_VALUE:
            violations.append(ViolationCode.INVALID_UOM)
        if not self._timestamp_is_valid(instruction.timestamp):
            violations.append(ViolationCode.INVALID_TIMESTAMP)
        return violations

    def _timestamp_is_valid(self, timestamp: datetime | None) -> bool:
        if timestamp is None:
            return False
        if timestamp.tzinfo is None:
            # Naive values are read as UTC, matching what the parser produces.
            timestamp = timestamp.replace(tzinfo=UTC)
        return UNIX_EPOCH < timestamp <= self._clock()


def _matches(pattern: re.Pattern[str], value: str | None) -> bool:
    return isinstance(value, str) and pattern.fullmatch(value) is not None
