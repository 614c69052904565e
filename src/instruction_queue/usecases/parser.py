from __future__ import annotations

import re
from datetime import UTC, datetime

from instruction_queue.domain.errors import ParsingError
from instruction_queue.domain.instruction import Instruction

MESSAGE_HEADER = "InstructionMessage"
ARGUMENTS_DELIMITER = " "
TIMESTAMP_FORMAT = "%Y-%m-%dT%H:%M:%S.%fZ"

# Wire positions: header, type, product code, quantity, uom, timestamp.
_REQUIRED_ARGUMENTS = 6
_HEADER, _TYPE, _PRODUCT_CODE, _QUANTITY, _UOM, _TIMESTAMP = range(_REQUIRED_ARGUMENTS)

_INTEGER_PATTERN = re.compile(r"[+-]?[0-9]+")
# Quantity and uom are signed 32-bit on the wire.
_INT_MIN, _INT_MAX = -(2**31), 2**31 - 1
_TIMESTAMP_PATTERN = re.compile(r"[0-9]{4}-[0-9]{2}-[0-9]{2}T[0-9]{2}:[0-9]{2}:[0-9]{2}\.[0-9]{3}Z")


class InstructionParser:
    """Turns one wire line into an Instruction.

    Only the message shape is checked here (emptiness, token count, header). Field
    values are converted but never range-checked; that belongs to the validator.
    Conversion failures of quantity, uom and timestamp surface as the plain
    ``ValueError`` of the conversion, not as ``ParsingError``.
    """

    def parse(self, message: str | None) -> Instruction:
        if not message:
            raise ParsingError("The message is empty")

        arguments = message.split(ARGUMENTS_DELIMITER)
        if len(arguments) != _REQUIRED_ARGUMENTS:
            raise ParsingError("Incorrect number of arguments in message")
        if arguments[_HEADER] != MESSAGE_HEADER:
            raise ParsingError("Message header is missing or invalid")

        return Instruction(
            type=arguments[_TYPE],
            product_code=arguments[_PRODUCT_CODE],
            quantity=parse_integer(arguments[_QUANTITY]),
            uom=parse_integer(arguments[_UOM]),
            timestamp=parse_timestamp(arguments[_TIMESTAMP]),
        )

    def __call__(self, message: str | None) -> Instruction:
        return self.parse(message)


def parse_integer(text: str) -> int:
    # int() alone would also accept underscores and surrounding whitespace.
    if not _INTEGER_PATTERN.fullmatch(text):
        raise ValueError(f"invalid literal for int() with base 10: {text!r}")
    value = int(text)
    if not _INT_MIN <= value <= _INT_MAX:
        raise ValueError(f"integer out of 32-bit range: {text!r}")
    return value


def parse_timestamp(text: str) -> datetime:
    # strptime's %f takes 1-6 digits and %m/%d take one; the wire format is fixed-width.
    if not _TIMESTAMP_PATTERN.fullmatch(text):
        raise ValueError(f"time data {text!r} does not match format {TIMESTAMP_FORMAT!r}")
    return datetime.strptime(text, TIMESTAMP_FORMAT).replace(tzinfo=UTC)


def format_timestamp(value: datetime) -> str:
    if value.tzinfo is not None:
        value = value.astimezone(UTC)
    return value.strftime("%Y-%m-%dT%H:%M:%S.") + f"{value.microsecond // 1000:03d}Z"


def format_instruction(instruction: Instruction) -> str:
    """Render an instruction back into its single-line wire form."""
    if instruction.timestamp is None:
        raise ValueError("Instruction without timestamp has no wire form")
    return ARGUMENTS_DELIMITER.join(
        [
            MESSAGE_HEADER,
            str(instruction.type),
            str(instruction.product_code),
            str(instruction.quantity),
            str(instruction.uom),
            format_timestamp(instruction.timestamp),
        ]
    )
