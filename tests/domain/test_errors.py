from __future__ import annotations

import pytest

from instruction_queue.domain.errors import ParsingError, ValidationError
from instruction_queue.domain.violations import ViolationCode


def test_violation_codes_carry_display_text() -> None:
    assert ViolationCode.INSTRUCTION_MISSING.value == "Instruction message is null"
    assert ViolationCode.INVALID_TYPE.value == "Instruction type is not valid"
    assert ViolationCode.INVALID_PRODUCT_CODE.value == "Product code is not valid"
    assert ViolationCode.INVALID_QUANTITY.value == "Quantity is not valid"
    assert ViolationCode.INVALID_UOM.value == "UOM is not valid"
    assert ViolationCode.INVALID_TIMESTAMP.value == "Timestamp is not valid"


def test_validation_error_joins_violations_with_newlines() -> None:
    error = ValidationError([ViolationCode.INVALID_TYPE, ViolationCode.INVALID_UOM])
    assert error.violations == (ViolationCode.INVALID_TYPE, ViolationCode.INVALID_UOM)
    assert str(error) == "Instruction type is not valid\nUOM is not valid"
    assert error.reasons == ["Instruction type is not valid", "UOM is not valid"]


def test_validation_error_requires_violations() -> None:
    with pytest.raises(ValueError):
        ValidationError([])


def test_parsing_error_keeps_reason() -> None:
    error = ParsingError("The message is empty")
    assert error.reason == "The message is empty"
    assert str(error) == "The message is empty"
    assert isinstance(error, ValueError)
