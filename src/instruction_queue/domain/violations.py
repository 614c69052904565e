from __future__ import annotations

from enum import Enum


# Values double as the display text joined into ValidationError messages.
class ViolationCode(str, Enum):
    INSTRUCTION_MISSING = "Instruction message is null"
    INVALID_TYPE = "Instruction type is not valid"
    INVALID_PRODUCT_CODE = "Product code is not valid"
    INVALID_QUANTITY = "Quantity is not valid"
    INVALID_UOM = "UOM is not valid"
    INVALID_TIMESTAMP = "Timestamp is not valid"
