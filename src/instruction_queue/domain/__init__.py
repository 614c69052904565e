from .errors import ParsingError, ValidationError
from .instruction import Instruction, InstructionType
from .messages import RawLine
from .violations import ViolationCode

# Public domain exports keep imports explicit across layers.
__all__ = [
    "Instruction",
    "InstructionType",
    "ParsingError",
    "RawLine",
    "ValidationError",
    "ViolationCode",
]
