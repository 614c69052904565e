from .domain import Instruction, InstructionType, ParsingError, ValidationError, ViolationCode
from .services import InstructionQueue
from .usecases import InstructionMessageReceiver, InstructionParser, InstructionValidator

__all__ = [
    "Instruction",
    "InstructionMessageReceiver",
    "InstructionParser",
    "InstructionQueue",
    "InstructionType",
    "InstructionValidator",
    "ParsingError",
    "ValidationError",
    "ViolationCode",
]
