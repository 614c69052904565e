from .drain import DrainInstructions, IngestReport
from .parser import InstructionParser, format_instruction
from .receiver import InstructionMessageReceiver
from .validator import InstructionValidator

__all__ = [
    "DrainInstructions",
    "IngestReport",
    "InstructionMessageReceiver",
    "InstructionParser",
    "InstructionValidator",
    "format_instruction",
]
