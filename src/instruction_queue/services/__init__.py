from .instruction_queue import InstructionQueue

__all__ = ["InstructionQueue"]
