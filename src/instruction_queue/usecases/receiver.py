from __future__ import annotations

from instruction_queue.ports.message_receiver import MessageReceiver
from instruction_queue.services.instruction_queue import InstructionQueue
from instruction_queue.usecases.parser import InstructionParser
from instruction_queue.usecases.validator import InstructionValidator


class InstructionMessageReceiver(MessageReceiver):
    # parse -> validate -> enqueue; the first failure propagates and nothing is enqueued.
    def __init__(
        self,
        parser: InstructionParser | None = None,
        validator: InstructionValidator | None = None,
        queue: InstructionQueue | None = None,
    ) -> None:
        self.parser = parser if parser is not None else InstructionParser()
        self.validator = validator if validator is not None else InstructionValidator()
        self.queue = queue if queue is not None else InstructionQueue()

    def receive(self, message: str | None) -> None:
        instruction = self.parser.parse(message)
        self.validator.validate(instruction)
        self.queue.enqueue(instruction)
