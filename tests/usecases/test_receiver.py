from __future__ import annotations

import pytest

from instruction_queue.domain.errors import ParsingError, ValidationError
from instruction_queue.domain.instruction import Instruction
from instruction_queue.domain.violations import ViolationCode
from instruction_queue.ports.message_receiver import MessageReceiver
from instruction_queue.services.instruction_queue import InstructionQueue
from instruction_queue.usecases.parser import InstructionParser
from instruction_queue.usecases.receiver import InstructionMessageReceiver
from instruction_queue.usecases.validator import InstructionValidator

VALID = "InstructionMessage A MZ89 5678 50 2015-03-05T10:04:56.012Z"
INVALID = "InstructionMessage A B 5678 50 2015-03-05T10:04:56.012Z"
INCORRECT = "InstructionMessage A MZ89 5678 50"


class _RecordingValidator(InstructionValidator):
    # Records what reached validation.
    def __init__(self) -> None:
        super().__init__()
        self.seen: list[Instruction | None] = []

    def validate(self, instruction: Instruction | None) -> None:
        self.seen.append(instruction)
        super().validate(instruction)


def test_receiver_satisfies_port() -> None:
    assert isinstance(InstructionMessageReceiver(), MessageReceiver)


def test_receive_valid_message_enqueues() -> None:
    queue = InstructionQueue()
    receiver = InstructionMessageReceiver(queue=queue)
    receiver.receive(VALID)
    assert queue.count() == 1
    head = queue.peek()
    assert head is not None
    assert head.product_code == "MZ89"


def test_receive_incorrect_message_raises_parsing_error() -> None:
    queue = InstructionQueue()
    validator = _RecordingValidator()
    receiver = InstructionMessageReceiver(validator=validator, queue=queue)
    with pytest.raises(ParsingError) as exc:
        receiver.receive(INCORRECT)
    assert "number of arguments" in str(exc.value)
    # Validation never runs when parsing fails.
    assert validator.seen == []
    assert queue.count() == 0


def test_receive_invalid_message_raises_validation_error() -> None:
    queue = InstructionQueue()
    receiver = InstructionMessageReceiver(queue=queue)
    with pytest.raises(ValidationError) as exc:
        receiver.receive(INVALID)
    assert exc.value.violations == (ViolationCode.INVALID_PRODUCT_CODE,)
    assert "Product code" in str(exc.value)
    assert queue.count() == 0


def test_receive_conversion_error_propagates_unwrapped() -> None:
    queue = InstructionQueue()
    receiver = InstructionMessageReceiver(queue=queue)
    with pytest.raises(ValueError) as exc:
        receiver.receive("InstructionMessage A MZ89 many 50 2015-03-05T10:04:56.012Z")
    assert not isinstance(exc.value, (ParsingError, ValidationError))
    assert queue.count() == 0


def test_receive_empty_message() -> None:
    queue = InstructionQueue()
    receiver = InstructionMessageReceiver(queue=queue)
    for message in (None, ""):
        with pytest.raises(ParsingError):
            receiver.receive(message)
    assert queue.count() == 0


def test_receiver_uses_injected_collaborators() -> None:
    parser = InstructionParser()
    validator = _RecordingValidator()
    queue = InstructionQueue()
    receiver = InstructionMessageReceiver(parser, validator, queue)
    receiver.receive(VALID)
    assert validator.seen == [parser.parse(VALID)]
    assert receiver.queue is queue
