from __future__ import annotations

import pytest

from instruction_queue import (
    InstructionMessageReceiver,
    InstructionQueue,
    ParsingError,
    ValidationError,
)

VALID = "InstructionMessage A MZ89 5678 50 2015-03-05T10:04:56.012Z"


def test_valid_message_is_queued() -> None:
    queue = InstructionQueue()
    receiver = InstructionMessageReceiver(queue=queue)
    receiver.receive(VALID)
    assert queue.count() == 1


def test_invalid_product_code_is_reported() -> None:
    queue = InstructionQueue()
    receiver = InstructionMessageReceiver(queue=queue)
    with pytest.raises(ValidationError) as exc:
        receiver.receive("InstructionMessage A B 5678 50 2015-03-05T10:04:56.012Z")
    assert "Product code is not valid" in str(exc.value)
    assert queue.count() == 0


def test_missing_token_is_reported() -> None:
    queue = InstructionQueue()
    receiver = InstructionMessageReceiver(queue=queue)
    with pytest.raises(ParsingError) as exc:
        receiver.receive("InstructionMessage A MZ89 5678 50")
    assert "number of arguments" in str(exc.value)
    assert queue.count() == 0


@pytest.mark.parametrize(
    "message",
    [
        "",
        "Instruction A MZ89 5678 50 2015-03-05T10:04:56.012Z",
        "InstructionMessage A MZ89 5678 50 2015-03-05T10:04:56.012Z extra",
    ],
)
def test_malformed_messages_leave_queue_untouched(message: str) -> None:
    queue = InstructionQueue()
    receiver = InstructionMessageReceiver(queue=queue)
    receiver.receive(VALID)
    with pytest.raises(ParsingError):
        receiver.receive(message)
    assert queue.count() == 1


def test_every_violation_listed_in_order() -> None:
    queue = InstructionQueue()
    receiver = InstructionMessageReceiver(queue=queue)
    with pytest.raises(ValidationError) as exc:
        receiver.receive("InstructionMessage X mz89 0 256 1970-01-01T00:00:00.000Z")
    assert str(exc.value).splitlines() == [
        "Instruction type is not valid",
        "Product code is not valid",
        "Quantity is not valid",
        "UOM is not valid",
        "Timestamp is not valid",
    ]
    assert queue.count() == 0


def test_received_messages_dequeue_by_priority_then_arrival() -> None:
    queue = InstructionQueue()
    receiver = InstructionMessageReceiver(queue=queue)
    for type_, code in (("C", "CC01"), ("B", "BB01"), ("D", "DD01"), ("A", "AA01"), ("B", "BB02")):
        receiver.receive(f"InstructionMessage {type_} {code} 1 1 2015-03-05T10:04:56.012Z")
    order = []
    while not queue.is_empty():
        order.append(queue.dequeue().product_code)  # type: ignore[union-attr]
    assert order == ["AA01", "BB01", "BB02", "CC01", "DD01"]
    assert queue.dequeue() is None
    assert queue.peek() is None


def test_oversized_quantity_is_not_queued() -> None:
    queue = InstructionQueue()
    receiver = InstructionMessageReceiver(queue=queue)
    with pytest.raises(ValueError):
        receiver.receive("InstructionMessage A MZ89 99999999999999999999 50 2015-03-05T10:04:56.012Z")
    assert queue.count() == 0
