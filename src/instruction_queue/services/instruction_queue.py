from __future__ import annotations

import heapq
from dataclasses import dataclass, field

from instruction_queue.domain.instruction import Instruction


@dataclass(order=True, slots=True)
class _QueueEntry:
    # Heap order: higher rank first, then lower sequence (earlier enqueue).
    neg_rank: int
    sequence: int
    instruction: Instruction = field(compare=False)


class InstructionQueue:
    """Max-priority queue of validated instructions, FIFO within a priority rank.

    Sequence numbers are owned by the queue, start at 1 and are never reused, so an
    instruction enqueued after a dequeue always sorts behind equal-rank entries that
    are still waiting. The queue is meant for a single accessor at a time; callers
    sharing it between threads must guard enqueue/dequeue with their own lock.
    """

    def __init__(self) -> None:
        self._heap: list[_QueueEntry] = []
        self._last_sequence = 0

    def enqueue(self, instruction: Instruction | None) -> None:
        # Absent values are tolerated and ignored.
        if instruction is None:
            return
        self._last_sequence += 1
        heapq.heappush(
            self._heap,
            _QueueEntry(
                neg_rank=-instruction.priority,
                sequence=self._last_sequence,
                instruction=instruction,
            ),
        )

    def peek(self) -> Instruction | None:
        if not self._heap:
            return None
        return self._heap[0].instruction

    def dequeue(self) -> Instruction | None:
        if not self._heap:
            return None
        return heapq.heappop(self._heap).instruction

    def count(self) -> int:
        return len(self._heap)

    def is_empty(self) -> bool:
        return not self._heap

    def __len__(self) -> int:
        return len(self._heap)
