from __future__ import annotations

from typing import Protocol, runtime_checkable


# MessageReceiver is the entry point upstream producers hand raw lines to.
@runtime_checkable
class MessageReceiver(Protocol):
    def receive(self, message: str | None) -> None:
        """Accept one raw wire message or raise."""
        # Port contract has no implementation; calling it directly is a wiring error.
        raise NotImplementedError("MessageReceiver is a port; use a concrete receiver.")
