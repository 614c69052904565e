from __future__ import annotations

from collections.abc import Iterable

from .violations import ViolationCode

VIOLATIONS_DELIMITER = "\n"


class ParsingError(ValueError):
    # Raised for malformed wire messages: empty input, token count, header.
    def __init__(self, reason: str) -> None:
        super().__init__(reason)
        self.reason = reason


class ValidationError(ValueError):
    # Carries every violated rule in check order; the text form joins them with newlines.
    def __init__(self, violations: Iterable[ViolationCode]) -> None:
        self.violations = tuple(violations)
        if not self.violations:
            raise ValueError("ValidationError requires at least one violation")
        super().__init__(VIOLATIONS_DELIMITER.join(v.value for v in self.violations))

    @property
    def reasons(self) -> list[str]:
        return [v.value for v in self.violations]
