from __future__ import annotations

from dataclasses import dataclass


class FramingError(ValueError):
    pass


class DecodeError(ValueError):
    def __init__(self, diagnostics: list["Diagnostic"]) -> None:
        self.diagnostics = diagnostics
        summary = "; ".join(str(item) for item in diagnostics[:5])
        if len(diagnostics) > 5:
            summary = f"{summary}; ... ({len(diagnostics) - 5} more)"
        super().__init__(f"failed to decode {len(diagnostics)} attribute(s): {summary}")


@dataclass(frozen=True)
class Diagnostic:
    code: str
    message: str
    record_index: int | None = None

    def __str__(self) -> str:
        if self.record_index is None:
            return f"{self.code}: {self.message}"
        return f"{self.code}[{self.record_index}]: {self.message}"
