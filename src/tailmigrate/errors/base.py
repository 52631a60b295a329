from __future__ import annotations


class TailmigrateError(Exception):
    def __init__(
        self,
        message: str,
        *,
        line: int | None = None,
        column: int | None = None,
        details: dict | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.line = line
        self.column = column
        self.details = details

    def __str__(self) -> str:
        if self.line is None:
            return self.message
        if self.column is None:
            return f"[line {self.line}] {self.message}"
        return f"[line {self.line}, col {self.column}] {self.message}"


class UnknownPropertyError(TailmigrateError):
    """Raised when a property name has no spacing class prefix."""

    def __init__(self, message: str, *, property_name: str, details: dict | None = None) -> None:
        super().__init__(message, details=details)
        self.property_name = property_name


__all__ = ["TailmigrateError", "UnknownPropertyError"]
