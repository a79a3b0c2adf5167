"""Closed error taxonomy raised by the icon service layer."""

from __future__ import annotations

from typing import Iterable


class IconForgeError(Exception):
    pass


class InvalidConfiguration(IconForgeError):
    def __init__(self, details: Iterable[str], *, error: str = "Invalid configuration") -> None:
        self.details = list(details)
        self.error = error
        super().__init__(f"{error}: {'; '.join(self.details)}")


class UnknownPreset(IconForgeError):
    def __init__(self, preset: str, available: Iterable[str]) -> None:
        self.preset = preset
        self.available = list(available)
        super().__init__(f"Unknown preset '{preset}'; available: {', '.join(self.available)}")


class MissingInput(IconForgeError):
    def __init__(self, message: str = "Missing or invalid input string") -> None:
        self.message = message
        super().__init__(message)


class InternalFailure(IconForgeError):
    """Unexpected exception inside synthesis or inference; carries the original message verbatim."""

    def __init__(self, operation: str, message: str) -> None:
        self.operation = operation
        self.message = message
        super().__init__(f"Failed to {operation}: {message}")


class ModelCallFailed(IconForgeError):
    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)
