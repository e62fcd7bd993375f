"""Menu engine error taxonomy."""

from __future__ import annotations


class MenuEngineError(Exception):
    """Base class for errors reported by the menu engine."""


class InvalidOptionsError(MenuEngineError, ValueError):
    """Raised before any scoring when an option or profile value is out of range."""

    def __init__(self, field_name: str, message: str) -> None:
        super().__init__(f"{field_name}: {message}")
        self.field_name = field_name


class NoCandidatesError(MenuEngineError):
    """Raised when no requested meal slot has a single eligible candidate."""

    def __init__(self, missing_slots: list[str]) -> None:
        super().__init__(
            "No candidate recipes for any requested meal slot: " + ", ".join(missing_slots)
        )
        self.missing_slots = list(missing_slots)
