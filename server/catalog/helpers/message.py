"""Uniform response payloads built from string codes."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class ErrorMessage:
    """A business-rule failure returned by a service instead of raised."""
    message: str
    error: bool = True

    def to_dict(self) -> dict:
        return {"error": self.error, "message": self.message}


def build_message(code: str) -> dict:
    return {"message": code}


def build_error_message(code: str) -> ErrorMessage:
    return ErrorMessage(message=code)
