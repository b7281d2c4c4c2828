"""Errors raised for caller-supplied input that fails basic shape checks."""
from __future__ import annotations

from typing import Iterable, List


class InputConstraintError(ValueError):
    """Raised when a prompt or scene is rejected before compilation or validation."""

    def __init__(self, errors: Iterable[str]):
        self.errors: List[str] = list(errors)
        super().__init__("; ".join(self.errors) or "Invalid input")
