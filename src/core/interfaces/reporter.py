"""Outcome reporting contract.

Why Protocol:
- Menus only need to say "this worked" or "this failed"; how it looks (colors,
  plain text, captured in a test) is an adapter concern.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class Reporter(Protocol):
    """Minimal contract for user-facing outcome messages."""

    def success(self, message: str) -> None:
        ...

    def error(self, message: str) -> None:
        ...

    def info(self, message: str) -> None:
        """Neutral message (empty listings, goodbye)."""

        ...
