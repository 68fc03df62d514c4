"""Language options for Avtorent.

The operator-facing text exists in English and Russian. Keeping the enum in the
domain layer lets the config, the message catalog and the CLI share one source
of truth without circular imports.
"""

from __future__ import annotations

from enum import Enum


class Language(str, Enum):
    """Supported natural-language choices for user-facing output."""

    ENGLISH = "en"
    RUSSIAN = "ru"

    def label(self) -> str:
        """Human readable label for the doctor table and logging."""

        return "Russian" if self is Language.RUSSIAN else "English"
