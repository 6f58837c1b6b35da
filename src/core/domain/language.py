"""Language utilities for github-activity.

This module centralizes the language options supported across the
application. Keeping it in the domain layer allows the formatter, the
renderer and the settings to share a single source of truth.
"""

from __future__ import annotations

from enum import Enum


class Language(str, Enum):
    """Supported natural-language choices for user-facing output."""

    ENGLISH = "en"
    PORTUGUESE = "pt"

    @classmethod
    def default(cls) -> "Language":
        """Return the default language used across the application."""

        return cls.ENGLISH

    def label(self) -> str:
        """Human readable label for prompts and logging."""

        return "Portuguese" if self is Language.PORTUGUESE else "English"
