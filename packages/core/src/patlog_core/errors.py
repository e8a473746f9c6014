"""
Errors raised while translating patterns to Datalog.
"""

from __future__ import annotations

from typing import Any


class TranslationError(Exception):
    """Base class for translation errors."""
    pass


class InvalidPatternError(TranslationError):
    """Raised when the pattern handed to the entry point is not Some/All."""

    def __init__(self, pattern: Any, message: str | None = None):
        self.pattern = pattern
        msg = message or (
            f"The outer pattern must be a quantified instruction pattern "
            f"(Some or All), got {type(pattern).__name__}"
        )
        super().__init__(msg)


class UnsupportedPatternError(TranslationError):
    """Raised when a nested node is not one of the known pattern types."""

    def __init__(self, node: Any, context: str | None = None):
        self.node = node
        self.context = context
        msg = f"Unsupported pattern node: {type(node).__name__}"
        if context:
            msg += f" (inside {context})"
        super().__init__(msg)


class PatternDepthError(TranslationError):
    """Raised when a pattern is nested deeper than the configured bound."""

    def __init__(self, max_depth: int):
        self.max_depth = max_depth
        super().__init__(f"Pattern nesting exceeds maximum depth of {max_depth}")
