"""Shared value types used across feature packages.

Where: shared/__init__.py
What: Re-export the outcome, error and language types.
Why: Provide a single canonical import path for cross-cutting types.
"""

from __future__ import annotations

from .errors import SetlistFMError
from .language import Language
from .outcome import Failure, Outcome, Success

__all__ = [
    "Failure",
    "Language",
    "Outcome",
    "SetlistFMError",
    "Success",
]
