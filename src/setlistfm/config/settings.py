"""Where: src/setlistfm/config/settings.py
What: Fixed wire-level constants for the setlist.fm REST API.
Why: Expose one source of truth for the base address and header names.
"""

from __future__ import annotations

from typing import Final

# setlist.fm REST API ---------------------------------------------------------

API_BASE_URL: Final[str] = "https://api.setlist.fm/rest/1.0/"

# The credential header carries the raw key generated at
# https://www.setlist.fm/settings/api
API_KEY_HEADER: Final[str] = "x-api-key"
LANGUAGE_HEADER: Final[str] = "Accept-Language"
ACCEPT_HEADER: Final[str] = "Accept"
ACCEPT_JSON: Final[str] = "application/json"


# Defaults used when no configuration value is present -----------------------

DEFAULT_LANGUAGE_CODE: Final[str] = "en"
DEFAULT_TIMEOUT_SECONDS: Final[float] = 15.0
DEFAULT_MAX_WORKERS: Final[int] = 4


__all__ = [
    "API_BASE_URL",
    "API_KEY_HEADER",
    "LANGUAGE_HEADER",
    "ACCEPT_HEADER",
    "ACCEPT_JSON",
    "DEFAULT_LANGUAGE_CODE",
    "DEFAULT_TIMEOUT_SECONDS",
    "DEFAULT_MAX_WORKERS",
]
