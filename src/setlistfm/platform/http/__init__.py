"""HTTP infrastructure package.

This package provides the default network transport used to reach the
setlist.fm REST API.
"""

from __future__ import annotations

from .requests_transport import RequestsTask, RequestsTransport

__all__ = ["RequestsTask", "RequestsTransport"]
