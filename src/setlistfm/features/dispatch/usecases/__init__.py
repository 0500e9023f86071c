# Path: `src/setlistfm/features/dispatch/usecases/__init__.py`
# Summary: Export request building, dispatch, and transport port symbols.
# Why: Provide a stable import surface for adapters and client facades.

from .dispatcher import Dispatcher, OutcomeCallback, classify_response
from .ports import Transport, TransportCompletion, TransportResponse, TransportTask
from .request_builder import RequestContext, build_request, encode_query, escape_path

__all__ = [
    "Dispatcher",
    "OutcomeCallback",
    "RequestContext",
    "Transport",
    "TransportCompletion",
    "TransportResponse",
    "TransportTask",
    "build_request",
    "classify_response",
    "encode_query",
    "escape_path",
]
