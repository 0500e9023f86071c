# Path: `src/setlistfm/features/dispatch/__init__.py`
# Summary: Export the request construction and dispatch pipeline.
# Why: Provide a stable import surface for the client facades and tests.

from .domain import EndpointDescriptor, PreparedRequest
from .usecases import (
    Dispatcher,
    OutcomeCallback,
    RequestContext,
    Transport,
    TransportCompletion,
    TransportResponse,
    TransportTask,
    build_request,
    classify_response,
    encode_query,
    escape_path,
)

__all__ = [
    "Dispatcher",
    "EndpointDescriptor",
    "OutcomeCallback",
    "PreparedRequest",
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
