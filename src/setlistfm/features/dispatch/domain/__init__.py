# Path: `src/setlistfm/features/dispatch/domain/__init__.py`
# Summary: Export request value objects.
# Why: Provide a stable import surface for use cases and tests.

from .descriptor import EndpointDescriptor
from .prepared_request import PreparedRequest

__all__ = ["EndpointDescriptor", "PreparedRequest"]
