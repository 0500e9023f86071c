# Path: `src/setlistfm/features/catalog/usecases/__init__.py`
# Summary: Export endpoint descriptor factories.
# Why: Let facades refer to endpoints as ``endpoints.<name>``.

from . import endpoints
from .endpoints import SortType

__all__ = ["SortType", "endpoints"]
