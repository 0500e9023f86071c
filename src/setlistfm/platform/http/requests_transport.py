"""Where: src/setlistfm/platform/http/requests_transport.py
What: Default transport running ``requests`` GET calls on a worker pool.
Why: Keep network concerns out of the dispatch pipeline and make them swappable.
"""

from __future__ import annotations

import threading
from collections.abc import Callable
from concurrent.futures import CancelledError, Future, ThreadPoolExecutor
from types import TracebackType
from typing import final

import requests

from setlistfm.config.settings import DEFAULT_MAX_WORKERS, DEFAULT_TIMEOUT_SECONDS
from setlistfm.features.dispatch.domain.prepared_request import PreparedRequest
from setlistfm.features.dispatch.usecases.ports import TransportCompletion, TransportResponse
from setlistfm.platform.logging import logger


@final
class RequestsTask:
    """One prepared exchange; submitted to the pool only on :meth:`resume`."""

    def __init__(
        self,
        request: PreparedRequest,
        completion: TransportCompletion,
        *,
        submit: Callable[[Callable[[], None]], Future[None]],
        perform: Callable[[PreparedRequest], TransportResponse],
    ) -> None:
        self._request: PreparedRequest = request
        self._completion: TransportCompletion = completion
        self._submit: Callable[[Callable[[], None]], Future[None]] = submit
        self._perform: Callable[[PreparedRequest], TransportResponse] = perform
        self._lock: threading.Lock = threading.Lock()
        self._future: Future[None] | None = None
        self._cancelled: bool = False

    @property
    def started(self) -> bool:
        return self._future is not None

    def resume(self) -> None:
        """Submit the exchange; repeated calls are ignored."""

        with self._lock:
            if self._future is not None or self._cancelled:
                return
            self._future = self._submit(self._run)

    def cancel(self) -> bool:
        """Cancel the exchange if it has not started running.

        The completion receives a ``CancelledError`` when cancellation wins.
        """

        with self._lock:
            if self._cancelled:
                return True
            if self._future is not None and not self._future.cancel():
                return False
            self._cancelled = True
        self._finish(TransportResponse(error=CancelledError("request cancelled")))
        return True

    def _run(self) -> None:
        try:
            response = self._perform(self._request)
        except Exception as exc:
            logger.debug("Transport failure for %s: %r", self._request.url, exc)
            response = TransportResponse(error=exc)
        self._finish(response)

    def _finish(self, response: TransportResponse) -> None:
        try:
            self._completion(response)
        except Exception:
            logger.exception("Completion handler failed for %s", self._request.url)


@final
class RequestsTransport:
    """Perform prepared GET requests with ``requests`` on a thread pool."""

    def __init__(
        self,
        *,
        timeout: float = DEFAULT_TIMEOUT_SECONDS,
        session: requests.Session | None = None,
        executor_factory: Callable[[], ThreadPoolExecutor] | None = None,
    ) -> None:
        self._timeout: float = timeout
        self._session: requests.Session = session or requests.Session()
        self._owns_session: bool = session is None
        self._executor: ThreadPoolExecutor = (
            executor_factory()
            if executor_factory
            else ThreadPoolExecutor(max_workers=DEFAULT_MAX_WORKERS, thread_name_prefix="setlistfm-http")
        )

    @property
    def timeout(self) -> float:
        return self._timeout

    def data_task(self, request: PreparedRequest, completion: TransportCompletion) -> RequestsTask:
        return RequestsTask(
            request,
            completion,
            submit=self._executor.submit,
            perform=self._perform,
        )

    def _perform(self, request: PreparedRequest) -> TransportResponse:
        try:
            response = self._session.request(
                request.method,
                request.url,
                headers=dict(request.headers),
                timeout=self._timeout,
            )
        except requests.RequestException as exc:
            logger.debug("setlist.fm request error for %s: %s", request.url, exc)
            partial = exc.response
            status = int(partial.status_code) if partial is not None else None
            return TransportResponse(body=None, status=status, error=exc)

        return TransportResponse(body=response.content, status=int(response.status_code))

    def close(self) -> None:
        """Stop the worker pool and release pooled connections."""

        self._executor.shutdown(wait=True)
        if self._owns_session:
            self._session.close()

    def __enter__(self) -> "RequestsTransport":
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()


__all__ = ["RequestsTask", "RequestsTransport"]
