"""Dispatch pipeline for setlist.fm requests.

Where: src/setlistfm/features/dispatch/usecases/dispatcher.py
What: Send a built request through the transport and classify its outcome.
Why: Give the callback and awaitable client surfaces one shared pipeline.

Each dispatch is a one-shot pipeline::

    Built -> Sent -> Succeeded
                  -> Failed(local-validation)   code 0, no network call
                  -> Failed(transport)          status, or -1 without response
                  -> Failed(decode)             status of the 2xx response

No failure escapes as an exception; the returned future always resolves
exactly once with an :data:`~setlistfm.shared.outcome.Outcome`.
"""

from __future__ import annotations

import asyncio
from collections.abc import Callable
from concurrent.futures import Future, InvalidStateError
from functools import lru_cache
from typing import Any, TypeVar

from pydantic import TypeAdapter, ValidationError

from setlistfm.platform.logging import logger
from setlistfm.shared.errors import SetlistFMError
from setlistfm.shared.outcome import Failure, Outcome, Success

from ..domain.descriptor import EndpointDescriptor
from ..domain.prepared_request import PreparedRequest
from .ports import TransportResponse
from .request_builder import RequestContext, build_request

T = TypeVar("T")

OutcomeCallback = Callable[[Outcome[T]], None]


@lru_cache(maxsize=64)
def _adapter_for(target: Any) -> TypeAdapter[Any]:
    return TypeAdapter(target)


def _describe(error: BaseException) -> str:
    return str(error) or type(error).__name__


def classify_response(response: TransportResponse, adapter: TypeAdapter[T]) -> Outcome[T]:
    """Map a raw transport response onto a success or classified failure.

    Success requires a body, a 2xx status, and no transport error. Decoding is
    strict: JSON types must match the target fields exactly, unknown keys are
    ignored.
    """

    status = response.status
    if (
        response.body is None
        or status is None
        or not 200 <= status < 300
        or response.error is not None
    ):
        code = status if status is not None else SetlistFMError.NO_RESPONSE_CODE
        message = _describe(response.error) if response.error is not None else None
        return Failure.of(code, message)

    try:
        value = adapter.validate_json(response.body, strict=True)
    except ValidationError as exc:
        return Failure.of(status, str(exc))
    return Success(value)


def _resolve(future: Future[Outcome[T]], outcome: Outcome[T], request: PreparedRequest | None) -> None:
    try:
        future.set_result(outcome)
    except InvalidStateError:
        logger.debug(
            "Dropping late completion for %s",
            request.url if request is not None else "<unbuilt request>",
        )


class Dispatcher:
    """Turn endpoint descriptors into HTTP exchanges and typed outcomes."""

    def __init__(self, context: RequestContext) -> None:
        self._context: RequestContext = context

    @property
    def context(self) -> RequestContext:
        return self._context

    def dispatch(self, descriptor: EndpointDescriptor, target: type[T]) -> Future[Outcome[T]]:
        """Start one request and return a future resolving to its outcome.

        Args:
            descriptor: Endpoint path and parameters.
            target: Shape the JSON body is decoded into; any type accepted by
                ``pydantic.TypeAdapter`` (models, dataclasses, ``list[...]``).

        Returns:
            Future resolved exactly once with ``Success`` or ``Failure``.
        """

        adapter: TypeAdapter[T] = _adapter_for(target)
        future: Future[Outcome[T]] = Future()
        # Cancellation belongs to the transport task; callers cannot cancel the handle.
        _ = future.set_running_or_notify_cancel()

        try:
            request = build_request(descriptor, self._context)
        except SetlistFMError as exc:
            logger.warning(
                "Rejected endpoint %r: %s",
                descriptor.path,
                exc.message,
                extra={"dispatch_event": "dispatch.invalid_endpoint", "error_message": exc.message},
            )
            _resolve(future, Failure(exc), None)
            return future

        logger.debug(
            "%s %s",
            request.method,
            request.url,
            extra={"dispatch_event": "dispatch.built", "method": request.method, "url": request.url},
        )

        def _complete(response: TransportResponse) -> None:
            outcome = classify_response(response, adapter)
            self._log_outcome(request, response, outcome)
            _resolve(future, outcome, request)

        try:
            task = self._context.transport.data_task(request, _complete)
            task.resume()
        except Exception as exc:
            logger.warning(
                "Transport failed to start %s: %s",
                request.url,
                exc,
                extra={
                    "dispatch_event": "dispatch.transport_error",
                    "method": request.method,
                    "url": request.url,
                    "error_message": _describe(exc),
                },
            )
            _resolve(future, Failure.of(SetlistFMError.NO_RESPONSE_CODE, _describe(exc)), request)

        return future

    def request(
        self,
        descriptor: EndpointDescriptor,
        target: type[T],
        completion: OutcomeCallback[T],
    ) -> Future[Outcome[T]]:
        """Callback form of :meth:`dispatch`; ``completion`` receives the outcome."""

        future = self.dispatch(descriptor, target)
        future.add_done_callback(lambda done: completion(done.result()))
        return future

    async def fetch(self, descriptor: EndpointDescriptor, target: type[T]) -> Outcome[T]:
        """Awaitable form of :meth:`dispatch`."""

        return await asyncio.wrap_future(self.dispatch(descriptor, target))

    @staticmethod
    def _log_outcome(request: PreparedRequest, response: TransportResponse, outcome: Outcome[Any]) -> None:
        extra: dict[str, Any] = {
            "method": request.method,
            "url": request.url,
            "status": response.status,
        }
        if isinstance(outcome, Success):
            logger.debug(
                "%s %s -> %s",
                request.method,
                request.url,
                response.status,
                extra={"dispatch_event": "dispatch.success", **extra},
            )
            return

        failed_transport = response.error is not None or response.status is None
        if failed_transport or not 200 <= (response.status or 0) < 300:
            event = "dispatch.transport_error"
        else:
            event = "dispatch.decode_error"
        logger.warning(
            "%s %s failed with code %s",
            request.method,
            request.url,
            outcome.code,
            extra={"dispatch_event": event, "error_message": outcome.message, **extra},
        )


__all__ = ["Dispatcher", "OutcomeCallback", "classify_response"]
