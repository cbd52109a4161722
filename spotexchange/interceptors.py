"""Unary call interceptors: request ids, logging, panic recovery, metrics."""

from __future__ import annotations

import dataclasses
import functools
import logging
import threading
import time
import traceback
import uuid
from collections import Counter
from collections.abc import Callable, Mapping, Sequence
from dataclasses import dataclass, field
from typing import Any

from spotexchange.status import RpcError, StatusCode

REQUEST_ID_KEY = "x-request-id"


@dataclass(frozen=True)
class CallContext:
    """Metadata travelling with a call."""

    incoming_metadata: Mapping[str, Sequence[str]] = field(default_factory=dict)
    outgoing_metadata: Mapping[str, Sequence[str]] = field(default_factory=dict)


@dataclass(frozen=True)
class CallInfo:
    """Describes the method being called."""

    full_method: str


Handler = Callable[[CallContext, Any], Any]
Interceptor = Callable[[CallContext, Any, CallInfo, Handler], Any]


def _incoming_request_id(ctx: CallContext) -> str | None:
    ids = ctx.incoming_metadata.get(REQUEST_ID_KEY)
    return ids[0] if ids else None


def x_request_id() -> Interceptor:
    """Propagate the caller's request id, or generate one, as outgoing metadata."""

    def interceptor(ctx: CallContext, request: Any, info: CallInfo, handler: Handler) -> Any:
        request_id = _incoming_request_id(ctx) or str(uuid.uuid4())
        ctx = dataclasses.replace(ctx, outgoing_metadata={REQUEST_ID_KEY: [request_id]})
        return handler(ctx, request)

    return interceptor


def logger_interceptor(logger: logging.Logger) -> Interceptor:
    """Log the start and the end of every call."""

    def interceptor(ctx: CallContext, request: Any, info: CallInfo, handler: Handler) -> Any:
        request_id = _incoming_request_id(ctx) or "unknown"
        start = time.perf_counter()
        logger.info(
            "gRPC request started",
            extra={"request_id": request_id, "method": info.full_method, "payload": request},
        )
        try:
            response = handler(ctx, request)
        except Exception as exc:
            logger.error(
                "gRPC request failed",
                extra={
                    "request_id": request_id,
                    "method": info.full_method,
                    "duration_ms": (time.perf_counter() - start) * 1000,
                    "error": str(exc),
                },
            )
            raise
        logger.info(
            "gRPC request completed",
            extra={
                "request_id": request_id,
                "method": info.full_method,
                "duration_ms": (time.perf_counter() - start) * 1000,
            },
        )
        return response

    return interceptor


def panic_recovery_interceptor(logger: logging.Logger) -> Interceptor:
    """Turn unexpected exceptions into an INTERNAL RpcError, logging the trace."""

    def interceptor(ctx: CallContext, request: Any, info: CallInfo, handler: Handler) -> Any:
        try:
            return handler(ctx, request)
        except RpcError:
            raise
        except Exception as exc:
            logger.error(
                "Panic recovered in gRPC handler",
                extra={"recovered_value": repr(exc), "stack_trace": traceback.format_exc()},
            )
            raise RpcError(StatusCode.INTERNAL, f"Internal server error: {exc}") from exc

    return interceptor


@dataclass
class RequestMetrics:
    """Counts of handled calls and their durations, per method."""

    handled: Counter = field(default_factory=Counter)
    durations: dict[str, list[float]] = field(default_factory=dict)
    _lock: threading.Lock = field(default_factory=threading.Lock, repr=False, compare=False)

    def record(self, method: str, code: StatusCode, duration: float) -> None:
        """Record one finished call."""
        with self._lock:
            self.handled[(method, code)] += 1
            self.durations.setdefault(method, []).append(duration)


def metrics_interceptor(metrics: RequestMetrics) -> Interceptor:
    """Record the outcome and duration of every call."""

    def interceptor(ctx: CallContext, request: Any, info: CallInfo, handler: Handler) -> Any:
        start = time.perf_counter()
        code = StatusCode.UNKNOWN
        try:
            response = handler(ctx, request)
            code = StatusCode.OK
            return response
        except RpcError as exc:
            code = exc.code
            raise
        finally:
            metrics.record(info.full_method, code, time.perf_counter() - start)

    return interceptor


def _bind(interceptor: Interceptor, info: CallInfo, next_handler: Handler,
          ctx: CallContext, request: Any) -> Any:
    return interceptor(ctx, request, info, next_handler)


def chain_interceptors(*interceptors: Interceptor) -> Interceptor:
    """Combine interceptors; the first one given runs outermost."""

    def chained(ctx: CallContext, request: Any, info: CallInfo, handler: Handler) -> Any:
        call = handler
        for interceptor in reversed(interceptors):
            call = functools.partial(_bind, interceptor, info, call)
        return call(ctx, request)

    return chained