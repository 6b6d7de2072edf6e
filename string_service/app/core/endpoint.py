"""
Transport‑independent endpoints and endpoint middleware.

An *endpoint* is a callable ``endpoint(ctx, request) -> response`` bound
to exactly one service operation.  ``ctx`` is an opaque per‑call
context (the HTTP adapter passes the inbound request); ``request`` is
one of the request models from ``schemas``.  Endpoints return a
response model on success and on business failure alike; only
infrastructure failures are raised.

Every endpoint built with :func:`endpoint` records the request model it
accepts in ``request_type`` so the application can check at assembly
time that each route decodes the model its endpoint expects
(:func:`check_endpoint`).

A *middleware* takes an endpoint and returns an endpoint of the same
shape.  Middlewares compose with :func:`chain`::

    ep = chain(outer, inner)(make_count_endpoint(svc))
    # equivalent to outer(inner(make_count_endpoint(svc)))
"""

import functools
from typing import Any, Callable, Type

from .errors import EndpointWiringError

Endpoint = Callable[[Any, Any], Any]
Middleware = Callable[[Endpoint], Endpoint]


def endpoint(request_type: Type) -> Callable[[Endpoint], Endpoint]:
    """Declare the request model accepted by the decorated endpoint.

    The returned endpoint rejects any other request with
    :class:`EndpointWiringError`: receiving the wrong model means the
    endpoint was wired to the wrong decoder.
    """

    def decorate(func: Endpoint) -> Endpoint:
        @functools.wraps(func)
        def typed_endpoint(ctx: Any, request: Any) -> Any:
            if not isinstance(request, request_type):
                raise EndpointWiringError(
                    f"{func.__name__} expects {request_type.__name__}, "
                    f"got {type(request).__name__}"
                )
            return func(ctx, request)

        typed_endpoint.request_type = request_type
        return typed_endpoint

    return decorate


def check_endpoint(ep: Endpoint, request_type: Type) -> Endpoint:
    """Ensure ``ep`` accepts ``request_type`` and return it unchanged."""
    accepted = getattr(ep, "request_type", None)
    if accepted is not request_type:
        name = getattr(accepted, "__name__", accepted)
        raise EndpointWiringError(
            f"endpoint accepts {name}, but is wired to decode {request_type.__name__}"
        )
    return ep


def chain(outer: Middleware, *others: Middleware) -> Middleware:
    """Compose middlewares; the first one given is the outermost."""

    def chained(next_endpoint: Endpoint) -> Endpoint:
        for middleware in reversed(others):
            next_endpoint = middleware(next_endpoint)
        return outer(next_endpoint)

    return chained


def logging_middleware(logger) -> Middleware:
    """Log ``calling endpoint`` before and ``called endpoint`` after each call.

    The second record is emitted on every exit path, including when the
    wrapped endpoint raises.  Bind correlation fields (such as the
    method name) to ``logger`` with ``logging_config.with_fields``.
    """

    def middleware(next_endpoint: Endpoint) -> Endpoint:
        @functools.wraps(next_endpoint)
        def logged_endpoint(ctx: Any, request: Any) -> Any:
            logger.info("calling endpoint")
            try:
                return next_endpoint(ctx, request)
            finally:
                logger.info("called endpoint")

        return logged_endpoint

    return middleware
