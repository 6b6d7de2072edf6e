"""
Endpoint constructors, one per service operation.

Each constructor closes over a (usually fully decorated) service and
returns an endpoint that maps the operation's request model to its
response model.  Business failures (:class:`StringServiceError`) are
reported in the response's ``err`` field; any other exception
propagates to the caller.
"""

from typing import Any

from string_service.app.core.endpoint import Endpoint, endpoint
from string_service.app.core.errors import StringServiceError
from string_service.app.schemas.strings import (
    CountRequest,
    CountResponse,
    UppercaseRequest,
    UppercaseResponse,
)
from string_service.app.services.string_service import StringService


def make_uppercase_endpoint(service: StringService) -> Endpoint:
    @endpoint(UppercaseRequest)
    def uppercase_endpoint(ctx: Any, request: UppercaseRequest) -> UppercaseResponse:
        try:
            v = service.uppercase(request.s)
        except StringServiceError as exc:
            return UppercaseResponse(v="", err=str(exc))
        return UppercaseResponse(v=v)

    return uppercase_endpoint


def make_count_endpoint(service: StringService) -> Endpoint:
    @endpoint(CountRequest)
    def count_endpoint(ctx: Any, request: CountRequest) -> CountResponse:
        return CountResponse(v=service.count(request.s))

    return count_endpoint
