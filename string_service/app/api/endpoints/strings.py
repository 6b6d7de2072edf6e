"""
Routes for the string operations.

Each route is bound to exactly one endpoint, looked up by name in
``app.state.endpoints``.  FastAPI decodes the body into the route's
request model (a malformed body is answered with 422 and never reaches
the service) and the endpoint's response is returned as is.  Business
failures such as an empty input come back as a normal 200 response
with an ``err`` field.

The routes are plain ``def`` functions, so FastAPI runs them on its
worker thread pool.
"""

from fastapi import APIRouter, Request

from string_service.app.schemas.strings import (
    CountRequest,
    CountResponse,
    UppercaseRequest,
    UppercaseResponse,
)

router = APIRouter()

# Request model decoded by each route; create_app checks every endpoint
# against this table before serving.
ROUTE_REQUEST_TYPES = {
    "uppercase": UppercaseRequest,
    "count": CountRequest,
}


@router.post("/uppercase", response_model=UppercaseResponse, response_model_exclude_none=True)
def uppercase(payload: UppercaseRequest, request: Request) -> UppercaseResponse:
    """Return the input in upper case, or an ``err`` message for empty input."""
    return request.app.state.endpoints["uppercase"](request, payload)


@router.post("/count", response_model=CountResponse)
def count(payload: CountRequest, request: Request) -> CountResponse:
    """Return the number of characters in the input."""
    return request.app.state.endpoints["count"](request, payload)
