"""
Prometheus scrape endpoint.
"""

from fastapi import APIRouter, Request, Response
from prometheus_client import CONTENT_TYPE_LATEST

router = APIRouter()


@router.get("/metrics", include_in_schema=False)
def metrics(request: Request) -> Response:
    """Expose the application's metrics sink in text format."""
    return Response(content=request.app.state.metrics.render(), media_type=CONTENT_TYPE_LATEST)
