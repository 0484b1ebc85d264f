"""System-level endpoints: health probe and Prometheus metrics."""

from typing import Any, Dict

from fastapi import APIRouter, Request, Response
from prometheus_client import CONTENT_TYPE_LATEST, REGISTRY, generate_latest

from snowhook.utils.version import VERSION

router = APIRouter(tags=["system"])


@router.get("/health")
async def health_check(request: Request, response: Response) -> Dict[str, Any]:
    """
    Health check endpoint for Kubernetes probes.
    
    Returns:
        - HTTP 200: Ingestion pipeline ready
        - HTTP 503: Still starting up
    """
    ready = getattr(request.app.state, "ingestion_pipeline", None) is not None
    if not ready:
        response.status_code = 503
    return {
        "status": "healthy" if ready else "starting",
        "service": "snowhook",
        "version": VERSION,
    }


@router.get("/metrics", include_in_schema=False)
async def metrics() -> Response:
    """Prometheus text exposition of the process metrics."""
    return Response(content=generate_latest(REGISTRY), media_type=CONTENT_TYPE_LATEST)
