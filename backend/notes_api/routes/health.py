"""
Notes API — Health Check and Service Info Routes
=================================================

What:  GET /health for platform health probes and GET / as an API directory.
Why:   The hosting platform polls /health to decide whether to route traffic.
How:   Everything lives in process memory, so there are no dependencies to
       probe; the service is healthy whenever it can answer.
"""

import logging
import time
from datetime import datetime, timezone

from fastapi import APIRouter, Request

from notes_api import __version__
from notes_api.schemas.note import HealthResponse, ServiceInfoResponse

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Health"])

# Track when the service started for uptime reporting
_start_time = time.time()

# camelCase keys: existing clients read these names
ENDPOINTS = {
    "health": "GET /health",
    "getAllNotes": "GET /api/notes",
    "getNote": "GET /api/notes/:id",
    "createNote": "POST /api/notes",
    "updateNote": "PUT /api/notes/:id",
    "deleteNote": "DELETE /api/notes/:id",
}

AVAILABLE_ENDPOINTS = ["GET /", *ENDPOINTS.values()]


@router.get(
    "/health",
    response_model=HealthResponse,
    summary="Service health check",
)
async def health_check(request: Request) -> HealthResponse:
    settings = request.app.state.settings
    return HealthResponse(
        status="OK",
        service=settings.service_name,
        timestamp=datetime.now(timezone.utc),
        environment=settings.environment,
        version=__version__,
        uptime_seconds=round(time.time() - _start_time, 2),
    )


@router.get(
    "/",
    response_model=ServiceInfoResponse,
    summary="Service information",
    description="Lists the available endpoints.",
)
async def service_info() -> ServiceInfoResponse:
    return ServiceInfoResponse(
        message="Welcome to Notes API",
        description="Backend service for managing notes",
        version=__version__,
        documentation="Check /health for service status and /docs for the OpenAPI UI",
        endpoints=ENDPOINTS,
    )
