"""
NoteKeeper Backend — Health Check Route
========================================

What:  Liveness endpoint for monitoring and container probes.
How:   Reports version, uptime and the size of each in-memory collection.
       There are no external dependencies to probe.
"""

import time

from fastapi import APIRouter, Depends

from notekeeper import __version__
from notekeeper.dependencies import get_store
from notekeeper.schemas.responses import HealthResponse
from notekeeper.services.store import MemoryStore

router = APIRouter(tags=["Health"])

_start_time = time.time()


@router.get(
    "/health",
    response_model=HealthResponse,
    summary="Service health check",
)
def health_check(store: MemoryStore = Depends(get_store)) -> HealthResponse:
    counts = store.stats()
    return HealthResponse(
        status="healthy",
        version=__version__,
        users=counts["users"],
        notes=counts["notes"],
        sessions=counts["sessions"],
        uptime_seconds=round(time.time() - _start_time, 2),
    )
