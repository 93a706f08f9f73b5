from __future__ import annotations

from fastapi import APIRouter, Request

from flightmon.config import APP_VERSION

router = APIRouter()


@router.get("/health")
def health(request: Request):
    """Health check endpoint with system status."""
    return {
        "status": "ok",
        "environment": request.app.state.settings.environment,
        "version": APP_VERSION,
    }
