from __future__ import annotations

import logging
from typing import List

from fastapi import APIRouter, Depends, Request
from fastapi.responses import PlainTextResponse
from starlette.concurrency import run_in_threadpool

from flightmon.db.store import StoreError
from flightmon.deps import get_telemetry_service
from flightmon.schemas.telemetry import TelemetryOut
from flightmon.services.telemetry_service import INVALID_INPUT_MESSAGE, TelemetryService

router = APIRouter()
logger = logging.getLogger("flightmon.api")


@router.post("/api/telemetry", status_code=201, response_class=PlainTextResponse)
async def create_telemetry(
    request: Request,
    svc: TelemetryService = Depends(get_telemetry_service),
):
    """Store one reading. Body: {"Altitude": n, "HIS": n, "ADI": n}."""
    try:
        payload = await request.json()
    except ValueError:
        return PlainTextResponse(INVALID_INPUT_MESSAGE, status_code=400)

    result = await run_in_threadpool(svc.submit, payload)
    if not result.ok:
        return PlainTextResponse(result.message, status_code=400)
    return PlainTextResponse(result.message, status_code=201)


@router.get("/api/telemetry", response_model=List[TelemetryOut])
def list_telemetry(svc: TelemetryService = Depends(get_telemetry_service)):
    try:
        return svc.list()
    except StoreError as e:
        logger.warning("List error: %s", e)
        return PlainTextResponse(str(e), status_code=400)
