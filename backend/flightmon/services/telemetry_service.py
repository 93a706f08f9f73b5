from __future__ import annotations

import logging
import math
from typing import Any, List

from flightmon.db.models import TelemetryReading
from flightmon.db.store import StoreError, TelemetryStore
from flightmon.schemas.telemetry import SubmitResult, TelemetryCreate, TelemetryOut

logger = logging.getLogger("flightmon.service")

INVALID_INPUT_MESSAGE = "Invalid input: all fields must be numbers"
SAVED_MESSAGE = "Data saved"

FIELDS = ("Altitude", "HIS", "ADI")


def is_number(value: Any) -> bool:
    # bool is an int subclass but never a reading value
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return False
    try:
        return math.isfinite(value)
    except OverflowError:
        # int too large for a float
        return False


def normalize_heading(heading: float) -> float:
    """Reduce a heading into [0, 360)."""
    h = float(heading) % 360.0
    # tiny negative inputs round up to exactly 360.0
    return 0.0 if h >= 360.0 else h


def to_out(row: TelemetryReading) -> TelemetryOut:
    return TelemetryOut(
        id=row.id,
        altitude=row.altitude,
        heading=row.heading,
        attitude=row.attitude,
        created_at=row.created_at,
    )


class TelemetryService:
    """Validates incoming readings and forwards them to the store."""

    def __init__(self, store: TelemetryStore):
        self.store = store

    def submit(self, payload: Any) -> SubmitResult:
        if not isinstance(payload, dict):
            return SubmitResult(status="validation_error", message=INVALID_INPUT_MESSAGE)
        if not all(is_number(payload.get(f)) for f in FIELDS):
            return SubmitResult(status="validation_error", message=INVALID_INPUT_MESSAGE)

        reading = TelemetryCreate(
            altitude=payload["Altitude"],
            heading=normalize_heading(payload["HIS"]),
            attitude=payload["ADI"],
        )
        try:
            row = self.store.insert(reading)
        except StoreError as e:
            logger.warning("Save error: %s", e)
            return SubmitResult(status="persistence_error", message=str(e))
        return SubmitResult(status="ok", message=SAVED_MESSAGE, reading=to_out(row))

    def list(self) -> List[TelemetryOut]:
        return [to_out(r) for r in self.store.list_all()]
