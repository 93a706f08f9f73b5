from __future__ import annotations

from fastapi import Request

from flightmon.services.telemetry_service import TelemetryService


def get_telemetry_service(request: Request) -> TelemetryService:
    return request.app.state.telemetry_service
