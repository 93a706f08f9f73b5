from __future__ import annotations

import httpx
from typing import List, Optional
from flightmon.config import settings
from flightmon.schemas.telemetry import TelemetryOut


class ClientError(Exception):
    def __init__(self, status_code: int, message: str):
        super().__init__(message)
        self.status_code = status_code
        self.message = message


class TelemetryClient:
    """Minimal HTTP client for the telemetry API.

    The server exposes:
      - POST /api/telemetry  -> store one reading
      - GET  /api/telemetry  -> all readings, newest first
    """

    def __init__(
        self,
        base_url: Optional[str] = None,
        *,
        timeout: Optional[float] = None,
        transport: Optional[httpx.BaseTransport] = None,
    ):
        self.base_url = (base_url or settings.api_base_url).rstrip("/")
        self._client = httpx.Client(
            base_url=self.base_url,
            timeout=timeout if timeout is not None else settings.api_timeout_s,
            transport=transport,
        )

    def __enter__(self) -> "TelemetryClient":
        return self

    def __exit__(self, *exc) -> None:
        self.close()

    def _check(self, r: httpx.Response) -> None:
        if r.is_error:
            raise ClientError(r.status_code, r.text)

    def submit(self, altitude: float, heading: float, attitude: float) -> str:
        r = self._client.post(
            "/api/telemetry",
            json={"Altitude": altitude, "HIS": heading, "ADI": attitude},
        )
        self._check(r)
        return r.text

    def list(self) -> List[TelemetryOut]:
        r = self._client.get("/api/telemetry")
        self._check(r)
        return [TelemetryOut.model_validate(item) for item in r.json()]

    def close(self) -> None:
        self._client.close()
