from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field
from typing import Literal, Optional
import datetime as dt


SubmitStatus = Literal["ok", "validation_error", "persistence_error"]


class TelemetryCreate(BaseModel):
    """A reading that passed type checks and is ready for the store."""

    model_config = ConfigDict(populate_by_name=True)

    altitude: float = Field(..., alias="Altitude")
    heading: float = Field(..., alias="HIS")
    attitude: float = Field(..., alias="ADI")


class TelemetryOut(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    id: int
    altitude: float = Field(..., alias="Altitude")
    heading: float = Field(..., alias="HIS")
    attitude: float = Field(..., alias="ADI")
    created_at: Optional[dt.datetime] = None


class SubmitResult(BaseModel):
    status: SubmitStatus
    message: str
    reading: Optional[TelemetryOut] = None

    @property
    def ok(self) -> bool:
        return self.status == "ok"
