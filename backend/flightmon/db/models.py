from __future__ import annotations

import datetime as dt

from sqlalchemy import CheckConstraint, Column, DateTime, Float, Integer

from flightmon.db.session import Base

# Inclusive bounds enforced on every stored reading
ALTITUDE_RANGE = (0.0, 3000.0)
HEADING_RANGE = (0.0, 360.0)
ATTITUDE_RANGE = (-100.0, 100.0)


class TelemetryReading(Base):
    __tablename__ = "telemetry_readings"
    __table_args__ = (
        CheckConstraint(
            f"altitude >= {ALTITUDE_RANGE[0]} AND altitude <= {ALTITUDE_RANGE[1]}",
            name="ck_telemetry_altitude_range",
        ),
        CheckConstraint(
            f"heading >= {HEADING_RANGE[0]} AND heading <= {HEADING_RANGE[1]}",
            name="ck_telemetry_heading_range",
        ),
        CheckConstraint(
            f"attitude >= {ATTITUDE_RANGE[0]} AND attitude <= {ATTITUDE_RANGE[1]}",
            name="ck_telemetry_attitude_range",
        ),
        {"sqlite_autoincrement": True},
    )

    id = Column(Integer, primary_key=True, autoincrement=True)
    altitude = Column(Float, nullable=False)
    heading = Column(Float, nullable=False)  # HIS, normalized into [0, 360)
    attitude = Column(Float, nullable=False)  # ADI
    created_at = Column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: dt.datetime.now(dt.timezone.utc),
    )
