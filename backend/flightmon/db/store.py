from __future__ import annotations

import logging
import os
import time
from contextlib import contextmanager
from typing import Generator, List, Tuple

from sqlalchemy import text
from sqlalchemy.engine import Engine
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from flightmon.db.models import (
    ALTITUDE_RANGE,
    ATTITUDE_RANGE,
    HEADING_RANGE,
    TelemetryReading,
)
from flightmon.db.session import Base, make_engine, make_session_factory
from flightmon.schemas.telemetry import TelemetryCreate

logger = logging.getLogger("flightmon.store")


class StoreError(Exception):
    """Any failure reported by the backing database."""


class ConstraintViolation(StoreError):
    """A reading falls outside the bounds the store accepts."""


def _check_range(field: str, value: float, bounds: Tuple[float, float]) -> None:
    lo, hi = bounds
    if value < lo:
        raise ConstraintViolation(
            f"Path `{field}` ({value!r}) is less than minimum allowed value ({lo:g})."
        )
    if value > hi:
        raise ConstraintViolation(
            f"Path `{field}` ({value!r}) is more than maximum allowed value ({hi:g})."
        )


class TelemetryStore:
    """Append-only collection of telemetry readings.

    Owns its engine and session factory; build one per process and hand it to
    the service. Every call opens and closes its own session.
    """

    def __init__(self, engine: Engine):
        self.engine = engine
        self._session_factory = make_session_factory(engine)

    @classmethod
    def from_url(cls, database_url: str) -> "TelemetryStore":
        return cls(make_engine(database_url))

    @contextmanager
    def session(self) -> Generator[Session, None, None]:
        db = self._session_factory()
        try:
            yield db
            db.commit()
        except Exception:
            db.rollback()
            raise
        finally:
            db.close()

    # ── schema ───────────────────────────────────────────────

    def init_schema(self, max_retries: int = 5, retry_delay: float = 2.0) -> bool:
        """Create tables, retrying while the database comes up."""
        self._ensure_sqlite_dir()
        for attempt in range(max_retries):
            try:
                with self.engine.connect() as conn:
                    conn.execute(text("SELECT 1"))
                Base.metadata.create_all(bind=self.engine)
                logger.info("Database initialized (%s)", self.engine.url.render_as_string(hide_password=True))
                return True
            except SQLAlchemyError as e:
                logger.warning("Database connection attempt %d/%d failed: %s", attempt + 1, max_retries, e)
                if attempt < max_retries - 1:
                    time.sleep(retry_delay)
        logger.error("Failed to connect to database after all retries")
        return False

    def _ensure_sqlite_dir(self) -> None:
        url = self.engine.url
        if url.get_backend_name() != "sqlite" or not url.database or url.database == ":memory:":
            return
        parent = os.path.dirname(url.database)
        if parent:
            os.makedirs(parent, exist_ok=True)

    def close(self) -> None:
        self.engine.dispose()

    # ── operations ───────────────────────────────────────────

    def insert(self, reading: TelemetryCreate) -> TelemetryReading:
        _check_range("Altitude", reading.altitude, ALTITUDE_RANGE)
        _check_range("HIS", reading.heading, HEADING_RANGE)
        _check_range("ADI", reading.attitude, ATTITUDE_RANGE)

        row = TelemetryReading(
            altitude=reading.altitude,
            heading=reading.heading,
            attitude=reading.attitude,
        )
        try:
            with self.session() as db:
                db.add(row)
                db.flush()
        except IntegrityError as e:
            raise ConstraintViolation(str(e.orig)) from e
        except SQLAlchemyError as e:
            raise StoreError(str(getattr(e, "orig", None) or e)) from e
        logger.debug("Stored reading id=%s", row.id)
        return row

    def list_all(self) -> List[TelemetryReading]:
        try:
            with self.session() as db:
                return db.query(TelemetryReading).order_by(TelemetryReading.id.desc()).all()
        except SQLAlchemyError as e:
            raise StoreError(str(getattr(e, "orig", None) or e)) from e
