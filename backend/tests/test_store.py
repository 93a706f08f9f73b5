import pytest
from sqlalchemy import text
from sqlalchemy.exc import IntegrityError

from flightmon.db.store import ConstraintViolation, StoreError, TelemetryStore
from flightmon.schemas.telemetry import TelemetryCreate


def _reading(altitude=100.0, heading=10.0, attitude=0.0) -> TelemetryCreate:
    return TelemetryCreate(altitude=altitude, heading=heading, attitude=attitude)


def test_list_all_empty(store: TelemetryStore):
    assert store.list_all() == []


def test_insert_assigns_increasing_ids(store: TelemetryStore):
    a = store.insert(_reading(altitude=1))
    b = store.insert(_reading(altitude=2))
    assert b.id > a.id
    assert a.created_at is not None


def test_bounds_are_inclusive(store: TelemetryStore):
    store.insert(_reading(altitude=0, heading=0, attitude=-100))
    store.insert(_reading(altitude=3000, heading=360, attitude=100))
    assert len(store.list_all()) == 2


@pytest.mark.parametrize(
    "kwargs, field",
    [
        ({"altitude": -1}, "Altitude"),
        ({"altitude": 3000.5}, "Altitude"),
        ({"heading": -0.1}, "HIS"),
        ({"heading": 361}, "HIS"),
        ({"attitude": -100.1}, "ADI"),
        ({"attitude": 101}, "ADI"),
    ],
)
def test_insert_rejects_out_of_range(store: TelemetryStore, kwargs, field):
    with pytest.raises(ConstraintViolation) as exc:
        store.insert(_reading(**kwargs))
    assert field in str(exc.value)
    assert store.list_all() == []


def test_check_constraints_guard_the_table(store: TelemetryStore):
    with pytest.raises(IntegrityError):
        with store.session() as db:
            db.execute(
                text(
                    "INSERT INTO telemetry_readings (altitude, heading, attitude, created_at) "
                    "VALUES (9999, 0, 0, '2026-01-01 00:00:00')"
                )
            )
    assert store.list_all() == []


def test_list_all_newest_first(store: TelemetryStore):
    for alt in (1, 2, 3):
        store.insert(_reading(altitude=alt))
    assert [r.altitude for r in store.list_all()] == [3, 2, 1]


def test_driver_failure_wrapped_as_store_error():
    s = TelemetryStore.from_url("sqlite://")
    # no init_schema: table is missing
    with pytest.raises(StoreError):
        s.insert(_reading())
    with pytest.raises(StoreError):
        s.list_all()
    s.close()


def test_init_schema_creates_sqlite_directory(tmp_path):
    db_path = tmp_path / "nested" / "flightmon.db"
    s = TelemetryStore.from_url(f"sqlite:///{db_path}")
    assert s.init_schema(max_retries=1, retry_delay=0)
    assert db_path.parent.is_dir()
    s.insert(_reading())
    assert len(s.list_all()) == 1
    s.close()


def test_violation_message_keeps_full_precision(store: TelemetryStore):
    with pytest.raises(ConstraintViolation) as exc:
        store.insert(_reading(altitude=3000.0000001))
    assert "3000.0000001" in str(exc.value)
