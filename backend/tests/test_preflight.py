from flightmon.config import Settings
from flightmon.preflight import mask_url


def test_mask_url_hides_credentials():
    assert mask_url("postgresql://user:secret@db:5432/flightmon") == "postgresql://***@db:5432/flightmon"


def test_mask_url_passthrough():
    assert mask_url("sqlite:///./data/flightmon.db") == "sqlite:///./data/flightmon.db"


def test_settings_defaults():
    s = Settings(_env_file=None)
    assert s.backend_port == 5001
    assert s.is_sqlite
    assert s.cors_origins_list == ["*"]
