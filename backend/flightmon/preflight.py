from __future__ import annotations

"""Preflight checks for container startup.

- ensures data directory exists for SQLite
- prints config summary
"""

import os
from flightmon.config import settings


def mask_url(db_url: str) -> str:
    # Hide password: show scheme + host only
    if "@" not in db_url:
        return db_url
    parts = db_url.split("@")
    return parts[0].split("://")[0] + "://***@" + parts[-1]


def main():
    if settings.is_sqlite:
        os.makedirs("data", exist_ok=True)
    print("Preflight OK")
    print(f"DATABASE_URL={mask_url(settings.database_url)}")
    print(f"BACKEND_PORT={settings.backend_port}")
    print(f"CORS_ORIGINS={settings.cors_origins}")


if __name__ == "__main__":
    main()
