"""Command-line monitor.

    flightmon submit --altitude 1200 --heading 90 --attitude 0
    flightmon show --mode visual
    flightmon serve
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import List, Optional

import httpx

from flightmon.config import settings
from flightmon.observability.logging import configure_logging
from flightmon.services.telemetry_client import ClientError, TelemetryClient
from flightmon.ui.display import render_gauges, render_text

logger = logging.getLogger("flightmon.cli")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="flightmon", description="Flight indicators monitor")
    parser.add_argument("--url", default=None, help=f"API base URL (default {settings.api_base_url})")
    sub = parser.add_subparsers(dest="command", required=True)

    p_submit = sub.add_parser("submit", help="store a new reading")
    p_submit.add_argument("--altitude", type=float, required=True)
    p_submit.add_argument("--heading", type=float, required=True, help="HIS, degrees")
    p_submit.add_argument("--attitude", type=float, required=True, help="ADI")

    p_show = sub.add_parser("show", help="show stored readings, newest first")
    p_show.add_argument("--mode", choices=("text", "visual"), default="text")

    sub.add_parser("serve", help="run the API server")
    return parser


def _serve() -> int:
    import uvicorn

    uvicorn.run("flightmon.main:app", host=settings.backend_host, port=settings.backend_port)
    return 0


def main(argv: Optional[List[str]] = None, client: Optional[TelemetryClient] = None) -> int:
    configure_logging()
    args = build_parser().parse_args(argv)

    if args.command == "serve":
        return _serve()

    client = client or TelemetryClient(args.url)
    try:
        if args.command == "submit":
            print(client.submit(args.altitude, args.heading, args.attitude))
            print(render_text(client.list()))
        else:
            readings = client.list()
            render = render_gauges if args.mode == "visual" else render_text
            print(render(readings))
    except ClientError as e:
        print(f"Error ({e.status_code}): {e.message}", file=sys.stderr)
        return 1
    except httpx.TransportError as e:
        logger.debug("Network error: %s", e)
        print(f"Could not connect to server at {client.base_url}. Is it running?", file=sys.stderr)
        return 1
    finally:
        client.close()
    return 0


if __name__ == "__main__":
    sys.exit(main())
