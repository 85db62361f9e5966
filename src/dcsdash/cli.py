"""Command line entry point."""

from __future__ import annotations

import argparse
import asyncio
import logging
import sys
from collections.abc import Sequence

from dcsdash.app import run_dashboard
from dcsdash.config import DashConfig
from dcsdash.exceptions import DashConfigError, DashTerminalError

_logger = logging.getLogger("dcsdash")


def _parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="dcsdash",
        description="Live terminal dashboard for DCS telemetry received over UDP.",
    )
    parser.add_argument("--host", help="Local address to bind the telemetry socket (default 127.0.0.1).")
    parser.add_argument("--port", type=int, help="UDP port for telemetry (default 5010, or $PORT).")
    parser.add_argument("--pad-device", help="Event device path of the pad (default: $WACOM_EVENT or discovery).")
    parser.add_argument(
        "--no-pad",
        dest="pad_enabled",
        action="store_false",
        default=None,
        help="Do not look for a pad; run without pad controls.",
    )
    parser.add_argument("--tick-ms", type=int, help="Redraw period in milliseconds (default 100).")
    parser.add_argument("--log-file", help="Write logs to this file instead of stderr.")
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Enable debug logs.",
    )
    return parser.parse_args(argv)


def _configure_logging(verbose: bool, log_file: str | None) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s" if log_file else "%(levelname)s %(name)s: %(message)s",
        filename=log_file,
    )


def main(argv: Sequence[str] | None = None) -> int:
    args = _parse_args(argv)
    try:
        config = DashConfig.from_env(
            host=args.host,
            port=args.port,
            pad_device=args.pad_device,
            pad_enabled=args.pad_enabled,
            render_interval=args.tick_ms / 1000.0 if args.tick_ms is not None else None,
            log_file=args.log_file,
        )
    except DashConfigError as exc:
        print(f"dcsdash: {exc}", file=sys.stderr)
        return 2

    _configure_logging(args.verbose, config.log_file)
    try:
        asyncio.run(run_dashboard(config))
    except DashTerminalError as exc:
        _logger.debug("Terminal setup failed", exc_info=True)
        print(f"dcsdash: {exc}", file=sys.stderr)
        return 1
    return 0
