#!/usr/bin/env python3
"""Send synthetic telemetry to a running dashboard.

Emits one JSON line per tick in the exporter's wire format, with a
slowly climbing, accelerating aircraft. Useful for checking the
dashboard without a simulator.
"""

from __future__ import annotations

import argparse
import json
import logging
import math
import socket
import time
from typing import Any

_LOG = logging.getLogger("send_telemetry")


def _parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Send synthetic DCS telemetry over UDP.")
    parser.add_argument("--host", default="127.0.0.1", help="Dashboard host.")
    parser.add_argument("--port", type=int, default=5010, help="Dashboard UDP port.")
    parser.add_argument("--hz", type=float, default=10.0, help="Messages per second.")
    parser.add_argument(
        "--duration",
        type=float,
        default=0.0,
        help="Seconds to run (0 = run until Ctrl+C).",
    )
    parser.add_argument(
        "--malformed-every",
        type=int,
        default=0,
        help="Append a malformed line to every Nth datagram (0 = never).",
    )
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable debug logs.")
    return parser.parse_args()


def build_payload(t: float) -> dict[str, Any]:
    ias = 120.0 + 30.0 * math.sin(t / 10.0)
    return {
        "name": "F-14B",
        "lat": 41.9 + t * 1e-5,
        "lon": 41.7,
        "alt_msl": 1500.0 + 10.0 * t,
        "alt_agl": 1200.0 + 10.0 * t,
        "ias_ms": ias,
        "tas_ms": ias * 1.05,
        "mach": ias / 340.0,
        "aoa_rad": 0.05,
        "vv_ms": 10.0,
        "att": {"pitch": 0.1, "bank": 0.2 * math.sin(t), "yaw": 1.0},
        "accel": {"x": 0.0, "y": 1.0, "z": 0.0},
        "engine": {
            "rpm": {"L": 85.0, "R": 86.0},
            "thrtl": {"L": 0.85, "R": 0.86},
            "thrtl_est": True,
            "noz": {"L": None, "R": None},
            "noz_present": False,
            "temp": {"L": 600.0, "R": 605.0},
            "fuelf": {"L": 0.9, "R": 0.9},
            "map_present": False,
        },
        "mech": {"gear": 0.0, "flaps": 0.0, "airbrake": 0.0, "hook": 0.0, "wing": 0.2, "wow": 0.0, "wow_guess": False},
    }


def _main() -> int:
    args = _parse_args()
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s %(name)s: %(message)s",
    )
    interval = 1.0 / args.hz if args.hz > 0 else 0.1
    started = time.monotonic()
    sent = 0

    with socket.socket(socket.AF_INET, socket.SOCK_DGRAM) as sock:
        _LOG.info("Sending to %s:%d at %.1f Hz", args.host, args.port, args.hz)
        try:
            while True:
                elapsed = time.monotonic() - started
                if args.duration and elapsed >= args.duration:
                    break
                message = json.dumps(build_payload(elapsed)) + "\n"
                if args.malformed_every and sent % args.malformed_every == 0:
                    message += "{not json\n"
                sock.sendto(message.encode("utf-8"), (args.host, args.port))
                sent += 1
                _LOG.debug("Sent datagram #%d (%d bytes)", sent, len(message))
                time.sleep(interval)
        except KeyboardInterrupt:
            pass
    _LOG.info("Sent %d datagrams", sent)
    return 0


if __name__ == "__main__":
    raise SystemExit(_main())
