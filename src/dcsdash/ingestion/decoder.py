"""Telemetry line decoding.

Each datagram carries one or more newline-separated JSON objects. A
line is decoded completely or not at all; no partial record is ever
built from malformed input.
"""

from __future__ import annotations

from collections.abc import Iterator

from pydantic import ValidationError

from dcsdash.exceptions import TelemetryDecodeError
from dcsdash.models.telemetry import TelemetryRecord


def split_records(payload: bytes) -> Iterator[str]:
    """Yield the trimmed, non-empty lines of a datagram.

    Bytes that are not valid UTF-8 make the whole datagram count as
    empty.
    """
    try:
        text = payload.decode("utf-8")
    except UnicodeDecodeError:
        return
    for line in text.split("\n"):
        line = line.strip()
        if line:
            yield line


def decode_line(line: str) -> TelemetryRecord:
    """Parse one JSON line into a :class:`TelemetryRecord`.

    Raises
    ------
    TelemetryDecodeError
        The line is not a JSON object matching the record shape.
    """
    try:
        return TelemetryRecord.model_validate_json(line)
    except ValidationError as exc:
        raise TelemetryDecodeError(
            f"Malformed telemetry line ({exc.error_count()} errors)",
            line=line,
        ) from exc
