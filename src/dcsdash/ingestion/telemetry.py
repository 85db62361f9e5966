"""Telemetry ingestion.

Turns datagrams into state-hub updates and owns the UDP receive loop.
Every decoded record is published as its own atomic update, in arrival
order; a malformed line is dropped without affecting its siblings.
"""

from __future__ import annotations

import asyncio
import dataclasses
import functools
import logging
import socket

from dcsdash._constants import RECV_BUFFER_SIZE, RECV_RETRY_DELAY_S
from dcsdash.exceptions import DashTransportError, TelemetryDecodeError
from dcsdash.ingestion.decoder import decode_line, split_records
from dcsdash.models.telemetry import TelemetryRecord
from dcsdash.state.hub import StateHub
from dcsdash.state.snapshot import Snapshot

_logger = logging.getLogger(__name__)


def apply_telemetry(snapshot: Snapshot, record: TelemetryRecord) -> Snapshot:
    """Replace the record and extend both chart histories.

    Absent airspeed or altitude is charted as zero; the record itself
    keeps the field absent.
    """
    ias = record.ias_ms if record.ias_ms is not None else 0.0
    alt = record.alt_msl if record.alt_msl is not None else 0.0
    return dataclasses.replace(
        snapshot,
        telemetry=record,
        ias_history=snapshot.ias_history.append(ias),
        alt_history=snapshot.alt_history.append(alt),
    )


@dataclasses.dataclass
class TelemetryStats:
    datagrams: int = 0
    published: int = 0
    dropped: int = 0


class TelemetryIngestor:
    """Decode datagrams and publish each record into the hub."""

    def __init__(self, hub: StateHub) -> None:
        self._hub = hub
        self.stats = TelemetryStats()

    def ingest_datagram(self, payload: bytes) -> int:
        """Decode and publish every record in *payload*.

        Returns the number of records published.
        """
        self.stats.datagrams += 1
        published = 0
        for line in split_records(payload):
            try:
                record = decode_line(line)
            except TelemetryDecodeError as exc:
                self.stats.dropped += 1
                _logger.debug("Dropped telemetry line: %s (%.80s)", exc, exc.line)
                continue
            self.ingest_record(record)
            published += 1
        return published

    def ingest_record(self, record: TelemetryRecord) -> Snapshot:
        snapshot = self._hub.publish(functools.partial(apply_telemetry, record=record))
        self.stats.published += 1
        return snapshot


class UdpTelemetryListener:
    """Receive telemetry datagrams on a local UDP port.

    Usage::

        listener = UdpTelemetryListener(ingestor, ("127.0.0.1", 5010))
        await listener.run()
    """

    def __init__(
        self,
        ingestor: TelemetryIngestor,
        address: tuple[str, int],
        *,
        buffer_size: int = RECV_BUFFER_SIZE,
        retry_delay: float = RECV_RETRY_DELAY_S,
    ) -> None:
        self._ingestor = ingestor
        self._address = address
        self._buffer_size = buffer_size
        self._retry_delay = retry_delay
        self._sock: socket.socket | None = None

    @property
    def bound_address(self) -> tuple[str, int] | None:
        if self._sock is None:
            return None
        host, port = self._sock.getsockname()[:2]
        return host, port

    def bind(self) -> socket.socket:
        """Open and bind the socket.

        Raises
        ------
        DashTransportError
            The address could not be bound.
        """
        if self._sock is not None:
            return self._sock
        host, port = self._address
        sock = socket.socket(socket.AF_INET, socket.SOCK_DGRAM)
        try:
            sock.setblocking(False)
            sock.bind((host, port))
        except OSError as exc:
            sock.close()
            raise DashTransportError(f"Bind failed on {host}:{port}: {exc}", address=f"{host}:{port}") from exc
        self._sock = sock
        return sock

    def close(self) -> None:
        sock = self._sock
        self._sock = None
        if sock is not None:
            sock.close()

    async def run(self) -> None:
        """Receive until cancelled.

        A bind failure ends only this task. Receive errors are logged and
        retried after a short backoff.
        """
        try:
            sock = self.bind()
        except DashTransportError as exc:
            _logger.error("%s; telemetry disabled", exc)
            return

        loop = asyncio.get_running_loop()
        host, port = self.bound_address or self._address
        _logger.info("Listening for telemetry on %s:%d", host, port)
        try:
            while True:
                try:
                    payload = await loop.sock_recv(sock, self._buffer_size)
                except OSError as exc:
                    _logger.warning("UDP recv error: %s", exc)
                    await asyncio.sleep(self._retry_delay)
                    continue
                self._ingestor.ingest_datagram(payload)
        finally:
            self.close()
