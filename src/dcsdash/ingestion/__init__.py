"""Ingestion layer.

Adapters that receive telemetry datagrams and pad events, turn them into
typed records and publish them into the state hub.
"""

__all__: list[str] = []
