"""Single owner of the live dashboard snapshot.

This is the only component allowed to install a new snapshot.
Producers describe their change as a pure function of the current
snapshot; the hub applies those functions one at a time under a lock,
so two producers can never both start from the same stale snapshot
and overwrite each other.
"""

from __future__ import annotations

import dataclasses
import threading
from collections.abc import Callable

from dcsdash.state.snapshot import Snapshot

SnapshotUpdate = Callable[[Snapshot], Snapshot]


class StateHub:
    """Serialized read-modify-publish store for :class:`Snapshot`.

    ``publish`` may be called from the event loop or from worker
    threads. ``current`` never takes the lock: snapshots are immutable
    and replacing the reference is atomic, so readers always see a
    complete, installed snapshot.
    """

    def __init__(self, initial: Snapshot | None = None) -> None:
        self._lock = threading.Lock()
        self._current = initial if initial is not None else Snapshot.initial()

    @property
    def version(self) -> int:
        return self._current.version

    def current(self) -> Snapshot:
        """Return the latest installed snapshot."""
        return self._current

    def publish(self, update: SnapshotUpdate) -> Snapshot:
        """Apply *update* to the current snapshot and install the result.

        The update runs while holding the hub lock, so it must be a quick,
        pure transformation. If it raises, nothing is installed and the
        exception propagates to the producer.
        """
        with self._lock:
            base = self._current
            produced = update(base)
            installed = dataclasses.replace(produced, version=base.version + 1)
            self._current = installed
        return installed
