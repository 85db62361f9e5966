"""Bounded FIFO buffers held in the snapshot.

Both buffers are immutable: ``append`` returns a new buffer, so a
snapshot handed to the renderer can never change underneath it.
"""

from __future__ import annotations

import dataclasses
from collections.abc import Iterator
from typing import TypeVar

from dcsdash.models.input_log import InputLogEntry

T = TypeVar("T")


def bounded_append(items: tuple[T, ...], item: T, capacity: int) -> tuple[T, ...]:
    """Append *item* and drop the oldest entries beyond *capacity*."""
    merged = (*items, item)
    if len(merged) > capacity:
        return merged[len(merged) - capacity :]
    return merged


@dataclasses.dataclass(frozen=True, slots=True)
class HistoryBuffer:
    """Time-ascending scalar samples, at most ``capacity`` of them."""

    capacity: int
    samples: tuple[float, ...] = ()

    def __post_init__(self) -> None:
        if self.capacity <= 0:
            raise ValueError("capacity must be positive")
        if len(self.samples) > self.capacity:
            object.__setattr__(self, "samples", self.samples[-self.capacity :])

    def __len__(self) -> int:
        return len(self.samples)

    def __iter__(self) -> Iterator[float]:
        return iter(self.samples)

    @property
    def latest(self) -> float | None:
        return self.samples[-1] if self.samples else None

    def append(self, value: float) -> HistoryBuffer:
        return dataclasses.replace(self, samples=bounded_append(self.samples, float(value), self.capacity))

    def tail(self, count: int, *, scale: float = 1.0) -> list[float]:
        """Return up to *count* most recent samples, scaled and clamped at zero."""
        if count <= 0:
            return []
        return [max(0.0, value * scale) for value in self.samples[-count:]]


@dataclasses.dataclass(frozen=True, slots=True)
class InputLog:
    """Most recent pad events, oldest first."""

    capacity: int
    entries: tuple[InputLogEntry, ...] = ()

    def __post_init__(self) -> None:
        if self.capacity <= 0:
            raise ValueError("capacity must be positive")

    def __len__(self) -> int:
        return len(self.entries)

    def __iter__(self) -> Iterator[InputLogEntry]:
        return iter(self.entries)

    def append(self, entry: InputLogEntry) -> InputLog:
        return dataclasses.replace(self, entries=bounded_append(self.entries, entry, self.capacity))

    def lines(self, count: int) -> list[str]:
        if count <= 0:
            return []
        return [entry.text for entry in self.entries[-count:]]
