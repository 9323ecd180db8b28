"""Protocols for tracing infrastructure.

These protocols define the interface for wave history backends, allowing
different implementations (in-memory, file, database).
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from orchestrate.tracing.models import WaveRecord


@runtime_checkable
class WaveHistory(Protocol):
    """Protocol for storing and retrieving per-wave search history.

    The scheduler calls record_wave once per completed wave, from the thread
    that runs the search.

    Usage:
        history = InMemoryWaveHistory()
        solve(catalog, recorder=history)

        record = history.get_wave(6)
        total = sum(r.frontier_size for r in history)
    """

    def record_wave(self, record: WaveRecord) -> None:
        """Record a completed wave.

        Args:
            record: Complete record of the wave to store.
        """
        ...

    def get_wave(self, wave: int) -> WaveRecord | None:
        """Get a wave record.

        Args:
            wave: The wave index to retrieve.

        Returns:
            The WaveRecord if available, None if not in storage.
        """
        ...

    def clear(self) -> None:
        """Clear all stored history."""
        ...

    @property
    def wave_count(self) -> int:
        """Number of waves currently stored."""
        ...
