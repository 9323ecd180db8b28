"""Tracing infrastructure for recording search runs wave by wave.

Usage:
    from orchestrate.tracing import InMemoryWaveHistory

    history = InMemoryWaveHistory()
    solve(catalog, recorder=history)
    for record in history:
        print(record.wave, record.frontier_size, record.solution_count)
"""

from orchestrate.tracing.memory import InMemoryWaveHistory
from orchestrate.tracing.models import WaveRecord
from orchestrate.tracing.protocol import WaveHistory

__all__ = [
    "WaveHistory",
    "WaveRecord",
    "InMemoryWaveHistory",
]
