"""In-memory wave history."""

from __future__ import annotations

import json
from collections.abc import Iterator
from pathlib import Path

from orchestrate.tracing.models import WaveRecord


class InMemoryWaveHistory:
    """Keeps every WaveRecord of a run in wave order.

    Recording a wave index that is already stored replaces the old record.
    """

    def __init__(self) -> None:
        self._records: dict[int, WaveRecord] = {}

    def record_wave(self, record: WaveRecord) -> None:
        self._records[record.wave] = record

    def get_wave(self, wave: int) -> WaveRecord | None:
        return self._records.get(wave)

    def clear(self) -> None:
        self._records.clear()

    @property
    def wave_count(self) -> int:
        return len(self._records)

    def __iter__(self) -> Iterator[WaveRecord]:
        return iter(sorted(self._records.values(), key=lambda r: r.wave))

    def __len__(self) -> int:
        return len(self._records)

    def total_scanned(self) -> int:
        """Total states scanned over all stored waves."""
        return sum(r.frontier_size for r in self._records.values())

    def dump(self, path: str | Path) -> None:
        """Write all records to a JSON file."""
        Path(path).write_text(
            json.dumps([r.to_dict() for r in self], indent=2), encoding="utf-8"
        )

    @classmethod
    def load(cls, path: str | Path) -> InMemoryWaveHistory:
        """Read records written by dump."""
        history = cls()
        for data in json.loads(Path(path).read_text(encoding="utf-8")):
            history.record_wave(WaveRecord.from_dict(data))
        return history
