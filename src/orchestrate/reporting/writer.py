"""Solution output file."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import TYPE_CHECKING, TextIO

from orchestrate.reporting.formatting import letters

if TYPE_CHECKING:
    from orchestrate.core.catalog import Catalog
    from orchestrate.core.types import State

logger = logging.getLogger(__name__)


class SolutionFileWriter:
    """Result handler that writes each solution's letters on its own line.

    Usage:
        with SolutionFileWriter("Solutions.txt", catalog) as writer:
            solve(catalog, result_handler=writer)
    """

    def __init__(self, path: str | Path, catalog: Catalog) -> None:
        self._path = Path(path)
        self._catalog = catalog
        self._file: TextIO | None = None
        self._written = 0

    @property
    def path(self) -> Path:
        return self._path

    @property
    def written(self) -> int:
        """Solutions written so far."""
        return self._written

    def open(self) -> None:
        """Create or truncate the output file."""
        if self._file is None:
            self._file = self._path.open("w", encoding="utf-8", newline="\n")

    def close(self) -> None:
        if self._file is not None:
            self._file.close()
            self._file = None
            logger.info("Wrote %d solutions to %s", self._written, self._path)

    def __call__(self, state: State) -> None:
        if self._file is None:
            raise RuntimeError(f"{self._path} is not open")
        self._file.write(letters(state, self._catalog) + "\n")
        self._written += 1

    def __enter__(self) -> SolutionFileWriter:
        self.open()
        return self

    def __exit__(self, *exc: object) -> None:
        self.close()
