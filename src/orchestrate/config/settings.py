"""Configuration settings using Pydantic Settings.

Provides typed solver configuration with environment variable support.

Usage:
    from orchestrate.config import SolverSettings

    # Load from environment variables (ORCHESTRATE_*)
    settings = SolverSettings()

    # Or override with explicit values
    settings = SolverSettings(workers=8, backend="process")
    summary = solve(catalog, config=settings.to_solver_config())
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from orchestrate.scheduling.models import BackendName, SolverConfig

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class SolverSettings(BaseSettings):  # type: ignore[misc]
    """Configuration for solver runs.

    Attributes:
        workers: Concurrent scan workers (1 = sequential).
        backend: Worker pool kind when workers > 1.
        chunk_size: Max states per scan slice (None = one slice per worker).
        report_every: Scanned-state interval between progress lines.
        output_path: File the CLI writes solutions to.
        catalog_path: JSON catalog file (None = reference game).
        log_level: Root logging level for the CLI.

    Environment Variables:
        ORCHESTRATE_WORKERS
        ORCHESTRATE_BACKEND
        ORCHESTRATE_CHUNK_SIZE
        ORCHESTRATE_REPORT_EVERY
        ORCHESTRATE_OUTPUT_PATH
        ORCHESTRATE_CATALOG_PATH
        ORCHESTRATE_LOG_LEVEL
    """

    model_config = SettingsConfigDict(
        env_prefix="ORCHESTRATE_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    workers: int = Field(default=1, ge=1)
    backend: BackendName = "thread"
    chunk_size: int | None = Field(default=None, ge=1)
    report_every: int = Field(default=50_000, ge=1)
    output_path: Path = Path("Solutions.txt")
    catalog_path: Path | None = None
    log_level: LogLevel = "INFO"

    @field_validator("log_level", mode="before")
    @classmethod
    def _normalize_log_level(cls, value: Any) -> Any:
        return value.upper() if isinstance(value, str) else value

    def to_solver_config(self) -> SolverConfig:
        """Scheduler configuration carried by these settings."""
        return SolverConfig(
            workers=self.workers,
            backend=self.backend,
            chunk_size=self.chunk_size,
            report_every=self.report_every,
        )
