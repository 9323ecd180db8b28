"""Configuration module using Pydantic Settings.

Provides typed solver configuration with environment variable support.

Usage:
    from orchestrate.config import SolverSettings

    settings = SolverSettings(workers=4)
"""

from orchestrate.config.settings import SolverSettings

__all__ = [
    "SolverSettings",
]
