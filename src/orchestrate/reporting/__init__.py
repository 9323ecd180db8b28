"""Reporting: readable renderings and the solutions file writer."""

from orchestrate.reporting.formatting import (
    describe_action,
    describe_state,
    explain_non_viable,
    letters,
    production_summary,
    state_from_letters,
    to_binary,
)
from orchestrate.reporting.writer import SolutionFileWriter

__all__ = [
    "letters",
    "state_from_letters",
    "describe_state",
    "describe_action",
    "to_binary",
    "explain_non_viable",
    "production_summary",
    "SolutionFileWriter",
]
