"""Command-line entry point.

Usage:
    orchestrate-solve --workers 8 --backend process --output Solutions.txt
    python -m orchestrate --catalog my_game.json --summary

Settings not given on the command line come from ORCHESTRATE_* environment
variables (see SolverSettings).
"""

from __future__ import annotations

import argparse
import json
import logging
from collections.abc import Sequence

from pydantic import ValidationError

from orchestrate.config import SolverSettings
from orchestrate.core.catalog import CatalogError, load_catalog
from orchestrate.core.economy import score_positive
from orchestrate.game import REFERENCE_CATALOG
from orchestrate.reporting import SolutionFileWriter, describe_action, production_summary
from orchestrate.scheduling import solve

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="orchestrate-solve",
        description="Enumerate every self-sustaining, score-positive set of verbs",
    )
    parser.add_argument("--catalog", dest="catalog_path", help="JSON catalog (default: reference game)")
    parser.add_argument("--output", dest="output_path", help="Solutions file (default: Solutions.txt)")
    parser.add_argument("--workers", type=int, help="Concurrent scan workers")
    parser.add_argument(
        "--backend",
        choices=["sequential", "thread", "process"],
        help="Worker pool kind (default: thread). Threads share the GIL; use process for a CPU speedup",
    )
    parser.add_argument("--chunk-size", type=int, help="Max states per scan slice")
    parser.add_argument("--report-every", type=int, help="Scanned states between progress lines")
    parser.add_argument("--log-level", help="Logging level (default: INFO)")
    parser.add_argument("--summary", action="store_true", help="Print a JSON run summary to stdout")
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    overrides = {
        key: value
        for key, value in vars(args).items()
        if key != "summary" and value is not None
    }
    try:
        settings = SolverSettings(**overrides)
    except ValidationError as e:
        parser.error(str(e))

    logging.basicConfig(level=settings.log_level, format="%(message)s")

    try:
        catalog = load_catalog(settings.catalog_path) if settings.catalog_path else REFERENCE_CATALOG
    except (CatalogError, OSError) as e:
        logger.error("Invalid catalog: %s", e)
        return 2
    if catalog.score_resource is None:
        logger.error("Invalid catalog: no score_resource declared")
        return 2

    for line in production_summary(catalog):
        logger.info(line)
    for action in catalog:
        logger.info(describe_action(action, catalog))

    with SolutionFileWriter(settings.output_path, catalog) as writer:
        summary = solve(catalog, score_positive, writer, config=settings.to_solver_config())

    if args.summary:
        print(
            json.dumps(
                {
                    "solutions": summary.solution_count,
                    "waves": summary.waves,
                    "scanned": summary.scanned,
                    "eliminated": summary.eliminated,
                    "pruned": summary.pruned,
                    "elapsed": round(summary.elapsed, 3),
                    "output": str(settings.output_path),
                }
            )
        )
    return 0
