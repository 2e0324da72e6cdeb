"""Command-line entry point for the adoption engine.

Usage:
    python -m abrigo "RATO,BOLA" "RATO,NOVELO" "Rex,Fofo"
    python -m abrigo "SKATE,RATO,BOLA" "LASER" "Loco,Rex" --trace
    python -m abrigo --demo
    python -m abrigo "CAIXA,RATO" "RATO,BOLA" "Bola" --catalog configs/catalog.yaml

The result is printed as JSON: {"lista": [...]} on success or
{"erro": "..."} when the input is rejected.
"""

from __future__ import annotations

import argparse
import json
import sys
from dataclasses import replace
from pathlib import Path
from typing import List, Optional, Sequence, Tuple

from .config import Settings
from .engine import evaluate_adoptions, evaluate_adoptions_with_trace
from .exceptions import CatalogError
from .formatting import decision_view
from .logging_config import get_logger, setup_logging
from .state import AdoptionResult

logger = get_logger(__name__)

# Showcase inputs: one successful evaluation and one rejected animal.
DEMO_SCENARIOS: Tuple[Tuple[str, str, str], ...] = (
    ("RATO,BOLA", "RATO,NOVELO", "Rex,Fofo"),
    ("CAIXA,RATO", "RATO,BOLA", "Lulu"),
)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="abrigo",
        description="Decide which adopter takes each shelter animal",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__,
    )
    parser.add_argument("adopter1", nargs="?", default="", help="Comma-separated toys of adopter 1")
    parser.add_argument("adopter2", nargs="?", default="", help="Comma-separated toys of adopter 2")
    parser.add_argument("animals", nargs="?", default="", help="Comma-separated animal processing order")
    parser.add_argument(
        "--catalog",
        type=Path,
        default=None,
        help="YAML catalog to use instead of the built-in one",
    )
    parser.add_argument(
        "--log-level",
        default=None,
        help="Logging level (default: WARNING, or ABRIGO_LOG_LEVEL)",
    )
    parser.add_argument("--json-logs", action="store_true", help="Emit logs as JSON lines")
    parser.add_argument("--trace", action="store_true", help="Include per-animal decisions in the output")
    parser.add_argument("--demo", action="store_true", help="Run the showcase scenarios")
    return parser


def render(result: AdoptionResult, *, trace: bool = False) -> dict:
    payload = result.to_dict()
    if trace and result.ok:
        payload["trace"] = [decision_view(decision) for decision in result.trace]
    return payload


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the CLI.

    Returns:
        Exit code (0 when every evaluation succeeded, 1 otherwise).
    """
    args = build_parser().parse_args(argv)
    settings = Settings.from_env()
    setup_logging(args.log_level or settings.log_level, format_json=args.json_logs or settings.log_json)

    if args.catalog is not None:
        settings = replace(settings, catalog_path=args.catalog)
    try:
        catalog = settings.load_catalog()
    except (OSError, CatalogError) as exc:
        print(f"Catalog error: {exc}", file=sys.stderr)
        return 2
    evaluate_fn = evaluate_adoptions_with_trace if args.trace else evaluate_adoptions

    scenarios: List[Tuple[str, str, str]]
    if args.demo:
        scenarios = list(DEMO_SCENARIOS)
    else:
        scenarios = [(args.adopter1, args.adopter2, args.animals)]

    exit_code = 0
    for adopter1, adopter2, animals in scenarios:
        logger.info("Evaluating adopter1=%r adopter2=%r animals=%r", adopter1, adopter2, animals)
        result = evaluate_fn(adopter1, adopter2, animals, catalog)
        print(json.dumps(render(result, trace=args.trace), ensure_ascii=False))
        if not result.ok:
            exit_code = 1
    return exit_code


if __name__ == "__main__":
    sys.exit(main())
