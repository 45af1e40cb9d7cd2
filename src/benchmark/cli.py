"""Command-line entry point: python -m src.benchmark"""

import argparse
import logging
from pathlib import Path
from typing import List, Optional

from src.benchmark.report import (
    CHART_FILENAME,
    REPORT_FILENAME,
    format_table,
    render_chart,
    write_report_json,
)
from src.benchmark.runner import (
    BenchmarkConfig,
    MultiplicationBenchmark,
    MultiplicationMismatch,
)

logger = logging.getLogger(__name__)

_DEFAULTS = BenchmarkConfig()


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="bigmul-bench",
        description="Time direct, divide & conquer and Karatsuba multiplication "
        "and check that all three agree.",
    )
    parser.add_argument("--min-digits", type=int, default=_DEFAULTS.min_digits)
    parser.add_argument("--max-digits", type=int, default=_DEFAULTS.max_digits)
    parser.add_argument("--num-sizes", type=int, default=_DEFAULTS.num_sizes)
    parser.add_argument(
        "--instances",
        type=int,
        default=_DEFAULTS.num_instances,
        help="Random operand pairs per input size.",
    )
    parser.add_argument(
        "--threshold",
        type=int,
        default=_DEFAULTS.threshold_limbs,
        help="Limb count at which recursion falls back to schoolbook.",
    )
    parser.add_argument("--seed", type=int, default=None)
    parser.add_argument("--output-dir", type=Path, default=_DEFAULTS.output_dir)
    parser.add_argument("--no-chart", action="store_true", help="Skip the HTML chart.")
    parser.add_argument(
        "--log-level",
        default="INFO",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
    )
    return parser.parse_args(argv)


def config_from_args(args: argparse.Namespace) -> BenchmarkConfig:
    return BenchmarkConfig(
        min_digits=args.min_digits,
        max_digits=args.max_digits,
        num_sizes=args.num_sizes,
        num_instances=args.instances,
        threshold_limbs=args.threshold,
        seed=args.seed,
        output_dir=args.output_dir,
    )


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)
    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        config = config_from_args(args)
    except ValueError as e:
        logger.error("Invalid configuration: %s", e)
        return 2

    try:
        report = MultiplicationBenchmark(config).run()
    except MultiplicationMismatch:
        return 1

    for line in format_table(report):
        print(line)

    write_report_json(report, config.output_dir / REPORT_FILENAME)
    if not args.no_chart:
        render_chart(report, config.output_dir / CHART_FILENAME)

    return 0
