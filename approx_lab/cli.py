#!/usr/bin/env python3
"""
approx - Test speed and precision of numeric function approximations.

Usage:
    approx -f FUNCTION [options]

Functions:
    sqrtf      - float32 square root
    invsqrtf   - float32 inverse square root
    log10f     - float32 base 10 logarithm
    expf       - float32 exponential
    sqrti      - uint32 integer square root
    atan2f     - float32 atan2(y, x)

Exit codes:
    0  success
    1  no function specified
    2  unsupported function name
    3  interpreter is tracing or in development mode, timings would be meaningless
    4  the benchmark run failed
    130 interrupted by user
"""

import argparse
import logging
import os
import sys
from pathlib import Path
from typing import Optional

import numpy as np
from dotenv import load_dotenv

from .harness.reporter import ChartReporter, ConsoleReporter, HTMLReporter, JSONReporter
from .harness.result import ResultSet
from .harness.runner import HarnessConfig
from .scenarios import get_suite, list_suites

EXIT_OK = 0
EXIT_NO_FUNCTION = 1
EXIT_UNSUPPORTED_FUNCTION = 2
EXIT_DEBUG_BUILD = 3
EXIT_FAILURE = 4
EXIT_INTERRUPTED = 130

PLOT_FORMATS = ["html", "png", "svg", "pdf", "json"]
DEFAULT_SAMPLES = 10000

logger = logging.getLogger(__name__)


def is_debug_build() -> bool:
    """True when a tracer or debugger is attached, or ``-X dev`` is active."""
    return sys.gettrace() is not None or bool(sys.flags.dev_mode)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="approx",
        description="approx - Test speed and precision of numeric function approximations",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
    approx -f sqrtf
    approx -f log10f -n 2000 -p html
    approx -f sqrti --loops 5 -p json -o results/
    approx --list
        """,
    )

    parser.add_argument(
        "-f",
        "--function",
        help=f"Name of function to test. Supported: {', '.join(list_suites())}",
    )
    parser.add_argument(
        "-n",
        "--samples",
        type=int,
        default=int(os.getenv("APPROX_SAMPLES", DEFAULT_SAMPLES)),
        help=f"Number of samples in the input range (default: {DEFAULT_SAMPLES})",
    )
    parser.add_argument(
        "-l",
        "--loops",
        type=int,
        default=None,
        help="Timed passes over the samples per candidate (default: APPROX_LOOP_COUNT or 10)",
    )
    parser.add_argument(
        "-p",
        "--plot",
        choices=PLOT_FORMATS,
        help="Also write results to a file in this format",
    )
    parser.add_argument(
        "-o",
        "--output-dir",
        type=Path,
        default=Path(os.getenv("APPROX_OUTPUT_DIR", "results")),
        help="Directory to save results (default: results/)",
    )
    parser.add_argument(
        "--list",
        action="store_true",
        help="List available functions and exit",
    )
    parser.add_argument(
        "--no-color",
        action="store_true",
        help="Disable ANSI colors in console output",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Print progress while candidates run",
    )
    parser.add_argument(
        "--log-level",
        choices=["WARNING", "INFO", "DEBUG"],
        default="WARNING",
        help="Logging level for approx_lab",
    )

    return parser


def configure_logging(level_name: str) -> None:
    level = getattr(logging, level_name)
    pkg_logger = logging.getLogger("approx_lab")
    # One handler per process, bound to the current stderr
    for old in pkg_logger.handlers[:]:
        pkg_logger.removeHandler(old)
    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter(logging.BASIC_FORMAT))
    handler.setLevel(level)
    pkg_logger.addHandler(handler)
    pkg_logger.propagate = False
    pkg_logger.setLevel(level)


def print_suites() -> None:
    for name in list_suites():
        definition = get_suite(name)
        info = definition.to_dict()
        print(f"  {name:<10} {info['description']} ({info['candidates']} candidates, default range {info['default_range']})")


def write_outputs(results: ResultSet, plot_format: str, output_dir: Path, base_name: str) -> list[Path]:
    """Write the requested file report and return the paths written."""
    if plot_format == "json":
        return [JSONReporter(output_dir).save_result_set(results, f"{base_name}.json")]

    if plot_format == "html":
        chart = ChartReporter(output_dir).suite_overview(results, f"{base_name}.svg")
        page = HTMLReporter(output_dir).save(
            results,
            f"{base_name}.html",
            chart_filename=chart.name if chart else None,
        )
        return [p for p in (chart, page) if p is not None]

    chart = ChartReporter(output_dir).suite_overview(results, f"{base_name}.{plot_format}")
    return [chart] if chart else []


def main(argv: Optional[list[str]] = None) -> int:
    load_dotenv()

    parser = build_parser()
    args = parser.parse_args(argv)
    configure_logging(args.log_level)

    if args.list:
        print("Available functions:")
        print_suites()
        return EXIT_OK

    if is_debug_build():
        print("Please run approx without a debugger, tracer or -X dev, timings would be meaningless!")
        return EXIT_DEBUG_BUILD

    if not args.function:
        print("No function name passed!")
        parser.print_usage()
        return EXIT_NO_FUNCTION

    definition = get_suite(args.function)
    if definition is None:
        print(f'Unsupported function "{args.function}"')
        print(f"Supported: {', '.join(list_suites())}")
        return EXIT_UNSUPPORTED_FUNCTION

    config = HarnessConfig.from_env(loop_count=args.loops, verbose=args.verbose or None)
    suite = definition.create(sample_count=args.samples, config=config)
    logger.info("Running %s with %d samples, %d loops", args.function, args.samples, config.loop_count)

    try:
        # Out-of-domain candidates may produce inf / nan, reports show them as is
        with np.errstate(all="ignore"):
            results = suite.run_all()
    except KeyboardInterrupt:
        print("\nBenchmark interrupted by user")
        return EXIT_INTERRUPTED
    except Exception as e:
        print(f"\nError: {e}")
        logger.debug("Benchmark failed", exc_info=True)
        return EXIT_FAILURE

    reporter = ConsoleReporter(use_color=not args.no_color)
    print(reporter.result_set(results))

    if args.plot:
        for path in write_outputs(results, args.plot, args.output_dir, definition.name):
            print(f"Wrote {path}")

    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
