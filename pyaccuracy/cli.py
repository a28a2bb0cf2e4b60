"""
Command-line entry point.

    python -m pyaccuracy [--type double] [--random-rows 200] [--strict] ...

Runs the I_v(x) suite and writes the report to standard output. The exit
status is 0 once the suite has run, whatever the accuracy results; with
--strict it is 1 when any case failed.
"""

from __future__ import annotations

import argparse
import sys
from typing import Sequence

from pyaccuracy.core.exceptions import PyAccuracyError
from pyaccuracy.core.precision import NUMERIC_TYPES, get_numeric_type, mpf_type
from pyaccuracy.core.validation import VALID_ERROR_POLICIES
from pyaccuracy.suites.bessel_i import bessel_i_suite, DEFAULT_TYPES
from pyaccuracy.suites.driver import run_suite
from pyaccuracy.tolerance.registry import ToleranceRegistry


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="pyaccuracy",
        description="Accuracy regression test for the modified Bessel function I_v(x).",
    )
    parser.add_argument(
        "--type", dest="types", action="append", choices=sorted(NUMERIC_TYPES),
        help="numeric type to test; repeat for several (default: all)",
    )
    parser.add_argument(
        "--mpf-bits", type=int, default=None,
        help="precision of the mpf type in bits",
    )
    parser.add_argument(
        "--random-rows", type=int, default=200,
        help="rows in each generated dataset (0 disables random data)",
    )
    parser.add_argument("--seed", type=int, default=42, help="seed for generated data")
    parser.add_argument(
        "--error-policy", choices=VALID_ERROR_POLICIES, default="report",
        help="how rows on which the function raises are treated",
    )
    parser.add_argument(
        "--tolerances", metavar="PATH", default=None,
        help="JSON tolerance rules, consulted before the built-in ones",
    )
    parser.add_argument(
        "--compare-other", action="store_true",
        help="also run mpmath at the type's precision (not checked)",
    )
    parser.add_argument(
        "--strict", action="store_true",
        help="exit with status 1 if any case fails",
    )
    parser.add_argument("--verbose", action="store_true", help="print timing")
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    try:
        names = args.types or [t.name for t in DEFAULT_TYPES]
        types = []
        for name in names:
            if name == "mpf" and args.mpf_bits is not None:
                types.append(mpf_type(args.mpf_bits))
            else:
                types.append(get_numeric_type(name))

        suite = bessel_i_suite(
            random_rows=max(args.random_rows, 1),
            seed=args.seed,
            include_random=args.random_rows > 0,
            types=tuple(types),
        )
        registry = suite.registry
        if args.tolerances:
            extra = ToleranceRegistry.from_json(args.tolerances)
            registry = registry.with_rules_first(extra.rules)

        report = run_suite(
            suite,
            registry=registry,
            error_policy=args.error_policy,
            compare_other=args.compare_other,
            verbose=args.verbose,
        )
    except (PyAccuracyError, OSError) as e:
        print(f"pyaccuracy: error: {e}", file=sys.stderr)
        return 2

    if args.strict and not report.passed:
        return 1
    return 0
