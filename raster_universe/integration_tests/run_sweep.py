#!/usr/bin/env python3
"""
Property sweep: run every algorithm over random inputs and check invariants.

Line cases run step, dda and bresenham; circle cases run circle.

Invariants checked per run:
- endpoints: first/last point are the (rounded) start/end point
- count: max(|dx|, |dy|) + 1 points for line algorithms
- trace_len: one trace line per point (lines) or per 8 points (circle)
- symmetry: circle point set closed under the 8 reflections
- distance: every circle point within 1 of the radius
- deterministic: a second run has the same result_digest

Usage:
    python run_sweep.py --limit 50 --seed 0
"""

import argparse
import math
import sys
from dataclasses import asdict
from pathlib import Path
from typing import Any, Dict, List, Tuple

# Add parent directory to path to import raster_core / raster_app
sys.path.insert(0, str(Path(__file__).parent.parent))

from raster_app.driver import rasterize
from raster_app.utils import setup_logger
from raster_core.digest import result_digest
from raster_core.types import CircleSpec, LineSpec, RasterResult

from utils import build_receipt, compute_summary_stats, sample_cases, save_receipt

LINE_ALGORITHMS = ("step", "dda", "bresenham")
CIRCLE_ALGORITHMS = ("circle",)


def check_line(spec: LineSpec, result: RasterResult, rerun: RasterResult) -> Dict[str, Any]:
    """Check line invariants; integer endpoints assumed (sweep inputs are ints)."""
    coords = result.coords()
    expected_count = max(abs(spec.x1 - spec.x0), abs(spec.y1 - spec.y0)) + 1
    return {
        "points": len(coords),
        "endpoints": coords[0] == (spec.x0, spec.y0) and coords[-1] == (spec.x1, spec.y1),
        "count": len(coords) == expected_count,
        "trace_len": len(result.trace) == len(coords),
        "deterministic": result_digest(result) == result_digest(rerun),
    }


def check_circle(spec: CircleSpec, result: RasterResult, rerun: RasterResult) -> Dict[str, Any]:
    """Check circle invariants."""
    offsets = {(x - spec.xc, y - spec.yc) for x, y in result.coords()}
    symmetric = all(
        (sx * a, sy * b) in offsets and (sx * b, sy * a) in offsets
        for a, b in offsets
        for sx in (1, -1)
        for sy in (1, -1)
    )
    within = all(abs(math.hypot(a, b) - spec.r) <= 1.0 for a, b in offsets)
    return {
        "points": len(result),
        "symmetry": symmetric,
        "distance": within,
        "trace_len": len(result.trace) * 8 == len(result),
        "deterministic": result_digest(result) == result_digest(rerun),
    }


def failed_checks(checks: Dict[str, Dict[str, Any]]) -> List[str]:
    """Names of failed boolean checks as 'algo.check'."""
    return [
        f"{algo}.{name}"
        for algo, check in checks.items()
        for name, ok in check.items()
        if isinstance(ok, bool) and not ok
    ]


def validate_case(case_id: str, case: Dict[str, Any], logger) -> Dict[str, Any]:
    """
    Validate a single case across its algorithms.

    Returns:
        Receipt dictionary
    """
    spec = case["spec"]
    spec_dict = {"kind": spec.kind, **asdict(spec)}
    try:
        checks: Dict[str, Dict[str, Any]] = {}
        if case["kind"] == "line":
            for algo in LINE_ALGORITHMS:
                checks[algo] = check_line(spec, rasterize(spec, algo), rasterize(spec, algo))
        else:
            for algo in CIRCLE_ALGORITHMS:
                checks[algo] = check_circle(spec, rasterize(spec, algo), rasterize(spec, algo))

        failures = failed_checks(checks)
        if failures:
            logger.error(f"Case {case_id}: FAIL - {', '.join(failures)} ({spec})")
            status = "FAIL"
        else:
            logger.info(f"Case {case_id}: PASS")
            status = "PASS"

        return build_receipt(case_id=case_id, spec=spec_dict, checks=checks, status=status)

    except Exception as e:
        logger.error(f"Case {case_id}: Exception - {type(e).__name__}: {e}")
        return build_receipt(case_id=case_id, spec=spec_dict, status="FAIL", error=str(e))


def run_sweep(cases: Dict[str, Dict[str, Any]], receipts_dir: Path, logger) -> Tuple[List[Dict[str, Any]], Dict[str, Any]]:
    receipts = []
    for case_id, case in cases.items():
        receipt = validate_case(case_id, case, logger)
        receipts.append(receipt)
        save_receipt(receipt, receipts_dir)
    return receipts, compute_summary_stats(receipts)


def main():
    parser = argparse.ArgumentParser(description="Rasterization property sweep")
    parser.add_argument(
        "--limit", type=int, default=50, help="Cases per kind (default: 50)"
    )
    parser.add_argument(
        "--seed", type=int, default=None, help="Random seed for case sampling"
    )
    parser.add_argument(
        "--span", type=int, default=20, help="Coordinate range [-span, span] (default: 20)"
    )
    parser.add_argument(
        "--max-radius", type=int, default=15, help="Largest circle radius (default: 15)"
    )
    args = parser.parse_args()

    integration_dir = Path(__file__).parent
    logs_dir = integration_dir / "logs"
    receipts_dir = integration_dir / "receipts" / "sweep"

    logger = setup_logger("sweep", logs_dir / "sweep.log")

    logger.info("=" * 80)
    logger.info("Rasterization Property Sweep")
    logger.info(f"Cases per kind: {args.limit}")
    logger.info(f"Random seed: {args.seed}")
    logger.info("=" * 80)

    cases = sample_cases(n=args.limit, seed=args.seed, span=args.span, max_radius=args.max_radius)
    logger.info(f"Sampled {len(cases)} cases")

    receipts, stats = run_sweep(cases, receipts_dir, logger)

    logger.info("\n" + "=" * 80)
    logger.info("SUMMARY STATISTICS")
    logger.info("=" * 80)
    logger.info(f"Total cases: {stats['total_cases']}")
    logger.info(f"Passed: {stats['passed']}")
    logger.info(f"Failed: {stats['failed']}")
    logger.info(f"Pass rate: {stats['pass_rate']:.2%}")

    for algo, algo_stats in stats["algorithms"].items():
        logger.info(
            f"  {algo}: runs={algo_stats['runs']}, "
            f"determinism={algo_stats['determinism_rate']:.2%}, "
            f"avg_points={algo_stats['avg_points']:.1f}, max_points={algo_stats['max_points']}"
        )

    if stats["failed"] == 0:
        logger.info("✅ All invariants hold (PASS)")
        return 0

    logger.error(f"❌ {stats['failed']} case(s) violated invariants (FAIL)")
    return 1


if __name__ == "__main__":
    sys.exit(main())
