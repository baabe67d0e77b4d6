"""
Utility functions for the rasterization property sweep.

Provides:
- Random case sampling (seeded)
- Receipt generation and saving
- Summary statistics
"""

import json
import random
from datetime import datetime
from pathlib import Path
from typing import Any, Dict, List, Optional

from raster_core.types import CircleSpec, LineSpec


def sample_cases(
    n: int = 50,
    seed: Optional[int] = None,
    span: int = 20,
    max_radius: int = 15,
) -> Dict[str, Dict[str, Any]]:
    """
    Draw N random line cases and N random circle cases.

    Every 10th line case is degenerate (coincident endpoints) and every 10th
    circle case has radius 0, so the edge cases are always exercised.

    Args:
        n: Number of cases of each kind
        seed: Optional random seed for reproducibility
        span: Coordinates are drawn from [-span, span]
        max_radius: Radii are drawn from [0, max_radius]

    Returns:
        Dict mapping case_id -> {"kind": "line"|"circle", "spec": LineSpec|CircleSpec}
    """
    rng = random.Random(seed)
    cases: Dict[str, Dict[str, Any]] = {}

    for i in range(n):
        x0, y0 = rng.randint(-span, span), rng.randint(-span, span)
        if i % 10 == 0:
            x1, y1 = x0, y0
        else:
            x1, y1 = rng.randint(-span, span), rng.randint(-span, span)
        cases[f"line_{i:04d}"] = {"kind": "line", "spec": LineSpec(x0, y0, x1, y1)}

    for i in range(n):
        xc, yc = rng.randint(-span, span), rng.randint(-span, span)
        r = 0 if i % 10 == 0 else rng.randint(0, max_radius)
        cases[f"circle_{i:04d}"] = {"kind": "circle", "spec": CircleSpec(xc, yc, r)}

    return cases


def build_receipt(
    case_id: str,
    spec: Dict[str, Any],
    checks: Optional[Dict[str, Dict[str, Any]]] = None,
    status: str = "PASS",
    error: Optional[str] = None,
) -> Dict[str, Any]:
    """
    Build a receipt dictionary for a case.

    Args:
        case_id: Case identifier
        spec: Input parameters as a plain dict
        checks: Per-algorithm check results, e.g.
            {"bresenham": {"points": 6, "endpoints": True, ...}}
        status: "PASS" or "FAIL"
        error: Error message if status is FAIL

    Returns:
        Receipt dictionary
    """
    receipt = {
        "case_id": case_id,
        "timestamp": datetime.now().isoformat(),
        "spec": spec,
        "status": status,
    }

    if checks is not None:
        receipt["checks"] = checks

    if error is not None:
        receipt["error"] = error

    return receipt


def save_receipt(receipt: Dict[str, Any], output_dir: Path) -> None:
    """
    Save receipt to JSON file.

    Args:
        receipt: Receipt dictionary
        output_dir: Directory to save receipt (e.g., receipts/sweep/)
    """
    output_dir.mkdir(parents=True, exist_ok=True)
    receipt_file = output_dir / f"{receipt['case_id']}.json"

    with open(receipt_file, "w", encoding="utf-8") as f:
        json.dump(receipt, f, indent=2)


def compute_summary_stats(receipts: List[Dict[str, Any]]) -> Dict[str, Any]:
    """
    Compute summary statistics from a list of receipts.

    Args:
        receipts: List of receipt dictionaries

    Returns:
        Summary statistics dictionary with overall pass rate and, per
        algorithm, run count, determinism rate and average point count
    """
    total = len(receipts)
    passed = sum(1 for r in receipts if r["status"] == "PASS")

    stats: Dict[str, Any] = {
        "total_cases": total,
        "passed": passed,
        "failed": total - passed,
        "pass_rate": passed / total if total > 0 else 0.0,
        "algorithms": {},
    }

    per_algo: Dict[str, List[Dict[str, Any]]] = {}
    for r in receipts:
        for algo, check in r.get("checks", {}).items():
            per_algo.setdefault(algo, []).append(check)

    for algo, checks in sorted(per_algo.items()):
        points = [c["points"] for c in checks]
        stats["algorithms"][algo] = {
            "runs": len(checks),
            "determinism_rate": sum(1 for c in checks if c.get("deterministic", False))
            / len(checks),
            "avg_points": sum(points) / len(points),
            "max_points": max(points),
        }

    return stats
