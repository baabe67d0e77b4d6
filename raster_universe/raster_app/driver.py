"""
Algorithm driver: registry, input building, timed invocation.

Selects one of the four rasterization algorithms by its form value
("step", "dda", "bresenham", "circle"), builds the matching input spec
(deriving the circle radius from two picked points when asked), runs it and
reports the point count and elapsed time.

The driver holds no state; every call is independent.
"""

import logging
import math
import time
from dataclasses import dataclass
from typing import Callable

from raster_core.errors import InvalidInput, UnknownAlgorithmError
from raster_core.numeric import require_finite, round_half_up
from raster_core.types import AlgorithmInput, CircleSpec, LineSpec, RasterResult
from raster_laws import bresenham, bresenham_circle, dda, step_by_step

logger = logging.getLogger(__name__)


ALGORITHMS: dict[str, Callable[..., RasterResult]] = {
    "step": step_by_step,
    "dda": dda,
    "bresenham": bresenham,
    "circle": bresenham_circle,
}

# Algorithms that take a CircleSpec; all others take a LineSpec
CIRCLE_ALGORITHMS = frozenset({"circle"})


@dataclass(frozen=True)
class RunReport:
    """Result of one timed invocation plus its status line."""
    result: RasterResult
    elapsed_ms: float
    status: str


def get_algorithm(name: str) -> Callable[..., RasterResult]:
    try:
        return ALGORITHMS[name]
    except KeyError:
        raise UnknownAlgorithmError(
            name, f"Unknown algorithm {name!r}; choose one of {', '.join(ALGORITHMS)}"
        ) from None


def radius_from_points(center: tuple[float, float], edge: tuple[float, float]) -> int:
    """
    Radius of the circle through `edge` centred at `center`.

    Euclidean distance rounded half-up to an integer.
    """
    cx, cy = (require_finite("center", v) for v in center)
    ex, ey = (require_finite("edge", v) for v in edge)
    return round_half_up(math.hypot(ex - cx, ey - cy))


def build_input(
    algorithm: str,
    x0: float,
    y0: float,
    x1: float = 0,
    y1: float = 0,
    r: int = 0,
    derive_radius: bool = False,
) -> AlgorithmInput:
    """
    Build the input spec for `algorithm` from form-style fields.

    For the circle, (x0, y0) is the center. With derive_radius the radius is
    the distance from (x0, y0) to (x1, y1) and `r` is ignored.
    """
    get_algorithm(algorithm)
    if algorithm in CIRCLE_ALGORITHMS:
        if derive_radius:
            r = radius_from_points((x0, y0), (x1, y1))
            logger.debug(f"Derived radius {r} from ({x0}, {y0}) -> ({x1}, {y1})")
        return CircleSpec(xc=x0, yc=y0, r=r)
    return LineSpec(x0=x0, y0=y0, x1=x1, y1=y1)


def rasterize(spec: AlgorithmInput, algorithm: str) -> RasterResult:
    """
    Run `algorithm` on `spec`.

    Raises:
        UnknownAlgorithmError: Algorithm name not registered
        InvalidInput: Spec kind does not match the algorithm, or the
            algorithm rejects the coordinates
    """
    func = get_algorithm(algorithm)
    expected = "circle" if algorithm in CIRCLE_ALGORITHMS else "line"
    if spec.kind != expected:
        raise InvalidInput(
            "spec", spec, f"Algorithm {algorithm!r} needs a {expected} input, got {spec.kind}"
        )

    if isinstance(spec, CircleSpec):
        return func(spec.xc, spec.yc, spec.r)
    return func(spec.x0, spec.y0, spec.x1, spec.y1)


def format_status(point_count: int, elapsed_ms: float) -> str:
    return f"Pixels: {point_count}, Time: {elapsed_ms:.3f} ms"


def run(algorithm: str, spec: AlgorithmInput) -> RunReport:
    """
    Rasterize and time the computation.

    Returns:
        RunReport with the result, elapsed milliseconds and a status line
        "Pixels: N, Time: X.XXX ms"
    """
    logger.debug(f"Running {algorithm} on {spec}")
    start = time.perf_counter()
    result = rasterize(spec, algorithm)
    elapsed_ms = (time.perf_counter() - start) * 1000.0

    status = format_status(len(result), elapsed_ms)
    logger.debug(f"{algorithm}: {len(result)} points, {len(result.trace)} trace lines")
    return RunReport(result=result, elapsed_ms=elapsed_ms, status=status)


__all__ = [
    "ALGORITHMS",
    "RunReport",
    "build_input",
    "format_status",
    "get_algorithm",
    "radius_from_points",
    "rasterize",
    "run",
]
