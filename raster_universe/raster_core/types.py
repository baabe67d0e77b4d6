"""
Core type definitions for the rasterization algorithms.

All coordinates are logical grid coordinates: x grows to the right, y grows
upward. Nothing here knows about a display surface.
"""

from dataclasses import dataclass
from typing import Union

# One formatted record per algorithm iteration
TraceLine = str


@dataclass(frozen=True, order=True)
class GridPoint:
    """Logical grid cell (x, y)."""
    x: int
    y: int

    def __iter__(self):
        """Allow tuple unpacking: x, y = point"""
        return iter((self.x, self.y))


@dataclass(frozen=True)
class RasterResult:
    """
    Output of one algorithm invocation.

    - points: Cells in emission order (duplicates allowed and meaningful)
    - trace: Diagnostic lines in iteration order. Line algorithms emit one
      line per point; the circle algorithm emits one line per outer
      iteration (8 points each).
    - algorithm: Registry name of the algorithm that produced the result
    """
    points: tuple[GridPoint, ...]
    trace: tuple[TraceLine, ...]
    algorithm: str = ""

    def __len__(self) -> int:
        return len(self.points)

    def coords(self) -> list[tuple[int, int]]:
        """Points as plain (x, y) tuples."""
        return [(p.x, p.y) for p in self.points]

    def log_text(self) -> str:
        """Trace joined into a single newline-separated log."""
        return "\n".join(self.trace)


@dataclass(frozen=True)
class LineSpec:
    """Two endpoints of a line segment."""
    x0: float
    y0: float
    x1: float
    y1: float

    @property
    def kind(self) -> str:
        return "line"


@dataclass(frozen=True)
class CircleSpec:
    """Center and radius of a circle."""
    xc: int
    yc: int
    r: int

    @property
    def kind(self) -> str:
        return "circle"


AlgorithmInput = Union[LineSpec, CircleSpec]
