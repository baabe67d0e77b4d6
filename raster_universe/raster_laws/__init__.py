"""
Raster laws: the four rasterization algorithms.

Each algorithm is a pure function of its geometric parameters returning a
RasterResult (cells + trace). No algorithm keeps state between calls.

Algorithms:
- step.py: Naive parametric stepping (float accumulators, fixed step count)
- dda.py: Digital Differential Analyzer (slope accumulation on the minor axis)
- bresenham.py: Integer Bresenham line (error term, all octants)
- circle.py: Bresenham/midpoint circle (decision term, 8-way symmetry)
"""

from .bresenham import bresenham
from .circle import bresenham_circle
from .dda import dda
from .step import step_by_step

__all__ = ["bresenham", "bresenham_circle", "dda", "step_by_step"]
