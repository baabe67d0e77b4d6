"""
raster_core: Core primitives for the raster line/circle visualizer.

Provides:
- types: GridPoint, RasterResult, LineSpec, CircleSpec, TraceLine
- errors: RasterError taxonomy (InvalidInput, UnknownAlgorithmError, ...)
- numeric: Half-up rounding, input validation, trace number formatting
- digest: Deterministic 64-bit hashing of results (SHA-256)
"""

from .errors import (
    ConfigurationError,
    IncompleteSelectionError,
    InvalidInput,
    RasterError,
    UnknownAlgorithmError,
)
from .types import AlgorithmInput, CircleSpec, GridPoint, LineSpec, RasterResult, TraceLine

__all__ = [
    "AlgorithmInput",
    "CircleSpec",
    "ConfigurationError",
    "GridPoint",
    "IncompleteSelectionError",
    "InvalidInput",
    "LineSpec",
    "RasterError",
    "RasterResult",
    "TraceLine",
    "UnknownAlgorithmError",
]
