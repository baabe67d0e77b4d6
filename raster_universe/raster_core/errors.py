"""
Raster Exceptions

Exception classes for the rasterization core and its driver. Core functions
raise these before iterating instead of looping forever or emitting garbage.
"""


class RasterError(Exception):
    """Base exception for all rasterization errors."""
    pass


class InvalidInput(RasterError, ValueError):
    """Raised when a coordinate or radius cannot be rasterized."""

    def __init__(self, field: str, value, message: str = ""):
        self.field = field
        self.value = value
        super().__init__(message or f"Invalid value for {field}: {value!r}")


class UnknownAlgorithmError(RasterError, KeyError):
    """Raised when the requested algorithm name is not registered."""

    def __init__(self, name: str, message: str = ""):
        self.name = name
        self.message = message or f"Unknown algorithm: {name!r}"
        super().__init__(self.message)

    def __str__(self) -> str:
        return self.message


class ConfigurationError(RasterError):
    """Raised when the canvas configuration is invalid."""
    pass


class IncompleteSelectionError(RasterError):
    """Raised when an input is requested before both points are picked."""
    pass
