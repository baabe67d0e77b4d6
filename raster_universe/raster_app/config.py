"""
Canvas configuration.

Central place for canvas geometry and the color palette used by the grid
canvas and coordinate mapping. Values can be overridden from a JSON file:

    {"width": 400, "height": 400, "scale": 10}
"""

import json
from dataclasses import dataclass, fields
from pathlib import Path
from typing import Optional, Union

from raster_core.errors import ConfigurationError

# Palette: cell value -> meaning. 0 is an empty cell.
EMPTY = 0
BLACK = 1
RED = 2
BLUE = 3

COLORS = {
    "black": BLACK,
    "red": RED,
    "blue": BLUE,
}

# ASCII glyphs used by GridCanvas.to_text()
GLYPHS = {
    EMPTY: ".",
    BLACK: "#",
    RED: "R",
    BLUE: "B",
}


@dataclass(frozen=True)
class CanvasConfig:
    """
    Pixel geometry of the drawing surface.

    - width, height: Surface size in pixels
    - scale: Pixels per grid cell
    """
    width: int = 800
    height: int = 600
    scale: int = 20

    def __post_init__(self):
        for f in fields(self):
            value = getattr(self, f.name)
            if isinstance(value, bool) or not isinstance(value, int):
                raise ConfigurationError(f"{f.name} must be an integer, got {value!r}")
        if self.scale <= 0:
            raise ConfigurationError(f"scale must be positive, got {self.scale}")
        if self.width < self.scale or self.height < self.scale:
            raise ConfigurationError(
                f"canvas {self.width}x{self.height} is smaller than one cell (scale={self.scale})"
            )

    @property
    def cols(self) -> int:
        return self.width // self.scale

    @property
    def rows(self) -> int:
        return self.height // self.scale


def load_config(path: Optional[Union[str, Path]] = None) -> CanvasConfig:
    """
    Load a CanvasConfig from a JSON file.

    Args:
        path: JSON file path, or None for defaults

    Returns:
        CanvasConfig with file values overriding defaults

    Raises:
        ConfigurationError: File missing or unreadable, not UTF-8 JSON,
            not an object, unknown keys, or invalid values
    """
    if path is None:
        return CanvasConfig()

    path = Path(path)
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except FileNotFoundError:
        raise ConfigurationError(f"Config file not found: {path}")
    except OSError as e:
        raise ConfigurationError(f"Config file {path} cannot be read: {e.strerror or e}")
    except UnicodeDecodeError as e:
        raise ConfigurationError(f"Config file {path} is not UTF-8 text: {e.reason}")
    except json.JSONDecodeError as e:
        raise ConfigurationError(f"Config file {path} is not valid JSON: {e}")

    if not isinstance(data, dict):
        raise ConfigurationError(f"Config file {path} must contain a JSON object")

    known = {f.name for f in fields(CanvasConfig)}
    unknown = sorted(set(data) - known)
    if unknown:
        raise ConfigurationError(f"Unknown config keys: {', '.join(unknown)}")

    return CanvasConfig(**data)
