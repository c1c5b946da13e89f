import math
from dataclasses import dataclass, field

from asciisheet.glyphs import DEFAULT_GLYPHS, DEFAULT_WEIGHTS, GlyphTable, parse_weights

DEFAULT_SHEET_NAME = "Sheet1"
DEFAULT_SCALE = 1.0 / 3
# Target cell size in screen pixels
DEFAULT_CELL_WIDTH = 36.0
DEFAULT_CELL_HEIGHT = 15.0


@dataclass(frozen=True)
class RenderConfig:
    """Everything one conversion needs; built once and shared read-only."""

    table: GlyphTable = field(default_factory=GlyphTable)
    sheet_name: str = DEFAULT_SHEET_NAME
    scale: float = DEFAULT_SCALE
    cell_width: float = DEFAULT_CELL_WIDTH
    cell_height: float = DEFAULT_CELL_HEIGHT
    workers: int | None = None

    def __post_init__(self):
        if not (math.isfinite(self.scale) and self.scale > 0):
            raise ValueError(f"scale factor must be positive and finite, got {self.scale}")
        if self.cell_width <= 0 or self.cell_height <= 0:
            raise ValueError("cell width and height must be positive")
        if self.workers is not None and self.workers < 1:
            raise ValueError(f"workers must be at least 1, got {self.workers}")

    @classmethod
    def from_strings(
        cls,
        glyphs: str = DEFAULT_GLYPHS,
        weights: str = ",".join(str(w) for w in DEFAULT_WEIGHTS),
        **kwargs,
    ) -> "RenderConfig":
        return cls(table=GlyphTable(glyphs, parse_weights(weights)), **kwargs)
