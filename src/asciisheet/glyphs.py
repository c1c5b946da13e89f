import logging
import math
from dataclasses import dataclass

from asciisheet.errors import GlyphTableError

log = logging.getLogger(__name__)

# Ordered from densest-looking to sparsest-looking (dark to light)
DEFAULT_GLYPHS = "@%#*+=-:."

# Repeat counts per glyph; heavier glyphs fill more of their cell
DEFAULT_WEIGHTS = (13.0, 8.0, 5.0, 3.0, 2.0, 1.0, 0.5, 0.2, 0.1)


def repeat_count(weight: float) -> int:
    """Round a weight half-up to a non-negative repeat count."""
    return max(0, math.floor(weight + 0.5))


def parse_weights(text: str) -> tuple[float, ...]:
    """Parse a comma-separated weight list such as ``"13,8,5"``.

    Entries that are not numbers are logged and dropped.
    """
    weights = []
    for part in text.split(","):
        part = part.strip()
        try:
            weights.append(float(part))
        except ValueError:
            log.warning("Error parsing ASCII weight: %r", part)
    return tuple(weights)


@dataclass(frozen=True)
class GlyphTable:
    glyphs: str = DEFAULT_GLYPHS
    weights: tuple[float, ...] = DEFAULT_WEIGHTS

    def __post_init__(self):
        object.__setattr__(self, "weights", tuple(float(w) for w in self.weights))
        if not self.glyphs:
            raise GlyphTableError("glyph set must not be empty")
        if len(self.glyphs) != len(self.weights):
            raise GlyphTableError(
                f"glyph set has {len(self.glyphs)} characters but {len(self.weights)} weights were given"
            )
        for w in self.weights:
            if not math.isfinite(w) or w < 0:
                raise GlyphTableError(f"weights must be finite and non-negative, got {w}")

    def __len__(self) -> int:
        return len(self.glyphs)

    def lookup(self, index: int) -> tuple[str, float]:
        if not 0 <= index < len(self.glyphs):
            raise IndexError(f"bucket index {index} outside glyph table of size {len(self.glyphs)}")
        return self.glyphs[index], self.weights[index]

    def cell_text(self, index: int) -> str:
        """Glyph repeated by its weight; a weight that rounds to zero still shows the glyph once."""
        glyph, weight = self.lookup(index)
        return glyph * max(repeat_count(weight), 1)
