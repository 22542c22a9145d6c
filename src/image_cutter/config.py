"""Configuration constants for image_cutter.

Constants are global: the result buffer format is fixed so that every crop
produces the same pixel representation regardless of the source format.
"""

from typing import Final

# =============================================================================
# Result Buffer Configuration
# =============================================================================

# Pillow mode of every result buffer.
RESULT_MODE: Final[str] = "RGBA"

# Colour of freshly allocated result pixels (transparent black).
RESULT_FILL: Final[tuple[int, int, int, int]] = (0, 0, 0, 0)

# Alpha used when a source colour has no alpha channel.
OPAQUE_ALPHA: Final[int] = 255


# =============================================================================
# Source Adapter Configuration
# =============================================================================

# Pillow modes read as-is. Anything else (P, CMYK, I, F, ...) is converted
# to RESULT_MODE once when the source is wrapped.
NATIVE_SOURCE_MODES: Final[tuple[str, ...]] = ("L", "LA", "RGB", "RGBA")

# Accepted channel counts for (H, W, C) numpy sources. (H, W) is greyscale.
ARRAY_CHANNELS: Final[tuple[int, ...]] = (3, 4)
