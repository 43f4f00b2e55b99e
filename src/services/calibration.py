"""
Calibration pattern

Lights the four corners plus the top row through GridAddressing so the
wiring, flip and color-order settings can be checked by eye:

    (0,0) red        (w-1,0) green
    (0,h-1) blue     (w-1,h-1) white
    rest of row 0    yellow
"""

from __future__ import annotations

from grid_layer.grid_addressing import GridAddressing
from models.color import MATRIX_COLORS
from models.enums import LogCategory
from models.frame import FrameBuffer
from utils.logger import get_logger

log = get_logger().for_category(LogCategory.CALIBRATION)


def draw_calibration_pattern(buffer: FrameBuffer, addressing: GridAddressing) -> FrameBuffer:
    width = addressing.width
    height = addressing.height

    buffer.clear()

    for x in range(1, width - 1):
        buffer.set(addressing.map(x, 0), MATRIX_COLORS["YELLOW"])

    # Corners last so they win on 1-pixel-wide or 1-pixel-high panels
    buffer.set(addressing.map(0, height - 1), MATRIX_COLORS["BLUE"])
    buffer.set(addressing.map(width - 1, height - 1), MATRIX_COLORS["WHITE"])
    buffer.set(addressing.map(width - 1, 0), MATRIX_COLORS["GREEN"])
    buffer.set(addressing.map(0, 0), MATRIX_COLORS["RED"])

    log.info(
        "Calibration pattern drawn",
        origin=f"index {addressing.map(0, 0)}",
        lit=buffer.lit_count(),
        wiring=addressing.config.wiring.value,
    )
    return buffer
