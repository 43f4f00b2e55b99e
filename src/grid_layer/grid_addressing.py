# grid_layer/grid_addressing.py
"""
GridAddressing
==============
Maps logical (x, y) drawing coordinates → physical pixel indices.

Handles:
- clamping of out-of-range coordinates to the nearest edge
- flip_y then flip_x
- progressive / serpentine wiring

Rotation is carried by GridConfig but not applied here.
"""

from __future__ import annotations
from typing import Iterator, Tuple

from models.enums import PanelRotation, WiringTopology, LogCategory
from models.grid import GridConfig
from utils.logger import get_logger

log = get_logger().for_category(LogCategory.GRID)


class GridAddressing:
    """
    Logical → physical index mapper.

    Usage:
        addressing = GridAddressing(GridConfig(wiring=WiringTopology.SERPENTINE))
        addressing.map(0, 1)   # 15 on an 8-wide serpentine panel
    """

    def __init__(self, config: GridConfig) -> None:
        self.config = config
        self.width = config.width
        self.height = config.height
        self._serpentine = config.wiring == WiringTopology.SERPENTINE

        if config.rotation != PanelRotation.DEG_0:
            log.warn(
                "Panel rotation is configured but not applied by addressing",
                rotation=config.rotation.value,
            )

        log.debug(
            "GridAddressing ready",
            size=f"{self.width}x{self.height}",
            wiring=config.wiring.value,
            flip_x=config.flip_x,
            flip_y=config.flip_y,
        )

    @property
    def pixel_count(self) -> int:
        return self.width * self.height

    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def map(self, x: int, y: int) -> int:
        """
        Physical index for logical (x, y).

        Never fails: coordinates outside the grid degrade to the nearest
        edge pixel.
        """
        x = min(max(x, 0), self.width - 1)
        y = min(max(y, 0), self.height - 1)

        if self.config.flip_y:
            y = (self.height - 1) - y

        if self.config.flip_x:
            x = (self.width - 1) - x

        if self._serpentine and (y & 0x01):
            # Odd row: right to left
            return (y * self.width) + (self.width - 1 - x)

        return (y * self.width) + x

    def logical_coordinates(self, index: int) -> Tuple[int, int]:
        """
        Inverse of map() for a physical index.

        Raises:
            IndexError: index outside 0..N-1
        """
        if not 0 <= index < self.pixel_count:
            raise IndexError(f"Physical index {index} outside 0..{self.pixel_count - 1}")

        y, x = divmod(index, self.width)

        if self._serpentine and (y & 0x01):
            x = (self.width - 1) - x

        if self.config.flip_x:
            x = (self.width - 1) - x

        if self.config.flip_y:
            y = (self.height - 1) - y

        return x, y

    def iter_coordinates(self) -> Iterator[Tuple[int, int]]:
        """All logical coordinates, row by row."""
        for y in range(self.height):
            for x in range(self.width):
                yield x, y
