"""
DepthResolver — per-pixel nearest-sample selection (z-buffer).

Stores the largest inverse depth (1/z) accepted per physical pixel during
one frame. Larger 1/z means closer to the viewer.

Rules:
- sample outside the grid → discarded (no clamping, unlike addressing)
- sample accepted iff its 1/z is strictly greater than the stored value
- equal 1/z keeps the earlier sample (sampler order)
"""

from __future__ import annotations
from typing import List, Optional, Tuple

from grid_layer.grid_addressing import GridAddressing


class DepthResolver:

    def __init__(self, addressing: GridAddressing):
        self.addressing = addressing
        self._depth: List[float] = [0.0] * addressing.pixel_count
        self.accepted = 0
        self.rejected = 0
        self.discarded = 0

    def reset(self) -> None:
        """Zero the z-buffer in place and clear per-frame counters."""
        depth = self._depth
        for i in range(len(depth)):
            depth[i] = 0.0
        self.accepted = 0
        self.rejected = 0
        self.discarded = 0

    def resolve(self, screen_x: int, screen_y: int, inverse_depth: float) -> Optional[int]:
        """
        Depth-test one projected sample.

        Returns:
            Physical index when the sample is the nearest so far,
            None when it is off-grid or occluded.
        """
        if not self.addressing.in_bounds(screen_x, screen_y):
            self.discarded += 1
            return None

        index = self.addressing.map(screen_x, screen_y)

        if inverse_depth > self._depth[index]:
            self._depth[index] = inverse_depth
            self.accepted += 1
            return index

        self.rejected += 1
        return None

    def depth_at(self, index: int) -> float:
        return self._depth[index]

    @property
    def depths(self) -> Tuple[float, ...]:
        return tuple(self._depth)

    def __len__(self) -> int:
        return len(self._depth)
