"""
Frame models

FrameBuffer  - physical-order color storage, allocated once per grid
AnimationState - rotation angles advanced once per frame
CommittedFrame - immutable snapshot handed to drivers and diagnostics
"""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import Iterator, List, Tuple

from models.color import Color, BLACK


class FrameBuffer:
    """
    Ordered colors indexed by physical address 0..N-1.

    The underlying list is created once and only mutated in place, so no
    reallocation happens per frame. Only the compositor writes to it.
    """

    def __init__(self, pixel_count: int):
        if pixel_count <= 0:
            raise ValueError(f"FrameBuffer needs at least one pixel, got {pixel_count}")
        self._pixels: List[Color] = [BLACK] * pixel_count

    def __len__(self) -> int:
        return len(self._pixels)

    def __getitem__(self, index: int) -> Color:
        return self._pixels[index]

    def __iter__(self) -> Iterator[Color]:
        return iter(self._pixels)

    def set(self, index: int, color: Color) -> None:
        self._pixels[index] = color

    def fill(self, color: Color) -> None:
        for i in range(len(self._pixels)):
            self._pixels[i] = color

    def clear(self) -> None:
        """Reset every pixel to background (0,0,0)."""
        self.fill(BLACK)

    def snapshot(self) -> Tuple[Color, ...]:
        """Immutable copy for commit (Color objects are frozen)."""
        return tuple(self._pixels)

    def lit_count(self) -> int:
        return sum(1 for c in self._pixels if not c.is_black())


@dataclass
class AnimationState:
    """
    Two accumulating rotation angles (radians).

    angle_a rotates around the X axis, angle_b around the Z axis.
    """
    angle_a: float = 0.0
    angle_b: float = 0.0
    frame_index: int = 0

    def advance(self, delta_a: float, delta_b: float) -> None:
        self.angle_a += delta_a
        self.angle_b += delta_b
        self.frame_index += 1


@dataclass(frozen=True)
class CommittedFrame:
    """A fully resolved frame, safe to share with any consumer."""
    index: int
    angle_a: float
    angle_b: float
    pixels: Tuple[Color, ...]
    timestamp: float = field(default=0.0, compare=False)

    @property
    def pixel_count(self) -> int:
        return len(self.pixels)

    def lit_count(self) -> int:
        return sum(1 for c in self.pixels if not c.is_black())

    def to_hex(self) -> List[str]:
        return [c.to_hex() for c in self.pixels]
