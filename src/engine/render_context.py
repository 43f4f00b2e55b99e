"""
RenderContext — all mutable render state, passed explicitly into each cycle.

Buffers are sized once from GridConfig. Exactly one writer (the
FrameCompositor) touches the frame buffer, the z-buffer and the animation
state; everything else reads CommittedFrame snapshots.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import Optional

from engine.depth_resolver import DepthResolver
from grid_layer.grid_addressing import GridAddressing
from models.frame import AnimationState, FrameBuffer
from models.grid import GridConfig


@dataclass
class RenderContext:
    grid: GridConfig
    addressing: GridAddressing
    frame_buffer: FrameBuffer
    resolver: DepthResolver
    animation: AnimationState = field(default_factory=AnimationState)

    @classmethod
    def create(cls, grid: GridConfig, animation: Optional[AnimationState] = None) -> 'RenderContext':
        addressing = GridAddressing(grid)
        return cls(
            grid=grid,
            addressing=addressing,
            frame_buffer=FrameBuffer(grid.pixel_count),
            resolver=DepthResolver(addressing),
            animation=animation or AnimationState(),
        )
