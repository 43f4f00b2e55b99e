"""
FrameCompositor — one full torus render cycle.

Cycle:
  1. Clear frame buffer to black, zero the z-buffer
  2. For every surface sample: transform → depth test → shade → write
  3. Commit: snapshot the finished buffer
  4. Advance animation angles by fixed deltas

Pacing and handing the committed frame to the driver belong to RenderLoop.
"""

from __future__ import annotations
import time

from engine.render_context import RenderContext
from engine.shading import ShadingModel
from engine.surface_sampler import SurfaceSampler
from engine.transform import TransformPipeline
from models.color import BLACK
from models.config import AnimationConfig, AppConfig
from models.enums import LogCategory
from models.frame import CommittedFrame, FrameBuffer
from utils.logger import get_logger

log = get_logger().for_category(LogCategory.RENDER_ENGINE)


class FrameCompositor:
    """
    Stateless orchestrator: all mutable state lives in the RenderContext.

    Example:
        compositor = FrameCompositor.from_config(app_config)
        ctx = RenderContext.create(app_config.grid)
        frame = compositor.run_cycle(ctx)
    """

    def __init__(
        self,
        sampler: SurfaceSampler,
        transform: TransformPipeline,
        shading: ShadingModel,
        animation: AnimationConfig,
    ):
        self.sampler = sampler
        self.transform = transform
        self.shading = shading
        self.delta_a = animation.delta_a
        self.delta_b = animation.delta_b

    @classmethod
    def from_config(cls, config: AppConfig) -> 'FrameCompositor':
        return cls(
            sampler=SurfaceSampler(config.torus),
            transform=TransformPipeline(config.grid, config.torus),
            shading=ShadingModel(config.shading),
            animation=config.animation,
        )

    # === Cycle steps ===

    def render(self, ctx: RenderContext) -> FrameBuffer:
        """
        Draw the torus for the current animation angles into ctx.frame_buffer.

        The pixel of every depth-test winner gets the winner's shade; a winner
        that faces away from the light leaves the pixel black.
        """
        buffer = ctx.frame_buffer
        resolver = ctx.resolver

        buffer.clear()
        resolver.reset()

        rot = self.transform.begin_frame(ctx.animation.angle_a, ctx.animation.angle_b)
        project = self.transform.project
        luminance = self.shading.luminance
        shade = self.shading.shade

        for sample in self.sampler:
            p = project(sample, rot)
            index = resolver.resolve(p.screen_x, p.screen_y, p.inverse_depth)
            if index is None:
                continue

            color = shade(luminance(sample, rot), p.inverse_depth)
            buffer.set(index, color if color is not None else BLACK)

        return buffer

    def commit(self, ctx: RenderContext) -> CommittedFrame:
        return CommittedFrame(
            index=ctx.animation.frame_index,
            angle_a=ctx.animation.angle_a,
            angle_b=ctx.animation.angle_b,
            pixels=ctx.frame_buffer.snapshot(),
            timestamp=time.monotonic(),
        )

    def advance(self, ctx: RenderContext) -> None:
        ctx.animation.advance(self.delta_a, self.delta_b)

    def run_cycle(self, ctx: RenderContext) -> CommittedFrame:
        """render → commit → advance. Returns the committed frame."""
        self.render(ctx)
        frame = self.commit(ctx)
        self.advance(ctx)
        return frame
