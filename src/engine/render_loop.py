"""
RenderLoop — paced async driver of FrameCompositor cycles.

Each iteration:
  render → commit → strip.apply_frame → publish to exporters → advance → sleep

Rendering is synchronous inside one iteration, so the frame buffer is never
observed half-drawn. Consumers only ever see CommittedFrame snapshots.
"""

from __future__ import annotations
import asyncio
import time
from collections import deque
from typing import Deque, Dict, List, Optional, Sequence

from engine.frame_compositor import FrameCompositor
from engine.render_context import RenderContext
from hardware.led.strip_interface import IPhysicalStrip
from models.enums import LogCategory
from models.frame import CommittedFrame
from services.frame_exporter import FrameExporter
from utils.logger import get_logger

log = get_logger().for_category(LogCategory.RENDER_ENGINE)


class RenderLoop:
    """
    Owns the render task and the only reference to the mutable RenderContext.

    Supports:
    - start/stop (task lifecycle)
    - pause/resume/step (debugging)
    - metrics (frames rendered, measured FPS, render time)

    Example:
        loop = RenderLoop(compositor, ctx, strip, frame_interval_ms=100)
        await loop.start()
        ...
        await loop.stop()
    """

    def __init__(
        self,
        compositor: FrameCompositor,
        context: RenderContext,
        strip: IPhysicalStrip,
        exporters: Optional[Sequence[FrameExporter]] = None,
        frame_interval_ms: int = 100,
    ):
        self.compositor = compositor
        self.context = context
        self.strip = strip
        self.exporters: List[FrameExporter] = list(exporters or [])
        self.frame_interval_ms = frame_interval_ms

        # Runtime state
        self.running = False
        self.paused = False
        self.step_requested = False
        self.render_task: Optional[asyncio.Task] = None

        self.latest_frame: Optional[CommittedFrame] = None

        # Timing & metrics
        self.frame_times: Deque[float] = deque(maxlen=100)
        self.frames_rendered = 0
        self.render_errors = 0
        self.last_render_ms = 0.0

        log.info(
            "RenderLoop initialized",
            grid=f"{context.grid.width}x{context.grid.height}",
            interval=f"{frame_interval_ms}ms",
            exporters=len(self.exporters),
        )

    # === Control ===

    def pause(self) -> None: self.paused = True

    def resume(self) -> None: self.paused = False

    def step(self) -> None: self.step_requested = True

    # === Lifecycle ===

    async def start(self) -> None:
        """Start the render loop."""
        if self.running:
            log.warn("RenderLoop already running")
            return

        self.running = True
        self.render_task = asyncio.create_task(self._render_loop())
        log.info("RenderLoop started", interval=f"{self.frame_interval_ms}ms")

    async def stop(self) -> None:
        """Stop the render loop."""
        if not self.running:
            return
        self.running = False
        if self.render_task:
            self.render_task.cancel()
            try:
                await self.render_task
            except asyncio.CancelledError:
                pass

        log.info(
            "RenderLoop stopped",
            frames_rendered=self.frames_rendered,
            render_errors=self.render_errors,
        )

    # === Single cycle ===

    def render_once(self) -> CommittedFrame:
        """Run one full cycle and hand the result to the strip and exporters."""
        started = time.perf_counter()

        frame = self.compositor.run_cycle(self.context)
        self.strip.apply_frame(frame.pixels)

        for exporter in self.exporters:
            exporter.publish(frame)

        self.latest_frame = frame
        self.frames_rendered += 1

        now = time.perf_counter()
        self.last_render_ms = (now - started) * 1000
        self.frame_times.append(now)
        return frame

    # === Metrics ===

    def get_actual_fps(self) -> float:
        """Measured FPS over recent frames."""
        if len(self.frame_times) < 2:
            return 0.0
        duration = self.frame_times[-1] - self.frame_times[0]
        if duration <= 0:
            return 0.0
        return (len(self.frame_times) - 1) / duration

    def get_metrics(self) -> Dict:
        return {
            "running": self.running,
            "paused": self.paused,
            "frame_interval_ms": self.frame_interval_ms,
            "fps_actual": self.get_actual_fps(),
            "frames_rendered": self.frames_rendered,
            "render_errors": self.render_errors,
            "last_render_ms": self.last_render_ms,
            "frames_exported": sum(e.exported for e in self.exporters),
            "frames_dropped": sum(e.dropped for e in self.exporters),
        }

    # === Core loop ===

    async def _render_loop(self) -> None:
        frame_delay = self.frame_interval_ms / 1000

        while self.running:
            if self.paused and not self.step_requested:
                await asyncio.sleep(0.01)
                continue

            try:
                self.render_once()
            except Exception as e:
                self.render_errors += 1
                log.error(f"Render error: {e}", error_type=type(e).__name__)

            self.step_requested = False

            # sleep(0) still yields so the exporter and API get scheduled
            await asyncio.sleep(frame_delay)

    def __repr__(self) -> str:
        return (
            f"RenderLoop(running={self.running}, paused={self.paused}, "
            f"frames={self.frames_rendered})"
        )
