import asyncio
import io
import time
import pytest
from unittest.mock import MagicMock

from engine.render_loop import RenderLoop
from services.frame_exporter import FrameExporter, StreamLineWriter


class _SlowStream(io.StringIO):
    """Stream whose writes block like a pipe nobody is reading."""

    def __init__(self, delay: float):
        super().__init__()
        self.delay = delay
        self.writes = 0

    def write(self, text: str) -> int:
        self.writes += 1
        time.sleep(self.delay)
        return super().write(text)


@pytest.fixture
def render_loop(compositor, render_context, virtual_strip):
    return RenderLoop(compositor, render_context, virtual_strip, frame_interval_ms=0)


class TestRenderOnce:

    def test_hands_committed_frame_to_strip(self, render_loop, virtual_strip):
        frame = render_loop.render_once()

        assert virtual_strip.show_count == 1
        assert virtual_strip.get_frame() == list(frame.pixels)
        assert render_loop.latest_frame is frame
        assert render_loop.frames_rendered == 1

    def test_publishes_to_every_exporter(self, compositor, render_context, virtual_strip):
        exporters = [MagicMock(), MagicMock()]
        loop = RenderLoop(compositor, render_context, virtual_strip, exporters=exporters)

        frame = loop.render_once()

        for exporter in exporters:
            exporter.publish.assert_called_once_with(frame)

    def test_frames_advance(self, render_loop):
        first = render_loop.render_once()
        second = render_loop.render_once()
        assert second.index == first.index + 1
        assert second.angle_a > first.angle_a

    def test_strip_receives_unscaled_frame(self, render_loop, virtual_strip):
        frame = render_loop.render_once()
        brightest = max(c.r for c in frame.pixels)

        assert brightest > 60
        assert max(max(rgb) for rgb in virtual_strip.get_output()) <= 60


class TestLoopLifecycle:

    @pytest.mark.asyncio
    async def test_start_and_stop(self, render_loop):
        await render_loop.start()
        await asyncio.sleep(0.05)
        await render_loop.stop()

        assert render_loop.running is False
        assert render_loop.frames_rendered > 0
        assert render_loop.render_task.done()

    @pytest.mark.asyncio
    async def test_second_start_is_ignored(self, render_loop):
        await render_loop.start()
        task = render_loop.render_task
        await render_loop.start()

        assert render_loop.render_task is task
        await render_loop.stop()

    @pytest.mark.asyncio
    async def test_render_errors_do_not_kill_loop(self, compositor, render_context, mock_strip):
        mock_strip.apply_frame.side_effect = RuntimeError("DMA busy")
        loop = RenderLoop(compositor, render_context, mock_strip, frame_interval_ms=0)

        await loop.start()
        await asyncio.sleep(0.05)

        assert loop.render_errors >= 2
        assert not loop.render_task.done()
        await loop.stop()

    @pytest.mark.asyncio
    async def test_pause_and_step(self, render_loop):
        render_loop.pause()
        await render_loop.start()
        await asyncio.sleep(0.05)
        assert render_loop.frames_rendered == 0

        render_loop.step()
        await asyncio.sleep(0.05)
        assert render_loop.frames_rendered == 1

        render_loop.resume()
        await asyncio.sleep(0.05)
        assert render_loop.frames_rendered > 1
        await render_loop.stop()

    @pytest.mark.asyncio
    async def test_exporter_never_slows_rendering(self, compositor, render_context, virtual_strip, grid):
        # exporter not started: nothing drains its queue
        exporter = FrameExporter(grid, StreamLineWriter(io.StringIO()), queue_size=1)
        loop = RenderLoop(compositor, render_context, virtual_strip, exporters=[exporter])

        for _ in range(5):
            loop.render_once()

        assert loop.frames_rendered == 5
        assert exporter.dropped == 4

    @pytest.mark.asyncio
    async def test_slow_export_output_does_not_stall_loop(self, compositor, render_context, virtual_strip, grid):
        stream = _SlowStream(delay=0.2)
        exporter = FrameExporter(grid, StreamLineWriter(stream), queue_size=2)
        loop = RenderLoop(compositor, render_context, virtual_strip, exporters=[exporter], frame_interval_ms=10)

        await exporter.start()
        await loop.start()
        await asyncio.sleep(1.0)
        await loop.stop()
        await exporter.stop()

        # every write blocks for 0.2 s; rendering keeps its own pace
        assert loop.frames_rendered >= 30
        assert stream.writes <= 6
        assert exporter.dropped > 0


def test_metrics(render_loop):
    render_loop.render_once()
    metrics = render_loop.get_metrics()

    assert metrics["frames_rendered"] == 1
    assert metrics["render_errors"] == 0
    assert metrics["frame_interval_ms"] == 0
    assert metrics["running"] is False
    assert metrics["frames_dropped"] == 0
