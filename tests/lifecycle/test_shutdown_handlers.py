import pytest
from unittest.mock import AsyncMock, MagicMock

from hardware.led.virtual_strip import VirtualStrip
from lifecycle.handlers import (
    APIServerShutdownHandler,
    ExporterShutdownHandler,
    LEDShutdownHandler,
    RenderLoopShutdownHandler,
)
from models.color import Color, BLACK


def test_priorities_stop_rendering_before_clearing():
    priorities = [
        RenderLoopShutdownHandler(MagicMock()).shutdown_priority,
        ExporterShutdownHandler([]).shutdown_priority,
        LEDShutdownHandler(MagicMock()).shutdown_priority,
        APIServerShutdownHandler(MagicMock()).shutdown_priority,
    ]
    assert priorities == sorted(priorities, reverse=True)


@pytest.mark.asyncio
async def test_render_loop_handler_stops_loop():
    render_loop = MagicMock()
    render_loop.stop = AsyncMock()

    await RenderLoopShutdownHandler(render_loop).shutdown()

    render_loop.stop.assert_awaited_once()


@pytest.mark.asyncio
async def test_exporter_handler_stops_and_closes():
    exporter = MagicMock()
    exporter.stop = AsyncMock()
    exporter.close = AsyncMock()

    await ExporterShutdownHandler([exporter]).shutdown()

    exporter.stop.assert_awaited_once()
    exporter.close.assert_awaited_once()


@pytest.mark.asyncio
async def test_led_handler_blanks_virtual_panel():
    strip = VirtualStrip(4)
    strip.apply_frame([Color.white()] * 4)

    await LEDShutdownHandler(strip).shutdown()

    assert strip.get_frame() == [BLACK] * 4


@pytest.mark.asyncio
async def test_led_handler_releases_hardware_strip():
    strip = MagicMock()

    await LEDShutdownHandler(strip).shutdown()

    strip.clear.assert_called_once()
    strip.shutdown.assert_called_once()


@pytest.mark.asyncio
async def test_api_handler_skips_stopped_server():
    wrapper = MagicMock()
    wrapper.is_running = False
    wrapper.stop = AsyncMock()

    await APIServerShutdownHandler(wrapper).shutdown()

    wrapper.stop.assert_not_awaited()


@pytest.mark.asyncio
async def test_api_handler_stops_running_server():
    wrapper = MagicMock()
    wrapper.is_running = True
    wrapper.stop = AsyncMock()

    await APIServerShutdownHandler(wrapper).shutdown()

    wrapper.stop.assert_awaited_once()
