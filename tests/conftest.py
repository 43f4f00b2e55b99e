"""
Shared fixtures

src/ is on the import path via [tool.pytest.ini_options] pythonpath.
"""

import pytest
from unittest.mock import MagicMock

from engine.frame_compositor import FrameCompositor
from engine.render_context import RenderContext
from grid_layer.grid_addressing import GridAddressing
from hardware.led.virtual_strip import VirtualStrip
from models.config import AppConfig
from models.enums import WiringTopology
from models.grid import GridConfig


@pytest.fixture
def grid() -> GridConfig:
    """8x8 progressive, no flips"""
    return GridConfig()


@pytest.fixture
def serpentine_grid() -> GridConfig:
    return GridConfig(wiring=WiringTopology.SERPENTINE)


@pytest.fixture
def addressing(grid) -> GridAddressing:
    return GridAddressing(grid)


@pytest.fixture
def app_config() -> AppConfig:
    return AppConfig()


@pytest.fixture
def render_context(app_config) -> RenderContext:
    return RenderContext.create(app_config.grid)


@pytest.fixture
def compositor(app_config) -> FrameCompositor:
    return FrameCompositor.from_config(app_config)


@pytest.fixture
def virtual_strip(app_config) -> VirtualStrip:
    grid = app_config.grid
    return VirtualStrip(grid.pixel_count, brightness=grid.brightness_ceiling, color_order=grid.color_order)


@pytest.fixture
def mock_strip():
    """Strip double recording apply_frame/clear calls"""
    strip = MagicMock()
    strip.led_count = 64
    return strip
