"""
Frame schemas - read-only views of the grid and committed frames
"""

from pydantic import BaseModel, Field
from typing import List, Literal


class GridConfigResponse(BaseModel):
    """Panel geometry and output settings"""
    width: int
    height: int
    pixel_count: int
    wiring: str = Field(description="progressive | serpentine")
    rotation: int = Field(description="Degrees; stored, not applied")
    flip_x: bool
    flip_y: bool
    color_order: str
    brightness_ceiling: int = Field(description="Global output brightness applied by the driver")
    frame_interval_ms: int


class FrameResponse(BaseModel):
    """
    A committed frame.

    layout=physical: pixels is one flat list in wiring order (index 0..N-1)
    layout=logical:  rows[y][x] as seen on the panel
    """
    index: int
    angle_a: float
    angle_b: float
    timestamp: float
    layout: Literal["physical", "logical"]
    lit: int = Field(description="Non-black pixel count")
    pixels: List[str] = Field(default_factory=list, description="RRGGBB hex, physical order")
    rows: List[List[str]] = Field(default_factory=list, description="RRGGBB hex, logical rows")


class RenderMetricsResponse(BaseModel):
    running: bool
    paused: bool
    frame_interval_ms: int
    fps_actual: float
    frames_rendered: int
    render_errors: int
    last_render_ms: float
    frames_exported: int
    frames_dropped: int
