"""
Frame endpoints - read-only view of the committed frame and render metrics
"""

from fastapi import APIRouter, Depends, Query
from typing import Literal

from api.dependencies import get_render_loop
from api.middleware.error_handler import FrameNotAvailableError
from api.schemas.frame import FrameResponse, GridConfigResponse, RenderMetricsResponse
from engine.render_loop import RenderLoop
from utils.logger import get_logger, LogCategory

log = get_logger().for_category(LogCategory.API)

router = APIRouter(prefix="/frame", tags=["Frame"])


@router.get("/config", response_model=GridConfigResponse)
async def get_frame_config(render_loop: RenderLoop = Depends(get_render_loop)) -> GridConfigResponse:
    """Grid geometry, wiring and output settings"""
    grid = render_loop.context.grid
    return GridConfigResponse(
        **grid.as_dict(),
        frame_interval_ms=render_loop.frame_interval_ms,
    )


@router.get("/latest", response_model=FrameResponse)
async def get_latest_frame(
    layout: Literal["physical", "logical"] = Query("physical"),
    render_loop: RenderLoop = Depends(get_render_loop),
) -> FrameResponse:
    """
    Last committed frame.

    Raises:
        FrameNotAvailableError: before the first frame is committed
    """
    frame = render_loop.latest_frame
    if frame is None:
        raise FrameNotAvailableError()

    hex_pixels = frame.to_hex()
    response = FrameResponse(
        index=frame.index,
        angle_a=frame.angle_a,
        angle_b=frame.angle_b,
        timestamp=frame.timestamp,
        layout=layout,
        lit=frame.lit_count(),
    )

    if layout == "logical":
        addressing = render_loop.context.addressing
        response.rows = [
            [hex_pixels[addressing.map(x, y)] for x in range(addressing.width)]
            for y in range(addressing.height)
        ]
    else:
        response.pixels = hex_pixels

    return response


@router.get("/metrics", response_model=RenderMetricsResponse)
async def get_render_metrics(render_loop: RenderLoop = Depends(get_render_loop)) -> RenderMetricsResponse:
    return RenderMetricsResponse(**render_loop.get_metrics())
