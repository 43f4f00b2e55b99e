"""
API Dependencies - render loop access for FastAPI endpoints

Pattern:
1. main_asyncio.py creates the RenderLoop during initialization
2. main_asyncio.py calls set_render_loop() after creation
3. Endpoints use get_render_loop() via Depends()

Endpoints only read CommittedFrame snapshots and metrics; nothing here
mutates render state.
"""

from typing import Optional

from api.middleware.error_handler import RendererUnavailableError
from engine.render_loop import RenderLoop


# Global render loop (set by main_asyncio.py during initialization)
_render_loop: Optional[RenderLoop] = None


def set_render_loop(render_loop: Optional[RenderLoop]) -> None:
    global _render_loop
    _render_loop = render_loop


async def get_render_loop() -> RenderLoop:
    """
    FastAPI dependency for accessing the render loop.

    Raises:
        RendererUnavailableError: 503 if the render loop is not registered
    """
    if _render_loop is None:
        raise RendererUnavailableError()
    return _render_loop
