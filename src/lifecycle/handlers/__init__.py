from .api_server_shutdown_handler import APIServerShutdownHandler
from .exporter_shutdown_handler import ExporterShutdownHandler
from .led_shutdown_handler import LEDShutdownHandler
from .render_loop_shutdown_handler import RenderLoopShutdownHandler

__all__ = [
    "APIServerShutdownHandler",
    "ExporterShutdownHandler",
    "LEDShutdownHandler",
    "RenderLoopShutdownHandler",
]
