"""
main_asyncio.py — Application entry point for the matrix torus renderer
-----------------------------------------------------------------------

Responsible for:
- loading configuration and configuring the logger
- wiring render core, LED driver, diagnostics and API
- starting the async render loop
- graceful shutdown on Ctrl+C, SIGTERM or render task failure
"""

import sys

# ---------------------------------------------------------------------------
# UTF-8 ENCODING FIX (important for Raspberry Pi)
# ---------------------------------------------------------------------------

if hasattr(sys.stdout, 'reconfigure') and sys.stdout.encoding != 'UTF-8':
    sys.stdout.reconfigure(encoding='utf-8')  # type: ignore
if hasattr(sys.stderr, 'reconfigure') and sys.stderr.encoding != 'UTF-8':
    sys.stderr.reconfigure(encoding='utf-8')  # type: ignore

import asyncio
from pathlib import Path
from typing import List, Optional

from api.dependencies import set_render_loop
from api.main import create_app
from engine.frame_compositor import FrameCompositor
from engine.render_context import RenderContext
from engine.render_loop import RenderLoop
from hardware.led.strip_factory import create_strip
from lifecycle.api_server_wrapper import APIServerWrapper
from lifecycle.handlers import (
    APIServerShutdownHandler,
    ExporterShutdownHandler,
    LEDShutdownHandler,
    RenderLoopShutdownHandler,
)
from lifecycle.shutdown_coordinator import ShutdownCoordinator
from managers import ConfigManager
from models.config import AppConfig, DiagnosticsConfig
from models.enums import ExportTarget, LogCategory
from models.grid import GridConfig
from services.calibration import draw_calibration_pattern
from services.frame_exporter import FrameExporter, open_export_writer
from utils.logger import get_logger, configure_logger

# ---------------------------------------------------------------------------
# LOGGER SETUP
# ---------------------------------------------------------------------------

log = get_logger().for_category(LogCategory.SYSTEM)


def _configure_logging(app_config: AppConfig) -> None:
    """Apply logging: settings; move logs to stderr when FRAME lines own stdout."""
    diagnostics = app_config.diagnostics
    export_to_stdout = diagnostics.enabled and diagnostics.target == ExportTarget.STDOUT
    configure_logger(
        app_config.logging.level,
        app_config.logging.use_colors,
        stream=sys.stderr if export_to_stdout else None,
    )


async def _open_exporter(grid: GridConfig, diagnostics: DiagnosticsConfig) -> Optional[FrameExporter]:
    try:
        writer = await open_export_writer(diagnostics)
    except OSError as ex:
        log.error("Diagnostics output unavailable, continuing without export", error=str(ex))
        return None

    exporter = FrameExporter(grid, writer, diagnostics.queue_size)
    await exporter.start()
    return exporter


# ---------------------------------------------------------------------------
# Application Entry
# ---------------------------------------------------------------------------

async def main(config_path: str = "config/config.yaml") -> int:
    """Main async entry point. Returns the process exit code."""

    log.info("Starting matrix torus renderer...")

    # ========================================================================
    # 1. CONFIGURATION
    # ========================================================================

    try:
        app_config = ConfigManager(config_path).load()
    except ValueError as ex:
        log.error("Invalid configuration", error=str(ex))
        return 1

    _configure_logging(app_config)

    # ========================================================================
    # 2. RENDER CORE
    # ========================================================================

    context = RenderContext.create(app_config.grid)
    compositor = FrameCompositor.from_config(app_config)

    log.info(
        "Render core ready",
        samples=len(compositor.sampler),
        zoom=f"{compositor.transform.zoom:.3f}",
    )

    # ========================================================================
    # 3. LED OUTPUT
    # ========================================================================

    strip = create_strip(app_config.grid, app_config.strip)

    if app_config.calibration.enabled:
        draw_calibration_pattern(context.frame_buffer, context.addressing)
        strip.apply_frame(context.frame_buffer.snapshot())
        log.info("Holding calibration pattern", seconds=app_config.calibration.hold_seconds)
        await asyncio.sleep(app_config.calibration.hold_seconds)

    # ========================================================================
    # 4. DIAGNOSTICS
    # ========================================================================

    exporters: List[FrameExporter] = []
    if app_config.diagnostics.enabled:
        exporter = await _open_exporter(app_config.grid, app_config.diagnostics)
        if exporter is not None:
            exporters.append(exporter)

    # ========================================================================
    # 5. RENDER LOOP
    # ========================================================================

    render_loop = RenderLoop(
        compositor,
        context,
        strip,
        exporters=exporters,
        frame_interval_ms=app_config.animation.frame_interval_ms,
    )
    await render_loop.start()

    # ========================================================================
    # 6. API SERVER
    # ========================================================================

    api_wrapper: Optional[APIServerWrapper] = None
    if app_config.api.enabled:
        set_render_loop(render_loop)
        api_wrapper = APIServerWrapper(create_app(), host=app_config.api.host, port=app_config.api.port)
        await api_wrapper.start()

    # ========================================================================
    # 7. SHUTDOWN COORDINATION
    # ========================================================================

    coordinator = ShutdownCoordinator()
    coordinator.register(RenderLoopShutdownHandler(render_loop))
    coordinator.register(ExporterShutdownHandler(exporters))
    coordinator.register(LEDShutdownHandler(strip))
    if api_wrapper is not None:
        coordinator.register(APIServerShutdownHandler(api_wrapper))

    coordinator.watch(render_loop.render_task, "render loop")
    if api_wrapper is not None:
        coordinator.watch(api_wrapper.task, "API server")

    coordinator.setup_signal_handlers(asyncio.get_running_loop())

    log.info("🏁 Renderer running. Waiting for exit signal...")

    await coordinator.wait_for_shutdown()
    await coordinator.shutdown_all()

    log.info("👋 Matrix torus shut down cleanly.")
    return 0


def config_path_from_argv(argv: List[str]) -> str:
    """
    Config path from the command line, resolved against the working directory.

    Without an argument the bundled config/config.yaml (relative to src/) is used.
    """
    if len(argv) > 1:
        return str(Path(argv[1]).resolve())
    return "config/config.yaml"


def run() -> None:
    try:
        exit_code = asyncio.run(main(config_path_from_argv(sys.argv)))
    except KeyboardInterrupt:
        log.info("Keyboard interrupt received")
        exit_code = 0
    sys.exit(exit_code)


# ---------------------------------------------------------------------------
# ENTRY POINT
# ---------------------------------------------------------------------------
if __name__ == "__main__":
    run()
