from __future__ import annotations
from typing import TYPE_CHECKING, Sequence

from lifecycle.shutdown_protocol import IShutdownHandler
from utils.logger import get_logger, LogCategory

if TYPE_CHECKING:
    from services.frame_exporter import FrameExporter

log = get_logger().for_category(LogCategory.SHUTDOWN)


class ExporterShutdownHandler(IShutdownHandler):
    """
    Stops diagnostic exporters and closes their files / serial ports.

    Priority: 110 (after the render loop stops publishing)
    """

    def __init__(self, exporters: Sequence["FrameExporter"]):
        self.exporters = list(exporters)

    @property
    def shutdown_priority(self) -> int:
        return 110

    async def shutdown(self) -> None:
        for exporter in self.exporters:
            await exporter.stop()
            try:
                await exporter.close()
            except OSError as e:
                log.error(f"Error closing exporter output: {e}")

        log.info(f"Closed {len(self.exporters)} exporter(s)")
