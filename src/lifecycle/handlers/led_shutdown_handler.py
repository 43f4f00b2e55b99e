from __future__ import annotations

from hardware.led.strip_interface import IPhysicalStrip
from lifecycle.shutdown_protocol import IShutdownHandler
from utils.logger import get_logger, LogCategory

log = get_logger().for_category(LogCategory.SHUTDOWN)


class LEDShutdownHandler(IShutdownHandler):
    """
    Shutdown handler for LED hardware.

    Clears the panel so it is not left lit. Runs AFTER the render loop stops,
    otherwise the next frame would immediately relight it.

    Priority: 100
    """

    def __init__(self, strip: IPhysicalStrip):
        self.strip = strip

    @property
    def shutdown_priority(self) -> int:
        return 100

    async def shutdown(self) -> None:
        log.info("Clearing LED panel...")

        self.strip.clear()

        # WS281xStrip releases its DMA channel here
        release = getattr(self.strip, "shutdown", None)
        if release is not None:
            release()

        log.info("LED panel cleared")
