# hardware/led/strip_factory.py

from models.config import StripConfig
from models.enums import StripDriver, LogCategory
from models.grid import GridConfig
from hardware.led.strip_interface import IPhysicalStrip
from hardware.led.virtual_strip import VirtualStrip
from utils.logger import get_logger

log = get_logger().for_category(LogCategory.HARDWARE)


def create_strip(grid: GridConfig, strip: StripConfig) -> IPhysicalStrip:
    """
    Build the driver selected in config.

    The rpi_ws281x binding is only imported for the ws281x driver so the
    virtual driver works on machines without it.
    """
    if strip.driver == StripDriver.WS281X:
        from hardware.led.ws281x_strip import WS281xStrip, WS281xConfig

        return WS281xStrip(
            WS281xConfig(
                gpio_pin=strip.gpio_pin,
                led_count=grid.pixel_count,
                color_order=grid.color_order,
                frequency_hz=strip.frequency_hz,
                dma_channel=strip.dma_channel,
                brightness=grid.brightness_ceiling,
                invert=strip.invert,
                channel=strip.channel,
            )
        )

    log.info("Using virtual LED strip", pixels=grid.pixel_count, order=grid.color_order)
    return VirtualStrip(
        grid.pixel_count,
        brightness=grid.brightness_ceiling,
        color_order=grid.color_order,
    )
