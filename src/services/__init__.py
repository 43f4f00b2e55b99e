"""Services layer"""

from .calibration import draw_calibration_pattern
from .frame_exporter import (
    FrameExporter,
    FileLineWriter,
    SerialLineWriter,
    StreamLineWriter,
    format_frame_line,
    format_metadata_line,
    open_export_writer,
)

__all__ = [
    "FrameExporter",
    "FileLineWriter",
    "SerialLineWriter",
    "StreamLineWriter",
    "draw_calibration_pattern",
    "format_frame_line",
    "format_metadata_line",
    "open_export_writer",
]
