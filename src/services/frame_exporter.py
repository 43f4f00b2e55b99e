"""
FrameExporter — line-oriented diagnostic export of committed frames.

Protocol (text, one record per line):
    CONFIG:width=8,height=8,wiring=serpentine,rotation=0,flip_x=0,flip_y=0
    FRAME:000000,0F0F0F,FFFFFF,...          (N triplets, physical order)

The CONFIG line is written once, before the first FRAME line.

Rendering only ever calls publish(), which never blocks: frames go into a
small bounded queue and are dropped when the consumer falls behind. The
consumer never blocks the event loop either: stdout and serial writes run in
a worker thread, file writes go through aiofiles. Write errors disable the
exporter; they never propagate into the render loop.
"""

from __future__ import annotations
import asyncio
import sys
from typing import Optional, Protocol, Sequence, TextIO

import aiofiles

from models.color import Color
from models.config import DiagnosticsConfig
from models.enums import ExportTarget, LogCategory
from models.frame import CommittedFrame
from models.grid import GridConfig
from utils.logger import get_logger

log = get_logger().for_category(LogCategory.EXPORT)

METADATA_PREFIX = "CONFIG:"
FRAME_PREFIX = "FRAME:"


class LineWriter(Protocol):
    async def write_line(self, line: str) -> None: ...
    async def close(self) -> None: ...


def format_metadata_line(grid: GridConfig) -> str:
    return (
        f"{METADATA_PREFIX}width={grid.width},height={grid.height},"
        f"wiring={grid.wiring.value},rotation={grid.rotation.value},"
        f"flip_x={int(grid.flip_x)},flip_y={int(grid.flip_y)}"
    )


def format_frame_line(pixels: Sequence[Color]) -> str:
    return FRAME_PREFIX + ",".join(c.to_hex() for c in pixels)


# ---------------------------------------------------------------------------
# Writers
# ---------------------------------------------------------------------------

class StreamLineWriter:
    """
    Text stream (stdout) written from a worker thread.

    A stalled reader on the other end of a pipe blocks the worker thread,
    not the event loop. The stream is closed only when owned.
    """

    def __init__(self, stream: TextIO, owns_stream: bool = False):
        self._stream = stream
        self._owns_stream = owns_stream

    async def write_line(self, line: str) -> None:
        await asyncio.to_thread(self._write, line)

    def _write(self, line: str) -> None:
        self._stream.write(line + "\n")
        self._stream.flush()

    async def close(self) -> None:
        if self._owns_stream:
            await asyncio.to_thread(self._stream.close)


class SerialLineWriter:
    """Text adapter over a pyserial port (the port wants bytes)."""

    def __init__(self, port):
        self._port = port

    async def write_line(self, line: str) -> None:
        await asyncio.to_thread(self._write, line)

    def _write(self, line: str) -> None:
        self._port.write((line + "\n").encode("ascii"))
        self._port.flush()

    async def close(self) -> None:
        await asyncio.to_thread(self._port.close)


class FileLineWriter:
    """Append-mode log file via aiofiles."""

    def __init__(self, file):
        self._file = file

    @classmethod
    async def open(cls, path: str) -> 'FileLineWriter':
        return cls(await aiofiles.open(path, "a", encoding="ascii"))

    async def write_line(self, line: str) -> None:
        await self._file.write(line + "\n")
        await self._file.flush()

    async def close(self) -> None:
        await self._file.close()


async def open_export_writer(config: DiagnosticsConfig) -> LineWriter:
    """Open the configured export target. Raises OSError when unavailable."""
    if config.target == ExportTarget.FILE:
        log.info("Exporting frames to file", path=config.path)
        return await FileLineWriter.open(config.path)

    if config.target == ExportTarget.SERIAL:
        import serial

        log.info("Exporting frames to serial port", port=config.port, baud=config.baud_rate)
        port = serial.Serial(config.port, config.baud_rate, timeout=0, write_timeout=0)
        return SerialLineWriter(port)

    return StreamLineWriter(sys.stdout)


# ---------------------------------------------------------------------------
# Exporter
# ---------------------------------------------------------------------------

class FrameExporter:
    """
    Bounded, non-blocking consumer of committed frames.

    Example:
        exporter = FrameExporter(grid, StreamLineWriter(sys.stdout))
        await exporter.start()
        exporter.publish(frame)   # from the render loop
        await exporter.stop()
        await exporter.close()
    """

    def __init__(self, grid: GridConfig, writer: LineWriter, queue_size: int = 4):
        self.grid = grid
        self.writer = writer
        self._queue: asyncio.Queue = asyncio.Queue(maxsize=queue_size)
        self._task: Optional[asyncio.Task] = None
        self._metadata_sent = False

        self.enabled = True
        self.exported = 0
        self.dropped = 0

    # === Producer side (render loop) ===

    def publish(self, frame: CommittedFrame) -> bool:
        """Queue a frame for export. Returns False when dropped."""
        if not self.enabled:
            return False
        try:
            self._queue.put_nowait(frame)
            return True
        except asyncio.QueueFull:
            self.dropped += 1
            return False

    # === Consumer side ===

    async def write_frame(self, frame: CommittedFrame) -> bool:
        """Write one frame (and the CONFIG line before the first one)."""
        if not self.enabled:
            return False

        try:
            if not self._metadata_sent:
                await self.writer.write_line(format_metadata_line(self.grid))
                self._metadata_sent = True

            await self.writer.write_line(format_frame_line(frame.pixels))
            self.exported += 1
            return True

        except (OSError, ValueError) as ex:
            self.enabled = False
            log.error("Frame export failed, exporter disabled", error=str(ex), frame=frame.index)
            return False

    async def run(self) -> None:
        """Drain the queue until cancelled or disabled."""
        try:
            while self.enabled:
                frame = await self._queue.get()
                await self.write_frame(frame)
        except asyncio.CancelledError:
            log.debug("Frame exporter cancelled")
            raise

    # === Lifecycle ===

    async def start(self) -> None:
        if self._task is not None:
            log.warn("Frame exporter already running")
            return
        self._task = asyncio.create_task(self.run())
        log.info("Frame exporter started", grid=f"{self.grid.width}x{self.grid.height}")

    async def stop(self) -> None:
        if self._task is None:
            return
        self._task.cancel()
        try:
            await self._task
        except asyncio.CancelledError:
            pass
        self._task = None
        log.info("Frame exporter stopped", exported=self.exported, dropped=self.dropped)

    async def close(self) -> None:
        """Close the underlying writer (stdout is never closed)."""
        await self.writer.close()
