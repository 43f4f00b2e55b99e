from __future__ import annotations
import asyncio
import uvicorn
from fastapi import FastAPI
from typing import Optional
from utils.logger import get_logger, LogCategory

log = get_logger().for_category(LogCategory.API)


class APIServerWrapper:
    """
    Runs Uvicorn as a background asyncio task with Uvicorn's own signal
    handlers disabled, so SIGINT/SIGTERM reach the ShutdownCoordinator.

    Behaviour:
      - start() launches uvicorn.Server.serve() as a task and returns once
        the server reports started (or the wait times out).
      - stop() asks the server to exit, waits briefly and cancels the task
        if it is still running.
    """

    def __init__(
        self,
        app: FastAPI,
        host: str = "0.0.0.0",
        port: int = 8000,
    ):
        self.app = app
        self.host = host
        self.port = port
        self._server: Optional[uvicorn.Server] = None
        self._serve_task: Optional[asyncio.Task] = None

    def _create_server(self) -> uvicorn.Server:
        config = uvicorn.Config(
            app=self.app,
            host=self.host,
            port=self.port,
            loop="asyncio",
            log_level="warning",
            access_log=False,
            server_header=False,
        )

        server = uvicorn.Server(config)

        # Shutdown is driven by ShutdownCoordinator, not uvicorn
        server.install_signal_handlers = lambda: None  # type: ignore

        return server

    async def start(self, *, wait_started_timeout: float = 5.0) -> None:
        if self._serve_task is not None and not self._serve_task.done():
            raise RuntimeError("API server already started")

        self._server = self._create_server()

        log.info(f"Launching API server on http://{self.host}:{self.port}")

        self._serve_task = asyncio.create_task(self._server.serve(), name="UvicornServe")

        loop = asyncio.get_running_loop()
        deadline = loop.time() + wait_started_timeout
        while loop.time() < deadline:
            if self._server.started:
                log.info("API server started", url=f"http://{self.host}:{self.port}/docs")
                return
            if self._serve_task.done():
                # serve() returned early: bind failure or startup error
                break
            await asyncio.sleep(0.05)

        if self._serve_task.done() and not self._serve_task.cancelled() and self._serve_task.exception():
            raise self._serve_task.exception()
        log.warn("API server did not report started in time", timeout=f"{wait_started_timeout}s")

    async def stop(self, *, shutdown_timeout: float = 2.0) -> None:
        if self._server is None or self._serve_task is None:
            log.warn("API server stop() called but server was not running")
            return

        self._server.should_exit = True
        self._server.force_exit = True

        try:
            await asyncio.wait_for(asyncio.shield(self._serve_task), timeout=shutdown_timeout)
        except asyncio.TimeoutError:
            log.warn("API server shutdown timeout; cancelling serve task")
            self._serve_task.cancel()
            try:
                await self._serve_task
            except asyncio.CancelledError:
                log.debug("Uvicorn serve task cancelled")

        self._server = None
        self._serve_task = None
        log.info("API server stopped and port released")

    @property
    def is_running(self) -> bool:
        return self._serve_task is not None and not self._serve_task.done()

    @property
    def task(self) -> Optional[asyncio.Task]:
        return self._serve_task
