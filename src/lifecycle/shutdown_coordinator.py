"""
Shutdown coordinator that orchestrates graceful shutdown of all components.

Manages signal handlers, watches long-running tasks (render loop, API
server) and runs shutdown handlers in priority order.
"""

import asyncio
import signal
from typing import Dict, List, Optional, Tuple

from utils.logger import get_logger, LogCategory

log = get_logger().for_category(LogCategory.SHUTDOWN)


class ShutdownCoordinator:
    """
    Coordinates graceful shutdown of multiple components.

    Example:
        coordinator = ShutdownCoordinator()
        coordinator.register(RenderLoopShutdownHandler(render_loop))
        coordinator.register(LEDShutdownHandler(strip))
        coordinator.watch(render_loop.render_task, "render loop")

        coordinator.setup_signal_handlers(loop)
        await coordinator.wait_for_shutdown()
        await coordinator.shutdown_all()
    """

    def __init__(self, timeout_per_handler: float = 5.0, total_timeout: float = 15.0):
        """
        Args:
            timeout_per_handler: Timeout for each individual handler (seconds)
            total_timeout: Total timeout for entire shutdown sequence (seconds)
        """
        self._handlers: List = []
        self._watched: List[Tuple[asyncio.Task, str]] = []
        self._shutdown_event = asyncio.Event()
        self._timeout_per_handler = timeout_per_handler
        self._total_timeout = total_timeout
        self._shutdown_trigger: Dict[str, Optional[str]] = {"reason": None}

    @property
    def reason(self) -> Optional[str]:
        return self._shutdown_trigger["reason"]

    def register(self, handler) -> None:
        """
        Register a shutdown handler.

        Handler must have:
        - shutdown_priority property (int)
        - async shutdown() method
        """
        if not hasattr(handler, "shutdown_priority"):
            raise ValueError(f"Handler {handler} missing shutdown_priority property")
        if not hasattr(handler, "shutdown"):
            raise ValueError(f"Handler {handler} missing shutdown() method")

        self._handlers.append(handler)
        log.debug(f"Registered shutdown handler: {handler.__class__.__name__}")

    def watch(self, task: Optional[asyncio.Task], name: str) -> None:
        """Trigger shutdown if this task ends with an exception."""
        if task is None:
            return
        self._watched.append((task, name))
        log.debug(f"Watching task: {name}")

    def setup_signal_handlers(self, loop: asyncio.AbstractEventLoop) -> None:
        """
        Install OS signal handlers for graceful shutdown (SIGINT, SIGTERM).
        """
        def signal_handler(sig: signal.Signals) -> None:
            log.info(f"Signal {sig.name} received → triggering shutdown")
            self.request_shutdown(sig.name)

        for sig in (signal.SIGINT, signal.SIGTERM):
            loop.add_signal_handler(sig, lambda s=sig: signal_handler(s))

        log.info("Signal handlers installed (SIGINT, SIGTERM)")

    def request_shutdown(self, reason: str) -> None:
        if self._shutdown_trigger["reason"] is None:
            self._shutdown_trigger["reason"] = reason
        self._shutdown_event.set()

    def _check_watched_failures(self) -> bool:
        for task, name in self._watched:
            if not task.done() or task.cancelled():
                continue
            error = task.exception()
            if error is not None:
                log.error(f"Critical task failed: {name}", error=f"{type(error).__name__}: {error}")
                self.request_shutdown(f"Task failure: {name}")
                return True
        return False

    async def wait_for_shutdown(self) -> None:
        """
        Return when a shutdown signal arrives or a watched task fails.

        A watched task that finishes cleanly is not a failure.
        """
        while not self._shutdown_event.is_set():
            if self._check_watched_failures():
                return

            pending = {task for task, _ in self._watched if not task.done()}
            shutdown_waiter = asyncio.create_task(self._shutdown_event.wait())

            try:
                await asyncio.wait(pending | {shutdown_waiter}, return_when=asyncio.FIRST_COMPLETED)
            finally:
                if not shutdown_waiter.done():
                    shutdown_waiter.cancel()

        log.debug("Shutdown triggered", reason=self.reason)

    async def shutdown_all(self) -> None:
        """
        Execute graceful shutdown of all handlers in priority order.

        Each handler has its own timeout and the whole sequence has a global
        timeout. A failing handler never stops the ones after it.
        """
        log.info("Initiating graceful shutdown sequence...", reason=self.reason or "UNKNOWN")

        sorted_handlers = sorted(
            self._handlers, key=lambda h: h.shutdown_priority, reverse=True
        )

        loop = asyncio.get_running_loop()
        start_time = loop.time()

        for handler in sorted_handlers:
            handler_name = handler.__class__.__name__

            elapsed = loop.time() - start_time
            if elapsed > self._total_timeout:
                log.error(f"Total shutdown timeout exceeded ({elapsed:.1f}s > {self._total_timeout}s)")
                break

            try:
                log.debug(f"Shutting down {handler_name} (priority={handler.shutdown_priority})...")
                await asyncio.wait_for(handler.shutdown(), timeout=self._timeout_per_handler)
                log.debug(f"✓ {handler_name} shutdown complete")

            except asyncio.TimeoutError:
                log.error(f"{handler_name} shutdown timeout ({self._timeout_per_handler}s)")

            except Exception as e:
                log.error(f"Error shutting down {handler_name}: {e}", error_type=type(e).__name__)

        log.info("✓ Shutdown sequence complete")

    def get_handler(self, handler_type: type):
        """Get a registered handler by type (testing/debugging)."""
        for handler in self._handlers:
            if isinstance(handler, handler_type):
                return handler
        return None
