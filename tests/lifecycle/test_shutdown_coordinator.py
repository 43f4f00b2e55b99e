"""
Shutdown coordinator: handler ordering, timeouts and task monitoring.
"""

import asyncio
import pytest

from lifecycle.shutdown_coordinator import ShutdownCoordinator


class RecordingHandler:
    def __init__(self, priority, calls, fail=False, delay=0.0):
        self._priority = priority
        self.calls = calls
        self.fail = fail
        self.delay = delay

    @property
    def shutdown_priority(self) -> int:
        return self._priority

    async def shutdown(self) -> None:
        if self.delay:
            await asyncio.sleep(self.delay)
        self.calls.append(self._priority)
        if self.fail:
            raise RuntimeError("handler failed")


class TestShutdownAll:

    @pytest.mark.asyncio
    async def test_handlers_run_highest_priority_first(self):
        calls = []
        coordinator = ShutdownCoordinator()
        for priority in (90, 120, 100, 110):
            coordinator.register(RecordingHandler(priority, calls))

        await coordinator.shutdown_all()

        assert calls == [120, 110, 100, 90]

    @pytest.mark.asyncio
    async def test_failing_handler_does_not_stop_sequence(self):
        calls = []
        coordinator = ShutdownCoordinator()
        coordinator.register(RecordingHandler(120, calls, fail=True))
        coordinator.register(RecordingHandler(100, calls))

        await coordinator.shutdown_all()

        assert calls == [120, 100]

    @pytest.mark.asyncio
    async def test_slow_handler_times_out(self):
        calls = []
        coordinator = ShutdownCoordinator(timeout_per_handler=0.05)
        coordinator.register(RecordingHandler(120, calls, delay=1.0))
        coordinator.register(RecordingHandler(100, calls))

        await coordinator.shutdown_all()

        assert calls == [100]


def test_register_requires_protocol():
    coordinator = ShutdownCoordinator()
    with pytest.raises(ValueError):
        coordinator.register(object())


def test_get_handler_by_type():
    coordinator = ShutdownCoordinator()
    handler = RecordingHandler(100, [])
    coordinator.register(handler)
    assert coordinator.get_handler(RecordingHandler) is handler
    assert coordinator.get_handler(int) is None


class TestWaitForShutdown:

    @pytest.mark.asyncio
    async def test_returns_on_request(self):
        coordinator = ShutdownCoordinator()
        asyncio.get_running_loop().call_later(0.01, coordinator.request_shutdown, "SIGTERM")

        await asyncio.wait_for(coordinator.wait_for_shutdown(), timeout=1.0)

        assert coordinator.reason == "SIGTERM"

    @pytest.mark.asyncio
    async def test_returns_when_watched_task_fails(self):
        async def failing():
            await asyncio.sleep(0.01)
            raise RuntimeError("render crashed")

        coordinator = ShutdownCoordinator()
        coordinator.watch(asyncio.create_task(failing()), "render loop")

        await asyncio.wait_for(coordinator.wait_for_shutdown(), timeout=1.0)

        assert coordinator.reason == "Task failure: render loop"

    @pytest.mark.asyncio
    async def test_clean_task_exit_is_not_a_failure(self):
        async def finishes():
            await asyncio.sleep(0.01)

        coordinator = ShutdownCoordinator()
        coordinator.watch(asyncio.create_task(finishes()), "one-shot")
        asyncio.get_running_loop().call_later(0.1, coordinator.request_shutdown, "SIGINT")

        await asyncio.wait_for(coordinator.wait_for_shutdown(), timeout=1.0)

        assert coordinator.reason == "SIGINT"

    @pytest.mark.asyncio
    async def test_first_reason_is_kept(self):
        coordinator = ShutdownCoordinator()
        coordinator.request_shutdown("SIGINT")
        coordinator.request_shutdown("SIGTERM")

        await coordinator.wait_for_shutdown()

        assert coordinator.reason == "SIGINT"

    def test_watch_ignores_missing_task(self):
        coordinator = ShutdownCoordinator()
        coordinator.watch(None, "api")
        assert coordinator._watched == []
