from __future__ import annotations

import asyncio
import contextlib
import logging
from collections.abc import Callable
from typing import Any

logger = logging.getLogger(__name__)

JobCallable = Callable[..., Any]


class JobScheduler:
    """Simple asyncio-based job manager for ad-hoc and periodic tasks."""

    def __init__(self) -> None:
        self._queue: asyncio.Queue[tuple[JobCallable, tuple[Any, ...], dict[str, Any]]] | None = None
        self._runner: asyncio.Task | None = None
        self._periodic_tasks: list[asyncio.Task] = []
        self._started = False

    @property
    def started(self) -> bool:
        return self._started

    async def start(self) -> None:
        if self._started:
            return
        self._started = True
        self._queue = asyncio.Queue()
        self._runner = asyncio.create_task(self._worker())

    async def stop(self) -> None:
        if not self._started:
            return
        for task in [*self._periodic_tasks, self._runner]:
            if task is None:
                continue
            task.cancel()
            with contextlib.suppress(asyncio.CancelledError):
                await task
        self._periodic_tasks.clear()
        self._runner = None
        self._queue = None
        self._started = False

    def enqueue(self, func: JobCallable, *args: Any, **kwargs: Any) -> None:
        """Schedule a job to run in the background."""

        if self._queue is None:
            raise RuntimeError("Scheduler is not started")
        self._queue.put_nowait((func, args, kwargs))

    def every(self, interval: int, func: JobCallable, *args: Any, **kwargs: Any) -> None:
        """Enqueue ``func`` now and then every ``interval`` seconds."""

        if interval <= 0:
            raise ValueError("interval must be positive")
        self._periodic_tasks.append(
            asyncio.create_task(self._run_periodic(func, interval, *args, **kwargs))
        )

    async def join(self) -> None:
        if self._queue is not None:
            await self._queue.join()

    async def _worker(self) -> None:
        assert self._queue is not None
        while True:
            func, args, kwargs = await self._queue.get()
            try:
                await asyncio.to_thread(func, *args, **kwargs)
            except Exception:
                logger.exception("Background job %s failed", getattr(func, "__name__", func))
            finally:
                self._queue.task_done()

    async def _run_periodic(self, func: JobCallable, interval: int, *args: Any, **kwargs: Any) -> None:
        while True:
            self.enqueue(func, *args, **kwargs)
            await asyncio.sleep(interval)
