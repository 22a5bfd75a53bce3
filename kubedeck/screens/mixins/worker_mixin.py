"""Worker helpers shared by screens that talk to the cluster.

Screens start every kubectl round-trip through :meth:`WorkerMixin.start_worker`
so workers are named, grouped, cancelled on unmount and logged consistently.
"""

from __future__ import annotations

import logging
import time
from collections.abc import Awaitable, Callable
from contextlib import suppress
from typing import Any

from textual._context import NoActiveAppError
from textual.message import Message
from textual.worker import Worker, WorkerState

logger = logging.getLogger(__name__)


# ============================================================================
# Worker result messages
# ============================================================================


class DataLoaded(Message):
    """A background load finished.

    Attributes:
        data: Whatever the load produced.
        duration_ms: Wall time of the load.
    """

    def __init__(self, data: Any, duration_ms: float = 0.0) -> None:
        super().__init__()
        self.data = data
        self.duration_ms = duration_ms


class DataLoadFailed(Message):
    """A background load could not produce any data."""

    def __init__(self, error: str) -> None:
        super().__init__()
        self.error = error


# ============================================================================
# WorkerMixin
# ============================================================================


class WorkerMixin:
    """Adds grouped worker startup, cancellation and state logging to a Screen.

    Mix in before ``Screen`` so ``run_worker`` and ``workers`` resolve to the
    screen's own.
    """

    def start_worker(
        self,
        worker_func: Callable[..., Awaitable[Any]] | Awaitable[Any],
        *,
        exclusive: bool = True,
        name: str | None = None,
        group: str = "default",
    ) -> Worker[Any]:
        """Run ``worker_func`` as a Textual worker.

        Args:
            worker_func: Coroutine function or awaitable to run.
            exclusive: Cancel running workers of the same group first.
            name: Worker name used in log records.
            group: Worker group; exclusivity applies within a group only.

        Returns:
            The started worker.
        """
        worker: Worker[Any] = self.run_worker(  # type: ignore[attr-defined]
            worker_func,
            name=name,
            group=group,
            exclusive=exclusive,
            exit_on_error=False,
        )
        self._worker_start_times[worker] = time.monotonic()
        return worker

    @property
    def _worker_start_times(self) -> dict[Worker[Any], float]:
        return self.__dict__.setdefault("_worker_started_at", {})

    def cancel_workers(self) -> None:
        with suppress(NoActiveAppError):
            self.workers.cancel_all()  # type: ignore[attr-defined]

    def on_unmount(self) -> None:
        self.cancel_workers()

    def on_worker_state_changed(self, event: Worker.StateChanged) -> None:
        worker = event.worker
        if event.state not in (WorkerState.ERROR, WorkerState.CANCELLED, WorkerState.SUCCESS):
            return
        started = self._worker_start_times.pop(worker, None)
        elapsed_ms = (time.monotonic() - started) * 1000 if started is not None else 0.0
        if event.state is WorkerState.ERROR:
            logger.error("Worker %s failed after %.0fms: %s", worker.name, elapsed_ms, worker.error)
        elif event.state is WorkerState.CANCELLED:
            logger.debug("Worker %s cancelled after %.0fms", worker.name, elapsed_ms)
        else:
            logger.debug("Worker %s finished in %.0fms", worker.name, elapsed_ms)
