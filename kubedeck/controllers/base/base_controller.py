"""Base controller with async worker-friendly patterns for KubeDeck.

Controllers run inside Textual workers so kubectl/helm round-trips never
block the UI.
"""

from __future__ import annotations

import logging
import time
from abc import ABC, abstractmethod
from collections.abc import Awaitable
from dataclasses import dataclass
from typing import Any

logger = logging.getLogger(__name__)


@dataclass
class WorkerResult:
    """Result wrapper for worker operations."""

    success: bool
    data: Any | None = None
    error: str | None = None
    duration_ms: float = 0.0


class BaseController(ABC):
    """Base controller class with worker-friendly patterns.

    Subclasses implement :meth:`fetch_all` for their data source.
    """

    @abstractmethod
    async def fetch_all(self, *args: Any, **kwargs: Any) -> Any:
        """Fetch all data from the source."""
        ...

    async def run_timed(self, operation: Awaitable[Any]) -> WorkerResult:
        """Await ``operation`` and wrap its outcome with the elapsed time.

        Exceptions become a failed result so a worker can report them
        without tearing down the screen.
        """
        started = time.monotonic()
        try:
            data = await operation
        except Exception as e:
            duration_ms = (time.monotonic() - started) * 1000
            logger.warning("Controller operation failed after %.0fms: %s", duration_ms, e)
            return WorkerResult(success=False, error=str(e), duration_ms=duration_ms)
        return WorkerResult(
            success=True, data=data, duration_ms=(time.monotonic() - started) * 1000
        )
