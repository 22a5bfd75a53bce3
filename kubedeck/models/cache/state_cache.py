"""Selector and release caches for monitored workloads."""

from __future__ import annotations

import logging
from collections.abc import Mapping

from kubedeck.utils.rw_lock import ReadWriteLock

logger = logging.getLogger(__name__)


class StateCache:
    """Workload -> label selector and workload -> Helm release name.

    Thread-safe. Getters return copies so callers never observe a map
    while it is being updated. Empty release names are never stored.
    """

    def __init__(self) -> None:
        self._selectors: dict[str, str] = {}
        self._releases: dict[str, str] = {}
        self._lock = ReadWriteLock()

    def get_selector(self, workload: str) -> str:
        with self._lock.read():
            return self._selectors.get(workload, "")

    def get_release(self, workload: str) -> str:
        with self._lock.read():
            return self._releases.get(workload, "")

    def selectors_snapshot(self) -> dict[str, str]:
        """Copy of the selector map, used as the read-only hint for a fetch pass."""
        with self._lock.read():
            return dict(self._selectors)

    def releases_snapshot(self) -> dict[str, str]:
        with self._lock.read():
            return dict(self._releases)

    def merge(
        self,
        selectors: Mapping[str, str] | None = None,
        releases: Mapping[str, str] | None = None,
    ) -> None:
        """Apply deltas from a completed fetch pass.

        Selector entries overwrite; release entries overwrite, and an
        empty release value removes the entry.
        """
        with self._lock.write():
            if selectors:
                for workload, selector in selectors.items():
                    if selector:
                        self._selectors[workload] = selector
            if releases:
                for workload, release in releases.items():
                    if release:
                        self._releases[workload] = release
                    else:
                        self._releases.pop(workload, None)

    def purge(self, workload: str) -> None:
        """Drop every entry for a workload that is no longer monitored."""
        with self._lock.write():
            self._selectors.pop(workload, None)
            self._releases.pop(workload, None)
        logger.debug("Purged cached state for %s", workload)

    def clear(self) -> None:
        with self._lock.write():
            self._selectors.clear()
            self._releases.clear()
