"""Pod name -> has-multiple-containers memo."""

from __future__ import annotations

from kubedeck.utils.rw_lock import ReadWriteLock


class MultiContainerCache:
    """Remembers whether a pod runs more than one container.

    Entries never change once written. The cache is only cleared wholesale.
    """

    def __init__(self) -> None:
        self._entries: dict[str, bool] = {}
        self._lock = ReadWriteLock()

    def get(self, pod: str) -> bool | None:
        """Return the memoized answer, or None when the pod was never checked."""
        with self._lock.read():
            return self._entries.get(pod)

    def set(self, pod: str, multi: bool) -> None:
        with self._lock.write():
            self._entries[pod] = multi

    def __len__(self) -> int:
        with self._lock.read():
            return len(self._entries)

    def clear(self) -> None:
        with self._lock.write():
            self._entries.clear()
