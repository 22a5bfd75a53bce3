"""Monitored workload set."""

from __future__ import annotations

from collections.abc import Iterable, Iterator


class TargetError(Exception):
    """Base exception for target set changes that are not allowed."""


class LastTargetError(TargetError):
    """Raised when removing the only remaining target."""

    def __init__(self, name: str) -> None:
        super().__init__(f"Cannot remove last deployment {name}")
        self.name = name


class UnknownTargetError(TargetError):
    """Raised when removing a name that is not monitored."""

    def __init__(self, name: str) -> None:
        super().__init__(f"Deployment {name} is not monitored")
        self.name = name


class TargetSet:
    """Ordered, duplicate-free set of monitored workload names.

    Always holds at least one name. Fetch passes take an immutable
    :meth:`snapshot` so later changes never affect a pass in flight.
    """

    def __init__(self, names: Iterable[str]) -> None:
        self._names: list[str] = []
        for name in names:
            self.add(name)
        if not self._names:
            raise ValueError("At least one deployment must be monitored")

    def __contains__(self, name: object) -> bool:
        return name in self._names

    def __iter__(self) -> Iterator[str]:
        return iter(tuple(self._names))

    def __len__(self) -> int:
        return len(self._names)

    def __repr__(self) -> str:
        return f"TargetSet({self._names!r})"

    def add(self, name: str) -> bool:
        """Append ``name``. Returns False when it was already monitored."""
        if name in self._names:
            return False
        self._names.append(name)
        return True

    def remove(self, name: str) -> None:
        """Remove ``name``, refusing unknown names and the last member."""
        if name not in self._names:
            raise UnknownTargetError(name)
        if len(self._names) == 1:
            raise LastTargetError(name)
        self._names.remove(name)

    def snapshot(self) -> tuple[str, ...]:
        return tuple(self._names)
