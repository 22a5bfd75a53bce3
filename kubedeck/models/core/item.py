"""Topology row model."""

from __future__ import annotations

from dataclasses import dataclass

from kubedeck.constants.enums import ItemKind
from kubedeck.constants.values import STATUS_ERROR_TAG


@dataclass(frozen=True)
class Item:
    """A single display row: workload, pod, release, secret, config map or header."""

    kind: ItemKind
    name: str
    status: str = ""

    @property
    def key(self) -> tuple[ItemKind, str]:
        """Selection identity used to restore the cursor across refreshes."""
        return (self.kind, self.name)

    @property
    def is_header(self) -> bool:
        return self.kind is ItemKind.HEADER

    @property
    def type_code(self) -> str:
        return self.kind.value


def header_name(target: str, failed: bool = False) -> str:
    """Format a group header name for a monitored workload."""
    if failed:
        return f"=== {target} {STATUS_ERROR_TAG} ==="
    return f"=== {target} ==="


def header_target(name: str) -> str:
    """Recover the workload name from a header row name."""
    inner = name.removeprefix("=== ").removesuffix(" ===")
    return inner.removesuffix(f" {STATUS_ERROR_TAG}")
