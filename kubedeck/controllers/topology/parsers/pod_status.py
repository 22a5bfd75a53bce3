"""Pod status reconciliation."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

_TERMINATING = "Terminating"
_RUNNING = "Running"
_COMPLETED = "Completed"
_UNKNOWN_PHASE = "Unknown"


@dataclass(frozen=True)
class ContainerState:
    """The parts of a container status that matter for the display label."""

    ready: bool = False
    waiting_reason: str = ""
    terminated_reason: str = ""


@dataclass(frozen=True)
class PodStatusFields:
    """Raw pod fields the reconciled status is computed from."""

    phase: str = ""
    deleting: bool = False
    containers: tuple[ContainerState, ...] = field(default_factory=tuple)

    @classmethod
    def from_pod(cls, pod: Mapping[str, Any]) -> PodStatusFields:
        metadata = pod.get("metadata") or {}
        status = pod.get("status") or {}
        containers = []
        for entry in status.get("containerStatuses") or []:
            state = entry.get("state") or {}
            containers.append(
                ContainerState(
                    ready=bool(entry.get("ready")),
                    waiting_reason=(state.get("waiting") or {}).get("reason") or "",
                    terminated_reason=(state.get("terminated") or {}).get("reason") or "",
                )
            )
        return cls(
            phase=status.get("phase") or "",
            deleting=metadata.get("deletionTimestamp") is not None,
            containers=tuple(containers),
        )

    @property
    def ready_count(self) -> int:
        return sum(1 for container in self.containers if container.ready)

    @property
    def total_count(self) -> int:
        return len(self.containers)


def _failure_reason(containers: tuple[ContainerState, ...]) -> str:
    for container in containers:
        if container.waiting_reason:
            return container.waiting_reason
        if container.terminated_reason and container.terminated_reason != _COMPLETED:
            return container.terminated_reason
    return ""


def reconcile_fields(fields: PodStatusFields) -> str:
    """Compute ``"<label> <ready>/<total>"`` from extracted pod fields.

    Label precedence: deletion in progress, then all containers ready, then
    the first waiting or abnormal termination reason, then the phase.
    Readiness wins over a stale waiting reason left on a recovered container.
    """
    ready, total = fields.ready_count, fields.total_count
    if fields.deleting:
        label = _TERMINATING
    elif total > 0 and ready == total:
        label = _RUNNING
    else:
        label = _failure_reason(fields.containers) or fields.phase or _UNKNOWN_PHASE
    return f"{label} {ready}/{total}"


def reconcile_pod_status(pod: Mapping[str, Any]) -> str:
    """Display status for a pod object as returned by ``kubectl get pods -o json``."""
    return reconcile_fields(PodStatusFields.from_pod(pod))
