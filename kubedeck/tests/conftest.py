"""Shared fixtures for KubeDeck tests."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any
from unittest.mock import MagicMock

import pytest

from kubedeck.controllers.kube.client import KubectlClient


def _deployment(
    name: str = "web",
    *,
    match_labels: dict[str, str] | None = None,
    annotations: dict[str, str] | None = None,
    labels: dict[str, str] | None = None,
    containers: list[dict[str, Any]] | None = None,
    init_containers: list[dict[str, Any]] | None = None,
    volumes: list[dict[str, Any]] | None = None,
) -> dict[str, Any]:
    pod_spec: dict[str, Any] = {"containers": containers or [{"name": name}]}
    if init_containers is not None:
        pod_spec["initContainers"] = init_containers
    if volumes is not None:
        pod_spec["volumes"] = volumes
    return {
        "metadata": {
            "name": name,
            "annotations": annotations or {},
            "labels": labels or {},
        },
        "spec": {
            "selector": {"matchLabels": match_labels if match_labels is not None else {"app": name}},
            "template": {"spec": pod_spec},
        },
    }


def _pod(
    name: str,
    *,
    phase: str = "Running",
    ready: list[bool] | None = None,
    waiting: str | None = None,
    terminated: str | None = None,
    deleting: bool = False,
) -> dict[str, Any]:
    statuses = []
    for index, is_ready in enumerate(ready if ready is not None else [True]):
        state: dict[str, Any] = {"running": {}}
        if index == 0 and waiting:
            state = {"waiting": {"reason": waiting}}
        elif index == 0 and terminated:
            state = {"terminated": {"reason": terminated}}
        statuses.append({"name": f"c{index}", "ready": is_ready, "state": state})
    metadata: dict[str, Any] = {"name": name}
    if deleting:
        metadata["deletionTimestamp"] = "2024-01-01T00:00:00Z"
    return {"metadata": metadata, "status": {"phase": phase, "containerStatuses": statuses}}


@pytest.fixture
def make_deployment() -> Callable[..., dict[str, Any]]:
    """Factory for Deployment objects as returned by ``kubectl get -o json``."""
    return _deployment


@pytest.fixture
def make_pod() -> Callable[..., dict[str, Any]]:
    """Factory for Pod objects as returned by ``kubectl get pods -o json``."""
    return _pod


@pytest.fixture
def fake_client() -> MagicMock:
    """KubectlClient double; every async method is an AsyncMock."""
    client = MagicMock(spec=KubectlClient)
    client.get_workload_descriptor.side_effect = lambda name: _deployment(name)
    client.list_instances.return_value = []
    client.list_workload_names.return_value = []
    client.get_events.return_value = []
    client.get_instance_containers.return_value = ["app"]
    client.get_instance_logs.return_value = ""
    client.get_selector_logs.return_value = ""
    client.get_instance_yaml.return_value = "kind: Pod\n"
    client.get_secret.return_value = {"data": {}}
    client.get_config_object.return_value = {"kind": "ConfigMap", "data": {}}
    client.get_release_history.return_value = ""
    client.scale_workload.return_value = None
    client.restart_workload.return_value = None
    client.rollback_release.return_value = None
    return client
