"""Workload fetcher for topology controller - descriptors, pods and names."""

from __future__ import annotations

import logging
from typing import Any

from kubedeck.controllers.kube.client import KubectlClient

logger = logging.getLogger(__name__)


class WorkloadFetcher:
    """Fetches Deployment and Pod data for monitored workloads."""

    def __init__(self, client: KubectlClient) -> None:
        self._client = client

    async def fetch_descriptor(self, name: str) -> dict[str, Any]:
        return await self._client.get_workload_descriptor(name)

    async def fetch_instances(self, selector: str) -> list[dict[str, Any]]:
        return await self._client.list_instances(selector)

    async def fetch_workload_names(self) -> list[str]:
        """List every Deployment in the namespace, sorted."""
        return sorted(await self._client.list_workload_names())
