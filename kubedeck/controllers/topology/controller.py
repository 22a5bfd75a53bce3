"""Topology controller - concurrent discovery of monitored workloads."""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from typing import Any

import yaml

from kubedeck.constants.enums import ItemKind
from kubedeck.constants.values import (
    STATUS_REFERENCE,
    STATUS_RELEASE,
    STATUS_WORKLOAD,
)
from kubedeck.controllers.base import BaseController
from kubedeck.controllers.kube.client import KubectlClient
from kubedeck.controllers.kube.errors import KubeError
from kubedeck.controllers.topology.fetchers import (
    EventFetcher,
    LogFetcher,
    ResourceFetcher,
    WorkloadFetcher,
)
from kubedeck.controllers.topology.parsers import (
    discover_resources,
    reconcile_pod_status,
)
from kubedeck.models.cache.multi_container_cache import MultiContainerCache
from kubedeck.models.core.item import Item, header_name

logger = logging.getLogger(__name__)

WORKLOAD_TAB_DESCRIPTOR = 0
WORKLOAD_TAB_EVENTS = 1
WORKLOAD_TAB_LOGS = 2
INSTANCE_TAB_DESCRIPTOR = 0
INSTANCE_TAB_LOGS = 1

TAB_COUNTS: dict[ItemKind, int] = {
    ItemKind.WORKLOAD: 3,
    ItemKind.INSTANCE: 2,
}


@dataclass(frozen=True)
class FetchResult:
    """Outcome of one refresh pass over every monitored workload.

    Attributes:
        items: Display rows, grouped by workload in sorted name order.
        selectors: Selector cache delta, only entries that changed.
        releases: Release name per successfully fetched workload. An empty
            name means the workload has no release.
        errors: Workload name -> message for workloads that failed.
        warnings: Workload name -> message for non-fatal problems such as
            a failed pod listing.
    """

    items: tuple[Item, ...] = ()
    selectors: dict[str, str] = field(default_factory=dict)
    releases: dict[str, str] = field(default_factory=dict)
    errors: dict[str, str] = field(default_factory=dict)
    warnings: dict[str, str] = field(default_factory=dict)

    @property
    def error(self) -> str | None:
        """First error in workload name order."""
        if not self.errors:
            return None
        name = min(self.errors)
        return f"{name}: {self.errors[name]}"


@dataclass(frozen=True)
class Details:
    """Content for the details pane of the selected row."""

    content: str = ""
    is_structured: bool = False
    language: str = ""
    error: str | None = None


@dataclass
class _TargetOutcome:
    items: list[Item] = field(default_factory=list)
    selector: str = ""
    release: str = ""
    error: str | None = None
    warning: str | None = None


class TopologyController(BaseController):
    """Discovers workloads, their pods and dependent objects."""

    def __init__(
        self,
        client: KubectlClient,
        log_tail_lines: int | None = None,
        workload_log_tail_lines: int | None = None,
    ) -> None:
        self._client = client
        self._workload_fetcher = WorkloadFetcher(client)
        self._event_fetcher = EventFetcher(client)
        self._resource_fetcher = ResourceFetcher(client)
        self._log_fetcher = LogFetcher(client)
        if log_tail_lines is not None:
            self._log_fetcher.tail_lines = log_tail_lines
        if workload_log_tail_lines is not None:
            self._log_fetcher.workload_tail_lines = workload_log_tail_lines

    # ------------------------------------------------------------------
    # Topology
    # ------------------------------------------------------------------

    async def _fetch_target(self, name: str) -> _TargetOutcome:
        try:
            descriptor = await self._workload_fetcher.fetch_descriptor(name)
        except KubeError as e:
            logger.warning("Failed to fetch deployment %s: %s", name, e)
            return _TargetOutcome(
                items=[Item(ItemKind.HEADER, header_name(name, failed=True))],
                error=str(e),
            )

        found = discover_resources(descriptor)
        outcome = _TargetOutcome(selector=found.selector, release=found.release_name)
        outcome.items.append(Item(ItemKind.HEADER, header_name(name)))
        outcome.items.append(Item(ItemKind.WORKLOAD, name, STATUS_WORKLOAD))
        if found.release_name:
            outcome.items.append(Item(ItemKind.RELEASE, found.release_name, STATUS_RELEASE))
        outcome.items.extend(Item(ItemKind.SECRET, s, STATUS_REFERENCE) for s in found.secrets)
        outcome.items.extend(
            Item(ItemKind.CONFIG, c, STATUS_REFERENCE) for c in found.config_objects
        )

        if found.selector:
            try:
                pods = await self._workload_fetcher.fetch_instances(found.selector)
            except KubeError as e:
                logger.warning("Failed to list pods for %s: %s", name, e)
                outcome.warning = str(e)
            else:
                outcome.items.extend(
                    Item(
                        ItemKind.INSTANCE,
                        (pod.get("metadata") or {}).get("name") or "",
                        reconcile_pod_status(pod),
                    )
                    for pod in pods
                )
        return outcome

    async def fetch_all(
        self,
        targets: Iterable[str],
        selector_hint: Mapping[str, str] | None = None,
    ) -> FetchResult:
        """Fetch every target concurrently and merge the results.

        Args:
            targets: Snapshot of monitored workload names.
            selector_hint: Read-only snapshot of the selector cache, used to
                emit only selectors that changed.

        Returns:
            A FetchResult whose item order depends only on the target names,
            never on which fetch finished first.
        """
        names = sorted(set(targets))
        hint = dict(selector_hint or {})
        gathered = await asyncio.gather(
            *(self._fetch_target(name) for name in names), return_exceptions=True
        )

        items: list[Item] = []
        selectors: dict[str, str] = {}
        releases: dict[str, str] = {}
        errors: dict[str, str] = {}
        warnings: dict[str, str] = {}
        for name, outcome in zip(names, gathered):
            if isinstance(outcome, BaseException):
                if not isinstance(outcome, Exception):
                    raise outcome
                logger.error("Unexpected failure fetching %s: %s", name, outcome)
                outcome = _TargetOutcome(
                    items=[Item(ItemKind.HEADER, header_name(name, failed=True))],
                    error=str(outcome) or type(outcome).__name__,
                )
            items.extend(outcome.items)
            if outcome.error is not None:
                errors[name] = outcome.error
                continue
            if outcome.warning is not None:
                warnings[name] = outcome.warning
            if outcome.selector and outcome.selector != hint.get(name):
                selectors[name] = outcome.selector
            releases[name] = outcome.release

        logger.debug(
            "Fetched %d targets: %d items, %d errors", len(names), len(items), len(errors)
        )
        return FetchResult(
            items=tuple(items),
            selectors=selectors,
            releases=releases,
            errors=errors,
            warnings=warnings,
        )

    async def list_workload_names(self, exclude: Iterable[str] = ()) -> list[str]:
        """Deployment names for add-target suggestions; empty on failure."""
        excluded = set(exclude)
        try:
            names = await self._workload_fetcher.fetch_workload_names()
        except KubeError as e:
            logger.warning("Failed to list deployments: %s", e)
            return []
        return [name for name in names if name not in excluded]

    # ------------------------------------------------------------------
    # Details
    # ------------------------------------------------------------------

    @staticmethod
    def _to_yaml(data: Any) -> str:
        return yaml.safe_dump(data, sort_keys=False, default_flow_style=False)

    async def _workload_details(
        self, name: str, tab: int, selectors: Mapping[str, str]
    ) -> Details:
        if tab == WORKLOAD_TAB_EVENTS:
            return Details(content=await self._event_fetcher.fetch_events_table(name))
        if tab == WORKLOAD_TAB_LOGS:
            selector = selectors.get(name, "")
            if not selector:
                return Details(error=f"No label selector found for workload {name}")
            return Details(content=await self._log_fetcher.fetch_selector_logs(selector))
        descriptor = await self._workload_fetcher.fetch_descriptor(name)
        return Details(content=self._to_yaml(descriptor), is_structured=True, language="yaml")

    async def _instance_details(
        self, name: str, tab: int, multi_container_cache: MultiContainerCache
    ) -> Details:
        if tab == INSTANCE_TAB_LOGS:
            logs = await self._log_fetcher.fetch_instance_logs(name, multi_container_cache)
            return Details(content=logs)
        return Details(
            content=await self._client.get_instance_yaml(name),
            is_structured=True,
            language="yaml",
        )

    async def fetch_details(
        self,
        item: Item,
        tab: int,
        selectors: Mapping[str, str],
        multi_container_cache: MultiContainerCache,
    ) -> Details:
        """Load the details pane content for ``item`` on ``tab``.

        Remote failures are returned in ``Details.error`` rather than raised.
        """
        try:
            if item.kind is ItemKind.HEADER:
                return Details(content=f"Service Group: {item.name}")
            if item.kind is ItemKind.WORKLOAD:
                return await self._workload_details(item.name, tab, selectors)
            if item.kind is ItemKind.INSTANCE:
                return await self._instance_details(item.name, tab, multi_container_cache)
            if item.kind is ItemKind.SECRET:
                content = await self._resource_fetcher.fetch_secret_json(item.name)
                return Details(content=content, is_structured=True, language="json")
            if item.kind is ItemKind.CONFIG:
                content = await self._resource_fetcher.fetch_config_object_yaml(item.name)
                return Details(content=content, is_structured=True, language="yaml")
            if item.kind is ItemKind.RELEASE:
                return Details(
                    content=await self._resource_fetcher.fetch_release_history(item.name)
                )
        except KubeError as e:
            logger.warning("Failed to load details for %s %s: %s", item.type_code, item.name, e)
            return Details(error=str(e))
        return Details(error=f"No details for {item.type_code} {item.name}")
