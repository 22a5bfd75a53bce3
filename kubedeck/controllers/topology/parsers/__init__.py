"""Parsers for topology data."""

from kubedeck.controllers.topology.parsers.pod_status import (
    ContainerState,
    PodStatusFields,
    reconcile_fields,
    reconcile_pod_status,
)
from kubedeck.controllers.topology.parsers.resource_discovery import (
    DiscoveredResources,
    build_selector,
    discover_release_name,
    discover_resources,
)

__all__ = [
    "ContainerState",
    "DiscoveredResources",
    "PodStatusFields",
    "build_selector",
    "discover_release_name",
    "discover_resources",
    "reconcile_fields",
    "reconcile_pod_status",
]
