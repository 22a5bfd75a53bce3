"""Dependent-object discovery from a Deployment descriptor."""

from __future__ import annotations

import json
import logging
from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from typing import Any

from kubedeck.constants.values import (
    RELEASE_ANNOTATION_KEY,
    RELEASE_FALLBACK_LABEL_KEY,
    RELEASE_LABEL_KEY,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DiscoveredResources:
    """Everything a workload descriptor says about its surroundings."""

    release_name: str = ""
    secrets: tuple[str, ...] = field(default_factory=tuple)
    config_objects: tuple[str, ...] = field(default_factory=tuple)
    selector: str = ""


def _mapping(value: Any) -> Mapping[str, Any]:
    return value if isinstance(value, Mapping) else {}


def _sequence(value: Any) -> list[Any]:
    return value if isinstance(value, list) else []


def _name_at(source: Mapping[str, Any], *path: str) -> str:
    node: Any = source
    for key in path:
        node = _mapping(node).get(key)
    return node.strip() if isinstance(node, str) else ""


def _append_unique(names: list[str], name: str) -> None:
    if name and name not in names:
        names.append(name)


class _Collector:
    """Accumulates de-duplicated secret and config map names in first-seen order."""

    def __init__(self) -> None:
        self.secrets: list[str] = []
        self.config_objects: list[str] = []

    def scan_containers(self, containers: Iterable[Any]) -> None:
        for container in containers:
            container = _mapping(container)
            for source in _sequence(container.get("envFrom")):
                source = _mapping(source)
                _append_unique(self.secrets, _name_at(source, "secretRef", "name"))
                _append_unique(self.config_objects, _name_at(source, "configMapRef", "name"))
            for env in _sequence(container.get("env")):
                value_from = _mapping(_mapping(env).get("valueFrom"))
                _append_unique(self.secrets, _name_at(value_from, "secretKeyRef", "name"))
                _append_unique(
                    self.config_objects, _name_at(value_from, "configMapKeyRef", "name")
                )

    def scan_volumes(self, volumes: Iterable[Any]) -> None:
        for volume in volumes:
            volume = _mapping(volume)
            _append_unique(self.secrets, _name_at(volume, "secret", "secretName"))
            _append_unique(self.config_objects, _name_at(volume, "configMap", "name"))
            projected = _mapping(volume.get("projected"))
            for source in _sequence(projected.get("sources")):
                source = _mapping(source)
                _append_unique(self.secrets, _name_at(source, "secret", "name"))
                _append_unique(self.config_objects, _name_at(source, "configMap", "name"))


def discover_release_name(metadata: Mapping[str, Any]) -> str:
    """Resolve the Helm release name; annotation first, then labels."""
    annotations = _mapping(metadata.get("annotations"))
    labels = _mapping(metadata.get("labels"))
    for candidates, key in (
        (annotations, RELEASE_ANNOTATION_KEY),
        (labels, RELEASE_LABEL_KEY),
        (labels, RELEASE_FALLBACK_LABEL_KEY),
    ):
        value = candidates.get(key)
        if isinstance(value, str) and value.strip():
            return value.strip()
    return ""


def build_selector(match_labels: Mapping[str, Any]) -> str:
    """Render ``matchLabels`` as ``k=v`` pairs sorted by key."""
    return ",".join(f"{key}={match_labels[key]}" for key in sorted(match_labels))


def discover_resources(descriptor: Mapping[str, Any] | str | bytes) -> DiscoveredResources:
    """Extract release, secrets, config maps and pod selector from a Deployment.

    Args:
        descriptor: Parsed Deployment object, or its JSON text.

    Returns:
        The discovered resources. An unparseable descriptor yields an empty
        result rather than a partial one.
    """
    if isinstance(descriptor, (str, bytes)):
        try:
            descriptor = json.loads(descriptor)
        except ValueError:
            logger.debug("Workload descriptor is not valid JSON")
            return DiscoveredResources()
    if not isinstance(descriptor, Mapping):
        return DiscoveredResources()

    spec = _mapping(descriptor.get("spec"))
    pod_spec = _mapping(_mapping(spec.get("template")).get("spec"))

    collector = _Collector()
    collector.scan_containers(_sequence(pod_spec.get("initContainers")))
    collector.scan_containers(_sequence(pod_spec.get("containers")))
    collector.scan_volumes(_sequence(pod_spec.get("volumes")))

    return DiscoveredResources(
        release_name=discover_release_name(_mapping(descriptor.get("metadata"))),
        secrets=tuple(collector.secrets),
        config_objects=tuple(collector.config_objects),
        selector=build_selector(_mapping(_mapping(spec.get("selector")).get("matchLabels"))),
    )
