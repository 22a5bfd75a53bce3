"""Cluster session model."""

from __future__ import annotations

from dataclasses import dataclass

from kubedeck.constants.defaults import NAMESPACE_DEFAULT


@dataclass(frozen=True)
class Session:
    """Kube context and namespace every remote call is scoped to."""

    context: str | None = None
    namespace: str = NAMESPACE_DEFAULT
