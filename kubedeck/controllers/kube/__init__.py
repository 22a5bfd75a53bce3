"""Cluster access through the kubectl and helm CLIs."""

from kubedeck.controllers.kube.client import KubectlClient
from kubedeck.controllers.kube.errors import (
    KubeCommandError,
    KubeError,
    KubeTimeoutError,
)

__all__ = ["KubeCommandError", "KubeError", "KubeTimeoutError", "KubectlClient"]
