"""Controllers for KubeDeck data access and commands."""

from kubedeck.controllers.commands import CommandExecutor, CommandResult
from kubedeck.controllers.kube import KubectlClient
from kubedeck.controllers.topology import Details, FetchResult, TopologyController

__all__ = [
    "CommandExecutor",
    "CommandResult",
    "Details",
    "FetchResult",
    "KubectlClient",
    "TopologyController",
]
