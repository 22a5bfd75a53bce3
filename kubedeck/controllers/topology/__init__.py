"""Topology controller module."""

from kubedeck.controllers.topology.controller import (
    TAB_COUNTS,
    Details,
    FetchResult,
    TopologyController,
)

__all__ = ["TAB_COUNTS", "Details", "FetchResult", "TopologyController"]
