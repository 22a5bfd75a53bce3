"""Fetchers for topology data."""

from kubedeck.controllers.topology.fetchers.event_fetcher import EventFetcher
from kubedeck.controllers.topology.fetchers.log_fetcher import LogFetcher
from kubedeck.controllers.topology.fetchers.resource_fetcher import ResourceFetcher
from kubedeck.controllers.topology.fetchers.workload_fetcher import WorkloadFetcher

__all__ = ["EventFetcher", "LogFetcher", "ResourceFetcher", "WorkloadFetcher"]
