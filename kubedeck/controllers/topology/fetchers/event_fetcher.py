"""Event fetcher for topology controller - namespace events for one workload."""

from __future__ import annotations

import logging
from typing import Any

from kubedeck.controllers.kube.client import KubectlClient

logger = logging.getLogger(__name__)

NO_EVENTS_MESSAGE = "No recent events found."

_ROW_FORMAT = "{:<25} {:<10} {:<15} {}"


class EventFetcher:
    """Fetches events and renders the ones touching a workload as a table."""

    def __init__(self, client: KubectlClient) -> None:
        self._client = client

    @staticmethod
    def _event_timestamp(event: dict[str, Any]) -> str:
        return event.get("lastTimestamp") or event.get("eventTime") or ""

    @staticmethod
    def filter_events(events: list[dict[str, Any]], name: str) -> list[dict[str, Any]]:
        """Keep events whose involved object name contains ``name``.

        Substring matching also catches the workload's ReplicaSets and Pods.
        """
        return [
            event
            for event in events
            if name in ((event.get("involvedObject") or {}).get("name") or "")
        ]

    @classmethod
    def format_events(cls, events: list[dict[str, Any]]) -> str:
        if not events:
            return NO_EVENTS_MESSAGE
        rows = [_ROW_FORMAT.format("TIMESTAMP", "TYPE", "REASON", "MESSAGE")]
        rows.extend(
            _ROW_FORMAT.format(
                cls._event_timestamp(event),
                event.get("type") or "",
                event.get("reason") or "",
                (event.get("message") or "").strip(),
            )
            for event in events
        )
        return "\n".join(rows)

    async def fetch_events_table(self, name: str) -> str:
        events = await self._client.get_events()
        matching = self.filter_events(events, name)
        logger.debug("%d of %d events match %s", len(matching), len(events), name)
        return self.format_events(matching)
