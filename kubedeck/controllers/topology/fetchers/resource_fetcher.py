"""Resource fetcher for topology controller - secrets, config maps and releases."""

from __future__ import annotations

import base64
import binascii
import json
import logging
from typing import Any

import yaml

from kubedeck.controllers.kube.client import KubectlClient

logger = logging.getLogger(__name__)


class ResourceFetcher:
    """Fetches the objects a workload depends on, ready for display."""

    def __init__(self, client: KubectlClient) -> None:
        self._client = client

    @staticmethod
    def decode_secret_data(secret: dict[str, Any]) -> dict[str, str]:
        """Base64-decode every value of a Secret's ``data`` map.

        Values that are not valid base64 or UTF-8 are shown undecoded.
        """
        decoded: dict[str, str] = {}
        for key, value in (secret.get("data") or {}).items():
            try:
                decoded[key] = base64.b64decode(value, validate=True).decode("utf-8")
            except (binascii.Error, UnicodeDecodeError, TypeError, ValueError):
                decoded[key] = str(value)
        return decoded

    async def fetch_secret_json(self, name: str) -> str:
        secret = await self._client.get_secret(name)
        return json.dumps(self.decode_secret_data(secret), indent=2, sort_keys=True)

    async def fetch_config_object_yaml(self, name: str) -> str:
        config_map = await self._client.get_config_object(name)
        return yaml.safe_dump(config_map, sort_keys=False, default_flow_style=False)

    async def fetch_release_history(self, release: str) -> str:
        return await self._client.get_release_history(release)
