"""Fixtures for running KubeDeckApp headless against a fake cluster."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any
from unittest.mock import MagicMock

import pytest

from kubedeck.app import KubeDeckApp
from kubedeck.models.state.app_settings import AppSettings


@pytest.fixture
def app(fake_client: MagicMock, make_pod: Callable[..., dict[str, Any]]) -> KubeDeckApp:
    """App monitoring ``web`` with one running pod; automatic refresh effectively off."""
    fake_client.list_instances.return_value = [make_pod("web-5d8f-aaaaa")]
    settings = AppSettings(context="dev", namespace="shop", targets=["web"], refresh_interval=600)
    return KubeDeckApp(settings, client=fake_client)
