"""Tests for CommandExecutor."""

from __future__ import annotations

from unittest.mock import MagicMock

import pytest

from kubedeck.controllers.commands.executor import CommandExecutor
from kubedeck.controllers.commands.validation import (
    CommandValidationError,
    NoReleaseError,
    RemoteCommandError,
    UnknownCommandError,
)
from kubedeck.controllers.kube.errors import KubeCommandError
from kubedeck.models.cache.state_cache import StateCache
from kubedeck.models.state.targets import TargetSet


@pytest.fixture
def targets() -> TargetSet:
    return TargetSet(["web", "api"])


@pytest.fixture
def state_cache() -> StateCache:
    cache = StateCache()
    cache.merge(selectors={"web": "app=web", "api": "app=api"}, releases={"web": "web-release"})
    return cache


@pytest.fixture
def executor(fake_client: MagicMock, targets: TargetSet, state_cache: StateCache) -> CommandExecutor:
    return CommandExecutor(fake_client, targets, state_cache)


# =============================================================================
# scale / restart
# =============================================================================


class TestScale:
    """Tests for the scale command."""

    @pytest.mark.asyncio
    async def test_scale(self, executor: CommandExecutor, fake_client: MagicMock) -> None:
        result = await executor.execute("scale 3", "web")
        assert result.success
        assert result.refresh
        assert result.message == "Scaled web to 3 replicas"
        fake_client.scale_workload.assert_awaited_once_with("web", 3)

    @pytest.mark.asyncio
    @pytest.mark.parametrize("command", ["scale", "scale 0", "scale -1", "scale two", "scale 1.5"])
    async def test_invalid_replicas_never_call_cluster(
        self, executor: CommandExecutor, fake_client: MagicMock, command: str
    ) -> None:
        result = await executor.execute(command, "web")
        assert not result.success
        assert isinstance(result.error, CommandValidationError)
        fake_client.scale_workload.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_needs_selection(self, executor: CommandExecutor, fake_client: MagicMock) -> None:
        result = await executor.execute("scale 2", None)
        assert result.message == "No deployment selected"
        fake_client.scale_workload.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_remote_failure(self, executor: CommandExecutor, fake_client: MagicMock) -> None:
        fake_client.scale_workload.side_effect = KubeCommandError("deployment 'web' not found")
        result = await executor.execute("scale 2", "web")
        assert not result.success
        assert not result.refresh
        assert isinstance(result.error, RemoteCommandError)
        assert result.message == "Scale failed: deployment 'web' not found"
        fake_client.scale_workload.assert_awaited_once()


class TestRestart:
    """Tests for the restart command."""

    @pytest.mark.asyncio
    async def test_restart(self, executor: CommandExecutor, fake_client: MagicMock) -> None:
        result = await executor.execute(":restart", "api")
        assert result.success
        assert result.refresh
        fake_client.restart_workload.assert_awaited_once_with("api")

    @pytest.mark.asyncio
    async def test_needs_selection(self, executor: CommandExecutor, fake_client: MagicMock) -> None:
        result = await executor.execute("restart", "")
        assert not result.success
        fake_client.restart_workload.assert_not_awaited()


# =============================================================================
# rollback
# =============================================================================


class TestRollback:
    """Tests for the rollback command."""

    @pytest.mark.asyncio
    async def test_rollback(self, executor: CommandExecutor, fake_client: MagicMock) -> None:
        result = await executor.execute("rollback 2", "web", "web-release")
        assert result.success
        assert result.message == "Rolled back web-release to revision 2"
        fake_client.rollback_release.assert_awaited_once_with("web-release", 2)

    @pytest.mark.asyncio
    async def test_no_release(self, executor: CommandExecutor, fake_client: MagicMock) -> None:
        """The missing release is reported before the revision is checked."""
        result = await executor.execute("rollback abc", "api", None)
        assert isinstance(result.error, NoReleaseError)
        assert result.message == "No Helm release associated"
        fake_client.rollback_release.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_invalid_revision(self, executor: CommandExecutor, fake_client: MagicMock) -> None:
        result = await executor.execute("rollback 0", "web", "web-release")
        assert result.message == "Invalid revision: 0"
        fake_client.rollback_release.assert_not_awaited()


# =============================================================================
# add / remove / fetch
# =============================================================================


class TestTargets:
    """Tests for add, remove and fetch."""

    @pytest.mark.asyncio
    async def test_add(self, executor: CommandExecutor, targets: TargetSet) -> None:
        result = await executor.execute("add worker")
        assert result.success
        assert result.refresh
        assert "worker" in targets

    @pytest.mark.asyncio
    async def test_add_duplicate(self, executor: CommandExecutor, targets: TargetSet) -> None:
        result = await executor.execute("add web")
        assert result.success
        assert not result.refresh
        assert targets.snapshot() == ("web", "api")

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        ("command", "message"),
        [("add", "Usage: add <deployment>"), ("add Bad_Name", "Invalid deployment name: Bad_Name")],
    )
    async def test_add_rejected(
        self, executor: CommandExecutor, targets: TargetSet, command: str, message: str
    ) -> None:
        result = await executor.execute(command)
        assert result.message == message
        assert len(targets) == 2

    @pytest.mark.asyncio
    async def test_remove_named(
        self, executor: CommandExecutor, targets: TargetSet, state_cache: StateCache
    ) -> None:
        result = await executor.execute("remove web", "api")
        assert result.success
        assert targets.snapshot() == ("api",)
        assert state_cache.get_selector("web") == ""
        assert state_cache.get_release("web") == ""

    @pytest.mark.asyncio
    async def test_remove_defaults_to_selection(
        self, executor: CommandExecutor, targets: TargetSet
    ) -> None:
        await executor.execute("remove", "api")
        assert targets.snapshot() == ("web",)

    @pytest.mark.asyncio
    async def test_remove_last(self, executor: CommandExecutor, targets: TargetSet) -> None:
        await executor.execute("remove api")
        result = await executor.execute("remove web")
        assert not result.success
        assert result.message == "Cannot remove last deployment web"
        assert targets.snapshot() == ("web",)

    @pytest.mark.asyncio
    async def test_remove_unknown(self, executor: CommandExecutor) -> None:
        result = await executor.execute("remove worker")
        assert isinstance(result.error, CommandValidationError)
        assert result.message == "Deployment worker is not monitored"

    @pytest.mark.asyncio
    async def test_add_then_remove_restores_targets(
        self, executor: CommandExecutor, targets: TargetSet, state_cache: StateCache
    ) -> None:
        """Adding and removing a name leaves the set and caches as they were."""
        await executor.execute("add worker")
        state_cache.merge(selectors={"worker": "app=worker"}, releases={"worker": "w"})
        await executor.execute("remove worker")
        assert targets.snapshot() == ("web", "api")
        assert "worker" not in state_cache.selectors_snapshot()
        assert "worker" not in state_cache.releases_snapshot()

    @pytest.mark.asyncio
    async def test_fetch(self, executor: CommandExecutor) -> None:
        result = await executor.execute("fetch")
        assert result.success
        assert result.refresh
        assert result.message == "Manual Refresh..."


class TestUnknown:
    """Tests for unrecognised input."""

    @pytest.mark.asyncio
    async def test_unknown_verb(self, executor: CommandExecutor) -> None:
        result = await executor.execute("deploy web")
        assert isinstance(result.error, UnknownCommandError)
        assert result.message == "Unknown command: deploy"

    @pytest.mark.asyncio
    async def test_empty(self, executor: CommandExecutor) -> None:
        result = await executor.execute("")
        assert result.message == "Empty command"
