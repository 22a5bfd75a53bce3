"""Command executor - validates and runs console commands."""

from __future__ import annotations

import logging
from collections.abc import Awaitable, Callable
from dataclasses import dataclass

from kubedeck.constants.enums import CommandVerb
from kubedeck.controllers.commands.validation import (
    CommandError,
    CommandValidationError,
    NoReleaseError,
    ParsedCommand,
    RemoteCommandError,
    UnknownCommandError,
    is_valid_k8s_name,
    parse_command,
    require_positive_integer,
    require_workload,
)
from kubedeck.controllers.kube.client import KubectlClient
from kubedeck.controllers.kube.errors import KubeError
from kubedeck.models.cache.state_cache import StateCache
from kubedeck.models.state.targets import TargetError, TargetSet

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CommandResult:
    """Outcome of a single command.

    ``refresh`` asks the caller to run a new fetch pass.
    """

    success: bool
    refresh: bool = False
    message: str = ""
    error: CommandError | None = None

    @classmethod
    def failed(cls, error: CommandError) -> CommandResult:
        return cls(success=False, message=str(error), error=error)


class CommandExecutor:
    """Runs ``scale``, ``restart``, ``rollback``, ``add``, ``remove`` and ``fetch``.

    All validation completes before any remote call, so a rejected command
    never touches the cluster. Remote failures are not retried.
    """

    def __init__(
        self,
        client: KubectlClient,
        targets: TargetSet,
        state_cache: StateCache,
    ) -> None:
        self._client = client
        self._targets = targets
        self._state_cache = state_cache
        self._handlers: dict[
            str, Callable[[ParsedCommand, str | None, str | None], Awaitable[CommandResult]]
        ] = {
            CommandVerb.SCALE.value: self._scale,
            CommandVerb.RESTART.value: self._restart,
            CommandVerb.ROLLBACK.value: self._rollback,
            CommandVerb.ADD.value: self._add,
            CommandVerb.REMOVE.value: self._remove,
            CommandVerb.FETCH.value: self._fetch,
        }

    async def execute(
        self,
        command: str,
        workload: str | None = None,
        release: str | None = None,
    ) -> CommandResult:
        """Validate and run ``command`` against the selected workload.

        Args:
            command: Raw command input, e.g. ``"scale 3"``.
            workload: Workload owning the current selection.
            release: Cached Helm release of that workload, if any.

        Returns:
            A CommandResult. Failures carry a typed ``error`` instead of
            raising.
        """
        parsed = parse_command(command)
        handler = self._handlers.get(parsed.verb)
        try:
            if handler is None:
                raise UnknownCommandError(parsed.verb)
            return await handler(parsed, workload, release)
        except CommandError as e:
            logger.info("Command %r rejected: %s", command, e)
            return CommandResult.failed(e)

    async def _remote(self, action: str, call: Awaitable[None]) -> None:
        try:
            await call
        except KubeError as e:
            raise RemoteCommandError(action, e) from e

    async def _scale(
        self, parsed: ParsedCommand, workload: str | None, release: str | None
    ) -> CommandResult:
        replicas = require_positive_integer(
            parsed.argument, "replica count", "scale <replicas>"
        )
        name = require_workload(workload)
        await self._remote("Scale", self._client.scale_workload(name, replicas))
        return CommandResult(
            success=True, refresh=True, message=f"Scaled {name} to {replicas} replicas"
        )

    async def _restart(
        self, parsed: ParsedCommand, workload: str | None, release: str | None
    ) -> CommandResult:
        name = require_workload(workload)
        await self._remote("Restart", self._client.restart_workload(name))
        return CommandResult(success=True, refresh=True, message=f"Restarted {name}")

    async def _rollback(
        self, parsed: ParsedCommand, workload: str | None, release: str | None
    ) -> CommandResult:
        if not release:
            raise NoReleaseError()
        revision = require_positive_integer(
            parsed.argument, "revision", "rollback <revision>"
        )
        await self._remote("Rollback", self._client.rollback_release(release, revision))
        return CommandResult(
            success=True,
            refresh=True,
            message=f"Rolled back {release} to revision {revision}",
        )

    async def _add(
        self, parsed: ParsedCommand, workload: str | None, release: str | None
    ) -> CommandResult:
        name = parsed.argument
        if not name:
            raise CommandValidationError("Usage: add <deployment>")
        if not is_valid_k8s_name(name):
            raise CommandValidationError(f"Invalid deployment name: {name}")
        if not self._targets.add(name):
            return CommandResult(success=True, message=f"{name} is already monitored")
        logger.info("Monitoring deployment %s", name)
        return CommandResult(success=True, refresh=True, message=f"Added {name}")

    async def _remove(
        self, parsed: ParsedCommand, workload: str | None, release: str | None
    ) -> CommandResult:
        name = parsed.argument or require_workload(workload)
        try:
            self._targets.remove(name)
        except TargetError as e:
            raise CommandValidationError(str(e)) from e
        self._state_cache.purge(name)
        logger.info("Stopped monitoring deployment %s", name)
        return CommandResult(success=True, refresh=True, message=f"Removed {name}")

    async def _fetch(
        self, parsed: ParsedCommand, workload: str | None, release: str | None
    ) -> CommandResult:
        return CommandResult(success=True, refresh=True, message="Manual Refresh...")
