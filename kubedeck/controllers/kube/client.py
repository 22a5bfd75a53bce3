"""kubectl/helm collaborator.

Every call shells out to the CLI in a worker thread so the Textual event
loop stays responsive, and is scoped to the session's context and namespace.
"""

from __future__ import annotations

import asyncio
import json
import logging
import subprocess
from typing import Any

from kubedeck.constants.limits import DEFAULT_LOG_TAIL_LINES, WORKLOAD_LOG_TAIL_LINES
from kubedeck.constants.timeouts import MUTATING_COMMAND_TIMEOUT, READ_COMMAND_TIMEOUT
from kubedeck.controllers.kube.errors import (
    KubeCommandError,
    KubeTimeoutError,
    humanize_error,
)
from kubedeck.models.state.session import Session

logger = logging.getLogger(__name__)


class KubectlClient:
    """Async wrapper around the ``kubectl`` and ``helm`` binaries."""

    def __init__(
        self,
        session: Session,
        read_timeout: float = READ_COMMAND_TIMEOUT,
        command_timeout: float = MUTATING_COMMAND_TIMEOUT,
    ) -> None:
        self.session = session
        self.read_timeout = read_timeout
        self.command_timeout = command_timeout

    # ------------------------------------------------------------------
    # Runners
    # ------------------------------------------------------------------

    def _build_command(self, binary: str, args: tuple[str, ...]) -> list[str]:
        cmd = [binary, *args, "-n", self.session.namespace]
        if self.session.context:
            flag = "--kube-context" if binary == "helm" else "--context"
            cmd.extend([flag, self.session.context])
        return cmd

    def _run_sync(
        self,
        binary: str,
        args: tuple[str, ...],
        timeout: float,
        resource: str,
        name: str,
    ) -> str:
        """Run a CLI command synchronously (thread-safe wrapper target)."""
        cmd = self._build_command(binary, args)
        try:
            result = subprocess.run(
                cmd, capture_output=True, text=True, timeout=timeout
            )
        except subprocess.TimeoutExpired as e:
            raise KubeTimeoutError(f"{binary} {args[0]}", timeout) from e
        except OSError as e:
            raise KubeCommandError(f"{binary} is not available: {e}") from e
        if result.returncode != 0:
            stderr = (result.stderr or "").strip()
            raise KubeCommandError(humanize_error(stderr, resource, name), stderr)
        return result.stdout

    async def _run(
        self,
        binary: str,
        args: tuple[str, ...],
        *,
        timeout: float,
        resource: str,
        name: str,
    ) -> str:
        logger.debug("Running %s %s", binary, " ".join(args))
        try:
            return await asyncio.to_thread(
                self._run_sync, binary, args, timeout, resource, name
            )
        except asyncio.TimeoutError as e:
            raise KubeTimeoutError(f"{binary} {args[0]}", timeout) from e

    async def _run_kubectl(
        self, args: tuple[str, ...], *, resource: str, name: str, timeout: float | None = None
    ) -> str:
        return await self._run(
            "kubectl",
            args,
            timeout=timeout if timeout is not None else self.read_timeout,
            resource=resource,
            name=name,
        )

    async def _run_helm(
        self, args: tuple[str, ...], *, name: str, timeout: float | None = None
    ) -> str:
        return await self._run(
            "helm",
            args,
            timeout=timeout if timeout is not None else self.read_timeout,
            resource="release",
            name=name,
        )

    @staticmethod
    def _parse_json(output: str, resource: str, name: str) -> dict[str, Any]:
        try:
            data = json.loads(output)
        except json.JSONDecodeError as e:
            raise KubeCommandError(f"Unreadable {resource} '{name}' response: {e}") from e
        if not isinstance(data, dict):
            raise KubeCommandError(f"Unexpected {resource} '{name}' response")
        return data

    # ------------------------------------------------------------------
    # Workloads
    # ------------------------------------------------------------------

    async def get_workload_descriptor(self, name: str) -> dict[str, Any]:
        output = await self._run_kubectl(
            ("get", "deployment", name, "-o", "json"), resource="deployment", name=name
        )
        return self._parse_json(output, "deployment", name)

    async def list_workload_names(self) -> list[str]:
        output = await self._run_kubectl(
            ("get", "deployments", "-o", "jsonpath={.items[*].metadata.name}"),
            resource="deployments",
            name=self.session.namespace,
        )
        return output.split()

    async def scale_workload(self, name: str, replicas: int) -> None:
        logger.info("Scaling deployment %s to %d replicas", name, replicas)
        await self._run_kubectl(
            ("scale", "deployment", name, f"--replicas={replicas}"),
            resource="deployment",
            name=name,
            timeout=self.command_timeout,
        )

    async def restart_workload(self, name: str) -> None:
        logger.info("Restarting deployment %s", name)
        await self._run_kubectl(
            ("rollout", "restart", "deployment", name),
            resource="deployment",
            name=name,
            timeout=self.command_timeout,
        )

    # ------------------------------------------------------------------
    # Instances
    # ------------------------------------------------------------------

    async def list_instances(self, selector: str) -> list[dict[str, Any]]:
        output = await self._run_kubectl(
            ("get", "pods", "-l", selector, "-o", "json"), resource="pods", name=selector
        )
        items = self._parse_json(output, "pods", selector).get("items") or []
        return [pod for pod in items if isinstance(pod, dict)]

    async def get_instance_containers(self, pod: str) -> list[str]:
        output = await self._run_kubectl(
            ("get", "pod", pod, "-o", "jsonpath={.spec.containers[*].name}"),
            resource="pod",
            name=pod,
        )
        return output.split()

    async def get_instance_yaml(self, pod: str) -> str:
        return await self._run_kubectl(
            ("get", "pod", pod, "-o", "yaml"), resource="pod", name=pod
        )

    async def get_instance_logs(
        self,
        pod: str,
        tail_lines: int = DEFAULT_LOG_TAIL_LINES,
        prefix: bool = False,
    ) -> str:
        args = ["logs", pod, f"--tail={tail_lines}", "--all-containers=true"]
        if prefix:
            args.append("--prefix")
        return await self._run_kubectl(
            tuple(args), resource="pod", name=pod, timeout=self.command_timeout
        )

    async def get_selector_logs(
        self, selector: str, tail_lines: int = WORKLOAD_LOG_TAIL_LINES
    ) -> str:
        return await self._run_kubectl(
            (
                "logs",
                "-l",
                selector,
                "--all-containers=true",
                "--prefix",
                f"--tail={tail_lines}",
            ),
            resource="pods",
            name=selector,
            timeout=self.command_timeout,
        )

    # ------------------------------------------------------------------
    # Secrets and config maps
    # ------------------------------------------------------------------

    async def get_secret(self, name: str) -> dict[str, Any]:
        output = await self._run_kubectl(
            ("get", "secret", name, "-o", "json"), resource="secret", name=name
        )
        return self._parse_json(output, "secret", name)

    async def get_config_object(self, name: str) -> dict[str, Any]:
        output = await self._run_kubectl(
            ("get", "configmap", name, "-o", "json"), resource="configmap", name=name
        )
        return self._parse_json(output, "configmap", name)

    # ------------------------------------------------------------------
    # Events
    # ------------------------------------------------------------------

    async def get_events(self) -> list[dict[str, Any]]:
        output = await self._run_kubectl(
            ("get", "events", "--sort-by=.lastTimestamp", "-o", "json"),
            resource="events",
            name=self.session.namespace,
        )
        items = self._parse_json(output, "events", self.session.namespace).get("items") or []
        return [event for event in items if isinstance(event, dict)]

    # ------------------------------------------------------------------
    # Helm
    # ------------------------------------------------------------------

    async def get_release_history(self, release: str) -> str:
        return await self._run_helm(("history", release), name=release)

    async def rollback_release(self, release: str, revision: int) -> None:
        logger.info("Rolling back release %s to revision %d", release, revision)
        await self._run_helm(
            ("rollback", release, str(revision)),
            name=release,
            timeout=self.command_timeout,
        )
