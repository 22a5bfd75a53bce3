"""Log fetcher for topology controller - pod and workload-aggregate logs."""

from __future__ import annotations

import logging

from kubedeck.constants.limits import DEFAULT_LOG_TAIL_LINES, WORKLOAD_LOG_TAIL_LINES
from kubedeck.controllers.kube.client import KubectlClient
from kubedeck.controllers.kube.errors import KubeError
from kubedeck.models.cache.multi_container_cache import MultiContainerCache

logger = logging.getLogger(__name__)


class LogFetcher:
    """Fetches logs, adding source prefixes only where they disambiguate."""

    def __init__(
        self,
        client: KubectlClient,
        tail_lines: int = DEFAULT_LOG_TAIL_LINES,
        workload_tail_lines: int = WORKLOAD_LOG_TAIL_LINES,
    ) -> None:
        self._client = client
        self.tail_lines = tail_lines
        self.workload_tail_lines = workload_tail_lines

    async def is_multi_container(self, pod: str, cache: MultiContainerCache) -> bool:
        """Whether ``pod`` runs several containers, memoized in ``cache``.

        The cache lock is not held during the kubectl call. A failed
        lookup is treated as single-container and not memoized.
        """
        cached = cache.get(pod)
        if cached is not None:
            return cached
        try:
            containers = await self._client.get_instance_containers(pod)
        except KubeError as e:
            logger.debug("Container lookup for %s failed: %s", pod, e)
            return False
        multi = len(containers) > 1
        cache.set(pod, multi)
        return multi

    async def fetch_instance_logs(self, pod: str, cache: MultiContainerCache) -> str:
        prefix = await self.is_multi_container(pod, cache)
        return await self._client.get_instance_logs(pod, self.tail_lines, prefix=prefix)

    async def fetch_selector_logs(self, selector: str) -> str:
        return await self._client.get_selector_logs(selector, self.workload_tail_lines)
