"""Docker backend for the runtime client capability set."""

import asyncio
import functools
import logging
from typing import Any, Callable, Optional

import docker
import docker.errors

from ..core.constants import BYTES_PER_MB, NANOSECONDS_PER_SECOND
from ..models.config import RuntimeConfig
from ..models.container import Container, Stats
from .exceptions import RuntimeClientError
from .runtime_client import RuntimeClient

logger = logging.getLogger(__name__)


class DockerRuntimeClient(RuntimeClient):
    """Runtime client talking to a Docker daemon through docker-py."""

    def __init__(self, config: Optional[RuntimeConfig] = None, client: Any = None):
        """Initialize Docker client and test connection.

        Args:
            config: Connection settings; defaults to the docker environment
            client: Pre-built docker client, mainly for tests

        Raises:
            RuntimeClientError: If the daemon cannot be reached
        """
        self.config = config or RuntimeConfig()
        try:
            self.client = client or self._create_client()
            self.client.ping()
        except docker.errors.DockerException as e:
            if "connection refused" in str(e).lower() or "cannot connect" in str(e).lower():
                raise RuntimeClientError(
                    "Docker daemon is not running. Please start Docker Desktop or the Docker service."
                ) from e
            else:
                raise RuntimeClientError(f"Failed to connect to Docker: {e}") from e

    def _create_client(self):
        if self.config.base_url:
            return docker.DockerClient(base_url=self.config.base_url, timeout=self.config.timeout)
        return docker.from_env(timeout=self.config.timeout)

    async def _run(self, func: Callable[..., Any], *args, **kwargs) -> Any:
        # docker-py blocks; run it off the loop so cancellation is prompt
        loop = asyncio.get_running_loop()
        return await loop.run_in_executor(None, functools.partial(func, *args, **kwargs))

    async def list_containers(self) -> list[Container]:
        """List containers as reported by `docker ps`.

        Returns:
            Containers with their full IDs and names

        Raises:
            docker.errors.APIError: If the daemon rejects the request
        """
        raw = await self._run(self.client.containers.list, all=self.config.list_all, sparse=True)
        containers = [
            Container(id=c.attrs.get("Id", c.id), names=c.attrs.get("Names") or [])
            for c in raw
        ]
        logger.debug(f"Docker reported {len(containers)} container(s)")
        return containers

    async def container_stats(self, container_id: str) -> Stats:
        """Get the resident memory and total CPU time of a container.

        Args:
            container_id: Container ID or name

        Returns:
            Stats snapshot

        Raises:
            docker.errors.NotFound: If container not found
            docker.errors.APIError: If the stats request fails
        """
        raw = await self._run(self._read_stats, container_id)
        return stats_from_docker(raw)

    def _read_stats(self, container_id: str) -> dict[str, Any]:
        container = self.client.containers.get(container_id)
        return container.stats(stream=False)

    async def kill_container(self, container_id: str) -> None:
        """Kill a container.

        Args:
            container_id: Container ID or name

        Raises:
            docker.errors.NotFound: If container not found
            docker.errors.APIError: If the kill fails
        """
        await self._run(self._kill, container_id)

    def _kill(self, container_id: str) -> None:
        self.client.containers.get(container_id).kill()


def stats_from_docker(raw: dict[str, Any]) -> Stats:
    """Convert a docker stats document into a Stats snapshot."""
    memory_stats = raw.get("memory_stats") or {}
    detail = memory_stats.get("stats") or {}
    if "rss" in detail:
        resident = detail["rss"]
    else:
        # cgroup v2 has no rss; subtract the page cache from usage instead
        cache = detail.get("cache", detail.get("inactive_file", 0))
        resident = max(memory_stats.get("usage", 0) - cache, 0)

    cpu_usage = (raw.get("cpu_stats") or {}).get("cpu_usage") or {}
    total_usage = cpu_usage.get("total_usage", 0)

    return Stats(
        memory_mb=int(resident // BYTES_PER_MB),
        cpu_sec=int(total_usage // NANOSECONDS_PER_SECOND),
    )
