"""In-memory runtime client returning scripted results."""

import asyncio
from typing import Dict, Iterable, List, Optional

from ..models.container import Container, Stats
from .exceptions import ContainerNotFoundError
from .runtime_client import RuntimeClient


class FakeRuntimeClient(RuntimeClient):
    """Deterministic runtime for exercising operators without a daemon.

    Containers are kept in insertion order. Setting one of ``fail_list``,
    ``fail_stats`` or ``fail_kill`` to an exception makes the matching call
    raise it; ``delay`` is awaited before every call.
    """

    def __init__(
        self,
        containers: Optional[Iterable[Container]] = None,
        stats: Optional[Dict[str, Stats]] = None,
        delay: float = 0,
    ):
        self.containers: List[Container] = list(containers or [])
        self.stats: Dict[str, Stats] = dict(stats or {})
        self.delay = delay
        self.fail_list: Optional[Exception] = None
        self.fail_stats: Optional[Exception] = None
        self.fail_kill: Optional[Exception] = None
        self.calls: List[tuple] = []

    def add(self, *containers: Container) -> None:
        """Make containers live."""
        self.containers.extend(containers)

    def remove(self, container_id: str) -> None:
        """Remove a container from the live set."""
        self.containers = [c for c in self.containers if c.id != container_id]

    def _get(self, container_id: str) -> Container:
        for container in self.containers:
            if container.id == container_id:
                return container
        raise ContainerNotFoundError(f"Container '{container_id}' not found")

    async def _call(self, name: str, *args) -> None:
        self.calls.append((name,) + args)
        if self.delay:
            await asyncio.sleep(self.delay)

    async def list_containers(self) -> List[Container]:
        await self._call("list")
        if self.fail_list is not None:
            raise self.fail_list
        return list(self.containers)

    async def container_stats(self, container_id: str) -> Stats:
        await self._call("stats", container_id)
        if self.fail_stats is not None:
            raise self.fail_stats
        self._get(container_id)
        return self.stats.get(container_id, Stats())

    async def kill_container(self, container_id: str) -> None:
        await self._call("kill", container_id)
        if self.fail_kill is not None:
            raise self.fail_kill
        self._get(container_id)
        self.remove(container_id)
