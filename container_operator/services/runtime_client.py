"""Capability set every container runtime backend provides."""

from abc import ABC, abstractmethod
from typing import List

from ..models.container import Container, Stats


class RuntimeClient(ABC):
    """Queries and controls the containers of one runtime.

    Implementations are coroutines so an operator can abandon an in-flight
    call when its task is cancelled.
    """

    @abstractmethod
    async def list_containers(self) -> List[Container]:
        """Return the live containers, in backend order."""

    @abstractmethod
    async def container_stats(self, container_id: str) -> Stats:
        """Return current memory (MB) and total CPU (seconds) of a container."""

    @abstractmethod
    async def kill_container(self, container_id: str) -> None:
        """Kill the container with the given ID."""
