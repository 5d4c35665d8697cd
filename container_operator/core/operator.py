"""Correlate a container runtime's live state with a remembered snapshot."""

import asyncio
import logging
import os
import threading
from typing import Awaitable, FrozenSet, List, Optional, TypeVar

from ..models.container import Container, Stats
from ..services.exceptions import (
    ContainerListError,
    OperationTimeoutError,
    OperatorError,
)
from ..services.runtime_client import RuntimeClient
from ..utils.path_finder import PathFinder

logger = logging.getLogger(__name__)

T = TypeVar("T")


class Operator:
    """Queries the containers of one runtime client.

    An operator remembers every container ID it has been asked to checkpoint,
    so that containers started afterwards (by someone else, with IDs nobody
    told us) can be picked out and later inspected or killed.

    Every method is a coroutine; cancelling the task that awaits it abandons
    the in-flight runtime call. When ``timeout`` is given, each runtime call
    must finish within that many seconds or OperationTimeoutError is raised.

    Example:
        operator = Operator(DockerRuntimeClient())
        await operator.remember_current_container_ids()
        ...  # something starts a container named "job-42"
        cid = await operator.get_new_container_id_by_name("job-42")
    """

    def __init__(self, client: RuntimeClient, timeout: Optional[float] = None):
        self.client = client
        self.timeout = timeout
        self._remembered: set[str] = set()
        self._lock = threading.Lock()

    @property
    def remembered_ids(self) -> FrozenSet[str]:
        """IDs of every container seen by remember_current_container_ids()."""
        with self._lock:
            return frozenset(self._remembered)

    async def _call(self, aw: Awaitable[T]) -> T:
        if self.timeout is None:
            return await aw
        try:
            async with asyncio.timeout(self.timeout) as deadline:
                return await aw
        except TimeoutError as e:
            # a backend may raise its own TimeoutError before our deadline
            if deadline.expired():
                raise OperationTimeoutError() from e
            raise

    async def get_current_containers(self) -> List[Container]:
        """Return the containers the runtime currently has.

        Raises:
            ContainerListError: If the runtime could not list its containers
            OperationTimeoutError: If the runtime did not answer in time
        """
        try:
            containers = await self._call(self.client.list_containers())
        except OperatorError:
            raise
        except Exception as e:
            logger.warning(f"Could not list the containers: {e}")
            raise ContainerListError(e) from e

        logger.debug(f"Runtime has {len(containers)} current container(s)")
        return containers

    async def remember_current_container_ids(self) -> None:
        """Store the IDs of the current containers for later get_new_* calls.

        IDs accumulate across calls; a container that has gone away is not
        forgotten.
        """
        containers = await self.get_current_containers()
        ids = {container.id for container in containers}
        with self._lock:
            self._remembered |= ids
            total = len(self._remembered)
        logger.debug(f"Remembering {total} container ID(s)")

    async def get_new_containers(self) -> List[Container]:
        """Return current containers not remembered by a previous checkpoint."""
        containers = await self.get_current_containers()
        remembered = self.remembered_ids
        new_containers = [c for c in containers if c.id not in remembered]
        logger.debug(f"Found {len(new_containers)} new container(s)")
        return new_containers

    async def get_new_container_ids(self) -> List[str]:
        """Return the IDs of get_new_containers(), in the same order."""
        return [container.id for container in await self.get_new_containers()]

    async def get_new_container_id_by_name(self, name: str) -> str:
        """Return the ID of the first new container with the given name.

        Names are compared with a leading "/" removed, as docker reports them.
        Returns an empty string if no new container has that name.
        """
        for container in await self.get_new_containers():
            if self.has_name(name, container):
                return container.id
        return ""

    def has_name(self, name: str, container: Container) -> bool:
        """Check if name is one of the container's names."""
        return container.has_name(name)

    async def get_container_id_by_path(self, path: str, dir: str) -> str:
        """Return the container ID written in the file at path.

        A relative path is taken to be relative to dir, the working directory
        the container was created from. If no file exists there, path is
        treated as a glob (``?`` matches one non-separator character, ``*``
        any number of them, dotfiles included) and the matching files are
        tried in sorted order.

        The file content is only trusted if it is the ID of a current
        container, so ID files left over from earlier attempts are skipped.
        This suits runtimes that write IDs to file, eg. docker's --cidfile.

        Returns:
            The verified ID, or an empty string if none was found

        Raises:
            OSError: If the file at an exact path cannot be read
            GlobPatternError: If the glob pattern is malformed
            ContainerListError: If current containers could not be listed
        """
        cid_path = PathFinder.rel_to_abs_path(path, dir)

        if os.path.exists(cid_path):
            return await self._cid_path_to_id(cid_path)

        return await self._cid_glob_to_id(cid_path)

    async def _cid_path_to_id(self, cid_path: str) -> str:
        return await self._verified(cid_path, PathFinder.read_id_file(cid_path))

    async def _verified(self, cid_path: str, cid: str) -> str:
        if await self._verify_id(cid):
            logger.debug(f"{cid_path} holds current container {cid}")
            return cid
        logger.debug(f"{cid_path} does not hold the ID of a current container")
        return ""

    async def _verify_id(self, cid: str) -> bool:
        for container in await self.get_current_containers():
            if container.id == cid:
                return True
        return False

    async def _cid_glob_to_id(self, pattern: str) -> str:
        """Try each match in turn; only unreadable matches are skipped.

        Listing failures and deadlines while verifying a match are raised
        instead of moving on to the next match.
        """
        for path in PathFinder.expand_glob(pattern):
            try:
                content = PathFinder.read_id_file(path)
            except (OSError, UnicodeDecodeError) as e:
                logger.debug(f"Skipping unreadable ID file {path}: {e}")
                continue
            cid = await self._verified(path, content)
            if cid:
                return cid
        return ""

    async def container_stats(self, container_id: str) -> Stats:
        """Return the current memory (RSS, in MB) and total CPU (in seconds)
        used by the container with the given ID.

        Runtime errors are raised unchanged.
        """
        return await self._call(self.client.container_stats(container_id))

    async def kill_container(self, container_id: str) -> None:
        """Kill the container with the given ID.

        Runtime errors are raised unchanged.
        """
        logger.info(f"Killing container {container_id}")
        await self._call(self.client.kill_container(container_id))
