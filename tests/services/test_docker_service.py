"""Tests for the Docker runtime client."""

import asyncio
from unittest.mock import Mock, MagicMock, patch

import docker.errors
import pytest

from container_operator.core.operator import Operator
from container_operator.models.config import RuntimeConfig
from container_operator.models.container import Container, Stats
from container_operator.services.docker_service import DockerRuntimeClient, stats_from_docker
from container_operator.services.exceptions import ContainerListError, RuntimeClientError

MB = 1024 * 1024


def docker_container(cid, names):
    """Build a docker-py container as returned by a sparse list."""
    container = Mock()
    container.id = cid
    container.attrs = {"Id": cid, "Names": names}
    return container


class TestDockerRuntimeClient:
    """Test cases for DockerRuntimeClient."""

    @patch('container_operator.services.docker_service.docker.from_env')
    def test_init_success(self, mock_from_env, mock_docker_client):
        """Test successful initialization from the environment."""
        mock_from_env.return_value = mock_docker_client

        runtime = DockerRuntimeClient()

        assert runtime.client == mock_docker_client
        mock_from_env.assert_called_once_with(timeout=120)
        mock_docker_client.ping.assert_called_once()

    @patch('container_operator.services.docker_service.docker.DockerClient')
    def test_init_with_base_url(self, mock_docker_cls, mock_docker_client):
        """Test initialization against an explicit daemon URL."""
        mock_docker_cls.return_value = mock_docker_client

        DockerRuntimeClient(RuntimeConfig(base_url="tcp://build-host:2375", timeout=30))

        mock_docker_cls.assert_called_once_with(base_url="tcp://build-host:2375", timeout=30)

    @patch('container_operator.services.docker_service.docker.from_env')
    def test_init_docker_not_running(self, mock_from_env):
        """Test initialization when Docker is not running."""
        mock_from_env.side_effect = docker.errors.DockerException("connection refused")

        with pytest.raises(RuntimeClientError, match="Docker daemon is not running"):
            DockerRuntimeClient()

    def test_init_other_error(self, mock_docker_client):
        """Test initialization with other Docker errors."""
        mock_docker_client.ping.side_effect = docker.errors.DockerException("Other error")

        with pytest.raises(RuntimeClientError, match="Failed to connect to Docker"):
            DockerRuntimeClient(client=mock_docker_client)

    def test_list_containers(self, mock_docker_client):
        """Test listing keeps order, full IDs and raw names."""
        mock_docker_client.containers.list.return_value = [
            docker_container("f00d", ["/web"]),
            docker_container("beef", ["/db", "/web/db"]),
        ]
        runtime = DockerRuntimeClient(client=mock_docker_client)

        containers = asyncio.run(runtime.list_containers())

        assert containers == [
            Container(id="f00d", names=["/web"]),
            Container(id="beef", names=["/db", "/web/db"]),
        ]
        mock_docker_client.containers.list.assert_called_once_with(all=False, sparse=True)

    def test_list_all_containers(self, mock_docker_client):
        """Test listing stopped containers when configured to."""
        runtime = DockerRuntimeClient(RuntimeConfig(list_all=True), client=mock_docker_client)

        assert asyncio.run(runtime.list_containers()) == []
        mock_docker_client.containers.list.assert_called_once_with(all=True, sparse=True)

    def test_container_stats(self, mock_docker_client):
        """Test stats are read once, unstreamed."""
        mock_container = MagicMock()
        mock_container.stats.return_value = {
            "memory_stats": {"stats": {"rss": 300 * MB}},
            "cpu_stats": {"cpu_usage": {"total_usage": 12_500_000_000}},
        }
        mock_docker_client.containers.get.return_value = mock_container
        runtime = DockerRuntimeClient(client=mock_docker_client)

        stats = asyncio.run(runtime.container_stats("f00d"))

        assert stats == Stats(memory_mb=300, cpu_sec=12)
        mock_docker_client.containers.get.assert_called_once_with("f00d")
        mock_container.stats.assert_called_once_with(stream=False)

    def test_container_stats_not_found(self, mock_docker_client):
        """Test docker's NotFound reaches the caller unchanged."""
        mock_docker_client.containers.get.side_effect = docker.errors.NotFound("No such container")
        operator = Operator(DockerRuntimeClient(client=mock_docker_client))

        with pytest.raises(docker.errors.NotFound):
            asyncio.run(operator.container_stats("gone"))

    def test_kill_container(self, mock_docker_client):
        """Test killing a container."""
        mock_container = MagicMock()
        mock_docker_client.containers.get.return_value = mock_container
        runtime = DockerRuntimeClient(client=mock_docker_client)

        asyncio.run(runtime.kill_container("f00d"))

        mock_docker_client.containers.get.assert_called_once_with("f00d")
        mock_container.kill.assert_called_once()

    def test_kill_container_api_error(self, mock_docker_client):
        """Test kill failures reach the caller unchanged."""
        mock_container = MagicMock()
        mock_container.kill.side_effect = docker.errors.APIError("is not running")
        mock_docker_client.containers.get.return_value = mock_container
        operator = Operator(DockerRuntimeClient(client=mock_docker_client))

        with pytest.raises(docker.errors.APIError):
            asyncio.run(operator.kill_container("f00d"))

    def test_operator_wraps_list_api_error(self, mock_docker_client):
        """Test a failed docker ps becomes a listing error."""
        mock_docker_client.containers.list.side_effect = docker.errors.APIError("server error")
        operator = Operator(DockerRuntimeClient(client=mock_docker_client))

        with pytest.raises(ContainerListError) as exc_info:
            asyncio.run(operator.get_current_containers())
        assert isinstance(exc_info.value.err, docker.errors.APIError)


class TestStatsFromDocker:
    """Test cases for converting docker stats documents."""

    def test_cgroup_v1_rss(self):
        """RSS is used when docker reports it."""
        raw = {
            "memory_stats": {"usage": 900 * MB, "stats": {"rss": 300 * MB, "cache": 100 * MB}},
            "cpu_stats": {"cpu_usage": {"total_usage": 3_999_999_999}},
        }
        assert stats_from_docker(raw) == Stats(memory_mb=300, cpu_sec=3)

    def test_cgroup_v2_usage_minus_inactive_file(self):
        """Without RSS, page cache is subtracted from usage."""
        raw = {
            "memory_stats": {"usage": 500 * MB, "stats": {"inactive_file": 100 * MB}},
            "cpu_stats": {"cpu_usage": {"total_usage": 60_000_000_000}},
        }
        assert stats_from_docker(raw) == Stats(memory_mb=400, cpu_sec=60)

    def test_empty_document(self):
        """A stopped container reports nothing."""
        assert stats_from_docker({}) == Stats(memory_mb=0, cpu_sec=0)
