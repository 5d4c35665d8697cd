import pytest
from click.testing import CliRunner
from unittest.mock import MagicMock

from container_operator.core.operator import Operator
from container_operator.models.container import Container, Stats
from container_operator.services.fake_service import FakeRuntimeClient


@pytest.fixture
def cli_runner():
    """Provides a Click CLI runner for testing commands."""
    return CliRunner()


@pytest.fixture
def mock_docker_client():
    """Provides a mocked docker-py client."""
    mock_client = MagicMock()
    mock_client.ping.return_value = True
    mock_client.containers.list.return_value = []
    return mock_client


@pytest.fixture
def fake_client():
    """Provides a fake runtime with containers A, B and C, in that order."""
    return FakeRuntimeClient(
        containers=[
            Container(id="A", names=["/alpha"]),
            Container(id="B", names=["/bravo"]),
            Container(id="C", names=["charlie", "/c-alias"]),
        ],
        stats={"A": Stats(memory_mb=256, cpu_sec=42)},
    )


@pytest.fixture
def operator(fake_client):
    """Provides an operator bound to the fake runtime."""
    return Operator(fake_client)


@pytest.fixture(autouse=True)
def clean_operator_env(monkeypatch):
    """Keep the developer's CONTAINER_OPERATOR_* settings out of tests."""
    for name in (
        "CONTAINER_OPERATOR_DOCKER_HOST",
        "CONTAINER_OPERATOR_TIMEOUT",
        "CONTAINER_OPERATOR_LIST_ALL",
        "CONTAINER_OPERATOR_OPERATION_TIMEOUT",
    ):
        monkeypatch.delenv(name, raising=False)
