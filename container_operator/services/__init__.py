"""Service layer for abstracting container runtime backends."""

from .docker_service import DockerRuntimeClient
from .exceptions import (
    ContainerListError,
    ContainerNotFoundError,
    GlobPatternError,
    OperationTimeoutError,
    OperatorError,
    RuntimeClientError,
    ServiceError,
)
from .fake_service import FakeRuntimeClient
from .runtime_client import RuntimeClient

__all__ = [
    "RuntimeClient",
    "DockerRuntimeClient",
    "FakeRuntimeClient",
    "ServiceError",
    "RuntimeClientError",
    "ContainerNotFoundError",
    "GlobPatternError",
    "OperatorError",
    "ContainerListError",
    "OperationTimeoutError",
]
