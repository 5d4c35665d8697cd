"""Configuration models for container-operator."""

import os
from dataclasses import dataclass
from typing import Optional

from ..core.constants import (
    DEFAULT_TIMEOUT,
    ENV_DOCKER_HOST,
    ENV_LIST_ALL,
    ENV_OPERATION_TIMEOUT,
    ENV_TIMEOUT,
)


@dataclass
class RuntimeConfig:
    """Container runtime connection settings."""

    base_url: Optional[str] = None  # None uses the docker environment (DOCKER_HOST)
    timeout: int = DEFAULT_TIMEOUT  # docker API timeout in seconds
    list_all: bool = False  # include stopped containers when listing
    operation_timeout: Optional[float] = None  # per runtime call deadline

    def to_dict(self) -> dict:
        """Convert to dictionary."""
        result = {
            'timeout': self.timeout,
            'list_all': self.list_all,
        }
        if self.base_url:
            result['base_url'] = self.base_url
        if self.operation_timeout is not None:
            result['operation_timeout'] = self.operation_timeout
        return result

    @classmethod
    def from_dict(cls, data: dict) -> 'RuntimeConfig':
        """Create from dictionary."""
        operation_timeout = data.get('operation_timeout')
        return cls(
            base_url=data.get('base_url'),
            timeout=int(data.get('timeout', DEFAULT_TIMEOUT)),
            list_all=bool(data.get('list_all', False)),
            operation_timeout=float(operation_timeout) if operation_timeout is not None else None,
        )

    @classmethod
    def from_env(cls) -> 'RuntimeConfig':
        """Create from CONTAINER_OPERATOR_* environment variables."""
        data = {}
        if os.environ.get(ENV_DOCKER_HOST):
            data['base_url'] = os.environ[ENV_DOCKER_HOST]
        if os.environ.get(ENV_TIMEOUT):
            data['timeout'] = os.environ[ENV_TIMEOUT]
        if os.environ.get(ENV_LIST_ALL):
            data['list_all'] = os.environ[ENV_LIST_ALL].lower() in ('1', 'true', 'yes')
        if os.environ.get(ENV_OPERATION_TIMEOUT):
            data['operation_timeout'] = os.environ[ENV_OPERATION_TIMEOUT]
        return cls.from_dict(data)
