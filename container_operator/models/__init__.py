"""Models for container-operator."""

from .config import RuntimeConfig
from .container import Container, Stats

__all__ = [
    'Container',
    'RuntimeConfig',
    'Stats'
]
