"""container-operator - Correlate a container runtime's live state with a remembered snapshot."""

__version__ = "0.1.0"

from .core.operator import Operator
from .models.container import Container, Stats
from .services.runtime_client import RuntimeClient

__all__ = ['Operator', 'Container', 'Stats', 'RuntimeClient']
