"""Container runtime models."""

from typing import List

from pydantic import BaseModel, Field

from ..core.constants import NAME_PREFIX


class Container(BaseModel):
    """A live container as reported by a runtime client."""
    id: str
    names: List[str] = Field(default_factory=list)

    def has_name(self, name: str) -> bool:
        """Check if any alias, minus one leading separator, equals name."""
        for cname in self.names:
            if cname.startswith(NAME_PREFIX):
                cname = cname[len(NAME_PREFIX):]
            if cname == name:
                return True
        return False


class Stats(BaseModel):
    """Point-in-time resource usage of a container."""
    memory_mb: int = 0  # resident memory, MB
    cpu_sec: int = 0  # cumulative CPU time, seconds
