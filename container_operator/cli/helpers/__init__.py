"""CLI Helper Functions for container-operator.

Shared by every command:
- Operator construction from the group's RuntimeConfig
- Running operator coroutines with consistent error handling
- Table formatting for output
"""

import asyncio
import sys
from typing import Any, Awaitable, TypeVar

import click
import docker.errors
from tabulate import tabulate

from container_operator.core.operator import Operator
from container_operator.models.config import RuntimeConfig
from container_operator.services.docker_service import DockerRuntimeClient
from container_operator.services.exceptions import ServiceError

T = TypeVar("T")


def get_operator(config: RuntimeConfig) -> Operator:
    """Initialize an Operator on the Docker runtime with error handling.

    Note:
        Exits with error message if Docker is not available.
    """
    try:
        client = DockerRuntimeClient(config)
    except ServiceError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)
    return Operator(client, timeout=config.operation_timeout)


def run_operation(aw: Awaitable[T]) -> T:
    """Run an operator coroutine, exiting with a message on failure."""
    try:
        return asyncio.run(aw)
    except (ServiceError, docker.errors.DockerException, OSError) as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)


def print_table(headers: list[str], rows: list[list[Any]],
                tablefmt: str = "simple") -> None:
    """Print a table with project-wide defaults."""
    table_str = tabulate(rows, headers=headers, tablefmt=tablefmt)
    click.echo(table_str)
