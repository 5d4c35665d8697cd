"""List current containers command."""

import click

from ...core.constants import NAME_PREFIX
from ..helpers import get_operator, print_table, run_operation


@click.command()
@click.option('--no-trunc', is_flag=True, help='Show full container IDs')
@click.pass_obj
def ps(config, no_trunc):
    """List the containers the runtime currently has"""
    operator = get_operator(config)
    containers = run_operation(operator.get_current_containers())

    if not containers:
        click.echo("No containers found")
        return

    rows = []
    for container in containers:
        names = [name.removeprefix(NAME_PREFIX) for name in container.names]
        cid = container.id if no_trunc else container.id[:12]
        rows.append([cid, ", ".join(names)])
    print_table(["CONTAINER ID", "NAMES"], rows)
