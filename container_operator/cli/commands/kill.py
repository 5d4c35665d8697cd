"""Kill container command."""

import click

from ..helpers import get_operator, run_operation


@click.command()
@click.argument('container_id')
@click.pass_obj
def kill(config, container_id):
    """Kill a container"""
    operator = get_operator(config)
    run_operation(operator.kill_container(container_id))
    click.echo(f"Killed container: {container_id}")
