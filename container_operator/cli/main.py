"""Main CLI entry point for container-operator."""

import logging

import click

from ..models.config import RuntimeConfig
from .commands.kill import kill
from .commands.ps import ps
from .commands.resolve import resolve
from .commands.stats import stats
from .commands.watch import watch


@click.group()
@click.option('--docker-host', default=None, help='Docker daemon URL (default: DOCKER_HOST)')
@click.option('--timeout', type=int, default=None, help='Docker API timeout in seconds')
@click.option('--list-all', is_flag=True, help='Include stopped containers')
@click.option('--verbose', '-v', is_flag=True, help='Log operator activity')
@click.pass_context
def cli(ctx, docker_host, timeout, list_all, verbose):
    """container-operator - Find, inspect and kill containers you did not create"""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
    )

    config = RuntimeConfig.from_env()
    if docker_host:
        config.base_url = docker_host
    if timeout is not None:
        config.timeout = timeout
    if list_all:
        config.list_all = True
    ctx.obj = config


# Register commands
cli.add_command(ps)
cli.add_command(stats)
cli.add_command(kill)
cli.add_command(resolve)
cli.add_command(watch)


if __name__ == '__main__':
    cli()
