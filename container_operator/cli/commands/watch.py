"""Watch for a new container command."""

import asyncio
import sys

import click

from ...core.constants import DEFAULT_WATCH_INTERVAL, DEFAULT_WATCH_WAIT
from ...core.operator import Operator
from ..helpers import get_operator, run_operation


async def wait_for_new_container(operator: Operator, name: str,
                                 interval: float, wait: float) -> str:
    """Remember current containers, then poll until a new one has name.

    Returns:
        The new container's ID, or an empty string if wait elapsed first
    """
    await operator.remember_current_container_ids()

    loop = asyncio.get_running_loop()
    deadline = loop.time() + wait
    while True:
        cid = await operator.get_new_container_id_by_name(name)
        if cid:
            return cid
        remaining = deadline - loop.time()
        if remaining <= 0:
            return ""
        await asyncio.sleep(min(interval, remaining))


@click.command()
@click.argument('name')
@click.option('--interval', '-i', type=float, default=DEFAULT_WATCH_INTERVAL, show_default=True,
              help='Seconds between polls')
@click.option('--wait', '-w', type=float, default=DEFAULT_WATCH_WAIT, show_default=True,
              help='Seconds to wait before giving up')
@click.pass_obj
def watch(config, name, interval, wait):
    """Wait for a container named NAME to be started, and print its ID"""
    operator = get_operator(config)
    cid = run_operation(wait_for_new_container(operator, name, interval, wait))

    if not cid:
        click.echo(f"No new container named '{name}' appeared within {wait:g}s", err=True)
        sys.exit(1)
    click.echo(cid)
