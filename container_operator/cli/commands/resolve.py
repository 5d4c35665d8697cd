"""Resolve a container ID file command."""

import os
import sys

import click

from ...utils.path_finder import PathFinder
from ..helpers import get_operator, run_operation


@click.command()
@click.argument('path')
@click.option('--dir', '-d', 'directory', default=None,
              help='Directory the container was created from (default: current directory)')
@click.pass_obj
def resolve(config, path, directory):
    """Print the ID of the current container written in an ID file.

    PATH may be relative to --dir and may contain ? and * globs; quote it so
    the shell does not expand it.
    """
    path = PathFinder.tilde_to_home(path)
    directory = PathFinder.tilde_to_home(directory) if directory else os.getcwd()

    operator = get_operator(config)
    cid = run_operation(operator.get_container_id_by_path(path, directory))

    if not cid:
        click.echo(f"No current container found for {path}", err=True)
        sys.exit(1)
    click.echo(cid)
