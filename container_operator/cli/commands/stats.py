"""Container stats command."""

import click

from ..helpers import get_operator, print_table, run_operation


@click.command()
@click.argument('container_id')
@click.pass_obj
def stats(config, container_id):
    """Show memory (MB) and CPU time (seconds) used by a container"""
    operator = get_operator(config)
    usage = run_operation(operator.container_stats(container_id))
    print_table(["CONTAINER ID", "MEM (MB)", "CPU (s)"],
                [[container_id, usage.memory_mb, usage.cpu_sec]])
