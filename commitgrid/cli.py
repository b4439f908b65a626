#!/usr/bin/env python3

import click

from commitgrid import __version__
from commitgrid.config import load_config, configure_logging
from commitgrid.commands.add import add_handler
from commitgrid.commands.stats import stats_handler
from commitgrid.commands.repos import repos_handler
from commitgrid.commands.config import config_cmd


@click.group()
@click.version_option(version=__version__, prog_name="commitgrid")
@click.option("--registry", type=click.Path(dir_okay=False),
              help="Registry file to use instead of general.registry_file")
@click.option("-v", "--verbose", is_flag=True, help="Show debug logging on stderr")
@click.pass_context
def cli(ctx, registry, verbose):
    """commitgrid - Local git contribution heatmap.

    Scan folders for git repositories with 'add', then draw the last
    six months of your commits across all of them with 'stats'.
    """
    config = load_config()
    configure_logging(config, verbose=verbose)
    ctx.obj = {'config': config, 'registry': registry}


cli.add_command(add_handler, name='add')
cli.add_command(stats_handler, name='stats')
cli.add_command(repos_handler, name='repos')
cli.add_command(config_cmd)


def main():
    cli()

if __name__ == "__main__":
    main()
