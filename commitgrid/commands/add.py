"""
Repository discovery command.

Scans a folder for git repositories and records them in the registry.
"""

import os

import click
from rich.console import Console
from rich.markup import escape
from rich.text import Text

from ..cli_utils import standard_command
from ..render import render_registry
from ..services import FolderScanner, RegistryService

console = Console()


@click.command("add")
@click.argument("path", type=click.Path(file_okay=False))
@click.pass_obj
@standard_command
def add_handler(obj, path):
    """Scan PATH for git repositories and add them to the registry.

    Excluded directories (node_modules, vendor, ...) are not entered.
    Set scan.exclude_directories in the config to change the list.

    Examples:

    \b
        commitgrid add ~/code
        commitgrid --registry ~/.myrepos add /srv/projects
    """
    config = obj['config']
    root = os.path.abspath(os.path.expanduser(path))

    console.print("Found Folders:\n")

    def show(found):
        console.print(Text(found), soft_wrap=True, highlight=False)

    scanner = FolderScanner.from_config(config, on_found=show)
    repos = scanner.discover(root)

    registry = RegistryService.from_config(config, obj.get('registry'))
    merged = registry.add(repos)

    console.print()
    render_registry(merged)
    console.print(f"\n[green]✓[/green] Successfully added {len(repos)} repositories from [cyan]{escape(root)}[/cyan]",
                  soft_wrap=True, highlight=False)
