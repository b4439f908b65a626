"""
Registry listing command.
"""

import json

import click

from ..cli_utils import add_common_options, standard_command
from ..render import render_registry
from ..services import RegistryService


@click.command("repos")
@add_common_options('json')
@click.pass_obj
@standard_command
def repos_handler(obj, json_output):
    """List the repositories recorded in the registry."""
    registry = RegistryService.from_config(obj['config'], obj.get('registry'))
    paths = registry.load()

    if json_output:
        for path in paths:
            print(json.dumps({'path': path}, ensure_ascii=False))
        return

    render_registry(paths)
