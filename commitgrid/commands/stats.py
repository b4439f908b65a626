"""
Contribution heatmap command.
"""

import json

import click

from ..cli_utils import add_common_options, standard_command
from ..config import logger
from ..domain import StatsWindow
from ..grid import build_grid
from ..render import GridRenderer
from ..services import CommitAggregator, RegistryService, load_emails


@click.command("stats")
@click.option("--emails", "emails_path", type=click.Path(dir_okay=False),
              help="File listing your author emails, one per line (default: general.emails_file)")
@add_common_options('continue_on_error')
@click.pass_obj
@standard_command
def stats_handler(obj, emails_path, continue_on_error):
    """Show commits by your emails over the last six months.

    Every repository in the registry is read from HEAD. By default
    a repository that cannot be read stops the whole run.

    Examples:

    \b
        commitgrid stats --emails ~/.my_emails
        commitgrid stats --emails ~/.my_emails --continue-on-error
    """
    config = obj['config']
    general = config.get('general', {})

    emails_path = emails_path or general.get('emails_file')
    if not emails_path:
        raise click.UsageError("No email list given. Use --emails or set general.emails_file.")

    window = StatsWindow.from_config(config)
    policy = "warn" if continue_on_error else general.get('failure_policy', "abort")
    aggregator = CommitAggregator(window=window, failure_policy=policy)

    authors = load_emails(emails_path)
    if not authors:
        logger.warning(f"Email list {emails_path} is empty; no commits will match")

    repos = RegistryService.from_config(config, obj.get('registry')).load()
    if not repos:
        logger.warning("No repositories registered. Run 'commitgrid add PATH' first.")

    result = aggregator.aggregate(repos, authors)

    if result.summary.failed:
        logger.warning(
            f"{result.summary.failed} of {result.summary.total} repositories could not be read"
        )
    logger.debug(json.dumps(result.summary.to_dict()))

    GridRenderer(window).render(build_grid(result.counts))
