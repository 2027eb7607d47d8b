"""CLI entry point for reviewpost.

Commands:
  post    - post analyzer comments as a review on the event's pull request
  status  - set the analysis commit status on the event's head commit
"""

from __future__ import annotations

import importlib.metadata
import logging

import click

from reviewpost_cli.commands.post import post_cmd
from reviewpost_cli.commands.status import status_cmd


@click.group()
@click.version_option(
    version=importlib.metadata.version("reviewpost"),
    prog_name="reviewpost",
)
@click.option(
    "--config",
    "config_path",
    default=".reviewpost.yml",
    show_default=True,
    help="Path to the configuration file.",
    envvar="REVIEWPOST_CONFIG",
)
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging.")
@click.pass_context
def main(ctx: click.Context, config_path: str, verbose: bool):
    """Publish code analysis results to GitHub pull requests."""
    from reviewpost_core.config import load_config

    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(asctime)s - %(name)s - %(levelname)s - %(message)s")

    ctx.ensure_object(dict)
    ctx.obj["config"] = load_config(config_path)


main.add_command(post_cmd)
main.add_command(status_cmd)
