"""status command - report analysis progress as a commit status."""

from __future__ import annotations

import click
from rich.console import Console

from reviewpost_cli.commands._common import HANDLED_ERRORS, build_poster
from reviewpost_core.payloads import load_event
from reviewpost_core.poster import AnalysisStatus

console = Console()


@click.command("status")
@click.option("--event", "event_path", required=True, help="YAML/JSON file describing the review event.")
@click.option(
    "--state",
    type=click.Choice([s.value for s in AnalysisStatus]),
    required=True,
    help="Analysis state to report.",
)
@click.pass_context
def status_cmd(ctx, event_path: str, state: str):
    """Set the analysis commit status on the event's head commit."""
    config = ctx.obj["config"]
    try:
        event = load_event(event_path)
    except HANDLED_ERRORS as e:
        raise click.ClickException(str(e))

    poster = build_poster(config)

    try:
        poster.status(event, AnalysisStatus(state))
    except HANDLED_ERRORS as e:
        raise click.ClickException(str(e))

    console.print(f"[green]Status set: {state}[/green]")
