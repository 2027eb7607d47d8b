"""post command - publish analyzer comments as a pull request review."""

from __future__ import annotations

import click
from rich.console import Console
from rich.markup import escape

from reviewpost_cli.commands._common import HANDLED_ERRORS, build_poster
from reviewpost_core.events import PullRequestRef
from reviewpost_core.payloads import load_analyzer_comments, load_event
from reviewpost_core.poster import ReviewRequest

console = Console()


def print_dry_run(pr: PullRequestRef, requests: list[ReviewRequest]) -> None:
    """Print prepared review requests to the terminal without posting to GitHub."""
    total = sum(len(r.comments) for r in requests)
    console.print(
        f"\n[bold]Dry run: {pr.full_name}#{pr.number}: {len(requests)} review(s), "
        f"{total} inline comment(s) (not posted)[/bold]\n"
    )
    for idx, request in enumerate(requests, 1):
        if len(requests) > 1:
            console.print(f"[dim]Review {idx}/{len(requests)}[/dim]")
        if request.body:
            console.print(f"[bold]Body:[/bold]\n{escape(request.body)}\n")
        for c in request.comments:
            console.print(f"[bold cyan]{escape(c.path)}[/bold cyan]  position [bold]{c.position}[/bold]")
            console.print(f"  {escape(c.body)}")
            console.print()


@click.command("post")
@click.option("--event", "event_path", required=True, help="YAML/JSON file describing the review event.")
@click.option("--comments", "comments_path", required=True, help="YAML/JSON file with analyzer comments.")
@click.option(
    "--dry-run",
    "-n",
    is_flag=True,
    help="Print the review that would be posted without posting it.",
)
@click.pass_context
def post_cmd(ctx, event_path: str, comments_path: str, dry_run: bool):
    """Post analyzer comments as a review on the event's pull request.

    \b
    Required environment variables:
      GITHUB_TOKEN         GitHub personal access token (or use gh CLI)
    """
    config = ctx.obj["config"]
    try:
        event = load_event(event_path)
        analyzers_comments = load_analyzer_comments(comments_path)
    except HANDLED_ERRORS as e:
        raise click.ClickException(str(e))

    poster = build_poster(config)

    try:
        if dry_run:
            pr, requests = poster.prepare_review(event, analyzers_comments)
            print_dry_run(pr, requests)
            return
        poster.post(event, analyzers_comments)
    except HANDLED_ERRORS as e:
        raise click.ClickException(str(e))

    console.print("[green]Review posted.[/green]")
