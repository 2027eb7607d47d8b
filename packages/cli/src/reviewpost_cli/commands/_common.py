"""Helpers shared by the post and status commands."""

from __future__ import annotations

import click
from github import GithubException

from reviewpost_core.config import ProviderConfig
from reviewpost_core.errors import ReviewPostError
from reviewpost_core.gh.client import get_client
from reviewpost_core.poster import Poster

# Errors turned into a clean "Error: ..." message and exit code 1.
HANDLED_ERRORS = (ReviewPostError, GithubException, ValueError, FileNotFoundError)


def build_poster(config: dict) -> Poster:
    """Create a Poster wired to GitHub, resolving the token like the rest of the CLI."""
    from reviewpost_cli.auth import resolve_github_token

    token = resolve_github_token(config)
    if not token:
        raise click.UsageError(
            "No GitHub token found. Set GITHUB_TOKEN or run `gh auth login` first.\n"
            "Create a token at https://github.com/settings/tokens"
        )

    try:
        provider_config = ProviderConfig.from_config(config)
    except ValueError as e:
        raise click.UsageError(str(e))

    client = get_client(token)
    return Poster(comparator=client, review_creator=client, status_creator=client, config=provider_config)
