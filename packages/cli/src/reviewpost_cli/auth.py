"""Find the token used to talk to GitHub.

``load_config`` already picks up ``GITHUB_TOKEN``; when it is unset the
GitHub CLI session (``gh auth token``) is asked instead.
"""

from __future__ import annotations

import logging
import subprocess

logger = logging.getLogger(__name__)

GH_TOKEN_TIMEOUT = 5


def _token_from_gh_cli() -> str | None:
    try:
        result = subprocess.run(
            ["gh", "auth", "token"],
            capture_output=True,
            text=True,
            timeout=GH_TOKEN_TIMEOUT,
        )
    except (FileNotFoundError, subprocess.TimeoutExpired):
        logger.debug("gh CLI unavailable; no token from gh auth.")
        return None

    if result.returncode != 0:
        logger.debug("gh auth token exited with %d.", result.returncode)
        return None
    return result.stdout.strip() or None


def resolve_github_token(config: dict) -> str | None:
    """Return the configured token, else the gh CLI session token, else None."""
    token = config.get("github_token")
    if token:
        return token

    token = _token_from_gh_cli()
    if token:
        logger.debug("Resolved GitHub token via gh CLI session.")
    return token
