"""Review events and their decoding into a concrete GitHub pull request."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from urllib.parse import urlparse

from reviewpost_core.errors import EventNotSupportedError

PROVIDER = "github"

_PR_REF_RE = re.compile(r"refs/pull/([1-9][0-9]*)/head")


@dataclass
class ReferencePointer:
    internal_repository_url: str = ""
    reference_name: str = ""
    hash: str = ""


@dataclass
class CommitRevision:
    base: ReferencePointer | None = None
    head: ReferencePointer | None = None


@dataclass
class ReviewEvent:
    """A base/head commit pair on a hosted pull request, tagged with its provider."""

    provider: str
    commit_revision: CommitRevision = field(default_factory=CommitRevision)


@dataclass(frozen=True)
class PullRequestRef:
    owner: str
    repo: str
    number: int
    base_hash: str
    head_hash: str

    @property
    def full_name(self) -> str:
        return f"{self.owner}/{self.repo}"


def _split_repository_url(url: str) -> tuple[str, str] | None:
    """Return (owner, repo) from the last two path segments of a repository URL.

    Handles ``https://github.com/foo/bar(.git)`` and the scp-like
    ``git@github.com:foo/bar.git`` form.
    """
    parsed = urlparse(url)
    path = parsed.path if parsed.scheme and parsed.netloc else url.split(":", 1)[-1]
    segments = [s for s in path.split("/") if s]
    if len(segments) < 2:
        return None
    owner, repo = segments[-2], segments[-1]
    if repo.endswith(".git"):
        repo = repo[: -len(".git")]
    if not owner or not repo:
        return None
    return owner, repo


def resolve_event(event: ReviewEvent) -> PullRequestRef:
    """Decode a review event into the identifiers the GitHub API needs.

    Raises EventNotSupportedError for events this provider can never handle.
    Pure: no network access.
    """
    if event.provider != PROVIDER:
        raise EventNotSupportedError(f"unsupported provider: {event.provider}")

    base = event.commit_revision.base
    if base is None or not base.internal_repository_url:
        raise EventNotSupportedError("nil repository")

    names = _split_repository_url(base.internal_repository_url)
    if names is None:
        raise EventNotSupportedError(f"bad repository: {base.internal_repository_url}")

    head = event.commit_revision.head or ReferencePointer()
    match = _PR_REF_RE.fullmatch(head.reference_name)
    if not match:
        raise EventNotSupportedError(f"bad PR: {head.reference_name}")

    owner, repo = names
    return PullRequestRef(
        owner=owner,
        repo=repo,
        number=int(match.group(1)),
        base_hash=base.hash,
        head_hash=head.hash,
    )
