from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from github import Github

from reviewpost_core.ports import ChangedFile

if TYPE_CHECKING:
    from reviewpost_core.context import CallContext
    from reviewpost_core.poster import ReviewRequest, StatusRequest

logger = logging.getLogger(__name__)


def get_client(token: str) -> GithubClient:
    return GithubClient(Github(token))


class GithubClient:
    """PyGithub-backed implementation of the three collaborator ports.

    ``ctx.check()`` runs before every HTTP request so a cancelled context never
    starts a new one. GithubException is left to propagate.
    """

    def __init__(self, gh: Github):
        self._gh = gh

    def _get_repo(self, owner: str, repo: str):
        # lazy: no request until the repository is actually used
        return self._gh.get_repo(f"{owner}/{repo}", lazy=True)

    def compare_commits(self, ctx: CallContext, owner: str, repo: str, base: str, head: str) -> list[ChangedFile]:
        """Return files changed between two commits using GitHub's compare API."""
        ctx.check()
        comparison = self._get_repo(owner, repo).compare(base, head)
        return [ChangedFile(filename=f.filename, patch=f.patch) for f in comparison.files]

    def create_review(self, ctx: CallContext, owner: str, repo: str, number: int, review: ReviewRequest) -> None:
        ctx.check()
        pull = self._get_repo(owner, repo).get_pull(number)
        payload = review.to_payload()
        ctx.check()
        pull.create_review(body=payload["body"], event=payload["event"], comments=payload["comments"])
        logger.debug("Posted %s review on %s/%s#%d", review.event, owner, repo, number)

    def create_status(self, ctx: CallContext, owner: str, repo: str, ref: str, status: StatusRequest) -> None:
        ctx.check()
        commit = self._get_repo(owner, repo).get_commit(ref)
        kwargs = {"description": status.description, "context": status.context}
        if status.target_url:
            kwargs["target_url"] = status.target_url
        ctx.check()
        commit.create_status(status.state, **kwargs)
        logger.debug("Set %s status %r on %s/%s@%s", status.state, status.context, owner, repo, ref)
