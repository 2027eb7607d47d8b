"""Collaborator ports consumed by the Poster.

Each port is one narrow capability of the hosting API. Production code passes
a ``GithubClient`` for all three; tests pass fakes.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from reviewpost_core.context import CallContext
    from reviewpost_core.poster import ReviewRequest, StatusRequest


@dataclass
class ChangedFile:
    filename: str
    patch: str | None  # None for binary files or files too large to diff


@runtime_checkable
class CommitsComparator(Protocol):
    def compare_commits(self, ctx: CallContext, owner: str, repo: str, base: str, head: str) -> list[ChangedFile]:
        """Return the files changed between two commits, with their patches."""
        ...


@runtime_checkable
class ReviewCreator(Protocol):
    def create_review(self, ctx: CallContext, owner: str, repo: str, number: int, review: ReviewRequest) -> None:
        """Submit a review on pull request ``number``."""
        ...


@runtime_checkable
class StatusCreator(Protocol):
    def create_status(self, ctx: CallContext, owner: str, repo: str, ref: str, status: StatusRequest) -> None:
        """Set a commit status on ``ref``."""
        ...
