"""Errors raised by reviewpost_core.

Collaborator failures (e.g. ``github.GithubException``) are not wrapped; they
reach the caller unchanged so transport-level retry policy stays outside the core.
"""

from __future__ import annotations


class ReviewPostError(Exception):
    """Base class for errors raised by this package."""


class EventNotSupportedError(ReviewPostError):
    """The review event can never be handled by this provider.

    Terminal: retrying the same event will fail the same way. ``cause`` keeps
    the bare reason ("nil repository", "bad PR: <ref>", ...) so callers can
    log it without the prefix.
    """

    def __init__(self, cause: str):
        super().__init__(f"event not supported: {cause}")
        self.cause = cause


class CallCancelledError(ReviewPostError):
    """The call context was cancelled or its deadline passed before a collaborator call."""
