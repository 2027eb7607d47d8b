"""Post analyzer comments as a GitHub review and report analysis status."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum

from reviewpost_core.comments import AnalyzerComments, apply_footer, join_global, partition
from reviewpost_core.config import ProviderConfig
from reviewpost_core.context import CallContext
from reviewpost_core.diff import PatchPositions
from reviewpost_core.events import PullRequestRef, ReviewEvent, resolve_event
from reviewpost_core.ports import CommitsComparator, ReviewCreator, StatusCreator

logger = logging.getLogger(__name__)

# Reviews are informational only: never REQUEST_CHANGES.
REVIEW_EVENT = "APPROVE"


class AnalysisStatus(Enum):
    PENDING = "pending"
    SUCCESS = "success"
    FAILURE = "failure"
    ERROR = "error"


_STATUS_STATES = {
    AnalysisStatus.PENDING: "pending",
    AnalysisStatus.SUCCESS: "success",
    AnalysisStatus.FAILURE: "failure",
    AnalysisStatus.ERROR: "error",
}

_STATUS_DESCRIPTIONS = {
    AnalysisStatus.PENDING: "The analysis is in progress",
    AnalysisStatus.SUCCESS: "The analysis was performed",
    AnalysisStatus.FAILURE: "The analysis found issues",
    AnalysisStatus.ERROR: "There was an error during the analysis",
}


@dataclass
class DraftComment:
    path: str
    position: int
    body: str


@dataclass
class ReviewRequest:
    body: str
    event: str = REVIEW_EVENT
    comments: list[DraftComment] = field(default_factory=list)

    def to_payload(self) -> dict:
        return {
            "body": self.body,
            "event": self.event,
            "comments": [{"path": c.path, "position": c.position, "body": c.body} for c in self.comments],
        }


@dataclass
class StatusRequest:
    state: str
    description: str
    context: str
    target_url: str = ""


def build_status_request(status: AnalysisStatus, config: ProviderConfig | None = None) -> StatusRequest:
    config = config or ProviderConfig()
    return StatusRequest(
        state=_STATUS_STATES[status],
        description=_STATUS_DESCRIPTIONS[status],
        context=config.status_context,
        target_url=config.status_target_url,
    )


def split_review(request: ReviewRequest, batch_limit: int | None) -> list[ReviewRequest]:
    """Split a review with many inline comments into several smaller reviews.

    Only the last one carries the real body; earlier ones report progress.
    """
    comments = request.comments
    if batch_limit is None or len(comments) <= batch_limit:
        return [request]

    batches = [comments[i : i + batch_limit] for i in range(0, len(comments), batch_limit)]
    requests = []
    posted = 0
    for idx, batch in enumerate(batches):
        posted += len(batch)
        is_last = idx == len(batches) - 1
        body = request.body if is_last else f"Review in progress ({posted}/{len(comments)} comments)..."
        requests.append(ReviewRequest(body=body, event=request.event, comments=list(batch)))
    return requests


class Poster:
    """Publishes analyzer results for review events on GitHub.

    Each public call makes at most one compare call and one create call per
    review batch (or one create-status call), in that order, with no retry.
    Collaborator errors propagate unchanged. With batching on, a failed batch
    stops the post and earlier batches stay on the pull request.
    """

    def __init__(
        self,
        comparator: CommitsComparator | None = None,
        review_creator: ReviewCreator | None = None,
        status_creator: StatusCreator | None = None,
        config: ProviderConfig | None = None,
    ):
        self.comparator = comparator
        self.review_creator = review_creator
        self.status_creator = status_creator
        self.config = config or ProviderConfig()

    # ------------------------------------------------------------------ #
    # Pure request building                                                #
    # ------------------------------------------------------------------ #

    def build_review_request(
        self,
        analyzers_comments: list[AnalyzerComments],
        file_patches: dict[str, str | None],
    ) -> ReviewRequest:
        footer = self.config.comment_footer
        global_texts: list[str] = []
        drafts: list[DraftComment] = []
        parsed: dict[str, PatchPositions] = {}

        for ac in analyzers_comments:
            feedback = ac.config.feedback
            texts, scoped = partition(ac.comments)
            global_texts.extend(apply_footer(text, footer, feedback) for text in texts)

            for path, comments in scoped.items():
                if path not in file_patches:
                    logger.debug("Skipping %d comment(s) for %s: file not in diff", len(comments), path)
                    continue
                if path not in parsed:
                    parsed[path] = PatchPositions(file_patches[path])
                positions = parsed[path]

                for comment in comments:
                    position = self._position(positions, path, comment.line)
                    if position is None:
                        continue
                    drafts.append(
                        DraftComment(path=path, position=position, body=apply_footer(comment.text, footer, feedback))
                    )

        return ReviewRequest(body=join_global(global_texts), event=REVIEW_EVENT, comments=drafts)

    def _position(self, positions: PatchPositions, path: str, line: int) -> int | None:
        anchor = positions.anchor()
        if anchor is None:
            logger.debug("Skipping comment for %s: patch has no hunks", path)
            return None
        if not line:
            return anchor

        position = positions.for_line(line)
        if position is not None:
            return position
        if self.config.unmappable_line == "drop":
            logger.debug("Dropping comment for %s:%d (line not in diff)", path, line)
            return None
        logger.debug("Line %s:%d not in diff; attaching comment to the file", path, line)
        return anchor

    # ------------------------------------------------------------------ #
    # End-to-end operations                                                #
    # ------------------------------------------------------------------ #

    def prepare_review(
        self,
        event: ReviewEvent,
        analyzers_comments: list[AnalyzerComments],
        ctx: CallContext | None = None,
    ) -> tuple[PullRequestRef, list[ReviewRequest]]:
        """Validate the event, fetch patches and build the review request(s) without posting."""
        ctx = ctx or CallContext()
        pr = resolve_event(event)

        ctx.check()
        files = self.comparator.compare_commits(ctx, pr.owner, pr.repo, pr.base_hash, pr.head_hash)
        file_patches = {f.filename: f.patch for f in files}
        logger.debug("%s: %d changed file(s) between %s and %s", pr.full_name, len(files), pr.base_hash, pr.head_hash)

        request = self.build_review_request(analyzers_comments, file_patches)
        return pr, split_review(request, self.config.batch_limit)

    def post(
        self,
        event: ReviewEvent,
        analyzers_comments: list[AnalyzerComments],
        ctx: CallContext | None = None,
    ) -> None:
        ctx = ctx or CallContext()
        pr, requests = self.prepare_review(event, analyzers_comments, ctx)

        for idx, request in enumerate(requests, 1):
            logger.debug("Submitting review %d/%d", idx, len(requests))
            self.submit(pr, request, ctx)

    def submit(self, pr: PullRequestRef, request: ReviewRequest, ctx: CallContext | None = None) -> None:
        """Send one review request. Errors from the collaborator are not caught or retried."""
        ctx = ctx or CallContext()
        ctx.check()
        logger.debug("Creating review on %s#%d with %d inline comment(s)", pr.full_name, pr.number, len(request.comments))
        self.review_creator.create_review(ctx, pr.owner, pr.repo, pr.number, request)

    def status(self, event: ReviewEvent, status: AnalysisStatus, ctx: CallContext | None = None) -> None:
        ctx = ctx or CallContext()
        pr = resolve_event(event)
        self.report(pr, build_status_request(status, self.config), ctx)

    def report(self, pr: PullRequestRef, request: StatusRequest, ctx: CallContext | None = None) -> None:
        ctx = ctx or CallContext()
        ctx.check()
        logger.debug("Setting status %s on %s@%s", request.state, pr.full_name, pr.head_hash)
        self.status_creator.create_status(ctx, pr.owner, pr.repo, pr.head_hash, request)
