"""Tests for review event validation and decoding."""

import pytest

from reviewpost_core.errors import EventNotSupportedError, ReviewPostError
from reviewpost_core.events import (
    PROVIDER,
    CommitRevision,
    PullRequestRef,
    ReferencePointer,
    ReviewEvent,
    resolve_event,
)

HASH1 = "f67e5455a86d0f2a366f1b980489fac77a373bd0"
HASH2 = "02801e1a27a0a906d59530aeb81f4cd137f2c717"


def make_event(url="https://github.com/foo/bar", head_ref="refs/pull/42/head", provider=PROVIDER):
    return ReviewEvent(
        provider=provider,
        commit_revision=CommitRevision(
            base=ReferencePointer(internal_repository_url=url, reference_name="base", hash=HASH1),
            head=ReferencePointer(internal_repository_url=url, reference_name=head_ref, hash=HASH2),
        ),
    )


class TestResolveEvent:
    def test_valid_event(self):
        assert resolve_event(make_event()) == PullRequestRef(
            owner="foo", repo="bar", number=42, base_hash=HASH1, head_hash=HASH2
        )

    def test_full_name(self):
        assert resolve_event(make_event()).full_name == "foo/bar"

    def test_unsupported_provider(self):
        with pytest.raises(EventNotSupportedError) as exc:
            resolve_event(make_event(provider="badprovider"))
        assert str(exc.value) == "event not supported: unsupported provider: badprovider"
        assert exc.value.cause == "unsupported provider: badprovider"

    def test_provider_checked_before_repository(self):
        event = ReviewEvent(provider="gitlab")
        with pytest.raises(EventNotSupportedError, match="unsupported provider: gitlab"):
            resolve_event(event)

    def test_missing_base(self):
        with pytest.raises(EventNotSupportedError) as exc:
            resolve_event(ReviewEvent(provider=PROVIDER))
        assert str(exc.value) == "event not supported: nil repository"

    def test_empty_repository_url(self):
        with pytest.raises(EventNotSupportedError, match="nil repository"):
            resolve_event(make_event(url=""))

    def test_bad_reference(self):
        with pytest.raises(EventNotSupportedError) as exc:
            resolve_event(make_event(head_ref="BAD"))
        assert str(exc.value) == "event not supported: bad PR: BAD"

    def test_missing_head(self):
        event = ReviewEvent(
            provider=PROVIDER,
            commit_revision=CommitRevision(base=ReferencePointer(internal_repository_url="https://github.com/foo/bar")),
        )
        with pytest.raises(EventNotSupportedError, match="bad PR: "):
            resolve_event(event)

    @pytest.mark.parametrize(
        "ref",
        ["refs/pull/0/head", "refs/pull/abc/head", "refs/pull/42/merge", "refs/heads/main", "refs/pull/-1/head"],
    )
    def test_rejects_non_pull_request_references(self, ref):
        with pytest.raises(EventNotSupportedError, match=f"bad PR: {ref}"):
            resolve_event(make_event(head_ref=ref))

    def test_trailing_newline_after_reference_rejected(self):
        with pytest.raises(EventNotSupportedError, match="bad PR: "):
            resolve_event(make_event(head_ref="refs/pull/42/head\n"))

    def test_is_a_review_post_error(self):
        with pytest.raises(ReviewPostError):
            resolve_event(make_event(provider="other"))


class TestRepositoryUrl:
    @pytest.mark.parametrize(
        "url",
        [
            "https://github.com/foo/bar",
            "https://github.com/foo/bar.git",
            "https://github.com/foo/bar/",
            "git@github.com:foo/bar.git",
            "https://github.example.com/org/foo/bar",
        ],
    )
    def test_owner_and_repo_from_last_two_segments(self, url):
        pr = resolve_event(make_event(url=url))
        assert (pr.owner, pr.repo) == ("foo", "bar")

    def test_single_segment_rejected(self):
        with pytest.raises(EventNotSupportedError, match="bad repository: https://github.com/foo"):
            resolve_event(make_event(url="https://github.com/foo"))
