"""Analyzer comments: classification into global/scoped and body formatting."""

from __future__ import annotations

from dataclasses import dataclass, field

GLOBAL_SEPARATOR = "\n\n"
FOOTER_SEPARATOR = "\n\n"


@dataclass
class Comment:
    """A single analyzer comment.

    No ``file`` → global comment (goes to the review body).
    ``file`` without ``line`` → file-level comment.
    ``file`` and ``line`` → line-level comment (``line`` is 1-based, new revision).
    """

    text: str
    file: str = ""
    line: int = 0


@dataclass
class AnalyzerConfig:
    name: str
    feedback: str = ""  # URL inserted into the comment footer


@dataclass
class AnalyzerComments:
    config: AnalyzerConfig
    comments: list[Comment] = field(default_factory=list)


def partition(comments: list[Comment]) -> tuple[list[str], dict[str, list[Comment]]]:
    """Split comments into global texts and per-file scoped comments.

    Both keep arrival order; files appear in the order they were first seen.
    """
    global_texts: list[str] = []
    scoped: dict[str, list[Comment]] = {}
    for comment in comments:
        if not comment.file:
            global_texts.append(comment.text)
            continue
        scoped.setdefault(comment.file, []).append(comment)
    return global_texts, scoped


def apply_footer(text: str, footer_template: str, feedback: str) -> str:
    """Append the formatted feedback footer to one comment body, if configured."""
    if not footer_template or not feedback:
        return text
    return text + FOOTER_SEPARATOR + footer_template % feedback


def join_global(texts: list[str]) -> str:
    return GLOBAL_SEPARATOR.join(texts)
