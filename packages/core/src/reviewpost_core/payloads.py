"""Load review events and analyzer comments from YAML (or JSON) files."""

from __future__ import annotations

from pathlib import Path

import yaml

from reviewpost_core.comments import AnalyzerComments, AnalyzerConfig, Comment
from reviewpost_core.events import CommitRevision, ReferencePointer, ReviewEvent


def _read(path: str):
    p = Path(path)
    if not p.exists():
        raise FileNotFoundError(f"Payload file not found: {path}")
    with open(p) as f:
        return yaml.safe_load(f)


def _pointer(data) -> ReferencePointer | None:
    if data is None:
        return None
    if not isinstance(data, dict):
        raise ValueError(f"Expected a mapping for a reference pointer, got {type(data).__name__}")
    return ReferencePointer(
        internal_repository_url=str(data.get("repository_url") or ""),
        reference_name=str(data.get("reference_name") or ""),
        hash=str(data.get("hash") or ""),
    )


def event_from_dict(data: dict) -> ReviewEvent:
    if not isinstance(data, dict):
        raise ValueError("A review event must be a mapping")
    return ReviewEvent(
        provider=str(data.get("provider") or ""),
        commit_revision=CommitRevision(base=_pointer(data.get("base")), head=_pointer(data.get("head"))),
    )


def _comment(data: dict) -> Comment:
    if not isinstance(data, dict) or "text" not in data:
        raise ValueError(f"Each comment needs a 'text' field: {data!r}")
    line = data.get("line") or 0
    if not isinstance(line, int) or line < 0:
        raise ValueError(f"Comment line must be a non-negative integer: {line!r}")
    return Comment(text=str(data["text"]), file=str(data.get("file") or ""), line=line)


def analyzer_comments_from_list(data: list) -> list[AnalyzerComments]:
    if not isinstance(data, list):
        raise ValueError("Analyzer comments must be a list")
    result = []
    for entry in data:
        if not isinstance(entry, dict):
            raise ValueError(f"Each analyzer entry must be a mapping: {entry!r}")
        analyzer = entry.get("analyzer") or {}
        if not isinstance(analyzer, dict):
            raise ValueError(f"Expected a mapping for an analyzer, got {type(analyzer).__name__}")
        result.append(
            AnalyzerComments(
                config=AnalyzerConfig(name=str(analyzer.get("name") or ""), feedback=str(analyzer.get("feedback") or "")),
                comments=[_comment(c) for c in entry.get("comments") or []],
            )
        )
    return result


def load_event(path: str) -> ReviewEvent:
    return event_from_dict(_read(path))


def load_analyzer_comments(path: str) -> list[AnalyzerComments]:
    return analyzer_comments_from_list(_read(path) or [])
