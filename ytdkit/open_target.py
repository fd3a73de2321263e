"""Parsing of open targets (issues, articles, projects) and URL building."""

from __future__ import annotations

import enum
from dataclasses import dataclass

from ytdkit.common import InputError


class TargetKind(enum.Enum):
    ISSUE = "issue"
    ARTICLE = "article"
    PROJECT = "project"
    KNOWLEDGE_BASE = "knowledge_base"


@dataclass(frozen=True)
class OpenTarget:
    """A parsed target; for knowledge bases the value is the project key."""

    kind: TargetKind
    value: str


def _is_valid_project_key(value: str) -> bool:
    return (
        bool(value)
        and not value.startswith("-")
        and not value.endswith("-")
        and all((ch.isascii() and ch.isalnum()) or ch == "-" for ch in value)
    )


def _is_numeric(value: str) -> bool:
    return bool(value) and all(ch.isascii() and ch.isdigit() for ch in value)


def _unsupported(value: str) -> InputError:
    return InputError(f"Unsupported target format: {value}")


def parse_target(value: str) -> OpenTarget:
    """Parse an issue, article, project or knowledge base identifier."""
    text = value.strip()
    if not text:
        raise InputError("target cannot be empty")

    project, sep, article_no = text.rpartition("-A-")
    if sep:
        if _is_valid_project_key(project) and _is_numeric(article_no):
            return OpenTarget(TargetKind.ARTICLE, text)
        raise _unsupported(text)

    if text.endswith("-A"):
        project = text[: -len("-A")]
        if _is_valid_project_key(project):
            return OpenTarget(TargetKind.KNOWLEDGE_BASE, project)
        raise _unsupported(text)

    project, sep, issue_no = text.rpartition("-")
    if sep:
        if _is_valid_project_key(project) and _is_numeric(issue_no):
            return OpenTarget(TargetKind.ISSUE, text)
        raise _unsupported(text)

    if _is_valid_project_key(text):
        return OpenTarget(TargetKind.PROJECT, text)

    raise _unsupported(text)


def build_url(base_url: str, target: OpenTarget) -> str:
    """Build the web URL for a target on the given server."""
    base = base_url.rstrip("/")
    if target.kind is TargetKind.ISSUE:
        return f"{base}/issue/{target.value}"
    if target.kind is TargetKind.ARTICLE:
        project, sep, _ = target.value.rpartition("-A-")
        if not sep:
            raise _unsupported(target.value)
        return f"{base}/projects/{project}/articles/{target.value}"
    if target.kind is TargetKind.PROJECT:
        return f"{base}/projects/{target.value}"
    return f"{base}/articles/{target.value}"