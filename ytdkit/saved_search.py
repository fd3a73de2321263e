"""Saved search lookup and project filtering."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable

from ytdkit.common import InputError


@dataclass(frozen=True)
class SavedQuery:
    """A saved search stored on the server."""

    id: str
    name: str | None = None
    query: str | None = None


def _ascii_lower(value: str) -> str:
    return "".join(ch.lower() if "A" <= ch <= "Z" else ch for ch in value)


def _compact_query_text(value: str) -> str:
    return "".join(ch for ch in value if not ch.isspace() and ch not in "{}")


def _is_token_char(ch: str) -> bool:
    return ch.isalnum() or ch in "-_. "


def _query_tokens(value: str) -> list[str]:
    tokens: list[str] = []
    current: list[str] = []
    for ch in value:
        if _is_token_char(ch):
            current.append(ch)
        else:
            tokens.append("".join(current))
            current = []
    tokens.append("".join(current))
    return [token.strip() for token in tokens if token.strip()]


def saved_query_matches_project(query: SavedQuery, project: str) -> bool:
    """Return True when the saved query text refers to the given project."""
    if query.query is None:
        return False
    project = project.strip()
    if not project:
        return False

    query_lower = query.query.lower()
    project_lower = project.lower()
    compact_query = _compact_query_text(query_lower)
    compact_project = _compact_query_text(project_lower)

    if any(f"{prefix}{compact_project}" in compact_query for prefix in ("project:", "in:")):
        return True

    return project_lower in _query_tokens(query_lower)


def find_saved_query(queries: Iterable[SavedQuery], name_or_id: str) -> SavedQuery:
    """Find a saved query by ID first, then by name ignoring ASCII case."""
    queries = list(queries)
    for query in queries:
        if query.id == name_or_id:
            return query
    wanted = _ascii_lower(name_or_id)
    for query in queries:
        if query.name is not None and _ascii_lower(query.name) == wanted:
            return query
    raise InputError(f"Saved search not found: {name_or_id}")