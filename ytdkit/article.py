"""Request bodies for creating, updating and moving knowledge base articles."""

from __future__ import annotations

from typing import Any, Callable

from ytdkit.article_fields import build_parent_article_input, validate_article_json_fields
from ytdkit.common import InputError, ParsedArgs

ARTICLE_FIELDS = ("content", "parentArticle", "summary")


def _string_field(data: dict[str, Any], key: str) -> str | None:
    value = data.get(key)
    return value if isinstance(value, str) else None


def build_create_article_input(
    args: ParsedArgs,
    data: Any,
    resolve_article_id: Callable[[str], str],
    visibility: dict[str, Any] | None,
) -> dict[str, Any]:
    """Build the body for creating an article from --project and JSON input.

    ``visibility`` is the already resolved visibility payload, or None.
    """
    validate_article_json_fields(data, ARTICLE_FIELDS)
    project = args.flags.get("project")
    if project is None:
        raise InputError("--project is required")
    summary = _string_field(data, "summary")
    if summary is None:
        raise InputError("summary is required")

    body: dict[str, Any] = {
        "project": {"shortName": project},
        "summary": summary,
    }
    content = _string_field(data, "content")
    if content is not None:
        body["content"] = content
    if visibility is not None:
        body["visibility"] = visibility
    parent = data.get("parentArticle")
    if parent is not None:
        body["parentArticle"] = build_parent_article_input(parent, resolve_article_id)
    return body


def build_update_article_input(
    data: Any,
    resolve_article_id: Callable[[str], str],
    visibility: dict[str, Any] | None,
) -> dict[str, Any]:
    """Build the body for updating an article.

    A JSON ``parentArticle`` of null clears the parent. ``visibility`` is the
    explicit visibility payload from flags, or None to leave it unchanged.
    """
    validate_article_json_fields(data, ARTICLE_FIELDS)
    body: dict[str, Any] = {}

    summary = _string_field(data, "summary")
    if summary is not None:
        body["summary"] = summary
    content = _string_field(data, "content")
    if content is not None:
        body["content"] = content
    if visibility is not None:
        body["visibility"] = visibility
    if "parentArticle" in data:
        parent = data["parentArticle"]
        body["parentArticle"] = (
            None if parent is None else build_parent_article_input(parent, resolve_article_id)
        )

    if not body:
        raise InputError(
            "At least one update field is required. "
            "Use JSON fields or explicit visibility flags."
        )
    return body


def build_move_article_input(
    parent: str, resolve_article_id: Callable[[str], str]
) -> dict[str, Any]:
    """Build the body that moves an article under a parent, or to the top with "none"."""
    if parent == "none":
        return {"parentArticle": None}
    return {"parentArticle": build_parent_article_input({"id": parent}, resolve_article_id)}