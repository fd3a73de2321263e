"""Validation helpers for article JSON input."""

from __future__ import annotations

from typing import Any, Callable, Sequence

from ytdkit.common import InputError, ParsedArgs


def validate_article_json_fields(data: Any, allowed: Sequence[str]) -> None:
    """Raise if the JSON input is not an object or holds unknown fields."""
    if not isinstance(data, dict):
        raise InputError("JSON input must be an object")
    unknown = sorted(key for key in data if key not in allowed)
    if not unknown:
        return
    plural = "" if len(unknown) == 1 else "s"
    raise InputError(
        f"Unknown article JSON field{plural}: {', '.join(unknown)}. "
        f"Allowed fields: {', '.join(allowed)}"
    )


def remove_comments_if_requested(value: Any, args: ParsedArgs) -> Any:
    """Return the value without its comments when --no-comments was given."""
    if not args.flag_enabled("no-comments") or not isinstance(value, dict):
        return value
    return {key: item for key, item in value.items() if key != "comments"}


def build_parent_article_input(
    value: Any, resolve_article_id: Callable[[str], str]
) -> dict[str, str]:
    """Build a parent article reference, resolving readable IDs to internal ones."""
    if not isinstance(value, dict):
        raise InputError("parentArticle must be an object with id")

    article_id = value.get("id")
    if isinstance(article_id, str):
        if not article_id.strip():
            raise InputError("parentArticle.id must not be empty")
        return {"id": resolve_article_id(article_id)}

    yt_id = value.get("ytId")
    if isinstance(yt_id, str):
        if not yt_id.strip():
            raise InputError("parentArticle.ytId must not be empty")
        return {"id": yt_id}

    raise InputError("parentArticle must include id or ytId")