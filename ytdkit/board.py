"""Validation and request bodies for agile board commands."""

from __future__ import annotations

from typing import Any, Callable

from ytdkit.common import InputError, ParsedArgs

VALID_TEMPLATES = ("kanban", "scrum", "version", "custom", "personal")


def validate_template(template: str | None) -> str | None:
    """Return the template if it is one of the known board templates."""
    if template is not None and template not in VALID_TEMPLATES:
        raise InputError(
            f"Invalid template: {template}. Expected one of: {', '.join(VALID_TEMPLATES)}"
        )
    return template


def _object_or_empty(data: Any, command: str) -> dict[str, Any]:
    if data is None:
        return {}
    if isinstance(data, dict):
        return dict(data)
    raise InputError(f"{command} requires a JSON object.")


def _resolve_project_refs(
    projects: str, resolve_project_id: Callable[[str], str]
) -> list[dict[str, str]]:
    refs = [part.strip() for part in projects.split(",") if part.strip()]
    if not refs:
        raise InputError("--project must not be empty")
    return [{"id": resolve_project_id(ref)} for ref in refs]


def _require_non_empty_string(body: dict[str, Any], key: str, message: str) -> None:
    value = body.get(key)
    if not (isinstance(value, str) and value.strip()):
        raise InputError(message)


def _require_non_empty_array(body: dict[str, Any], key: str, message: str) -> None:
    value = body.get(key)
    if not (isinstance(value, list) and value):
        raise InputError(message)


def build_create_agile_body(
    args: ParsedArgs,
    data: Any,
    resolve_project_id: Callable[[str], str],
) -> dict[str, Any]:
    """Build the body for creating a board from flags and optional JSON."""
    body = _object_or_empty(data, "board create")

    if "project" in args.flags and "projects" in body:
        raise InputError("Use either --project or JSON projects, not both.")

    projects = args.flags.get("project")
    if projects is not None:
        body["projects"] = _resolve_project_refs(projects, resolve_project_id)

    name = args.flags.get("name")
    if name is not None:
        body["name"] = name

    _require_non_empty_string(body, "name", "--name or JSON name is required")
    _require_non_empty_array(body, "projects", "--project or JSON projects is required")
    return body


def build_update_agile_body(args: ParsedArgs, data: Any) -> dict[str, Any]:
    """Build the body for updating a board from flags and optional JSON."""
    if "project" in args.flags:
        raise InputError(
            "board update does not accept --project; use JSON projects for project changes."
        )

    body = _object_or_empty(data, "board update")

    name = args.flags.get("name")
    if name is not None:
        body["name"] = name

    if not body:
        raise InputError("At least one update field is required. Use --name or --json.")
    return body