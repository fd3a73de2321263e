"""Schema display commands and project-specific custom field examples."""

from __future__ import annotations

import argparse
import enum
import json
import sys
from typing import IO, Any, Iterable, Mapping, Sequence

from ytdkit.common import InputError, ParsedArgs, YtdError
from ytdkit.schema_catalog import JsonCommandSchema, find_schema, schemas, unsupported_target

SCHEMA_RESOURCES = ("ticket", "article", "board", "sprint")
_TARGET_USAGE = "Usage: ytd schema <ticket|article|board|sprint> <create|update>"

_SINGLE_OR_MULTI = {
    "UserProjectCustomField": "User",
    "EnumProjectCustomField": "Enum",
    "OwnedProjectCustomField": "Owned",
    "VersionProjectCustomField": "Version",
}

_FIXED_PROJECT_TYPES = {
    "StateProjectCustomField": "StateIssueCustomField",
    "PeriodProjectCustomField": "PeriodIssueCustomField",
    "SimpleProjectCustomField": "SimpleIssueCustomField",
}

_SINGLE_OR_MULTI_VALUE_TYPES = {
    "user": "User",
    "enum": "Enum",
    "version": "Version",
    "ownedField": "Owned",
}

_FIXED_VALUE_TYPES = {
    "state": "StateIssueCustomField",
    "period": "PeriodIssueCustomField",
    "date": "DateIssueCustomField",
    "integer": "IntegerIssueCustomField",
    "float": "FloatIssueCustomField",
    "string": "SimpleIssueCustomField",
    "text": "SimpleIssueCustomField",
}


class OutputFormat(enum.Enum):
    TEXT = "text"
    JSON = "json"
    RAW = "raw"
    MD = "md"


def validate_format(fmt: OutputFormat) -> None:
    """Raise unless the format is one that schema output supports."""
    if fmt not in (OutputFormat.TEXT, OutputFormat.JSON):
        raise InputError("ytd schema only supports --format text or --format json")


def _compact_json(value: Any) -> str:
    return json.dumps(value, separators=(",", ":"), sort_keys=True, ensure_ascii=False)


def write_schema_text(schema: JsonCommandSchema, out: IO[str]) -> None:
    """Write the human-readable description of a schema."""
    out.write(f"{schema.command}\n\n")
    out.write(f"Usage:\n  {schema.usage}\n\n")
    out.write("JSON input:\n")
    out.write("  via --json or stdin; stdin takes precedence\n")
    if schema.required_flags:
        out.write("\nRequired flags:\n")
        for flag in schema.required_flags:
            out.write(f"  --{flag.name} <{flag.value}>  {flag.description}\n")
    out.write("\nFields:\n")
    for item in schema.fields:
        out.write(
            f"  {item.name:<16} {item.value_type:<14} {item.requirement:<22} "
            f"{item.description}\n"
        )
    if schema.rules:
        out.write("\nRules:\n")
        for rule in schema.rules:
            out.write(f"  - {rule}\n")
    if schema.project is not None:
        project = schema.project
        out.write(
            f"\nProject:\n  {project['shortName']} ({project['name']}, {project['id']})\n"
        )
    if schema.project_fields:
        out.write("\nProject custom fields:\n")
        for pf in schema.project_fields:
            out.write(f"  {pf['name']:<24} {pf['type']:<28} {pf['valueShape']}\n")
    if schema.examples:
        out.write("\nExamples:\n")
        for example in schema.examples:
            out.write(f"  {example}\n")
    if schema.project_examples:
        out.write("\nProject custom field examples:\n")
        for example in schema.project_examples:
            out.write(f"  {example['field']}: {_compact_json(example['json'])}\n")


def _prototype(field: Mapping[str, Any]) -> Mapping[str, Any]:
    return field.get("field") or {}


def _prototype_field_type(field: Mapping[str, Any]) -> Mapping[str, Any]:
    return _prototype(field).get("fieldType") or {}


def _project_field_name(field: Mapping[str, Any]) -> str | None:
    name = _prototype(field).get("name")
    if name is None:
        name = field.get("name")
    if not isinstance(name, str) or not name.strip():
        return None
    return name


def issue_custom_field_type(field: Mapping[str, Any]) -> str:
    """Return the issue custom field ``$type`` matching a project custom field."""
    is_multi = _prototype_field_type(field).get("isMultiValue") is True
    prefix = "Multi" if is_multi else "Single"
    field_type = field.get("$type")
    if isinstance(field_type, str):
        if field_type in _SINGLE_OR_MULTI:
            return f"{prefix}{_SINGLE_OR_MULTI[field_type]}IssueCustomField"
        if field_type in _FIXED_PROJECT_TYPES:
            return _FIXED_PROJECT_TYPES[field_type]
        if field_type.endswith("ProjectCustomField"):
            return field_type[: -len("ProjectCustomField")] + "IssueCustomField"
        if field_type.endswith("IssueCustomField"):
            return field_type

    value_type = _prototype_field_type(field).get("valueType") or ""
    if value_type in _SINGLE_OR_MULTI_VALUE_TYPES:
        return f"{prefix}{_SINGLE_OR_MULTI_VALUE_TYPES[value_type]}IssueCustomField"
    return _FIXED_VALUE_TYPES.get(value_type, "IssueCustomField")


def _first_bundle_ref(field: Mapping[str, Any], preferred_key: str) -> dict[str, str] | None:
    bundle = field.get("bundle") or {}
    values = bundle.get("values") or []
    if not values or not isinstance(values[0], Mapping):
        return None
    first = values[0]
    for key in (preferred_key, "name", "login"):
        value = first.get(key)
        if isinstance(value, str):
            return {key: value}
    return None


def example_value_for_project_field(field: Mapping[str, Any], issue_type: str) -> Any:
    """Return an example value for a custom field of the given issue type."""
    if "User" in issue_type or "Owned" in issue_type:
        return _first_bundle_ref(field, "login") or {"login": "jane.doe"}
    if "Enum" in issue_type or "State" in issue_type or "Version" in issue_type:
        item = _first_bundle_ref(field, "name") or {"name": "Example"}
        return [item] if issue_type.startswith("Multi") else item
    if "Period" in issue_type:
        return {"minutes": 60}
    if "Date" in issue_type:
        return 1735689600000
    if "Integer" in issue_type:
        return 1
    if "Float" in issue_type:
        return 1.0
    return "Example"


def value_shape_for_type(issue_type: str) -> str:
    """Describe the JSON shape expected for a value of the given issue type."""
    if issue_type.startswith("Multi"):
        return "array of value refs"
    if "User" in issue_type or "Owned" in issue_type:
        return 'object, for example {"login":"..."}'
    if "Enum" in issue_type or "State" in issue_type or "Version" in issue_type:
        return 'object, for example {"name":"..."}'
    if "Period" in issue_type:
        return 'object, for example {"minutes":60}'
    return "primitive or API-shaped value"


def add_project_ticket_fields(
    schema: JsonCommandSchema, fields: Iterable[Mapping[str, Any]]
) -> None:
    """Add a project's custom fields and examples to a ticket schema."""
    schema.rules.append(
        "customFields is API-shaped and validated by YouTrack using the project field "
        "configuration below."
    )
    for project_field in fields:
        name = _project_field_name(project_field)
        if name is None:
            continue
        issue_type = issue_custom_field_type(project_field)
        custom_field = {
            "$type": issue_type,
            "name": name,
            "value": example_value_for_project_field(project_field, issue_type),
        }
        schema.project_fields.append(
            {
                "name": name,
                "type": issue_type,
                "required": project_field.get("canBeEmpty") is False,
                "valueShape": value_shape_for_type(issue_type),
                "example": custom_field,
            }
        )
        schema.project_examples.append(
            {"field": name, "json": {"customFields": [custom_field]}}
        )


def render_list(fmt: OutputFormat) -> str:
    """Render the list of schema targets."""
    validate_format(fmt)
    items = [
        {"resource": s.resource, "action": s.action, "command": s.command} for s in schemas()
    ]
    if fmt is OutputFormat.JSON:
        return json.dumps(items, indent=2, ensure_ascii=False) + "\n"
    lines = ["JSON input schemas:", ""]
    lines.extend(f"  {item['command']}" for item in items)
    lines.append("")
    lines.append("Run `ytd schema <resource> <action>` for fields.")
    lines.append("Use `--format json` for machine-readable schema metadata.")
    return "\n".join(lines) + "\n"


def _print_schema(schema: JsonCommandSchema, fmt: OutputFormat) -> None:
    if fmt is OutputFormat.JSON:
        print(json.dumps(schema.to_dict(), indent=2, ensure_ascii=False))
    else:
        write_schema_text(schema, sys.stdout)


def run(args: ParsedArgs, fmt: OutputFormat) -> None:
    """Print the schema list or the schema of one resource action."""
    validate_format(fmt)
    action = args.action
    if action is None or action == "list":
        sys.stdout.write(render_list(fmt))
        return
    if action in SCHEMA_RESOURCES:
        if not args.positional:
            raise InputError(_TARGET_USAGE)
        target_action = args.positional[0]
        schema = find_schema(action, target_action)
        if schema is None:
            raise InputError(unsupported_target(action, target_action))
        _print_schema(schema, fmt)
        return
    raise InputError(unsupported_target(action, None))


def main(argv: Sequence[str] | None = None) -> int:
    """Command entry point; returns the process exit status."""
    parser = argparse.ArgumentParser(prog="ytd schema", description="Show JSON input schemas.")
    parser.add_argument("target", nargs="*", help="resource and action, e.g. ticket create")
    parser.add_argument(
        "--format",
        dest="fmt",
        choices=[f.value for f in OutputFormat],
        default=OutputFormat.TEXT.value,
    )
    ns = parser.parse_args(list(sys.argv[1:] if argv is None else argv))
    target = list(ns.target)
    args = ParsedArgs(
        resource="schema",
        action=target[0] if target else None,
        positional=target[1:],
    )
    try:
        run(args, OutputFormat(ns.fmt))
    except YtdError as err:
        print(f"Error: {err}", file=sys.stderr)
        return 1
    return 0