import io
import json

import pytest

from ytdkit.common import InputError, ParsedArgs
from ytdkit.schema import (
    OutputFormat,
    add_project_ticket_fields,
    example_value_for_project_field,
    issue_custom_field_type,
    main,
    render_list,
    run,
    validate_format,
    value_shape_for_type,
    write_schema_text,
)
from ytdkit.schema_catalog import find_schema


def text_for(resource, action):
    schema = find_schema(resource, action)
    out = io.StringIO()
    write_schema_text(schema, out)
    return out.getvalue()


PROJECT_FIELDS = [
    {
        "id": "92-1",
        "field": {
            "id": "58-1",
            "name": "Assignee",
            "fieldType": {"id": "user[1]", "valueType": "user", "isMultiValue": False},
        },
        "$type": "UserProjectCustomField",
    },
    {
        "id": "92-2",
        "field": {
            "id": "58-2",
            "name": "Plattform",
            "fieldType": {"id": "enum[*]", "valueType": "enum", "isMultiValue": True},
        },
        "bundle": {"values": [{"id": "67-1", "name": "iOS", "$type": "EnumBundleElement"}]},
        "$type": "EnumProjectCustomField",
    },
]


def test_list_json_contains_all_schema_targets():
    items = json.loads(render_list(OutputFormat.JSON))
    assert [item["command"] for item in items] == [
        "ticket create",
        "ticket update",
        "article create",
        "article update",
        "board create",
        "board update",
        "sprint create",
        "sprint update",
    ]


def test_list_text_layout():
    text = render_list(OutputFormat.TEXT)
    assert text.startswith("JSON input schemas:\n\n  ticket create\n")
    assert text.endswith(
        "\nRun `ytd schema <resource> <action>` for fields.\n"
        "Use `--format json` for machine-readable schema metadata.\n"
    )


def test_ticket_create_text_includes_fields_project_and_stdin():
    text = text_for("ticket", "create")
    assert "summary" in text
    assert "description" in text
    assert "--project" in text
    assert "stdin takes precedence" in text


def test_article_update_text_documents_parent_and_unknown_fields():
    text = text_for("article", "update")
    assert "parentArticle" in text
    assert "parentArticle:null" in text
    assert "Unknown fields are rejected" in text


def test_board_create_text_documents_conflict_and_pass_through():
    text = text_for("board", "create")
    assert "name" in text
    assert "projects" in text
    assert "--project and JSON projects cannot be combined" in text
    assert "pass through" in text


def test_sprint_update_text_documents_pass_through():
    text = text_for("sprint", "update")
    assert "name" in text
    assert "pass through" in text


@pytest.mark.parametrize("fmt", [OutputFormat.RAW, OutputFormat.MD])
def test_validate_rejects_unsupported_formats(fmt):
    with pytest.raises(InputError, match="only supports --format text or --format json"):
        validate_format(fmt)


def test_run_json_schema_shape_is_stable(capsys):
    run(ParsedArgs(resource="schema", action="ticket", positional=["create"]), OutputFormat.JSON)
    value = json.loads(capsys.readouterr().out)
    assert value["command"] == "ticket create"
    assert value["strictFields"] is True
    names = [field["name"] for field in value["fields"]]
    assert "summary" in names
    assert "customFields" in names


def test_run_requires_action():
    with pytest.raises(InputError) as info:
        run(ParsedArgs(resource="schema", action="board"), OutputFormat.TEXT)
    assert str(info.value) == "Usage: ytd schema <ticket|article|board|sprint> <create|update>"


def test_run_unsupported_target_lists_supported_targets():
    with pytest.raises(InputError) as info:
        run(
            ParsedArgs(resource="schema", action="ticket", positional=["delete"]),
            OutputFormat.TEXT,
        )
    message = str(info.value)
    assert "Unsupported schema target: ticket delete" in message
    assert "ticket create" in message


def test_run_unknown_resource():
    with pytest.raises(InputError, match="Unsupported schema target: tag. Supported"):
        run(ParsedArgs(resource="schema", action="tag"), OutputFormat.TEXT)


def test_project_ticket_schema_generates_custom_field_examples():
    schema = find_schema("ticket", "create")
    add_project_ticket_fields(schema, PROJECT_FIELDS)
    value = schema.to_dict()
    project_fields = value["projectFields"]
    assert any(
        f["name"] == "Assignee" and f["type"] == "SingleUserIssueCustomField"
        for f in project_fields
    )
    assert any(
        f["name"] == "Plattform" and f["type"] == "MultiEnumIssueCustomField"
        for f in project_fields
    )
    examples = value["projectExamples"]
    assert any(e["json"]["customFields"][0]["value"] == {"login": "jane.doe"} for e in examples)
    assert any(e["json"]["customFields"][0]["value"] == [{"name": "iOS"}] for e in examples)
    assert value["rules"][-1].startswith("customFields is API-shaped")


def test_project_examples_render_compact_json():
    schema = find_schema("ticket", "update")
    add_project_ticket_fields(schema, PROJECT_FIELDS[:1])
    out = io.StringIO()
    write_schema_text(schema, out)
    assert (
        '  Assignee: {"customFields":[{"$type":"SingleUserIssueCustomField",'
        '"name":"Assignee","value":{"login":"jane.doe"}}]}'
    ) in out.getvalue().splitlines()


def test_fields_without_names_are_skipped_and_required_follows_can_be_empty():
    schema = find_schema("ticket", "create")
    add_project_ticket_fields(
        schema,
        [
            {"field": {"name": "  "}, "$type": "SimpleProjectCustomField"},
            {"name": "Estimate", "$type": "PeriodProjectCustomField", "canBeEmpty": False},
        ],
    )
    assert [f["name"] for f in schema.project_fields] == ["Estimate"]
    assert schema.project_fields[0]["required"] is True
    assert schema.project_fields[0]["example"]["value"] == {"minutes": 60}


@pytest.mark.parametrize(
    "field, expected",
    [
        ({"$type": "StateProjectCustomField"}, "StateIssueCustomField"),
        ({"$type": "VersionProjectCustomField"}, "SingleVersionIssueCustomField"),
        ({"$type": "DateProjectCustomField"}, "DateIssueCustomField"),
        ({"$type": "SingleEnumIssueCustomField"}, "SingleEnumIssueCustomField"),
        ({"field": {"fieldType": {"valueType": "integer"}}}, "IntegerIssueCustomField"),
        ({"field": {"fieldType": {"valueType": "text"}}}, "SimpleIssueCustomField"),
        (
            {"field": {"fieldType": {"valueType": "ownedField", "isMultiValue": True}}},
            "MultiOwnedIssueCustomField",
        ),
        ({}, "IssueCustomField"),
    ],
)
def test_issue_custom_field_type(field, expected):
    assert issue_custom_field_type(field) == expected


@pytest.mark.parametrize(
    "issue_type, expected",
    [
        ("DateIssueCustomField", 1735689600000),
        ("IntegerIssueCustomField", 1),
        ("FloatIssueCustomField", 1.0),
        ("SimpleIssueCustomField", "Example"),
        ("SingleEnumIssueCustomField", {"name": "Example"}),
        ("MultiVersionIssueCustomField", [{"name": "Example"}]),
    ],
)
def test_example_values(issue_type, expected):
    assert example_value_for_project_field({}, issue_type) == expected


def test_example_value_prefers_bundle_value():
    field = {"bundle": {"values": [{"login": "alice", "name": "Alice"}]}}
    assert example_value_for_project_field(field, "SingleUserIssueCustomField") == {
        "login": "alice"
    }


@pytest.mark.parametrize(
    "issue_type, expected",
    [
        ("MultiUserIssueCustomField", "array of value refs"),
        ("SingleUserIssueCustomField", 'object, for example {"login":"..."}'),
        ("StateIssueCustomField", 'object, for example {"name":"..."}'),
        ("PeriodIssueCustomField", 'object, for example {"minutes":60}'),
        ("IntegerIssueCustomField", "primitive or API-shaped value"),
    ],
)
def test_value_shape_for_type(issue_type, expected):
    assert value_shape_for_type(issue_type) == expected


def test_main_prints_schema_and_succeeds(capsys):
    assert main(["sprint", "create", "--format", "json"]) == 0
    value = json.loads(capsys.readouterr().out)
    assert value["command"] == "sprint create"
    assert value["requiredFlags"][0]["name"] == "board"


def test_main_reports_errors(capsys):
    assert main(["ticket", "--format", "raw"]) == 1
    assert "only supports --format text or --format json" in capsys.readouterr().err