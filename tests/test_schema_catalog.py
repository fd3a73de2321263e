from ytdkit.schema_catalog import (
    JsonCommandSchema,
    SchemaField,
    SchemaFlag,
    find_schema,
    schemas,
    unsupported_target,
)


def test_list_contains_all_schema_targets():
    assert [schema.command for schema in schemas()] == [
        "ticket create",
        "ticket update",
        "article create",
        "article update",
        "board create",
        "board update",
        "sprint create",
        "sprint update",
    ]


def test_json_schema_shape_is_stable():
    value = find_schema("ticket", "create").to_dict()
    assert value["command"] == "ticket create"
    assert value["strictFields"] is True
    assert value["accepts"] == {"jsonFlag": True, "stdin": True}
    names = [item["name"] for item in value["fields"]]
    assert "summary" in names
    assert "customFields" in names
    assert value["requiredFlags"] == [
        {
            "name": "project",
            "value": "id",
            "description": "Project short name or YouTrack project ID",
        }
    ]


def test_empty_optional_parts_are_left_out():
    value = find_schema("ticket", "update").to_dict()
    assert "requiredFlags" not in value
    assert "project" not in value
    assert "projectFields" not in value
    assert "projectExamples" not in value


def test_field_uses_type_key():
    value = find_schema("ticket", "create").to_dict()
    summary = value["fields"][0]
    assert summary == {
        "name": "summary",
        "type": "string",
        "required": True,
        "requirement": "required",
        "description": "Ticket summary",
        "example": "Fix login",
    }


def test_article_update_documents_parent_and_unknown_fields():
    schema = find_schema("article", "update")
    assert "parentArticle" in [item.name for item in schema.fields]
    assert "parentArticle:null clears the parent article." in schema.rules
    assert any("Unknown fields are rejected" in rule for rule in schema.rules)


def test_board_create_documents_conflict_and_pass_through():
    schema = find_schema("board", "create")
    names = [item.name for item in schema.fields]
    assert names[:2] == ["name", "projects"]
    assert "--project and JSON projects cannot be combined." in schema.rules
    assert any("pass through" in rule for rule in schema.rules)
    assert schema.fields[0].requirement == "required unless --name"


def test_board_update_fields_are_optional():
    schema = find_schema("board", "update")
    assert all(not item.required for item in schema.fields)
    assert schema.fields[1].requirement == "optional"


def test_sprint_update_documents_pass_through():
    schema = find_schema("sprint", "update")
    assert schema.fields[0].name == "name"
    assert any("pass through" in rule for rule in schema.rules)
    assert schema.strict_fields is False


def test_sprint_create_requires_board_flag():
    schema = find_schema("sprint", "create")
    assert schema.required_flags == [
        SchemaFlag("board", "board-id", "Board ID that scopes the sprint")
    ]
    assert schema.fields[0].required is True


def test_find_schema_returns_none_for_unknown():
    assert find_schema("ticket", "delete") is None
    assert find_schema("tag", "create") is None


def test_find_schema_returns_independent_copies():
    first = find_schema("ticket", "create")
    first.rules.append("extra")
    second = find_schema("ticket", "create")
    assert "extra" not in second.rules


def test_unsupported_target_lists_supported_targets():
    message = unsupported_target("ticket", "delete")
    assert "Unsupported schema target: ticket delete" in message
    assert "ticket create" in message


def test_unsupported_target_without_action():
    message = unsupported_target("tag", None)
    assert message.startswith("Unsupported schema target: tag. Supported targets: ")
    assert message.endswith("sprint create, sprint update")


def test_to_dict_includes_project_parts_when_set():
    schema = JsonCommandSchema(
        resource="ticket",
        action="create",
        usage="usage",
        strict_fields=True,
        fields=[SchemaField("summary", "string", True, "required", "d", "e")],
        project={"id": "0-96", "shortName": "DWP", "name": "DW Playground"},
        project_fields=[{"name": "Assignee"}],
        project_examples=[{"field": "Assignee", "json": {}}],
    )
    value = schema.to_dict()
    assert value["project"] == {"id": "0-96", "shortName": "DWP", "name": "DW Playground"}
    assert value["projectFields"] == [{"name": "Assignee"}]
    assert value["projectExamples"] == [{"field": "Assignee", "json": {}}]
    assert "rules" not in value
    assert "examples" not in value