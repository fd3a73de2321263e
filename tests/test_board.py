import pytest

from ytdkit.board import build_create_agile_body, build_update_agile_body, validate_template
from ytdkit.common import InputError, ParsedArgs


def _resolver(mapping=None):
    mapping = mapping or {"DWP": "0-96"}
    calls = []

    def resolve(project):
        calls.append(project)
        if project not in mapping:
            raise InputError(f"Project not found: {project}")
        return mapping[project]

    resolve.calls = calls
    return resolve


def _args(flags, action="create"):
    return ParsedArgs(resource="board", action=action, flags=dict(flags))


def test_validates_templates():
    assert validate_template("scrum") == "scrum"
    assert validate_template(None) is None
    with pytest.raises(InputError) as excinfo:
        validate_template("invalid")
    assert str(excinfo.value) == (
        "Invalid template: invalid. Expected one of: kanban, scrum, version, custom, personal"
    )


def test_create_body_uses_name_and_resolved_project_flags():
    body = build_create_agile_body(
        _args({"name": "Board", "project": "DWP"}), None, _resolver()
    )
    assert body == {"name": "Board", "projects": [{"id": "0-96"}]}


def test_create_body_resolves_comma_separated_projects():
    resolve = _resolver({"DWP": "0-96", "IT": "0-97"})
    body = build_create_agile_body(
        _args({"name": "Board", "project": " DWP , ,IT"}), None, resolve
    )
    assert body["projects"] == [{"id": "0-96"}, {"id": "0-97"}]
    assert resolve.calls == ["DWP", "IT"]


def test_create_body_rejects_blank_project_flag():
    with pytest.raises(InputError, match="^--project must not be empty$"):
        build_create_agile_body(_args({"name": "Board", "project": " , "}), None, _resolver())


def test_create_body_rejects_project_flag_and_json_projects():
    resolve = _resolver()
    with pytest.raises(InputError, match="not both"):
        build_create_agile_body(
            _args({"name": "Board", "project": "DWP"}),
            {"projects": [{"id": "0-96"}]},
            resolve,
        )
    assert resolve.calls == []


def test_create_body_allows_json_only_required_fields():
    body = build_create_agile_body(
        _args({}), {"name": "Board", "projects": [{"id": "0-96"}]}, _resolver()
    )
    assert body == {"name": "Board", "projects": [{"id": "0-96"}]}


def test_create_body_requires_name_and_projects():
    resolver = _resolver({"0-96": "0-96"})
    with pytest.raises(InputError, match="^--name or JSON name is required$"):
        build_create_agile_body(_args({"project": "0-96"}), None, resolver)
    with pytest.raises(InputError, match="^--project or JSON projects is required$"):
        build_create_agile_body(_args({"name": "Board"}), None, resolver)


def test_create_body_rejects_non_object_json():
    with pytest.raises(InputError, match="^board create requires a JSON object.$"):
        build_create_agile_body(_args({"name": "Board"}), [1], _resolver())


def test_update_body_name_overrides_json_name():
    args = ParsedArgs(
        resource="board", action="update", positional=["108-4"], flags={"name": "Flag Name"}
    )
    body = build_update_agile_body(args, {"name": "JSON Name", "orphansAtTheTop": True})
    assert body == {"name": "Flag Name", "orphansAtTheTop": True}


def test_update_body_rejects_empty_and_non_object_json():
    args = ParsedArgs(resource="board", action="update", positional=["108-4"])
    with pytest.raises(InputError, match="At least one update field is required"):
        build_update_agile_body(args, None)
    with pytest.raises(InputError, match="^board update requires a JSON object.$"):
        build_update_agile_body(args, [])


def test_update_body_rejects_project_flag():
    args = _args({"project": "DWP"}, action="update")
    with pytest.raises(InputError, match="does not accept --project"):
        build_update_agile_body(args, {"name": "x"})