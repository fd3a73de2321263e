"""Catalog of the JSON input schemas accepted by create and update commands."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True)
class SchemaFlag:
    """A command-line flag that a schema target requires."""

    name: str
    value: str
    description: str

    def to_dict(self) -> dict[str, Any]:
        return {"name": self.name, "value": self.value, "description": self.description}


@dataclass(frozen=True)
class SchemaField:
    """One JSON field accepted by a schema target."""

    name: str
    value_type: str
    required: bool
    requirement: str
    description: str
    example: str

    def to_dict(self) -> dict[str, Any]:
        return {
            "name": self.name,
            "type": self.value_type,
            "required": self.required,
            "requirement": self.requirement,
            "description": self.description,
            "example": self.example,
        }


@dataclass
class JsonCommandSchema:
    """Description of the JSON input of one resource action.

    ``project`` holds ``id``, ``shortName`` and ``name`` when the schema was
    specialised for a project; ``project_fields`` and ``project_examples`` hold
    the camelCase mappings generated from that project's custom fields.
    """

    resource: str
    action: str
    usage: str
    strict_fields: bool
    required_flags: list[SchemaFlag] = field(default_factory=list)
    fields: list[SchemaField] = field(default_factory=list)
    rules: list[str] = field(default_factory=list)
    examples: list[str] = field(default_factory=list)
    accepts_json_flag: bool = True
    accepts_stdin: bool = True
    project: dict[str, str] | None = None
    project_fields: list[dict[str, Any]] = field(default_factory=list)
    project_examples: list[dict[str, Any]] = field(default_factory=list)

    @property
    def command(self) -> str:
        return f"{self.resource} {self.action}"

    def to_dict(self) -> dict[str, Any]:
        """Return the camelCase mapping, leaving out empty optional parts."""
        data: dict[str, Any] = {
            "resource": self.resource,
            "action": self.action,
            "command": self.command,
            "usage": self.usage,
            "accepts": {"jsonFlag": self.accepts_json_flag, "stdin": self.accepts_stdin},
            "strictFields": self.strict_fields,
        }
        if self.required_flags:
            data["requiredFlags"] = [flag.to_dict() for flag in self.required_flags]
        if self.fields:
            data["fields"] = [item.to_dict() for item in self.fields]
        if self.rules:
            data["rules"] = list(self.rules)
        if self.examples:
            data["examples"] = list(self.examples)
        if self.project is not None:
            data["project"] = dict(self.project)
        if self.project_fields:
            data["projectFields"] = [dict(item) for item in self.project_fields]
        if self.project_examples:
            data["projectExamples"] = [dict(item) for item in self.project_examples]
        return data


def _optional_or(required: bool, text: str) -> str:
    return text if required else "optional"


def _board_schema_fields(name_required: bool, projects_required: bool) -> list[SchemaField]:
    return [
        SchemaField(
            "name",
            "string",
            name_required,
            _optional_or(name_required, "required unless --name"),
            "Agile board name; --name overrides JSON name",
            "Team Board",
        ),
        SchemaField(
            "projects",
            "array<object>",
            projects_required,
            _optional_or(projects_required, "required unless --project"),
            'Project references shaped as [{"id":"<project-db-id>"}]',
            '[{"id":"0-96"}]',
        ),
        SchemaField(
            "owner", "object", False, "optional", "Board owner reference", '{"id":"1-51"}'
        ),
        SchemaField(
            "visibleFor",
            "object|null",
            False,
            "optional",
            "Deprecated visibility group reference",
            '{"id":"3-7"}',
        ),
        SchemaField(
            "visibleForProjectBased",
            "boolean",
            False,
            "optional",
            "Deprecated project-based read visibility flag",
            "true",
        ),
        SchemaField(
            "updateableBy",
            "object|null",
            False,
            "optional",
            "Deprecated update group reference",
            '{"id":"3-7"}',
        ),
        SchemaField(
            "updateableByProjectBased",
            "boolean",
            False,
            "optional",
            "Deprecated project-based update permission flag",
            "true",
        ),
        SchemaField(
            "orphansAtTheTop",
            "boolean",
            False,
            "optional",
            "Place orphan swimlane at the top",
            "true",
        ),
        SchemaField(
            "hideOrphansSwimlane",
            "boolean",
            False,
            "optional",
            "Hide the orphan swimlane",
            "false",
        ),
        SchemaField(
            "estimationField",
            "object|null",
            False,
            "optional",
            "Estimation custom field reference",
            '{"id":"58-1"}',
        ),
        SchemaField(
            "originalEstimationField",
            "object|null",
            False,
            "optional",
            "Original estimation custom field reference",
            '{"id":"58-2"}',
        ),
        SchemaField(
            "swimlaneSettings",
            "object|null",
            False,
            "optional",
            "API-shaped swimlane settings",
            '{"$type":"AttributeBasedSwimlaneSettings"}',
        ),
        SchemaField(
            "colorCoding",
            "object|null",
            False,
            "optional",
            "API-shaped color coding settings",
            '{"$type":"FieldBasedColorCoding"}',
        ),
    ]


def _sprint_schema_fields(name_required: bool) -> list[SchemaField]:
    return [
        SchemaField(
            "name",
            "string",
            name_required,
            _optional_or(name_required, "required unless --name"),
            "Sprint name; --name overrides JSON name",
            "Sprint 1",
        ),
        SchemaField(
            "goal", "string|null", False, "optional", "Sprint goal", "Finish onboarding"
        ),
        SchemaField(
            "start",
            "integer|null",
            False,
            "optional",
            "Start timestamp in milliseconds since epoch",
            "1735689600000",
        ),
        SchemaField(
            "finish",
            "integer|null",
            False,
            "optional",
            "Finish timestamp in milliseconds since epoch",
            "1736294400000",
        ),
        SchemaField(
            "archived",
            "boolean",
            False,
            "optional",
            "Whether the sprint is archived",
            "false",
        ),
        SchemaField(
            "isDefault",
            "boolean",
            False,
            "optional",
            "Whether matching new issues are added to this sprint by default",
            "true",
        ),
        SchemaField(
            "issues",
            "array<object>",
            False,
            "optional",
            "API-shaped issue references for sprint membership",
            '[{"id":"2-42"}]',
        ),
        SchemaField(
            "previousSprint",
            "object",
            False,
            "create-only optional",
            "Previous sprint reference used by YouTrack to move unresolved issues",
            '{"id":"113-6"}',
        ),
    ]


_PROJECT_FLAG = ("project", "id", "Project short name or YouTrack project ID")


def _ticket_fields(summary_required: bool, custom_fields_example: str) -> list[SchemaField]:
    return [
        SchemaField(
            "summary",
            "string",
            summary_required,
            "required" if summary_required else "optional",
            "Ticket summary",
            "Fix login",
        ),
        SchemaField(
            "description",
            "string",
            False,
            "optional",
            "Markdown-capable ticket description",
            "Steps...",
        ),
        SchemaField(
            "customFields",
            "array<object>",
            False,
            "optional",
            "API-shaped YouTrack issue custom field values",
            custom_fields_example,
        ),
        SchemaField(
            "tags",
            "array<object>",
            False,
            "optional",
            "API-shaped tag references",
            '[{"name":"backend"}]',
        ),
    ]


def schemas() -> list[JsonCommandSchema]:
    """Return a fresh list of every supported schema target, in display order."""
    return [
        JsonCommandSchema(
            resource="ticket",
            action="create",
            usage=(
                "ytd ticket create --project <id> "
                "--json '{\"summary\":\"...\",\"description\":\"...\"}'"
            ),
            strict_fields=True,
            required_flags=[SchemaFlag(*_PROJECT_FLAG)],
            fields=_ticket_fields(
                True,
                '[{"name":"Priority","$type":"SingleEnumIssueCustomField",'
                '"value":{"name":"Critical"}}]',
            ),
            rules=[
                "JSON input must be an object.",
                "summary is required.",
                "JSON project is not accepted; use --project so ytd can resolve the project ID.",
                "Visibility is controlled by flags/env/config, not JSON.",
                "Unknown ticket JSON fields are rejected. "
                "Allowed fields: customFields, description, summary, tags.",
                "Use --project with ytd schema ticket create for project-specific "
                "custom field examples.",
            ],
            examples=[
                "ytd ticket create --project PROJ --json '{\"summary\":\"Fix login\","
                "\"description\":\"Steps...\",\"customFields\":[{\"name\":\"Priority\","
                "\"$type\":\"SingleEnumIssueCustomField\",\"value\":{\"name\":\"Critical\"}}]}'",
            ],
        ),
        JsonCommandSchema(
            resource="ticket",
            action="update",
            usage=(
                "ytd ticket update <id> "
                "--json '{\"summary\":\"...\",\"description\":\"...\"}'"
            ),
            strict_fields=True,
            fields=_ticket_fields(
                False,
                '[{"name":"Assignee","$type":"SingleUserIssueCustomField",'
                '"value":{"login":"jane.doe"}}]',
            ),
            rules=[
                "JSON input must be an object.",
                "At least one of summary, description, customFields, tags, "
                "--visibility-group, or --no-visibility-group is required.",
                "Visibility update is flag-only; env/config defaults are ignored on update.",
                "Unknown ticket JSON fields are rejected. "
                "Allowed fields: customFields, description, summary, tags.",
                "Use --project with ytd schema ticket update for project-specific "
                "custom field examples.",
            ],
            examples=[
                "ytd ticket update PROJ-42 --json '{\"customFields\":[{\"name\":\"Assignee\","
                "\"$type\":\"SingleUserIssueCustomField\",\"value\":{\"login\":\"jane.doe\"}}]}'",
            ],
        ),
        JsonCommandSchema(
            resource="article",
            action="create",
            usage=(
                "ytd article create --project <id> --json '{\"summary\":\"...\","
                "\"content\":\"...\",\"parentArticle\":{\"id\":\"PROJ-A-1\"}}'"
            ),
            strict_fields=True,
            required_flags=[SchemaFlag(*_PROJECT_FLAG)],
            fields=[
                SchemaField(
                    "summary", "string", True, "required", "Article summary", "Release notes"
                ),
                SchemaField(
                    "content", "string", False, "optional", "Markdown article content", "## Notes"
                ),
                SchemaField(
                    "parentArticle",
                    "object",
                    False,
                    "optional",
                    'Parent article reference shaped as {"id":"<readable-article-id>"}',
                    '{"id":"PROJ-A-1"}',
                ),
            ],
            rules=[
                "JSON input must be an object.",
                "summary is required.",
                "Unknown fields are rejected. Allowed fields: summary, content, parentArticle.",
                "parentArticle.id uses a readable reusable article ID; ytd resolves the "
                "internal YouTrack article ID before sending.",
                "Visibility defaults work like ticket create and are controlled by "
                "flags/env/config, not JSON.",
            ],
            examples=[
                "ytd article create --project PROJ --json '{\"summary\":\"Release notes\","
                "\"content\":\"## Notes\",\"parentArticle\":{\"id\":\"PROJ-A-1\"}}'",
            ],
        ),
        JsonCommandSchema(
            resource="article",
            action="update",
            usage=(
                "ytd article update <id> --json '{\"summary\":\"...\","
                "\"content\":\"...\",\"parentArticle\":{\"id\":\"PROJ-A-1\"}}'"
            ),
            strict_fields=True,
            fields=[
                SchemaField(
                    "summary", "string", False, "optional", "Article summary", "Release notes"
                ),
                SchemaField(
                    "content", "string", False, "optional", "Markdown article content", "## Notes"
                ),
                SchemaField(
                    "parentArticle",
                    "object|null",
                    False,
                    "optional",
                    'Parent reference {"id":"<readable-article-id>"}; null clears parent',
                    "null",
                ),
            ],
            rules=[
                "JSON input must be an object.",
                "Unknown fields are rejected. Allowed fields: summary, content, parentArticle.",
                "At least one allowed field or explicit visibility flag is required.",
                "parentArticle:null clears the parent article.",
                "Visibility update is flag-only; env/config defaults are ignored on update.",
            ],
            examples=[
                "ytd article update PROJ-A-2 --json '{\"parentArticle\":{\"id\":\"PROJ-A-1\"}}'",
                "ytd article update PROJ-A-2 --json '{\"parentArticle\":null}'",
            ],
        ),
        JsonCommandSchema(
            resource="board",
            action="create",
            usage=(
                "ytd board create --name <name> --project <project>[,<project>...] "
                "[--template <template>] [--json '{...}']"
            ),
            strict_fields=False,
            fields=_board_schema_fields(True, True),
            rules=[
                "JSON input is optional. If provided, JSON must be an object.",
                "Required effective body fields: name and projects.",
                "--project and JSON projects cannot be combined.",
                "--project accepts project short names or IDs and ytd resolves them to "
                "database IDs.",
                "--template is a flag, not JSON.",
                "Additional JSON fields pass through to YouTrack unchanged and are outside "
                "the strict ytd contract.",
                "Known pass-through examples used in ytd docs/journeys: "
                "visibleForProjectBased, orphansAtTheTop.",
            ],
            examples=[
                "ytd board create --name \"Team Board\" --project PROJ --template scrum "
                "--json '{\"visibleForProjectBased\":true}'",
            ],
        ),
        JsonCommandSchema(
            resource="board",
            action="update",
            usage="ytd board update <id> [--name <name>] [--json '{...}']",
            strict_fields=False,
            fields=_board_schema_fields(False, False),
            rules=[
                "JSON input is optional. If provided, JSON must be an object.",
                "At least one JSON field or --name is required.",
                "board update rejects --project; use JSON projects for project changes.",
                "Additional JSON fields pass through to YouTrack unchanged and are outside "
                "the strict ytd contract.",
            ],
            examples=["ytd board update 108-4 --json '{\"orphansAtTheTop\":true}'"],
        ),
        JsonCommandSchema(
            resource="sprint",
            action="create",
            usage="ytd sprint create --board <board-id> --name <name> [--json '{...}']",
            strict_fields=False,
            required_flags=[SchemaFlag("board", "board-id", "Board ID that scopes the sprint")],
            fields=_sprint_schema_fields(True),
            rules=[
                "JSON input is optional. If provided, JSON must be an object.",
                "Effective name is required.",
                "Additional JSON fields pass through to YouTrack unchanged and are outside "
                "the strict ytd contract.",
                "Known pass-through example used in ytd docs/journeys: goal.",
            ],
            examples=[
                "ytd sprint create --board 108-4 --name \"Sprint 1\" "
                "--json '{\"goal\":\"Finish onboarding\"}'",
            ],
        ),
        JsonCommandSchema(
            resource="sprint",
            action="update",
            usage="ytd sprint update <sprint-id> [--name <name>] [--json '{...}']",
            strict_fields=False,
            fields=_sprint_schema_fields(False),
            rules=[
                "JSON input is optional. If provided, JSON must be an object.",
                "At least one JSON field or --name is required.",
                "Additional JSON fields pass through to YouTrack unchanged and are outside "
                "the strict ytd contract.",
                "Known pass-through example used in ytd docs/journeys: goal.",
            ],
            examples=[
                "ytd sprint update 108-4:113-6 --json '{\"goal\":\"Finish onboarding\"}'"
            ],
        ),
    ]


def find_schema(resource: str, action: str) -> JsonCommandSchema | None:
    """Return a fresh schema for the resource and action, or None if unsupported."""
    return next(
        (s for s in schemas() if s.resource == resource and s.action == action),
        None,
    )


def unsupported_target(resource: str, action: str | None) -> str:
    """Return the message for an unsupported schema target, listing the supported ones."""
    target = resource if action is None else f"{resource} {action}"
    supported = ", ".join(s.command for s in schemas())
    return f"Unsupported schema target: {target}. Supported targets: {supported}"