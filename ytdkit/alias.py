"""Alias names, prompts and text rendering for saved project/user/sprint shortcuts."""

from __future__ import annotations

import re
import sys
from dataclasses import dataclass
from typing import Any, Callable, Iterable, Mapping, Sequence, TypeVar

from ytdkit.common import InputError

T = TypeVar("T")

BUILTIN_COMMANDS = frozenset(
    {
        "login",
        "logout",
        "help",
        "config",
        "group",
        "project",
        "article",
        "ticket",
        "comment",
        "attachment",
        "tag",
        "search",
        "board",
        "sprint",
        "whoami",
        "open",
        "url",
        "alias",
        "user",
    }
)

_CHOICE_NUMBER = re.compile(r"\+?[0-9]+")


@dataclass(frozen=True)
class StoredAlias:
    """An alias as kept in the configuration file: database IDs only."""

    project: str
    user: str
    sprint: str | None = None

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {"project": self.project, "user": self.user}
        if self.sprint is not None:
            data["sprint"] = self.sprint
        return data

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> StoredAlias:
        return cls(project=data["project"], user=data["user"], sprint=data.get("sprint"))


@dataclass
class AliasOutput:
    """An alias together with whatever could be resolved about its references."""

    alias: str
    project: str
    user: str
    sprint: str | None = None
    project_resolved: bool = False
    user_resolved: bool = False
    sprint_resolved: bool | None = None
    project_name: str | None = None
    project_short_name: str | None = None
    user_login: str | None = None
    user_full_name: str | None = None
    sprint_name: str | None = None
    board_name: str | None = None

    def to_dict(self) -> dict[str, Any]:
        """Return the camelCase mapping, leaving out unset optional values."""
        data: dict[str, Any] = {
            "alias": self.alias,
            "project": self.project,
            "user": self.user,
        }
        if self.sprint is not None:
            data["sprint"] = self.sprint
        data["projectResolved"] = self.project_resolved
        data["userResolved"] = self.user_resolved
        optional = {
            "sprintResolved": self.sprint_resolved,
            "projectName": self.project_name,
            "projectShortName": self.project_short_name,
            "userLogin": self.user_login,
            "userFullName": self.user_full_name,
            "sprintName": self.sprint_name,
            "boardName": self.board_name,
        }
        data.update({key: value for key, value in optional.items() if value is not None})
        return data


def _is_lower_or_digit(ch: str) -> bool:
    return "a" <= ch <= "z" or "0" <= ch <= "9"


def _is_valid_alias_name(name: str) -> bool:
    if not name or not _is_lower_or_digit(name[0]):
        return False
    return all(_is_lower_or_digit(ch) or ch in "_-" for ch in name[1:])


def validate_alias_name(name: str) -> None:
    """Raise unless the name is well formed and not a built-in command."""
    if not _is_valid_alias_name(name):
        raise InputError("Alias names must match ^[a-z0-9][a-z0-9_-]*$")
    if name in BUILTIN_COMMANDS:
        raise InputError(f"Alias name conflicts with built-in command: {name}")


def _is_ascii_digits(value: str) -> bool:
    return bool(value) and all("0" <= ch <= "9" for ch in value)


def require_database_id(value: str, field: str) -> None:
    """Raise unless the value looks like a database ID such as 0-96."""
    parts = value.split("-")
    if len(parts) == 2 and all(_is_ascii_digits(part) for part in parts):
        return
    raise InputError(f"--{field} must be a YouTrack database ID like 0-96")


def search_value(value: str) -> str:
    """Quote a value for a search query when it holds more than plain characters."""
    if all((ch.isascii() and ch.isalnum()) or ch in "._-" for ch in value):
        return value
    return f"{{{value}}}"


def format_user(login: str, full_name: str | None) -> str:
    """Return "Full Name (login)", or just the login when there is no name."""
    if full_name is not None and full_name.strip():
        return f"{full_name} ({login})"
    return login


def _valid_default(default: int | None, count: int) -> int | None:
    if default is not None and 0 <= default < count:
        return default
    return None


def render_choice_prompt(
    label: str,
    choices: Sequence[T],
    default: int | None,
    formatter: Callable[[T], str],
) -> str:
    """Render a numbered list of choices followed by the selection prompt."""
    default = _valid_default(default, len(choices))
    lines = [f"{label}:\n"]
    lines.extend(f"  {number}. {formatter(choice)}\n" for number, choice in enumerate(choices, 1))
    if default is not None:
        lines.append(f"Select {label} [{formatter(choices[default])}]: ")
    else:
        lines.append(f"Select {label}: ")
    return "".join(lines)


def parse_choice(label: str, line: str, count: int, default: int | None) -> int:
    """Turn a typed answer into a zero-based choice index."""
    default = _valid_default(default, count)
    trimmed = line.strip()
    if not trimmed:
        if default is None:
            raise InputError(f"{label} selection is required")
        return default
    if not _CHOICE_NUMBER.fullmatch(trimmed):
        raise InputError(f"Invalid {label} selection: {trimmed}")
    number = int(trimmed)
    if number == 0 or number > count:
        raise InputError(f"Invalid {label} selection: {trimmed}")
    return number - 1


def prompt_choice(
    label: str,
    choices: Sequence[T],
    default: int | None,
    formatter: Callable[[T], str],
) -> int:
    """Show the choices on stderr, read an answer from stdin and return its index."""
    if not choices:
        raise InputError(f"No {label} choices available")
    sys.stderr.write(render_choice_prompt(label, choices, default, formatter))
    sys.stderr.flush()
    line = sys.stdin.readline()
    return parse_choice(label, line, len(choices), default)


def _alias_line(
    label: str, display: str | None, identifier: str, resolved: bool, no_meta: bool
) -> str:
    if display is not None:
        text = display if no_meta else f"{display} ({identifier})"
    else:
        text = identifier
    if not resolved:
        text += " [unresolved]"
    return f"  {label}: {text}\n"


def _first_present(*values: str | None) -> str | None:
    return next((value for value in values if value is not None), None)


def render_aliases_text(aliases: Iterable[AliasOutput], no_meta: bool) -> str:
    """Render aliases as blocks of text separated by blank lines."""
    blocks = []
    for alias in aliases:
        parts = [f"{alias.alias}\n"]
        parts.append(
            _alias_line(
                "project",
                _first_present(alias.project_short_name, alias.project_name),
                alias.project,
                alias.project_resolved,
                no_meta,
            )
        )
        parts.append(
            _alias_line(
                "user",
                _first_present(alias.user_full_name, alias.user_login),
                alias.user,
                alias.user_resolved,
                no_meta,
            )
        )
        if alias.sprint is None:
            parts.append("  sprint: none\n")
        else:
            display = None
            if alias.sprint_name is not None:
                display = (
                    f"{alias.sprint_name} - {alias.board_name}"
                    if alias.board_name is not None
                    else alias.sprint_name
                )
            parts.append(
                _alias_line(
                    "sprint", display, alias.sprint, bool(alias.sprint_resolved), no_meta
                )
            )
        blocks.append("".join(parts))
    return "\n".join(blocks)


def issue_in_sprint(
    issue: Mapping[str, Any], sprint_issues: Iterable[Mapping[str, Any]]
) -> bool:
    """Return True when the issue matches a sprint issue by ID or readable ID."""
    readable = issue.get("idReadable")
    for sprint_issue in sprint_issues:
        if sprint_issue.get("id") == issue.get("id"):
            return True
        other = sprint_issue.get("idReadable")
        if readable is not None and other is not None and readable == other:
            return True
    return False


def build_list_query(project_short_name: str, user_login: str, include_resolved: bool) -> str:
    """Build the search query listing an alias user's issues in its project."""
    query = f"project: {{{project_short_name}}} for: {search_value(user_login)}"
    if not include_resolved:
        query += " #Unresolved"
    return query