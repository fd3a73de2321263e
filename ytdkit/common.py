"""Shared command-line primitives: errors, parsed arguments and delete confirmation."""

from __future__ import annotations

import sys
from dataclasses import dataclass, field


class YtdError(Exception):
    """Base class for every error reported by the tool."""


class InputError(YtdError):
    """Raised when user input or command usage is invalid."""


@dataclass
class ParsedArgs:
    """A command line split into resource, action, positional values and flags."""

    resource: str | None = None
    action: str | None = None
    positional: list[str] = field(default_factory=list)
    flags: dict[str, str] = field(default_factory=dict)

    def flag_enabled(self, name: str) -> bool:
        """Return True when a boolean flag was given."""
        return self.flags.get(name) == "true"


def confirm_delete(entity_type: str, identifier: str, assume_yes: bool) -> bool:
    """Ask for confirmation before deleting; return whether to proceed."""
    if assume_yes:
        return True

    if not sys.stdin.isatty():
        raise InputError(
            f"Refusing to delete {entity_type} {identifier} without confirmation. "
            "Pass -y to confirm."
        )

    sys.stderr.write(f"Delete {entity_type} {identifier}? Type 'yes' to confirm: ")
    sys.stderr.flush()
    line = sys.stdin.readline()
    return line.strip() == "yes"