"""Local file naming for downloaded attachments."""

from __future__ import annotations

from pathlib import Path, PurePath


def attachment_file_name(name: str | None, yt_id: str) -> str:
    """Return the base file name for an attachment, falling back to its ID."""
    if name is not None:
        base = PurePath(name).name
        if base and base != "..":
            return base
    return f"attachment-{yt_id}"


def resolve_output_path(output: str | None, name: str | None, yt_id: str) -> Path:
    """Return where a downloaded attachment should be written."""
    file_name = attachment_file_name(name, yt_id)
    if output is None:
        return Path(file_name)
    path = Path(output)
    if path.is_dir():
        return path / file_name
    return path