from pathlib import Path

from ytdkit.attachment import attachment_file_name, resolve_output_path


def test_output_path_uses_attachment_name_by_default():
    assert resolve_output_path(None, "notes.txt", "8-1") == Path("notes.txt")


def test_output_path_uses_fallback_name():
    assert resolve_output_path(None, None, "8-1") == Path("attachment-8-1")


def test_file_name_strips_directories():
    assert attachment_file_name("some/dir/report.pdf", "8-2") == "report.pdf"


def test_file_name_falls_back_for_empty_and_parent():
    assert attachment_file_name("", "8-3") == "attachment-8-3"
    assert attachment_file_name("..", "8-4") == "attachment-8-4"


def test_output_directory_joins_file_name(tmp_path):
    assert resolve_output_path(str(tmp_path), "notes.txt", "8-1") == tmp_path / "notes.txt"


def test_output_file_path_is_used_as_is(tmp_path):
    target = tmp_path / "custom.bin"
    assert resolve_output_path(str(target), "notes.txt", "8-1") == target