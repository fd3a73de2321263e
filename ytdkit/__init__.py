"""Building blocks for a YouTrack command-line client: targets, aliases, boards, articles, saved searches, attachments and JSON input schemas."""

__version__ = "1.7.1"

__all__ = [
    "alias",
    "article",
    "article_fields",
    "attachment",
    "board",
    "common",
    "open_target",
    "saved_search",
    "schema",
    "schema_catalog",
]