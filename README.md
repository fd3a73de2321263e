# ytdkit

Building blocks for a command-line YouTrack client. The package has no
runtime dependencies.

## What is in it

- `ytdkit.common`: the `YtdError` exception and its subclass `InputError`,
  which is raised for invalid user input. It also has `ParsedArgs` (resource,
  action, positional values and flags, with `flag_enabled()`) and
  `confirm_delete()`. `confirm_delete()` returns True at once when it is told
  to assume yes. When stdin is not a terminal it refuses. Otherwise it asks on
  stderr and accepts only the answer `yes`.
- `ytdkit.open_target`: `parse_target()` recognises four forms:
  `PROJ-12` (issue), `PROJ-A-12` (article), `PROJ-A` (knowledge base) and
  `PROJ` (project). It returns an `OpenTarget` with a `TargetKind`.
  `build_url()` turns such a target into its web URL on a given server.
- `ytdkit.alias`: validation of alias names (`^[a-z0-9][a-z0-9_-]*$`, and no
  built-in command names) and of database IDs such as `0-96`. It also has
  `search_value()` for quoting query values, `format_user()`, numbered choice
  prompts (`render_choice_prompt()`, `parse_choice()`, `prompt_choice()`),
  `render_aliases_text()` for `AliasOutput` records, `issue_in_sprint()` and
  `build_list_query()`. `StoredAlias` converts to and from a plain mapping.
- `ytdkit.board`: `validate_template()` and the request bodies for creating
  and updating agile boards. `build_create_agile_body()` takes a callback that
  resolves project short names to IDs.
- `ytdkit.article_fields` and `ytdkit.article`: strict checks on article JSON
  fields, `--no-comments` handling, parent-article references and the request
  bodies for creating, updating and moving articles.
- `ytdkit.saved_search`: `SavedQuery` and `saved_query_matches_project()`.
  `find_saved_query()` looks a query up by ID first, then by name ignoring
  case.
- `ytdkit.attachment`: `attachment_file_name()` takes only the base name of an
  attachment and falls back to `attachment-<id>`. `resolve_output_path()`
  places the file inside an output directory or at an explicit path.
- `ytdkit.schema_catalog` and `ytdkit.schema`: the catalog of JSON input
  schemas for `ticket`, `article`, `board` and `sprint` with the actions
  `create` and `update`. Schemas can be rendered as text or JSON.
  `add_project_ticket_fields()` adds custom-field examples to a ticket schema,
  built from project custom field mappings.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Library use

```python
from ytdkit.open_target import parse_target, build_url
from ytdkit.alias import validate_alias_name, search_value
from ytdkit.schema_catalog import find_schema

target = parse_target("DWP-A-12")
print(build_url("https://example.youtrack.cloud", target))
# https://example.youtrack.cloud/projects/DWP/articles/DWP-A-12

validate_alias_name("my-todo_1")      # passes; raises InputError otherwise
search_value("Alice Example")         # '{Alice Example}'

schema = find_schema("ticket", "create")
print(schema.to_dict()["strictFields"])   # True
```

## Command line

The `ytdkit-schema` command prints the JSON input schemas.

List every schema target:

```
ytdkit-schema
```

Show the fields, rules and examples for one target:

```
ytdkit-schema ticket create
ytdkit-schema board update --format json
```

Output is plain text by default. `--format json` gives machine-readable
metadata. The formats `raw` and `md` are accepted by the parser but rejected
with an error. Errors go to stderr and the exit status is 1.

## What it does not do

The package does not talk to a YouTrack server. It has no HTTP client, no
login, and no stored configuration or alias file. It does not open a browser.
The functions that need server data take it as arguments or as callbacks,
such as a resolver from project or article IDs. The only command is
`ytdkit-schema`; there is no full ticket, article or board command line.