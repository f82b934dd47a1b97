# scbasic

A library for inspecting and removing Strategic Claude Basic framework
installations in a project directory, together with the data models and
layout constants such tools work with.

## Modules

- **`scbasic.config`**: directory layout constants (`STRATEGIC_CLAUDE_BASIC_DIR`,
  `CLAUDE_DIR`, `CODEX_DIR` and others) and helpers:
  `framework_directories()`, `core_directories()`,
  `user_preserved_directories()`, `required_symlinks()`,
  `codex_required_symlinks()`, `backup_dir_name(now=None)`,
  `is_user_preserved_path(path)` and `is_core_file(path)`.
- **`scbasic.errors`**: the `AppError` exception, carrying an `ErrorCode`, a
  message, an optional cause and a `context` dict (`with_context(key, value)`
  returns the error for chaining; `matches(other)` compares codes). Helper
  constructors `git_error`, `file_system_error`, `installation_error` and
  `validation_error`; checks `is_error_code`, `is_git_error`,
  `is_file_system_error`, which follow the `__cause__` chain; and
  `user_friendly_message(err)`.
- **`scbasic.models`**: dataclasses for status reports (`StatusInfo`,
  `SymlinkStatus`), installation plans (`InstallationPlan`,
  `InstallationType`), MCP configuration (`MCPConfig` and `MCPServer`, each
  with `from_dict` / `to_dict`; `MCPTemplate`; `MCPInstallationPlan` with
  `validate()`), Claude settings structures (`ClaudeSettings`, `HooksSection`,
  `HookMatcher`, `HookEntry`, `PermissionsSection`), plus
  `hook_types_in_order()` and `is_strategic_hook(command)`.
- **`scbasic.install_config`**: `InstallConfig` (with `is_selective_update()`,
  `should_create_backup()`, `should_prompt_user()` and
  `validate(valid_template_ids=None)`), `CleanConfig` and the `GitignoreMode`
  enum (`track`, `all`, `non-user`).
- **`scbasic.cleaner`**: `inspect_installation(target_dir)`, which returns a
  `StatusInfo` for a directory, and `Cleaner`, which removes an installation
  and returns a `CleanupResult`.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Removing an installation

```python
from scbasic.cleaner import Cleaner

result = Cleaner().remove_installation("/path/to/project")
if result.success:
    print("Removed directory:", result.removed_directory)
    print("Removed symlinks:", result.removed_symlinks)
    print("Preserved files:", result.preserved_files)
for warning in result.warnings:
    print("warning:", warning)
```

`remove_installation` does the following:

1. Removes the `strategic` symlinks under `.claude` (`agents`, `commands`,
   `hooks`) and `.codex` (`prompts`, `hooks`), but only those pointing at the
   framework's own targets. Other symlinks, and regular files in their place,
   are left alone and listed in `preserved_files`.
2. Deletes the `.strategic-claude-basic` directory.
3. Strips the framework's own hook commands from `.claude/settings.json`,
   deleting the file if nothing is left in it.
4. Removes the `.claude` and `.codex` subdirectories, and those directories
   themselves, when they are empty. Anything still in them is listed in
   `preserved_files`.
5. Checks the result again and adds warnings for anything left behind.

An empty `target_dir` raises `AppError` with code `VALIDATION_FAILED`. A
directory with nothing installed gives a successful result with one warning.

`handle_partial_installation(target_dir)` removes only broken or wrong
symlinks under `.claude`, the `.strategic-claude-basic` directory if present,
and empty directories. `is_strategic_claude_symlink(path)` tells whether a
symlink points at one of the framework's targets.

`Cleaner` takes an optional `codex_config_cleaner`, a callable given the
target directory. It is called during `remove_installation` when Codex
symlinks or the framework directory were removed. Without it, Codex
configuration files are left untouched.

## Validating an install configuration

```python
from scbasic.errors import AppError
from scbasic.install_config import InstallConfig

install = InstallConfig(target_dir=".", force=True, force_core=True)
try:
    install.validate({"main", "ccr"})
except AppError as err:
    print(err.code, err.message)
```

## What this package does not do

This is a library only. It has no command-line program and starts no other
programs. It does not download, install or update the framework. It has no
interactive prompts or template selection, and it does not write `.mcp.json`
files. `InstallConfig`, `InstallationPlan` and the MCP models describe such
operations, but nothing in the package carries them out.