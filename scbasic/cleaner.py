"""Removal of framework installations, keeping user content in place."""

from __future__ import annotations

import json
import os
import shutil
from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Any

from scbasic import config
from scbasic.errors import AppError, ErrorCode, file_system_error
from scbasic.models import StatusInfo, SymlinkStatus, hook_types_in_order, is_strategic_hook

_CLAUDE_SUBDIRS = (config.AGENTS_DIR, config.COMMANDS_DIR, config.HOOKS_DIR)
_CODEX_SUBDIRS = (config.PROMPTS_DIR, config.HOOKS_DIR)


@dataclass
class CleanupResult:
    """What a cleanup removed, kept and ran into."""

    removed_directory: bool = False
    removed_symlinks: list[str] = field(default_factory=list)
    removed_codex_symlinks: list[str] = field(default_factory=list)
    cleaned_settings: bool = False
    cleaned_codex_config: bool = False
    preserved_files: list[str] = field(default_factory=list)
    cleaned_directories: list[str] = field(default_factory=list)
    warnings: list[str] = field(default_factory=list)
    errors: list[str] = field(default_factory=list)
    success: bool = False


def _fs_error(path: str, err: OSError) -> AppError:
    code = (
        ErrorCode.PERMISSION_DENIED
        if isinstance(err, PermissionError)
        else ErrorCode.FILE_SYSTEM_ERROR
    )
    return file_system_error(code, path, err)


def _symlink_status(base_dir: str, name: str, expected: str) -> SymlinkStatus:
    path = os.path.join(base_dir, name)
    status = SymlinkStatus(name=name, path=path)
    if not os.path.lexists(path):
        return status
    status.exists = True
    if not os.path.islink(path):
        status.error = "exists but is not a symlink"
        return status
    try:
        status.target = os.readlink(path)
    except OSError as err:
        status.error = f"cannot read symlink: {err}"
        return status
    if status.target != expected:
        status.error = f"points to {status.target}, expected {expected}"
    elif not os.path.exists(path):
        status.error = "target does not exist"
    else:
        status.valid = True
    return status


def inspect_installation(target_dir: str) -> StatusInfo:
    """Report which framework directories and symlinks are present."""
    info = StatusInfo(target_dir=target_dir)
    info.strategic_claude_dir_path = os.path.join(target_dir, config.STRATEGIC_CLAUDE_BASIC_DIR)
    info.claude_dir_path = os.path.join(target_dir, config.CLAUDE_DIR)
    info.codex_dir_path = os.path.join(target_dir, config.CODEX_DIR)
    info.strategic_claude_dir = os.path.isdir(info.strategic_claude_dir_path)
    info.claude_dir = os.path.isdir(info.claude_dir_path)
    info.codex_dir = os.path.isdir(info.codex_dir_path)

    for name, expected in config.required_symlinks().items():
        info.add_symlink(_symlink_status(info.claude_dir_path, name, expected))
    for name, expected in config.codex_required_symlinks().items():
        info.add_codex_symlink(_symlink_status(info.codex_dir_path, name, expected))

    for link in info.symlinks:
        if link.exists and not link.valid:
            info.add_issue(f"Invalid symlink {link.name}: {link.error}")
    if not info.strategic_claude_dir:
        info.add_issue(f"{config.STRATEGIC_CLAUDE_BASIC_DIR} directory not found")

    info.is_installed = (
        info.strategic_claude_dir
        and info.claude_dir
        and info.valid_symlinks() == len(info.symlinks)
    )
    return info


def _strip_strategic_hooks(settings: dict[str, Any]) -> dict[str, Any]:
    hooks = settings.get("hooks")
    if not isinstance(hooks, dict):
        return settings
    for hook_type in hook_types_in_order():
        matchers = hooks.get(hook_type)
        if not isinstance(matchers, list):
            continue
        kept_matchers = []
        for matcher in matchers:
            entries = [
                entry
                for entry in matcher.get("hooks", [])
                if not is_strategic_hook(str(entry.get("command", "")))
            ]
            if entries:
                kept_matchers.append({**matcher, "hooks": entries})
        if kept_matchers:
            hooks[hook_type] = kept_matchers
        else:
            del hooks[hook_type]
    if not hooks:
        del settings["hooks"]
    return settings


class Cleaner:
    """Removes framework files from a target directory."""

    def __init__(
        self,
        codex_config_cleaner: Callable[[str], None] | None = None,
    ) -> None:
        self._codex_config_cleaner = codex_config_cleaner

    def remove_installation(self, target_dir: str) -> CleanupResult:
        """Remove the framework from target_dir and report what was done."""
        if not target_dir:
            raise AppError(ErrorCode.VALIDATION_FAILED, "Target directory cannot be empty")

        result = CleanupResult()
        info = inspect_installation(target_dir)

        if not (info.is_installed or info.strategic_claude_dir or info.claude_dir or info.codex_dir):
            result.success = True
            result.warnings.append("No Strategic Claude Basic installation found")
            return result

        try:
            self._remove_symlinks(target_dir, result)
        except (AppError, OSError) as err:
            result.errors.append(f"Failed to remove symlinks: {err}")

        try:
            self._remove_strategic_directory(target_dir, result)
        except AppError as err:
            result.errors.append(f"Failed to remove Strategic Claude directory: {err}")
            raise

        if result.removed_symlinks or result.removed_directory:
            try:
                self._clean_settings(target_dir, result)
            except (AppError, OSError, ValueError) as err:
                result.warnings.append(f"Warning during settings cleanup: {err}")

        if result.removed_codex_symlinks or result.removed_directory:
            try:
                self._clean_codex_config(target_dir, result)
            except (AppError, OSError, ValueError) as err:
                result.warnings.append(f"Warning during codex config cleanup: {err}")

        try:
            self._cleanup_empty_directories(target_dir, result)
        except AppError as err:
            result.warnings.append(f"Warning during directory cleanup: {err}")

        self._validate_cleanup(target_dir, result)

        result.success = not result.errors
        return result

    def handle_partial_installation(self, target_dir: str) -> CleanupResult:
        """Clean up a broken or incomplete installation."""
        result = CleanupResult()
        info = inspect_installation(target_dir)
        result.warnings.append("Handling partial installation cleanup")

        for link in info.symlinks:
            if link.exists and not link.valid:
                try:
                    os.remove(link.path)
                except OSError as err:
                    result.warnings.append(
                        f"Could not remove broken symlink {link.path}: {err}"
                    )
                else:
                    result.removed_symlinks.append(link.name)

        if info.strategic_claude_dir:
            try:
                self._remove_strategic_directory(target_dir, result)
            except AppError as err:
                result.errors.append(f"Failed to remove Strategic Claude directory: {err}")
                raise

        try:
            self._cleanup_empty_directories(target_dir, result)
        except AppError as err:
            result.warnings.append(f"Warning during directory cleanup: {err}")

        result.success = not result.errors
        return result

    def is_strategic_claude_symlink(self, symlink_path: str) -> bool:
        """Whether a symlink points at one of the framework's own targets."""
        try:
            target = os.readlink(symlink_path)
        except OSError as err:
            raise file_system_error(ErrorCode.FILE_SYSTEM_ERROR, symlink_path, err) from err
        return target in config.required_symlinks().values()

    def _remove_links(
        self,
        base_dir: str,
        links: dict[str, str],
        removed: list[str],
        result: CleanupResult,
        label: str,
    ) -> None:
        for name in links:
            full_path = os.path.join(base_dir, name)
            if not os.path.lexists(full_path):
                continue
            if not os.path.islink(full_path):
                result.preserved_files.append(full_path)
                result.warnings.append(f"Preserving non-symlink file: {full_path}")
                continue
            try:
                ours = self.is_strategic_claude_symlink(full_path)
            except AppError as err:
                result.warnings.append(f"Could not validate {label} {full_path}: {err}")
                continue
            if not ours:
                result.preserved_files.append(full_path)
                result.warnings.append(
                    f"Preserving non-Strategic Claude {label}: {full_path}"
                )
                continue
            try:
                os.remove(full_path)
            except OSError as err:
                raise _fs_error(full_path, err) from err
            removed.append(name)

    def _remove_symlinks(self, target_dir: str, result: CleanupResult) -> None:
        self._remove_links(
            os.path.join(target_dir, config.CLAUDE_DIR),
            config.required_symlinks(),
            result.removed_symlinks,
            result,
            "symlink",
        )
        self._remove_links(
            os.path.join(target_dir, config.CODEX_DIR),
            config.codex_required_symlinks(),
            result.removed_codex_symlinks,
            result,
            "codex symlink",
        )

    def _remove_strategic_directory(self, target_dir: str, result: CleanupResult) -> None:
        strategic_dir = os.path.join(target_dir, config.STRATEGIC_CLAUDE_BASIC_DIR)
        if not os.path.exists(strategic_dir):
            return
        try:
            shutil.rmtree(strategic_dir)
        except OSError as err:
            raise _fs_error(strategic_dir, err) from err
        result.removed_directory = True

    def _clean_settings(self, target_dir: str, result: CleanupResult) -> None:
        settings_path = os.path.join(target_dir, config.CLAUDE_DIR, config.CLAUDE_SETTINGS_FILE)
        if not os.path.exists(settings_path):
            return
        with open(settings_path, encoding="utf-8") as handle:
            settings = json.load(handle)
        if not isinstance(settings, dict):
            raise ValueError(f"{settings_path} does not hold a JSON object")
        cleaned = _strip_strategic_hooks(settings)
        if cleaned:
            with open(settings_path, "w", encoding="utf-8") as handle:
                json.dump(cleaned, handle, indent=2)
                handle.write("\n")
            result.preserved_files.append("settings.json (cleaned of strategic hooks)")
        else:
            os.remove(settings_path)
            result.preserved_files.append("settings.json removed (was empty after cleanup)")
        result.cleaned_settings = True

    def _clean_codex_config(self, target_dir: str, result: CleanupResult) -> None:
        if self._codex_config_cleaner is None:
            return
        self._codex_config_cleaner(target_dir)
        result.cleaned_codex_config = True

    def _cleanup_empty_directories(self, target_dir: str, result: CleanupResult) -> None:
        for parent, subdirs in (
            (config.CLAUDE_DIR, _CLAUDE_SUBDIRS),
            (config.CODEX_DIR, _CODEX_SUBDIRS),
        ):
            parent_path = os.path.join(target_dir, parent)
            if not os.path.exists(parent_path):
                continue
            for subdir in subdirs:
                self._cleanup_empty_subdirectory(os.path.join(parent_path, subdir), result)
            self._cleanup_empty_subdirectory(parent_path, result)

    def _cleanup_empty_subdirectory(self, dir_path: str, result: CleanupResult) -> None:
        if not os.path.exists(dir_path):
            return
        try:
            entries = sorted(os.listdir(dir_path))
        except OSError as err:
            raise file_system_error(ErrorCode.FILE_SYSTEM_ERROR, dir_path, err) from err
        if entries:
            result.preserved_files.extend(os.path.join(dir_path, name) for name in entries)
            return
        try:
            os.rmdir(dir_path)
        except OSError as err:
            raise _fs_error(dir_path, err) from err
        result.cleaned_directories.append(dir_path)

    def _validate_cleanup(self, target_dir: str, result: CleanupResult) -> None:
        info = inspect_installation(target_dir)
        if info.strategic_claude_dir:
            result.warnings.append("Strategic Claude directory still exists after cleanup")
        for link in info.symlinks:
            if link.valid and link.exists:
                result.warnings.append(f"Strategic Claude symlink still exists: {link.path}")