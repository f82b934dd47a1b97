"""Options for installation and cleanup operations."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from datetime import timedelta
from enum import Enum

from scbasic.config import DEFAULT_GIT_TIMEOUT
from scbasic.errors import AppError, ErrorCode

DEFAULT_TEMPLATE_ID = "main"


class GitignoreMode(str, Enum):
    """How framework files are treated by .gitignore."""

    TRACK = "track"
    ALL = "all"
    NON_USER = "non-user"

    def __str__(self) -> str:
        return self.value


_VALID_GITIGNORE_MODES = frozenset(mode.value for mode in GitignoreMode)


@dataclass
class InstallConfig:
    """Options for an installation."""

    target_dir: str
    template_id: str = DEFAULT_TEMPLATE_ID
    force: bool = False
    force_core: bool = False
    skip_confirm: bool = False
    no_backup: bool = False
    dry_run: bool = False
    verbose: bool = False
    gitignore_mode: str = GitignoreMode.TRACK.value
    backup_dir: str = ""
    git_timeout: timedelta = DEFAULT_GIT_TIMEOUT

    def is_selective_update(self) -> bool:
        """Whether only core files are to be updated."""
        return self.force_core and not self.force

    def should_create_backup(self) -> bool:
        """Whether backups are to be made."""
        return not self.no_backup and not self.dry_run

    def should_prompt_user(self) -> bool:
        """Whether the user is to be asked for confirmation."""
        return not self.skip_confirm and not self.dry_run

    def validate(self, valid_template_ids: Iterable[str] | None = None) -> None:
        """Raise AppError if the options are inconsistent.

        When valid_template_ids is given, the template ID must be one of them.
        """
        if not self.target_dir:
            raise AppError(ErrorCode.INVALID_PATH, "target directory cannot be empty")
        if not self.template_id:
            raise AppError(ErrorCode.INVALID_CONFIGURATION, "template ID cannot be empty")
        if valid_template_ids is not None and self.template_id not in set(valid_template_ids):
            raise AppError(
                ErrorCode.INVALID_CONFIGURATION,
                "invalid template ID: " + self.template_id,
                ValueError(f"unknown template ID: {self.template_id}"),
            )
        if self.force and self.force_core:
            raise AppError(
                ErrorCode.INVALID_CONFIGURATION,
                "cannot specify both --force and --force-core flags",
            )
        if str(self.gitignore_mode) not in _VALID_GITIGNORE_MODES:
            raise AppError(
                ErrorCode.INVALID_CONFIGURATION,
                f"invalid gitignore mode: {self.gitignore_mode}",
            )


@dataclass
class CleanConfig:
    """Options for a cleanup."""

    target_dir: str
    force: bool = False
    verbose: bool = False
    dry_run: bool = False
    preserve_user_content: bool = True