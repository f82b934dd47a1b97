"""Data models for installation status, plans, MCP servers and Claude settings."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Any

from scbasic.errors import AppError, ErrorCode


class InstallationType(str, Enum):
    """Kind of installation operation."""

    NEW = "New Installation"
    UPDATE = "Update Core Only"
    OVERWRITE = "Full Overwrite"

    def __str__(self) -> str:
        return self.value


@dataclass
class SymlinkStatus:
    """State of a single framework symlink."""

    name: str
    path: str = ""
    valid: bool = False
    target: str = ""
    exists: bool = False
    error: str = ""


@dataclass
class StatusInfo:
    """Overall installation status of a target directory."""

    target_dir: str
    is_installed: bool = False
    strategic_claude_dir: bool = False
    claude_dir: bool = False
    codex_dir: bool = False
    installed_template: Any = None
    has_pre_install_script: bool = False
    has_post_install_script: bool = False
    symlinks: list[SymlinkStatus] = field(default_factory=list)
    codex_symlinks: list[SymlinkStatus] = field(default_factory=list)
    issues: list[str] = field(default_factory=list)
    installation_date: datetime | None = None
    version: str = ""
    commit_hash: str = ""
    strategic_claude_dir_path: str = ""
    claude_dir_path: str = ""
    codex_dir_path: str = ""

    def add_issue(self, issue: str) -> None:
        """Record an issue."""
        self.issues.append(issue)

    def add_symlink(self, symlink: SymlinkStatus) -> None:
        """Record the status of a .claude symlink."""
        self.symlinks.append(symlink)

    def add_codex_symlink(self, symlink: SymlinkStatus) -> None:
        """Record the status of a .codex symlink."""
        self.codex_symlinks.append(symlink)

    def has_issues(self) -> bool:
        """Whether any issue was recorded."""
        return bool(self.issues)

    def valid_symlinks(self) -> int:
        """Number of valid .claude symlinks."""
        return sum(1 for link in self.symlinks if link.valid)

    def valid_codex_symlinks(self) -> int:
        """Number of valid .codex symlinks."""
        return sum(1 for link in self.codex_symlinks if link.valid)


@dataclass
class InstallationPlan:
    """What an installation would do to a target directory."""

    target_dir: str
    installation_type: InstallationType
    template: Any = None
    has_pre_install_script: bool = False
    has_post_install_script: bool = False
    existing_files: list[str] = field(default_factory=list)
    will_replace: list[str] = field(default_factory=list)
    will_preserve: list[str] = field(default_factory=list)
    will_create: list[str] = field(default_factory=list)
    directories_to_create: list[str] = field(default_factory=list)
    symlinks_to_create: list[str] = field(default_factory=list)
    symlinks_to_update: list[str] = field(default_factory=list)
    backup_required: bool = False
    backup_dir: str = ""
    has_conflicts: bool = False
    warnings: list[str] = field(default_factory=list)
    errors: list[str] = field(default_factory=list)

    def add_warning(self, warning: str) -> None:
        """Record a warning."""
        self.warnings.append(warning)

    def add_error(self, error: str) -> None:
        """Record an error; the plan then has conflicts."""
        self.errors.append(error)
        self.has_conflicts = True

    def is_valid(self) -> bool:
        """Whether the plan has neither conflicts nor errors."""
        return not self.has_conflicts and not self.errors

    def requires_confirmation(self) -> bool:
        """Whether the plan should be confirmed by the user."""
        return bool(self.will_replace) or self.has_conflicts or bool(self.warnings)


@dataclass
class MCPServer:
    """A single MCP server configuration."""

    command: str
    args: list[str] = field(default_factory=list)
    env: dict[str, str] = field(default_factory=dict)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> MCPServer:
        """Build a server from its JSON object."""
        return cls(
            command=data.get("command", ""),
            args=list(data.get("args") or []),
            env=dict(data.get("env") or {}),
        )

    def to_dict(self) -> dict[str, Any]:
        """The JSON object for this server; an empty env is left out."""
        result: dict[str, Any] = {"command": self.command, "args": list(self.args)}
        if self.env:
            result["env"] = dict(self.env)
        return result


@dataclass
class MCPConfig:
    """Contents of an .mcp.json file."""

    mcp_servers: dict[str, MCPServer] = field(default_factory=dict)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> MCPConfig:
        """Build a configuration from its JSON object."""
        servers = data.get("mcpServers") or {}
        return cls({name: MCPServer.from_dict(spec) for name, spec in servers.items()})

    def to_dict(self) -> dict[str, Any]:
        """The JSON object for this configuration."""
        return {
            "mcpServers": {name: server.to_dict() for name, server in self.mcp_servers.items()}
        }


@dataclass
class MCPTemplate:
    """An MCP server template available for installation."""

    name: str
    file_name: str
    server: MCPServer


@dataclass
class MCPInstallationPlan:
    """What an MCP installation would do."""

    target_dir: str = ""
    selected_mcps: list[MCPTemplate] = field(default_factory=list)
    has_existing_mcp: bool = False
    existing_mcp_path: str = ""
    backup_path: str = ""
    templates_dir: str = ""

    def validate(self) -> None:
        """Raise AppError if the plan is incomplete."""
        if not self.target_dir:
            raise AppError(ErrorCode.VALIDATION_FAILED, "target directory is required")
        if not self.selected_mcps:
            raise AppError(ErrorCode.VALIDATION_FAILED, "at least one MCP must be selected")
        if not self.templates_dir:
            raise AppError(ErrorCode.VALIDATION_FAILED, "templates directory is required")


@dataclass
class HookEntry:
    """One hook command."""

    type: str
    command: str


@dataclass
class HookMatcher:
    """A matcher pattern with its hooks."""

    matcher: str
    hooks: list[HookEntry] = field(default_factory=list)


@dataclass
class HooksSection:
    """Hook configurations by hook type."""

    pre_tool_use: list[HookMatcher] = field(default_factory=list)
    post_tool_use: list[HookMatcher] = field(default_factory=list)
    stop: list[HookMatcher] = field(default_factory=list)
    pre_compact: list[HookMatcher] = field(default_factory=list)
    notification: list[HookMatcher] = field(default_factory=list)


@dataclass
class PermissionsSection:
    """Claude Code permissions."""

    allow: list[str] = field(default_factory=list)
    additional_directories: list[str] = field(default_factory=list)


@dataclass
class ClaudeSettings:
    """Contents of a Claude Code settings.json file."""

    hooks: HooksSection | None = None
    permissions: PermissionsSection | None = None


_STRATEGIC_HOOKS = (
    "block-skip-hooks.py",
    "block-config-writes.py",
    "stop-session-notify.py",
    "precompact-notify.py",
    "notification-hook.py",
)


def hook_types_in_order() -> list[str]:
    """Hook types in processing order."""
    return ["PreToolUse", "PostToolUse", "Stop", "PreCompact", "Notification"]


def is_strategic_hook(command: str) -> bool:
    """Whether a hook command runs one of the framework's own hook scripts."""
    return any(command.endswith(hook) for hook in _STRATEGIC_HOOKS)