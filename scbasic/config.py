"""Fixed names, paths and defaults for framework installations."""

from __future__ import annotations

from datetime import datetime, timedelta

BRANCH = "main"
FIXED_COMMIT = "4efe6386d0a949e3e2ddc1b0902ea937986da62f"

DEFAULT_TARGET_DIR = "."
TEMP_DIR_PREFIX = "strategic-claude-base-"
STRATEGIC_CLAUDE_BASIC_DIR = ".strategic-claude-basic"
CLAUDE_DIR = ".claude"
CODEX_DIR = ".codex"
BACKUP_DIR_PREFIX = "strategic-claude-basic-backup-"

CORE_DIR = "core"
GUIDES_DIR = "guides"
TEMPLATES_DIR = "templates"
CONFIG_DIR = "config"

ARCHIVES_DIR = "archives"
DECISIONS_DIR = "decisions"
ISSUES_DIR = "issues"
PLAN_DIR = "plan"
PRODUCT_DIR = "product"
RESEARCH_DIR = "research"
SUMMARY_DIR = "summary"
TOOLS_DIR = "tools"
VALIDATION_DIR = "validation"

AGENTS_DIR = "agents"
COMMANDS_DIR = "commands"
HOOKS_DIR = "hooks"
PROMPTS_DIR = "prompts"

CLAUDE_COMMANDS_DIR = "commands"
CLAUDE_CONFIG_FILE = "CLAUDE.md"

SETTINGS_TEMPLATE_FILE = "templates/hooks/dot_claude.settings.template.json"
CLAUDE_SETTINGS_FILE = "settings.json"
SETTINGS_BACKUP_PREFIX = "settings-backup-"

CODEX_CONFIG_TEMPLATE_FILE = "templates/hooks/dot_codex.config.template.toml"
CODEX_CONFIG_FILE = "config.toml"
CODEX_CONFIG_BACKUP_PREFIX = "config-backup-"

REPLACED_DIRS = "core/,guides/,templates/"
USER_PRESERVED_DIRS = (
    "archives/,decisions/,issues/,plan/,product/,research/,summary/,tools/,validation/"
)

DEFAULT_GIT_TIMEOUT = timedelta(seconds=30)
DEFAULT_NETWORK_TIMEOUT = timedelta(seconds=30)

MAX_PATH_LENGTH = 260
MAX_DIRECTORY_NAME_LEN = 255
MIN_DIRECTORY_NAME_LEN = 1

APP_NAME = "strategic-claude-basic-cli"
APP_DESCRIPTION = "CLI tool for managing Strategic Claude Basic framework installations"
CONFIG_FILE_NAME = "strategic-claude-basic.json"

TEMPLATE_INFO_FILE = ".template-info"

PRE_INSTALL_SCRIPT = "pre-install.sh"
POST_INSTALL_SCRIPT = "post-install.sh"

EXIT_SUCCESS = 0
EXIT_GENERAL_ERROR = 1
EXIT_VALIDATION_ERROR = 2
EXIT_PERMISSION_ERROR = 3
EXIT_NETWORK_ERROR = 4
EXIT_USER_CANCELLATION = 5
EXIT_INSTALLATION_ERROR = 6
EXIT_ALREADY_INSTALLED = 7
EXIT_NOT_INSTALLED = 8

DIR_PERMISSIONS = 0o755
FILE_PERMISSIONS = 0o644

MAX_BACKUP_AGE = timedelta(days=30)
MAX_BACKUPS = 10

_BACKUP_TIMESTAMP_FORMAT = "%Y%m%d-%H%M%S"


def framework_directories() -> list[str]:
    """Directories that make up the framework."""
    return [CORE_DIR, GUIDES_DIR, TEMPLATES_DIR]


def core_directories() -> list[str]:
    """Directories replaced during updates."""
    return [CORE_DIR, GUIDES_DIR, TEMPLATES_DIR]


def user_preserved_directories() -> list[str]:
    """Directories kept intact during selective updates."""
    return [
        ARCHIVES_DIR,
        DECISIONS_DIR,
        ISSUES_DIR,
        PLAN_DIR,
        PRODUCT_DIR,
        RESEARCH_DIR,
        SUMMARY_DIR,
        TOOLS_DIR,
        VALIDATION_DIR,
    ]


def required_symlinks() -> dict[str, str]:
    """Symlinks inside .claude, mapped to their relative targets."""
    base = f"../../{STRATEGIC_CLAUDE_BASIC_DIR}/core"
    return {
        "agents/strategic": f"{base}/agents",
        "commands/strategic": f"{base}/commands",
        "hooks/strategic": f"{base}/hooks",
    }


def codex_required_symlinks() -> dict[str, str]:
    """Symlinks inside .codex, mapped to their relative targets."""
    base = f"../../{STRATEGIC_CLAUDE_BASIC_DIR}/core"
    return {
        "prompts/strategic": f"{base}/commands",
        "hooks/strategic": f"{base}/hooks",
    }


def backup_dir_name(now: datetime | None = None) -> str:
    """Name of a backup directory stamped with the given (or current) time."""
    moment = now if now is not None else datetime.now()
    return BACKUP_DIR_PREFIX + moment.strftime(_BACKUP_TIMESTAMP_FORMAT)


def _under_any(path: str, roots: list[str]) -> bool:
    return any(path == root or path.startswith(root + "/") for root in roots)


def is_user_preserved_path(path: str) -> bool:
    """Whether a relative path lies in a user-preserved directory."""
    return _under_any(path, user_preserved_directories())


def is_core_file(path: str) -> bool:
    """Whether a relative path lies in a directory replaced during updates."""
    return _under_any(path, core_directories())