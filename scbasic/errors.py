"""Structured application errors with codes and context."""

from __future__ import annotations

from enum import Enum
from typing import Any


class ErrorCode(str, Enum):
    """Kinds of failure the application reports."""

    GIT_CLONE_FAILED = "GIT_CLONE_FAILED"
    GIT_CHECKOUT_FAILED = "GIT_CHECKOUT_FAILED"
    GIT_NOT_INSTALLED = "GIT_NOT_INSTALLED"
    GIT_NOT_FOUND = "GIT_NOT_FOUND"
    GIT_CLONE_ERROR = "GIT_CLONE_ERROR"
    GIT_CHECKOUT_ERROR = "GIT_CHECKOUT_ERROR"
    GIT_ERROR = "GIT_ERROR"
    GIT_COMMIT_NOT_FOUND = "GIT_COMMIT_NOT_FOUND"

    FILE_SYSTEM_ERROR = "FILE_SYSTEM_ERROR"
    DIRECTORY_NOT_FOUND = "DIRECTORY_NOT_FOUND"
    DIRECTORY_NOT_EMPTY = "DIRECTORY_NOT_EMPTY"
    PERMISSION_DENIED = "PERMISSION_DENIED"
    FILE_ALREADY_EXISTS = "FILE_ALREADY_EXISTS"
    SYMLINK_CREATION_FAILED = "SYMLINK_CREATION_FAILED"
    SYMLINK_INVALID = "SYMLINK_INVALID"

    INSTALLATION_FAILED = "INSTALLATION_FAILED"
    ALREADY_INSTALLED = "ALREADY_INSTALLED"
    NOT_INSTALLED = "NOT_INSTALLED"
    BACKUP_FAILED = "BACKUP_FAILED"
    RESTORE_FAILED = "RESTORE_FAILED"

    INVALID_PATH = "INVALID_PATH"
    INVALID_CONFIGURATION = "INVALID_CONFIGURATION"
    VALIDATION_FAILED = "VALIDATION_FAILED"

    NETWORK_TIMEOUT = "NETWORK_TIMEOUT"
    NETWORK_ERROR = "NETWORK_ERROR"

    USER_CANCELLED = "USER_CANCELLED"
    INPUT_ERROR = "INPUT_ERROR"

    def __str__(self) -> str:
        return self.value


_GIT_CODES = frozenset(
    {
        ErrorCode.GIT_CLONE_FAILED,
        ErrorCode.GIT_CHECKOUT_FAILED,
        ErrorCode.GIT_NOT_INSTALLED,
        ErrorCode.GIT_NOT_FOUND,
        ErrorCode.GIT_CLONE_ERROR,
        ErrorCode.GIT_CHECKOUT_ERROR,
        ErrorCode.GIT_ERROR,
        ErrorCode.GIT_COMMIT_NOT_FOUND,
    }
)

_FILE_SYSTEM_CODES = frozenset(
    {
        ErrorCode.DIRECTORY_NOT_FOUND,
        ErrorCode.DIRECTORY_NOT_EMPTY,
        ErrorCode.PERMISSION_DENIED,
        ErrorCode.FILE_ALREADY_EXISTS,
        ErrorCode.SYMLINK_CREATION_FAILED,
        ErrorCode.SYMLINK_INVALID,
    }
)

_FRIENDLY_MESSAGES = {
    ErrorCode.GIT_NOT_INSTALLED: "Git is not installed or not available in PATH. Please install Git and try again.",
    ErrorCode.GIT_NOT_FOUND: "Git is not installed or not available in PATH. Please install Git and try again.",
    ErrorCode.GIT_CLONE_FAILED: "Failed to download the Strategic Claude Basic repository. Please check your internet connection.",
    ErrorCode.GIT_CLONE_ERROR: "Failed to download the Strategic Claude Basic repository. Please check your internet connection.",
    ErrorCode.GIT_CHECKOUT_FAILED: "Failed to checkout the specified commit. The repository may be corrupted or the commit may not exist.",
    ErrorCode.GIT_CHECKOUT_ERROR: "Failed to checkout the specified commit. The repository may be corrupted or the commit may not exist.",
    ErrorCode.GIT_COMMIT_NOT_FOUND: "The specified commit was not found in the repository.",
    ErrorCode.GIT_ERROR: "A git operation failed. Please ensure the repository is valid and try again.",
    ErrorCode.PERMISSION_DENIED: "Permission denied. Please check that you have write permissions to the target directory.",
    ErrorCode.ALREADY_INSTALLED: "Strategic Claude Basic is already installed in this directory. Use --force to reinstall or --force-core to update core files only.",
    ErrorCode.NOT_INSTALLED: "Strategic Claude Basic is not installed in this directory.",
    ErrorCode.USER_CANCELLED: "Operation cancelled by user.",
    ErrorCode.DIRECTORY_NOT_FOUND: "The specified directory does not exist.",
    ErrorCode.INVALID_PATH: "The specified path is invalid or inaccessible.",
}


class AppError(Exception):
    """An application error carrying a code, a message, a cause and context."""

    def __init__(
        self,
        code: ErrorCode | str,
        message: str,
        cause: BaseException | None = None,
        context: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message)
        self.code = code
        self.message = message
        self.cause = cause
        self.context: dict[str, Any] = dict(context) if context else {}
        self.__cause__ = cause

    def __str__(self) -> str:
        code = self.code.value if isinstance(self.code, ErrorCode) else str(self.code)
        if self.cause is not None:
            return f"{code}: {self.message} (caused by: {self.cause})"
        return f"{code}: {self.message}"

    def with_context(self, key: str, value: Any) -> AppError:
        """Record a context value and return this error for chaining."""
        self.context[key] = value
        return self

    def matches(self, other: BaseException | None) -> bool:
        """Whether another error is an AppError with the same code."""
        return isinstance(other, AppError) and self.code == other.code


def _find_app_error(err: BaseException | None) -> AppError | None:
    seen: set[int] = set()
    while err is not None and id(err) not in seen:
        if isinstance(err, AppError):
            return err
        seen.add(id(err))
        err = err.__cause__
    return None


def git_error(code: ErrorCode, operation: str, cause: BaseException | None) -> AppError:
    """Error for a failed git operation."""
    return AppError(code, f"Git operation failed: {operation}", cause).with_context(
        "operation", operation
    )


def file_system_error(code: ErrorCode, path: str, cause: BaseException | None) -> AppError:
    """Error for a failed file system operation on a path."""
    return AppError(
        code, f"File system operation failed for path: {path}", cause
    ).with_context("path", path)


def installation_error(
    code: ErrorCode, target_dir: str, cause: BaseException | None
) -> AppError:
    """Error for a failed installation in a directory."""
    return AppError(
        code, f"Installation failed in directory: {target_dir}", cause
    ).with_context("target_dir", target_dir)


def validation_error(field: str, value: Any, message: str) -> AppError:
    """Error for a field that failed validation."""
    return (
        AppError(ErrorCode.VALIDATION_FAILED, f"Validation failed for {field}: {message}")
        .with_context("field", field)
        .with_context("value", value)
    )


def is_error_code(err: BaseException | None, code: ErrorCode | str) -> bool:
    """Whether the first AppError in the cause chain has the given code."""
    app_err = _find_app_error(err)
    return app_err is not None and app_err.code == code


def is_git_error(err: BaseException | None) -> bool:
    """Whether the error chain holds a git-related AppError."""
    app_err = _find_app_error(err)
    return app_err is not None and app_err.code in _GIT_CODES


def is_file_system_error(err: BaseException | None) -> bool:
    """Whether the error chain holds a file-system AppError."""
    app_err = _find_app_error(err)
    return app_err is not None and app_err.code in _FILE_SYSTEM_CODES


def user_friendly_message(err: BaseException) -> str:
    """A message fit to show the user for the given error."""
    app_err = _find_app_error(err)
    if app_err is None:
        return str(err)
    return _FRIENDLY_MESSAGES.get(app_err.code, app_err.message)