import pytest

from scbasic.errors import (
    AppError,
    ErrorCode,
    file_system_error,
    git_error,
    installation_error,
    is_error_code,
    is_file_system_error,
    is_git_error,
    user_friendly_message,
    validation_error,
)


@pytest.mark.parametrize(
    ("code", "message", "cause"),
    [
        (ErrorCode.FILE_SYSTEM_ERROR, "test error message", ValueError("original error")),
        (ErrorCode.VALIDATION_FAILED, "validation failed", None),
    ],
)
def test_new_app_error(code, message, cause):
    err = AppError(code, message, cause)
    assert err.code == code
    assert err.message == message
    assert err.cause is cause
    assert err.context == {}


def test_str_with_cause():
    err = AppError(ErrorCode.FILE_SYSTEM_ERROR, "test error message", ValueError("original error"))
    assert str(err) == "FILE_SYSTEM_ERROR: test error message (caused by: original error)"


def test_str_without_cause():
    err = AppError(ErrorCode.VALIDATION_FAILED, "validation failed")
    assert str(err) == "VALIDATION_FAILED: validation failed"


def test_cause_chain():
    original = ValueError("original error")
    err = AppError(ErrorCode.FILE_SYSTEM_ERROR, "test message", original)
    assert err.__cause__ is original
    assert AppError(ErrorCode.VALIDATION_FAILED, "test message").__cause__ is None


def test_matches():
    err1 = AppError(ErrorCode.FILE_SYSTEM_ERROR, "error 1")
    err2 = AppError(ErrorCode.FILE_SYSTEM_ERROR, "error 2")
    err3 = AppError(ErrorCode.VALIDATION_FAILED, "error 3")
    assert err1.matches(err2) is True
    assert err1.matches(err3) is False
    assert err1.matches(ValueError("regular error")) is False


def test_with_context_returns_same_instance():
    err = AppError(ErrorCode.FILE_SYSTEM_ERROR, "test message")
    result = err.with_context("key1", "value1")
    assert result is err
    assert err.context["key1"] == "value1"
    err.with_context("key2", 42)
    assert err.context["key2"] == 42


def test_context_chaining_and_overwrite():
    err = AppError(ErrorCode.VALIDATION_FAILED, "test")
    err.with_context("key1", "value1").with_context("key2", 123).with_context("key3", True)
    assert err.context == {"key1": "value1", "key2": 123, "key3": True}
    err.with_context("key1", "new_value1")
    assert err.context["key1"] == "new_value1"


def test_git_error():
    original = RuntimeError("git command failed")
    err = git_error(ErrorCode.GIT_CLONE_ERROR, "clone", original)
    assert err.code == ErrorCode.GIT_CLONE_ERROR
    assert err.message == "Git operation failed: clone"
    assert err.cause is original
    assert err.context["operation"] == "clone"


def test_file_system_error():
    original = PermissionError("permission denied")
    err = file_system_error(ErrorCode.PERMISSION_DENIED, "/test/path", original)
    assert err.code == ErrorCode.PERMISSION_DENIED
    assert err.message == "File system operation failed for path: /test/path"
    assert err.cause is original
    assert err.context["path"] == "/test/path"


def test_installation_error():
    original = RuntimeError("installation failed")
    err = installation_error(ErrorCode.INSTALLATION_FAILED, "/target/dir", original)
    assert err.code == ErrorCode.INSTALLATION_FAILED
    assert err.message == "Installation failed in directory: /target/dir"
    assert err.cause is original
    assert err.context["target_dir"] == "/target/dir"


def test_validation_error():
    err = validation_error("test_field", "test_value", "validation failed")
    assert err.code == ErrorCode.VALIDATION_FAILED
    assert err.message == "Validation failed for test_field: validation failed"
    assert err.cause is None
    assert err.context["field"] == "test_field"
    assert err.context["value"] == "test_value"


@pytest.mark.parametrize(
    ("err", "code", "expected"),
    [
        (AppError(ErrorCode.FILE_SYSTEM_ERROR, "test"), ErrorCode.FILE_SYSTEM_ERROR, True),
        (AppError(ErrorCode.FILE_SYSTEM_ERROR, "test"), ErrorCode.VALIDATION_FAILED, False),
        (ValueError("regular error"), ErrorCode.FILE_SYSTEM_ERROR, False),
        (None, ErrorCode.FILE_SYSTEM_ERROR, False),
    ],
)
def test_is_error_code(err, code, expected):
    assert is_error_code(err, code) is expected


def test_is_error_code_finds_wrapped_app_error():
    wrapper = RuntimeError("outer")
    wrapper.__cause__ = AppError(ErrorCode.BACKUP_FAILED, "inner")
    assert is_error_code(wrapper, ErrorCode.BACKUP_FAILED) is True


@pytest.mark.parametrize(
    ("err", "expected"),
    [
        (AppError(ErrorCode.GIT_CLONE_ERROR, "test"), True),
        (AppError(ErrorCode.GIT_CHECKOUT_ERROR, "test"), True),
        (AppError(ErrorCode.GIT_NOT_FOUND, "test"), True),
        (AppError(ErrorCode.FILE_SYSTEM_ERROR, "fs error"), False),
        (ValueError("regular error"), False),
        (None, False),
    ],
)
def test_is_git_error(err, expected):
    assert is_git_error(err) is expected


@pytest.mark.parametrize(
    ("err", "expected"),
    [
        (AppError(ErrorCode.DIRECTORY_NOT_FOUND, "test"), True),
        (AppError(ErrorCode.PERMISSION_DENIED, "test"), True),
        (AppError(ErrorCode.SYMLINK_CREATION_FAILED, "test"), True),
        (AppError(ErrorCode.GIT_CLONE_ERROR, "git error"), False),
        (ValueError("regular error"), False),
        (None, False),
    ],
)
def test_is_file_system_error(err, expected):
    assert is_file_system_error(err) is expected


@pytest.mark.parametrize(
    ("err", "expected"),
    [
        (
            AppError(ErrorCode.GIT_NOT_INSTALLED, "git not found"),
            "Git is not installed or not available in PATH. Please install Git and try again.",
        ),
        (
            AppError(ErrorCode.GIT_CLONE_FAILED, "clone failed"),
            "Failed to download the Strategic Claude Basic repository. Please check your internet connection.",
        ),
        (
            AppError(ErrorCode.PERMISSION_DENIED, "no access"),
            "Permission denied. Please check that you have write permissions to the target directory.",
        ),
        (
            AppError(ErrorCode.ALREADY_INSTALLED, "exists"),
            "Strategic Claude Basic is already installed in this directory. Use --force to reinstall or --force-core to update core files only.",
        ),
        (AppError(ErrorCode.USER_CANCELLED, "cancelled"), "Operation cancelled by user."),
        (AppError("UNKNOWN_ERROR", "unknown error"), "unknown error"),
        (ValueError("regular error message"), "regular error message"),
    ],
)
def test_user_friendly_message(err, expected):
    assert user_friendly_message(err) == expected


def test_error_code_string_value():
    err = AppError(ErrorCode.FILE_SYSTEM_ERROR, "message")
    assert str(err) == "FILE_SYSTEM_ERROR: message"
    assert is_error_code(err, "FILE_SYSTEM_ERROR") is True


def test_app_error_can_be_raised_and_caught():
    with pytest.raises(AppError) as info:
        raise file_system_error(ErrorCode.PERMISSION_DENIED, "/p", PermissionError("denied"))
    assert info.value.code == ErrorCode.PERMISSION_DENIED
    assert is_file_system_error(info.value) is True
    assert str(info.value.__cause__) == "denied"