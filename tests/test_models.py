import pytest

from scbasic.errors import AppError, ErrorCode
from scbasic.models import (
    InstallationPlan,
    InstallationType,
    MCPConfig,
    MCPInstallationPlan,
    MCPServer,
    MCPTemplate,
    StatusInfo,
    SymlinkStatus,
    hook_types_in_order,
    is_strategic_hook,
)


def test_installation_type_values():
    assert InstallationType("New Installation") is InstallationType.NEW
    assert InstallationType("Update Core Only") is InstallationType.UPDATE
    assert str(InstallationType("Full Overwrite")) == "Full Overwrite"


def test_status_info_starts_empty():
    info = StatusInfo("/tmp/x")
    assert info.target_dir == "/tmp/x"
    assert not info.is_installed
    assert info.symlinks == [] and info.codex_symlinks == [] and info.issues == []
    assert not info.has_issues()


def test_status_info_issues():
    info = StatusInfo("/t")
    info.add_issue("broken")
    assert info.has_issues()
    assert info.issues == ["broken"]


def test_status_info_symlink_counts():
    info = StatusInfo("/t")
    info.add_symlink(SymlinkStatus("a", valid=True, exists=True))
    info.add_symlink(SymlinkStatus("b", valid=False, exists=True))
    info.add_symlink(SymlinkStatus("c", valid=True))
    info.add_codex_symlink(SymlinkStatus("d", valid=False))
    assert info.valid_symlinks() == 2
    assert info.valid_codex_symlinks() == 0
    assert [s.name for s in info.symlinks] == ["a", "b", "c"]


def test_status_info_lists_not_shared():
    first = StatusInfo("/a")
    second = StatusInfo("/b")
    first.add_issue("x")
    assert second.issues == []


def test_installation_plan_errors_make_conflicts():
    plan = InstallationPlan("/t", InstallationType.NEW)
    assert plan.is_valid()
    assert not plan.requires_confirmation()
    plan.add_error("bad")
    assert plan.has_conflicts
    assert not plan.is_valid()
    assert plan.requires_confirmation()


def test_installation_plan_warnings_need_confirmation():
    plan = InstallationPlan("/t", InstallationType.UPDATE)
    plan.add_warning("careful")
    assert plan.is_valid()
    assert plan.requires_confirmation()
    assert plan.warnings == ["careful"]


def test_installation_plan_replacements_need_confirmation():
    plan = InstallationPlan("/t", InstallationType.OVERWRITE)
    plan.will_replace.append("core/")
    assert plan.requires_confirmation()


def test_mcp_server_round_trip_with_env():
    data = {"command": "npx", "args": ["-y", "server"], "env": {"KEY": "token"}}
    server = MCPServer.from_dict(data)
    assert server.command == "npx"
    assert server.args == ["-y", "server"]
    assert server.to_dict() == data


def test_mcp_server_omits_empty_env():
    server = MCPServer.from_dict({"command": "run", "args": []})
    assert "env" not in server.to_dict()
    assert server.to_dict() == {"command": "run", "args": []}


def test_mcp_config_round_trip():
    data = {"mcpServers": {"one": {"command": "a", "args": ["b"]}}}
    config = MCPConfig.from_dict(data)
    assert list(config.mcp_servers) == ["one"]
    assert config.to_dict() == data


def test_mcp_config_missing_servers():
    assert MCPConfig.from_dict({}).mcp_servers == {}


def _template():
    return MCPTemplate("context7", "context7.mcp.json", MCPServer("npx"))


def test_mcp_plan_valid():
    plan = MCPInstallationPlan(target_dir="/t", selected_mcps=[_template()], templates_dir="/tpl")
    plan.validate()
    assert plan.selected_mcps[0].file_name == "context7.mcp.json"


@pytest.mark.parametrize(
    "kwargs, message",
    [
        ({"selected_mcps": [], "templates_dir": "/tpl"}, "target directory is required"),
        ({"target_dir": "/t", "templates_dir": "/tpl"}, "at least one MCP must be selected"),
        ({"target_dir": "/t"}, "templates directory is required"),
    ],
)
def test_mcp_plan_invalid(kwargs, message):
    if kwargs.get("target_dir") and "selected_mcps" not in kwargs:
        kwargs = {**kwargs, "selected_mcps": [] if "templates_dir" in kwargs else [_template()]}
    plan = MCPInstallationPlan(**kwargs)
    with pytest.raises(AppError) as info:
        plan.validate()
    assert info.value.code == ErrorCode.VALIDATION_FAILED
    assert info.value.message == message


def test_hook_types_order():
    assert hook_types_in_order() == [
        "PreToolUse",
        "PostToolUse",
        "Stop",
        "PreCompact",
        "Notification",
    ]


@pytest.mark.parametrize(
    "command, expected",
    [
        ("python3 .claude/hooks/strategic/block-skip-hooks.py", True),
        ("notification-hook.py", True),
        ("precompact-notify.py --flag", False),
        ("my-own-hook.py", False),
        ("", False),
    ],
)
def test_is_strategic_hook(command, expected):
    assert is_strategic_hook(command) is expected