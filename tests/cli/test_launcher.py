"""Tests for the scribe-writer launcher."""

from __future__ import annotations

from pathlib import Path
import subprocess
import sys
from unittest.mock import AsyncMock, MagicMock, patch

import pytest

from scribe import __version__
from scribe.cli import launcher
from scribe.core.config import load_environment

# =============================================================================
# ENVIRONMENT AND COMMAND LINE
# =============================================================================


class TestBuildChildEnv:
    def test_overlay(self, tmp_path: Path) -> None:
        env = launcher.build_child_env(tmp_path, base={"PATH": "/bin", "SCRIBE_WRITER_MODE": "novel-auto"})
        assert env == {
            "PATH": "/bin",
            "CLI_VERSION": __version__,
            "DEV": "true",
            "SCRIBE_WRITER_MODE": "pro-writer",
            "SCRIBE_WORKSPACE_DIR": str(tmp_path),
        }

    def test_inherits_process_environment(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.setenv("SCRIBE_WRITER_LANG", "en")
        env = launcher.build_child_env(tmp_path)
        assert env["SCRIBE_WRITER_LANG"] == "en"
        assert env["SCRIBE_WORKSPACE_DIR"] == str(tmp_path)


class TestBuildDebugArgs:
    def test_debug_disabled(self) -> None:
        assert launcher.build_debug_args(load_environment(), None) == []

    def test_local_debugger(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("DEBUG", "1")
        assert launcher.build_debug_args(load_environment(), None) == [
            "-m", "debugpy", "--listen", "5678", "--wait-for-client",
        ]

    def test_inside_sandbox_listens_on_all_interfaces(
        self, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.setenv("DEBUG", "1")
        monkeypatch.setenv("SANDBOX", "docker")
        monkeypatch.setenv("DEBUG_PORT", "9229")
        args = launcher.build_debug_args(load_environment(), None)
        assert args[args.index("--listen") + 1] == "0.0.0.0:9229"

    def test_inside_sandbox_default_port(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("DEBUG", "true")
        monkeypatch.setenv("SANDBOX", "podman")
        args = launcher.build_debug_args(load_environment(), None)
        assert "0.0.0.0:5678" in args

    def test_sandbox_command_disables_debugger(
        self, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.setenv("DEBUG", "1")
        assert launcher.build_debug_args(load_environment(), "docker") == []


class TestBuildChildCommand:
    def test_forwards_arguments(self) -> None:
        assert launcher.build_child_command(["--mode", "ghostwriter"], []) == [
            sys.executable, "-m", "scribe", "--mode", "ghostwriter",
        ]

    def test_debug_args_come_first(self) -> None:
        command = launcher.build_child_command([], ["-m", "debugpy"])
        assert command == [sys.executable, "-m", "debugpy", "-m", "scribe"]

    def test_workspace_is_not_forwarded(self) -> None:
        args, forwarded = launcher.parse_launcher_arguments(
            ["--workspace", "drafts", "--print-prompt"]
        )
        assert args.workspace == Path("drafts")
        assert forwarded == ["--print-prompt"]


class TestEnsureWorkspace:
    def test_creates_directory(self, tmp_path: Path) -> None:
        workspace = launcher.ensure_workspace(tmp_path / "a" / "my_writings")
        assert workspace.is_dir()
        assert workspace.is_absolute()

    def test_existing_directory(self, tmp_path: Path) -> None:
        assert launcher.ensure_workspace(tmp_path) == tmp_path.resolve()


# =============================================================================
# HELPER PROCESSES
# =============================================================================


class TestGetSandboxCommand:
    def test_returns_printed_command(self, tmp_path: Path) -> None:
        completed = subprocess.CompletedProcess(args=[], returncode=0, stdout="podman\n")
        with patch("scribe.cli.launcher.subprocess.run", return_value=completed) as run:
            assert launcher.get_sandbox_command(tmp_path) == "podman"
        assert run.call_args.args[0][-1] == "scribe.cli.sandbox_command"

    def test_helper_failure(self, tmp_path: Path) -> None:
        error = subprocess.CalledProcessError(1, ["sandbox_command"])
        with patch("scribe.cli.launcher.subprocess.run", side_effect=error):
            assert launcher.get_sandbox_command(tmp_path) is None

    def test_empty_output(self, tmp_path: Path) -> None:
        completed = subprocess.CompletedProcess(args=[], returncode=0, stdout="\n")
        with patch("scribe.cli.launcher.subprocess.run", return_value=completed):
            assert launcher.get_sandbox_command(tmp_path) is None


class TestSpawnChild:
    @pytest.mark.asyncio
    async def test_returns_child_exit_code(self, tmp_path: Path) -> None:
        command = [sys.executable, "-c", "import os, sys; sys.exit(int(os.environ['CODE']))"]
        code = await launcher.spawn_child(command, {"CODE": "7"}, tmp_path)
        assert code == 7

    @pytest.mark.asyncio
    async def test_runs_in_workspace(self, tmp_path: Path) -> None:
        marker = tmp_path / "cwd.txt"
        command = [
            sys.executable,
            "-c",
            "import os, pathlib; pathlib.Path('cwd.txt').write_text(os.getcwd())",
        ]
        assert await launcher.spawn_child(command, {}, tmp_path) == 0
        assert Path(marker.read_text()).resolve() == tmp_path.resolve()


# =============================================================================
# MAIN
# =============================================================================


@pytest.fixture
def project_dir(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    monkeypatch.chdir(tmp_path)
    return tmp_path


@pytest.fixture
def quiet_logging():
    with patch("scribe.cli.launcher.setup_logging"):
        yield


@pytest.mark.usefixtures("quiet_logging")
class TestMain:
    def test_exits_with_child_code(self, project_dir: Path) -> None:
        spawn = AsyncMock(return_value=3)
        with (
            patch("scribe.cli.launcher.run_build_check") as build_check,
            patch("scribe.cli.launcher.get_sandbox_command", return_value=None),
            patch("scribe.cli.launcher.spawn_child", spawn),
            pytest.raises(SystemExit) as excinfo,
        ):
            launcher.main(["--mode", "ghostwriter"])

        assert excinfo.value.code == 3
        build_check.assert_called_once_with(Path.cwd())

        command, env, cwd = spawn.call_args.args
        workspace = (project_dir / "my_writings").resolve()
        assert cwd == workspace
        assert workspace.is_dir()
        assert command[-3:] == ["scribe", "--mode", "ghostwriter"]
        assert env["SCRIBE_WORKSPACE_DIR"] == str(workspace)
        assert env["SCRIBE_WRITER_MODE"] == "pro-writer"
        assert "SCRIBE_CLI_NO_RELAUNCH" not in env

    def test_custom_workspace(self, project_dir: Path) -> None:
        spawn = AsyncMock(return_value=0)
        with (
            patch("scribe.cli.launcher.run_build_check"),
            patch("scribe.cli.launcher.get_sandbox_command", return_value=None),
            patch("scribe.cli.launcher.spawn_child", spawn),
            pytest.raises(SystemExit) as excinfo,
        ):
            launcher.main(["--workspace", "novel"])

        assert excinfo.value.code == 0
        assert spawn.call_args.args[2] == (project_dir / "novel").resolve()

    def test_debug_sets_no_relaunch(
        self, project_dir: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.setenv("DEBUG", "1")
        spawn = AsyncMock(return_value=0)
        with (
            patch("scribe.cli.launcher.run_build_check"),
            patch("scribe.cli.launcher.get_sandbox_command", return_value=None),
            patch("scribe.cli.launcher.spawn_child", spawn),
            pytest.raises(SystemExit),
        ):
            launcher.main([])

        command, env, _ = spawn.call_args.args
        assert env["SCRIBE_CLI_NO_RELAUNCH"] == "true"
        assert "debugpy" in command

    def test_build_failure_stops_launch(self, project_dir: Path) -> None:
        spawn = MagicMock()
        failure = subprocess.CalledProcessError(2, ["build_status"])
        with (
            patch("scribe.cli.launcher.run_build_check", side_effect=failure),
            patch("scribe.cli.launcher.spawn_child", spawn),
            pytest.raises(SystemExit) as excinfo,
        ):
            launcher.main([])

        assert excinfo.value.code == 2
        spawn.assert_not_called()
