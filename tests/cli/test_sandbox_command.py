from __future__ import annotations

import pytest

from scribe.cli import sandbox_command
from scribe.cli.sandbox_command import SandboxConfigError, resolve_sandbox_command


def _which_for(*available: str):
    def which(name: str) -> str | None:
        return f"/usr/bin/{name}" if name in available else None

    return which


class TestResolveSandboxCommand:
    @pytest.mark.parametrize("choice", [None, "", "0", "false", "FALSE"])
    def test_disabled(self, choice: str | None) -> None:
        assert resolve_sandbox_command(choice, which=_which_for("docker")) is None

    def test_true_prefers_seatbelt_on_macos(self) -> None:
        which = _which_for("sandbox-exec", "docker")
        assert resolve_sandbox_command("true", platform="darwin", which=which) == "sandbox-exec"

    def test_true_on_linux_skips_seatbelt(self) -> None:
        which = _which_for("sandbox-exec", "podman")
        assert resolve_sandbox_command("1", platform="linux", which=which) == "podman"

    def test_true_prefers_docker_over_podman(self) -> None:
        which = _which_for("docker", "podman")
        assert resolve_sandbox_command("true", platform="linux", which=which) == "docker"

    def test_true_without_any_command(self) -> None:
        with pytest.raises(SandboxConfigError, match="no sandbox command"):
            resolve_sandbox_command("true", platform="linux", which=_which_for())

    def test_explicit_command(self) -> None:
        assert resolve_sandbox_command("Podman", which=_which_for("podman")) == "podman"

    def test_explicit_command_not_installed(self) -> None:
        with pytest.raises(SandboxConfigError, match="not found"):
            resolve_sandbox_command("docker", which=_which_for("podman"))

    def test_unknown_command(self) -> None:
        with pytest.raises(SandboxConfigError, match="invalid sandbox command"):
            resolve_sandbox_command("firejail", which=_which_for("firejail"))


class TestMain:
    def test_prints_command(
        self, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
    ) -> None:
        monkeypatch.setenv("SCRIBE_SANDBOX", "docker")
        monkeypatch.setattr(sandbox_command.shutil, "which", _which_for("docker"))

        assert sandbox_command.main() == 0
        assert capsys.readouterr().out.strip() == "docker"

    def test_no_sandbox(self, capsys: pytest.CaptureFixture[str]) -> None:
        assert sandbox_command.main() == 1
        assert capsys.readouterr().out == ""

    def test_invalid_choice(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("SCRIBE_SANDBOX", "firejail")
        assert sandbox_command.main() == 1
