"""Tests for xcodebuild_tooling.cli (main dispatch, action_cmd, parse_common)."""

from pathlib import Path
from unittest.mock import patch

import pytest

from xcodebuild_tooling.cli.action_cmd import run_action_argv
from xcodebuild_tooling.cli.parse_common import parse_flags, path_resolver


class TestParseFlags:
    def test_values_switches_and_rest(self) -> None:
        parsed, rest = parse_flags(
            ["--inputs-file", "in.yaml", "extra", "--verbose"],
            ("inputs_file", "--inputs-file", None, None),
            switches=[("verbose", "--verbose")],
        )
        assert parsed == {"inputs_file": "in.yaml", "verbose": True}
        assert rest == ["extra"]

    def test_defaults(self) -> None:
        parsed, rest = parse_flags([], ("root", "--root", Path.cwd, path_resolver), switches=[("verbose", "--verbose")])
        assert parsed == {"root": Path.cwd(), "verbose": False}
        assert rest == []

    def test_flag_without_value_is_left_in_rest(self) -> None:
        parsed, rest = parse_flags(["--inputs-file"], ("inputs_file", "--inputs-file", None, None))
        assert parsed["inputs_file"] is None
        assert rest == ["--inputs-file"]


class TestRunActionArgv:
    def test_compose_from_inputs_file(self, tmp_path: Path, capsys, monkeypatch) -> None:
        monkeypatch.delenv("GITHUB_ACTIONS", raising=False)
        monkeypatch.delenv("GITHUB_OUTPUT", raising=False)
        p = tmp_path / "inputs.yaml"
        p.write_text("project: App.xcodeproj\nscheme: App\nuse-xcpretty: false\n")
        with patch("xcodebuild_tooling.run.supervisor.subprocess.Popen") as m_popen:
            rc = run_action_argv(["--inputs-file", str(p)], compose_only=True)
        assert rc == 0
        assert not m_popen.called
        assert "unprocessed-command=xcodebuild -project App.xcodeproj -scheme App build" in capsys.readouterr().out

    def test_missing_inputs_file(self, tmp_path: Path, capsys, monkeypatch) -> None:
        monkeypatch.delenv("GITHUB_ACTIONS", raising=False)
        rc = run_action_argv(["--inputs-file", str(tmp_path / "nope.yaml")])
        assert rc == 1
        assert "Inputs file not found" in capsys.readouterr().err

    def test_inputs_from_environment(self, capsys, monkeypatch) -> None:
        monkeypatch.delenv("GITHUB_ACTIONS", raising=False)
        monkeypatch.delenv("GITHUB_OUTPUT", raising=False)
        monkeypatch.setenv("INPUT_WORKSPACE", "App.xcworkspace")
        monkeypatch.setenv("INPUT_SCHEME", "App")
        monkeypatch.setenv("INPUT_ACTION", "test")
        assert run_action_argv([], compose_only=True) == 0
        out = capsys.readouterr().out
        assert "unprocessed-command=xcodebuild -workspace App.xcworkspace -scheme App test | xcpretty --color" in out


class TestMain:
    def test_no_command_prints_usage(self, capsys) -> None:
        from xcodebuild_tooling.cli.main import main

        with patch("sys.argv", ["xcodebuild-action"]), pytest.raises(SystemExit) as exc_info:
            main()
        assert exc_info.value.code == 1
        assert "Usage: xcodebuild-action" in capsys.readouterr().err

    def test_unknown_command(self, capsys) -> None:
        from xcodebuild_tooling.cli.main import main

        with patch("sys.argv", ["xcodebuild-action", "frobnicate"]), pytest.raises(SystemExit) as exc_info:
            main()
        assert exc_info.value.code == 1
        assert "Unknown command: frobnicate" in capsys.readouterr().err

    def test_dispatches_compose(self) -> None:
        from xcodebuild_tooling.cli.main import main

        with (
            patch("sys.argv", ["xcodebuild-action", "compose", "--verbose"]),
            patch("xcodebuild_tooling.cli.action_cmd.run_action_argv", return_value=0) as m_run,
            pytest.raises(SystemExit) as exc_info,
        ):
            main()
        assert exc_info.value.code == 0
        m_run.assert_called_once_with(["--verbose"], compose_only=True)
