"""
Tests for the Shell read-eval loop.

Tests cover:
- Running single lines
- Blank-line handling
- Status tracking across lines
- Prompting and exit
"""

import pytest

from tinysh.config import ERROR, SUCCESS, ShellConfig
from tinysh.shell import Shell


@pytest.fixture
def shell(context):
    return Shell(context)


class TestRunLine:
    """Tests for Shell.run_line."""

    def test_success(self, shell, make_executable):
        make_executable("ok")
        assert shell.run_line("ok\n") == SUCCESS
        assert shell.last_status == SUCCESS

    def test_failure_recorded(self, shell, make_executable):
        make_executable("fail", "exit 2")
        assert shell.run_line("fail") == ERROR
        assert shell.last_status == ERROR

    def test_blank_line_keeps_last_status(self, shell, make_executable):
        make_executable("fail", "exit 2")
        shell.run_line("fail")
        assert shell.run_line("   \t\n") == SUCCESS
        assert shell.last_status == ERROR

    def test_not_found(self, shell, context):
        assert shell.run_line("missing-cmd") == ERROR
        assert context.stdout.getvalue() == "Command missing-cmd not found!\n"

    def test_uses_configured_capacity(self, context, make_executable):
        make_executable("abc")
        context.config = ShellConfig(max_arg_len=4)
        shell = Shell(context)
        assert shell.run_line("abcdef") == SUCCESS


class TestRun:
    """Tests for Shell.run over a stream of lines."""

    def test_runs_every_line(self, shell, make_executable, tmp_path):
        log = tmp_path / "log"
        make_executable("mark", f"echo \"$1\" >> {log}")
        status = shell.run(["mark 1\n", "\n", "mark 2\n"])
        assert status == SUCCESS
        assert log.read_text().split() == ["1", "2"]

    def test_returns_last_status(self, shell, make_executable):
        make_executable("ok")
        make_executable("fail", "exit 1")
        assert shell.run(["ok", "fail"]) == ERROR
        assert shell.run(["fail", "ok"]) == SUCCESS

    def test_error_does_not_stop_loop(self, shell, make_executable, context):
        make_executable("ok")
        assert shell.run(["missing-cmd", "ok"]) == SUCCESS
        assert "Command missing-cmd not found!" in context.stdout.getvalue()

    def test_interactive_prompt(self, shell, context):
        shell.run(["\n", "\n"], interactive=True)
        assert context.stdout.getvalue() == "$ $ $ \n"

    def test_custom_prompt(self, context):
        context.config = ShellConfig(prompt="tinysh> ")
        Shell(context).run([], interactive=True)
        assert context.stdout.getvalue() == "tinysh> \n"

    def test_exit_stops_reading(self, shell, make_executable, tmp_path):
        marker = tmp_path / "marker"
        make_executable("touchit", f"touch {marker}")
        with pytest.raises(SystemExit) as exc_info:
            shell.run(["exit\n", "touchit\n"])
        assert exc_info.value.code == SUCCESS
        assert not marker.exists()
