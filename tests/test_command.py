"""Unit tests for the Command model."""

import pytest

from tinysh.command import TERMINATOR, Command


class TestCommandCreation:
    """Tests for Command initialization."""

    def test_empty_command(self):
        cmd = Command()
        assert cmd.argument_count == 0
        assert cmd.name == ""
        assert cmd.vector() == [TERMINATOR]

    def test_arguments_are_copied(self):
        args = ["ls", "-l"]
        cmd = Command(args)
        args.append("/tmp")
        assert cmd.arguments == ["ls", "-l"]

    def test_arguments_truncated_to_capacity(self):
        cmd = Command(["abcdef"], max_arg_len=4)
        assert cmd.arguments == ["abc"]


class TestCommandAccess:
    """Tests for argument access."""

    def test_vector_ends_with_terminator(self):
        cmd = Command(["echo", "hi"])
        vector = cmd.vector()
        assert vector[:cmd.argument_count] == ["echo", "hi"]
        assert vector[cmd.argument_count] is TERMINATOR

    def test_argv_is_a_copy(self):
        cmd = Command(["echo", "hi"])
        argv = cmd.argv
        argv[0] = "changed"
        assert cmd.name == "echo"

    def test_equality(self):
        assert Command(["a", "b"]) == Command(["a", "b"])
        assert Command(["a"]) != Command(["b"])

    def test_repr(self):
        assert repr(Command(["echo", "hi"])) == "Command(echo hi)"


class TestCommandMutation:
    """Tests for resolving and releasing."""

    def test_set_executable_replaces_name(self):
        cmd = Command(["ls", "-l"])
        cmd.set_executable("/bin/ls")
        assert cmd.arguments == ["/bin/ls", "-l"]

    def test_set_executable_keeps_long_paths(self):
        cmd = Command(["ls"], max_arg_len=4)
        cmd.set_executable("/usr/local/bin/ls")
        assert cmd.name == "/usr/local/bin/ls"

    def test_set_executable_on_empty_command(self):
        with pytest.raises(IndexError):
            Command().set_executable("/bin/ls")

    def test_release(self):
        cmd = Command(["ls", "-l"])
        cmd.release()
        assert cmd.argument_count == 0

    def test_context_manager_releases(self):
        with Command(["ls"]) as cmd:
            assert cmd.argument_count == 1
        assert cmd.argument_count == 0
