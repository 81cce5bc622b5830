"""Tests for mgit.output.console module."""

from __future__ import annotations

import pytest

from mgit.output.console import ConsoleProtocol, MockConsole, RichConsole, Style


class TestStyle:
    """Test Style enum."""

    def test_str_conversion(self) -> None:
        assert str(Style.SUCCESS) == "success"
        assert str(Style.ERROR) == "error"
        assert str(Style.DEFAULT) == "default"

    def test_all_styles_exist(self) -> None:
        assert {s.name for s in Style} == {"DEFAULT", "SUCCESS", "ERROR", "DIM"}


class TestMockConsole:
    """Test MockConsole for testing purposes."""

    def test_print_captures_message(self) -> None:
        console = MockConsole()
        console.print("hello")
        assert console.outputs[0].message == "hello"
        assert console.outputs[0].style == Style.DEFAULT

    def test_labeled(self) -> None:
        console = MockConsole()
        console.labeled("repo", "Clean", Style.SUCCESS)
        assert console.messages == ["repo: Clean"]
        assert console.outputs[0].style == Style.SUCCESS

    def test_error(self) -> None:
        console = MockConsole()
        console.error("something failed")
        assert console.messages == ["error: something failed"]
        assert console.outputs[0].style == Style.ERROR

    def test_text_and_find(self) -> None:
        console = MockConsole()
        console.print("one")
        console.print("two")
        assert console.text == "one\ntwo"
        assert len(console.find("tw")) == 1

    def test_satisfies_protocol(self) -> None:
        console: ConsoleProtocol = MockConsole()
        console.labeled("a", "b")


class TestRichConsole:
    """Test RichConsole writes plain text without markup interpretation."""

    def test_labeled_keeps_brackets(self, capsys: pytest.CaptureFixture[str]) -> None:
        RichConsole().labeled("[bold]repo[/bold]", "Dirty", Style.ERROR)

        out = capsys.readouterr().out
        assert "[bold]repo[/bold]: " in out
        assert "Dirty" in out

    def test_print_keeps_git_output(self, capsys: pytest.CaptureFixture[str]) -> None:
        RichConsole().print(" * [new branch]      main -> main")

        assert "[new branch]" in capsys.readouterr().out

    def test_error_goes_to_stderr(self, capsys: pytest.CaptureFixture[str]) -> None:
        RichConsole().error("command 'bogus' is invalid")

        captured = capsys.readouterr()
        assert "error: command 'bogus' is invalid" in captured.err
        assert captured.out == ""

    def test_long_line_is_not_wrapped(self, capsys: pytest.CaptureFixture[str]) -> None:
        directory = "/home/user/src/" + "x" * 100

        RichConsole().labeled(directory, "Clean", Style.SUCCESS)

        out = capsys.readouterr().out
        assert out.splitlines() == [f"{directory}: Clean"]

    def test_emoji_codes_printed_verbatim(self, capsys: pytest.CaptureFixture[str]) -> None:
        console = RichConsole()
        console.print("Merge branch 'main' :tada: done")
        console.labeled("repo", "Fast-forward :sparkles:")

        out = capsys.readouterr().out
        assert "Merge branch 'main' :tada: done" in out
        assert "repo: Fast-forward :sparkles:" in out

    def test_long_error_is_not_wrapped(self, capsys: pytest.CaptureFixture[str]) -> None:
        message = "command '" + "y" * 100 + "' is invalid. Use --help for details"

        RichConsole().error(message)

        assert capsys.readouterr().err.splitlines() == [f"error: {message}"]
