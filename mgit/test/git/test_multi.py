"""Tests for git/multi.py."""

from __future__ import annotations

from pathlib import Path

from mgit.git.multi import (
    DirectoryReport,
    MultiRepoOperator,
    Operation,
    ReportKind,
)
from mgit.test._support import DIRTY_STATUS, StubRunner, make_repo


class RecordingReporter:
    """Reporter collecting callbacks in order."""

    def __init__(self) -> None:
        self.events: list[tuple[str, str, str]] = []

    def started(self, directory: str, operation: Operation) -> None:
        self.events.append(("started", directory, str(operation)))

    def finished(self, report: DirectoryReport) -> None:
        self.events.append(("finished", report.directory, str(report.kind)))


def _operator(dirs: list[Path], runner: StubRunner, reporter: RecordingReporter | None = None):
    return MultiRepoOperator(dirs, runner=runner, reporter=reporter)


# =============================================================================
# Enum Tests
# =============================================================================


class TestEnums:
    def test_interactive_operations(self) -> None:
        assert Operation.PUSH.is_interactive
        assert Operation.ADD.is_interactive
        assert Operation.COMMIT.is_interactive
        assert not Operation.PULL.is_interactive
        assert not Operation.STATUS.is_interactive

    def test_report_kind_text(self) -> None:
        assert str(ReportKind.NOT_A_REPOSITORY) == "Not a git repository"
        assert str(ReportKind.NOTHING_TO_COMMIT) == "nothing to commit"
        assert ReportKind.FAILED.ran_command
        assert not ReportKind.CLEAN.ran_command


# =============================================================================
# Directory handling
# =============================================================================


class TestDirectories:
    def test_order_and_duplicates_preserved(self, tmp_path: Path) -> None:
        a = make_repo(tmp_path / "a")
        b = make_repo(tmp_path / "b")

        reports = _operator([b, a, b], StubRunner()).status()

        assert [r.directory for r in reports] == [str(b), str(a), str(b)]

    def test_directories_kept_as_given(self) -> None:
        operator = MultiRepoOperator(["./x", Path("y")], runner=StubRunner())
        assert operator.directories == ("./x", "y")

    def test_non_repository_runs_no_git(self, tmp_path: Path) -> None:
        runner = StubRunner()
        operator = _operator([tmp_path], runner)

        results = [
            operator.pull(),
            operator.push(),
            operator.status(),
            operator.add_all(),
            operator.commit_all("msg"),
        ]

        assert runner.calls == []
        for reports in results:
            assert [r.kind for r in reports] == [ReportKind.NOT_A_REPOSITORY]

    def test_is_git_repo_exposed(self, tmp_path: Path) -> None:
        operator = _operator([], StubRunner())
        assert operator.is_git_repo(tmp_path) is False
        assert operator.is_git_repo(make_repo(tmp_path)) is True


# =============================================================================
# Operations
# =============================================================================


class TestStatus:
    def test_clean_and_dirty(self, tmp_path: Path) -> None:
        clean = make_repo(tmp_path / "clean")
        dirty = make_repo(tmp_path / "dirty")
        runner = StubRunner(status={dirty: DIRTY_STATUS})

        reports = _operator([clean, dirty], runner).status()

        assert [r.kind for r in reports] == [ReportKind.CLEAN, ReportKind.DIRTY]
        assert all(r.operation is Operation.STATUS for r in reports)

    def test_failed_status_is_dirty(self, tmp_path: Path) -> None:
        repo = make_repo(tmp_path / "r")

        reports = _operator([repo], StubRunner(fail={"status"})).status()

        assert reports[0].kind is ReportKind.DIRTY


class TestPullPush:
    def test_pull_reports_output(self, tmp_path: Path) -> None:
        repo = make_repo(tmp_path / "r")
        runner = StubRunner(stdout={"pull": "Already up to date.\n"})

        reports = _operator([repo], runner).pull()

        assert reports[0].kind is ReportKind.DONE
        assert reports[0].output == "Already up to date.\n"
        assert runner.calls_for("pull")[0].cwd == repo

    def test_push_runs_interactive(self, tmp_path: Path) -> None:
        repo = make_repo(tmp_path / "r")
        runner = StubRunner()

        reports = _operator([repo], runner).push()

        assert reports[0].kind is ReportKind.DONE
        assert runner.calls_for("push")[0].interactive is True

    def test_failure_does_not_stop_the_batch(self, tmp_path: Path) -> None:
        a = make_repo(tmp_path / "a")
        b = make_repo(tmp_path / "b")
        runner = StubRunner(fail={"pull"})

        reports = _operator([a, b], runner).pull()

        assert [r.kind for r in reports] == [ReportKind.FAILED, ReportKind.FAILED]
        assert len(runner.calls_for("pull")) == 2
        assert reports[0].error is not None
        assert reports[0].error.returncode == 1
        assert reports[0].output == ""
        assert reports[0].failed


class TestAddAll:
    def test_dirty_repo_is_added(self, tmp_path: Path) -> None:
        repo = make_repo(tmp_path / "r")
        runner = StubRunner(status={repo: DIRTY_STATUS})

        reports = _operator([repo], runner).add_all()

        assert runner.subcommands() == ["status", "add"]
        assert runner.calls_for("add")[0].args == ("add", ".")
        assert reports[0].kind is ReportKind.DONE
        assert reports[0].kind is not ReportKind.NOTHING_TO_ADD

    def test_clean_repo_has_nothing_to_add(self, tmp_path: Path) -> None:
        repo = make_repo(tmp_path / "r")
        runner = StubRunner()

        reports = _operator([repo], runner).add_all()

        assert runner.subcommands() == ["status"]
        assert reports[0].kind is ReportKind.NOTHING_TO_ADD


class TestCommitAll:
    def test_clean_repo_has_nothing_to_commit(self, tmp_path: Path) -> None:
        repo = make_repo(tmp_path / "r")
        runner = StubRunner()

        reports = _operator([repo], runner).commit_all("msg")

        assert runner.calls_for("commit") == []
        assert reports[0].kind is ReportKind.NOTHING_TO_COMMIT

    def test_dirty_repo_is_committed(self, tmp_path: Path) -> None:
        repo = make_repo(tmp_path / "r")
        runner = StubRunner(status={repo: DIRTY_STATUS})

        reports = _operator([repo], runner).commit_all("Automatic commit")

        assert runner.calls_for("commit")[0].args == ("commit", "-a", "-m", "Automatic commit")
        assert reports[0].kind is ReportKind.DONE

    def test_space_in_path_and_quote_in_message(self, tmp_path: Path) -> None:
        repo = make_repo(tmp_path / "my project")
        runner = StubRunner(status={repo: DIRTY_STATUS})
        message = "it's done; rm -rf ~"

        _operator([repo], runner).commit_all(message)

        call = runner.calls_for("commit")[0]
        assert call.cwd == repo
        assert call.args == ("commit", "-a", "-m", message)
        assert call.args.count(message) == 1


# =============================================================================
# Reporter callbacks
# =============================================================================


class TestReporter:
    def test_started_precedes_finished(self, tmp_path: Path) -> None:
        repo = make_repo(tmp_path / "r")
        plain = tmp_path / "plain"
        plain.mkdir()
        reporter = RecordingReporter()

        _operator([repo, plain], StubRunner(), reporter).push()

        assert reporter.events == [
            ("started", str(repo), "push"),
            ("finished", str(repo), "done"),
            ("finished", str(plain), "Not a git repository"),
        ]

    def test_no_start_when_nothing_runs(self, tmp_path: Path) -> None:
        repo = make_repo(tmp_path / "r")
        reporter = RecordingReporter()

        _operator([repo], StubRunner(), reporter).commit_all("msg")

        assert reporter.events == [("finished", str(repo), "nothing to commit")]
