"""
Tests for the commitgrid command line.
"""
import json
from datetime import datetime, timedelta
from unittest.mock import patch

import pytest
from click.testing import CliRunner

from commitgrid.cli import cli
from commitgrid.domain import CommitRecord
from commitgrid.exit_codes import RepositoryError

ME = "me@example.com"


@pytest.fixture
def runner():
    return CliRunner()


@pytest.fixture
def workspace(tmp_path, isolated_home):
    """A code folder with two repositories, a registry path and an email list."""
    code = tmp_path / "code"
    (code / "alpha" / ".git").mkdir(parents=True)
    (code / "beta" / "node_modules" / "dep" / ".git").mkdir(parents=True)
    (code / "group" / "gamma" / ".git").mkdir(parents=True)

    emails = tmp_path / "emails"
    emails.write_text(f"{ME}\n")

    return {
        'code': code,
        'registry': tmp_path / ".gogitlocalstats",
        'emails': emails,
    }


class FakeGitClient:

    def __init__(self, histories=None, broken=()):
        self.histories = histories or {}
        self.broken = set(broken)

    def iter_commits(self, path):
        if path in self.broken:
            raise RepositoryError(f"Cannot open repository {path}", path=path)
        yield from self.histories.get(path, [])


def invoke(runner, workspace, *args):
    return runner.invoke(cli, ["--registry", str(workspace['registry']), *args])


class TestAdd:

    def test_first_scan_writes_registry(self, runner, workspace):
        result = invoke(runner, workspace, "add", str(workspace['code']))

        assert result.exit_code == 0, result.output
        assert "Found Folders" in result.output
        assert "Successfully added 2 repositories" in result.output
        assert workspace['registry'].read_text().splitlines() == [
            str(workspace['code'] / "alpha"),
            str(workspace['code'] / "group" / "gamma"),
        ]

    def test_rescan_does_not_duplicate(self, runner, workspace):
        invoke(runner, workspace, "add", str(workspace['code']))
        invoke(runner, workspace, "add", str(workspace['code'] / "group"))

        lines = workspace['registry'].read_text().splitlines()
        assert len(lines) == len(set(lines)) == 2

    def test_relative_path_recorded_absolute(self, runner, workspace, monkeypatch):
        monkeypatch.chdir(workspace['code'])
        invoke(runner, workspace, "add", "group")
        assert workspace['registry'].read_text().splitlines() == [
            str(workspace['code'] / "group" / "gamma"),
        ]

    def test_missing_folder_fails(self, runner, workspace):
        result = invoke(runner, workspace, "add", str(workspace['code'] / "nope"))
        assert result.exit_code == 1
        assert not workspace['registry'].exists()


class TestStats:

    def test_renders_grid(self, runner, workspace):
        workspace['registry'].write_text(str(workspace['code'] / "alpha") + "\n")
        now = datetime.now().astimezone()
        fake = FakeGitClient({str(workspace['code'] / "alpha"): [
            CommitRecord(ME, now),
            CommitRecord(ME, now),
            CommitRecord("someone@else", now),
        ]})

        with patch("commitgrid.services.aggregation_service.GitClient", return_value=fake):
            result = invoke(runner, workspace, "stats", "--emails", str(workspace['emails']))

        assert result.exit_code == 0, result.output
        lines = result.output.splitlines()
        assert len(lines) == 8
        assert any(" Mon " in line for line in lines)
        assert result.output.count("  2 ") == 1

    def test_emails_from_config(self, runner, workspace, monkeypatch):
        monkeypatch.setenv("COMMITGRID_GENERAL_EMAILS_FILE", str(workspace['emails']))
        with patch("commitgrid.services.aggregation_service.GitClient", return_value=FakeGitClient()):
            result = invoke(runner, workspace, "stats")
        assert result.exit_code == 0, result.output

    def test_empty_registry_renders_empty_grid(self, runner, workspace):
        result = invoke(runner, workspace, "stats", "--emails", str(workspace['emails']))
        assert result.exit_code == 0
        assert workspace['registry'].exists()

    def test_no_email_list(self, runner, workspace):
        result = invoke(runner, workspace, "stats")
        assert result.exit_code == 2
        assert "--emails" in result.output

    def test_missing_email_file(self, runner, workspace):
        result = invoke(runner, workspace, "stats", "--emails", str(workspace['emails']) + ".missing")
        assert result.exit_code == 66

    def test_broken_repository_aborts(self, runner, workspace):
        broken = str(workspace['code'] / "alpha")
        workspace['registry'].write_text(broken + "\n")
        fake = FakeGitClient(broken=[broken])

        with patch("commitgrid.services.aggregation_service.GitClient", return_value=fake):
            result = invoke(runner, workspace, "stats", "--emails", str(workspace['emails']))

        assert result.exit_code == 65
        assert "Mon" not in result.output

    def test_continue_on_error(self, runner, workspace):
        broken = str(workspace['code'] / "alpha")
        good = str(workspace['code'] / "group" / "gamma")
        workspace['registry'].write_text(f"{broken}\n{good}\n")
        yesterday = datetime.now().astimezone() - timedelta(days=1)
        fake = FakeGitClient({good: [CommitRecord(ME, yesterday)] * 12}, broken=[broken])

        with patch("commitgrid.services.aggregation_service.GitClient", return_value=fake):
            result = invoke(runner, workspace, "stats", "--emails", str(workspace['emails']),
                            "--continue-on-error")

        assert result.exit_code == 0, result.output
        assert " 12 " in result.output

    def test_invalid_failure_policy_config(self, runner, workspace, monkeypatch):
        monkeypatch.setenv("COMMITGRID_GENERAL_FAILURE_POLICY", "retry")
        result = invoke(runner, workspace, "stats", "--emails", str(workspace['emails']))
        assert result.exit_code == 66

    def test_invalid_window_config(self, runner, workspace, monkeypatch):
        monkeypatch.setenv("COMMITGRID_GENERAL_WINDOW_DAYS", "3")
        result = invoke(runner, workspace, "stats", "--emails", str(workspace['emails']))
        assert result.exit_code == 66


class TestRepos:

    def test_json_listing(self, runner, workspace):
        workspace['registry'].write_text("/code/one\n/code/two\n")
        result = invoke(runner, workspace, "repos", "--json")

        assert result.exit_code == 0
        rows = [json.loads(line) for line in result.output.splitlines()]
        assert rows == [{'path': '/code/one'}, {'path': '/code/two'}]

    def test_table_listing(self, runner, workspace):
        workspace['registry'].write_text("/code/one\n")
        result = invoke(runner, workspace, "repos")
        assert "/code/one" in result.output


class TestConfigCommands:

    def test_show(self, runner, isolated_home):
        result = runner.invoke(cli, ["config", "show"])
        assert result.exit_code == 0
        assert json.loads(result.output)['general']['window_days'] == 183

    def test_show_path(self, runner, isolated_home):
        result = runner.invoke(cli, ["config", "show", "--path"])
        assert json.loads(result.output)['config_path'].startswith(str(isolated_home))

    def test_init(self, runner, isolated_home):
        result = runner.invoke(cli, ["config", "init"])
        assert result.exit_code == 0
        assert (isolated_home / ".commitgrid" / "config.json").exists()

        again = runner.invoke(cli, ["config", "init"])
        assert "already exists" in again.output

    def test_init_force_overwrites(self, runner, isolated_home):
        path = isolated_home / ".commitgrid" / "config.json"
        path.parent.mkdir()
        path.write_text('{"general": {"window_days": 91}}')

        result = runner.invoke(cli, ["config", "init", "--force"])

        assert result.exit_code == 0
        assert json.loads(path.read_text())['general']['window_days'] == 183


def test_version(runner):
    result = runner.invoke(cli, ["--version"])
    assert result.exit_code == 0
    assert "commitgrid" in result.output
