#!/usr/bin/env python3
"""
Integration tests for the timewdb CLI.

Runs the commands against temporary databases and checks listing,
filtering, totals and error exits.
"""
import pytest
from click.testing import CliRunner

from timewdb.pipeline.cli import cli


@pytest.fixture
def runner():
    """Create Click test runner."""
    return CliRunner()


@pytest.fixture
def invoke(runner, tmp_path):
    """Invoke the CLI with logs written to a temporary directory."""
    def _invoke(*args):
        return runner.invoke(cli, ["--log-dir", str(tmp_path / "logs"), *args])
    return _invoke


@pytest.fixture
def sample_db(write_data_file, data_dir):
    """Database with three closed entries over two months."""
    write_data_file("2022-06.data", [
        "inc 20220615T080000Z - 20220615T100000Z # june",
    ])
    write_data_file("2022-07.data", [
        'inc 20220711T120000Z - 20220711T130000Z # early "code review"',
        "inc 20220718T090000Z - 20220718T093000Z # late",
    ])
    return data_dir


class TestCLIBasics:
    """Test basic CLI functionality."""

    def test_cli_help(self, runner):
        """Test that CLI help message works."""
        result = runner.invoke(cli, ["--help"])
        assert result.exit_code == 0
        assert "Read a timewarrior database" in result.output

    @pytest.mark.parametrize("command", ["raw", "check"])
    def test_command_help(self, runner, command):
        """Test subcommand help."""
        result = runner.invoke(cli, [command, "--help"])
        assert result.exit_code == 0
        assert "--data-dir" in result.output


class TestRawCommand:
    """Test the raw command."""

    def test_lists_all_entries(self, invoke, sample_db):
        """Test every entry is listed with its id and tags."""
        result = invoke("raw", "-d", str(sample_db))

        assert result.exit_code == 0, result.output
        lines = result.output.splitlines()
        assert lines[0].startswith("@1 ")
        assert lines[0].endswith('["late"]')
        assert lines[1].startswith("@2 ")
        assert lines[1].endswith('["early", "code review"]')
        assert lines[2].startswith("@3 ")
        assert "3 entries loaded" in result.output
        assert "Total: 03:30:00" in result.output

    def test_filtered_range_keeps_ids(self, invoke, sample_db):
        """Test a range argument filters without renumbering."""
        result = invoke(
            "raw", "-d", str(sample_db), "20220711T000000Z", "-", "20220717T235959Z"
        )

        assert result.exit_code == 0, result.output
        assert result.output.startswith("@2 ")
        assert "1 entries loaded" in result.output
        assert "Total: 01:00:00" in result.output

    def test_open_entry_marked(self, invoke, write_data_file, data_dir):
        """Test running entries are flagged."""
        write_data_file("2022-07.data", ["inc 20220718T095832Z # running"])
        result = invoke("raw", "-d", str(data_dir))

        assert result.exit_code == 0, result.output
        assert result.output.startswith("@1   * ")
        assert " - ... [" in result.output

    def test_empty_database(self, invoke, data_dir):
        """Test an empty data directory."""
        result = invoke("raw", "-d", str(data_dir))
        assert result.exit_code == 0, result.output
        assert "0 entries loaded" in result.output
        assert "Total: 00:00:00" in result.output

    def test_default_data_dir_from_env(self, invoke, sample_db, monkeypatch):
        """Test TIMEWARRIORDB is used when no --data-dir is given."""
        monkeypatch.setenv("TIMEWARRIORDB", str(sample_db.parent))
        result = invoke("raw")
        assert result.exit_code == 0, result.output
        assert "3 entries loaded" in result.output

    def test_invalid_range(self, invoke, sample_db):
        """Test an unparsable range exits with an error."""
        result = invoke("raw", "-d", str(sample_db), "last", "tuesday")
        assert result.exit_code == 1
        assert "ParseError" in result.output

    def test_malformed_database(self, invoke, write_data_file, data_dir):
        """Test a malformed line exits with an error naming the file."""
        write_data_file("2022-07.data", ["inc garbage # x"])
        result = invoke("raw", "-d", str(data_dir))
        assert result.exit_code == 1
        assert "EntryParseError" in result.output
        assert "2022-07.data:1" in result.output

    def test_errors_written_to_log(self, invoke, tmp_path):
        """Test failures are recorded in errors.log."""
        result = invoke("raw", "-d", str(tmp_path / "missing"))
        assert result.exit_code == 1

        errors = (tmp_path / "logs" / "operations" / "errors.log").read_text(encoding="utf-8")
        assert "DatabaseError" in errors
        assert "operation=raw" in errors


class TestCheckCommand:
    """Test the check command."""

    def test_valid_database(self, invoke, sample_db):
        """Test a clean database."""
        result = invoke("check", "-d", str(sample_db))
        assert result.exit_code == 0, result.output
        assert "✅ 3 entries loaded" in result.output

    def test_missing_directory(self, invoke, tmp_path):
        """Test a missing data directory."""
        result = invoke("check", "-d", str(tmp_path / "missing"))
        assert result.exit_code == 1
        assert "DatabaseError" in result.output

    def test_malformed_line(self, invoke, write_data_file, data_dir):
        """Test the offending line is reported."""
        write_data_file("2022-06.data", ["inc 20220615T080000Z - 20220615T100000Z # ok"])
        write_data_file("2022-07.data", ["", 'inc 20220711T120000Z # "unterminated'])
        result = invoke("check", "-d", str(data_dir))
        assert result.exit_code == 1
        assert "2022-07.data:2" in result.output
