"""Tests for the journal CLI commands."""

import tempfile
from pathlib import Path

import pytest
from click.testing import CliRunner

from tennisjournal.cli import cli
from tennisjournal.db.store import JournalStore


NADAL = [
    "--opponent", "Nadal", "--lost", "--surface", "clay",
    "--duration", "95", "--date", "2024-05-01", "--score", "3-6 4-6",
    "--aces", "2", "--double-faults", "4", "--winners", "15", "--unforced-errors", "30",
]
FEDERER = [
    "--opponent", "Federer", "--won", "--surface", "grass",
    "--duration", "120", "--date", "2024-07-01", "--score", "7-6 6-4",
]


@pytest.fixture
def journal_file():
    """Path to a journal file in a temporary directory."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir) / "journal.json"


def run(journal_file: Path, *args: str):
    return CliRunner().invoke(cli, ["--file", str(journal_file), *args])


class TestAddCommand:
    """Recording matches from the command line."""

    def test_add_saves_match(self, journal_file: Path):
        result = run(journal_file, "add", *NADAL)

        assert result.exit_code == 0, result.output
        journal = JournalStore(journal_file).read()
        assert journal.journal_length() == 1
        assert journal.get_match_at(0).opponent == "Nadal"
        assert journal.get_match_at(0).unforced_errors == 30

    def test_add_duplicate_is_reported(self, journal_file: Path):
        run(journal_file, "add", *NADAL)
        result = run(journal_file, "add", *NADAL)

        assert result.exit_code == 0
        assert "already in the journal" in result.output
        assert JournalStore(journal_file).read().journal_length() == 1

    def test_add_requires_outcome(self, journal_file: Path):
        args = [a for a in NADAL if a != "--lost"]
        result = run(journal_file, "add", *args)

        assert result.exit_code != 0

    def test_add_rejects_negative_stats(self, journal_file: Path):
        result = run(journal_file, "add", *FEDERER, "--aces", "-1")

        assert result.exit_code == 1
        assert "Error" in result.output
        assert not journal_file.exists()


class TestViewCommands:
    """Viewing the journal and its summary."""

    def test_view_empty(self, journal_file: Path):
        result = run(journal_file, "view")

        assert result.exit_code == 0
        assert "<YOUR JOURNAL IS EMPTY>" in result.output

    def test_view_renders_matches(self, journal_file: Path):
        run(journal_file, "add", *NADAL)
        result = run(journal_file, "view")

        assert result.exit_code == 0
        assert "\tOpponent: Nadal" in result.output
        assert "\tOutcome: LOSS" in result.output
        assert "\tSurface: CLAY" in result.output
        assert "\tDuration: 95 minutes" in result.output

    def test_view_table(self, journal_file: Path):
        run(journal_file, "add", *NADAL)
        result = run(journal_file, "view", "--table")

        assert result.exit_code == 0
        assert "Match Journal" in result.output

    def test_ratio(self, journal_file: Path):
        run(journal_file, "add", *NADAL)
        run(journal_file, "add", *FEDERER)
        result = run(journal_file, "ratio")

        assert result.exit_code == 0
        assert result.output.splitlines()[0] == "1 : 1"

    def test_ratio_empty(self, journal_file: Path):
        result = run(journal_file, "ratio")

        assert result.output.strip() == "0 : 0"

    def test_count(self, journal_file: Path):
        run(journal_file, "add", *NADAL)
        run(journal_file, "add", *FEDERER)
        result = run(journal_file, "count")

        assert result.output.strip() == "2"

    def test_show(self, journal_file: Path):
        run(journal_file, "add", *NADAL)
        run(journal_file, "add", *FEDERER)
        result = run(journal_file, "show", "2")

        assert result.exit_code == 0
        assert "Federer" in result.output
        assert "WIN" in result.output

    def test_show_out_of_range(self, journal_file: Path):
        run(journal_file, "add", *NADAL)
        result = run(journal_file, "show", "2")

        assert result.exit_code == 1
        assert "No match #2" in result.output


class TestMarkupInFields:
    """Field text that looks like rich markup is printed literally."""

    def test_bracket_surface(self, journal_file: Path):
        args = [
            "--opponent", "Nadal", "--won", "--surface", "[/hard]",
            "--duration", "60", "--date", "2024-05-01", "--score", "6-1 6-1",
        ]
        assert run(journal_file, "add", *args).exit_code == 0

        shown = run(journal_file, "show", "1")
        assert shown.exit_code == 0, shown.output
        assert "[/HARD]" in shown.output

        table = run(journal_file, "view", "--table")
        assert table.exit_code == 0, table.output
        assert "[/HARD]" in table.output


class TestCommandRegistration:
    """Every journal command is registered on the group."""

    def test_help_lists_commands(self):
        result = CliRunner().invoke(cli, ["--help"])

        assert result.exit_code == 0
        for name in ("add", "delete", "view", "show", "ratio", "count"):
            assert name in result.output


class TestDeleteCommand:
    """Deleting matches by position."""

    def test_delete_first(self, journal_file: Path):
        run(journal_file, "add", *NADAL)
        run(journal_file, "add", *FEDERER)
        result = run(journal_file, "delete", "1")

        assert result.exit_code == 0, result.output
        journal = JournalStore(journal_file).read()
        assert journal.journal_length() == 1
        assert journal.get_match_at(0).opponent == "Federer"

    def test_delete_zero_is_invalid(self, journal_file: Path):
        run(journal_file, "add", *NADAL)
        result = run(journal_file, "delete", "0")

        assert result.exit_code == 1
        assert JournalStore(journal_file).read().journal_length() == 1

    def test_corrupt_file(self, journal_file: Path):
        journal_file.write_text("{oops")
        result = run(journal_file, "view")

        assert result.exit_code == 1
        assert "Failed to load journal" in result.output

    def test_unreadable_file(self, journal_file: Path):
        journal_file.write_bytes(b"\xff\xfe\x00garbage")
        result = run(journal_file, "count")

        assert result.exit_code == 1
        assert "Failed to load journal" in result.output
