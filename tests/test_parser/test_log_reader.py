"""Tests for reading whole session logs."""

import io
import logging

import pytest

from tvslog.actions.types import ActionType, Added, Attack, SelectShip
from tvslog.exceptions import (
    RowSourceError,
    UnexpectedRecordShapeError,
    UnrecognizedActionError,
)
from tvslog.parser.log_reader import ParseResult, parse_log, parse_log_file

HEADER = "Turn,Time,Sector,Action,Value,Detail"


class RecordingHook:
    """Hook that remembers every event it receives."""

    def __init__(self):
        self.actions = []
        self.ignored = []
        self.errors = []

    def on_action(self, event):
        self.actions.append(event)

    def on_ignored(self, event):
        self.ignored.append(event)

    def on_row_error(self, event):
        self.errors.append(event)


class TestParseLogEndToEnd:
    """End-to-end parsing of a small log."""

    def test_actions_and_errors(self, sample_log):
        """Three actions, one ignored row, one recoverable error."""
        result = parse_log(io.StringIO(sample_log))

        assert [type(a) for a in result.actions] == [Added, SelectShip, Attack]
        assert len(result.errors) == 1
        assert isinstance(result.errors[0], UnrecognizedActionError)
        assert result.ignored == 1
        assert result.rows == 5

    def test_attack_has_context(self, sample_log):
        """The attack carries the pilot and ship from earlier rows."""
        result = parse_log(io.StringIO(sample_log))
        attack = result.actions[2]
        assert attack.pilot_name == "Alice"
        assert attack.ship_type == "fighter"
        assert attack.damage == 10

    def test_error_row_number(self, sample_log):
        """Errors carry the line number, counting the header as line 1."""
        result = parse_log(io.StringIO(sample_log))
        assert result.errors[0].row_number == 6

    def test_hook_receives_events(self, sample_log):
        """Every row is reported to the hook exactly once."""
        hook = RecordingHook()
        parse_log(io.StringIO(sample_log), hook=hook)
        assert len(hook.actions) == 3
        assert len(hook.ignored) == 1
        assert len(hook.errors) == 1
        assert hook.errors[0].row[3] == "unknown frobnicated"

    def test_error_logged_by_default(self, sample_log, caplog):
        """Skipped rows are logged as warnings."""
        with caplog.at_level(logging.WARNING):
            parse_log(io.StringIO(sample_log))
        assert "unknown frobnicated" in caplog.text

    def test_accepts_list_of_lines(self):
        """Any iterable of lines works as a source."""
        result = parse_log([HEADER, "1,00:00,A1,Added to the game,,Alice"])
        assert result.actions[0].pilot_name == "Alice"


class TestParseLogRows:
    """Tests for row handling."""

    def test_header_only(self):
        """A log with only a header has no actions."""
        result = parse_log(io.StringIO(HEADER + "\n"))
        assert result == ParseResult()

    def test_blank_lines_skipped(self):
        """Blank lines are neither rows nor errors."""
        text = f"{HEADER}\n\n1,00:00,A1,Added to the game,,Alice\n\n"
        result = parse_log(io.StringIO(text))
        assert len(result.actions) == 1
        assert result.rows == 1
        assert not result.has_errors

    def test_short_row_is_recoverable(self):
        """A row with the wrong field count is skipped, not fatal."""
        text = f"{HEADER}\n1,00:00,A1,Added to the game\n2,00:01,A1,Added to the game,,Bob\n"
        result = parse_log(io.StringIO(text))
        assert isinstance(result.errors[0], UnexpectedRecordShapeError)
        assert result.actions[0].pilot_name == "Bob"

    def test_quoted_fields(self):
        """Quoted CSV fields may contain commas."""
        text = f'{HEADER}\n1,00:00,A1,"Pickup credits, bonus",1,\n'
        result = parse_log(io.StringIO(text))
        assert result.actions[0].item == "credits, bonus"

    def test_action_counts(self, sample_log):
        """action_counts tallies actions by type."""
        counts = parse_log(io.StringIO(sample_log)).action_counts()
        assert counts[ActionType.ATTACK] == 1
        assert counts[ActionType.SCRAP] == 0


class TestParseLogFailures:
    """Tests for fatal and strict-mode failures."""

    def test_empty_source_is_fatal(self):
        """A source without a header row is a source failure."""
        with pytest.raises(RowSourceError, match="missing header"):
            parse_log(io.StringIO(""))

    def test_source_read_error_is_fatal(self):
        """A source that fails mid-read aborts the run."""
        def lines():
            yield HEADER
            raise OSError("disk went away")

        with pytest.raises(RowSourceError, match="disk went away"):
            parse_log(lines())

    def test_strict_raises_first_row_error(self, sample_log):
        """In strict mode the first bad row aborts the run."""
        with pytest.raises(UnrecognizedActionError) as exc_info:
            parse_log(io.StringIO(sample_log), strict=True)
        assert exc_info.value.row_number == 6


class TestParseLogFile:
    """Tests for parse_log_file."""

    def test_reads_file(self, tmp_path, sample_log):
        """A log file on disk is parsed."""
        path = tmp_path / "session.csv"
        path.write_text(sample_log, encoding="utf-8")
        result = parse_log_file(path)
        assert len(result.actions) == 3

    def test_missing_file(self, tmp_path):
        """A missing file is a source failure."""
        with pytest.raises(RowSourceError, match="failed to open"):
            parse_log_file(tmp_path / "nope.csv")

    def test_strict_from_settings(self, tmp_path, sample_log, monkeypatch):
        """TVSLOG_STRICT turns on strict mode."""
        monkeypatch.setenv("TVSLOG_STRICT", "true")
        path = tmp_path / "session.csv"
        path.write_text(sample_log, encoding="utf-8")
        with pytest.raises(UnrecognizedActionError):
            parse_log_file(path)

    def test_encoding(self, tmp_path):
        """The encoding argument is used to read the file."""
        path = tmp_path / "session.csv"
        path.write_text(f"{HEADER}\n1,00:00,Zoë,Hypered to Zoë,,\n", encoding="latin-1")
        result = parse_log_file(path, encoding="latin-1")
        assert result.actions[0].destination == "Zoë"

    def test_decode_error_is_fatal(self, tmp_path):
        """Undecodable bytes abort the run."""
        path = tmp_path / "session.csv"
        path.write_bytes(HEADER.encode() + b"\n1,00:00,A1,Hypered to \xff\xfe,,\n")
        with pytest.raises(RowSourceError):
            parse_log_file(path, encoding="utf-8")
