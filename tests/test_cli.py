"""Tests for the csvrow command line front end."""

import io
import json

import pytest

from csvrow.cli import build_parser, format_rows, main, parse_delimiter, split_lines


class TestSplitLines:
    def test_normalizes_line_endings(self):
        assert split_lines("a\r\nb\rc\n") == ["a", "b", "c"]

    def test_keeps_inner_empty_lines(self):
        assert split_lines("a\n\nb") == ["a", "", "b"]

    def test_empty_text(self):
        assert split_lines("") == []


class TestParseDelimiter:
    @pytest.mark.parametrize(
        ("value", "expected"),
        [(",", ","), (";", ";"), ("\\t", "\t"), ("tab", "\t"), ("space", " ")],
    )
    def test_valid(self, value, expected):
        assert parse_delimiter(value) == expected

    def test_invalid_delimiter_is_usage_error(self, capsys):
        with pytest.raises(SystemExit) as exc_info:
            build_parser().parse_args(["split", "-d", '"'])
        assert exc_info.value.code == 2
        assert "quote character" in capsys.readouterr().err


class TestFormatRows:
    def test_json_lines(self):
        assert format_rows([["a", "b"], []]) == '["a", "b"]\n[]\n'

    def test_pretty(self):
        assert json.loads(format_rows([["a"]], pretty=True)) == [["a"]]

    def test_non_ascii_kept(self):
        assert format_rows([["è"]]) == '["è"]\n'


class TestSplitCommand:
    def test_split_file(self, tmp_path, capsys):
        path = tmp_path / "rows.csv"
        path.write_text('a,"b,c"\n\nx,\n', encoding="utf-8")

        assert main(["split", str(path)]) == 0

        out = capsys.readouterr().out
        rows = [json.loads(line) for line in out.splitlines()]
        assert rows == [["a", "b,c"], [], ["x", ""]]

    def test_split_literal(self, tmp_path, capsys):
        path = tmp_path / "rows.csv"
        path.write_text('a,"b ""c"""\n', encoding="utf-8")

        assert main(["split", str(path), "--literal"]) == 0

        assert json.loads(capsys.readouterr().out) == ["a", '"b ""c"""']

    def test_split_stdin_with_delimiter(self, monkeypatch, capsys):
        monkeypatch.setattr("sys.stdin", io.StringIO('a;"b;c"\r\n'))

        assert main(["split", "-d", ";"]) == 0

        assert json.loads(capsys.readouterr().out) == ["a", "b;c"]

    def test_split_to_output_file(self, tmp_path, capsys):
        source = tmp_path / "rows.csv"
        source.write_text("a,b\nc\n", encoding="utf-8")
        target = tmp_path / "rows.json"

        assert main(["split", str(source), "-o", str(target), "--pretty"]) == 0

        assert json.loads(target.read_text(encoding="utf-8")) == [["a", "b"], ["c"]]
        assert "Wrote 2 rows" in capsys.readouterr().err

    def test_missing_input_file(self, tmp_path, capsys):
        assert main(["split", str(tmp_path / "missing.csv")]) == 1
        assert "Input file not found" in capsys.readouterr().err

    def test_non_utf8_input_file(self, tmp_path, capsys):
        path = tmp_path / "latin1.csv"
        path.write_bytes(b"caf\xe9,b\n")

        assert main(["split", str(path)]) == 1
        assert "Error reading file" in capsys.readouterr().err

    def test_directory_input(self, tmp_path, capsys):
        assert main(["split", str(tmp_path)]) == 1
        assert "Error reading file" in capsys.readouterr().err


class TestEscapeCommand:
    def test_escape_values(self, capsys):
        assert main(["escape", 'say "hi"', "plain", "a,b"]) == 0
        assert capsys.readouterr().out == '"say ""hi""",plain,"a,b"\n'

    def test_escape_with_delimiter(self, capsys):
        assert main(["escape", "-d", ";", "a;b", "c,d"]) == 0
        assert capsys.readouterr().out == '"a;b";c,d\n'


class TestLogging:
    def test_verbose_logs_debug_records(self, tmp_path, caplog):
        path = tmp_path / "rows.csv"
        path.write_text("a,b\nc\n", encoding="utf-8")

        assert main(["-v", "split", str(path)]) == 0

        messages = [r.getMessage() for r in caplog.records if r.name == "csvrow.cli"]
        assert any(m.startswith("Reading rows from") for m in messages)
        assert any(m.startswith("Tokenized 2 rows") for m in messages)
        assert all(r.levelname == "DEBUG" for r in caplog.records if r.name == "csvrow.cli")

    def test_quiet_without_verbose(self, tmp_path, caplog):
        path = tmp_path / "rows.csv"
        path.write_text("a,b\nc\n", encoding="utf-8")

        assert main(["split", str(path)]) == 0

        assert not [r for r in caplog.records if r.name == "csvrow.cli"]
