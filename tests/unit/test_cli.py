"""Unit tests for the elektro-extract command line."""
import json

import pytest

from elektro_extraction.cli import InputFileError, build_parser, main, read_products


def _output_lines(capsys):
    return [json.loads(line) for line in capsys.readouterr().out.splitlines() if line.strip()]


class TestSingleProduct:
    """Tests for title mode."""

    def test_cable_title(self, capsys):
        """A cable title prints one enriched JSON object."""
        exit_code = main(["YMvK kabel 3x2.5mm² per 100 meter"])

        assert exit_code == 0
        rows = _output_lines(capsys)
        assert len(rows) == 1
        assert rows[0]["category"] == "cable"
        assert rows[0]["diameter_mm2"] == 2.5
        assert rows[0]["parsing_confidence"] == "67%"

    def test_output_is_not_ascii_escaped(self, capsys):
        """Non-ASCII characters are written as-is."""
        main(["YMvK kabel 3x2.5mm²"])

        assert "mm²" in capsys.readouterr().out

    def test_description_and_breadcrumb(self, capsys):
        """Optional text arguments reach the enricher."""
        exit_code = main([
            "Gira E2 wit",
            "--description", "Inbouw, 16A",
            "--breadcrumb", "Schakelmateriaal > Stopcontacten",
        ])

        assert exit_code == 0
        row = _output_lines(capsys)[0]
        assert row["product_type"] == "stopcontact"
        assert row["current"] == 16
        assert row["breadcrumb"] == "Schakelmateriaal > Stopcontacten"

    def test_sheet_flag(self, capsys):
        """--sheet adds the target worksheet."""
        main(["Cat6 UTP kabel", "--sheet"])

        assert _output_lines(capsys)[0]["target_sheet"] == "Netwerkkabels"


class TestJsonlInput:
    """Tests for --jsonl mode."""

    def test_multiple_products(self, tmp_path, capsys):
        """Each line is enriched; blank lines are skipped."""
        source = tmp_path / "products.jsonl"
        source.write_text(
            json.dumps({"title": "YMvK kabel 3x2.5mm²"}) + "\n"
            + "\n"
            + json.dumps({"title": "Gira E2 schakelaar wit"}) + "\n",
            encoding="utf-8",
        )

        exit_code = main(["--jsonl", str(source)])

        assert exit_code == 0
        rows = _output_lines(capsys)
        assert [row["category"] for row in rows] == ["cable", "switching"]

    def test_missing_file(self, tmp_path, capsys):
        """An unreadable file exits with 1."""
        exit_code = main(["--jsonl", str(tmp_path / "missing.jsonl")])

        assert exit_code == 1
        assert "Cannot read" in capsys.readouterr().err

    @pytest.mark.parametrize("content,error", [
        ("{not json}\n", "invalid JSON"),
        ("[1, 2]\n", "expected a JSON object"),
    ])
    def test_bad_lines(self, tmp_path, capsys, content, error):
        """Bad lines exit with 1 before any output."""
        source = tmp_path / "bad.jsonl"
        source.write_text(content, encoding="utf-8")

        exit_code = main(["--jsonl", str(source)])

        captured = capsys.readouterr()
        assert exit_code == 1
        assert error in captured.err
        assert captured.out == ""

    def test_read_products_reports_line_number(self, tmp_path):
        """Errors name the offending line."""
        source = tmp_path / "bad.jsonl"
        source.write_text('{"title": "ok"}\n"text"\n', encoding="utf-8")

        with pytest.raises(InputFileError) as exc_info:
            list(read_products(source))

        assert ":2:" in exc_info.value.message


class TestUsage:
    """Tests for argument errors."""

    def test_no_arguments(self):
        """Title or --jsonl is required."""
        with pytest.raises(SystemExit) as exc_info:
            main([])

        assert exc_info.value.code == 2

    def test_title_and_jsonl_conflict(self, tmp_path):
        """Title and --jsonl are mutually exclusive."""
        with pytest.raises(SystemExit) as exc_info:
            main(["YMvK kabel", "--jsonl", str(tmp_path / "x.jsonl")])

        assert exc_info.value.code == 2

    def test_parser_prog(self):
        """The parser is named after the console script."""
        assert build_parser().prog == "elektro-extract"
