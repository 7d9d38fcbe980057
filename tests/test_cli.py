"""Tests for topwords.cli module."""

import io
import json
import tempfile
from pathlib import Path
from unittest.mock import MagicMock, patch

import pytest
import requests

from topwords.cli import main


@pytest.fixture
def sample_text_file() -> Path:
    """Create a sample text file for CLI testing."""
    content = "The cat sat on the mat. The cat ran!\nA well-known cat, the end.\n"
    with tempfile.NamedTemporaryFile(mode="w", suffix=".txt", delete=False) as f:
        f.write(content)
        return Path(f.name)


class TestCLIBasic:
    """Basic CLI tests."""

    def test_cli_prints_ranked_words(
        self, sample_text_file: Path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        """Test that the top words are printed to stdout."""
        with patch("sys.argv", ["topwords", str(sample_text_file), "--top", "2"]):
            result = main()
            assert result == 0

        captured = capsys.readouterr()
        assert captured.out.strip() == "04:the 03:cat"

    def test_cli_notice_when_fewer_words(
        self, sample_text_file: Path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        """Test that a notice is printed when the vocabulary is small."""
        with patch("sys.argv", ["topwords", str(sample_text_file)]):
            result = main()
            assert result == 0

        captured = capsys.readouterr()
        assert "There are fewer words than 10, retrieving 8 instead." in captured.out
        assert "well" not in captured.out

    def test_cli_missing_input_returns_error(self, capsys: pytest.CaptureFixture[str]) -> None:
        """Test that a missing input file returns error code."""
        with patch("sys.argv", ["topwords", "nonexistent.txt"]):
            result = main()
            assert result == 1

        captured = capsys.readouterr()
        assert "Error:" in captured.err
        assert captured.out == ""

    def test_cli_help_shows_usage(self, capsys: pytest.CaptureFixture[str]) -> None:
        """Test that --help shows usage information."""
        with patch("sys.argv", ["topwords", "--help"]):
            with pytest.raises(SystemExit) as exc_info:
                main()
            assert exc_info.value.code == 0

        captured = capsys.readouterr()
        assert "most frequent words" in captured.out

    def test_cli_reads_stdin(self, capsys: pytest.CaptureFixture[str]) -> None:
        """Test that '-' reads text from standard input."""
        with patch("sys.argv", ["topwords", "-", "--top", "1"]):
            with patch("sys.stdin", io.StringIO("b a b")):
                result = main()
                assert result == 0

        captured = capsys.readouterr()
        assert captured.out.strip() == "02:b"

    @patch("topwords.source.requests.get")
    def test_cli_reads_url(self, mock_get: MagicMock, capsys: pytest.CaptureFixture[str]) -> None:
        """Test that URL sources are fetched."""
        mock_get.return_value.text = "x y x"

        with patch("sys.argv", ["topwords", "https://example.com/t.txt", "--top", "2"]):
            result = main()
            assert result == 0

        captured = capsys.readouterr()
        assert captured.out.strip() == "02:x 01:y"

    @patch("topwords.source.requests.get")
    def test_cli_url_failure_returns_error(
        self, mock_get: MagicMock, capsys: pytest.CaptureFixture[str]
    ) -> None:
        """Test that a failed download returns error code."""
        mock_get.side_effect = requests.ConnectionError("Connection refused")

        with patch("sys.argv", ["topwords", "https://example.com/t.txt"]):
            result = main()
            assert result == 1

        captured = capsys.readouterr()
        assert "Failed to download" in captured.err


class TestCLIOptions:
    """Tests for CLI output and config options."""

    def test_cli_json_format(
        self, sample_text_file: Path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        """Test --format json prints a JSON report."""
        with patch(
            "sys.argv", ["topwords", str(sample_text_file), "--top", "1", "--format", "json"]
        ):
            result = main()
            assert result == 0

        data = json.loads(capsys.readouterr().out)
        assert data["words"] == [{"word": "the", "count": 4}]
        assert data["truncated"] is False

    def test_cli_writes_output_file(
        self, sample_text_file: Path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        """Test -o writes the report to a file."""
        with tempfile.TemporaryDirectory() as tmpdir:
            output = Path(tmpdir) / "report.txt"
            argv = ["topwords", str(sample_text_file), "--top", "2", "-o", str(output)]
            with patch("sys.argv", argv):
                result = main()
                assert result == 0

            assert output.read_text() == "04:the 03:cat\n"

        captured = capsys.readouterr()
        assert "Top 2 words ->" in captured.out

    def test_cli_negative_top_returns_error(
        self, sample_text_file: Path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        """Test that a negative --top is rejected."""
        with patch("sys.argv", ["topwords", str(sample_text_file), "--top", "-1"]):
            result = main()
            assert result == 1

        assert "'top' must be non-negative" in capsys.readouterr().err

    def test_cli_config_file(
        self, sample_text_file: Path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        """Test that settings are read from a YAML config."""
        with tempfile.NamedTemporaryFile(mode="w", suffix=".yml", delete=False) as f:
            f.write("top: 1\nformat: json\n")
            config_path = f.name

        with patch("sys.argv", ["topwords", str(sample_text_file), "--config", config_path]):
            result = main()
            assert result == 0

        data = json.loads(capsys.readouterr().out)
        assert data["top_n"] == 1

    def test_cli_options_override_config(
        self, sample_text_file: Path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        """Test that command line options take precedence over the config."""
        with tempfile.NamedTemporaryFile(mode="w", suffix=".yml", delete=False) as f:
            f.write("top: 1\nformat: json\n")
            config_path = f.name

        with patch(
            "sys.argv",
            [
                "topwords",
                str(sample_text_file),
                "--config",
                config_path,
                "--format",
                "text",
                "--top",
                "2",
            ],
        ):
            result = main()
            assert result == 0

        assert capsys.readouterr().out.strip() == "04:the 03:cat"

    def test_cli_missing_config_returns_error(
        self, sample_text_file: Path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        """Test that a missing config file returns error code."""
        with patch("sys.argv", ["topwords", str(sample_text_file), "--config", "nope.yml"]):
            result = main()
            assert result == 1

        assert "Config file not found" in capsys.readouterr().err

    def test_cli_invalid_config_returns_error(
        self, sample_text_file: Path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        """Test that an invalid config file returns error code."""
        with tempfile.NamedTemporaryFile(mode="w", suffix=".yml", delete=False) as f:
            f.write("top: many\n")
            config_path = f.name

        with patch("sys.argv", ["topwords", str(sample_text_file), "--config", config_path]):
            result = main()
            assert result == 1

        assert "Error:" in capsys.readouterr().err

    def test_cli_unreadable_config_returns_error(
        self, sample_text_file: Path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        """Test that a config path that cannot be opened returns error code."""
        with tempfile.TemporaryDirectory() as tmpdir:
            with patch("sys.argv", ["topwords", str(sample_text_file), "--config", tmpdir]):
                result = main()
                assert result == 1

        assert "Error:" in capsys.readouterr().err
