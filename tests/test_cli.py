"""Tests for the command line interface."""

import json

import pytest
from typer.testing import CliRunner

from contact_parser import __version__
from contact_parser.main import app

MARCUS_CARD = """Marcus Rodriguez
CTO
TechStart Inc
m.rodriguez@techstart.io
+1 (555) 987-6543
"""

runner = CliRunner()


@pytest.fixture
def card(tmp_path):
    path = tmp_path / "card.txt"
    path.write_text(MARCUS_CARD, encoding="utf-8")
    return path


class TestParseCommand:
    """Test the parse command."""

    def test_json(self, card):
        """Test JSON output for a card file."""
        result = runner.invoke(app, ["parse", str(card), "--json"])
        assert result.exit_code == 0
        data = json.loads(result.stdout)
        assert data["given_name"] == "Marcus"
        assert data["is_valid_for_saving"] is True

    def test_stdin(self):
        """Test reading OCR text from stdin."""
        result = runner.invoke(app, ["parse", "-", "--json"], input=MARCUS_CARD)
        assert result.exit_code == 0
        assert json.loads(result.stdout)["organization_name"] == "TechStart Inc"

    def test_formatted(self, card):
        """Test the human-readable output."""
        result = runner.invoke(app, ["parse", str(card)])
        assert result.exit_code == 0
        assert "Marcus Rodriguez" in result.stdout
        assert "Confidence" in result.stdout

    def test_vcard(self, card):
        """Test vCard output."""
        result = runner.invoke(app, ["parse", str(card), "--vcard"])
        assert result.exit_code == 0
        assert "FN:Marcus Rodriguez" in result.stdout

    def test_missing_file(self, tmp_path):
        """Test a missing file exits with status 1."""
        result = runner.invoke(app, ["parse", str(tmp_path / "missing.txt")])
        assert result.exit_code == 1
        assert "Error" in result.stdout

    def test_require_valid(self):
        """Test --require-valid exits with status 2 for incomplete contacts."""
        result = runner.invoke(app, ["parse", "-", "--json", "--require-valid"], input="Acme Corp\n")
        assert result.exit_code == 2
        assert json.loads(result.stdout)["given_name"] == "Acme"

    def test_require_valid_passes(self, card):
        """Test --require-valid exits normally for complete contacts."""
        result = runner.invoke(app, ["parse", str(card), "--json", "--require-valid"])
        assert result.exit_code == 0

    def test_config(self, card, tmp_path):
        """Test a config file changes the parse."""
        config = tmp_path / "config.json"
        config.write_text(json.dumps({"organization_score": 0.5}))
        result = runner.invoke(app, ["parse", str(card), "--json", "--config", str(config)])
        assert result.exit_code == 0
        assert json.loads(result.stdout)["confidence_scores"]["organization"] == 0.5

    def test_bad_config(self, card, tmp_path):
        """Test an invalid config file exits with status 1."""
        config = tmp_path / "config.json"
        config.write_text("{")
        result = runner.invoke(app, ["parse", str(card), "--config", str(config)])
        assert result.exit_code == 1


class TestExportCommand:
    """Test the export command."""

    def test_vcard_stdout(self, card):
        """Test vCard export to stdout."""
        result = runner.invoke(app, ["export", str(card)])
        assert result.exit_code == 0
        assert result.stdout.startswith("BEGIN:VCARD")
        assert "TEL;TYPE=WORK:+15559876543" in result.stdout

    def test_csv_file(self, card, tmp_path):
        """Test CSV export to a file."""
        output = tmp_path / "out.csv"
        result = runner.invoke(app, ["export", str(card), "-f", "csv", "-o", str(output)])
        assert result.exit_code == 0
        assert output.read_text(encoding="utf-8").startswith("Full Name,Job Title,Company")

    def test_invalid_format(self, card):
        """Test an unknown format exits with status 1."""
        result = runner.invoke(app, ["export", str(card), "-f", "xml"])
        assert result.exit_code == 1


class TestBatchCommand:
    """Test the batch command."""

    def test_json(self, card, tmp_path):
        """Test batch output as JSON."""
        output = tmp_path / "out.json"
        result = runner.invoke(app, ["batch", str(card.parent), "-o", str(output)])
        assert result.exit_code == 0
        data = json.loads(output.read_text(encoding="utf-8"))
        assert data["metadata"]["total"] == 1
        assert data["metadata"]["ready_to_save"] == 1

    def test_csv(self, card, tmp_path):
        """Test batch output as CSV."""
        output = tmp_path / "out.csv"
        result = runner.invoke(app, ["batch", str(card), "-o", str(output), "-f", "csv"])
        assert result.exit_code == 0
        assert "Marcus Rodriguez" in output.read_text(encoding="utf-8")

    def test_no_files(self, tmp_path):
        """Test an empty directory is not an error."""
        empty = tmp_path / "empty"
        empty.mkdir()
        result = runner.invoke(app, ["batch", str(empty), "-o", str(tmp_path / "out.json")])
        assert result.exit_code == 0
        assert not (tmp_path / "out.json").exists()

    def test_invalid_format(self, card, tmp_path):
        """Test an unknown format exits with status 1."""
        result = runner.invoke(app, ["batch", str(card), "-o", str(tmp_path / "o"), "-f", "xml"])
        assert result.exit_code == 1


class TestVersionCommand:
    """Test the version command."""

    def test_version(self):
        """Test the version is printed."""
        result = runner.invoke(app, ["version"])
        assert result.exit_code == 0
        assert f"cardparse version {__version__}" in result.stdout
