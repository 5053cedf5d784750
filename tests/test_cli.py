"""
Tests for pdf_ua_generator/cli.py: the pdf-ua command.
"""

import json

import pytest
from typer.testing import CliRunner

from pdf_ua_generator import __version__
from pdf_ua_generator.cli import app
from pdf_ua_generator.inspector import describe_pdf

runner = CliRunner()


@pytest.fixture(autouse=True)
def _isolated_env(clean_env):
    return clean_env


class TestGenerateCommand:

    def test_writes_demo_document(self, tmp_path):
        output = tmp_path / "sample.pdf"
        result = runner.invoke(app, ["generate", str(output)])

        assert result.exit_code == 0, result.output
        assert "successfully" in result.output
        summary = describe_pdf(output)
        assert summary.title == "Sample PDF/UA Document"
        assert summary.language == "en-US"

    def test_default_output_path(self, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        result = runner.invoke(app, ["generate"])

        assert result.exit_code == 0, result.output
        assert (tmp_path / "storage" / "sample-pdf-ua.pdf").exists()

    def test_options_override_sample_settings(self, tmp_path):
        output = tmp_path / "sample.pdf"
        result = runner.invoke(
            app, ["generate", str(output), "--title", "CLI Title", "--language", "es-ES"]
        )

        assert result.exit_code == 0, result.output
        summary = describe_pdf(output)
        assert summary.title == "CLI Title"
        assert summary.language == "es-ES"

    def test_config_file(self, tmp_path):
        config_file = tmp_path / "settings.yaml"
        config_file.write_text("author: From File\n", encoding="utf-8")
        output = tmp_path / "sample.pdf"

        result = runner.invoke(app, ["generate", str(output), "-c", str(config_file)])

        assert result.exit_code == 0, result.output
        assert describe_pdf(output).author == "From File"

    def test_environment(self, tmp_path, clean_env):
        clean_env.setenv("PDF_UA_SUBJECT", "From Env")
        output = tmp_path / "sample.pdf"

        result = runner.invoke(app, ["generate", str(output)])

        assert result.exit_code == 0, result.output
        assert describe_pdf(output).subject == "From Env"

    def test_failure_exit_code(self, tmp_path):
        blocker = tmp_path / "file.txt"
        blocker.write_text("x")

        result = runner.invoke(app, ["generate", str(blocker / "out.pdf")])

        assert result.exit_code == 1
        assert "Failed to generate PDF" in result.output

    def test_invalid_setting_exit_code(self, tmp_path, clean_env):
        clean_env.setenv("PDF_UA_FORMAT", "NOT-A-FORMAT")

        result = runner.invoke(app, ["generate", str(tmp_path / "out.pdf")])

        assert result.exit_code == 1


class TestBuildCommand:

    def test_json_content(self, tmp_path, sample_blocks):
        content = tmp_path / "content.json"
        content.write_text(json.dumps(sample_blocks), encoding="utf-8")

        result = runner.invoke(app, ["build", str(content), "--title", "Built"])

        assert result.exit_code == 0, result.output
        assert describe_pdf(tmp_path / "content.pdf").title == "Built"

    def test_yaml_content_with_content_key(self, tmp_path):
        content = tmp_path / "content.yaml"
        content.write_text(
            "content:\n  - type: h1\n    content: Hello\n  - type: ul\n    items: [a, b]\n",
            encoding="utf-8",
        )
        output = tmp_path / "out" / "built.pdf"

        result = runner.invoke(app, ["build", str(content), str(output)])

        assert result.exit_code == 0, result.output
        assert output.read_bytes().startswith(b"%PDF")

    def test_missing_content_file(self, tmp_path):
        result = runner.invoke(app, ["build", str(tmp_path / "nope.json")])

        assert result.exit_code == 1

    def test_invalid_content(self, tmp_path):
        content = tmp_path / "content.json"
        content.write_text(json.dumps({"content": "not a list"}), encoding="utf-8")

        result = runner.invoke(app, ["build", str(content)])

        assert result.exit_code == 1
        assert "Invalid content file" in result.output


class TestOtherCommands:

    def test_inspect(self, tmp_path):
        output = tmp_path / "sample.pdf"
        runner.invoke(app, ["generate", str(output)])

        result = runner.invoke(app, ["inspect", str(output)])

        assert result.exit_code == 0, result.output
        assert "page_count" in result.output
        assert "en-US" in result.output

    def test_inspect_missing_file(self, tmp_path):
        result = runner.invoke(app, ["inspect", str(tmp_path / "missing.pdf")])

        assert result.exit_code == 1

    def test_config_show(self):
        result = runner.invoke(app, ["config"])

        assert result.exit_code == 0, result.output
        assert "pdf_version" in result.output

    def test_config_save(self, tmp_path):
        path = tmp_path / "saved.json"

        result = runner.invoke(app, ["config", "--save", str(path)])

        assert result.exit_code == 0, result.output
        assert json.loads(path.read_text(encoding="utf-8"))["format"] == "A4"

    def test_version(self):
        result = runner.invoke(app, ["version"])

        assert result.exit_code == 0
        assert __version__ in result.output
