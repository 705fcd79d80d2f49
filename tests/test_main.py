"""Tests for the cv-layout command line."""
import json
import logging

from cv_layout.main import main


class TestMain:
    """Tests for the cv-layout entry point."""

    def test_prints_plan_json(self, write_cv_json, five_section_data, capsys):
        """Test that the plan, titles and analysis are printed as JSON."""
        exit_code = main([str(write_cv_json(five_section_data)), "--family", "a4"])

        assert exit_code == 0
        output = json.loads(capsys.readouterr().out)
        assert output["plan"] == {"spacingMillimeters": 27, "distributeEvenly": True}
        assert output["sections"][0] == "Professional Summary"
        assert output["analysis"]["extra_space"] == 107

    def test_prints_css(self, write_cv_json, five_section_data, capsys):
        """Test --css output for a template's page family."""
        exit_code = main([str(write_cv_json(five_section_data)), "--template", "template-2", "--css"])

        assert exit_code == 0
        css = capsys.readouterr().out
        assert "--section-spacing: 27mm;" in css
        assert "justify-content: space-between;" in css

    def test_sections_are_estimated_once(self, write_cv_json, five_section_data, caplog):
        """Test that each section is measured a single time per run."""
        path = str(write_cv_json(five_section_data))
        with caplog.at_level(logging.DEBUG, logger="cv_layout"):
            assert main([path, "--log-level", "DEBUG"]) == 0
        summary_records = [r for r in caplog.records if r.getMessage().startswith("Section summary")]
        assert len(summary_records) == 1

    def test_missing_document(self, tmp_path, capsys):
        """Test exit code 1 and no stdout for a missing file."""
        assert main([str(tmp_path / "missing.json")]) == 1
        assert capsys.readouterr().out == ""

    def test_unknown_family(self, write_cv_json, five_section_data):
        assert main([str(write_cv_json(five_section_data)), "--family", "tabloid"]) == 1

    def test_directory_instead_of_file(self, tmp_path):
        """Test that a directory path is rejected."""
        assert main([str(tmp_path)]) == 1
