"""
Tests for CV document loading and JSON cleaning.
"""

import json

import pytest

from cv_layout.document_loader import DocumentLoadError, load_cv_document, parse_cv_document
from cv_layout.utils import clean_json_content


class TestCleanJsonContent:
    """Test cleanup of extracted JSON text."""

    def test_strips_markdown_fences(self):
        """Test removing ```json fences."""
        content = '```json\n{"summary": "Engineer"}\n```'
        assert json.loads(clean_json_content(content)) == {"summary": "Engineer"}

    def test_drops_trailing_commentary(self):
        """Test dropping text after the JSON object."""
        content = '{"skills": ["Python"]}\nLet me know if you need anything else!'
        assert json.loads(clean_json_content(content)) == {"skills": ["Python"]}

    def test_replaces_control_characters(self):
        content = '{"summary": "a\x07b"}'
        assert json.loads(clean_json_content(content)) == {"summary": "a b"}

    def test_valid_json_unchanged(self):
        """Test that clean JSON only loses surrounding whitespace."""
        assert clean_json_content('  {"a": 1}  ') == '{"a": 1}'


class TestParseCvDocument:
    """Test validation of CV JSON into a CVDocument."""

    def test_camel_case_keys(self, full_cv_data):
        """Test reading the camelCase wire keys."""
        doc = parse_cv_document(full_cv_data)
        assert doc.personal_details.name == "Amina Njeri"
        assert doc.volunteer_work[0].organization == "Code Club"
        assert doc.additional_sections[1].section_name == "References"

    def test_snake_case_keys(self):
        """Test that Python field names are accepted too."""
        doc = parse_cv_document({"volunteer_work": [{"organization": "Club"}]})
        assert len(doc.volunteer_work) == 1

    def test_nulls_and_unknown_keys(self):
        """Test that null fields fall back to defaults and unknown keys are ignored."""
        doc = parse_cv_document({
            "summary": None,
            "experience": [{"role": "Engineer", "bullets": None, "location": "Remote"}],
            "photoUrl": "https://example.com/me.png",
        })
        assert doc.summary == ""
        assert doc.experience[0].bullets == []

    def test_numeric_years_read_as_text(self):
        """Test that numeric years from extracted CVs are accepted as strings."""
        doc = parse_cv_document('{"education": [{"degree": "BSc", "years": 2016}], '
                                '"awards": [{"title": "Best Paper", "year": 2021}]}')
        assert doc.education[0].years == "2016"
        assert doc.awards[0].year == "2021"

    def test_null_list_items_dropped(self):
        """Test that null bullets and null list entries are skipped."""
        doc = parse_cv_document({
            "experience": [{"role": "Engineer", "bullets": ["Shipped v2", None, "Cut costs"]}],
            "skills": ["Python", None],
            "projects": [None, {"title": "SDK"}],
        })
        assert doc.experience[0].bullets == ["Shipped v2", "Cut costs"]
        assert doc.skills == ["Python"]
        assert [p.title for p in doc.projects] == ["SDK"]

    def test_fenced_json_text(self):
        """Test parsing JSON text wrapped in markdown fences."""
        doc = parse_cv_document('```json\n{"skills": ["Go", "Rust"]}\n```')
        assert doc.skills == ["Go", "Rust"]

    def test_invalid_json(self):
        with pytest.raises(DocumentLoadError, match="Invalid JSON"):
            parse_cv_document("{not json")

    def test_not_an_object(self):
        """Test that a top-level JSON array is rejected."""
        with pytest.raises(DocumentLoadError, match="JSON object"):
            parse_cv_document("[1, 2, 3]")

    def test_schema_violation(self):
        """Test that a wrongly shaped section is reported."""
        with pytest.raises(DocumentLoadError, match="Invalid CV document"):
            parse_cv_document({"skills": "Python, Go"})


class TestLoadCvDocument:
    """Test loading CV JSON files from disk."""

    def test_load_file(self, write_cv_json, five_section_data):
        """Test loading a valid CV file."""
        doc = load_cv_document(write_cv_json(five_section_data))
        assert doc.roles == ["Backend Engineer", "Platform Engineer", "Tech Lead"]

    def test_load_partial_file(self, write_cv_json):
        """Test loading a file with numeric years and null bullets."""
        doc = load_cv_document(write_cv_json({
            "summary": "Engineer",
            "experience": [{"role": "Engineer", "years": 2020, "bullets": [None, "Led team"]}],
        }))
        assert doc.experience[0].years == "2020"
        assert doc.experience[0].bullets == ["Led team"]

    def test_missing_file(self, tmp_path):
        """Test error for a missing file."""
        with pytest.raises(DocumentLoadError, match="not found"):
            load_cv_document(tmp_path / "missing.json")

    def test_empty_file(self, write_cv_json):
        with pytest.raises(DocumentLoadError, match="empty"):
            load_cv_document(write_cv_json("   "))

    def test_error_is_a_value_error(self, tmp_path):
        """Test that loader errors can be caught as ValueError."""
        with pytest.raises(ValueError):
            load_cv_document(tmp_path / "missing.json")
