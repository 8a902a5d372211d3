"""Tests for assembling the complete LaTeX document."""

import json

import pytest

from resume_generator.latex.resume_template import CLOSING, PREAMBLE
from resume_generator.latex_builder import (
    LaTeXBuilder,
    assemble,
    build_resume_document,
    build_resume_from_json_file,
    check_balanced,
)
from resume_generator.schema import ResumeData


class TestBuildResumeDocument:
    """Test the document assembler."""

    def test_empty_optional_sections_omitted(self):
        latex = build_resume_document(ResumeData())

        assert r"\section{Education}" in latex
        assert r"\section{Technical Skills}" in latex
        assert r"\section{Experience}" not in latex
        assert r"\section{Projects}" not in latex
        assert r"\section{Leadership" not in latex
        assert "%-----------EXPERIENCE" not in latex

    def test_preamble_and_closing_present(self):
        latex = build_resume_document(ResumeData())

        assert latex.startswith(PREAMBLE)
        assert latex.endswith(CLOSING)
        assert r"\begin{document}" in latex
        assert latex.rstrip().endswith(r"\end{document}")

    def test_section_order(self, sample_resume):
        latex = build_resume_document(sample_resume)

        markers = [
            "%----------HEADING",
            r"\section{Education}",
            r"\section{Experience}",
            r"\section{Projects}",
            r"\section{Leadership",
            r"\section{Technical Skills}",
        ]
        positions = [latex.index(m) for m in markers]
        assert positions == sorted(positions)

    def test_deterministic(self, sample_resume):
        assert build_resume_document(sample_resume) == build_resume_document(sample_resume)

    def test_dict_input_matches_model_input(self, sample_resume, sample_resume_dict):
        assert build_resume_document(sample_resume_dict) == build_resume_document(sample_resume)

    def test_input_not_mutated(self, sample_resume):
        before = sample_resume.model_dump()
        build_resume_document(sample_resume)

        assert sample_resume.model_dump() == before

    def test_assemble_alias(self, sample_resume):
        assert assemble(sample_resume) == LaTeXBuilder().build_complete_resume(sample_resume)

    def test_user_content_escaped(self, sample_resume):
        latex = build_resume_document(sample_resume)

        assert r"{Acme \& Sons}" in latex
        assert r"\resumeItem{Cut build time by 40\%}" in latex
        assert r"C++, C\#" in latex

    def test_build_sections_keeps_empty_slots(self):
        sections = LaTeXBuilder().build_sections(ResumeData())

        assert len(sections) == 6
        assert sections[2:5] == ["", "", ""]

    def test_partial_data_renders(self):
        latex = build_resume_document({"personalInfo": {"fullName": "Only Name"}})

        assert "Only Name" in latex
        assert check_balanced(latex) == (True, None)

    def test_non_string_text_does_not_raise(self):
        latex = build_resume_document({
            "personalInfo": {"fullName": {"first": "A"}},
            "education": {"universityName": "State U", "gpa": True},
        })

        assert "State U" in latex
        assert "GPA" not in latex
        assert check_balanced(latex) == (True, None)


class TestCheckBalanced:
    """Test the structural sanity check."""

    def test_full_document_balanced(self, sample_resume):
        assert check_balanced(build_resume_document(sample_resume)) == (True, None)

    def test_hostile_input_stays_balanced(self):
        nasty = "}{\\ $ & % # ^ _ ~ \\end{document} {"
        data = {
            "personalInfo": {"fullName": nasty, "email": nasty, "linkedinUrl": nasty},
            "education": {"universityName": nasty, "honors": nasty},
            "workExperience": [{"companyName": nasty, "achievements": [nasty]}],
            "projects": [{"name": nasty, "websiteUrl": nasty, "description": [nasty]}],
            "leadership": [{"organizationName": nasty, "urls": [nasty], "achievements": [nasty]}],
            "technicalSkills": {"developerTools": nasty},
        }

        assert check_balanced(build_resume_document(data)) == (True, None)

    def test_unclosed_brace(self):
        ok, message = check_balanced("\\textbf{oops")

        assert not ok
        assert "unclosed" in message

    def test_extra_closing_brace(self):
        ok, _ = check_balanced("text}")

        assert not ok

    def test_mismatched_environment(self):
        ok, message = check_balanced("\\begin{itemize}\\end{center}")

        assert not ok
        assert "center" in message

    def test_unclosed_environment(self):
        ok, message = check_balanced("\\begin{document}")

        assert not ok
        assert "document" in message

    def test_escaped_and_commented_braces_ignored(self):
        assert check_balanced("a \\{ b \\% {c} % {") == (True, None)


class TestBuildResumeFromJsonFile:
    """Test the file-based convenience function."""

    def test_bare_object(self, tmp_path, sample_resume_dict, sample_resume):
        path = tmp_path / "resume.json"
        path.write_text(json.dumps(sample_resume_dict), encoding="utf-8")

        assert build_resume_from_json_file(path) == build_resume_document(sample_resume)

    def test_export_envelope_and_output(self, tmp_path, sample_resume_dict):
        path = tmp_path / "export.json"
        path.write_text(
            json.dumps({"version": "1.0", "timestamp": "x", "data": sample_resume_dict}),
            encoding="utf-8",
        )
        out = tmp_path / "build" / "jane.tex"

        latex = build_resume_from_json_file(path, output_path=out)

        assert out.read_text(encoding="utf-8") == latex
        assert "Jane Doe" in latex

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            build_resume_from_json_file(tmp_path / "nope.json")

    def test_invalid_json(self, tmp_path):
        path = tmp_path / "bad.json"
        path.write_text("{ not json", encoding="utf-8")

        with pytest.raises(ValueError, match="Invalid JSON"):
            build_resume_from_json_file(path)
