"""Tests pour les codecs texte INI et JSON."""

import json

import pytest

from ini_io.codec import (
    document_to_json_object,
    parse_text,
    render_json,
    render_text,
)
from ini_io.errors import (
    DuplicateNameError,
    InvalidArgumentError,
    InvalidValueError,
)
from ini_io.model import Document, Entry, Section, Value, ValueKind


SAMPLE = '[User]\nName = "Ann"\nAge = 30\n'


class TestParseText:
    """Tests pour parse_text."""

    def test_parse_sample(self):
        """Analyse d'un document simple."""
        document = parse_text(SAMPLE)

        assert document.loaded is True
        assert len(document) == 1
        assert document["User"]["Name"].value == Value.text("Ann")
        assert document["User"]["Age"].value == Value.int32(30)

    def test_section_order_preserved(self):
        document = parse_text("[B]\n[A]\n[C]\n")
        assert document.names() == ["B", "A", "C"]

    def test_empty_text_gives_empty_loaded_document(self):
        document = parse_text("")
        assert len(document) == 0
        assert document.loaded is True

    def test_none_raises(self):
        with pytest.raises(InvalidArgumentError):
            parse_text(None)

    def test_ignored_lines(self):
        """Texte libre, lignes vides et entrées hors section sont ignorés."""
        text = (
            "Orphan = 1\n"
            "free text before\n"
            "\n"
            "[S]\n"
            "; just a note\n"
            "A = 1\n"
            "\n"
        )
        document = parse_text(text)
        assert document.names() == ["S"]
        assert document["S"].names() == ["A"]

    def test_empty_section(self):
        document = parse_text("[Empty]\n[Full]\nX = 'x'")
        assert len(document["Empty"]) == 0
        assert document["Full"]["X"].value == Value.char("x")

    def test_header_name_keeps_full_text(self):
        """Le nom de section est tout le texte entre les crochets."""
        document = parse_text("[My Section]\n[]\n")
        assert document.names() == ["My Section", ""]

    def test_header_with_delimiter_is_not_an_entry(self):
        document = parse_text("[a=b]\nX = 1\n")
        assert document.names() == ["a=b"]
        assert document["a=b"]["X"].value == Value.int32(1)

    def test_indented_header_is_not_a_header(self):
        document = parse_text("[S]\n  [T]\nX = 1\n")
        assert document.names() == ["S"]

    def test_crlf_line_endings(self):
        document = parse_text('[User]\r\nName = "Ann"\r\nAge = 30\r\n')
        assert document == parse_text(SAMPLE)

    def test_float_entry_kept_as_float(self):
        document = parse_text("[N]\nRatio = 0.75\n")
        entry = document["N"]["Ratio"]
        assert entry.kind is ValueKind.FLOAT64
        assert entry.value.payload == 0.75

    def test_duplicate_section(self):
        with pytest.raises(DuplicateNameError) as exc_info:
            parse_text("[A]\n[A]\n")
        assert exc_info.value.line_number == 2

    def test_duplicate_entry(self):
        with pytest.raises(DuplicateNameError) as exc_info:
            parse_text("[A]\nX = 1\nX = 2\n")
        assert exc_info.value.line_number == 3
        assert "Ligne 3" in str(exc_info.value)

    def test_invalid_literal_reports_line(self):
        with pytest.raises(InvalidValueError) as exc_info:
            parse_text("[A]\nX = 1\nY = unquoted\n")
        assert exc_info.value.line_number == 3


class TestRenderText:
    """Tests pour render_text."""

    def test_render_sections_separated_by_blank_line(self):
        document = Document([
            Section("A", [Entry("X", 1)]),
            Section("B"),
        ])
        assert render_text(document) == "[A]\nX = 1\n\n[B]"

    def test_render_empty_document(self):
        assert render_text(Document()) == ""

    def test_render_all_kinds(self):
        section = Section("K", [
            Entry("T", Value.text("hello")),
            Entry("C", Value.char("c")),
            Entry("I", Value.int32(-1)),
            Entry("L", Value.int64(2**40)),
            Entry("F", Value.float64(2.5)),
        ])
        assert render_text(Document([section])) == (
            "[K]\n"
            'T = "hello"\n'
            "C = 'c'\n"
            "I = -1\n"
            f"L = {2**40}\n"
            "F = 2.5"
        )

    def test_round_trip(self):
        """Écrire puis relire donne un document égal."""
        document = parse_text(
            '[User]\nName = "Ann"\nAge = 30\nInitial = \'A\'\n\n'
            "[Server]\nPort = 8080\nLoad = 0.5\nBig = 9000000000\n"
        )
        assert parse_text(render_text(document)) == document

    def test_normalizes_layout(self):
        document = parse_text('junk\n[User]\nName="Ann"\n\n\nAge   =30\n')
        assert render_text(document) == '[User]\nName = "Ann"\nAge = 30'


class TestDocumentReadText:
    """Tests pour Document.read_text."""

    def test_read_text_replaces_content(self):
        document = Document([Section("Old")])
        document.read_text(SAMPLE)
        assert document.names() == ["User"]
        assert document.loaded is True

    def test_failed_read_leaves_document_empty(self):
        """L'analyse est tout ou rien."""
        document = Document([Section("Old")])
        with pytest.raises(DuplicateNameError):
            document.read_text("[A]\nX = 1\n[A]\n")
        assert len(document) == 0
        assert document.loaded is False

    def test_parse_text_classmethod(self):
        assert Document.parse_text(SAMPLE) == parse_text(SAMPLE)

    def test_to_text_and_str(self):
        document = parse_text(SAMPLE)
        assert document.to_text() == '[User]\nName = "Ann"\nAge = 30'
        assert str(document) == document.to_text()


class TestJsonExport:
    """Tests pour l'export JSON."""

    def test_values_exported_as_strings(self):
        document = parse_text(SAMPLE)
        assert document_to_json_object(document) == {
            "User": {"Name": "Ann", "Age": "30"}
        }

    def test_render_json_is_valid_json(self):
        document = parse_text("[A]\nC = 'é'\n\n[B]\n")
        content = render_json(document)
        assert json.loads(content) == {"A": {"C": "é"}, "B": {}}
        assert "é" in content

    def test_render_json_indent(self):
        document = parse_text("[A]\nX = 1\n")
        assert render_json(document, indent=None) == '{"A": {"X": "1"}}'
        assert document.to_json(indent=4) == render_json(document, indent=4)

    def test_empty_document(self):
        assert render_json(Document()) == "{}"
