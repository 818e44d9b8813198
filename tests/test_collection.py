"""Tests unitaires pour les collections ordonnées (Section, Document)."""

import pytest

from ini_io.errors import (
    DuplicateNameError,
    ElementIndexError,
    EntityNotFoundError,
    InvalidArgumentError,
)
from ini_io.model import Document, Entry, Section, Value


# Fixtures


@pytest.fixture
def section():
    """Section de trois entrées A, B, C."""
    return Section("S", [Entry("A", 1), Entry("B", 2), Entry("C", 3)])


@pytest.fixture
def document():
    """Document de deux sections."""
    return Document([
        Section("User", [Entry("Name", "Ann")]),
        Section("Server", [Entry("Port", 8080)]),
    ])


def names(collection):
    return [item.name for item in collection]


# Tests d'accès


class TestAccess:
    """Tests pour l'accès par index et par nom."""

    def test_get_by_index_and_name(self, section):
        assert section[1].name == "B"
        assert section["C"].value == Value.int32(3)

    @pytest.mark.parametrize("index", [3, -1, 10])
    def test_index_out_of_range(self, section, index):
        with pytest.raises(ElementIndexError):
            section[index]

    def test_index_error_is_builtin_index_error(self, section):
        with pytest.raises(IndexError):
            section[3]

    def test_unknown_name(self, section):
        with pytest.raises(EntityNotFoundError):
            section["Z"]

    def test_not_found_is_key_error(self, section):
        with pytest.raises(KeyError):
            section["Z"]

    def test_contains_name_and_element(self, section):
        assert "A" in section
        assert Entry("A", 1) in section
        assert Entry("A", 2) not in section
        assert "Z" not in section

    def test_index_of(self, section):
        assert section.index_of("B") == 1
        assert section.index_of(Entry("C", 3)) == 2
        assert section.index_of("Z") == -1

    def test_get_value(self, section):
        assert section.get_value("A") == Value.int32(1)
        assert section.get_value("Z", "default") == "default"


# Tests d'insertion


class TestInsert:
    """Tests pour insert/append/extend."""

    def test_insert_shifts_following_elements(self, section):
        entry = Entry("X", 0)
        section.insert(1, entry)
        assert names(section) == ["A", "X", "B", "C"]
        assert section[1] is entry

    def test_insert_at_end(self, section):
        section.insert(3, Entry("D", 4))
        assert names(section) == ["A", "B", "C", "D"]

    def test_insert_out_of_range(self, section):
        with pytest.raises(ElementIndexError):
            section.insert(4, Entry("D", 4))
        with pytest.raises(ElementIndexError):
            section.insert(-1, Entry("D", 4))

    def test_duplicate_insert_leaves_collection_unchanged(self, section):
        before = section.to_list()
        with pytest.raises(DuplicateNameError):
            section.insert(0, Entry("B", 99))
        assert section.to_list() == before

    def test_names_are_case_sensitive(self, section):
        section.append(Entry("a", 1))
        assert names(section) == ["A", "B", "C", "a"]

    def test_extend_is_all_or_nothing(self, section):
        with pytest.raises(DuplicateNameError):
            section.extend([Entry("D", 4), Entry("D", 5)])
        assert len(section) == 3

    def test_wrong_element_type(self, section):
        with pytest.raises(InvalidArgumentError):
            section.append(Section("nested"))

    def test_duplicate_in_constructor(self):
        with pytest.raises(DuplicateNameError):
            Section("S", [Entry("A", 1), Entry("A", 2)])


# Tests de remplacement


class TestSet:
    """Tests pour le remplacement par index ou par nom."""

    def test_replace_keeping_name(self, section):
        section[0] = Entry("A", 100)
        assert section["A"].value == Value.int32(100)

    def test_replace_with_new_unused_name(self, section):
        section["B"] = Entry("Y", 2)
        assert names(section) == ["A", "Y", "C"]

    def test_replace_with_other_existing_name(self, section):
        with pytest.raises(DuplicateNameError):
            section[0] = Entry("C", 0)
        assert names(section) == ["A", "B", "C"]

    def test_replace_unknown_name(self, section):
        with pytest.raises(EntityNotFoundError):
            section["Z"] = Entry("Z", 0)

    def test_replace_out_of_range(self, section):
        with pytest.raises(ElementIndexError):
            section[3] = Entry("D", 0)

    def test_set_value_updates_or_appends(self, section):
        section.set_value("A", "one")
        section.set_value("D", 4)
        assert section["A"].value == Value.text("one")
        assert names(section) == ["A", "B", "C", "D"]


# Tests de suppression


class TestRemove:
    """Tests pour les suppressions."""

    def test_remove_at_compacts(self, section):
        removed = section.remove_at(0)
        assert removed.name == "A"
        assert names(section) == ["B", "C"]

    def test_remove_at_out_of_range(self, section):
        with pytest.raises(ElementIndexError):
            section.remove_at(3)

    def test_remove_by_name(self, section):
        assert section.remove_by_name("B") is True
        assert section.remove_by_name("B") is False
        assert names(section) == ["A", "C"]

    def test_remove_structural(self, section):
        assert section.remove(Entry("C", 99)) is False
        assert section.remove(Entry("C", 3)) is True
        assert names(section) == ["A", "B"]

    def test_del_item(self, section):
        del section["A"]
        del section[0]
        assert names(section) == ["C"]

    def test_clear(self, section):
        section.clear()
        assert len(section) == 0


# Tests de renommage


class TestRename:
    """Tests pour rename."""

    def test_rename_preserves_position(self, section):
        section.rename("B", "Beta")
        assert names(section) == ["A", "Beta", "C"]
        assert section["Beta"].value == Value.int32(2)

    def test_rename_by_element(self, section):
        section.rename(Entry("C", 3), "Gamma")
        assert names(section) == ["A", "B", "Gamma"]

    def test_rename_to_used_name_leaves_unchanged(self, section):
        with pytest.raises(DuplicateNameError):
            section.rename("A", "B")
        assert names(section) == ["A", "B", "C"]

    def test_rename_to_same_name(self, section):
        section.rename("A", "A")
        assert names(section) == ["A", "B", "C"]

    def test_rename_missing_target(self, section):
        with pytest.raises(EntityNotFoundError):
            section.rename("Z", "Y")
        with pytest.raises(EntityNotFoundError):
            section.rename(Entry("A", 999), "Y")

    def test_rename_section_in_document(self, document):
        document.rename("User", "Account")
        assert names(document) == ["Account", "Server"]
        assert document["Account"]["Name"].value == Value.text("Ann")

    def test_entry_cannot_join_second_section(self):
        """Une entrée rattachée ne peut pas être partagée entre sections."""
        shared = Entry("X", 1)
        first = Section("A", [shared])
        second = Section("B", [Entry("Y", 2)])

        with pytest.raises(InvalidArgumentError):
            second.append(shared)
        with pytest.raises(InvalidArgumentError):
            Section("C", [shared])
        with pytest.raises(InvalidArgumentError):
            second[0] = shared

        first.rename("X", "Y")
        assert names(second) == ["Y"]
        assert names(first) == ["Y"]

    def test_section_cannot_join_second_document(self):
        shared = Section("S")
        first = Document([shared])
        second = Document([Section("T")])

        with pytest.raises(InvalidArgumentError):
            second.insert(0, shared)

        first.rename("S", "T")
        assert names(second) == ["T"]
        assert Document.parse_text(second.to_text()) == second

    def test_removed_entry_can_move(self, section):
        """Un élément retiré ou remplacé peut rejoindre une autre collection."""
        moved = section.remove_at(0)
        replaced = section["B"]
        section["B"] = Entry("B", 20)
        other = Section("T")

        other.extend([moved, replaced])

        assert names(other) == ["A", "B"]
        section.rename("B", "Z")
        assert names(other) == ["A", "B"]

    def test_cleared_entries_can_move(self, section):
        entries = section.to_list()
        section.clear()

        target = Section("T", entries)

        assert names(target) == ["A", "B", "C"]

    def test_loaded_sections_belong_to_reader(self):
        """read_text rattache les sections lues au document lecteur."""
        document = Document()
        document.read_text("[S]\nX = 1\n")
        section = document["S"]

        with pytest.raises(InvalidArgumentError):
            Document([section])
        assert document.remove(section) is True
        assert names(Document([section])) == ["S"]


# Tests d'itération et d'égalité


class TestIterationAndEquality:
    """Tests pour l'itération et l'égalité."""

    def test_iteration_is_a_snapshot(self, section):
        seen = []
        for entry in section:
            seen.append(entry.name)
            section.remove_by_name(entry.name)
            section.append(Entry(entry.name + "2", 0))
        assert seen == ["A", "B", "C"]
        assert names(section) == ["A2", "B2", "C2"]

    def test_equality_is_order_sensitive(self):
        first = Section("S", [Entry("A", 1), Entry("B", 2)])
        second = Section("S", [Entry("B", 2), Entry("A", 1)])
        assert first != second
        assert first == Section("S", [Entry("A", 1), Entry("B", 2)])

    def test_section_equality_includes_name(self):
        assert Section("S", [Entry("A", 1)]) != Section("T", [Entry("A", 1)])

    def test_document_equality(self, document):
        assert document == document.copy()
        other = document.copy()
        other["User"].set_value("Name", "Bob")
        assert document != other

    def test_collections_unhashable(self, section, document):
        with pytest.raises(TypeError):
            hash(section)
        with pytest.raises(TypeError):
            hash(document)

    def test_uniqueness_is_scoped(self):
        """Un nom d'entrée n'est unique qu'à l'intérieur de sa section."""
        document = Document([
            Section("A", [Entry("Key", 1)]),
            Section("B", [Entry("Key", 2)]),
        ])
        assert document["A"]["Key"].value != document["B"]["Key"].value

    def test_none_section_name(self):
        assert Section(None).name == ""


# Tests du document


class TestDocument:
    """Tests spécifiques au document."""

    def test_loaded_flag(self, document):
        assert document.loaded is True
        assert Document().loaded is False

    def test_from_dict_and_to_dict(self):
        data = {"User": {"Name": "Ann", "Age": 30}, "Empty": {}}
        document = Document.from_dict(data)
        assert document.to_dict() == data
        assert names(document) == ["User", "Empty"]

    def test_section_from_mapping_none(self):
        with pytest.raises(InvalidArgumentError):
            Section.from_mapping("S", None)

    def test_section_parse_text(self):
        section = Section.parse_text('[User]\nName = "Ann"\n\nAge = 30\n')
        assert section == Section(
            "User", [Entry("Name", "Ann"), Entry("Age", 30)]
        )

    @pytest.mark.parametrize("text", [None, "", "User\nA = 1", "[User]\nfree"])
    def test_section_parse_text_invalid(self, text):
        with pytest.raises(InvalidArgumentError):
            Section.parse_text(text)

    def test_section_to_text_round_trip(self, section):
        assert Section.parse_text(section.to_text()) == section
