"""Tests for declarative schema documents."""

import copy
import json

import pytest

from morph import EnumNode, KeyNode, ObjectNode, SchemaError, load_schema, schema_from_dict
from morph.constants import SCHEMA_DOCUMENT_VERSION
from morph.loader import _build_field, validate_document

from .fixtures import SCHEMA_DOCUMENT


@pytest.fixture
def document():
    """A deep copy of the fixture document, safe to modify."""
    return copy.deepcopy(SCHEMA_DOCUMENT)


class TestValidateDocument:
    """Tests for validate_document()."""

    def test_valid_document(self, document):
        assert validate_document(document) == []

    def test_minimal_document(self):
        assert validate_document({"shape": {}}) == []

    def test_missing_shape(self):
        errors = validate_document({})
        assert any("'shape' is a required property" in e for e in errors)

    def test_not_an_object(self):
        assert validate_document([]) != []

    def test_unknown_field_property(self, document):
        document["shape"]["run_id"]["rename"] = "x"
        errors = validate_document(document)

        assert errors
        assert errors[0].startswith("shape.run_id")

    def test_empty_field_entry(self, document):
        document["shape"]["run_id"] = {}
        assert validate_document(document) != []

    def test_shape_and_enum_together(self, document):
        document["shape"]["status"]["shape"] = {}
        assert validate_document(document) != []

    def test_empty_enum(self, document):
        document["shape"]["status"]["enum"]["from"] = []
        assert validate_document(document) != []

    def test_empty_target_key(self, document):
        document["shape"]["run_id"]["to"] = ""
        assert validate_document(document) != []

    def test_reports_every_error(self, document):
        document["shape"]["run_id"] = {}
        document["shape"]["status"]["enum"]["to"] = [1, 2, 3]
        errors = validate_document(document)

        assert len(errors) >= 2


class TestSchemaFromDict:
    """Tests for schema_from_dict()."""

    def test_builds_tree(self, document):
        schema = schema_from_dict(document)

        assert isinstance(schema, ObjectNode)
        shape = schema.shape
        assert isinstance(shape["run_id"], KeyNode)
        assert shape["run_id"].inner is None
        assert isinstance(shape["status"], EnumNode)
        assert isinstance(shape["owner"], KeyNode)
        assert isinstance(shape["owner"].inner, ObjectNode)

    def test_enum_with_rename(self):
        schema = schema_from_dict(
            {"shape": {"s": {"enum": {"from": [0], "to": ["zero"]}, "to": "state"}}}
        )
        assert schema.map({"s": 0}) == {"state": "zero"}

    def test_nested_shape_in_place(self):
        schema = schema_from_dict({"shape": {"o": {"shape": {"a": {"to": "b"}}}}})
        assert schema.map({"o": {"a": 1}}) == {"o": {"b": 1}}

    def test_invalid_document_raises(self):
        with pytest.raises(SchemaError, match="Invalid schema document"):
            schema_from_dict({"shape": {"a": {"bogus": True}}})

    def test_enum_length_mismatch_names_field(self):
        """Length checks JSON Schema cannot express still fail with a location."""
        document = {
            "shape": {
                "outer": {
                    "shape": {"status": {"enum": {"from": [0, 1], "to": ["A"]}}},
                },
            },
        }
        with pytest.raises(SchemaError, match="outer.status: .*same length"):
            schema_from_dict(document)


class TestLoadSchema:
    """Tests for load_schema()."""

    def test_load_from_file(self, tmp_path, document):
        path = tmp_path / "schema.json"
        path.write_text(json.dumps(document))

        schema = load_schema(path)

        assert schema.map({"run_id": 1}) == {"runId": 1}

    def test_load_accepts_str_path(self, tmp_path, document):
        path = tmp_path / "schema.json"
        path.write_text(json.dumps(document))

        assert isinstance(load_schema(str(path)), ObjectNode)

    def test_invalid_json(self, tmp_path):
        path = tmp_path / "schema.json"
        path.write_text("{not json")

        with pytest.raises(SchemaError, match="not valid JSON"):
            load_schema(path)

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            load_schema(tmp_path / "missing.json")


class TestDocumentVersion:
    """The optional version field must name a supported document version."""

    def test_supported_version(self, document):
        document["version"] = SCHEMA_DOCUMENT_VERSION
        assert validate_document(document) == []

    def test_unsupported_version(self, document):
        document["version"] = "2.0"
        errors = validate_document(document)

        assert len(errors) == 1
        assert errors[0].startswith("version:")

    def test_unsupported_version_raises(self, document):
        document["version"] = "0.9"

        with pytest.raises(SchemaError, match="version"):
            schema_from_dict(document)


class TestBuildField:
    """Field entries that reach the builder without content."""

    def test_entry_without_content_raises(self):
        with pytest.raises(SchemaError, match="a.b: field needs one of"):
            _build_field({"description": "nothing here"}, ("a", "b"))
