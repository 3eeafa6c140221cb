"""Unit tests for document and schema loading."""

import pytest

from shapecheck import SchemaReferenceError, Type
from shapecheck.loader import load_records, resolve_schema


class TestLoadRecords:
    """Test JSON and JSON Lines loading."""

    def test_single_document(self, write_json):
        path = write_json("doc.json", {"source": "u"})
        assert load_records(path) == [{"source": "u"}]

    def test_json_lines_skips_blank_lines(self, tmp_path):
        path = tmp_path / "records.jsonl"
        path.write_text('{"a": 1}\n\n[1, 2]\n  \n"x"\n', encoding="utf-8")
        assert load_records(path, lines=True) == [{"a": 1}, [1, 2], "x"]

    def test_invalid_json(self, tmp_path):
        path = tmp_path / "doc.json"
        path.write_text("{nope", encoding="utf-8")
        with pytest.raises(ValueError, match="Invalid JSON"):
            load_records(path)

    def test_invalid_json_line_reports_line_number(self, tmp_path):
        path = tmp_path / "records.jsonl"
        path.write_text('{"a": 1}\n{nope\n', encoding="utf-8")
        with pytest.raises(ValueError, match="line 2"):
            load_records(path, lines=True)

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            load_records(tmp_path / "absent.json")


class TestResolveSchema:
    """Test 'module:ATTRIBUTE' schema references."""

    def test_importable_module(self):
        assert resolve_schema("shapecheck.types:Type.STRING") is Type.STRING

    def test_file_reference(self, schema_module):
        schema = resolve_schema(f"{schema_module}:IMAGE")
        assert schema["source"] is Type.STRING

    def test_nested_attribute(self, schema_module):
        schema = resolve_schema(f"{schema_module}:Catalog.ENTRY")
        assert schema == {"name": Type.STRING}

    @pytest.mark.parametrize("reference", ["no_colon", ":IMAGE", "module:"])
    def test_malformed_reference(self, reference):
        with pytest.raises(SchemaReferenceError, match="expected the form"):
            resolve_schema(reference)

    def test_unknown_module(self):
        with pytest.raises(SchemaReferenceError):
            resolve_schema("shapecheck_no_such_module:SCHEMA")

    def test_unknown_attribute(self, schema_module):
        with pytest.raises(SchemaReferenceError, match="no attribute 'MISSING_NAME'"):
            resolve_schema(f"{schema_module}:MISSING_NAME")

    def test_missing_file(self, tmp_path):
        with pytest.raises(SchemaReferenceError, match="file not found"):
            resolve_schema(f"{tmp_path / 'absent.py'}:SCHEMA")

    def test_not_a_schema(self, schema_module):
        with pytest.raises(SchemaReferenceError, match="not a schema"):
            resolve_schema(f"{schema_module}:NOT_A_SCHEMA")

    def test_reference_error_is_lookup_error(self):
        with pytest.raises(LookupError):
            resolve_schema("shapecheck_no_such_module:SCHEMA")

    @pytest.mark.parametrize("source, error", [
        ("SCHEMA = undefined_name\n", "NameError"),
        ("SCHEMA = {\n", "SyntaxError"),
    ])
    def test_failing_schema_file(self, tmp_path, source, error):
        module_file = tmp_path / "failing_schemas.py"
        module_file.write_text(source, encoding="utf-8")

        with pytest.raises(SchemaReferenceError, match=error):
            resolve_schema(f"{module_file}:SCHEMA")

    def test_failing_importable_module(self, tmp_path, monkeypatch):
        (tmp_path / "shapecheck_failing_module.py").write_text(
            "raise RuntimeError('boom')\n", encoding="utf-8"
        )
        monkeypatch.syspath_prepend(str(tmp_path))

        with pytest.raises(SchemaReferenceError, match="RuntimeError: boom"):
            resolve_schema("shapecheck_failing_module:SCHEMA")
