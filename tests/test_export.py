"""Tests for response flattening and file export."""

import json

import pytest

from httpinspector.errors import ExportError
from httpinspector.export.formatter import (
    ExportFormat,
    export_response,
    flatten_record,
    to_csv,
    to_json,
)


class TestFlattenRecord:
    """Flattening nested objects into dotted keys"""

    def test_flat_object_is_unchanged(self):
        assert flatten_record({"a": 1, "b": 2}) == {"a": 1, "b": 2}

    def test_nested_objects_join_keys_with_dots(self):
        assert flatten_record({"a": {"b": {"c": 1}}}) == {"a.b.c": 1}

    def test_arrays_become_json_strings(self):
        assert flatten_record({"a": [1, 2]}) == {"a": "[1,2]"}

    def test_arrays_of_objects_are_not_expanded(self):
        flat = flatten_record({"tags": [{"id": 1}, {"id": 2}]})
        assert flat == {"tags": '[{"id":1},{"id":2}]'}

    def test_visit_order_is_preserved(self):
        flat = flatten_record({"z": 1, "m": {"y": 2, "b": 3}, "a": 4})
        assert list(flat) == ["z", "m.y", "m.b", "a"]

    def test_empty_nested_object_contributes_no_keys(self):
        assert flatten_record({"a": {}, "b": 1}) == {"b": 1}

    def test_null_values_are_kept(self):
        assert flatten_record({"a": None}) == {"a": None}


class TestToCSV:
    """CSV rendering of a list of objects"""

    def test_simple_rows(self):
        assert to_csv([{"a": 1, "b": 2}, {"a": 3, "b": 4}]) == "a,b\n1,2\n3,4"

    def test_header_follows_first_record(self):
        body = [{"b": 1, "a": 2}, {"a": 3, "b": 4}]
        assert to_csv(body) == "b,a\n1,2\n4,3"

    def test_missing_keys_render_empty(self):
        body = [{"a": 1, "b": 2}, {"a": 3}]
        assert to_csv(body) == "a,b\n1,2\n3,"

    def test_nested_and_array_fields(self):
        body = [{"id": 1, "user": {"name": "ann"}, "tags": ["x", "y"]}]
        assert to_csv(body) == 'id,user.name,tags\n1,ann,["x","y"]'

    def test_scalars_render_like_json(self):
        body = [{"flag": True, "other": False, "missing": None}]
        assert to_csv(body) == "flag,other,missing\ntrue,false,"

    def test_values_are_not_quoted(self):
        body = [{"text": "a,b"}]
        assert to_csv(body) == "text\na,b"

    def test_non_array_body_is_rejected(self):
        with pytest.raises(ExportError) as exc_info:
            to_csv({"x": 1})
        assert "array of objects" in str(exc_info.value)

    def test_empty_array_is_rejected(self):
        with pytest.raises(ExportError):
            to_csv([])

    def test_non_object_elements_are_rejected(self):
        with pytest.raises(ExportError):
            to_csv([1, 2, 3])


class TestExportFormat:
    """Format selector resolution"""

    def test_default_is_json(self):
        assert ExportFormat.parse(None) is ExportFormat.JSON

    def test_case_insensitive(self):
        assert ExportFormat.parse("CSV") is ExportFormat.CSV

    def test_unsupported_format(self):
        with pytest.raises(ExportError) as exc_info:
            ExportFormat.parse("xml")
        assert "xml" in str(exc_info.value)


class TestExportResponse:
    """Writing export files"""

    def test_json_export_reads_back(self, tmp_path):
        target = tmp_path / "out.json"
        written = export_response({"x": 1}, target, "json")

        assert written == target.resolve()
        assert json.loads(target.read_text(encoding="utf-8")) == {"x": 1}

    def test_json_export_uses_two_space_indent(self, tmp_path):
        target = tmp_path / "out.json"
        export_response({"x": 1}, target)
        assert target.read_text(encoding="utf-8") == to_json({"x": 1}) == '{\n  "x": 1\n}'

    def test_csv_export(self, tmp_path):
        target = tmp_path / "out.csv"
        export_response([{"a": 1, "b": 2}, {"a": 3, "b": 4}], target, "csv")
        assert target.read_text(encoding="utf-8") == "a,b\n1,2\n3,4"

    def test_existing_file_is_overwritten(self, tmp_path):
        target = tmp_path / "out.json"
        target.write_text("old contents", encoding="utf-8")
        export_response([1, 2], target, "json")
        assert json.loads(target.read_text(encoding="utf-8")) == [1, 2]

    def test_csv_of_object_writes_nothing(self, tmp_path):
        target = tmp_path / "out.csv"
        with pytest.raises(ExportError):
            export_response({"x": 1}, target, "csv")
        assert not target.exists()

    def test_unsupported_format_writes_nothing(self, tmp_path):
        target = tmp_path / "out.xml"
        with pytest.raises(ExportError):
            export_response([{"a": 1}], target, "xml")
        assert not target.exists()

    def test_unwritable_path(self, tmp_path):
        target = tmp_path / "missing-dir" / "out.json"
        with pytest.raises(ExportError) as exc_info:
            export_response({"x": 1}, target)
        assert "Could not write" in str(exc_info.value)
