import json
import os
import tempfile

import pytest

from pod_codegen.loader import load_record, record_from_dict
from pod_codegen.models import DefaultValue, Docstring, MemberVariable, ModelError


def _write_temp_json(content: str) -> str:
    fd, path = tempfile.mkstemp(suffix=".json")
    os.write(fd, content.encode())
    os.close(fd)
    return path


class TestRecordFromDict:
    def test_minimal(self):
        record = record_from_dict({"name": "Empty"})
        assert record.name == "Empty"
        assert record.members == ()
        assert record.docs == Docstring.absent()

    def test_members_in_order(self):
        record = record_from_dict({
            "name": "OrderInfo",
            "docs": "An order.",
            "members": [
                {"dtype": "uint32_t", "name": "orderId", "default": "0"},
                {"dtype": "bool", "name": "isActive", "docs": "Open order."},
            ],
        })
        assert record.docs == Docstring.one_line("An order.")
        assert record.members == (
            MemberVariable("uint32_t", "orderId", default=DefaultValue.present("0")),
            MemberVariable("bool", "isActive", docs=Docstring.one_line("Open order.")),
        )

    def test_scalar_defaults(self):
        record = record_from_dict({
            "name": "S",
            "members": [
                {"dtype": "int", "name": "a", "default": 7},
                {"dtype": "double", "name": "b", "default": 2.5},
                {"dtype": "bool", "name": "c", "default": True},
                {"dtype": "bool", "name": "d", "default": False},
            ],
        })
        assert [m.default.expression for m in record.members] == ["7", "2.5", "true", "false"]

    def test_missing_name(self):
        with pytest.raises(ModelError, match="'name'"):
            record_from_dict({"members": []})

    def test_missing_member_dtype(self):
        with pytest.raises(ModelError, match="member #1 of struct 'S'"):
            record_from_dict({
                "name": "S",
                "members": [{"dtype": "int", "name": "a"}, {"name": "b"}],
            })

    def test_members_must_be_list(self):
        with pytest.raises(ModelError):
            record_from_dict({"name": "S", "members": {"a": "int"}})

    def test_not_an_object(self):
        with pytest.raises(ModelError):
            record_from_dict(["S"])

    def test_bad_default_type(self):
        with pytest.raises(ModelError, match="'default'"):
            record_from_dict({"name": "S", "members": [{"dtype": "int", "name": "a", "default": [1]}]})

    def test_multiline_docs_rejected(self):
        with pytest.raises(ModelError):
            record_from_dict({"name": "S", "docs": "one\ntwo"})


class TestLoadRecord:
    def test_load_and_render(self):
        path = _write_temp_json(json.dumps({
            "name": "TestStruct",
            "members": [
                {"dtype": "uint32_t", "name": "var", "docs": "This is a test var.", "default": "0"},
            ],
        }))
        try:
            record = load_record(path)
            assert record.render() == (
                "struct TestStruct {\n    /// This is a test var.\n    uint32_t var = 0;\n};\n\n"
            )
        finally:
            os.unlink(path)

    def test_invalid_json(self):
        path = _write_temp_json("{not json")
        try:
            with pytest.raises(ModelError, match="Invalid JSON"):
                load_record(path)
        finally:
            os.unlink(path)

    def test_undecodable_file(self):
        fd, path = tempfile.mkstemp(suffix=".json")
        os.write(fd, b'{"name": "S\xff"}')
        os.close(fd)
        try:
            with pytest.raises(ModelError, match="Cannot read"):
                load_record(path)
        finally:
            os.unlink(path)

    def test_non_finite_default_rejected(self):
        path = _write_temp_json(
            '{"name": "S", "members": [{"dtype": "double", "name": "x", "default": NaN}]}'
        )
        try:
            with pytest.raises(ModelError, match="finite"):
                load_record(path)
        finally:
            os.unlink(path)

    def test_infinite_default_rejected(self):
        with pytest.raises(ModelError, match="finite"):
            record_from_dict({
                "name": "S",
                "members": [{"dtype": "double", "name": "x", "default": float("inf")}],
            })
