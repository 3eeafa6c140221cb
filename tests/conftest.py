"""Shared fixtures for shapecheck tests."""

import json

import pytest

from shapecheck import Type, optional, union_or


@pytest.fixture
def image_schema():
    """Image declaration with one required and two optional fields."""
    return {
        "source": Type.STRING,
        "width": optional(Type.INTEGER),
        "height": optional(Type.INTEGER),
    }


@pytest.fixture
def nested_union_schema():
    """Declaration whose field2 must match one of two object shapes."""
    return {
        "field1": Type.STRING,
        "field2": union_or(
            {"field3": Type.INTEGER, "field4": Type.STRING},
            {"field3": Type.STRING, "field4": Type.INTEGER},
        ),
    }


@pytest.fixture
def schema_module(tmp_path):
    """Python file declaring schemas, for 'file.py:NAME' references."""
    module_file = tmp_path / "image_schemas.py"
    module_file.write_text(
        "from shapecheck import Type, array, optional, tuple_of\n"
        "\n"
        "IMAGE = {\n"
        "    'source': Type.STRING,\n"
        "    'width': optional(Type.INTEGER),\n"
        "    'height': optional(Type.INTEGER),\n"
        "}\n"
        "\n"
        "POINTS = array(tuple_of([Type.INTEGER, Type.INTEGER]))\n"
        "\n"
        "class Catalog:\n"
        "    ENTRY = {'name': Type.STRING}\n"
        "\n"
        "NOT_A_SCHEMA = 42\n",
        encoding="utf-8",
    )
    return module_file


@pytest.fixture
def write_json(tmp_path):
    """Write a value as JSON into tmp_path and return the file path."""
    def _write(name, value):
        path = tmp_path / name
        path.write_text(json.dumps(value), encoding="utf-8")
        return path
    return _write
