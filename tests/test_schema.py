from typing import Any

import msgspec

import geojson_codec
from geojson_codec._schema import POSITION_SCHEMA

GEOMETRY_NAMES = [
    "Point",
    "MultiPoint",
    "LineString",
    "MultiLineString",
    "Polygon",
    "MultiPolygon",
    "GeometryCollection",
]


def test_schema_defs():
    schema = geojson_codec.schema()
    defs = schema["$defs"]
    for name in GEOMETRY_NAMES:
        assert name in defs
        assert defs[name]["properties"]["type"] == {"enum": [name]}
    assert any(name.startswith("Feature") for name in defs if name != "FeatureCollection")
    assert any(name.startswith("FeatureCollection") for name in defs)
    assert len(schema["anyOf"]) == 9
    assert schema["discriminator"]["propertyName"] == "type"


def test_schema_positions():
    defs = geojson_codec.schema()["$defs"]
    assert defs["Point"]["properties"]["coordinates"] == POSITION_SCHEMA
    assert defs["LineString"]["properties"]["coordinates"] == {
        "type": "array",
        "items": POSITION_SCHEMA,
    }
    assert defs["Point"]["required"] == ["type", "coordinates"]


def test_schema_recursive_collection():
    defs = geojson_codec.schema()["$defs"]
    items = defs["GeometryCollection"]["properties"]["geometries"]["items"]
    refs = {ref["$ref"] for ref in items["anyOf"]}
    assert "#/$defs/GeometryCollection" in refs
    assert len(refs) == 7


def test_schema_properties_type():
    class Props(msgspec.Struct):
        name: str

    schema = geojson_codec.schema(Props)
    assert "Props" in schema["$defs"]
    assert schema["$defs"]["Props"]["properties"] == {"name": {"type": "string"}}


def test_schema_default_is_any():
    assert geojson_codec.schema() == geojson_codec.schema(Any)
