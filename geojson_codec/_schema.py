from typing import Any

import msgspec

from .types import GeoJSONObject, Position

__all__ = ("schema",)

POSITION_SCHEMA = {
    "title": "Position",
    "type": "array",
    "items": {"type": "number"},
    "minItems": 2,
    "maxItems": 3,
}


def _schema_hook(cls):
    if cls is Position:
        return dict(POSITION_SCHEMA)
    raise NotImplementedError


def schema(properties: Any = Any) -> dict:
    """Generate a JSON Schema for GeoJSON objects.

    Parameters
    ----------
    properties : type, optional
        The type of feature properties, as passed to `geojson_codec.decode`.
        Defaults to ``Any``, which places no constraint on properties.

    Returns
    -------
    schema : dict
        The generated JSON Schema. Definitions for the geometry and feature
        types are found under ``$defs``.

    Notes
    -----
    The root ``bbox`` member isn't part of the generated schema.
    """
    return msgspec.json.schema(GeoJSONObject[properties], schema_hook=_schema_hook)
