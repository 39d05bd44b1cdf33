from .types import (
    Bbox,
    Feature,
    FeatureCollection,
    GeoJSON,
    GeoJSONObject,
    Geometry,
    GeometryCollection,
    LineString,
    MultiLineString,
    MultiPoint,
    MultiPolygon,
    Point,
    Polygon,
    Position,
)
from ._core import DecodeError, Decoder, Encoder, decode, encode
from ._schema import schema
from . import json
from . import yaml
from ._version import __version__
