from __future__ import annotations

from typing import Generic, Iterator, List, Optional, TypeVar, Union

import msgspec

__all__ = (
    "Position",
    "Point",
    "MultiPoint",
    "LineString",
    "MultiLineString",
    "Polygon",
    "MultiPolygon",
    "GeometryCollection",
    "Geometry",
    "Feature",
    "FeatureCollection",
    "GeoJSONObject",
    "Bbox",
    "GeoJSON",
)


def __dir__():
    return __all__


P = TypeVar("P")


class Position:
    """A single coordinate tuple.

    Parameters
    ----------
    x : float
        The longitude (or easting).
    y : float
        The latitude (or northing).
    z : float, optional
        The altitude. Defaults to 0.

    Notes
    -----
    ``Position`` isn't a msgspec-native type. Decoding and encoding go through
    the hooks installed by `geojson_codec.Decoder` and `geojson_codec.Encoder`,
    which read arrays of 2 or 3 numbers and write ``[x, y]`` whenever the
    altitude is 0.
    """

    __slots__ = ("x", "y", "z")

    x: float
    y: float
    z: float

    def __init__(self, x: float, y: float, z: float = 0.0) -> None:
        object.__setattr__(self, "x", float(x))
        object.__setattr__(self, "y", float(y))
        object.__setattr__(self, "z", float(z))

    def __setattr__(self, name, value):
        raise AttributeError(f"{type(self).__name__!r} object is immutable")

    def __delattr__(self, name):
        raise AttributeError(f"{type(self).__name__!r} object is immutable")

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y
        yield self.z

    def __eq__(self, other):
        if type(other) is not Position:
            return NotImplemented
        return (self.x, self.y, self.z) == (other.x, other.y, other.z)

    def __hash__(self):
        return hash((self.x, self.y, self.z))

    def __repr__(self):
        return f"Position({self.x!r}, {self.y!r}, {self.z!r})"

    def __reduce__(self):
        return (Position, (self.x, self.y, self.z))


# The 7 geometry types. `tag=True` means each is identified by a `type` field
# holding the class name, which is exactly the GeoJSON discriminator.
class Point(msgspec.Struct, tag=True):
    coordinates: Position


class MultiPoint(msgspec.Struct, tag=True):
    coordinates: List[Position]


class LineString(msgspec.Struct, tag=True):
    coordinates: List[Position]


class MultiLineString(msgspec.Struct, tag=True):
    coordinates: List[List[Position]]


class Polygon(msgspec.Struct, tag=True):
    """A polygon. The first ring is the exterior, any others are holes.

    Rings aren't checked for closure or minimum length.
    """

    coordinates: List[List[Position]]


class MultiPolygon(msgspec.Struct, tag=True):
    coordinates: List[List[List[Position]]]


class GeometryCollection(msgspec.Struct, tag=True):
    geometries: List[Geometry]


Geometry = Union[
    Point,
    MultiPoint,
    LineString,
    MultiLineString,
    Polygon,
    MultiPolygon,
    GeometryCollection,
]


class Feature(msgspec.Struct, Generic[P], tag=True, omit_defaults=True):
    """A geometry paired with properties and an optional identifier.

    Parameters
    ----------
    geometry : Geometry or None
        The feature geometry. The field is always present on the wire, but
        may be ``null``.
    properties : Any
        The feature properties. Their type is the generic parameter, ``Any``
        by default.
    id : str, optional
        The feature identifier. Integer identifiers are normalized to their
        decimal string form, so a decoded ``id`` is always a ``str`` or
        ``None``.
    """

    geometry: Optional[Geometry]
    properties: P
    id: Union[str, int, None] = None

    def __post_init__(self):
        if isinstance(self.id, int) and not isinstance(self.id, bool):
            self.id = str(self.id)


class FeatureCollection(msgspec.Struct, Generic[P], tag=True):
    features: List[Feature[P]]


GeoJSONObject = Union[
    Point,
    MultiPoint,
    LineString,
    MultiLineString,
    Polygon,
    MultiPolygon,
    GeometryCollection,
    Feature[P],
    FeatureCollection[P],
]

Bbox = List[float]


class GeoJSON(msgspec.Struct, Generic[P]):
    """The root of a decoded GeoJSON document.

    Parameters
    ----------
    object : GeoJSONObject
        The top-level geometry, feature, or feature collection.
    bbox : list of float, optional
        The bounding box found on the top-level object, if any.
    """

    object: GeoJSONObject[P]
    bbox: Optional[Bbox] = None
