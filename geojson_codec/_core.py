import logging
from typing import Any, Callable, Generic, List, Optional, Type, TypeVar, Union

import msgspec

from .types import GeoJSON, GeoJSONObject, Position

__all__ = ("DecodeError", "Decoder", "Encoder", "decode", "encode")


def __dir__():
    return __all__


logger = logging.getLogger(__name__)

P = TypeVar("P")

# Names used in error messages, matching the ones msgspec reports.
_JSON_TYPE_NAMES = {
    type(None): "null",
    bool: "bool",
    int: "int",
    float: "float",
    str: "str",
    list: "array",
    tuple: "array",
    dict: "object",
}


def _json_type_name(obj):
    return _JSON_TYPE_NAMES.get(type(obj), type(obj).__name__)


class DecodeError(msgspec.ValidationError):
    """The input isn't a valid GeoJSON document.

    The message describes the first violation found, followed by its location
    in the document (e.g. ``- at `$.features[0].geometry```).
    """


class _RootBbox(msgspec.Struct):
    bbox: Optional[List[float]] = None


def _decode_position(obj: Any) -> Position:
    if isinstance(obj, Position):
        return obj
    if not isinstance(obj, (list, tuple)):
        raise TypeError(f"Expected `array`, got `{_json_type_name(obj)}`")
    n = len(obj)
    if n < 2:
        raise ValueError(f"Too few numbers in position, expected 2 or 3, got {n}")
    if n > 3:
        raise ValueError(f"Too many numbers in position, expected 2 or 3, got {n}")
    for val in obj:
        if isinstance(val, bool) or not isinstance(val, (int, float)):
            raise TypeError(f"Expected `float`, got `{_json_type_name(val)}`")
    try:
        return Position(*obj)
    except OverflowError:
        raise ValueError("Number out of range for a position coordinate") from None


def _normalize_ids(out: dict) -> None:
    # `Feature.id` may have been reassigned to an int after construction
    if out["type"] == "FeatureCollection":
        features = out["features"]
    elif out["type"] == "Feature":
        features = [out]
    else:
        return
    for feature in features:
        id = feature.get("id")
        if isinstance(id, int) and not isinstance(id, bool):
            feature["id"] = str(id)


def _encode_position(pos: Position) -> List[float]:
    # An altitude of 0 is indistinguishable from a missing one
    if pos.z == 0:
        return [pos.x, pos.y]
    return [pos.x, pos.y, pos.z]


class Decoder(Generic[P]):
    """A GeoJSON decoder.

    Converts an already parsed JSON value (``dict``, ``list``, ``str``,
    ``int``, ``float``, ``bool``, ``None``) into the typed model in
    `geojson_codec.types`.

    Parameters
    ----------
    properties : type, optional
        A Python type (in type annotation form) to decode feature properties
        as. Any type supported by ``msgspec.convert`` works (``Struct`` types,
        dataclasses, ``TypedDict``, ``dict[str, int]``, ...). Defaults to
        ``Any``, in which case properties are passed through untouched.
    dec_hook : callable, optional
        An optional callback for decoding custom property types. Should have
        the signature ``dec_hook(type: Type, obj: Any) -> Any``, where
        ``type`` is the expected type and ``obj`` the JSON value. It should
        return an instance of ``type``, or raise a ``TypeError`` if
        unsupported.
    """

    def __init__(
        self,
        properties: Type[P] = Any,
        *,
        dec_hook: Optional[Callable[[Type, Any], Any]] = None,
    ):
        if dec_hook is not None and not callable(dec_hook):
            raise TypeError("dec_hook must be callable")
        self.properties = properties
        self.dec_hook = dec_hook
        self._type = GeoJSONObject[properties]

    def __repr__(self):
        return f"{type(self).__name__}(properties={self.properties!r})"

    def _dec_hook(self, typ, obj):
        if typ is Position:
            return _decode_position(obj)
        if self.dec_hook is not None:
            return self.dec_hook(typ, obj)
        raise TypeError(f"Decoding objects of type {typ!r} is unsupported")

    def decode(self, obj: Any) -> GeoJSON[P]:
        """Decode a GeoJSON document.

        Parameters
        ----------
        obj : Any
            The parsed JSON value to decode.

        Returns
        -------
        geojson : GeoJSON
            The top-level object, paired with its bounding box (if any).

        Raises
        ------
        DecodeError
            If ``obj`` isn't a valid GeoJSON document. Decoding stops at the
            first error found.
        """
        try:
            value = msgspec.convert(obj, self._type, dec_hook=self._dec_hook)
            bbox = msgspec.convert(obj, _RootBbox).bbox
        except msgspec.ValidationError as exc:
            logger.debug("Failed to decode GeoJSON document: %s", exc)
            raise DecodeError(str(exc)) from None
        return GeoJSON(value, bbox)


class Encoder:
    """A GeoJSON encoder.

    Converts the typed model back into a JSON value made of builtin types,
    ready to be handed to any JSON serializer.

    Parameters
    ----------
    enc_hook : callable, optional
        A callable to call for property values that aren't supported msgspec
        types. Takes the unsupported object and should return a supported
        object, or raise a ``TypeError``.
    """

    def __init__(self, *, enc_hook: Optional[Callable[[Any], Any]] = None):
        if enc_hook is not None and not callable(enc_hook):
            raise TypeError("enc_hook must be callable")
        self.enc_hook = enc_hook

    def __repr__(self):
        return f"{type(self).__name__}(enc_hook={self.enc_hook!r})"

    def _enc_hook(self, obj):
        if isinstance(obj, Position):
            return _encode_position(obj)
        if self.enc_hook is not None:
            return self.enc_hook(obj)
        raise TypeError(f"Encoding objects of type {type(obj).__name__} is unsupported")

    def encode(self, obj: Union[GeoJSON, GeoJSONObject]) -> dict:
        """Encode a GeoJSON document.

        Parameters
        ----------
        obj : GeoJSON or GeoJSONObject
            The document to encode. A bare geometry, feature, or feature
            collection is encoded without a bounding box.

        Returns
        -------
        data : dict
            The encoded document. Keys are ordered ``type``, the payload
            (``coordinates``, ``geometries``, or ``features``), the feature
            fields, then ``bbox``.
        """
        if isinstance(obj, GeoJSON):
            value, bbox = obj.object, obj.bbox
        else:
            value, bbox = obj, None
        out = msgspec.to_builtins(value, enc_hook=self._enc_hook)
        _normalize_ids(out)
        if bbox is not None:
            out["bbox"] = list(bbox)
        return out


_default_encoder = Encoder()


def decode(
    obj: Any,
    *,
    properties: Type[P] = Any,
    dec_hook: Optional[Callable[[Type, Any], Any]] = None,
) -> GeoJSON[P]:
    """Decode a parsed JSON value as a GeoJSON document.

    Parameters
    ----------
    obj : Any
        The parsed JSON value to decode.
    properties : type, optional
        The type to decode feature properties as. Defaults to ``Any``, in
        which case properties are passed through untouched.
    dec_hook : callable, optional
        An optional callback for decoding custom property types. See
        `Decoder` for details.

    Returns
    -------
    geojson : GeoJSON

    See Also
    --------
    Decoder.decode
    """
    return Decoder(properties, dec_hook=dec_hook).decode(obj)


def encode(
    obj: Union[GeoJSON, GeoJSONObject],
    *,
    enc_hook: Optional[Callable[[Any], Any]] = None,
) -> dict:
    """Encode a GeoJSON document as a JSON value made of builtin types.

    Parameters
    ----------
    obj : GeoJSON or GeoJSONObject
        The document to encode.
    enc_hook : callable, optional
        A callable to call for property values that aren't supported msgspec
        types. See `Encoder` for details.

    Returns
    -------
    data : dict

    See Also
    --------
    Encoder.encode
    """
    if enc_hook is None:
        return _default_encoder.encode(obj)
    return Encoder(enc_hook=enc_hook).encode(obj)
