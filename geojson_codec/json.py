from typing import Any, Callable, Optional, Type, TypeVar, Union

import msgspec as _msgspec

from ._core import Decoder as _Decoder, Encoder as _Encoder
from .types import GeoJSON, GeoJSONObject

__all__ = ("encode", "decode")


def __dir__():
    return __all__


P = TypeVar("P")


def encode(
    obj: Union[GeoJSON, GeoJSONObject],
    *,
    enc_hook: Optional[Callable[[Any], Any]] = None,
) -> bytes:
    """Serialize a GeoJSON document as JSON.

    Parameters
    ----------
    obj : GeoJSON or GeoJSONObject
        The document to serialize.
    enc_hook : callable, optional
        A callable to call for property values that aren't supported msgspec
        types. Takes the unsupported object and should return a supported
        object, or raise a TypeError.

    Returns
    -------
    data : bytes
        The serialized document.

    See Also
    --------
    decode
    """
    return _msgspec.json.encode(_Encoder(enc_hook=enc_hook).encode(obj))


def decode(
    buf: Union[bytes, str],
    *,
    properties: Type[P] = Any,
    dec_hook: Optional[Callable[[Type, Any], Any]] = None,
) -> GeoJSON[P]:
    """Deserialize a GeoJSON document from JSON.

    Parameters
    ----------
    buf : bytes-like or str
        The message to decode.
    properties : type, optional
        A Python type (in type annotation form) to decode feature properties
        as. Defaults to `Any`, in which case properties are left as decoded
        by the JSON parser.
    dec_hook : callable, optional
        An optional callback for decoding custom property types. Should have
        the signature ``dec_hook(type: Type, obj: Any) -> Any``.

    Returns
    -------
    obj : GeoJSON
        The deserialized document.

    Raises
    ------
    msgspec.DecodeError
        If ``buf`` isn't valid JSON.
    geojson_codec.DecodeError
        If ``buf`` is valid JSON, but not a valid GeoJSON document.

    See Also
    --------
    encode
    """
    obj = _msgspec.json.decode(buf)
    return _Decoder(properties, dec_hook=dec_hook).decode(obj)
