from typing import Any, Callable, Optional, Type, TypeVar, Union

from msgspec import DecodeError as _MsgspecDecodeError

from ._core import Decoder as _Decoder, Encoder as _Encoder
from .types import GeoJSON, GeoJSONObject

__all__ = ("encode", "decode")


def __dir__():
    return __all__


P = TypeVar("P")


def _import_pyyaml(name):
    try:
        import yaml
    except ImportError:
        raise ImportError(
            f"`geojson_codec.yaml.{name}` requires PyYAML be installed.\n\n"
            "Please either `pip` or `conda` install it as follows:\n\n"
            "  $ python -m pip install pyyaml  # using pip\n"
            "  $ conda install pyyaml          # or using conda"
        ) from None
    else:
        return yaml


def encode(
    obj: Union[GeoJSON, GeoJSONObject],
    *,
    enc_hook: Optional[Callable[[Any], Any]] = None,
) -> bytes:
    """Serialize a GeoJSON document as YAML.

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

    Notes
    -----
    This function requires that the third-party `PyYAML library
    <https://pyyaml.org/>`_ is installed.

    See Also
    --------
    decode
    """
    yaml = _import_pyyaml("encode")
    # Use the C extension if available
    Dumper = getattr(yaml, "CSafeDumper", yaml.SafeDumper)

    return yaml.dump_all(
        [_Encoder(enc_hook=enc_hook).encode(obj)],
        encoding="utf-8",
        Dumper=Dumper,
        allow_unicode=True,
        sort_keys=False,
    )


def decode(
    buf: Union[bytes, str],
    *,
    properties: Type[P] = Any,
    dec_hook: Optional[Callable[[Type, Any], Any]] = None,
) -> GeoJSON[P]:
    """Deserialize a GeoJSON document from YAML.

    Parameters
    ----------
    buf : bytes or str
        The message to decode.
    properties : type, optional
        A Python type (in type annotation form) to decode feature properties
        as. Defaults to `Any`, in which case properties are left as loaded
        by PyYAML.
    dec_hook : callable, optional
        An optional callback for decoding custom property types. Should have
        the signature ``dec_hook(type: Type, obj: Any) -> Any``.

    Returns
    -------
    obj : GeoJSON
        The deserialized document.

    Notes
    -----
    This function requires that the third-party `PyYAML library
    <https://pyyaml.org/>`_ is installed.

    See Also
    --------
    encode
    """
    yaml = _import_pyyaml("decode")
    # Use the C extension if available
    Loader = getattr(yaml, "CSafeLoader", yaml.SafeLoader)
    try:
        obj = yaml.load(buf, Loader)
    except yaml.YAMLError as exc:
        raise _MsgspecDecodeError(str(exc)) from None

    return _Decoder(properties, dec_hook=dec_hook).decode(obj)
