from importlib.metadata import PackageNotFoundError, version

from .decoders import decode, decode_angle, decode_azimuth, decode_dms, decode_lat_lon
from .encoders import encode, encode_precision, split2, split3
from .exceptions import (
    DmsException,
    DmsFormatException,
    DmsHemisphereException,
    DmsMalformedNumberException,
    DmsPairAmbiguityException,
    DmsRangeException,
    DmsTrailingTextException,
    DmsUnitOrderException,
)
from .types import Component, Kind

try:
    __version__ = version("geodms")
except PackageNotFoundError:
    __version__ = "0+unknown"

__all__ = [
    "Component",
    "DmsException",
    "DmsFormatException",
    "DmsHemisphereException",
    "DmsMalformedNumberException",
    "DmsPairAmbiguityException",
    "DmsRangeException",
    "DmsTrailingTextException",
    "DmsUnitOrderException",
    "Kind",
    "__version__",
    "decode",
    "decode_angle",
    "decode_azimuth",
    "decode_dms",
    "decode_lat_lon",
    "encode",
    "encode_precision",
    "split2",
    "split3",
]
