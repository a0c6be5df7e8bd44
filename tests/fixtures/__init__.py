"""Shared DMS examples for tests."""

from geodms import (
    DmsHemisphereException,
    DmsMalformedNumberException,
    DmsRangeException,
    DmsUnitOrderException,
)

# Each group holds equivalent spellings of one angle
LEGAL_EXAMPLES = {
    -20.51125: ["-20.51125", "20d30'40.5\"S", "-20°30'40.5", "-20d30.675", "-20:30:40.5"],
    4.0025: ["4d0'9", "4d9\"", "4d9''", "4:0:9", "004:00:09", "4.0025", "4.0025d", "4d0.15", "04:.15"],
}

ILLEGAL_EXAMPLES = {
    "4d5\"4'": DmsUnitOrderException,
    "4::5": DmsMalformedNumberException,
    "4:5:": DmsMalformedNumberException,
    ":4:5": DmsMalformedNumberException,
    "4d4.5'4\"": DmsUnitOrderException,
    "-N20.5": DmsHemisphereException,
    "1.8e2d": DmsMalformedNumberException,
    "4:60": DmsRangeException,
    "4d-5'": DmsMalformedNumberException,
}

__all__ = ["ILLEGAL_EXAMPLES", "LEGAL_EXAMPLES"]
