import math

from .symbols import DEGREE_INDICATOR, HEMISPHERE_LETTERS, MINUTE_INDICATOR, SECOND_INDICATOR
from .types import Component, Kind
from .utils import ang_reduce

__all__ = [
    "encode",
    "encode_precision",
    "split2",
    "split3",
]

# Width of the degree field, padded with zeros
DEGREE_WIDTHS = {
    Kind.NONE: 0,
    Kind.LATITUDE: 2,
    Kind.LONGITUDE: 3,
    Kind.AZIMUTH: 3,
}


def encode(
    angle: float,
    trailing: Component,
    precision: int,
    kind: Kind = Kind.NONE,
    separator: str | None = None,
) -> str:
    """
    Format an angle in degrees as DMS text.

    The formatting depends on kind:
    - Kind.NONE: signed, no leading zeros on degrees, e.g. -8d03'
    - Kind.LATITUDE: trailing N or S, no sign, degrees padded to 2 digits, e.g. 08d03'S
    - Kind.LONGITUDE: trailing E or W, no sign, degrees padded to 3 digits, e.g. 008d03'W
    - Kind.AZIMUTH: reduced to [0, 360), no sign, degrees padded to 3 digits, e.g. 351d57'
    - Kind.NUMBER: a plain number with precision decimals

    Minutes and seconds always have 2 integer digits.

    :param angle: angle in degrees
    :param trailing: smallest unit written, the only one with decimals
    :param precision: number of decimals on the trailing unit
    :param kind: formatting policy
    :param separator: written instead of the d, ' and " marks, e.g. ":"
    :return: DMS text
    """
    trailing = Component(trailing)
    kind = Kind(kind)
    if not math.isfinite(angle):
        return _non_finite(angle)
    if kind == Kind.NUMBER:
        return _number(angle, precision)
    # 15 - 2 * trailing decimals give full double precision for angles in [-90, 90]
    precision = max(0, min(15 - 2 * trailing, precision))
    if kind == Kind.AZIMUTH:
        angle = ang_reduce(angle)
    negative = angle < 0
    degrees, units = _round_units(abs(angle), trailing, precision)
    if kind == Kind.AZIMUTH:
        # Rounding up may reach 360
        degrees %= 360
    width = DEGREE_WIDTHS[kind]
    unit = 10**precision
    if trailing == Component.DEGREE:
        text = _fixed(degrees * unit + units, precision, width)
    else:
        text = f"{degrees}".zfill(width) + (separator or DEGREE_INDICATOR)
        if trailing == Component.MINUTE:
            text += _fixed(units, precision, 2)
            if not separator:
                text += MINUTE_INDICATOR
        else:
            minutes, seconds = divmod(units, 60 * unit)
            text += f"{minutes:02d}" + (separator or MINUTE_INDICATOR) + _fixed(seconds, precision, 2)
            if not separator:
                text += SECOND_INDICATOR
    if kind == Kind.NONE and negative:
        text = "-" + text
    elif kind in (Kind.LATITUDE, Kind.LONGITUDE):
        text += HEMISPHERE_LETTERS[(kind, negative)]
    return text


def encode_precision(angle: float, precision: int, kind: Kind = Kind.NONE, separator: str | None = None) -> str:
    """
    Format an angle as DMS text, choosing the trailing unit from a precision relative to 1 degree.

    A precision of 3 is accurate to 0.1' and 4 to 1". For Kind.NUMBER the angle is
    written as a plain number with precision decimals.
    """
    if kind == Kind.NUMBER:
        return _number(angle, precision)
    if precision < 2:
        return encode(angle, Component.DEGREE, precision, kind, separator)
    if precision < 4:
        return encode(angle, Component.MINUTE, precision - 2, kind, separator)
    return encode(angle, Component.SECOND, precision - 4, kind, separator)


def split2(angle: float) -> tuple[float, float]:
    """Split an angle into whole degrees and minutes. The sign is not separated."""
    degrees = math.modf(angle)[1]
    return degrees, 60 * (angle - degrees)


def split3(angle: float) -> tuple[float, float, float]:
    """Split an angle into whole degrees, whole minutes and seconds. The sign is not separated."""
    degrees, minutes = split2(angle)
    whole_minutes = math.modf(minutes)[1]
    return degrees, whole_minutes, 60 * (minutes - whole_minutes)


def _round_units(angle: float, trailing: Component, precision: int) -> tuple[int, int]:
    """
    Round a non-negative angle to the resolution of the trailing unit.

    :return: (whole degrees, remainder as a count of 10**-precision trailing units)
    """
    scale = 60**trailing * 10**precision
    degrees = math.floor(angle)
    # Only the fraction is rounded; the integer degrees stay exact
    units = math.floor((angle - degrees) * scale + 0.5)
    if units >= scale:
        degrees += 1
        units -= scale
    return degrees, units


def _fixed(count: int, precision: int, width: int) -> str:
    """Write count * 10**-precision with the integer part zero padded to width."""
    digits = f"{count}".zfill(precision + 1)
    if not precision:
        return digits.zfill(width)
    return digits[:-precision].zfill(width) + "." + digits[-precision:]


def _number(angle: float, precision: int) -> str:
    if not math.isfinite(angle):
        return _non_finite(angle)
    return f"{angle:.{max(0, precision)}f}"


def _non_finite(angle: float) -> str:
    if math.isnan(angle):
        return "nan"
    return "-inf" if angle < 0 else "inf"
