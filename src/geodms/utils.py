import math

from .symbols import DOUBLE_MINUTE, GLYPH_TRANSLATION, MOJIBAKE_GLYPHS, SECOND_INDICATOR

__all__ = [
    "ang_normalize",
    "ang_reduce",
    "normalize_dms_text",
    "to_text",
]


def to_text(value: str | bytes) -> str:
    """
    Return DMS input as text.

    Bytes are read as UTF-8, falling back to Latin-1 so that the single byte forms of the
    degree sign (0xB0), masculine ordinal (0xBA) and acute accent (0xB4) are understood.

    :param value: str or bytes
    :return: str
    """
    if isinstance(value, bytes):
        try:
            return value.decode("utf-8")
        except UnicodeDecodeError:
            return value.decode("latin-1")
    return f"{value}"


def normalize_dms_text(value: str) -> str:
    """Replace alternative DMS glyphs, digits and signs by their ASCII equivalents."""
    result = value
    for glyph, replacement in MOJIBAKE_GLYPHS.items():
        result = result.replace(glyph, replacement)
    result = result.translate(GLYPH_TRANSLATION)
    # Two minute marks stand in for a seconds mark
    return result.replace(DOUBLE_MINUTE, SECOND_INDICATOR)


def ang_normalize(angle: float) -> float:
    """Reduce an angle in degrees to the range [-180, 180)."""
    result = math.fmod(angle, 360.0)
    if result >= 180:
        result -= 360
    elif result < -180:
        result += 360
    return result


def ang_reduce(angle: float) -> float:
    """Reduce an angle in degrees to the range [0, 360)."""
    result = math.fmod(angle, 360.0)
    if result < 0:
        result += 360
        # A tiny negative angle rounds up to 360
        if result >= 360:
            result = 0.0
    return result
