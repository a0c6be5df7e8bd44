"""Constant lookup tables used to read and write DMS text."""

from types import MappingProxyType

from .types import Component, Kind

DEGREE_INDICATOR = "d"
MINUTE_INDICATOR = "'"
SECOND_INDICATOR = '"'
COLON_SEPARATOR = ":"
DECIMAL_POINT = "."

DMS_INDICATORS = (DEGREE_INDICATOR, MINUTE_INDICATOR, SECOND_INDICATOR)

# Hemisphere letter -> (kind, sign)
HEMISPHERES = MappingProxyType(
    {
        "N": (Kind.LATITUDE, 1),
        "S": (Kind.LATITUDE, -1),
        "E": (Kind.LONGITUDE, 1),
        "W": (Kind.LONGITUDE, -1),
    }
)

# Hemisphere letter written for (kind, is_negative)
HEMISPHERE_LETTERS = MappingProxyType(
    {
        (Kind.LATITUDE, False): "N",
        (Kind.LATITUDE, True): "S",
        (Kind.LONGITUDE, False): "E",
        (Kind.LONGITUDE, True): "W",
    }
)

SIGNS = MappingProxyType({"-": -1, "+": 1})

COMPONENT_NAMES = MappingProxyType(
    {
        Component.DEGREE: "degrees",
        Component.MINUTE: "minutes",
        Component.SECOND: "seconds",
    }
)

# Indicator character -> component, after glyph normalization
INDICATOR_COMPONENTS = MappingProxyType(
    {
        "d": Component.DEGREE,
        "D": Component.DEGREE,
        MINUTE_INDICATOR: Component.MINUTE,
        SECOND_INDICATOR: Component.SECOND,
    }
)

# UTF-8 glyphs that were decoded as Latin-1 somewhere along the way
MOJIBAKE_GLYPHS = MappingProxyType(
    {
        "Â°": DEGREE_INDICATOR,  # U+00B0 degree sign
        "Âº": DEGREE_INDICATOR,  # U+00BA masculine ordinal indicator
        "Â´": MINUTE_INDICATOR,  # U+00B4 acute accent
        "â\u0080²": MINUTE_INDICATOR,  # U+2032 prime
        "â\u0080\u0099": MINUTE_INDICATOR,  # U+2019 right single quotation mark
        "â\u0080³": SECOND_INDICATOR,  # U+2033 double prime
        "â\u0080\u009d": SECOND_INDICATOR,  # U+201D right double quotation mark
        "Ë\u009a": DEGREE_INDICATOR,  # U+02DA ring above
        "â\u0081°": DEGREE_INDICATOR,  # U+2070 superscript zero
    }
)

# Single code point -> ASCII replacement
GLYPHS = MappingProxyType(
    {
        # degrees
        "°": DEGREE_INDICATOR,  # degree sign
        "º": DEGREE_INDICATOR,  # masculine ordinal indicator
        "⁰": DEGREE_INDICATOR,  # superscript zero
        "˚": DEGREE_INDICATOR,  # ring above
        "∘": DEGREE_INDICATOR,  # ring operator
        # minutes
        "′": MINUTE_INDICATOR,  # prime
        "‵": MINUTE_INDICATOR,  # reversed prime
        "´": MINUTE_INDICATOR,  # acute accent
        "‘": MINUTE_INDICATOR,  # left single quotation mark
        "’": MINUTE_INDICATOR,  # right single quotation mark
        "‛": MINUTE_INDICATOR,  # single high-reversed-9 quotation mark
        "ʹ": MINUTE_INDICATOR,  # modifier letter prime
        "ˊ": MINUTE_INDICATOR,  # modifier letter acute accent
        "ˋ": MINUTE_INDICATOR,  # modifier letter grave accent
        # seconds
        "″": SECOND_INDICATOR,  # double prime
        "‶": SECOND_INDICATOR,  # reversed double prime
        "˝": SECOND_INDICATOR,  # double acute accent
        "“": SECOND_INDICATOR,  # left double quotation mark
        "”": SECOND_INDICATOR,  # right double quotation mark
        "‟": SECOND_INDICATOR,  # double high-reversed-9 quotation mark
        "ʺ": SECOND_INDICATOR,  # modifier letter double prime
        # signs
        "−": "-",  # minus sign
        "‐": "-",  # hyphen
        "‑": "-",  # non-breaking hyphen
        "‒": "-",  # figure dash
        "–": "-",  # en dash
        "—": "-",  # em dash
        "➕": "+",  # heavy plus sign
        # digits
        "¹": "1",
        "²": "2",
        "³": "3",
        "⁴": "4",
        "⁵": "5",
        "⁶": "6",
        "⁷": "7",
        "⁸": "8",
        "⁹": "9",
        **{chr(0xFF10 + digit): str(digit) for digit in range(10)},  # fullwidth
    }
)

GLYPH_TRANSLATION = MappingProxyType(str.maketrans(dict(GLYPHS)))

# Two minute marks stand in for one seconds mark
DOUBLE_MINUTE = MINUTE_INDICATOR * 2

DIGITS = frozenset("0123456789")

NAN_TOKENS = frozenset({"nan", "1.#qnan", "1.#snan", "1.#ind", "1.#r"})
INFINITY_TOKENS = frozenset({"inf", "infinity", "1.#inf"})
