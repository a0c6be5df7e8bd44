"""Tests for formatting angles as DMS text."""

import math

import pytest

from geodms import Component, Kind, decode, encode, encode_precision


def test_encode_plain_angle():
    assert encode(-8.05, Component.DEGREE, 0) == "-8"
    assert encode(-8.05, Component.MINUTE, 0) == "-8d03'"
    assert encode(-8.05, Component.MINUTE, 0, Kind.NONE) == "-8d03'"
    assert encode(8.05, Component.MINUTE, 0) == "8d03'"
    assert encode(123.5, Component.DEGREE, 1) == "123.5"


def test_encode_latitude():
    assert encode(8.05, Component.MINUTE, 0, Kind.LATITUDE) == "08d03'N"
    assert encode(-8.05, Component.MINUTE, 0, Kind.LATITUDE) == "08d03'S"
    assert encode(-20.51125, Component.SECOND, 1, Kind.LATITUDE) == "20d30'40.5\"S"
    assert encode(8.05, Component.DEGREE, 1, Kind.LATITUDE) == "08.1N"


def test_encode_longitude():
    assert encode(-8.05, Component.MINUTE, 0, Kind.LONGITUDE) == "008d03'W"
    assert encode(5.5, Component.DEGREE, 2, Kind.LONGITUDE) == "005.50E"
    assert encode(0.0, Component.SECOND, 0, Kind.LONGITUDE) == "000d00'00\"E"


def test_encode_azimuth():
    assert encode(-8.05, Component.MINUTE, 0, Kind.AZIMUTH) == "351d57'"
    assert encode(-90, Component.DEGREE, 0, Kind.AZIMUTH) == "270"
    assert encode(360, Component.DEGREE, 0, Kind.AZIMUTH) == "000"
    assert encode(720.5, Component.MINUTE, 0, Kind.AZIMUTH) == "000d30'"


def test_encode_azimuth_rounds_below_360():
    assert encode(359.99999999, Component.SECOND, 0, Kind.AZIMUTH) == "000d00'00\""
    assert encode(-0.0000001, Component.MINUTE, 0, Kind.AZIMUTH) == "000d00'"
    assert encode(359.6, Component.DEGREE, 0, Kind.AZIMUTH) == "000"


def test_encode_number():
    assert encode(3.14159, Component.DEGREE, 2, Kind.NUMBER) == "3.14"
    assert encode(-3.14159, Component.SECOND, 3, Kind.NUMBER) == "-3.142"
    assert encode(3.7, Component.DEGREE, -2, Kind.NUMBER) == "4"
    assert encode_precision(-3.14159, -1, Kind.NUMBER) == "-3"


def test_encode_separator():
    assert encode(-20.51125, Component.SECOND, 1, Kind.NONE, ":") == "-20:30:40.5"
    assert encode(-20.51125, Component.MINUTE, 3, Kind.LATITUDE, ":") == "20:30.675S"
    assert encode(20.5, Component.DEGREE, 1, Kind.NONE, ":") == "20.5"


def test_encode_rounding_carries():
    assert encode(29.9999999, Component.MINUTE, 2) == "30d00.00'"
    assert encode(10.99999999, Component.SECOND, 0) == "11d00'00\""
    assert encode(-0.9999999, Component.DEGREE, 3) == "-1.000"


def test_encode_precision_is_capped():
    assert encode(1.0, Component.SECOND, 20) == "1d00'00." + "0" * 11 + '"'
    assert encode(1.0, Component.DEGREE, 20) == "1." + "0" * 15


def test_encode_non_finite():
    assert encode(math.nan, Component.SECOND, 2) == "nan"
    assert encode(math.inf, Component.MINUTE, 0, Kind.LATITUDE) == "inf"
    assert encode(-math.inf, Component.DEGREE, 0, Kind.AZIMUTH) == "-inf"
    assert encode_precision(math.nan, 3, Kind.NUMBER) == "nan"


def test_encode_accepts_integer_enums():
    assert encode(1.5, 1, 0) == "1d30'"
    assert encode(1.5, 1, 0, 1) == "01d30'N"


def test_encode_precision_selects_trailing_unit():
    assert encode_precision(20.51125, 0) == "21"
    assert encode_precision(20.51125, 1, Kind.LATITUDE) == "20.5N"
    assert encode_precision(20.51125, 2) == "20d31'"
    assert encode_precision(20.51125, 3) == "20d30.7'"
    assert encode_precision(20.51125, 6) == "20d30'40.50\""
    assert encode_precision(-20.51125, 5, Kind.NONE, ":") == "-20:30:40.5"


def test_encode_precision_number():
    assert encode_precision(-3.14159, 3, Kind.NUMBER) == "-3.142"
    assert encode_precision(20.51125, 0, Kind.NUMBER) == "21"


def test_encode_round_trip():
    for angle in (-179.999, -20.51125, -0.5, 0.0, 1e-6, 33.3333333, 89.99999, 123.456789, 359.9999):
        text = encode(angle, Component.SECOND, 5)
        assert decode(text)[0] == pytest.approx(angle, abs=1e-5), text


def test_encode_round_trip_with_hemispheres():
    for angle in (-89.5, -45.123456, 0.25, 60.0001):
        latitude = encode(angle, Component.SECOND, 5, Kind.LATITUDE)
        assert decode(latitude) == (pytest.approx(angle, abs=1e-5), Kind.LATITUDE)
        longitude = encode(angle * 2, Component.SECOND, 5, Kind.LONGITUDE)
        assert decode(longitude) == (pytest.approx(angle * 2, abs=1e-5), Kind.LONGITUDE)
