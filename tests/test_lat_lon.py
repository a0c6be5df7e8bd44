"""Tests for decoding latitude/longitude pairs, arc angles and azimuths."""

import pytest

from geodms import (
    DmsFormatException,
    DmsHemisphereException,
    DmsPairAmbiguityException,
    DmsRangeException,
    decode_angle,
    decode_azimuth,
    decode_lat_lon,
)


def test_lat_lon_by_position():
    lat, lon = decode_lat_lon("40.5", "-75.3")
    assert lat == pytest.approx(40.5)
    assert lon == pytest.approx(-75.3)


def test_lat_lon_swapped_by_default():
    lat, lon = decode_lat_lon("40.5", "-75.3", swap_default=True)
    assert lat == pytest.approx(-75.3)
    assert lon == pytest.approx(40.5)


def test_lat_lon_hemispheres_decide_order():
    for pair in (("40N", "75W"), ("75W", "40N")):
        for swap_default in (False, True):
            lat, lon = decode_lat_lon(*pair, swap_default=swap_default)
            assert lat == pytest.approx(40.0)
            assert lon == pytest.approx(-75.0)


def test_lat_lon_single_hemisphere():
    assert decode_lat_lon("75W", "40") == (pytest.approx(40.0), pytest.approx(-75.0))
    assert decode_lat_lon("40", "75E") == (pytest.approx(40.0), pytest.approx(75.0))
    assert decode_lat_lon("40", "20S", swap_default=False) == (pytest.approx(-20.0), pytest.approx(40.0))


def test_lat_lon_ambiguous():
    with pytest.raises(DmsPairAmbiguityException, match="interpreted as latitudes"):
        decode_lat_lon("40N", "50N")
    with pytest.raises(DmsPairAmbiguityException, match="interpreted as longitudes"):
        decode_lat_lon("10E", "20W")
    with pytest.raises(DmsFormatException):
        decode_lat_lon("40S", "50N")


def test_lat_lon_latitude_range():
    assert decode_lat_lon("90", "0") == (90.0, 0.0)
    assert decode_lat_lon("-90", "0") == (-90.0, 0.0)
    with pytest.raises(DmsRangeException, match="Latitude"):
        decode_lat_lon("91", "0")
    with pytest.raises(DmsRangeException, match="Latitude"):
        decode_lat_lon("0", "90d0'1\"S", swap_default=True)


def test_lat_lon_longitude_range():
    assert decode_lat_lon("0", "270") == (0.0, -90.0)
    assert decode_lat_lon("0", "180") == (0.0, -180.0)
    assert decode_lat_lon("0", "-180") == (0.0, -180.0)
    assert decode_lat_lon("0", "-540") == (0.0, -180.0)
    assert decode_lat_lon("0", "539.5")[1] == pytest.approx(179.5)
    with pytest.raises(DmsRangeException, match="Longitude"):
        decode_lat_lon("0", "540")
    with pytest.raises(DmsRangeException, match="Longitude"):
        decode_lat_lon("0", "-540.5")


def test_lat_lon_malformed_input():
    with pytest.raises(DmsRangeException):
        decode_lat_lon("4:60", "0")
    with pytest.raises(DmsFormatException):
        decode_lat_lon("0", "4::5")


def test_decode_angle():
    assert decode_angle("20d30'") == pytest.approx(20.5)
    assert decode_angle("-1000") == -1000.0
    for value in ("20N", "W20"):
        with pytest.raises(DmsHemisphereException, match="includes a hemisphere"):
            decode_angle(value)


def test_decode_azimuth():
    assert decode_azimuth("270") == -90.0
    assert decode_azimuth("90W") == -90.0
    assert decode_azimuth("90E") == 90.0
    assert decode_azimuth("-540") == -180.0
    assert decode_azimuth("359.5") == pytest.approx(-0.5)
    assert decode_azimuth("351d57'") == pytest.approx(-8.05)


def test_decode_azimuth_rejects_latitude():
    with pytest.raises(DmsHemisphereException, match="latitude hemisphere"):
        decode_azimuth("10N")


def test_decode_azimuth_range():
    for value in ("540", "-541", "1000"):
        with pytest.raises(DmsRangeException, match="not in range"):
            decode_azimuth(value)
