#!/usr/bin/env python3
"""Example usage of the geodms library."""

from geodms import (
    Component,
    DmsException,
    Kind,
    decode,
    decode_azimuth,
    decode_lat_lon,
    encode,
    encode_precision,
    split3,
)


def main():
    print("geodms Library Demo")
    print("=" * 19)

    # Decode DMS text
    print("\n1. Decoding:")
    for text in ("-20.51125", "20d30'40.5\"S", "-20:30:40.5", "75W"):
        value, kind = decode(text)
        print(f"decode({text!r}): {value:.6f} ({kind.name.lower()})")

    # Latitude/longitude pairs
    print("\n2. Latitude/longitude pairs:")
    lat, lon = decode_lat_lon("75W", "40N")
    print(f"decode_lat_lon('75W', '40N'): lat={lat}, lon={lon}")
    lat, lon = decode_lat_lon("40.5", "-75.3", swap_default=True)
    print(f"decode_lat_lon('40.5', '-75.3', swap_default=True): lat={lat}, lon={lon}")
    print(f"decode_azimuth('270'): {decode_azimuth('270')}")

    # Encode decimal degrees
    print("\n3. Encoding:")
    print(f"Latitude: {encode(-20.51125, Component.SECOND, 1, Kind.LATITUDE)}")
    print(f"Longitude: {encode(-8.05, Component.MINUTE, 0, Kind.LONGITUDE)}")
    print(f"Azimuth: {encode(-8.05, Component.MINUTE, 0, Kind.AZIMUTH)}")
    print(f"Colons: {encode_precision(-20.51125, 5, Kind.NONE, ':')}")
    print(f"Split: {split3(4.5025)}")

    # Malformed input
    print("\n4. Errors:")
    for text in ("4d5\"4'", "4:60", "-N20.5"):
        try:
            decode(text)
        except DmsException as e:
            print(f"decode({text!r}) failed (expected): {e}")

    print("\nDemo completed!")


if __name__ == "__main__":
    main()
