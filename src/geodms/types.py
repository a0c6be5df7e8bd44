from enum import IntEnum


class Kind(IntEnum):
    """Coordinate kind found by decoding or requested when encoding."""

    NONE = 0
    LATITUDE = 1
    LONGITUDE = 2
    AZIMUTH = 3
    NUMBER = 4


class Component(IntEnum):
    """Unit of a DMS component, in the order they must appear."""

    DEGREE = 0
    MINUTE = 1
    SECOND = 2


def parse_kind(value: str | Kind) -> Kind:
    """Return the Kind for a name such as "latitude" (case-insensitive)."""
    if isinstance(value, Kind):
        return value
    try:
        return Kind[value.strip().upper()]
    except KeyError as exc:
        names = ", ".join(kind.name.lower() for kind in Kind)
        raise ValueError(f'Unknown kind "{value}". Use one of {names}.') from exc


def parse_component(value: str | Component) -> Component:
    """Return the Component for a name such as "minute" (case-insensitive, plural allowed)."""
    if isinstance(value, Component):
        return value
    name = value.strip().upper()
    if name.endswith("S"):
        name = name[:-1]
    try:
        return Component[name]
    except KeyError as exc:
        names = ", ".join(component.name.lower() for component in Component)
        raise ValueError(f'Unknown component "{value}". Use one of {names}.') from exc
