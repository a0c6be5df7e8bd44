from enum import Enum

from .exceptions import (
    DmsHemisphereException,
    DmsMalformedNumberException,
    DmsPairAmbiguityException,
    DmsRangeException,
    DmsTrailingTextException,
    DmsUnitOrderException,
)
from .symbols import (
    COLON_SEPARATOR,
    COMPONENT_NAMES,
    DECIMAL_POINT,
    DIGITS,
    HEMISPHERES,
    INDICATOR_COMPONENTS,
    INFINITY_TOKENS,
    NAN_TOKENS,
    SIGNS,
)
from .types import Component, Kind
from .utils import ang_normalize, normalize_dms_text, to_text

__all__ = [
    "decode",
    "decode_angle",
    "decode_azimuth",
    "decode_dms",
    "decode_lat_lon",
]


def decode(dms: str | bytes) -> tuple[float, Kind]:
    """
    Decode DMS text into an angle in degrees and the kind of coordinate it names.

    Components are marked with d, ' and " (or one of their Unicode glyphs) and may only
    appear in that order, or they are separated by colons. A final component without a mark
    is one unit smaller than the one before it, so 33d10 is 33d10'. Only the final component
    may have a fraction. A single leading sign and a hemisphere letter (N, S, E, W) at either
    end are permitted; S and W negate the result. No check is made on the range of the result.

    :param dms: DMS text, e.g. 20d30'40.5"S or -20:30:40.5
    :return: (angle, kind) where kind is Kind.LATITUDE for N/S, Kind.LONGITUDE for E/W,
             Kind.NONE otherwise
    """
    text = to_text(dms).strip()
    special = _special_value(text)
    if special is not None:
        return special
    return _DmsDecoder(text).decode()


def decode_dms(degrees: float, minutes: float = 0, seconds: float = 0) -> float:
    """
    Combine degrees, minutes and seconds into an angle in degrees.

    The sign of degrees is not carried to the other components, so -3d20' is
    -decode_dms(3, 20) or decode_dms(-3, -20).
    """
    return degrees + (minutes + seconds / 60) / 60


def decode_lat_lon(dms_a: str | bytes, dms_b: str | bytes, swap_default: bool = False) -> tuple[float, float]:
    """
    Decode a pair of DMS strings into latitude and longitude.

    By default the first value is the latitude, or the longitude when swap_default is set.
    A hemisphere letter on either value overrides this.

    :return: (latitude, longitude) with the longitude reduced to [-180, 180)
    """
    value_a, kind_a = decode(dms_a)
    value_b, kind_b = decode(dms_b)
    if kind_a == Kind.NONE and kind_b == Kind.NONE:
        kind_a = Kind.LONGITUDE if swap_default else Kind.LATITUDE
        kind_b = Kind.LATITUDE if swap_default else Kind.LONGITUDE
    elif kind_a == Kind.NONE:
        kind_a = Kind(Kind.LATITUDE + Kind.LONGITUDE - kind_b)
    elif kind_b == Kind.NONE:
        kind_b = Kind(Kind.LATITUDE + Kind.LONGITUDE - kind_a)
    if kind_a == kind_b:
        plural = "latitudes" if kind_a == Kind.LATITUDE else "longitudes"
        raise DmsPairAmbiguityException(f'Both "{to_text(dms_a)}" and "{to_text(dms_b)}" interpreted as {plural}.')
    latitude, longitude = (value_a, value_b) if kind_a == Kind.LATITUDE else (value_b, value_a)
    if abs(latitude) > 90:
        raise DmsRangeException(f"Latitude {latitude}d not in [-90d, 90d].")
    if longitude < -540 or longitude >= 540:
        raise DmsRangeException(f"Longitude {longitude}d not in [-540d, 540d).")
    return latitude, ang_normalize(longitude)


def decode_angle(dms: str | bytes) -> float:
    """Decode an arc angle, which may not have a hemisphere letter. The range is not checked."""
    angle, kind = decode(dms)
    if kind != Kind.NONE:
        raise DmsHemisphereException(f'Arc angle "{to_text(dms)}" includes a hemisphere, N/E/W/S.')
    return angle


def decode_azimuth(dms: str | bytes) -> float:
    """
    Decode an azimuth, reduced to [-180, 180).

    E and W are permitted (W negates), N and S are not.
    """
    azimuth, kind = decode(dms)
    if kind == Kind.LATITUDE:
        raise DmsHemisphereException(f'Azimuth "{to_text(dms)}" has a latitude hemisphere, N/S.')
    if azimuth < -540 or azimuth >= 540:
        raise DmsRangeException(f'Azimuth "{to_text(dms)}" not in range [-540d, 540d).')
    return ang_normalize(azimuth)


def _special_value(text: str) -> tuple[float, Kind] | None:
    """
    Return (NaN or a signed infinity, kind) for their literal spellings, None otherwise.

    A trailing hemisphere letter sets the kind, so nanN is a NaN latitude.
    """
    value = normalize_dms_text(text).lower()
    kind, sign = Kind.NONE, 1
    # "nan" itself ends in a hemisphere letter
    if value.lstrip("+-") not in NAN_TOKENS | INFINITY_TOKENS and value[-1:].upper() in HEMISPHERES:
        kind, sign = HEMISPHERES[value[-1].upper()]
        value = value[:-1]
    if value[:1] in SIGNS:
        sign *= SIGNS[value[0]]
        value = value[1:]
    if value in NAN_TOKENS:
        return float("nan"), kind
    if value in INFINITY_TOKENS:
        return sign * float("inf"), kind
    return None


class _State(Enum):
    """Position of the scanner within a DMS string."""

    START = "start"
    DEGREE = "degree"
    MINUTE = "minute"
    SECOND = "second"
    DONE = "done"


_COMPONENT_STATES = {
    Component.DEGREE: _State.DEGREE,
    Component.MINUTE: _State.MINUTE,
    Component.SECOND: _State.SECOND,
}

_STATE_COMPONENTS = {state: component for component, state in _COMPONENT_STATES.items()}


class _DmsDecoder:
    """Decode a single stripped DMS string."""

    def __init__(self, text: str):
        """Initialize a decoder for one DMS string."""
        self.text = text
        self.body = normalize_dms_text(text)
        self.kind = Kind.NONE
        self.sign = 1
        self.state = _State.START
        self.token = ""
        self.pieces: dict[Component, str] = {}

    def decode(self) -> tuple[float, Kind]:
        """Return (angle, kind), raising on the first rule the text breaks."""
        self._read_hemisphere()
        self._read_sign()
        if not self.body:
            raise DmsMalformedNumberException(f'Empty or incomplete DMS string "{self.text}".')
        for position, char in enumerate(self.body):
            self._read_char(char, is_last=position == len(self.body) - 1)
        self._finish()
        degrees, minutes, seconds = (self._piece_value(component) for component in Component)
        return self.sign * decode_dms(degrees, minutes, seconds), self.kind

    @property
    def cursor(self) -> Component | None:
        """Return the unit the current token belongs to, None when all units are used."""
        if self.state == _State.START:
            return Component.DEGREE
        return _STATE_COMPONENTS.get(self.state)

    def _read_hemisphere(self) -> None:
        """Consume a hemisphere letter at the start or the end of the string."""
        if not self.body:
            return
        leading = self.body[0].upper()
        trailing = self.body[-1].upper()
        if leading in HEMISPHERES:
            self.kind, self.sign = HEMISPHERES[leading]
            self.body = self.body[1:]
            self._check_single_hemisphere(leading, self.body[-1:].upper())
            self._check_single_hemisphere(leading, self.body[:1].upper())
            if self.body[:1] in SIGNS:
                raise DmsHemisphereException(f'Sign following hemisphere indicator {leading} in "{self.text}".')
        elif trailing in HEMISPHERES:
            self.kind, self.sign = HEMISPHERES[trailing]
            self.body = self.body[:-1]
            self._check_single_hemisphere(self.body[-1:].upper(), trailing)

    def _check_single_hemisphere(self, first: str, second: str) -> None:
        """Raise if both letters, in text order, are hemisphere indicators."""
        if first not in HEMISPHERES or second not in HEMISPHERES:
            return
        if first == second:
            message = f'Repeated hemisphere indicators {first} in "{self.text}".'
        else:
            message = f'Contradictory hemisphere indicators {first} and {second} in "{self.text}".'
        raise DmsHemisphereException(message)

    def _read_sign(self) -> None:
        """Consume a leading sign."""
        if self.body[:1] in SIGNS:
            self.sign *= SIGNS[self.body[0]]
            self.body = self.body[1:]
            if self.body[:1].upper() in HEMISPHERES:
                raise DmsHemisphereException(f'Hemisphere indicator following sign in "{self.text}".')

    def _read_char(self, char: str, *, is_last: bool) -> None:
        """Advance the state machine by one character."""
        if char in DIGITS or char == DECIMAL_POINT:
            self._read_number_char(char)
        elif char in INDICATOR_COMPONENTS:
            self._read_indicator(INDICATOR_COMPONENTS[char])
        elif char == COLON_SEPARATOR:
            self._read_colon(is_last=is_last)
        elif char in SIGNS:
            raise DmsMalformedNumberException(f'Internal sign in DMS string "{self.text}".')
        elif self.pieces and not self.token:
            raise DmsTrailingTextException(f'Extra text "{char}" following angle in DMS string "{self.text}".')
        else:
            raise DmsMalformedNumberException(f'Illegal character "{char}" in DMS string "{self.text}".')

    def _read_number_char(self, char: str) -> None:
        # Digits after the seconds are reported once the next mark or the end is reached
        if char == DECIMAL_POINT and DECIMAL_POINT in self.token:
            raise DmsMalformedNumberException(f'Multiple decimal points in "{self.text}".')
        if self.state == _State.START:
            self.state = _State.DEGREE
        self.token += char

    def _read_indicator(self, component: Component) -> None:
        cursor = self.cursor
        previous = Component.SECOND if cursor is None else Component(cursor - 1) if cursor > 0 else None
        if previous is not None and component == previous:
            raise DmsUnitOrderException(f'Repeated {COMPONENT_NAMES[component]} component in "{self.text}".')
        if previous is not None and component < previous:
            raise DmsUnitOrderException(
                f"{COMPONENT_NAMES[component].capitalize()} component follows "
                f'{COMPONENT_NAMES[previous]} component in "{self.text}".'
            )
        self._close_token(component)

    def _read_colon(self, *, is_last: bool) -> None:
        cursor = self.cursor
        if cursor is None:
            raise DmsTrailingTextException(f'Extra text following seconds in DMS string "{self.text}".')
        if is_last:
            raise DmsMalformedNumberException(f'Illegal for : to appear at the end of "{self.text}".')
        self._close_token(cursor)

    def _close_token(self, component: Component) -> None:
        """Store the current token as the given component and move past it."""
        name = COMPONENT_NAMES[component]
        if not any(char in DIGITS for char in self.token):
            raise DmsMalformedNumberException(f'Missing numbers in {name} component of "{self.text}".')
        for earlier in self.pieces.values():
            if DECIMAL_POINT in earlier:
                raise DmsUnitOrderException(f'Decimal point in non-terminal component of "{self.text}".')
        if component != Component.DEGREE and int(self.token.partition(DECIMAL_POINT)[0] or 0) >= 60:
            raise DmsRangeException(f'{name.capitalize()} {float(self.token)} not in range [0, 60) in "{self.text}".')
        self.pieces[component] = self.token
        self.token = ""
        self.state = _State.DONE if component == Component.SECOND else _COMPONENT_STATES[Component(component + 1)]

    def _finish(self) -> None:
        """Assign a final unmarked token to the unit at the cursor."""
        if self.token:
            cursor = self.cursor
            if cursor is None:
                raise DmsTrailingTextException(f'Extra text following seconds in DMS string "{self.text}".')
            if not any(char in DIGITS for char in self.token):
                raise DmsMalformedNumberException(f'Missing numbers in trailing component of "{self.text}".')
            self._close_token(cursor)
        if not self.pieces:
            raise DmsMalformedNumberException(f'Empty or incomplete DMS string "{self.text}".')

    def _piece_value(self, component: Component) -> float:
        return float(self.pieces.get(component, 0))
