class DmsException(Exception):
    """Base exception for DMS errors."""


class DmsFormatException(DmsException, ValueError):
    """Raised when DMS text or a decoded angle is malformed."""


class DmsMalformedNumberException(DmsFormatException):
    """Raised when a numeric component cannot be read."""


class DmsUnitOrderException(DmsFormatException):
    """Raised when degree, minute and second components are out of order."""


class DmsRangeException(DmsFormatException):
    """Raised when a component or a decoded angle is out of range."""


class DmsHemisphereException(DmsFormatException):
    """Raised when a sign or hemisphere letter is misplaced or not permitted."""


class DmsTrailingTextException(DmsFormatException):
    """Raised when text follows a complete angle."""


class DmsPairAmbiguityException(DmsFormatException):
    """Raised when both values of a pair resolve to the same coordinate kind."""
