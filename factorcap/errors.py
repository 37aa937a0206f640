class FactorCapError(Exception):
    """Base class for errors raised by the puzzle engine."""


class InvalidSymbol(FactorCapError, ValueError):
    """A character outside the expected alphabet was encountered."""


class InvalidPadding(FactorCapError, ValueError):
    """The trailing bits of a base64 string are not valid padding."""


class CapacityExceeded(FactorCapError):
    """Encoded output would not fit in the configured maximum length."""


class ParseError(FactorCapError, ValueError):
    """A submitted factor list or digit string is malformed."""
