# ----- errors.py -----

class SecretSharingError(ValueError):
    """Base class for every reconstruction failure."""


class InvalidBase(SecretSharingError):
    def __init__(self, base):
        self.base = base
        super().__init__(f"Invalid base {base}. Must be between 2 and 36")


class InvalidDigit(SecretSharingError):
    """A character is not a digit of the share's base."""
    def __init__(self, char, base, position=None):
        self.char = char
        self.base = base
        self.position = position
        super().__init__(f"Invalid digit '{char}' for base {base}")


class InvalidThreshold(SecretSharingError):
    def __init__(self, threshold):
        self.threshold = threshold
        super().__init__(f"Invalid threshold {threshold}. Must be at least 1")


class InsufficientPoints(SecretSharingError):
    def __init__(self, required, actual):
        self.required = required
        self.actual = actual
        super().__init__(f"Not enough points. Need {required}, got {actual}")


class DuplicatePoint(SecretSharingError):
    """Two selected points share an x-coordinate."""
    def __init__(self, x):
        self.x = x
        super().__init__(f"Duplicate x-coordinate {x} among selected points")


class DivisionNotExact(SecretSharingError):
    """
    The interpolated value at x=0 is not an integer. Genuine shares of an
    integer polynomial always interpolate to one, so the shares are
    inconsistent.
    """
    def __init__(self, dividend, divisor):
        self.dividend = dividend
        self.divisor = divisor
        super().__init__(
            f"Interpolated sum {dividend} is not divisible by common denominator {divisor}"
        )


class NoInverse(SecretSharingError):
    def __init__(self, a, m):
        self.a = a
        self.m = m
        super().__init__(f"Modular inverse of {a} mod {m} does not exist")


class MalformedRequest(SecretSharingError):
    """The request structure could not be turned into shares."""
