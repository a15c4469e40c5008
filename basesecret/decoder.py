# ----- decoder.py -----
import string
import config
from basesecret.errors import InvalidBase, InvalidDigit

DIGITS = string.digits + string.ascii_lowercase


def validate_base(base: int) -> int:
    """Return base unchanged if it is an integer in [2, 36]."""
    if isinstance(base, bool) or not isinstance(base, int) or not config.Config.base_in_range(base):
        raise InvalidBase(base)
    return base


def digit_value(char: str, base: int, position=None) -> int:
    """Map a single character to its digit value, case-insensitively."""
    # Explicit ranges: str.lower() would also fold non-ASCII letters such as
    # the Kelvin sign into 'k'.
    if '0' <= char <= '9':
        digit = ord(char) - ord('0')
    elif 'a' <= char <= 'z':
        digit = ord(char) - ord('a') + 10
    elif 'A' <= char <= 'Z':
        digit = ord(char) - ord('A') + 10
    else:
        raise InvalidDigit(char, base, position)

    if digit >= base:
        raise InvalidDigit(char, base, position)
    return digit


def decode(encoded_value: str, base: int) -> int:
    """
    Decodes a share value written in the given base into an exact integer.
    The empty string decodes to 0. Signs, whitespace and separators are
    rejected as invalid digits.
    """
    validate_base(base)
    result = 0
    for position, char in enumerate(encoded_value):
        result = result * base + digit_value(char, base, position)
    return result


def encode(number: int, base: int) -> str:
    """Writes a non-negative integer in the given base using lowercase digits."""
    validate_base(base)
    if number < 0:
        raise ValueError("Cannot encode a negative number")
    if number == 0:
        return "0"

    digits = []
    while number:
        number, digit = divmod(number, base)
        digits.append(DIGITS[digit])
    return "".join(reversed(digits))
