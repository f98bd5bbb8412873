"""Integer parsing for height-map tokens, decimal or hexadecimal."""

_WHITESPACE = " \t\n\v\f\r"


def detect_base(text: str) -> int:
    """Return 16 when *text* starts with ``0x`` or ``0X``, otherwise 10."""
    if len(text) >= 2 and text[0] == "0" and text[1] in "xX":
        return 16
    return 10


def _digits_low_base(text: str, base: int) -> int:
    result = 0
    highest = chr(ord("0") + base)
    for char in text:
        if not "0" <= char <= highest:
            break
        result = result * base + ord(char) - ord("0")
    return result


def _digits_high_base(text: str, base: int) -> int:
    result = 0
    highest_letter = chr(ord("a") + base - 10)
    for char in text:
        if "0" <= char <= "9":
            result = result * base + ord(char) - ord("0")
        elif "a" <= char <= highest_letter:
            result = result * base + ord(char) - ord("a") + 10
        else:
            break
    return result


def atoi_hex(text: str, base: int) -> int:
    """Parse the leading number of *text* in *base*.

    Leading whitespace and one sign are accepted; parsing stops at the first
    character that is not a digit of the base. Bases above ten accept
    lower-case letters only, and no ``0x`` prefix is skipped.
    """
    rest = text.lstrip(_WHITESPACE)
    sign = 1
    if rest[:1] in ("+", "-"):
        if rest[0] == "-":
            sign = -1
        rest = rest[1:]
    if base <= 10:
        return _digits_low_base(rest, base) * sign
    return _digits_high_base(rest, base) * sign