# ABOUTME: Lenient numeric coercion for heart-rate tokens
# ABOUTME: Parses the longest valid leading float of a string and ignores trailing text

import math
import re

# Whitespace in log text: tab, LF, VT, FF, CR, space, the Unicode space
# separators, line/paragraph separators and the BOM (U+FEFF).
# Unlike str.isspace(), U+001C-U+001F and U+0085 are not included.
WHITESPACE = r"\t\n\v\f\r \u00a0\u1680\u2000-\u200a\u2028\u2029\u202f\u205f\u3000\ufeff"

# Optional sign, then "Infinity" or a decimal with optional fraction and exponent.
# Digits are ASCII only. The exponent group only matches when at least one
# digit follows the "e".
_LEADING_FLOAT = re.compile(
    rf"[{WHITESPACE}]*([+-]?(?:Infinity|(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?))"
)


def parse_leading_float(token: str) -> float:
    """
    Parse the longest leading floating-point prefix of a token.

    Leading whitespace is skipped. Parsing stops at the first character that
    cannot extend a valid number, so units or other suffixes are ignored.

    Args:
        token: Raw text to coerce

    Returns:
        The parsed value, or NaN if the token has no numeric prefix

    Examples:
        >>> parse_leading_float("72bpm")
        72.0
        >>> parse_leading_float("1e")
        1.0
        >>> parse_leading_float("N/A")
        nan
    """
    match = _LEADING_FLOAT.match(token)
    if not match:
        return math.nan

    return float(match.group(1))
