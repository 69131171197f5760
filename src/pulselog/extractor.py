# ABOUTME: Heart-rate extraction from free-form log text
# ABOUTME: Scans for HeartRate=<value> tokens, coerces them and keeps plausible bpm readings

import logging
import math
import re
from collections.abc import Iterator
from dataclasses import dataclass
from enum import Enum

from pulselog.errors import InvalidArgumentError
from pulselog.numeric import WHITESPACE, parse_leading_float

logger = logging.getLogger(__name__)

# Realistic human heart rate range in bpm, both bounds inclusive
MIN_HEART_RATE = 30.0
MAX_HEART_RATE = 250.0

# "HeartRate", optional spaces, "=", optional spaces, then everything up to
# the next whitespace, semicolon or pipe
HEART_RATE_PATTERN = re.compile(rf"HeartRate[{WHITESPACE}]*=[{WHITESPACE}]*([^{WHITESPACE};|]+)")


class RejectReason(str, Enum):
    """Why a candidate token was dropped."""

    NOT_A_NUMBER = "not_a_number"
    NOT_FINITE = "not_finite"
    BELOW_RANGE = "below_range"
    ABOVE_RANGE = "above_range"


@dataclass
class HeartRateToken:
    """
    A single HeartRate=<value> match found in the input.

    Attributes:
        raw: The captured candidate text after the "=" sign
        value: Coerced numeric value (NaN when the token has no numeric prefix)
        position: Offset of the match start in the input text
        accepted: True if the value passed the plausibility filter
        reason: Why the token was rejected, or None if accepted
    """

    raw: str
    value: float
    position: int
    accepted: bool
    reason: RejectReason | None = None


def is_plausible_heart_rate(value: float) -> bool:
    """Return True if value is a finite reading within the bpm range."""
    return math.isfinite(value) and MIN_HEART_RATE <= value <= MAX_HEART_RATE


def _reject_reason(value: float) -> RejectReason | None:
    if math.isnan(value):
        return RejectReason.NOT_A_NUMBER
    if math.isinf(value):
        return RejectReason.NOT_FINITE
    if value < MIN_HEART_RATE:
        return RejectReason.BELOW_RANGE
    if value > MAX_HEART_RATE:
        return RejectReason.ABOVE_RANGE
    return None


def _require_text(text: object) -> str:
    if not isinstance(text, str):
        raise InvalidArgumentError(f"Input must be a string, got {type(text).__name__}")
    return text


def scan_heart_rates(text: str) -> Iterator[HeartRateToken]:
    """
    Scan text for heart-rate tokens and classify each one.

    Every HeartRate=<value> match is yielded in order of appearance, whether
    or not its value survives the plausibility filter.

    Args:
        text: Log text to scan

    Returns:
        Iterator of HeartRateToken records

    Raises:
        InvalidArgumentError: If text is not a string (raised on call, before scanning)
    """
    return _scan(_require_text(text))


def _scan(text: str) -> Iterator[HeartRateToken]:
    for match in HEART_RATE_PATTERN.finditer(text):
        raw = match.group(1)
        value = parse_leading_float(raw)
        reason = _reject_reason(value)

        if reason is not None:
            logger.debug(f"Dropping HeartRate token {raw!r} at offset {match.start()}: {reason.value}")

        yield HeartRateToken(
            raw=raw,
            value=value,
            position=match.start(),
            accepted=reason is None,
            reason=reason,
        )


def extract(text: str) -> list[float]:
    """
    Extract plausible heart-rate readings from log text.

    Matches "HeartRate" followed by optional whitespace, "=", optional
    whitespace and a value running up to the next whitespace, ";" or "|".
    Each value is coerced by its leading numeric prefix ("72bpm" -> 72.0,
    "error" -> NaN) and kept only if finite and within 30-250 bpm inclusive.
    Unparseable or implausible tokens are dropped silently.

    Args:
        text: Log text to scan; may be empty

    Returns:
        Readings in order of appearance, duplicates preserved

    Raises:
        InvalidArgumentError: If text is not a string

    Examples:
        >>> extract("HeartRate=60; HeartRate=75.5bpm")
        [60.0, 75.5]
        >>> extract("HeartRate=error")
        []
    """
    return [token.value for token in scan_heart_rates(text) if token.accepted]
