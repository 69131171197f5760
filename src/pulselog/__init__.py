# ABOUTME: pulselog - heart-rate extraction from free-form log text
# ABOUTME: Exposes the extractor, its token diagnostics and error types

from pulselog.errors import InvalidArgumentError, PulselogError
from pulselog.extractor import (
    MAX_HEART_RATE,
    MIN_HEART_RATE,
    HeartRateToken,
    RejectReason,
    extract,
    is_plausible_heart_rate,
    scan_heart_rates,
)
from pulselog.numeric import parse_leading_float

__all__ = [
    "extract",
    "scan_heart_rates",
    "is_plausible_heart_rate",
    "parse_leading_float",
    "HeartRateToken",
    "RejectReason",
    "MIN_HEART_RATE",
    "MAX_HEART_RATE",
    "InvalidArgumentError",
    "PulselogError",
]
