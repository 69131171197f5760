# ABOUTME: Exception types raised by pulselog
# ABOUTME: InvalidArgumentError is the only error the extractor ever raises


class PulselogError(Exception):
    """Base class for pulselog errors."""


class InvalidArgumentError(PulselogError, TypeError):
    """Raised when the extractor is given something other than a string."""
