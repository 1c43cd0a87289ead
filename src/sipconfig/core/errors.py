"""Exceptions raised inside sipconfig."""

from __future__ import annotations


class SIPConfigError(Exception):
    """Base class for sipconfig errors."""


class CapabilityUnavailableError(SIPConfigError):
    """Live CSR calls were made on a platform that does not provide them."""
