"""Rootless (CSR) configuration flags.

Bit layout follows bsd/sys/csr.h in xnu. A set bit in a configuration word
grants the named permission, i.e. relaxes that part of the protection.
"""

from __future__ import annotations

import functools
import operator
from dataclasses import dataclass


@dataclass(frozen=True)
class FlagDefinition:
    """A single named bit in the 32-bit CSR configuration word.

    Attributes:
        name: Column value reported for this flag (e.g. "allow_task_for_pid")
        bit: Single-bit mask within the configuration word
        constant: Kernel constant the bit mirrors (e.g. "CSR_ALLOW_TASK_FOR_PID")
    """

    name: str
    bit: int
    constant: str


_FLAGS: tuple[FlagDefinition, ...] = (
    FlagDefinition("allow_untrusted_kexts", 1 << 0, "CSR_ALLOW_UNTRUSTED_KEXTS"),
    FlagDefinition("allow_unrestricted_fs", 1 << 1, "CSR_ALLOW_UNRESTRICTED_FS"),
    FlagDefinition("allow_task_for_pid", 1 << 2, "CSR_ALLOW_TASK_FOR_PID"),
    FlagDefinition("allow_kernel_debugger", 1 << 3, "CSR_ALLOW_KERNEL_DEBUGGER"),
    FlagDefinition("allow_apple_internal", 1 << 4, "CSR_ALLOW_APPLE_INTERNAL"),
    FlagDefinition("allow_unrestricted_dtrace", 1 << 5, "CSR_ALLOW_UNRESTRICTED_DTRACE"),
    FlagDefinition("allow_unrestricted_nvram", 1 << 6, "CSR_ALLOW_UNRESTRICTED_NVRAM"),
    FlagDefinition("allow_device_configuration", 1 << 7, "CSR_ALLOW_DEVICE_CONFIGURATION"),
)

_BY_NAME = {flag.name: flag for flag in _FLAGS}

_VALID_MASK = functools.reduce(operator.or_, (flag.bit for flag in _FLAGS), 0)


def flags() -> tuple[FlagDefinition, ...]:
    """Return every known flag in declaration order."""
    return _FLAGS


def flag_names() -> list[str]:
    return [flag.name for flag in _FLAGS]


def get_flag(name: str) -> FlagDefinition:
    """Look up a flag by name; raises KeyError for unknown names."""
    return _BY_NAME[name]


def valid_mask() -> int:
    """OR of every known flag bit."""
    return _VALID_MASK
