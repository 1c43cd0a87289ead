"""Core ports (interfaces) for sipconfig.

These protocols define the boundaries between the core reconciliation
logic and the macOS services it reads from. They are intentionally small
and capability-oriented so the core can run against test doubles on any
platform.
"""

from __future__ import annotations

from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class OSVersionProvider(Protocol):
    """Installed operating system version."""

    def get_os_version(self) -> tuple[int, int] | None:
        """Return (major, minor), or None if it cannot be determined."""


@runtime_checkable
class PropertyDictionary(Protocol):
    """Properties of an opened registry entry."""

    def get_if_present(self, key: str) -> Any | None:
        """Return the typed value stored under key, or None if absent."""

    def is_bytes(self, value: Any) -> bool:
        """True if value is a byte blob."""

    def get_bytes(self, value: Any) -> bytes:
        """Copy the contents of a byte-blob value."""


@runtime_checkable
class PropertyStore(Protocol):
    """Firmware-backed property store (the I/O registry on macOS)."""

    def open(self, path: str) -> Any | None:
        """Open the entry at path; returns a handle or None."""

    def get_properties(self, handle: Any) -> PropertyDictionary | None:
        """Fetch the property dictionary of an opened entry."""

    def release(self, obj: Any) -> None:
        """Release a handle or property dictionary."""


@runtime_checkable
class LiveCSR(Protocol):
    """Kernel calls reporting the active CSR configuration."""

    def is_available(self) -> bool:
        """True if csr_get_active_config and csr_check can be called."""

    def get_active_config(self) -> tuple[int, int]:
        """Return (status, config word); status 0 means success."""

    def check(self, mask: int) -> int:
        """Return 0 if the operations guarded by mask are allowed."""
