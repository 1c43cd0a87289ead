"""Live CSR adapter: csr_get_active_config/csr_check from libSystem via ctypes.

Both symbols only exist on releases that ship SIP. A missing library or
symbol is reported through is_available() instead of failing at call time.
"""

from __future__ import annotations

import ctypes
import logging

logger = logging.getLogger(__name__)

LIBSYSTEM_PATH = "/usr/lib/libSystem.B.dylib"


def _load_libsystem():
    try:
        return ctypes.CDLL(LIBSYSTEM_PATH)
    except OSError as e:
        logger.debug(f"libSystem unavailable: {e}")
        return None


class LibSystemCSR:
    """LiveCSR port backed by the kernel's csr_* system calls."""

    def __init__(self, lib=None):
        self._lib = lib if lib is not None else _load_libsystem()
        self._csr_check = None
        self._csr_get_active_config = None
        if self._lib is not None:
            self._bind()

    def _bind(self) -> None:
        try:
            csr_check = self._lib.csr_check
            csr_get_active_config = self._lib.csr_get_active_config
        except AttributeError as e:
            logger.debug(f"csr symbols not found: {e}")
            return

        csr_check.argtypes = [ctypes.c_uint32]
        csr_check.restype = ctypes.c_int
        csr_get_active_config.argtypes = [ctypes.POINTER(ctypes.c_uint32)]
        csr_get_active_config.restype = ctypes.c_int

        self._csr_check = csr_check
        self._csr_get_active_config = csr_get_active_config

    def is_available(self) -> bool:
        return self._csr_check is not None and self._csr_get_active_config is not None

    def get_active_config(self) -> tuple[int, int]:
        config = ctypes.c_uint32(0)
        status = self._csr_get_active_config(ctypes.byref(config))
        return status, config.value

    def check(self, mask: int) -> int:
        return self._csr_check(mask)
