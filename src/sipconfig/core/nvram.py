"""Persisted CSR configuration read from NVRAM.

The boot options entry of the device tree exposes the NVRAM variables as
properties. The CSR word is stored as a short data blob; when SIP has never
been reconfigured (or was cleared) the property is simply absent.
"""

from __future__ import annotations

import logging

from .config_model import DEFAULT_NVRAM_KEY, DEFAULT_NVRAM_PATH
from .outcome import ReadOutcome
from .ports import PropertyStore

logger = logging.getLogger(__name__)

WORD_SIZE = 4


def decode_config_word(blob: bytes) -> int:
    """Decode a CSR data blob into an unsigned 32-bit word.

    The first four bytes are read little-endian; shorter blobs are
    zero-padded and any trailing bytes beyond the word are ignored.
    """
    return int.from_bytes(bytes(blob[:WORD_SIZE]).ljust(WORD_SIZE, b"\x00"), "little")


class NvramConfigReader:
    """Reads csr-active-config through a PropertyStore."""

    def __init__(
        self,
        store: PropertyStore,
        path: str = DEFAULT_NVRAM_PATH,
        key: str = DEFAULT_NVRAM_KEY,
    ):
        self._store = store
        self._path = path
        self._key = key

    def read_persisted_config(self) -> ReadOutcome:
        handle = self._store.open(self._path)
        if handle is None:
            return ReadOutcome.error("could not open property store")

        try:
            try:
                properties = self._store.get_properties(handle)
            except OSError as e:
                logger.debug(f"Property fetch for {self._path} failed: {e}")
                properties = None
        finally:
            self._store.release(handle)

        if properties is None:
            return ReadOutcome.error("could not get property store options")

        try:
            value = properties.get_if_present(self._key)
            if value is None:
                return ReadOutcome.not_found(f"{self._key} key not found")
            if not properties.is_bytes(value):
                return ReadOutcome.error(f"unexpected data type for {self._key}")
            return ReadOutcome.success(decode_config_word(properties.get_bytes(value)))
        except OSError as e:
            logger.debug(f"Lookup of {self._key} failed: {e}")
            return ReadOutcome.error(f"could not read {self._key}")
        finally:
            self._store.release(properties)
