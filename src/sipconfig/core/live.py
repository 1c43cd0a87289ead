"""Live CSR configuration as enforced by the running kernel."""

from __future__ import annotations

from .errors import CapabilityUnavailableError
from .outcome import ReadOutcome, ReadStatus
from .ports import LiveCSR


class LiveConfigReader:
    """Wraps the csr_* calls behind a capability check.

    Availability is probed once; after a negative probe the reader refuses
    further calls instead of touching missing symbols.
    """

    def __init__(self, csr: LiveCSR):
        self._csr = csr
        self._present: bool | None = None

    def is_capability_present(self) -> bool:
        if self._present is None:
            self._present = bool(self._csr.is_available())
        return self._present

    def read_active_config(self) -> ReadOutcome:
        if not self.is_capability_present():
            return ReadOutcome.unavailable("live CSR calls not available")
        status, word = self._csr.get_active_config()
        if status != 0:
            return ReadOutcome.error(f"csr_get_active_config returned {status}")
        return ReadOutcome.success(word & 0xFFFFFFFF)

    def get_active_config(self) -> int:
        """Return the active configuration word, 0 if the kernel call failed."""
        outcome = self.read_active_config()
        if outcome.status is ReadStatus.UNAVAILABLE:
            raise CapabilityUnavailableError("csr_get_active_config not available")
        return outcome.word if outcome.ok else 0

    def check_flag_bypassable(self, bit: int) -> bool:
        """True when the restriction guarded by bit is not enforced."""
        if not self.is_capability_present():
            raise CapabilityUnavailableError("csr_check not available")
        return self._csr.check(bit) == 0
