"""Core reconciliation for sipconfig.

Combines the live kernel configuration and the persisted NVRAM word into
one row per CSR flag, preceded by an aggregate "sip" row.
"""

from __future__ import annotations

import logging

from . import flags as flag_registry
from .config_model import ReporterConfig
from .live import LiveConfigReader
from .nvram import NvramConfigReader
from .outcome import ReadStatus
from .ports import OSVersionProvider

logger = logging.getLogger(__name__)

AGGREGATE_FLAG = "sip"


def _aggregate_state(live_config: int | None, mask: int) -> int | None:
    if live_config is None:
        return None
    if live_config == 0:
        return 1
    if (live_config | mask) == mask:
        return 0
    # Unrecognized bits: leave the state unknown
    return None


class SIPConfigReporter:
    """Produces the SIP configuration rows for a single query."""

    def __init__(
        self,
        os_version: OSVersionProvider,
        live: LiveConfigReader,
        nvram: NvramConfigReader,
        config: ReporterConfig | None = None,
    ):
        self._os_version = os_version
        self._live = live
        self._nvram = nvram
        self._config = config or ReporterConfig()

    def _platform_supported(self) -> bool:
        version = self._os_version.get_os_version()
        if version is None:
            logger.debug("Could not determine OS version")
            return False
        if tuple(version) < tuple(self._config.min_os_version):
            minimum = ".".join(str(part) for part in self._config.min_os_version)
            logger.debug(f"Not running on macOS {minimum} or higher")
            return False
        return True

    def generate(self) -> list[dict]:
        """Return the rows, aggregate first, then flags in registry order.

        Columns whose value is unknown are left out of the row entirely. If the
        active configuration cannot be read the aggregate state is unknown;
        per-flag rows still come from csr_check.
        """
        if not self._platform_supported():
            return []

        if not self._live.is_capability_present():
            logger.debug("csr_get_active_config/csr_check not available")
            return []

        live_outcome = self._live.read_active_config()
        if live_outcome.status is ReadStatus.ERROR:
            logger.warning(f"Could not read active CSR config: {live_outcome.detail}")
        live_config = live_outcome.word if live_outcome.ok else None

        nvram_outcome = self._nvram.read_persisted_config()
        if nvram_outcome.status is ReadStatus.NOT_FOUND:
            logger.debug(nvram_outcome.detail)
        elif not nvram_outcome.ok:
            logger.warning(f"Could not read persisted CSR config: {nvram_outcome.detail}")

        results: list[dict] = []

        row: dict = {"config_flag": AGGREGATE_FLAG}
        state = _aggregate_state(live_config, flag_registry.valid_mask())
        if state is not None:
            row["enabled"] = state
            if nvram_outcome.ok:
                row["enabled_nvram"] = state
        results.append(row)

        for flag in flag_registry.flags():
            row = {"config_flag": flag.name}
            row["enabled"] = 0 if self._live.check_flag_bypassable(flag.bit) else 1
            if nvram_outcome.ok:
                row["enabled_nvram"] = 1 if nvram_outcome.word & flag.bit else 0
            results.append(row)

        return results
