"""Core configuration model (structured view)."""

from __future__ import annotations

from dataclasses import dataclass

DEFAULT_MIN_OS_VERSION = (10, 11)
DEFAULT_NVRAM_PATH = "IODeviceTree:/options"
DEFAULT_NVRAM_KEY = "csr-active-config"


@dataclass(frozen=True)
class ReporterConfig:
    min_os_version: tuple[int, int] = DEFAULT_MIN_OS_VERSION
    nvram_path: str = DEFAULT_NVRAM_PATH
    nvram_key: str = DEFAULT_NVRAM_KEY
