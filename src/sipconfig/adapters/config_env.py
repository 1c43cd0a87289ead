"""Env configuration adapter producing a structured ReporterConfig."""

from __future__ import annotations

import logging

from ..config import config as env_config
from ..core.config_model import DEFAULT_MIN_OS_VERSION, ReporterConfig
from ..platform_utils import parse_version

logger = logging.getLogger(__name__)


def load_reporter_config(source=None) -> ReporterConfig:
    source = source or env_config
    min_version = parse_version(source.MIN_OS_VERSION)
    if min_version is None:
        default = ".".join(str(part) for part in DEFAULT_MIN_OS_VERSION)
        logger.warning(f"Invalid SIPCONFIG_MIN_OS_VERSION {source.MIN_OS_VERSION!r}, using {default}")
        min_version = DEFAULT_MIN_OS_VERSION
    return ReporterConfig(
        min_os_version=min_version,
        nvram_path=source.NVRAM_PATH,
        nvram_key=source.NVRAM_KEY,
    )
