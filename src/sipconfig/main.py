#!/usr/bin/env python3
"""sipconfig: print the System Integrity Protection configuration as JSON rows"""

import json
import logging
import sys

from .adapters.config_env import load_reporter_config
from .adapters.csr import LibSystemCSR
from .adapters.iokit import IOKitPropertyStore
from .adapters.os_version import MacOSVersionProvider
from .config import config
from .core.config_model import ReporterConfig
from .core.live import LiveConfigReader
from .core.nvram import NvramConfigReader
from .core.ports import LiveCSR, OSVersionProvider, PropertyStore
from .core.reconciler import SIPConfigReporter
from .platform_utils import get_platform_info


def generate_sip_config(
    os_version: OSVersionProvider | None = None,
    csr: LiveCSR | None = None,
    store: PropertyStore | None = None,
    reporter_config: ReporterConfig | None = None,
) -> list[dict]:
    """Build the default macOS adapters (unless overridden) and return the rows."""
    reporter_config = reporter_config or load_reporter_config()
    reporter = SIPConfigReporter(
        os_version=os_version or MacOSVersionProvider(),
        live=LiveConfigReader(csr or LibSystemCSR()),
        nvram=NvramConfigReader(
            store or IOKitPropertyStore(),
            path=reporter_config.nvram_path,
            key=reporter_config.nvram_key,
        ),
        config=reporter_config,
    )
    return reporter.generate()


def main(out=None):
    out = out or sys.stdout
    logging.basicConfig(
        level=logging.DEBUG if config.DEBUG else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    logger = logging.getLogger("sipconfig")
    logger.debug(f"Platform: {get_platform_info()}")

    rows = generate_sip_config()
    if not rows:
        logger.info("No SIP configuration available on this platform")
    for row in rows:
        out.write(json.dumps(row) + "\n")
    return 0


if __name__ == "__main__":
    sys.exit(main())
