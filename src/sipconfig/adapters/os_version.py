"""OS version adapter backed by platform.mac_ver()."""

from __future__ import annotations

import platform

from ..platform_utils import parse_version


class MacOSVersionProvider:
    def __init__(self, mac_ver=platform.mac_ver):
        self._mac_ver = mac_ver

    def get_os_version(self) -> tuple[int, int] | None:
        release = self._mac_ver()[0]
        if not release:
            return None
        return parse_version(release)
