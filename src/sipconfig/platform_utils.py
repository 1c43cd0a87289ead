"""Platform detection and macOS version helpers for sipconfig"""

import platform
import sys

IS_MACOS = sys.platform == "darwin"


def parse_version(value: str) -> tuple[int, int] | None:
    """Parse "major.minor[.patch]" into (major, minor).

    A bare major ("14") is read as minor 0. Returns None for anything else.
    """
    parts = value.strip().split(".")
    if not parts or not parts[0]:
        return None
    try:
        major = int(parts[0])
        minor = int(parts[1]) if len(parts) > 1 and parts[1] else 0
    except ValueError:
        return None
    return major, minor


def get_platform_info() -> dict:
    """Get platform information for debug output."""
    return {
        "system": platform.system(),
        "release": platform.release(),
        "mac_ver": platform.mac_ver()[0],
        "machine": platform.machine(),
        "python_version": platform.python_version(),
        "is_macos": IS_MACOS,
    }
