"""Configuration for sipconfig"""

import os

from dotenv import load_dotenv

load_dotenv()


class Config:
    """Environment-backed settings"""

    DEBUG = os.getenv("SIPCONFIG_DEBUG", "false").lower() == "true"

    # Oldest release that ships System Integrity Protection, "major.minor"
    MIN_OS_VERSION = os.getenv("SIPCONFIG_MIN_OS_VERSION", "10.11")

    # Firmware boot options in the device tree and the persisted CSR word
    NVRAM_PATH = os.getenv("SIPCONFIG_NVRAM_PATH", "IODeviceTree:/options")
    NVRAM_KEY = os.getenv("SIPCONFIG_NVRAM_KEY", "csr-active-config")


config = Config()
