"""sipconfig - Report macOS System Integrity Protection configuration flags"""

__version__ = "1.0.0"
__description__ = "Report macOS System Integrity Protection configuration flags"

__all__ = ["main", "generate_sip_config", "__version__"]


def __getattr__(name: str):
    """Lazy import so that importing sipconfig.core does not load the ctypes adapters.

    The adapters touch IOKit and libSystem only when used, but keeping them
    out of the package import path lets the core be used on any platform.
    """
    if name == "generate_sip_config":
        from .main import generate_sip_config

        return generate_sip_config
    if name == "main":
        from .main import main

        return main
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
