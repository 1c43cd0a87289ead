"""I/O registry property store adapter (IOKit + CoreFoundation via ctypes).

Provides the PropertyStore port on macOS. On other platforms the frameworks
cannot be loaded and open() returns None, which the NVRAM reader reports as
a store failure.
"""

from __future__ import annotations

import ctypes
import logging

logger = logging.getLogger(__name__)

IOKIT_PATH = "/System/Library/Frameworks/IOKit.framework/IOKit"
CORE_FOUNDATION_PATH = "/System/Library/Frameworks/CoreFoundation.framework/CoreFoundation"

MACH_PORT_NULL = 0
KERN_SUCCESS = 0
kIOMainPortDefault = MACH_PORT_NULL
kCFStringEncodingUTF8 = 0x08000100


class _Frameworks:
    """ctypes bindings for the handful of IOKit/CF calls used here."""

    def __init__(self, iokit_path: str = IOKIT_PATH, cf_path: str = CORE_FOUNDATION_PATH):
        iokit = ctypes.CDLL(iokit_path)
        cf = ctypes.CDLL(cf_path)

        iokit.IORegistryEntryFromPath.argtypes = [ctypes.c_uint32, ctypes.c_char_p]
        iokit.IORegistryEntryFromPath.restype = ctypes.c_uint32
        iokit.IORegistryEntryCreateCFProperties.argtypes = [
            ctypes.c_uint32,
            ctypes.POINTER(ctypes.c_void_p),
            ctypes.c_void_p,
            ctypes.c_uint32,
        ]
        iokit.IORegistryEntryCreateCFProperties.restype = ctypes.c_int
        iokit.IOObjectRelease.argtypes = [ctypes.c_uint32]
        iokit.IOObjectRelease.restype = ctypes.c_int

        cf.CFStringCreateWithCString.argtypes = [ctypes.c_void_p, ctypes.c_char_p, ctypes.c_uint32]
        cf.CFStringCreateWithCString.restype = ctypes.c_void_p
        cf.CFDictionaryGetValueIfPresent.argtypes = [
            ctypes.c_void_p,
            ctypes.c_void_p,
            ctypes.POINTER(ctypes.c_void_p),
        ]
        cf.CFDictionaryGetValueIfPresent.restype = ctypes.c_ubyte
        cf.CFGetTypeID.argtypes = [ctypes.c_void_p]
        cf.CFGetTypeID.restype = ctypes.c_ulong
        cf.CFDataGetTypeID.argtypes = []
        cf.CFDataGetTypeID.restype = ctypes.c_ulong
        cf.CFDataGetLength.argtypes = [ctypes.c_void_p]
        cf.CFDataGetLength.restype = ctypes.c_long
        cf.CFDataGetBytePtr.argtypes = [ctypes.c_void_p]
        cf.CFDataGetBytePtr.restype = ctypes.c_void_p
        cf.CFRelease.argtypes = [ctypes.c_void_p]
        cf.CFRelease.restype = None

        self.iokit = iokit
        self.cf = cf


class _RegistryEntry:
    def __init__(self, entry: int):
        self.entry = entry


class CFPropertyDictionary:
    """PropertyDictionary over a CFDictionaryRef owned by the caller."""

    def __init__(self, frameworks: _Frameworks, ref: int):
        self._fw = frameworks
        self.ref = ref

    def get_if_present(self, key: str):
        cf = self._fw.cf
        cf_key = cf.CFStringCreateWithCString(None, key.encode("utf-8"), kCFStringEncodingUTF8)
        if not cf_key:
            raise OSError(f"could not create CFString for {key!r}")
        try:
            value = ctypes.c_void_p()
            if not cf.CFDictionaryGetValueIfPresent(self.ref, cf_key, ctypes.byref(value)):
                return None
            # Borrowed reference, valid while the dictionary is alive
            return value.value
        finally:
            cf.CFRelease(cf_key)

    def is_bytes(self, value) -> bool:
        cf = self._fw.cf
        return cf.CFGetTypeID(value) == cf.CFDataGetTypeID()

    def get_bytes(self, value) -> bytes:
        cf = self._fw.cf
        length = cf.CFDataGetLength(value)
        if length <= 0:
            return b""
        return ctypes.string_at(cf.CFDataGetBytePtr(value), length)


class IOKitPropertyStore:
    """PropertyStore port backed by the macOS I/O registry."""

    def __init__(self, frameworks: _Frameworks | None = None):
        self._fw = frameworks
        self._load_failed = False

    def _frameworks(self) -> _Frameworks | None:
        if self._fw is None and not self._load_failed:
            try:
                self._fw = _Frameworks()
            except OSError as e:
                logger.debug(f"IOKit unavailable: {e}")
                self._load_failed = True
        return self._fw

    def open(self, path: str) -> _RegistryEntry | None:
        fw = self._frameworks()
        if fw is None:
            return None
        entry = fw.iokit.IORegistryEntryFromPath(kIOMainPortDefault, path.encode("utf-8"))
        if entry == MACH_PORT_NULL:
            return None
        return _RegistryEntry(entry)

    def get_properties(self, handle: _RegistryEntry) -> CFPropertyDictionary | None:
        fw = self._frameworks()
        properties = ctypes.c_void_p()
        kr = fw.iokit.IORegistryEntryCreateCFProperties(
            handle.entry, ctypes.byref(properties), None, 0
        )
        if kr != KERN_SUCCESS:
            logger.debug(f"IORegistryEntryCreateCFProperties returned {kr}")
            return None
        if not properties.value:
            return None
        return CFPropertyDictionary(fw, properties.value)

    def release(self, obj) -> None:
        fw = self._frameworks()
        if fw is None or obj is None:
            return
        if isinstance(obj, _RegistryEntry):
            fw.iokit.IOObjectRelease(obj.entry)
        elif isinstance(obj, CFPropertyDictionary):
            fw.cf.CFRelease(obj.ref)
