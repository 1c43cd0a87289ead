from sipconfig.core.nvram import NvramConfigReader, decode_config_word
from sipconfig.core.outcome import ReadStatus
from sipconfig.core.ports import PropertyDictionary, PropertyStore

_MISSING = object()


class _Blob:
    def __init__(self, data: bytes):
        self.data = data


class _Properties(PropertyDictionary):
    def __init__(self, values):
        self.values = values
        self.lookups = []

    def get_if_present(self, key: str):
        self.lookups.append(key)
        return self.values.get(key)

    def is_bytes(self, value) -> bool:
        return isinstance(value, _Blob)

    def get_bytes(self, value) -> bytes:
        return value.data


class _Store(PropertyStore):
    def __init__(self, properties=_MISSING, openable=True, fetch_error=None):
        self.properties = _Properties({}) if properties is _MISSING else properties
        self.openable = openable
        self.fetch_error = fetch_error
        self.opened = []
        self.released = []

    def open(self, path: str):
        self.opened.append(path)
        return ("entry", path) if self.openable else None

    def get_properties(self, handle):
        if self.fetch_error:
            raise self.fetch_error
        return self.properties

    def release(self, obj) -> None:
        self.released.append(obj)


def _store_with(value):
    return _Store(_Properties({"csr-active-config": value}))


def test_decode_is_little_endian():
    assert decode_config_word(b"\x05\x00\x00\x00") == 0x05
    assert decode_config_word(b"\x77\x00\x00\x00") == 0x77
    assert decode_config_word(b"\x00\x01\x00\x00") == 0x100
    assert decode_config_word(b"\xff\xff\xff\xff") == 0xFFFFFFFF


def test_decode_pads_short_and_truncates_long_blobs():
    assert decode_config_word(b"") == 0
    assert decode_config_word(b"\x67") == 0x67
    assert decode_config_word(b"\x01\x02") == 0x0201
    assert decode_config_word(b"\x01\x00\x00\x00\xff\xff") == 0x01


def test_success_releases_handle_and_properties():
    store = _store_with(_Blob(b"\x05\x00\x00\x00"))
    outcome = NvramConfigReader(store).read_persisted_config()

    assert outcome.status is ReadStatus.SUCCESS
    assert outcome.word == 0x05
    assert store.opened == ["IODeviceTree:/options"]
    assert store.released == [("entry", "IODeviceTree:/options"), store.properties]


def test_missing_key_is_not_found():
    store = _Store()
    outcome = NvramConfigReader(store).read_persisted_config()

    assert outcome.status is ReadStatus.NOT_FOUND
    assert outcome.word is None
    assert not outcome.ok
    assert len(store.released) == 2


def test_open_failure_is_error():
    store = _Store(openable=False)
    outcome = NvramConfigReader(store).read_persisted_config()

    assert outcome.status is ReadStatus.ERROR
    assert outcome.detail == "could not open property store"
    assert store.released == []


def test_missing_properties_is_error_and_releases_handle():
    store = _Store(properties=None)
    outcome = NvramConfigReader(store).read_persisted_config()

    assert outcome.status is ReadStatus.ERROR
    assert store.released == [("entry", "IODeviceTree:/options")]


def test_property_fetch_exception_is_error():
    store = _Store(fetch_error=OSError("kern failure"))
    outcome = NvramConfigReader(store).read_persisted_config()

    assert outcome.status is ReadStatus.ERROR
    assert store.released == [("entry", "IODeviceTree:/options")]


def test_wrong_type_is_error_and_still_releases():
    store = _store_with("not a blob")
    outcome = NvramConfigReader(store).read_persisted_config()

    assert outcome.status is ReadStatus.ERROR
    assert "unexpected data type" in outcome.detail
    assert store.released == [("entry", "IODeviceTree:/options"), store.properties]


def test_custom_path_and_key():
    store = _Store(_Properties({"csr-test": _Blob(b"\x10")}))
    reader = NvramConfigReader(store, path="IODeviceTree:/test", key="csr-test")
    outcome = reader.read_persisted_config()

    assert outcome.word == 0x10
    assert store.opened == ["IODeviceTree:/test"]
    assert store.properties.lookups == ["csr-test"]


class _RaisingProperties(_Properties):
    def get_if_present(self, key: str):
        raise OSError("could not create CFString")


def test_lookup_exception_is_error_and_still_releases():
    store = _Store(_RaisingProperties({}))
    outcome = NvramConfigReader(store).read_persisted_config()

    assert outcome.status is ReadStatus.ERROR
    assert outcome.detail == "could not read csr-active-config"
    assert store.released == [("entry", "IODeviceTree:/options"), store.properties]
