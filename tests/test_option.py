import pytest

from sdoptions.option import Layer4ProtocolType, Option, OptionType


class _RawOption(Option):
    """Minimal concrete option carrying an opaque body."""

    def __init__(self, option_type, discardable, body):
        super().__init__(option_type, discardable)
        self._body = body

    @property
    def length(self):
        return len(self._body) + 1

    def payload(self):
        return self._base_payload() + self._body


def test_option_is_abstract():
    with pytest.raises(TypeError):
        Option(OptionType.LOAD_BALANCING, False)


def test_type_and_discardable_are_kept():
    option = _RawOption(OptionType(0x24), True, b"")
    assert option.type is OptionType.IPV4_SD_ENDPOINT
    assert option.discardable is True


def test_raw_type_value_is_converted_to_enum():
    option = _RawOption(0x02, 0, b"")
    assert option.type is OptionType(0x02)
    assert option.type is OptionType.LOAD_BALANCING
    assert option.discardable is False


def test_unknown_type_value_is_rejected():
    with pytest.raises(ValueError):
        OptionType(0x99)
    with pytest.raises(ValueError):
        _RawOption(0x99, False, b"")


def test_base_header_layout():
    option = _RawOption(OptionType(0x02), True, b"\xaa\xbb")
    assert Option._base_payload(option) == b"\x00\x03\x02\x01"
    assert option.payload() == b"\x00\x03\x02\x01\xaa\xbb"


def test_payload_length_matches_length_field():
    option = _RawOption(OptionType(0x01), False, bytes(300))
    data = option.payload()
    (length,), offset = Option._unpack(">H", data, 0)
    assert offset == 2
    assert length == option.length
    assert len(data) == option.length + 3


def test_equality_follows_payload():
    first = _RawOption(OptionType(0x01), False, b"\x01")
    same = _RawOption(OptionType(0x01), False, b"\x01")
    other = _RawOption(OptionType(0x01), True, b"\x01")
    assert first == same
    assert hash(first) == hash(same)
    assert (first == other) is False


def test_protocol_values_convert_from_bytes():
    assert Layer4ProtocolType(0x06) is Layer4ProtocolType.TCP
    assert Layer4ProtocolType(0x11) is Layer4ProtocolType.UDP


def test_unpack_reports_truncation():
    with pytest.raises(ValueError):
        Option._unpack(">H", b"\x01", 0)


def test_unpack_advances_offset():
    values, offset = Option._unpack(">HB", b"\x00\x00\x01\x02\x03", 2)
    assert values == (0x0102, 0x03)
    assert offset == 5