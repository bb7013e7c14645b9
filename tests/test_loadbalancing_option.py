import pytest

from sdoptions.loadbalancing_option import LoadBalancingOption
from sdoptions.option import OptionType


def test_constructor():
    option = LoadBalancingOption(True, 1, 2)
    assert option.discardable is True
    assert option.priority == 1
    assert option.weight == 2
    assert option.type is OptionType.LOAD_BALANCING


def test_length():
    assert LoadBalancingOption(False, 1, 2).length == 5


def test_payload_method():
    option = LoadBalancingOption(False, 1, 2)
    assert option.payload() == bytes([0x00, 0x05, 0x02, 0x00, 0x00, 0x01, 0x00, 0x02])


def test_payload_discardable_option():
    option = LoadBalancingOption(True, 0, 7)
    assert option.payload() == bytes([0x00, 0x05, 0x02, 0x01, 0x00, 0x00, 0x00, 0x07])


def test_deserialize_body():
    original = LoadBalancingOption(False, 1, 2)
    data = original.payload()
    restored, offset = LoadBalancingOption.deserialize(data, 4, False)
    assert restored.priority == original.priority
    assert restored.weight == original.weight
    assert restored.discardable == original.discardable
    assert restored == original
    assert offset == len(data)


def test_deserialize_truncated_body():
    with pytest.raises(ValueError):
        LoadBalancingOption.deserialize(b"\x00\x01\x00", 0, False)


@pytest.mark.parametrize("priority, weight", [(-1, 0), (0, 0x10000)])
def test_out_of_range_fields_rejected(priority, weight):
    with pytest.raises(ValueError):
        LoadBalancingOption(False, priority, weight)