import pytest

from rdnsweep.addressing import AddressRange, canonical, denumberize, numberize
from rdnsweep.addressing.address import octet
from rdnsweep.errors import (
    ConfigurationError,
    InvalidAddress,
    InvalidIncrement,
    InvalidPrefix,
    MisalignedSubnet,
    RangeOrderError,
)


@pytest.mark.parametrize("text, number", [
    ("0.0.0.0", 0),
    ("0.0.0.1", 1),
    ("10.0.0.0", 0x0A000000),
    ("192.168.4.17", 0xC0A80411),
    ("255.255.255.255", 0xFFFFFFFF),
])
def test_numberize_and_back(text, number):
    assert numberize(text) == number
    assert denumberize(number) == text
    assert canonical(text) == text


@pytest.mark.parametrize("text", [
    "", "10.0.0", "10.0.0.256", "10.0.0.0.1", "a.b.c.d", " 10.0.0.1", "10.0.0.-1", "::1",
])
def test_numberize_rejects_non_ipv4(text):
    with pytest.raises(InvalidAddress):
        numberize(text)


def test_invalid_address_is_a_configuration_error():
    with pytest.raises(ConfigurationError):
        numberize("300.1.1.1")


def test_denumberize_out_of_range():
    with pytest.raises(ValueError):
        denumberize(1 << 32)
    with pytest.raises(ValueError):
        denumberize(-1)


def test_formatting_is_independent_per_call():
    # Two live formatted strings never share storage
    first, second = denumberize(1), denumberize(2)
    assert (first, second) == ("0.0.0.1", "0.0.0.2")


def test_octet_indexes_from_most_significant():
    address = numberize("192.168.4.17")
    assert [octet(address, i) for i in range(4)] == [192, 168, 4, 17]


class TestFromCidr:

    def test_slash_24(self):
        r = AddressRange.from_cidr("192.168.4.0", 24)
        assert denumberize(r.start) == "192.168.4.0"
        assert denumberize(r.end) == "192.168.4.255"
        assert len(r) == 256

    @pytest.mark.parametrize("base, prefix", [
        ("0.0.0.0", 0),
        ("10.0.0.0", 8),
        ("172.16.0.0", 12),
        ("192.168.0.0", 16),
        ("192.168.4.128", 25),
        ("192.168.4.17", 32),
    ])
    def test_end_minus_start(self, base, prefix):
        r = AddressRange.from_cidr(base, prefix)
        assert r.end - r.start == 2 ** (32 - prefix) - 1

    def test_whole_address_space(self):
        r = AddressRange.from_cidr("0.0.0.0", 0)
        assert (r.start, r.end) == (0, 0xFFFFFFFF)

    @pytest.mark.parametrize("base, prefix", [
        ("10.0.0.1", 24),
        ("10.0.1.0", 16),
        ("192.168.4.17", 31),
        ("0.0.0.1", 0),
    ])
    def test_misaligned_base_rejected(self, base, prefix):
        with pytest.raises(MisalignedSubnet):
            AddressRange.from_cidr(base, prefix)

    @pytest.mark.parametrize("prefix", [-1, 33, 64])
    def test_prefix_out_of_range(self, prefix):
        with pytest.raises(InvalidPrefix):
            AddressRange.from_cidr("10.0.0.0", prefix)

    def test_bad_base(self):
        with pytest.raises(InvalidAddress):
            AddressRange.from_cidr("10.0.0", 24)

    def test_token(self):
        r = AddressRange.from_cidr_token("10.1.0.0/16", increment=2)
        assert r == AddressRange(numberize("10.1.0.0"), numberize("10.1.255.255"), 2)

    @pytest.mark.parametrize("token", [
        "10.0.0.0", "10.0.0.0/", "10.0.0.0/x", "10.0.0.0/24/1", "10.0.0.0/²", "10.0.0.0/-8",
    ])
    def test_token_without_prefix(self, token):
        with pytest.raises(InvalidPrefix):
            AddressRange.from_cidr_token(token)

    def test_token_misaligned(self):
        with pytest.raises(MisalignedSubnet):
            AddressRange.from_cidr_token("10.0.0.1/24")


class TestFromPair:

    def test_pair(self):
        r = AddressRange.from_pair("10.0.0.2", "10.0.0.5")
        assert (r.start, r.end, r.increment) == (numberize("10.0.0.2"), numberize("10.0.0.5"), 1)
        assert len(r) == 4

    def test_single_address(self):
        r = AddressRange.from_pair("10.0.0.2", "10.0.0.2")
        assert len(r) == 1

    def test_reversed_pair(self):
        with pytest.raises(RangeOrderError):
            AddressRange.from_pair("10.0.0.5", "10.0.0.2")

    @pytest.mark.parametrize("first, last", [("10.0.0.x", "10.0.0.5"), ("10.0.0.1", "")])
    def test_bad_endpoint(self, first, last):
        with pytest.raises(InvalidAddress):
            AddressRange.from_pair(first, last)


@pytest.mark.parametrize("increment", [0, -1])
def test_non_positive_increment(increment):
    with pytest.raises(InvalidIncrement):
        AddressRange.from_pair("10.0.0.0", "10.0.0.9", increment=increment)


def test_len_and_str_follow_increment():
    r = AddressRange.from_pair("10.0.0.0", "10.0.0.10", increment=3)
    assert len(r) == 4
    assert str(r) == "10.0.0.0-10.0.0.10 step 3"
