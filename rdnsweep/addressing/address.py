"""
IPv4 address <-> integer conversion
"""

import ipaddress

from ..errors import InvalidAddress


MAX_ADDRESS = 0xFFFFFFFF


def numberize(text: str) -> int:
    """
    Turn a dotted-decimal IPv4 address into a host-order integer.

    Args:
        text: Address such as "192.168.4.17"

    Returns:
        Integer in [0, 2**32 - 1]

    Raises:
        InvalidAddress: text is not a four-octet IPv4 literal
    """
    if not isinstance(text, str):
        raise InvalidAddress(str(text))

    try:
        return int(ipaddress.IPv4Address(text))
    except (ipaddress.AddressValueError, ValueError):
        raise InvalidAddress(text) from None


def denumberize(address: int) -> str:
    """Format a host-order integer as dotted decimal"""
    if not 0 <= address <= MAX_ADDRESS:
        raise ValueError(f"{address} is outside the IPv4 address space")
    return str(ipaddress.IPv4Address(address))


def canonical(text: str) -> str:
    """Canonical presentation of an IPv4 literal"""
    return denumberize(numberize(text))


def octet(address: int, index: int) -> int:
    """Octet `index` (0 = most significant) of an address"""
    return (address >> (8 * (3 - index))) & 0xFF
