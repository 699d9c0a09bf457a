"""
Validated IPv4 address ranges
"""

from dataclasses import dataclass

from ..errors import (
    InvalidIncrement,
    InvalidPrefix,
    MisalignedSubnet,
    RangeOrderError,
)
from .address import denumberize, numberize


@dataclass(frozen=True)
class AddressRange:
    """
    Inclusive interval of IPv4 addresses walked with a fixed step.

    Build one with from_cidr() or from_pair(); both validate their
    input and raise a ConfigurationError subclass on failure.
    """
    start: int
    end: int
    increment: int = 1

    def __post_init__(self):
        if not isinstance(self.increment, int) or self.increment < 1:
            raise InvalidIncrement(
                f"increment must be a positive integer, got {self.increment!r}"
            )
        if self.start > self.end:
            raise RangeOrderError(
                f"start address {denumberize(self.start)} must not be greater "
                f"than end address {denumberize(self.end)}"
            )

    @classmethod
    def from_cidr(cls, base: str, prefix_len: int, increment: int = 1) -> 'AddressRange':
        """
        Range covering the CIDR block base/prefix_len.

        The base must sit on the subnet boundary: 10.0.0.0/24 is
        accepted, 10.0.0.1/24 is rejected rather than truncated.
        """
        start = numberize(base)

        if not isinstance(prefix_len, int) or not 0 <= prefix_len <= 32:
            raise InvalidPrefix(
                f"CIDR prefix length must be between 0 and 32, got {prefix_len!r}"
            )

        size = 1 << (32 - prefix_len)
        if start & (size - 1):
            raise MisalignedSubnet(
                f"CIDR base address {base} doesn't start at a /{prefix_len} subnet boundary"
            )

        return cls(start=start, end=start + size - 1, increment=increment)

    @classmethod
    def from_cidr_token(cls, token: str, increment: int = 1) -> 'AddressRange':
        """Parse an 'address/prefix' command-line token"""
        base, sep, prefix = token.partition('/')
        if not sep or not prefix.isdecimal():
            raise InvalidPrefix(f"'{token}' is not a CIDR block (expected address/prefix)")
        return cls.from_cidr(base, int(prefix), increment=increment)

    @classmethod
    def from_pair(cls, first: str, last: str, increment: int = 1) -> 'AddressRange':
        """Range from an explicit start and end address"""
        return cls(start=numberize(first), end=numberize(last), increment=increment)

    def __len__(self) -> int:
        return (self.end - self.start) // self.increment + 1

    def __str__(self) -> str:
        text = f"{denumberize(self.start)}-{denumberize(self.end)}"
        if self.increment != 1:
            text += f" step {self.increment}"
        return text
