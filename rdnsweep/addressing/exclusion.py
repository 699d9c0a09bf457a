"""
Per-octet exclusion filter
"""

import re
from typing import Iterable, Optional

from ..errors import InvalidExclusion
from .address import octet


# Distance past the start of the block containing a match, per octet position
SKIP_DISTANCES = (
    (1 << 24) - 1,  # /8
    (1 << 16) - 1,  # /16
    (1 << 8) - 1,   # /24
    0,              # single address
)

_NUMBER = re.compile(r'\d+')


class ExclusionTable:
    """
    Set of (octet position, octet value) pairs to leave out of a sweep.

    A specification like "10..4,7." excludes every address whose first
    octet is 10 and every address whose third octet is 4 or 7. The
    highest-order matching octet decides how much of the address space
    is skipped: a match on the first octet prunes the whole /8.
    """

    def __init__(self, entries: Iterable[tuple[int, int]] = ()):
        self.entries = frozenset(entries)
        for index, value in self.entries:
            if not 0 <= index <= 3 or not 0 <= value <= 255:
                raise InvalidExclusion(f"invalid exclusion entry ({index}, {value})")

    @classmethod
    def parse(cls, spec: str) -> 'ExclusionTable':
        """
        Build a table from an "o0.o1.o2.o3" specification.

        Each field may hold any number of decimal values separated by
        any non-digit character; an empty field excludes nothing.
        """
        fields = spec.split('.')
        if len(fields) > 4:
            raise InvalidExclusion(
                f"exclusion '{spec}' has {len(fields)} fields, at most 4 allowed"
            )

        entries = set()
        for index, text in enumerate(fields):
            for number in _NUMBER.findall(text):
                value = int(number)
                if value > 255:
                    raise InvalidExclusion(
                        f"exclusion '{spec}': {value} is not a valid octet value"
                    )
                entries.add((index, value))

        return cls(entries)

    def matches(self, address: int) -> Optional[int]:
        """
        Check an address against the table.

        Returns:
            Skip distance measured from the start of the excluded block
            (see SKIP_DISTANCES), or None if the address is not excluded
        """
        for index in range(4):
            if (index, octet(address, index)) in self.entries:
                return SKIP_DISTANCES[index]
        return None

    def __bool__(self) -> bool:
        return bool(self.entries)

    def __repr__(self) -> str:
        return f"ExclusionTable({sorted(self.entries)})"
