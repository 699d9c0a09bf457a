"""
Lazy address producer for a sweep
"""

import logging
from typing import Optional

from .address import denumberize
from .address_range import AddressRange
from .exclusion import ExclusionTable


logger = logging.getLogger(__name__)


class RangeIterator:
    """
    Pull-based iterator over the addresses of an AddressRange.

    Yields start, start + increment, ... up to end, leaving out
    addresses matched by the exclusion table. An excluded block is
    stepped over in a single jump to the first lattice point past it,
    so excluding a /8 costs one check rather than sixteen million.
    Not restartable.
    """

    def __init__(self, address_range: AddressRange,
                 exclusions: Optional[ExclusionTable] = None):
        self.range = address_range
        self.exclusions = exclusions or ExclusionTable()
        self._next: Optional[int] = address_range.start
        self.visited = 0
        self.skipped_blocks = 0

    def __iter__(self):
        return self

    def __next__(self) -> int:
        while self._next is not None:
            candidate = self._next
            distance = self.exclusions.matches(candidate) if self.exclusions else None

            if distance is None:
                self._next = self._lattice_after(candidate)
                self.visited += 1
                return candidate

            block_end = candidate | distance
            self.skipped_blocks += 1
            logger.debug(
                "Skipping excluded block %s-%s",
                denumberize(candidate & ~distance & 0xFFFFFFFF), denumberize(block_end)
            )
            self._next = self._lattice_after(block_end)

        raise StopIteration

    @property
    def exhausted(self) -> bool:
        return self._next is None

    def _lattice_after(self, address: int) -> Optional[int]:
        """First start + k*increment strictly greater than address, within range"""
        start, increment = self.range.start, self.range.increment
        steps = (address - start) // increment + 1
        following = start + steps * increment
        return following if following <= self.range.end else None
