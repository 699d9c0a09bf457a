"""
Address range production for rdnsweep
"""

from .address import numberize, denumberize, canonical
from .address_range import AddressRange
from .exclusion import ExclusionTable
from .iterator import RangeIterator

__all__ = [
    'numberize', 'denumberize', 'canonical',
    'AddressRange', 'ExclusionTable', 'RangeIterator',
]
