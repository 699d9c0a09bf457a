"""
Resolver channels for rdnsweep
"""

from .base import BaseResolver
from .ptr_resolver import PTRResolver, classify_error

__all__ = ['BaseResolver', 'PTRResolver', 'classify_error']
