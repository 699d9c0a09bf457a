"""
Output modules for rdnsweep
"""

from .reporter import ResultReporter

__all__ = ['ResultReporter']
