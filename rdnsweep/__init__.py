"""
rdnsweep - Bulk Reverse DNS Sweeper

Asynchronous PTR lookups over IPv4 CIDR blocks and address ranges,
with a bounded number of queries in flight.
"""

__version__ = "1.0.0"
__author__ = "rdnsweep"
