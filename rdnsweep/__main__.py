"""
rdnsweep - Bulk Reverse DNS Sweeper

Entry point for running as a module:
    python -m rdnsweep <CIDR | START END>
"""

from .cli import main

if __name__ == '__main__':
    main()
