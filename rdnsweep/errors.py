"""
Exception hierarchy for rdnsweep
"""


class RdnsweepError(Exception):
    """Base class for all rdnsweep errors"""


class ConfigurationError(RdnsweepError, ValueError):
    """Invalid input detected before any query is submitted"""


class InvalidAddress(ConfigurationError):
    """Text is not a dotted-decimal IPv4 literal"""

    def __init__(self, text: str):
        self.text = text
        super().__init__(f"bad IP address '{text}'")


class InvalidPrefix(ConfigurationError):
    """CIDR prefix length missing, non-numeric or outside 0-32"""


class MisalignedSubnet(ConfigurationError):
    """CIDR base address has host bits set"""


class RangeOrderError(ConfigurationError):
    """Start address is greater than end address"""


class InvalidIncrement(ConfigurationError):
    """Increment is not a positive integer"""


class InvalidExclusion(ConfigurationError):
    """Malformed per-octet exclusion specification"""


class ResolverInitError(RdnsweepError):
    """The resolver could not be initialized"""


class SubmissionError(RdnsweepError):
    """A single query could not be handed to the resolver"""

    def __init__(self, address: int, reason: str):
        self.address = address
        self.reason = reason
        super().__init__(reason)
