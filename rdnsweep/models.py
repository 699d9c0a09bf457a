"""
Data models for rdnsweep
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional


DEFAULT_MAX_IN_FLIGHT = 10
DEFAULT_TIMEOUT = 5.0


class ErrorKind(Enum):
    """Classified per-query failure; the value is the output token"""
    TEMPORARY_FAILURE = "TEMPFAIL"
    PROTOCOL_ERROR = "PROTOERR"
    NAME_NOT_FOUND = "NXDOMAIN"
    NO_DATA = "NODATA"
    OUT_OF_MEMORY = "NOMEM"
    MALFORMED_QUERY = "BADQUERY"
    UNCLASSIFIED = "NOERROR"


@dataclass(frozen=True)
class QueryResult:
    """Outcome of one reverse lookup"""
    address: int
    names: tuple[str, ...] = ()
    error: Optional[ErrorKind] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @classmethod
    def failed(cls, address: int, error: ErrorKind) -> 'QueryResult':
        return cls(address=address, names=(), error=error)


@dataclass
class ResolverConfig:
    """Settings handed to the resolver when it is opened"""
    nameservers: list[str] = field(default_factory=list)
    timeout: float = DEFAULT_TIMEOUT
    lifetime: float = DEFAULT_TIMEOUT
    recursion: bool = True
