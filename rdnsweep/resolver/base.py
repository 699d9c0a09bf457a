"""
Abstract base class for resolver implementations
"""

import asyncio
from abc import ABC, abstractmethod
from typing import Optional

from ..models import QueryResult, ResolverConfig


class BaseResolver(ABC):
    """
    Non-blocking reverse-lookup channel driven by the QueryScheduler.

    submit() hands back a future per query; the future is resolved
    with a QueryResult once process_events() reports it complete.
    """

    def __init__(self):
        self.config: Optional[ResolverConfig] = None

    @abstractmethod
    def open(self, config: ResolverConfig):
        """
        Initialize the channel.

        Raises:
            ResolverInitError: resolver cannot be used at all
        """
        pass

    @abstractmethod
    def submit(self, address: int) -> 'asyncio.Future[QueryResult]':
        """
        Start a PTR lookup for address.

        Raises:
            SubmissionError: query could not be queued
        """
        pass

    @abstractmethod
    def pending_count(self) -> int:
        """Number of submitted queries not yet returned by process_events()"""
        pass

    @abstractmethod
    def next_timeout(self) -> Optional[float]:
        """
        Seconds until the next internal deadline.

        None means block until the next completion: nothing is pending,
        or the earliest deadline has already passed.
        """
        pass

    @abstractmethod
    async def wait_for_events(self, timeout: Optional[float]) -> bool:
        """Wait up to timeout seconds for activity; True if something completed"""
        pass

    @abstractmethod
    def process_events(self) -> list['asyncio.Future[QueryResult]']:
        """Return handles completed since the last call, in completion order"""
        pass

    @abstractmethod
    def close(self):
        """Clean up resources"""
        pass

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()
        return False
