"""
PTR (reverse DNS) resolver backed by dnspython
"""

import asyncio
import logging
import time
from collections import deque
from typing import Optional

import dns.asyncresolver
import dns.exception
import dns.name
import dns.resolver
import dns.reversename

from ..addressing import denumberize
from ..errors import ResolverInitError, SubmissionError
from ..models import ErrorKind, QueryResult, ResolverConfig
from .base import BaseResolver


logger = logging.getLogger(__name__)


# Checked in order; dns.name.NameTooLong is also a FormError, so the
# malformed-query entry has to come before the protocol-error one.
ERROR_KINDS = (
    (dns.resolver.NXDOMAIN, ErrorKind.NAME_NOT_FOUND),
    (dns.resolver.NoAnswer, ErrorKind.NO_DATA),
    ((dns.exception.Timeout, dns.resolver.NoNameservers), ErrorKind.TEMPORARY_FAILURE),
    (MemoryError, ErrorKind.OUT_OF_MEMORY),
    ((dns.exception.SyntaxError, dns.name.NameTooLong), ErrorKind.MALFORMED_QUERY),
    ((dns.exception.FormError, dns.resolver.YXDOMAIN), ErrorKind.PROTOCOL_ERROR),
)


def classify_error(exc: BaseException) -> ErrorKind:
    """Map a resolution failure onto the output error taxonomy"""
    for types, kind in ERROR_KINDS:
        if isinstance(exc, types):
            return kind
    return ErrorKind.UNCLASSIFIED


class PTRResolver(BaseResolver):
    """
    Async PTR record resolver.

    Every submitted address becomes an asyncio task running a
    dns.asyncresolver query. Tasks report themselves on a completion
    queue as they finish, which process_events() drains so the
    scheduler sees results in the order the network produced them.
    Retries and per-query timeouts are left to dnspython.
    """

    def __init__(self):
        super().__init__()
        self._resolver: Optional[dns.asyncresolver.Resolver] = None
        self._deadlines: dict[asyncio.Task, float] = {}
        self._completed: deque[asyncio.Task] = deque()

    def open(self, config: ResolverConfig):
        try:
            resolver = dns.asyncresolver.Resolver(configure=not config.nameservers)
            if config.nameservers:
                resolver.nameservers = list(config.nameservers)
        except (dns.resolver.NoResolverConfiguration, OSError, ValueError) as e:
            raise ResolverInitError(f"unable to initialize dns library: {e}") from e

        resolver.timeout = config.timeout
        resolver.lifetime = config.lifetime
        if not config.recursion:
            # Default query flags are RD only; clearing them asks for no recursion
            resolver.flags = 0

        self.config = config
        self._resolver = resolver
        logger.debug(
            "Resolver ready: nameservers=%s timeout=%.1fs recursion=%s",
            resolver.nameservers, config.lifetime, config.recursion
        )

    def submit(self, address: int) -> asyncio.Task:
        if self._resolver is None:
            raise SubmissionError(address, "resolver is not open")

        try:
            name = dns.reversename.from_address(denumberize(address))
        except (ValueError, dns.exception.SyntaxError) as e:
            raise SubmissionError(address, f"invalid address: {e}") from e

        task = asyncio.get_running_loop().create_task(self._lookup(address, name))
        self._deadlines[task] = time.monotonic() + self.config.lifetime
        task.add_done_callback(self._completed.append)
        return task

    async def _lookup(self, address: int, name: dns.name.Name) -> QueryResult:
        """Run one PTR query and fold any failure into the result"""
        try:
            answer = await self._resolver.resolve(name, 'PTR')
        except Exception as e:
            kind = classify_error(e)
            logger.debug("%s: %s (%s)", denumberize(address), kind.value, type(e).__name__)
            return QueryResult.failed(address, kind)

        names = tuple(rdata.target.to_text(omit_final_dot=True) for rdata in answer)
        return QueryResult(address=address, names=names)

    def pending_count(self) -> int:
        return len(self._deadlines)

    def next_timeout(self) -> Optional[float]:
        if not self._deadlines:
            return None
        remaining = min(self._deadlines.values()) - time.monotonic()
        if remaining > 0:
            return remaining
        # dnspython raises LifetimeTimeout a little after the deadline,
        # so past it the only useful wait is for the next completion
        return None

    async def wait_for_events(self, timeout: Optional[float]) -> bool:
        running = [task for task in self._deadlines if not task.done()]
        if self._completed or len(running) < len(self._deadlines) or not running:
            # Something already finished; still yield so done callbacks run
            # and queries submitted since the last wait get sent
            await asyncio.sleep(0)
            return len(running) < len(self._deadlines)

        done, _ = await asyncio.wait(
            running, timeout=timeout, return_when=asyncio.FIRST_COMPLETED
        )
        return bool(done)

    def process_events(self) -> list[asyncio.Task]:
        completed = []
        while self._completed:
            task = self._completed.popleft()
            if self._deadlines.pop(task, None) is not None:
                completed.append(task)

        # Finished tasks whose done callback has not run yet
        for task in [task for task in self._deadlines if task.done()]:
            del self._deadlines[task]
            completed.append(task)
        return completed

    def close(self):
        """Cancel anything still outstanding"""
        for task in self._deadlines:
            if not task.done():
                task.cancel()
        self._deadlines.clear()
        self._completed.clear()
        self._resolver = None
