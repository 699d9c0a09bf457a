"""
Bounded-concurrency query scheduler
"""

import logging
from typing import Iterator

from .addressing import denumberize
from .errors import ConfigurationError, SubmissionError
from .models import DEFAULT_MAX_IN_FLIGHT, ErrorKind, QueryResult
from .output import ResultReporter
from .resolver import BaseResolver


logger = logging.getLogger(__name__)


class QueryScheduler:
    """
    Feeds addresses to a resolver without ever exceeding max_in_flight
    outstanding queries.

    Each loop iteration submits at most one address, then waits on the
    resolver and dispatches whatever completed. While there is room
    for more queries the wait does not block, so a slow lookup never
    holds up the next submission; once the limit is reached (or the
    addresses run out) the wait blocks until the resolver's next
    deadline. Results are reported in completion order.
    """

    def __init__(self, resolver: BaseResolver, reporter: ResultReporter,
                 max_in_flight: int = DEFAULT_MAX_IN_FLIGHT):
        if not isinstance(max_in_flight, int) or max_in_flight < 1:
            raise ConfigurationError(
                f"max in-flight queries must be a positive integer, got {max_in_flight!r}"
            )

        self.resolver = resolver
        self.reporter = reporter
        self.max_in_flight = max_in_flight
        self.in_flight = 0
        self.peak_in_flight = 0
        self.submitted = 0
        self.completed = 0
        self.failed_submissions = 0

    async def run(self, addresses: Iterator[int]):
        """
        Resolve every address the iterator produces.

        Returns once the iterator is exhausted and every submitted
        query has been reported.
        """
        exhausted = False

        while not exhausted or self.in_flight:
            if not exhausted and self.in_flight < self.max_in_flight:
                address = next(addresses, None)
                if address is None:
                    exhausted = True
                    logger.debug("Address range exhausted, draining %d queries", self.in_flight)
                else:
                    self._submit(address)

            if self.in_flight:
                admitting = not exhausted and self.in_flight < self.max_in_flight
                timeout = 0 if admitting else self.resolver.next_timeout()
                await self.resolver.wait_for_events(timeout)
                self._dispatch()

        logger.debug(
            "Sweep finished: submitted=%d completed=%d failed_submissions=%d peak_in_flight=%d",
            self.submitted, self.completed, self.failed_submissions, self.peak_in_flight
        )

    def _submit(self, address: int):
        try:
            self.resolver.submit(address)
        except SubmissionError as e:
            self.failed_submissions += 1
            logger.warning("%s: unable to submit query: %s", denumberize(address), e.reason)
            self.reporter.report(QueryResult.failed(address, ErrorKind.UNCLASSIFIED))
            return

        self.submitted += 1
        self.in_flight += 1
        self.peak_in_flight = max(self.peak_in_flight, self.in_flight)

    def _dispatch(self):
        """Report every query the resolver has finished"""
        for handle in self.resolver.process_events():
            self.in_flight -= 1
            self.completed += 1
            self.reporter.report(handle.result())
