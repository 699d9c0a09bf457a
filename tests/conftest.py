import asyncio

import pytest

from rdnsweep.addressing import denumberize
from rdnsweep.errors import ResolverInitError, SubmissionError
from rdnsweep.models import ErrorKind, QueryResult
from rdnsweep.resolver import BaseResolver


class FakeResolver(BaseResolver):
    """
    Scripted resolver for scheduler and CLI tests.

    Nothing completes during a non-blocking wait. A blocking wait
    completes every pending query at once, newest first, so results
    come back in a different order than they were submitted.
    """

    DEADLINE = 1.0

    def __init__(self, outcomes=None, reject=(), reverse=True, fail_open=False):
        super().__init__()
        self.outcomes = outcomes or {}
        self.reject = set(reject)
        self.reverse = reverse
        self.fail_open = fail_open
        self.opened = False
        self.closed = False
        self.submitted: list[int] = []
        self.waits: list = []
        self.peak_pending = 0
        self._pending: list = []
        self._completed: list = []

    def open(self, config):
        if self.fail_open:
            raise ResolverInitError("unable to initialize dns library")
        self.config = config
        self.opened = True

    def submit(self, address):
        if denumberize(address) in self.reject:
            raise SubmissionError(address, "queue full")
        future = asyncio.get_running_loop().create_future()
        self.submitted.append(address)
        self._pending.append((address, future))
        self.peak_pending = max(self.peak_pending, len(self._pending))
        return future

    def pending_count(self):
        return len(self._pending) + len(self._completed)

    def next_timeout(self):
        return self.DEADLINE if self._pending else None

    async def wait_for_events(self, timeout):
        await asyncio.sleep(0)
        self.waits.append(timeout)
        if timeout == 0 or not self._pending:
            return False

        batch = list(reversed(self._pending)) if self.reverse else list(self._pending)
        self._pending.clear()
        for address, future in batch:
            future.set_result(self._outcome(address))
            self._completed.append(future)
        return True

    def process_events(self):
        completed, self._completed = self._completed, []
        return completed

    def close(self):
        self.closed = True

    def _outcome(self, address):
        text = denumberize(address)
        outcome = self.outcomes.get(text, (f"host-{text.replace('.', '-')}.example",))
        if isinstance(outcome, ErrorKind):
            return QueryResult.failed(address, outcome)
        return QueryResult(address=address, names=tuple(outcome))


@pytest.fixture
def fake_resolver():
    return FakeResolver()
