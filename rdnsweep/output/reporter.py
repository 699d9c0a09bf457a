"""
Result and diagnostic output for rdnsweep
"""

from typing import IO, Optional

import click
from rich.console import Console
from rich.markup import escape

from ..addressing import denumberize
from ..models import ErrorKind, QueryResult


class ResultReporter:
    """
    Writes one tab-separated line per returned name, or one line with
    the error token, to stdout as each query completes.

    Lines are emitted in completion order; nothing is buffered or
    sorted. Diagnostics go to a separate rich console on stderr so
    stdout stays machine-readable.
    """

    def __init__(self, stream: Optional[IO[str]] = None,
                 error_console: Optional[Console] = None):
        self.stream = stream
        self.error_console = error_console or Console(stderr=True, highlight=False, soft_wrap=True)
        self.lines = 0
        self.errors = 0

    def report(self, result: QueryResult):
        """Emit the lines for one completed query"""
        address = denumberize(result.address)

        if result.ok and result.names:
            for name in result.names:
                self._emit(f"{address}\t{name}")
            return

        self.errors += 1
        token = (result.error or ErrorKind.UNCLASSIFIED).value
        self._emit(f"{address}\t{token}")

    def _emit(self, line: str):
        click.echo(line, file=self.stream)
        self.lines += 1

    def print_error(self, message: str):
        """Print error message"""
        self.error_console.print(f"[bold red]Error:[/] {escape(message)}")
