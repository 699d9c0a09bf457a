import asyncio
import logging
import sys
from typing import Optional

import click
from rich.console import Console

from . import __version__
from .addressing import AddressRange, ExclusionTable, RangeIterator
from .errors import ConfigurationError, ResolverInitError
from .logging_config import setup_logging
from .models import DEFAULT_MAX_IN_FLIGHT, DEFAULT_TIMEOUT, ResolverConfig
from .output import ResultReporter
from .resolver import PTRResolver
from .scheduler import QueryScheduler


console = Console(stderr=True, highlight=False, soft_wrap=True)
logger = logging.getLogger(__name__)

# Replaced in tests with a scripted resolver
RESOLVER_FACTORY = PTRResolver


def build_range(addresses: tuple[str, ...], increment: int) -> AddressRange:
    """Turn the positional arguments into an AddressRange"""
    if len(addresses) == 1:
        return AddressRange.from_cidr_token(addresses[0], increment=increment)
    if len(addresses) == 2:
        return AddressRange.from_pair(addresses[0], addresses[1], increment=increment)
    raise click.UsageError(
        "expected a CIDR block or a start and end address",
        ctx=click.get_current_context()
    )


@click.command()
@click.argument('addresses', nargs=-1, required=True, metavar='CIDR | START END')
@click.option('-i', '--increment', default=1, type=int,
              help='Step between addresses (default: 1)')
@click.option('-m', '--max-queries', default=DEFAULT_MAX_IN_FLIGHT, type=int,
              help=f'Maximum queries in flight (default: {DEFAULT_MAX_IN_FLIGHT})')
@click.option('-e', '--exclude', default=None, metavar='SPEC',
              help='Per-octet exclusions, e.g. "10..4,7." skips 10/8 and x.x.4/24, x.x.7/24')
@click.option('-r', '--no-recursion', is_flag=True,
              help='Do not request recursive resolution')
@click.option('-n', '--nameserver', 'nameservers', multiple=True, metavar='IP',
              help='Nameserver to query (repeatable, default: system resolver)')
@click.option('-t', '--timeout', default=DEFAULT_TIMEOUT, type=float,
              help=f'Seconds before a query gives up (default: {DEFAULT_TIMEOUT:g})')
@click.option('-v', '--verbose', is_flag=True,
              help='Debug logging on stderr')
@click.version_option(version=__version__)
def cli(addresses: tuple[str, ...], increment: int, max_queries: int,
        exclude: Optional[str], no_recursion: bool, nameservers: tuple[str, ...],
        timeout: float, verbose: bool):
    """
    rdnsweep - bulk reverse DNS over an IPv4 range.

    Look up the PTR records of every address in a CIDR block or between
    START and END, printing "<address><TAB><name>" for each answer and
    "<address><TAB><ERROR>" for each failure as lookups complete.

    Examples:

        rdnsweep 192.168.4.0/24

        rdnsweep -m 50 -e "..4." 192.168.0.0/16

        rdnsweep -i 4 10.0.0.0 10.0.3.255
    """
    setup_logging(verbose)
    reporter = ResultReporter(error_console=console)
    resolver = RESOLVER_FACTORY()

    try:
        if increment < 1:
            raise ConfigurationError("increment must be a positive integer")
        if timeout <= 0:
            raise ConfigurationError("timeout must be a positive number of seconds")

        address_range = build_range(addresses, increment)
        exclusions = ExclusionTable.parse(exclude) if exclude else ExclusionTable()
        scheduler = QueryScheduler(resolver, reporter, max_in_flight=max_queries)
        config = ResolverConfig(
            nameservers=list(nameservers),
            timeout=timeout,
            lifetime=timeout,
            recursion=not no_recursion
        )
    except ConfigurationError as e:
        reporter.print_error(str(e))
        sys.exit(1)

    if exclusions and increment != 1:
        logger.debug("Excluded blocks are skipped to the next address on the %d-step grid", increment)

    try:
        resolver.open(config)
    except ResolverInitError as e:
        reporter.print_error(str(e))
        sys.exit(1)

    logger.debug(
        "Sweeping %s (%d addresses before exclusions), max %d queries in flight",
        address_range, len(address_range), max_queries
    )

    try:
        with resolver:
            asyncio.run(scheduler.run(RangeIterator(address_range, exclusions)))
    except KeyboardInterrupt:
        console.print("\n[yellow]Interrupted[/]")
        sys.exit(130)


def main(args: Optional[list[str]] = None):
    """
    Console entry point.

    Usage errors (unknown flag, wrong number of addresses) exit with
    status 1 like every other configuration error.
    """
    try:
        cli.main(args=args, prog_name='rdnsweep', standalone_mode=False)
    except click.ClickException as e:
        e.show()
        sys.exit(1)
    except click.Abort:
        console.print("\n[yellow]Interrupted[/]")
        sys.exit(130)


if __name__ == '__main__':
    main()
