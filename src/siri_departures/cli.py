"""Command-line entry point: resolve stops and show their next departures."""

import argparse
import asyncio
import logging
import sys
from collections.abc import Sequence

import aiohttp
from pydantic import ValidationError

from siri_departures import __version__
from siri_departures.adapters.config import AppConfig
from siri_departures.adapters.console import RichStopSelector, print_departures
from siri_departures.adapters.netex import NetexTopologyLoader
from siri_departures.adapters.siri import SiriDepartureRepository
from siri_departures.application.services import StopIndex, create_resolver
from siri_departures.domain.errors import DepartureQueryError, TopologyLoadError
from siri_departures.domain.ports import DepartureRepository, StopSelector, TopologyRepository

logger = logging.getLogger(__name__)


def configure_logging(verbose: bool = False) -> None:
    """Configure logging to stderr."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        stream=sys.stderr,
    )


def _positive_int(value: str) -> int:
    number = int(value)
    if number < 1:
        raise argparse.ArgumentTypeError("must be at least 1")
    return number


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser."""
    parser = argparse.ArgumentParser(
        prog="siri-departures",
        description="Show the next departures at a stop using a SIRI StopMonitoring API",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Search a stop interactively, then show its departures
  siri-departures --find

  # Search a station, then pick some of its quays
  siri-departures --quays

  # Query known stops directly
  siri-departures --stop "FR:Quay:1234" --stop "FR:Quay:5678" --limit 3
        """,
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument(
        "-s",
        "--stop",
        dest="stops",
        action="append",
        metavar="STOP_ID",
        help="Stop identifier to query (repeatable, skips the interactive search)",
    )
    parser.add_argument(
        "-l",
        "--limit",
        type=_positive_int,
        help="Maximum number of departures to show per stop (default: DEPARTURE_LIMIT or 5)",
    )
    mode = parser.add_mutually_exclusive_group()
    mode.add_argument(
        "-f",
        "--find",
        dest="mode",
        action="store_const",
        const="stop",
        help="Search a single stop interactively",
    )
    mode.add_argument(
        "-q",
        "--quays",
        dest="mode",
        action="store_const",
        const="station",
        help="Search a station, then select one or more of its quays",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    return parser


def resolve_stop_ids(
    mode: str, topology: TopologyRepository, selector: StopSelector
) -> list[str]:
    """Load the topology and let the user pick stops.

    Raises:
        TopologyLoadError: If the topology document cannot be read.
    """
    index = StopIndex(topology.load())
    resolver = create_resolver(mode, index, selector)
    return resolver.resolve()


async def fetch_and_print_departures(
    repository: DepartureRepository, stop_ids: Sequence[str], limit: int
) -> None:
    """Query departures for the given stops and print them."""
    results = await repository.get_departures(stop_ids, limit=limit)
    print_departures(results)


async def run(args: argparse.Namespace, config: AppConfig) -> int:
    """Run the CLI with parsed arguments and configuration; returns the exit code."""
    limit = args.limit or config.departure_limit
    stop_ids: list[str] = list(args.stops or [])

    if args.mode or not stop_ids:
        try:
            stop_ids = resolve_stop_ids(
                args.mode or config.resolution_mode,
                NetexTopologyLoader(config.netex_path),
                RichStopSelector(page_size=config.search_page_size),
            )
        except TopologyLoadError as e:
            logger.error(str(e))
            return 1

        if not stop_ids:
            logger.info("No stop selected")
            return 0

    async with aiohttp.ClientSession() as session:
        repository = SiriDepartureRepository(
            session,
            endpoint=config.siri_endpoint,
            dataset_id=config.dataset_id,
            requestor_ref=config.siri_requestor_ref,
            timeout_seconds=config.request_timeout_seconds,
            log_requests=config.log_requests,
        )
        try:
            await fetch_and_print_departures(repository, stop_ids, limit)
        except DepartureQueryError as e:
            logger.error(f"Error fetching departures: {e}")
            return 1

    return 0


async def main(argv: Sequence[str] | None = None) -> int:
    """Main CLI entry point."""
    args = build_parser().parse_args(argv)
    configure_logging(args.verbose)

    try:
        config = AppConfig()
    except ValidationError as e:
        logger.error(
            f"Invalid configuration (check SIRI_ENDPOINT, NETEX_FILE and DATASET_ID):\n{e}"
        )
        return 1

    return await run(args, config)


def cli_main() -> None:
    """CLI entry point for setuptools."""
    sys.exit(asyncio.run(main()))


if __name__ == "__main__":
    cli_main()
