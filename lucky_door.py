#!/usr/bin/env python3
"""
Lucky Door prize generator.

Fetches the attendees of a Meetup event, spins through their profile photos
in the terminal and picks a winner. Press Enter to disqualify the winner and
re-roll, or type "q" to finish.
"""

import argparse
import asyncio
import logging
import sys

import aiohttp

from raffle.attendee_pool import EmptyPoolError
from raffle.config import RaffleConfig
from raffle.display import ProfileDisplay
from raffle.loader import AttendeeLoader
from raffle.prompt import LineReader, confirm_limited_entrees, read_stdin_line
from raffle.session import RaffleSession

LOG_FILE = "lucky_door.log"


def parse_args(argv: list[str] | None = None) -> RaffleConfig:
    defaults = RaffleConfig()
    parser = argparse.ArgumentParser(
        description="Pick a lucky door prize winner from a Meetup event's attendees."
    )
    parser.add_argument(
        "--max-entrees",
        type=int,
        default=defaults.max_entrees,
        help="Only enter this many attendees, for testing (default: everyone)",
    )
    parser.add_argument(
        "--rounds",
        type=int,
        default=defaults.rounds,
        help=f"Passes through the attendee list for the first spin (default: {defaults.rounds})",
    )
    parser.add_argument(
        "--interval",
        type=int,
        default=defaults.interval_ms,
        help=f"Milliseconds each profile is shown while spinning (default: {defaults.interval_ms})",
    )
    parser.add_argument(
        "--max-spin-time",
        type=int,
        default=defaults.max_spin_time_ms,
        help=f"Longest first spin in milliseconds (default: {defaults.max_spin_time_ms})",
    )
    parser.add_argument(
        "--max-reroll-spin-time",
        type=int,
        default=defaults.max_reroll_spin_time_ms,
        help=f"Longest spin in milliseconds after a winner is removed (default: {defaults.max_reroll_spin_time_ms})",
    )
    parser.add_argument(
        "--no-images",
        action="store_true",
        help="Text-only mode, use this if downloading images goes terribly wrong",
    )
    args = parser.parse_args(argv)

    try:
        return RaffleConfig(
            max_entrees=args.max_entrees,
            rounds=args.rounds,
            interval_ms=args.interval,
            max_spin_time_ms=args.max_spin_time,
            max_reroll_spin_time_ms=args.max_reroll_spin_time,
            show_images=not args.no_images,
        )
    except ValueError as e:
        parser.error(str(e))


async def main(
    config: RaffleConfig,
    read_line: LineReader = read_stdin_line,
    display: ProfileDisplay | None = None,
) -> None:
    display = display or ProfileDisplay(show_images=config.show_images)

    if not await confirm_limited_entrees(config.max_entrees, display, read_line):
        logging.info("Operator declined limited entrees mode")
        sys.exit(0)

    # No timeout: a hung Meetup API hangs the raffle
    async with aiohttp.ClientSession(timeout=aiohttp.ClientTimeout(total=None)) as http:
        loader = AttendeeLoader(http, display, show_images=config.show_images)
        pool = await loader.load(config.max_entrees)

    session = RaffleSession(config, pool, display, read_line=read_line)
    await session.run()


def cli(argv: list[str] | None = None) -> None:
    config = parse_args(argv)

    logging.basicConfig(
        filename=LOG_FILE,
        filemode="a",
        format="%(asctime)s %(levelname)s:%(message)s",
        level=logging.INFO,
    )
    logging.info(f"Lucky Door started: {config}")

    try:
        asyncio.run(main(config))
    except EmptyPoolError as e:
        logging.error(f"Raffle stopped: {e}")
        ProfileDisplay(show_images=False).warn(f"Error: {e}")
        sys.exit(1)


if __name__ == "__main__":
    cli()
