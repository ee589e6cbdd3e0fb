import asyncio
import logging
import sys
from collections.abc import Awaitable, Callable

from .display import ProfileDisplay

QUIT_TOKEN = "q"

LineReader = Callable[[], Awaitable[str]]


async def read_stdin_line() -> str:
    """Reads one line from stdin without blocking the event loop."""
    return await asyncio.to_thread(sys.stdin.readline)


def is_quit(line: str) -> bool:
    return line.strip() == QUIT_TOKEN


async def should_continue(read_line: LineReader = read_stdin_line) -> bool:
    """
    Waits for the operator. Anything but "q" (even a bare Enter) means continue.

    End of input reads as an empty string, not a newline, and is treated
    like "q", so a closed stdin never disqualifies winners on its own.
    """
    line = await read_line()
    logging.debug(f"Operator input: {line!r}")
    if line == "":
        logging.info("End of input, treating as quit")
        return False
    return not is_quit(line)


async def confirm_limited_entrees(
    max_entrees: int,
    display: ProfileDisplay,
    read_line: LineReader = read_stdin_line,
) -> bool:
    """
    Warns that only max_entrees people will be entered and asks to go ahead.

    Returns True when the raffle should proceed. Without a limit there is
    nothing to confirm.
    """
    if max_entrees <= 0:
        return True
    logging.warning(f"Running in limited entrees mode with {max_entrees} entrees")
    display.warn("Warning: running in limited entrees mode, this is meant for testing only!")
    display.warn(f"Only {max_entrees} entrees will be used")
    display.warn("Press Enter to proceed anyway....")
    return await should_continue(read_line)
