import asyncio
import logging
import random
from collections.abc import Awaitable, Callable

from .attendee import Attendee
from .attendee_pool import AttendeePool, EmptyPoolError
from .display import ProfileDisplay

Clock = Callable[[], float]
Sleep = Callable[[float], Awaitable[None]]


def spin_time_ms(interval_ms: int, pool_size: int, rounds: int, max_spin_time_ms: int) -> int:
    """
    How long a spin should last.

    Enough time to go through the pool `rounds` times, so small pools finish
    quickly, but never longer than max_spin_time_ms.
    """
    return min(interval_ms * max(pool_size - 1, 0) * rounds, max_spin_time_ms)


async def select_winner(
    pool: AttendeePool,
    spin_time_ms: int,
    interval_ms: int,
    display: ProfileDisplay,
    *,
    clock: Clock | None = None,
    sleep: Sleep = asyncio.sleep,
    rng: random.Random | None = None,
) -> Attendee:
    """
    Flicks through the pool until spin_time_ms has passed and returns the
    attendee that was on screen at that moment, flagged as the winner.

    The pool is reshuffled after every full pass so the audience doesn't see
    the same sequence twice. The returned attendee is a copy; the pool is
    never modified.
    """
    if not pool:
        raise EmptyPoolError("No attendees left to pick a winner from")

    clock = clock or asyncio.get_running_loop().time
    deadline = clock() + spin_time_ms / 1000
    interval = interval_ms / 1000

    index = 0
    current = None
    frames = 0
    while clock() < deadline:
        current = pool[index]
        display.show_profile(current)
        frames += 1
        await sleep(interval)
        index += 1
        if index >= len(pool):
            index = 0
            pool = pool.shuffled(rng)

    if current is None:
        # No time to spin at all, e.g. a single entrant
        current = pool[0]

    logging.info(f"Spin finished after {frames} frames, winner: {current}")
    return current.as_winner()
