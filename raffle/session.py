import asyncio
import logging
import random
from enum import Enum, auto
from typing import NoReturn

from .attendee import Attendee
from .attendee_pool import AttendeePool, EmptyPoolError
from .config import RaffleConfig
from .display import ProfileDisplay
from .prompt import LineReader, read_stdin_line, should_continue
from .spinner import Clock, Sleep, select_winner, spin_time_ms

WELCOME_PAUSE_MS = 1000
REROLL_PAUSE_MS = 2000


class SessionState(Enum):
    SPINNING = auto()
    AWAITING_DECISION = auto()
    TERMINAL = auto()


class RaffleSession:
    """
    Runs draws until the operator quits.

    After each winner is shown the operator either presses Enter to
    disqualify them and re-roll, or types "q" to finish.
    """

    def __init__(
        self,
        config: RaffleConfig,
        pool: AttendeePool,
        display: ProfileDisplay,
        *,
        read_line: LineReader = read_stdin_line,
        clock: Clock | None = None,
        sleep: Sleep = asyncio.sleep,
        rng: random.Random | None = None,
    ) -> None:
        self.config: RaffleConfig = config
        self.pool: AttendeePool = pool
        self.display: ProfileDisplay = display
        self.read_line: LineReader = read_line
        self.clock: Clock | None = clock
        self.sleep: Sleep = sleep
        self.rng: random.Random | None = rng

        self.state: SessionState = SessionState.SPINNING
        self.rounds: int = config.rounds
        self.max_spin_time_ms: int = config.max_spin_time_ms
        self.draws: int = 0

    async def draw(self) -> Attendee:
        """Welcomes the audience, spins and shows the winner."""
        if not self.pool:
            raise EmptyPoolError("No attendees left to pick a winner from")
        self.state = SessionState.SPINNING
        self.draws += 1
        self.display.welcome(len(self.pool))
        await self.sleep(WELCOME_PAUSE_MS / 1000)

        duration = spin_time_ms(
            self.config.interval_ms, len(self.pool), self.rounds, self.max_spin_time_ms
        )
        logging.info(
            f"Draw {self.draws}: {len(self.pool)} attendees, spinning for {duration}ms"
        )
        winner = await select_winner(
            self.pool,
            duration,
            self.config.interval_ms,
            self.display,
            clock=self.clock,
            sleep=self.sleep,
            rng=self.rng,
        )
        self.display.show_profile(winner)
        logging.info(f"Draw {self.draws} winner: {winner}")
        self.state = SessionState.AWAITING_DECISION
        return winner

    async def reroll(self, winner: Attendee) -> None:
        """Disqualifies the winner and gets ready for a quicker draw."""
        self.display.message(f"Removing {winner.name} and rolling a new winner...")
        logging.info(f"Removing {winner} from the pool")
        self.pool = self.pool.without(winner.id).shuffled(self.rng)
        # Re-rolls happen because someone isn't here, so keep them snappy
        self.rounds = 1
        self.max_spin_time_ms = self.config.max_reroll_spin_time_ms
        await self.sleep(REROLL_PAUSE_MS / 1000)
        self.state = SessionState.SPINNING

    def quit(self) -> NoReturn:
        self.state = SessionState.TERMINAL
        logging.info(f"Operator quit after {self.draws} draws")
        raise SystemExit(0)

    async def run(self) -> NoReturn:
        while True:
            winner = await self.draw()
            if await should_continue(self.read_line):
                await self.reroll(winner)
            else:
                self.quit()
