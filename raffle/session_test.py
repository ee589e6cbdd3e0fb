import random
import unittest

from raffle.attendee_pool import EmptyPoolError
from raffle.config import RaffleConfig
from raffle.fakes import FakeClock, RecordingDisplay, make_pool, scripted_input
from raffle.session import REROLL_PAUSE_MS, WELCOME_PAUSE_MS, RaffleSession, SessionState


class TestRaffleSession(unittest.IsolatedAsyncioTestCase):
    def setUp(self):
        self.clock = FakeClock()
        self.display = RecordingDisplay()
        self.config = RaffleConfig(
            rounds=1,
            interval_ms=50,
            max_spin_time_ms=120000,
            max_reroll_spin_time_ms=500,
            show_images=False,
        )

    def make_session(self, pool, *lines, config=None):
        return RaffleSession(
            config or self.config,
            pool,
            self.display,
            read_line=scripted_input(*lines),
            clock=self.clock.time,
            sleep=self.clock.sleep,
            rng=random.Random(11),
        )

    async def test_draw_shows_welcome_and_winner(self):
        session = self.make_session(make_pool("A", "B", "C"))
        winner = await session.draw()

        self.assertEqual(session.state, SessionState.AWAITING_DECISION)
        self.assertIn("Lucky Door prize generator", self.display.output)
        self.assertIn("Picking a winner out of 3 attendees...", self.display.output)
        self.assertEqual(self.clock.sleeps_ms[0], WELCOME_PAUSE_MS)
        # 100ms at 50ms a frame
        self.assertEqual([a.name for a in self.display.frames], ["A", "B"])
        self.assertEqual(self.display.winners, [winner])
        self.assertIn(f"THE WINNER IS: {winner.name}!", self.display.error_output)

    async def test_continue_removes_winner_and_rerolls(self):
        pool = make_pool("A", "B", "C")
        session = self.make_session(pool, "continue\n", "q\n")

        with self.assertRaises(SystemExit) as cm:
            await session.run()

        self.assertEqual(cm.exception.code, 0)
        first, second = self.display.winners
        self.assertEqual(first.id, 2)
        self.assertIn(f"Removing {first.name} and rolling a new winner...", self.display.output)
        self.assertEqual(len(session.pool), 2)
        self.assertCountEqual(session.pool.ids(), [1, 3])
        self.assertIn(second.id, [1, 3])
        self.assertEqual(session.rounds, 1)
        self.assertEqual(session.max_spin_time_ms, 500)
        self.assertIn(REROLL_PAUSE_MS, self.clock.sleeps_ms)
        self.assertEqual(session.draws, 2)
        self.assertEqual(session.state, SessionState.TERMINAL)

    async def test_rerolls_use_one_round_and_the_reroll_cap(self):
        config = RaffleConfig(
            rounds=3, interval_ms=50, max_spin_time_ms=120000,
            max_reroll_spin_time_ms=100, show_images=False,
        )
        session = self.make_session(make_pool("A", "B", "C", "D", "E"), "\n", "q", config=config)

        with self.assertRaises(SystemExit):
            await session.run()

        # First draw: 50ms * 4 * 3 rounds = 600ms, 12 frames
        # Re-roll: min(50ms * 3 * 1 round, 100ms) = 100ms, 2 frames
        self.assertEqual(len(self.display.frames), 14)
        self.assertEqual(session.config.rounds, 3)

    async def test_quit_leaves_pool_unchanged(self):
        pool = make_pool("A", "B", "C")
        session = self.make_session(pool, "  q \n")

        with self.assertRaises(SystemExit) as cm:
            await session.run()

        self.assertEqual(cm.exception.code, 0)
        self.assertIs(session.pool, pool)
        self.assertEqual(len(self.display.winners), 1)
        self.assertNotIn("Removing", self.display.output)

    async def test_running_out_of_attendees(self):
        session = self.make_session(make_pool("A"), "\n", "\n")

        with self.assertRaises(EmptyPoolError):
            await session.run()

        self.assertEqual(len(session.pool), 0)
        self.assertEqual([w.name for w in self.display.winners], ["A"])
        # Nothing is announced for a draw that cannot happen
        self.assertNotIn("out of 0 attendees", self.display.output)
        self.assertEqual(session.draws, 1)

    async def test_end_of_input_quits_without_removing_anyone(self):
        pool = make_pool("A", "B", "C", "D")
        session = self.make_session(pool, "")

        with self.assertRaises(SystemExit) as cm:
            await session.run()

        self.assertEqual(cm.exception.code, 0)
        self.assertIs(session.pool, pool)
        self.assertEqual(len(self.display.winners), 1)
        self.assertNotIn("Removing", self.display.output)
        self.assertEqual(session.state, SessionState.TERMINAL)


if __name__ == "__main__":
    unittest.main()
