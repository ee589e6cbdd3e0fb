import unittest
from contextlib import redirect_stderr
from io import StringIO

from lucky_door import parse_args
from raffle.config import DEFAULT_MAX_SPIN_TIME_MS, RaffleConfig


class TestRaffleConfig(unittest.TestCase):
    def test_defaults(self):
        config = RaffleConfig()
        self.assertEqual(config.max_entrees, 0)
        self.assertEqual(config.rounds, 2)
        self.assertEqual(config.interval_ms, 150)
        self.assertEqual(config.max_spin_time_ms, DEFAULT_MAX_SPIN_TIME_MS)
        self.assertEqual(config.max_reroll_spin_time_ms, 2000)
        self.assertTrue(config.show_images)
        self.assertFalse(config.limited_entrees)

    def test_invalid_values(self):
        for kwargs in [
            {"max_entrees": -1},
            {"rounds": 0},
            {"interval_ms": 0},
            {"max_spin_time_ms": -5},
            {"max_reroll_spin_time_ms": -5},
        ]:
            with self.subTest(**kwargs):
                with self.assertRaises(ValueError):
                    RaffleConfig(**kwargs)


class TestParseArgs(unittest.TestCase):
    def test_no_arguments_gives_defaults(self):
        self.assertEqual(parse_args([]), RaffleConfig())

    def test_all_arguments(self):
        config = parse_args(
            [
                "--max-entrees", "20",
                "--rounds", "1",
                "--interval", "80",
                "--max-spin-time", "10000",
                "--max-reroll-spin-time", "1500",
                "--no-images",
            ]
        )
        self.assertEqual(
            config,
            RaffleConfig(
                max_entrees=20,
                rounds=1,
                interval_ms=80,
                max_spin_time_ms=10000,
                max_reroll_spin_time_ms=1500,
                show_images=False,
            ),
        )
        self.assertTrue(config.limited_entrees)

    def test_invalid_argument_is_a_usage_error(self):
        with redirect_stderr(StringIO()), self.assertRaises(SystemExit) as cm:
            parse_args(["--interval", "0"])
        self.assertEqual(cm.exception.code, 2)


if __name__ == "__main__":
    unittest.main()
