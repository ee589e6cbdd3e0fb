from dataclasses import dataclass

DEFAULT_MAX_SPIN_TIME_MS = 120000


@dataclass(frozen=True)
class RaffleConfig:
    """Everything an operator can tune about a raffle, fixed at startup.

    max_entrees: cap on the number of entrants, 0 for everyone (testing only)
    rounds: how many passes through the pool the first spin aims for
    interval_ms: how long each profile stays on screen while spinning
    max_spin_time_ms: upper bound on the first spin
    max_reroll_spin_time_ms: upper bound on spins after a winner is disqualified
    show_images: render profile photos, turn off for a text-only raffle
    """

    max_entrees: int = 0
    rounds: int = 2
    interval_ms: int = 150
    max_spin_time_ms: int = DEFAULT_MAX_SPIN_TIME_MS
    max_reroll_spin_time_ms: int = 2000
    show_images: bool = True

    def __post_init__(self):
        if self.max_entrees < 0:
            raise ValueError("max_entrees must be >= 0")
        if self.rounds < 1:
            raise ValueError("rounds must be >= 1")
        if self.interval_ms <= 0:
            raise ValueError("interval_ms must be positive")
        if self.max_spin_time_ms < 0 or self.max_reroll_spin_time_ms < 0:
            raise ValueError("Spin time limits must be >= 0")

    @property
    def limited_entrees(self) -> bool:
        return self.max_entrees > 0
