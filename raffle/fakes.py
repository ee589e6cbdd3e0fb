"""Stand-ins for the clock, terminal and operator, for driving a raffle without waiting on them."""

import io

from rich.console import Console

from .attendee import Attendee
from .attendee_pool import AttendeePool
from .display import ProfileDisplay


class FakeClock:
    """A clock that only moves when something sleeps on it. Counts whole milliseconds."""

    def __init__(self) -> None:
        self.now_ms: int = 0
        self.sleeps_ms: list[int] = []

    def time(self) -> float:
        return self.now_ms / 1000

    async def sleep(self, seconds: float) -> None:
        ms = round(seconds * 1000)
        self.sleeps_ms.append(ms)
        self.now_ms += ms


class RecordingDisplay(ProfileDisplay):
    """A display that writes to in-memory buffers and remembers every profile shown."""

    def __init__(self, show_images: bool = False) -> None:
        super().__init__(
            show_images=show_images,
            console=Console(file=io.StringIO(), width=200, force_terminal=False, highlight=False),
            err_console=Console(file=io.StringIO(), width=200, force_terminal=False, highlight=False),
        )
        self.frames: list[Attendee] = []
        self.winners: list[Attendee] = []

    def show_profile(self, attendee: Attendee) -> None:
        super().show_profile(attendee)
        if attendee.is_winner:
            self.winners.append(attendee)
        else:
            self.frames.append(attendee)

    @property
    def output(self) -> str:
        return self.console.file.getvalue()  # type: ignore[attr-defined]

    @property
    def error_output(self) -> str:
        return self.err_console.file.getvalue()  # type: ignore[attr-defined]


def scripted_input(*lines: str):
    """Returns a line reader that answers with the given lines in order."""
    remaining = list(lines)

    async def read_line() -> str:
        return remaining.pop(0)

    return read_line


def make_attendee(attendee_id, name: str | None = None) -> Attendee:
    return Attendee(
        id=attendee_id,
        name=name or f"Attendee {attendee_id}",
        image_source=f"https://example.com/{attendee_id}.jpg",
    )


def make_pool(*names: str) -> AttendeePool:
    """Builds a pool with ids 1..n in the given order."""
    return AttendeePool(make_attendee(i, name) for i, name in enumerate(names, start=1))
