import random
from collections.abc import Iterator

from .attendee import Attendee


class EmptyPoolError(RuntimeError):
    """Raised when a winner is requested from a pool with nobody left in it."""


class AttendeePool:
    """
    An ordered, immutable set of raffle entrants.

    Every change (removing a winner, reshuffling) produces a new pool so a
    pool that is being displayed never changes underneath the spinner.
    """

    def __init__(self, attendees=()):
        self._attendees: tuple[Attendee, ...] = tuple(attendees)
        seen = set()
        for attendee in self._attendees:
            if attendee.id in seen:
                raise ValueError(f"Duplicate attendee id in pool: {attendee.id}")
            seen.add(attendee.id)

    def __len__(self) -> int:
        return len(self._attendees)

    def __iter__(self) -> Iterator[Attendee]:
        return iter(self._attendees)

    def __getitem__(self, index: int) -> Attendee:
        return self._attendees[index]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, AttendeePool):
            return NotImplemented
        return self._attendees == other._attendees

    def __repr__(self) -> str:
        return f"AttendeePool({[attendee.name for attendee in self._attendees]!r})"

    def ids(self) -> list[int | str]:
        return [attendee.id for attendee in self._attendees]

    def without(self, attendee_id: int | str) -> "AttendeePool":
        """Returns a new pool with the given attendee removed, order otherwise kept."""
        return AttendeePool(a for a in self._attendees if a.id != attendee_id)

    def shuffled(self, rng: random.Random | None = None) -> "AttendeePool":
        attendees = list(self._attendees)
        (rng or random).shuffle(attendees)
        return AttendeePool(attendees)
