from dataclasses import dataclass, replace
from typing import Any

from rich.console import RenderableType

UNKNOWN_NAME = "Unknown person with no name"


@dataclass(frozen=True)
class Photo:
    photo_link: str | None = None

    @classmethod
    def from_dict(cls, data: dict[str, Any] | None) -> "Photo | None":
        if not data:
            return None
        return cls(photo_link=data.get("photo_link"))


@dataclass(frozen=True)
class Member:
    """The member object nested in each Meetup RSVP."""

    id: int | str
    name: str | None
    is_organizer: bool = False
    photo: Photo | None = None

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Member":
        return cls(
            id=data["id"],
            name=data.get("name"),
            is_organizer=data.get("is_organizer") is True,
            photo=Photo.from_dict(data.get("photo")),
        )


@dataclass(frozen=True)
class Rsvp:
    member: Member

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Rsvp":
        return cls(member=Member.from_dict(data["member"]))


@dataclass(frozen=True)
class Attendee:
    """A raffle entrant: who they are and what to show while spinning."""

    id: int | str
    name: str
    image_source: str
    rendered_image: RenderableType | None = None
    is_winner: bool = False

    def __post_init__(self):
        if not self.name:
            raise ValueError("Attendee name must not be empty")

    def as_winner(self) -> "Attendee":
        """Returns a copy of this attendee flagged as the winner."""
        return replace(self, is_winner=True)

    def __str__(self) -> str:
        return f"{self.name} (Member ID: {self.id})"
