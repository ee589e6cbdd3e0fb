import asyncio
import logging
import random
from typing import Any

import aiohttp
from rich.console import ConsoleDimensions

from . import terminal_image
from .attendee import UNKNOWN_NAME, Attendee, Rsvp
from .attendee_pool import AttendeePool
from .display import ProfileDisplay

RSVPS_URL = (
    "https://api.meetup.com/amazon-web-services-user-group/events/295752887/rsvps"
    "?photo-host=public&response=yes"
)
PLACEHOLDER_IMAGE_URL = (
    "https://cdn.vectorstock.com/i/preview-1x/82/99/"
    "no-image-available-like-missing-picture-vector-43938299.jpg"
)


def select_entrants(
    rsvps: list[Rsvp],
    max_entrees: int = 0,
    rng: random.Random | None = None,
    display: ProfileDisplay | None = None,
) -> list[Rsvp]:
    """
    Drops organizers and repeated members, applies the entrant limit and
    shuffles what is left.

    A max_entrees of 0 means everyone is entered. Otherwise only the first
    max_entrees - 1 non-organizers are kept.
    """
    entrants = []
    organizers = 0
    seen = set()
    for rsvp in rsvps:
        if rsvp.member.id in seen:
            logging.warning(f"Skipping duplicate RSVP for member {rsvp.member.id} ({rsvp.member.name})")
            continue
        seen.add(rsvp.member.id)
        if rsvp.member.is_organizer:
            organizers += 1
            logging.info(f"Removing organizer: {rsvp.member.name}")
            if display:
                display.message(f"Removing organizer: {rsvp.member.name}")
            continue
        entrants.append(rsvp)

    if max_entrees > 0:
        entrants = entrants[: max_entrees - 1]

    logging.info(f"Removed {organizers} event organizers, {len(entrants)} entrants remain")
    if display:
        display.message(f"Removed {organizers} event organizers from the entry pool.")

    (rng or random).shuffle(entrants)
    return entrants


class AttendeeLoader:
    """Fetches the event RSVPs and turns them into an AttendeePool."""

    def __init__(
        self,
        http: aiohttp.ClientSession,
        display: ProfileDisplay,
        *,
        show_images: bool = True,
        rsvps_url: str = RSVPS_URL,
        placeholder_image_url: str = PLACEHOLDER_IMAGE_URL,
        rng: random.Random | None = None,
        terminal_size: ConsoleDimensions | None = None,
    ) -> None:
        self.http: aiohttp.ClientSession = http
        self.display: ProfileDisplay = display
        self.show_images: bool = show_images
        self.rsvps_url: str = rsvps_url
        self.placeholder_image_url: str = placeholder_image_url
        self.rng: random.Random | None = rng
        self.terminal_size: ConsoleDimensions | None = terminal_size

    async def fetch_rsvps(self) -> list[Rsvp]:
        async with self.http.get(self.rsvps_url) as response:
            response.raise_for_status()
            data: list[dict[str, Any]] = await response.json(content_type=None)
        logging.info(f"Fetched {len(data)} RSVPs from {self.rsvps_url}")
        return [Rsvp.from_dict(item) for item in data]

    async def fetch_image(self, url: str) -> bytes:
        async with self.http.get(url) as response:
            response.raise_for_status()
            return await response.read()

    async def resolve(self, rsvp: Rsvp) -> Attendee:
        """Builds the displayable profile for one RSVP."""
        member = rsvp.member
        name = member.name
        if not name:
            logging.warning(f"Member {member.id} has no name, using '{UNKNOWN_NAME}'")
            name = UNKNOWN_NAME

        if member.photo and member.photo.photo_link:
            image_source = member.photo.photo_link
        else:
            image_source = self.placeholder_image_url

        rendered_image = None
        if self.show_images:
            image_bytes = await self.fetch_image(image_source)
            rendered_image = terminal_image.render(
                image_bytes, terminal_size=self.terminal_size
            )

        return Attendee(
            id=member.id,
            name=name,
            image_source=image_source,
            rendered_image=rendered_image,
        )

    async def load(self, max_entrees: int = 0) -> AttendeePool:
        self.display.message("Getting list of attendees...")
        rsvps = await self.fetch_rsvps()
        entrants = select_entrants(rsvps, max_entrees, self.rng, self.display)
        # gather keeps the shuffled order regardless of which fetch finishes first
        attendees = await asyncio.gather(*(self.resolve(rsvp) for rsvp in entrants))
        logging.info(f"Loaded {len(attendees)} attendees")
        return AttendeePool(attendees)
