from rich.console import Console

from .attendee import Attendee


class ProfileDisplay:
    """
    Writes everything the audience sees to the terminal.

    Normal output goes to stdout; the winner announcement and warnings go to
    stderr so they stand out even when stdout is redirected.
    """

    def __init__(
        self,
        show_images: bool = True,
        console: Console | None = None,
        err_console: Console | None = None,
    ) -> None:
        self.show_images: bool = show_images
        self.console: Console = console or Console(highlight=False)
        self.err_console: Console = err_console or Console(stderr=True, highlight=False)

    def clear(self) -> None:
        self.console.clear()

    def message(self, text: str) -> None:
        self.console.print(text, markup=False)

    def warn(self, text: str) -> None:
        self.err_console.print(text, markup=False)

    def welcome(self, attendee_count: int) -> None:
        self.clear()
        self.message("Lucky Door prize generator")
        self.message(f"Picking a winner out of {attendee_count} attendees...")

    def show_profile(self, attendee: Attendee) -> None:
        if self.show_images:
            self.clear()
        self.console.print()
        if self.show_images and attendee.rendered_image:
            self.console.print(attendee.rendered_image)
        if attendee.is_winner:
            self.err_console.print(
                f"THE WINNER IS: {attendee.name}!!!!!!!!!!!!!11111one", markup=False
            )
        else:
            self.message(attendee.name)
