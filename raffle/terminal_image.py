"""
Renders profile photos as coloured text so they can be printed to a terminal.

Each character cell shows two vertically stacked pixels: the upper half block
glyph takes the top pixel as its foreground colour and the bottom pixel as its
background colour. rich turns that into whatever the terminal supports, or
plain glyphs when output isn't a terminal.
"""

import logging
from dataclasses import dataclass
from io import BytesIO

from PIL import Image
from rich.color import Color
from rich.console import Console, ConsoleDimensions, ConsoleOptions, RenderResult
from rich.measure import Measurement
from rich.segment import Segment
from rich.style import Style

UPPER_HALF_BLOCK = "▀"

# Photos take up this share of the terminal height.
DEFAULT_HEIGHT_RATIO = 0.6

RGB = tuple[int, int, int]


@dataclass(frozen=True)
class HalfBlockImage:
    """A scaled image as rows of (top, bottom) pixel pairs, bottom is None on an odd last row."""

    rows: tuple[tuple[tuple[RGB, RGB | None], ...], ...]

    @property
    def width(self) -> int:
        return len(self.rows[0]) if self.rows else 0

    def __rich_console__(self, console: Console, options: ConsoleOptions) -> RenderResult:
        for row in self.rows:
            for top, bottom in row:
                style = Style(
                    color=Color.from_rgb(*top),
                    bgcolor=Color.from_rgb(*bottom) if bottom else None,
                )
                yield Segment(UPPER_HALF_BLOCK, style)
            yield Segment.line()

    def __rich_measure__(self, console: Console, options: ConsoleOptions) -> Measurement:
        return Measurement(self.width, self.width)


def target_size(
    image_size: tuple[int, int],
    terminal_size: ConsoleDimensions,
    height_ratio: float = DEFAULT_HEIGHT_RATIO,
) -> tuple[int, int]:
    """
    Returns the (width, height) in pixels an image should be scaled to.

    The height is height_ratio of the terminal rows, two pixels per row, and the
    width keeps the aspect ratio but never exceeds the terminal columns.
    """
    width, height = image_size
    rows = max(1, int(terminal_size.height * height_ratio))
    target_height = rows * 2
    target_width = max(1, round(width * target_height / height))
    if target_width > terminal_size.width:
        target_width = terminal_size.width
        target_height = max(2, round(height * target_width / width))
    return target_width, target_height


def render(
    image_bytes: bytes,
    height_ratio: float = DEFAULT_HEIGHT_RATIO,
    terminal_size: ConsoleDimensions | None = None,
) -> HalfBlockImage:
    """Decodes image_bytes and scales it into a renderable for a rich Console."""
    terminal_size = terminal_size or Console().size
    with Image.open(BytesIO(image_bytes)) as source:
        image = source.convert("RGB")
    size = target_size(image.size, terminal_size, height_ratio)
    logging.debug(f"Rendering {image.size} image at {size}")
    image = image.resize(size, Image.Resampling.LANCZOS)

    width, height = image.size
    pixels = image.load()
    rows = []
    for y in range(0, height, 2):
        rows.append(
            tuple(
                (pixels[x, y], pixels[x, y + 1] if y + 1 < height else None)
                for x in range(width)
            )
        )
    return HalfBlockImage(rows=tuple(rows))
