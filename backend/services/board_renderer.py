"""
Board rendering with Pillow.

Draws a GameState snapshot the way the browser canvas does:
- Dark board with faint grid lines
- Food cell
- Snake head and body as rounded cells
- A translucent "Paused" overlay while paused
"""

import logging
from typing import Tuple

from PIL import Image, ImageDraw, ImageFont

from domain.constants import GRID_SIZE
from domain.game_state import GameState

logger = logging.getLogger(__name__)


class ColorScheme:
    """Board colours"""

    BACKGROUND = "#0f1222"
    GRID_LINE = (255, 255, 255, 18)  # ~7% white
    FOOD = "#ff5d7a"
    SNAKE_HEAD = "#93ff8f"
    SNAKE_BODY = "#38c172"
    PAUSE_OVERLAY = (0, 0, 0, 115)  # ~45% black
    PAUSE_TEXT = "#ffffff"


def hex_to_rgb(hex_color: str) -> Tuple[int, int, int]:
    """Convert hex color to RGB tuple"""
    hex_color = hex_color.lstrip('#')
    return tuple(int(hex_color[i:i+2], 16) for i in (0, 2, 4))


class BoardRenderer:
    """Render game snapshots to Pillow images"""

    def __init__(self, cell_size: int = GRID_SIZE, rounded: bool = True):
        self.cell_size = cell_size
        self.rounded = rounded

        try:
            self.font = ImageFont.truetype("DejaVuSans-Bold.ttf", 24)
        except OSError:
            self.font = ImageFont.load_default()

    def board_size(self, tile_count: int) -> int:
        return tile_count * self.cell_size

    def render(self, state: GameState) -> Image.Image:
        """Render a single frame of the board"""
        size = self.board_size(state.tile_count)
        img = Image.new('RGBA', (size, size), hex_to_rgb(ColorScheme.BACKGROUND) + (255,))

        self._draw_grid(img, state.tile_count)

        draw = ImageDraw.Draw(img)
        if state.food is not None:
            self._draw_cell(draw, state.food, hex_to_rgb(ColorScheme.FOOD))

        for index, part in enumerate(state.snake_positions):
            color = ColorScheme.SNAKE_HEAD if index == 0 else ColorScheme.SNAKE_BODY
            self._draw_cell(draw, part, hex_to_rgb(color))

        if state.paused and not state.game_over:
            img = self._draw_pause_overlay(img)

        return img.convert('RGB')

    def _draw_grid(self, img: Image.Image, tile_count: int):
        """Grid lines are composited so their alpha blends with the board"""
        size = img.width
        grid = Image.new('RGBA', img.size, (0, 0, 0, 0))
        draw = ImageDraw.Draw(grid)

        for i in range(tile_count + 1):
            offset = min(i * self.cell_size, size - 1)
            draw.line([offset, 0, offset, size], fill=ColorScheme.GRID_LINE, width=1)
            draw.line([0, offset, size, offset], fill=ColorScheme.GRID_LINE, width=1)

        img.alpha_composite(grid)

    def _draw_cell(self, draw: ImageDraw.ImageDraw, cell: Tuple[int, int], color: Tuple[int, int, int]):
        """Draw a single cell, inset by one pixel on each side when there is room"""
        x, y = cell
        px = x * self.cell_size
        py = y * self.cell_size
        inset = 1 if self.cell_size > 2 else 0
        box = [px + inset, py + inset, px + self.cell_size - 1 - inset, py + self.cell_size - 1 - inset]

        if self.rounded and self.cell_size >= 4:
            draw.rounded_rectangle(box, radius=self.cell_size // 4, fill=color)
        else:
            draw.rectangle(box, fill=color)

    def _draw_pause_overlay(self, img: Image.Image) -> Image.Image:
        overlay = Image.new('RGBA', img.size, ColorScheme.PAUSE_OVERLAY)
        img = Image.alpha_composite(img, overlay)

        draw = ImageDraw.Draw(img)
        text = "Paused"
        bbox = draw.textbbox((0, 0), text, font=self.font)
        text_width = bbox[2] - bbox[0]
        text_height = bbox[3] - bbox[1]
        draw.text(
            ((img.width - text_width) // 2, (img.height - text_height) // 2),
            text,
            fill=hex_to_rgb(ColorScheme.PAUSE_TEXT),
            font=self.font
        )
        return img
