"""
Tests for the Pillow board renderer.
"""

import sys
import os

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from domain.constants import RIGHT
from domain.game_state import GameState
from services.board_renderer import BoardRenderer, ColorScheme, hex_to_rgb


def make_state(**overrides):
    values = dict(
        tick_number=0,
        snake_positions=[(5, 9), (4, 9), (3, 9)],
        direction=RIGHT,
        pending_direction=RIGHT,
        food=(12, 3),
        score=0,
        high_score=0,
        tile_count=20,
    )
    values.update(overrides)
    return GameState(**values)


def cell_center(cell, cell_size=18):
    return (cell[0] * cell_size + cell_size // 2, cell[1] * cell_size + cell_size // 2)


class TestBoardRenderer:

    def test_image_size_matches_board(self):
        img = BoardRenderer().render(make_state())
        assert img.size == (360, 360)
        assert img.mode == "RGB"

    def test_cells_are_painted(self):
        renderer = BoardRenderer()
        img = renderer.render(make_state())

        assert img.getpixel(cell_center((12, 3))) == hex_to_rgb(ColorScheme.FOOD)
        assert img.getpixel(cell_center((5, 9))) == hex_to_rgb(ColorScheme.SNAKE_HEAD)
        assert img.getpixel(cell_center((4, 9))) == hex_to_rgb(ColorScheme.SNAKE_BODY)
        assert img.getpixel(cell_center((0, 0))) == hex_to_rgb(ColorScheme.BACKGROUND)

    def test_square_cells(self):
        img = BoardRenderer(rounded=False).render(make_state())
        # Corner pixel of the inset cell is filled only without rounding
        assert img.getpixel((12 * 18 + 1, 3 * 18 + 1)) == hex_to_rgb(ColorScheme.FOOD)

    def test_pause_overlay_darkens_board(self):
        renderer = BoardRenderer()
        plain = renderer.render(make_state())
        paused = renderer.render(make_state(paused=True))

        before = plain.getpixel(cell_center((0, 0)))
        after = paused.getpixel(cell_center((0, 0)))
        assert after != before
        assert all(a <= b for a, b in zip(after, before))

    def test_no_overlay_once_game_over(self):
        renderer = BoardRenderer()
        plain = renderer.render(make_state(game_over=True))
        paused = renderer.render(make_state(game_over=True, paused=True))

        assert plain.getpixel(cell_center((0, 0))) == paused.getpixel(cell_center((0, 0)))

    def test_custom_cell_size(self):
        img = BoardRenderer(cell_size=10).render(make_state(tile_count=8, snake_positions=[(1, 1)], food=(6, 6)))
        assert img.size == (80, 80)
        assert img.getpixel(cell_center((1, 1), 10)) == hex_to_rgb(ColorScheme.SNAKE_HEAD)
