"""
Tests for input mapping (keys, buttons, swipes).
"""

import pytest
import sys
import os
from unittest.mock import Mock

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from domain.constants import UP, DOWN, LEFT, RIGHT
from services.input_mapping import (
    direction_for_key,
    direction_for_button,
    direction_for_swipe,
    handle_key,
    handle_button,
    handle_swipe,
)


class TestKeys:

    @pytest.mark.parametrize("key,expected", [
        ("ArrowUp", UP), ("ArrowDown", DOWN), ("ArrowLeft", LEFT), ("ArrowRight", RIGHT),
        ("w", UP), ("S", DOWN), ("a", LEFT), ("D", RIGHT),
    ])
    def test_direction_keys(self, key, expected):
        assert direction_for_key(key) == expected

    def test_unknown_key(self):
        assert direction_for_key("q") is None

    def test_space_toggles_pause(self):
        game = Mock()
        assert handle_key(game, " ") is True
        game.toggle_pause.assert_called_once()
        game.update_direction.assert_not_called()

    def test_direction_key_goes_through_gate(self):
        game = Mock()
        assert handle_key(game, "ArrowUp") is True
        game.update_direction.assert_called_once_with(UP)

    def test_unknown_key_ignored(self):
        game = Mock()
        assert handle_key(game, "Enter") is False
        game.update_direction.assert_not_called()


class TestButtons:

    def test_buttons_map_to_directions(self):
        assert direction_for_button("left") == LEFT
        assert direction_for_button("middle") is None

    def test_button_returns_gate_result(self):
        game = Mock()
        game.update_direction.return_value = False
        assert handle_button(game, "down") is False
        game.update_direction.assert_called_once_with(DOWN)


class TestSwipes:

    @pytest.mark.parametrize("dx,dy,expected", [
        (40, 5, RIGHT),
        (-40, 5, LEFT),
        (5, 40, DOWN),
        (5, -40, UP),
        (30, 30, DOWN),
        (-30, -30, UP),
    ])
    def test_dominant_axis_selects_direction(self, dx, dy, expected):
        assert direction_for_swipe(dx, dy) == expected

    def test_short_swipes_ignored(self):
        assert direction_for_swipe(19, -10) is None
        assert direction_for_swipe(20, 0) == RIGHT

    def test_short_swipe_never_reaches_game(self):
        game = Mock()
        assert handle_swipe(game, 3, 3) is False
        game.update_direction.assert_not_called()

    def test_swipe_dispatch(self):
        game = Mock()
        game.update_direction.return_value = True
        assert handle_swipe(game, -50, 10) is True
        game.update_direction.assert_called_once_with(LEFT)
