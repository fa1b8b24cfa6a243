"""Tests for the BaseGame contract."""

from abc import ABC

import pytest

from bricklane.games import BaseGame, GameState
from bricklane.games.input import KeyState


class TestBaseGameABC:
    """Test that BaseGame is properly abstract."""

    def test_cannot_instantiate_abstract_class(self):
        with pytest.raises(TypeError, match="Can't instantiate abstract class"):
            BaseGame()

    def test_is_abc_subclass(self):
        assert issubclass(BaseGame, ABC)

    def test_has_abstract_methods(self):
        abstract_methods = BaseGame.__abstractmethods__
        for name in ('_get_internal_state', 'get_score', 'handle_input', 'update', 'render'):
            assert name in abstract_methods


class CounterGame(BaseGame):
    """Minimal concrete game: each tick with right held scores a point."""

    NAME = "Counter"
    ARGUMENTS = [
        {'name': '--log-level', 'type': str, 'default': 'DEBUG', 'help': 'Overridden'},
        {'name': '--goal', 'type': int, 'default': 3, 'help': 'Points to win'},
    ]

    def __init__(self):
        self._score = 0
        self._keys = KeyState()

    def _get_internal_state(self) -> GameState:
        return GameState.GAME_OVER if self._score >= 3 else GameState.PLAYING

    def get_score(self) -> int:
        return self._score

    def handle_input(self, keys: KeyState) -> None:
        self._keys = keys

    def update(self, dt: float) -> None:
        if self._keys.right:
            self._score += 1

    def render(self, screen) -> None:
        pass


class TestBaseGameInterface:
    """Test behavior shared by every game."""

    def test_state_maps_internal_state(self):
        game = CounterGame()
        assert game.state == GameState.PLAYING
        game.handle_input(KeyState(right=True))
        for _ in range(3):
            game.update(0.01)
        assert game.state == GameState.GAME_OVER

    def test_game_arguments_take_precedence(self):
        args = CounterGame.get_arguments()
        names = [arg['name'] for arg in args]
        assert names == ['--log-level', '--goal']
        assert args[0]['default'] == 'DEBUG'

    def test_info(self):
        info = CounterGame.get_info()
        assert info['name'] == "Counter"
        assert info['version'] == "1.0.0"
        assert info['author'] == "Unknown"

    def test_default_reset_is_noop(self):
        game = CounterGame()
        game.reset()
        assert game.get_score() == 0
