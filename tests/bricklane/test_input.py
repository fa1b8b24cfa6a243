"""Tests for key state, input sources and the input manager."""

import dataclasses

import pygame
import pytest

from bricklane.games.input import InputManager, KeyState
from bricklane.games.input.sources import (
    InputSource,
    KeyboardInputSource,
    ScriptedInputSource,
)


class TestKeyState:
    """Test the per-tick key value."""

    def test_defaults_nothing_held(self):
        keys = KeyState()
        assert keys.left is False
        assert keys.right is False

    def test_frozen(self):
        with pytest.raises(dataclasses.FrozenInstanceError):
            KeyState().left = True

    def test_both_held_is_valid(self):
        keys = KeyState(left=True, right=True)
        assert keys.left and keys.right


class TestScriptedInputSource:
    """Test replay of queued states."""

    def test_replays_in_order_then_idles(self):
        source = ScriptedInputSource([KeyState(left=True), KeyState(right=True)])
        assert source.poll() == KeyState()

        source.update(0.01)
        assert source.poll() == KeyState(left=True)
        source.update(0.01)
        assert source.poll() == KeyState(right=True)
        source.update(0.01)
        assert source.poll() == KeyState()

    def test_push_repeat(self):
        source = ScriptedInputSource()
        source.push(KeyState(right=True), repeat=3)
        assert source.remaining == 3
        source.update(0.01)
        assert source.remaining == 2

    def test_is_input_source(self):
        assert isinstance(ScriptedInputSource(), InputSource)


class TestKeyboardInputSource:
    """Test arrow keys mapped through pygame's pressed table."""

    @pytest.fixture
    def pressed(self, monkeypatch):
        held = set()

        class Pressed:
            def __getitem__(self, key):
                return key in held

        monkeypatch.setattr(pygame.key, 'get_pressed', lambda: Pressed())
        return held

    def test_arrow_keys(self, pressed):
        source = KeyboardInputSource()
        pressed.add(pygame.K_LEFT)
        source.update(0.01)
        assert source.poll() == KeyState(left=True, right=False)

        pressed.add(pygame.K_RIGHT)
        source.update(0.01)
        assert source.poll() == KeyState(left=True, right=True)

    def test_custom_keys(self, pressed):
        source = KeyboardInputSource(left_keys=(pygame.K_a,), right_keys=(pygame.K_d,))
        pressed.add(pygame.K_d)
        source.update(0.01)
        assert source.poll() == KeyState(right=True)


class TestInputManager:
    """Test source switching."""

    def test_no_source_reads_idle(self):
        manager = InputManager()
        assert not manager.has_source()
        manager.update(0.01)
        assert manager.get_keys() == KeyState()

    def test_delegates_to_source(self):
        source = ScriptedInputSource([KeyState(left=True)])
        manager = InputManager()
        manager.set_source(source)
        assert manager.get_source() is source
        manager.update(0.01)
        assert manager.get_keys() == KeyState(left=True)
