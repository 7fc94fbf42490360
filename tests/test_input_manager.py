"""
Tests for the directional input layer.

Tests cover:
- DirectionalInput immutability and helpers
- InputManager source handling and delegation
- KeyboardInputSource key sampling (pygame state patched)
"""

import pytest
import pygame
from pydantic import ValidationError

from arena.input import DirectionalInput, InputManager, NEUTRAL
from arena.input.sources import InputSource, KeyboardInputSource


class MockInputSource(InputSource):
    """Mock implementation of InputSource for testing."""

    def __init__(self, state: DirectionalInput = NEUTRAL):
        self.state = state
        self.update_count = 0
        self.last_dt = None

    def poll_state(self) -> DirectionalInput:
        return self.state

    def update(self, dt: float) -> None:
        self.update_count += 1
        self.last_dt = dt


class FakePressed:
    """Stand-in for pygame's ScancodeWrapper."""

    def __init__(self, held):
        self._held = set(held)

    def __getitem__(self, key):
        return key in self._held


class TestDirectionalInput:
    """DirectionalInput model."""

    def test_defaults_to_neutral(self):
        state = DirectionalInput()
        assert state == NEUTRAL
        assert not state.any_held

    def test_frozen(self):
        state = DirectionalInput(left=True)
        with pytest.raises(ValidationError):
            state.left = False

    def test_str_lists_held(self):
        assert "left" in str(DirectionalInput(left=True))
        assert "none" in str(NEUTRAL)


class TestInputManager:
    """InputManager construction and delegation."""

    def test_without_source_returns_neutral(self):
        manager = InputManager()
        assert not manager.has_source()
        assert manager.get_state() == NEUTRAL
        manager.update(0.016)  # no error

    def test_with_source(self):
        source = MockInputSource(DirectionalInput(up=True))
        manager = InputManager(source)
        assert manager.get_source() is source
        assert manager.get_state().up

    def test_update_delegates(self):
        source = MockInputSource()
        manager = InputManager(source)
        manager.update(0.5)
        assert source.update_count == 1
        assert source.last_dt == 0.5

    def test_set_source_switches(self):
        first = MockInputSource(DirectionalInput(left=True))
        second = MockInputSource(DirectionalInput(right=True))
        manager = InputManager(first)
        manager.set_source(second)
        assert manager.get_state().right
        assert not manager.get_state().left


class TestKeyboardInputSource:
    """KeyboardInputSource samples held keys on update."""

    def test_neutral_before_update(self):
        assert KeyboardInputSource().poll_state() == NEUTRAL

    def test_arrow_keys(self, monkeypatch):
        monkeypatch.setattr(pygame.key, 'get_pressed',
                            lambda: FakePressed([pygame.K_LEFT, pygame.K_UP]))
        source = KeyboardInputSource()
        source.update(0.016)
        assert source.poll_state() == DirectionalInput(left=True, up=True)

    def test_wasd_keys(self, monkeypatch):
        monkeypatch.setattr(pygame.key, 'get_pressed',
                            lambda: FakePressed([pygame.K_d, pygame.K_s]))
        source = KeyboardInputSource()
        source.update(0.016)
        assert source.poll_state() == DirectionalInput(right=True, down=True)

    def test_custom_bindings(self, monkeypatch):
        monkeypatch.setattr(pygame.key, 'get_pressed',
                            lambda: FakePressed([pygame.K_j]))
        source = KeyboardInputSource(bindings={
            'left': (pygame.K_j,),
            'right': (pygame.K_l,),
            'up': (pygame.K_i,),
            'down': (pygame.K_k,),
        })
        source.update(0.016)
        assert source.poll_state() == DirectionalInput(left=True)
