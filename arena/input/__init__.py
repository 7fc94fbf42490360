"""
Input abstraction layer for arena games.

Provides held-direction input that works identically with the keyboard
or any scripted source.
"""

from arena.input.input_state import DirectionalInput, NEUTRAL
from arena.input.input_manager import InputManager

__all__ = ['DirectionalInput', 'NEUTRAL', 'InputManager']
