"""
Input sources for arena games.
"""
from arena.input.sources.base import InputSource
from arena.input.sources.keyboard import KeyboardInputSource

__all__ = ['InputSource', 'KeyboardInputSource']
