"""
Arena - real-time arena simulation framework.

Shared building blocks for arena games: countdown timers, pacing presets,
directional input and the logging system (`arena.logging`).
"""
