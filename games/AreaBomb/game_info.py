"""AreaBomb - Game Info

Dodge game where area bombs spawn around the arena, grow over a
countdown and damage the actor if it is inside the blast on expiry.
"""

NAME = "Area Bomb"
DESCRIPTION = "Bombs grow over a countdown - get out of the blast square before they go off"
VERSION = "1.0.0"
AUTHOR = "Arena Team"

ARGUMENTS = [
    {
        'name': '--pacing',
        'type': str,
        'default': None,
        'choices': ['relaxed', 'standard', 'frantic'],
        'help': 'Pacing preset: relaxed (slow), standard (medium), frantic (fast)'
    },
    {
        'name': '--spawn-interval',
        'type': float,
        'default': None,
        'help': 'Seconds between hazard spawns (overrides pacing preset)'
    },
    {
        'name': '--radius-min',
        'type': float,
        'default': None,
        'help': 'Smallest hazard half-extent'
    },
    {
        'name': '--radius-max',
        'type': float,
        'default': None,
        'help': 'Largest hazard half-extent'
    },
    {
        'name': '--duration-min',
        'type': float,
        'default': None,
        'help': 'Shortest fuse in seconds'
    },
    {
        'name': '--duration-max',
        'type': float,
        'default': None,
        'help': 'Longest fuse in seconds'
    },
    {
        'name': '--damage',
        'type': float,
        'default': None,
        'help': 'Damage dealt by each detonation that catches the actor'
    },
    {
        'name': '--speed',
        'type': float,
        'default': None,
        'help': 'Actor speed (units per second)'
    },
    {
        'name': '--max-health',
        'type': float,
        'default': None,
        'help': 'Actor starting health'
    },
    {
        'name': '--seed',
        'type': int,
        'default': None,
        'help': 'Random seed for reproducible spawns'
    },
]


def get_game_mode(**kwargs):
    """Factory function to create game instance."""
    from games.AreaBomb.game_mode import AreaBombMode
    return AreaBombMode(**kwargs)
