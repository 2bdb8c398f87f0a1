"""Space Invaders arcade game: aliens, bunkers, lasers, a mystery ship and the pygame window."""

__version__ = "1.0.0"