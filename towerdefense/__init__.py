"""Game rules for a grid-based tower defense game: maps, waves, turrets, effects, scores and scene flow."""

__version__ = "0.1.0"