"""Configuration and result types shared by the engine and its callers."""

from .config import GameSettings, PowerupConfig, SpawnPolicy, load_settings
from .types import NO_CHANGE, GameResult, GameSnapshot, MutationResult

__all__ = [
    "GameSettings",
    "PowerupConfig",
    "SpawnPolicy",
    "load_settings",
    "GameResult",
    "GameSnapshot",
    "MutationResult",
    "NO_CHANGE",
]
