# -*- coding: utf-8 -*-
"""
Gameplay configuration: powerup spawn policy and persisted settings.

Settings come from an external persistence layer. Anything that cannot be decoded falls back to the defaults,
so a corrupt or outdated blob never stops a game from starting.
"""
import json
import logging
import math
from dataclasses import asdict, dataclass, field, fields
from typing import Any, Mapping

# ##: Ranges accepted from persisted settings.
GRID_SIZE_RANGE = (3, 8)
SPAWN_PROBABILITY_RANGE = (0.0, 0.4)
WEIGHT_RANGE = (1.0, 10.0)

POWERUP_NAMES = ('bomb', 'joker', 'surge', 'shuffle', 'glass')

# ##>: Module logger.
_logger = logging.getLogger(__name__)


@dataclass
class PowerupConfig:
    """Spawn configuration of one powerup kind."""

    enabled: bool = True
    weight: float = 5.0

    @property
    def effective_weight(self) -> float:
        """Weight used by the draw: 0 when disabled."""
        return self.weight if self.enabled else 0.0


@dataclass
class SpawnPolicy:
    """
    Everything the spawner needs to decide what appears in an empty cell.

    ``hardcore`` mirrors a ruleset without undo/redo, in which only number tiles spawn.
    """

    bomb: PowerupConfig = field(default_factory=lambda: PowerupConfig(True, 5.0))
    joker: PowerupConfig = field(default_factory=lambda: PowerupConfig(True, 3.0))
    surge: PowerupConfig = field(default_factory=lambda: PowerupConfig(True, 3.0))
    shuffle: PowerupConfig = field(default_factory=lambda: PowerupConfig(True, 2.0))
    glass: PowerupConfig = field(default_factory=lambda: PowerupConfig(True, 6.0))
    master_enabled: bool = True
    probability: float = 0.05
    hardcore: bool = False

    @property
    def allows_powerups(self) -> bool:
        return self.master_enabled and not self.hardcore

    def config_of(self, kind) -> PowerupConfig:
        """Configuration of a powerup kind, given as a ``TileKind`` or its name."""
        return getattr(self, getattr(kind, 'value', kind))

    def weight_of(self, kind) -> float:
        return self.config_of(kind).effective_weight

    @classmethod
    def numbers_only(cls) -> 'SpawnPolicy':
        """Policy of classic 2048: only 2s and 4s."""
        return cls(master_enabled=False)


def _clamp(name: str, value: float, bounds: tuple[float, float], default: float) -> float:
    if not math.isfinite(value):
        _logger.warning('Setting %s=%r is not a finite number, using %r', name, value, default)
        return default

    low, high = bounds
    clamped = min(max(value, low), high)
    if clamped != value:
        _logger.warning('Setting %s=%r out of range [%s, %s], using %r', name, value, low, high, clamped)
    return clamped


def _flag(name: str, value: Any, default: bool) -> bool:
    if isinstance(value, bool):
        return value
    _logger.warning('Setting %s=%r is not a boolean, using %r', name, value, default)
    return default


@dataclass
class GameSettings:
    """Gameplay settings recognized by the engine."""

    grid_size: int = 4
    undo_redo_enabled: bool = True
    master_powerup_enabled: bool = True
    spawn_probability: float = 0.05
    powerups: dict[str, PowerupConfig] = field(
        default_factory=lambda: {
            'bomb': PowerupConfig(True, 5.0),
            'joker': PowerupConfig(True, 3.0),
            'surge': PowerupConfig(True, 3.0),
            'shuffle': PowerupConfig(True, 2.0),
            'glass': PowerupConfig(True, 6.0),
        }
    )

    @property
    def hardcore(self) -> bool:
        """Hardcore ruleset: no undo/redo and no powerups."""
        return not self.undo_redo_enabled

    @property
    def spawn_policy(self) -> SpawnPolicy:
        defaults = SpawnPolicy()
        configs = {name: self.powerups.get(name, getattr(defaults, name)) for name in POWERUP_NAMES}
        return SpawnPolicy(
            **configs,
            master_enabled=self.master_powerup_enabled,
            probability=self.spawn_probability,
            hardcore=self.hardcore,
        )

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> 'GameSettings':
        """
        Build settings from a decoded mapping.

        Unknown keys are ignored, missing keys keep their default and numeric values are clamped to their range.
        Non-finite numbers and non-boolean switches keep their default.

        Raises
        ------
        TypeError, ValueError, AttributeError, OverflowError
            If a value has the wrong shape.
        """
        settings = cls()
        known = {item.name for item in fields(cls)}

        for name, value in data.items():
            if name not in known:
                _logger.debug('Ignoring unknown setting %r', name)
                continue
            if name == 'powerups':
                for powerup, raw in dict(value).items():
                    if powerup not in POWERUP_NAMES:
                        _logger.debug('Ignoring unknown powerup %r', powerup)
                        continue
                    current = settings.powerups[powerup]
                    enabled = _flag(f'{powerup}.enabled', raw.get('enabled', current.enabled), current.enabled)
                    weight = float(raw.get('weight', current.weight))
                    weight = _clamp(f'{powerup}.weight', weight, WEIGHT_RANGE, current.weight)
                    settings.powerups[powerup] = PowerupConfig(enabled, weight)
            elif name == 'grid_size':
                settings.grid_size = int(_clamp(name, float(value), GRID_SIZE_RANGE, settings.grid_size))
            elif name == 'spawn_probability':
                value = float(value)
                settings.spawn_probability = _clamp(name, value, SPAWN_PROBABILITY_RANGE, settings.spawn_probability)
            else:
                setattr(settings, name, _flag(name, value, getattr(settings, name)))

        return settings


def load_settings(raw: str | bytes | Mapping[str, Any] | None) -> GameSettings:
    """
    Decode persisted settings, falling back to the defaults on any failure.

    Parameters
    ----------
    raw : str, bytes, Mapping or None
        A JSON document, an already decoded mapping, or None when nothing was persisted.

    Returns
    -------
    GameSettings
        The decoded settings, or the defaults.
    """
    if raw is None:
        return GameSettings()

    try:
        data = json.loads(raw) if isinstance(raw, (str, bytes, bytearray)) else raw
        if not isinstance(data, Mapping):
            raise TypeError(f'Expected a mapping, got {type(data).__name__}')
        return GameSettings.from_dict(data)
    except (TypeError, ValueError, AttributeError, OverflowError) as error:
        _logger.warning('Failed to load settings, using defaults: %s', error)
        return GameSettings()
