"""
Game configuration for the fighter simulation
Values match the original browser game (pixels, pixels per tick, seconds)
"""

from __future__ import annotations

from dataclasses import dataclass, fields, replace
from typing import Any, Dict, Tuple


class ConfigError(ValueError):
    """Raised when a configuration cannot produce a valid session"""


# Game parameters
FIGHTER_CONFIG = {
    "width": 400,
    "height": 600,
    "player_width": 40,
    "player_height": 40,
    "player_speed": 5.0,
    "player_spawn": (50.0, 80.0),
    "bullet_width": 5,
    "bullet_height": 10,
    "bullet_speed": 7.0,
    "max_bullets": 5,
    "enemy_width": 30,
    "enemy_height": 30,
    "enemy_speed": 3.0,
    "p_spawn": 0.02,  # per-tick probability
    "frame_rate": 60,
    "explosion_duration": 0.5,  # seconds
    "explosion_particles": 12,
    "particle_speed": 2.0,
    "kill_score": 10,
}

# Reward shaping for the Gymnasium adapter
REWARD_CONFIG = {
    "R_KILL": 1.0,       # per enemy destroyed
    "R_SURVIVE": 0.001,  # per step still playing
    "R_DEATH": 5.0,      # on game over
}


@dataclass(frozen=True)
class FighterConfig:
    """Immutable simulation parameters"""
    width: float = FIGHTER_CONFIG["width"]
    height: float = FIGHTER_CONFIG["height"]
    player_width: float = FIGHTER_CONFIG["player_width"]
    player_height: float = FIGHTER_CONFIG["player_height"]
    player_speed: float = FIGHTER_CONFIG["player_speed"]
    player_spawn: Tuple[float, float] = FIGHTER_CONFIG["player_spawn"]
    bullet_width: float = FIGHTER_CONFIG["bullet_width"]
    bullet_height: float = FIGHTER_CONFIG["bullet_height"]
    bullet_speed: float = FIGHTER_CONFIG["bullet_speed"]
    max_bullets: int = FIGHTER_CONFIG["max_bullets"]
    enemy_width: float = FIGHTER_CONFIG["enemy_width"]
    enemy_height: float = FIGHTER_CONFIG["enemy_height"]
    enemy_speed: float = FIGHTER_CONFIG["enemy_speed"]
    p_spawn: float = FIGHTER_CONFIG["p_spawn"]
    frame_rate: float = FIGHTER_CONFIG["frame_rate"]
    explosion_duration: float = FIGHTER_CONFIG["explosion_duration"]
    explosion_particles: int = FIGHTER_CONFIG["explosion_particles"]
    particle_speed: float = FIGHTER_CONFIG["particle_speed"]
    kill_score: int = FIGHTER_CONFIG["kill_score"]

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "FighterConfig":
        """Build a config from FIGHTER_CONFIG-style overrides"""
        known = {f.name for f in fields(cls)}
        unknown = sorted(set(data) - known)
        if unknown:
            raise ConfigError(f"Unknown config keys: {', '.join(unknown)}")
        values = dict(data)
        if "player_spawn" in values:
            values["player_spawn"] = tuple(values["player_spawn"])
        return cls(**values)

    def with_overrides(self, **overrides) -> "FighterConfig":
        return replace(self, **overrides)

    @property
    def max_player_x(self) -> float:
        return self.width - self.player_width

    @property
    def max_player_y(self) -> float:
        return self.height - self.player_height

    @property
    def tick_interval(self) -> float:
        """Seconds between two scheduled ticks"""
        return 1.0 / self.frame_rate

    def validate(self) -> "FighterConfig":
        """
        Reject parameters that cannot describe a playable field.
        Returns self so it can be chained.
        """
        if self.width <= 0 or self.height <= 0:
            raise ConfigError(f"Field dimensions must be positive, got {self.width}x{self.height}")

        for name in ("player", "bullet", "enemy"):
            w = getattr(self, f"{name}_width")
            h = getattr(self, f"{name}_height")
            if w <= 0 or h <= 0:
                raise ConfigError(f"{name} box must be positive, got {w}x{h}")

        if self.player_width > self.width or self.player_height > self.height:
            raise ConfigError("Player box does not fit inside the field")
        if self.enemy_width > self.width:
            raise ConfigError("Enemy box is wider than the field")

        for name in ("player_speed", "bullet_speed", "enemy_speed", "particle_speed"):
            if getattr(self, name) < 0:
                raise ConfigError(f"{name} must be >= 0, got {getattr(self, name)}")

        if self.max_bullets < 0:
            raise ConfigError(f"max_bullets must be >= 0, got {self.max_bullets}")
        if not 0.0 <= self.p_spawn <= 1.0:
            raise ConfigError(f"p_spawn must be within [0, 1], got {self.p_spawn}")
        if self.frame_rate <= 0:
            raise ConfigError(f"frame_rate must be positive, got {self.frame_rate}")
        if self.explosion_duration <= 0:
            raise ConfigError(f"explosion_duration must be positive, got {self.explosion_duration}")
        if self.explosion_particles < 0:
            raise ConfigError(f"explosion_particles must be >= 0, got {self.explosion_particles}")
        if self.kill_score < 0:
            raise ConfigError(f"kill_score must be >= 0, got {self.kill_score}")

        sx, sy = self.player_spawn
        if not (0 <= sx <= self.max_player_x and 0 <= sy <= self.max_player_y):
            raise ConfigError(f"player_spawn {self.player_spawn} is outside the field")

        return self
