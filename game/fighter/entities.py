"""
Game entity dataclasses

Every entity is a frozen value; a tick builds new ones instead of mutating.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Enum
from typing import Tuple


@dataclass(frozen=True)
class Player:
    """Player craft, top-left corner of its box"""
    x: float
    y: float


@dataclass(frozen=True)
class Projectile:
    """Bullet fired upward by the player"""
    id: int
    x: float
    y: float


@dataclass(frozen=True)
class EnemyCraft:
    """Enemy descending from the top edge"""
    id: int
    x: float
    y: float


@dataclass(frozen=True)
class Particle:
    """Single explosion particle"""
    x: float
    y: float
    dx: float
    dy: float
    alpha: float = 1.0
    size: float = 10.0
    base_size: float = 10.0  # size at emission, decay is relative to it


@dataclass(frozen=True)
class ExplosionBurst:
    """Radial particle burst left by a destroyed enemy"""
    id: int
    created_at: float  # seconds, clock of the driver
    particles: Tuple[Particle, ...] = ()


class Phase(str, Enum):
    NOT_STARTED = "not_started"
    PLAYING = "playing"
    GAME_OVER = "game_over"


@dataclass(frozen=True)
class SimulationState:
    """Aggregate snapshot handed to the renderer after each tick"""
    player: Player
    is_playing: bool = False
    is_game_over: bool = False
    score: int = 0
    projectiles: Tuple[Projectile, ...] = ()
    enemies: Tuple[EnemyCraft, ...] = ()
    explosions: Tuple[ExplosionBurst, ...] = ()

    @property
    def phase(self) -> Phase:
        if self.is_game_over:
            return Phase.GAME_OVER
        if self.is_playing:
            return Phase.PLAYING
        return Phase.NOT_STARTED


class Action(str, Enum):
    """Named input actions, in the order used by the Gymnasium action space"""
    MOVE_LEFT = "move_left"
    MOVE_RIGHT = "move_right"
    MOVE_UP = "move_up"
    MOVE_DOWN = "move_down"
    FIRE = "fire"


@dataclass(frozen=True)
class InputIntent:
    """Boolean input snapshot sampled once per tick"""
    move_left: bool = False
    move_right: bool = False
    move_up: bool = False
    move_down: bool = False
    fire: bool = False

    @classmethod
    def from_action(cls, action) -> "InputIntent":
        """Build from a 5-element binary vector ordered like Action"""
        flags = [bool(a) for a in action]
        if len(flags) != len(Action):
            raise ValueError(f"Expected {len(Action)} action flags, got {len(flags)}")
        return cls(*flags)

    def with_action(self, action: Action, pressed: bool) -> "InputIntent":
        return replace(self, **{Action(action).value: pressed})
