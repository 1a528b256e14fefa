"""
Entity movers: player, projectiles and enemy craft

Pure functions; ids for new entities come from the caller's counter.
"""

from __future__ import annotations

import random
from typing import Callable, Tuple

from .config import FighterConfig
from .entities import EnemyCraft, InputIntent, Player, Projectile
from .utils import clamp


def move_player(player: Player, intent: InputIntent, config: FighterConfig) -> Player:
    """Step once per pressed direction, then keep the whole box inside the field"""
    x, y = player.x, player.y

    # axes are independent, diagonals are not normalized
    if intent.move_left:
        x -= config.player_speed
    if intent.move_right:
        x += config.player_speed
    if intent.move_up:
        y -= config.player_speed
    if intent.move_down:
        y += config.player_speed

    x = clamp(x, 0.0, config.max_player_x)
    y = clamp(y, 0.0, config.max_player_y)
    return Player(x=x, y=y)


def muzzle_position(player: Player, config: FighterConfig) -> Tuple[float, float]:
    """Top-left of a new projectile, centered on the player's nose"""
    return (
        player.x + config.player_width / 2 - config.bullet_width / 2,
        player.y,
    )


def update_projectiles(
    projectiles: Tuple[Projectile, ...],
    player: Player,
    intent: InputIntent,
    config: FighterConfig,
    next_id: Callable[[], int],
) -> Tuple[Projectile, ...]:
    moved = [
        Projectile(id=p.id, x=p.x, y=p.y - config.bullet_speed)
        for p in projectiles
    ]
    moved = [p for p in moved if p.y > 0]

    # Spawn after the despawn filter so the cap sees the surviving count
    if intent.fire and len(moved) < config.max_bullets:
        x, y = muzzle_position(player, config)
        moved.append(Projectile(id=next_id(), x=x, y=y))

    return tuple(moved)


def update_enemies(
    enemies: Tuple[EnemyCraft, ...],
    config: FighterConfig,
    rng: random.Random,
    next_id: Callable[[], int],
) -> Tuple[EnemyCraft, ...]:
    moved = [
        EnemyCraft(id=e.id, x=e.x, y=e.y + config.enemy_speed)
        for e in enemies
    ]
    moved = [e for e in moved if e.y < config.height]

    # One trial per tick, independent of how many enemies are alive
    if rng.random() < config.p_spawn:
        x = rng.uniform(0.0, config.width - config.enemy_width)
        moved.append(EnemyCraft(id=next_id(), x=x, y=-config.enemy_height))

    return tuple(moved)
