"""
Collision resolution between projectiles, enemy craft and the player
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Set, Tuple

from loguru import logger

from .config import FighterConfig
from .entities import EnemyCraft, ExplosionBurst, Player, Projectile
from .explosions import spawn_explosion
from .utils import Box, box, overlaps


@dataclass(frozen=True)
class CollisionOutcome:
    """Result of one resolve pass"""
    surviving_enemies: Tuple[EnemyCraft, ...] = ()
    surviving_projectiles: Tuple[Projectile, ...] = ()
    score_delta: int = 0
    game_over: bool = False
    spawned_explosions: Tuple[ExplosionBurst, ...] = ()

    @property
    def kills(self) -> int:
        return len(self.spawned_explosions)


def projectile_box(p: Projectile, config: FighterConfig) -> Box:
    return box(p.x, p.y, config.bullet_width, config.bullet_height)


def enemy_box(e: EnemyCraft, config: FighterConfig) -> Box:
    return box(e.x, e.y, config.enemy_width, config.enemy_height)


def player_box(player: Player, config: FighterConfig) -> Box:
    return box(player.x, player.y, config.player_width, config.player_height)


def resolve(
    projectiles: Tuple[Projectile, ...],
    enemies: Tuple[EnemyCraft, ...],
    player: Player,
    config: FighterConfig,
    now: float,
    next_id: Callable[[], int],
) -> CollisionOutcome:
    """
    Cross-check projectiles against enemies, then enemies against the player.

    Projectiles are scanned in list order and each one takes the first enemy
    (in list order) that it overlaps and that no earlier projectile has taken.
    Hits are collected as index sets and applied once at the end, so an enemy
    is destroyed and scored at most once per pass.
    """
    hit_enemies: Set[int] = set()
    spent: Set[int] = set()
    explosions = []
    score = 0

    enemy_boxes = [enemy_box(e, config) for e in enemies]

    # Projectiles vs enemies
    for pi, p in enumerate(projectiles):
        pbox = projectile_box(p, config)
        for ei, ebox in enumerate(enemy_boxes):
            if ei in hit_enemies:
                continue
            if overlaps(pbox, ebox):
                e = enemies[ei]
                hit_enemies.add(ei)
                spent.add(pi)
                explosions.append(spawn_explosion(
                    e.x + config.enemy_width / 2,
                    e.y + config.enemy_height / 2,
                    now,
                    config,
                    next_id(),
                ))
                score += config.kill_score
                logger.debug(f"Enemy {e.id} destroyed by projectile {p.id}")
                break

    surviving_enemies = tuple(e for i, e in enumerate(enemies) if i not in hit_enemies)
    surviving_projectiles = tuple(p for i, p in enumerate(projectiles) if i not in spent)

    # Enemies vs player, a single touch ends the session
    pbox = player_box(player, config)
    game_over = any(overlaps(pbox, enemy_box(e, config)) for e in surviving_enemies)

    return CollisionOutcome(
        surviving_enemies=surviving_enemies,
        surviving_projectiles=surviving_projectiles,
        score_delta=score,
        game_over=game_over,
        spawned_explosions=tuple(explosions),
    )
