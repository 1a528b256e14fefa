"""
Explosion particle bursts: spawning and age-based decay
"""

from __future__ import annotations

import math
from typing import Tuple

from .config import FighterConfig
from .entities import ExplosionBurst, Particle


def spawn_explosion(
    x: float,
    y: float,
    created_at: float,
    config: FighterConfig,
    burst_id: int,
) -> ExplosionBurst:
    """Emit particles at equally spaced angles around (x, y)"""
    n = config.explosion_particles
    size = config.enemy_width / 3
    particles = []
    for i in range(n):
        ang = (math.pi * 2) * i / n
        particles.append(Particle(
            x=x,
            y=y,
            dx=math.cos(ang) * config.particle_speed,
            dy=math.sin(ang) * config.particle_speed,
            alpha=1.0,
            size=size,
            base_size=size,
        ))
    return ExplosionBurst(id=burst_id, created_at=created_at, particles=tuple(particles))


def advance_explosions(
    bursts: Tuple[ExplosionBurst, ...],
    now: float,
    config: FighterConfig,
) -> Tuple[ExplosionBurst, ...]:
    """
    Age every burst against `now`.

    Bursts at or past `explosion_duration` are dropped. Surviving particles
    drift by their (constant) velocity; alpha falls linearly to 0 and size to
    half of the emission size over the burst's lifetime.
    """
    duration = config.explosion_duration
    updated = []
    for burst in bursts:
        age = now - burst.created_at
        if age >= duration:
            continue

        progress = age / duration
        particles = tuple(
            Particle(
                x=p.x + p.dx,
                y=p.y + p.dy,
                dx=p.dx,
                dy=p.dy,
                alpha=1.0 - progress,
                size=p.base_size * (1.0 - progress * 0.5),
                base_size=p.base_size,
            )
            for p in burst.particles
        )
        updated.append(ExplosionBurst(id=burst.id, created_at=burst.created_at, particles=particles))

    return tuple(updated)
