"""
SimulationDriver - one fixed step of the fighter game per call
--------------------------------------------------------------
- Movers, explosion aging and collision resolution composed in a fixed order
- Owns the id counter shared by projectiles, enemies and bursts
- Latches game over: a finished state is returned untouched
"""

from __future__ import annotations

import itertools
import random
import time
from dataclasses import replace
from typing import Callable, Optional

from loguru import logger

from .collisions import resolve
from .config import FighterConfig
from .entities import InputIntent, Player, SimulationState
from .explosions import advance_explosions
from .movers import move_player, update_enemies, update_projectiles


def initial_state(config: FighterConfig) -> SimulationState:
    """State before any session has been started"""
    sx, sy = config.player_spawn
    return SimulationState(player=Player(x=sx, y=sy))


class SimulationDriver:
    """Advances a SimulationState by exactly one tick per call"""

    def __init__(
        self,
        config: Optional[FighterConfig] = None,
        rng: Optional[random.Random] = None,
        clock: Optional[Callable[[], float]] = None,
    ):
        self.config = (config or FighterConfig()).validate()
        # Unseeded unless the caller supplies its own source
        self.rng = rng if rng is not None else random.Random()
        self.clock = clock if clock is not None else time.monotonic
        self._ids = itertools.count(1)

    def next_id(self) -> int:
        return next(self._ids)

    def start_state(self) -> SimulationState:
        return replace(initial_state(self.config), is_playing=True)

    def tick(self, state: SimulationState, intent: InputIntent) -> SimulationState:
        if not state.is_playing:
            return state

        cfg = self.config
        now = self.clock()

        player = move_player(state.player, intent, cfg)
        projectiles = update_projectiles(state.projectiles, player, intent, cfg, self.next_id)
        enemies = update_enemies(state.enemies, cfg, self.rng, self.next_id)

        outcome = resolve(projectiles, enemies, player, cfg, now, self.next_id)

        # Bursts spawned this tick start aging on the next one
        explosions = advance_explosions(state.explosions, now, cfg) + outcome.spawned_explosions
        score = state.score + outcome.score_delta

        if outcome.game_over:
            logger.info(f"Game over, score {score}")

        return SimulationState(
            player=player,
            is_playing=not outcome.game_over,
            is_game_over=outcome.game_over,
            score=score,
            projectiles=outcome.surviving_projectiles,
            enemies=outcome.surviving_enemies,
            explosions=explosions,
        )
