"""
Session controller: the single entry point for input, render and UI adapters
"""

from __future__ import annotations

import random
from typing import Callable, Optional

from loguru import logger

from .config import FighterConfig
from .engine import SimulationDriver, initial_state
from .entities import Action, InputIntent, Phase, SimulationState


class Session:
    """Owns the current SimulationState and the latest InputIntent"""

    def __init__(
        self,
        config: Optional[FighterConfig] = None,
        rng: Optional[random.Random] = None,
        clock: Optional[Callable[[], float]] = None,
    ):
        self._config = config or FighterConfig()
        self._rng = rng
        self._clock = clock
        self._driver: Optional[SimulationDriver] = None
        self._state = initial_state(self._config)
        self._intent = InputIntent()

    # ----------------------------
    # Session boundary
    # ----------------------------

    def start_session(self) -> SimulationState:
        """Reset to a fresh playing state; rejects an invalid config"""
        self._config.validate()
        if self._driver is None:
            self._driver = SimulationDriver(self._config, rng=self._rng, clock=self._clock)
        self._state = self._driver.start_state()
        logger.info("Session started")
        return self._state

    def tick(self) -> SimulationState:
        if self._driver is None:
            return self._state
        # Intent is read once, as a whole snapshot
        intent = self._intent
        self._state = self._driver.tick(self._state, intent)
        return self._state

    # ----------------------------
    # Input boundary
    # ----------------------------

    def set_intent(self, intent: InputIntent) -> None:
        self._intent = intent

    def press(self, action: Action) -> None:
        self._intent = self._intent.with_action(action, True)

    def release(self, action: Action) -> None:
        self._intent = self._intent.with_action(action, False)

    # ----------------------------
    # Read-only queries
    # ----------------------------

    @property
    def config(self) -> FighterConfig:
        return self._config

    @property
    def intent(self) -> InputIntent:
        return self._intent

    @property
    def state(self) -> SimulationState:
        return self._state

    @property
    def phase(self) -> Phase:
        return self._state.phase

    @property
    def is_playing(self) -> bool:
        return self._state.is_playing

    @property
    def is_game_over(self) -> bool:
        return self._state.is_game_over

    @property
    def score(self) -> int:
        return self._state.score
