"""Shared fixtures for the fighter simulation tests."""

from __future__ import annotations

import itertools
import random

import pytest

from game.fighter.config import FighterConfig
from game.fighter.entities import Player


class FakeClock:
    """Settable clock standing in for time.monotonic."""

    def __init__(self, now: float = 0.0) -> None:
        self.now = now

    def __call__(self) -> float:
        return self.now

    def advance(self, dt: float) -> None:
        self.now += dt


@pytest.fixture
def config() -> FighterConfig:
    """Default game values with enemy spawning switched off."""
    return FighterConfig(p_spawn=0.0)


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def ids():
    counter = itertools.count(1000)
    return lambda: next(counter)


@pytest.fixture
def rng() -> random.Random:
    return random.Random(1234)


@pytest.fixture
def far_player() -> Player:
    """Player parked in the bottom-right corner, away from test entities."""
    return Player(x=360.0, y=560.0)
