"""2D Game module - Vertical airplane fighter simulation"""

from .config import ConfigError, FighterConfig, FIGHTER_CONFIG
from .engine import SimulationDriver
from .entities import Action, InputIntent, Phase, SimulationState
from .fighter_env import FighterEnv, run_random_episode
from .session import Session

__all__ = [
    'Action',
    'ConfigError',
    'FIGHTER_CONFIG',
    'FighterConfig',
    'FighterEnv',
    'InputIntent',
    'Phase',
    'Session',
    'SimulationDriver',
    'SimulationState',
    'run_random_episode',
]
