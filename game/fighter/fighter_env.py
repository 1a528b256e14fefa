"""
FighterEnv - Gymnasium wrapper around the fighter simulation
-------------------------------------------------------------
- Same tick function as the interactive game (Session / SimulationDriver)
- MultiBinary(5) action: [left, right, up, down, fire]
- Vector observation: player position + projectile load + top-K nearest enemies
- Simulated clock advances 1 / frame_rate per step, so bursts age per step

Quick test:
    python -m game.fighter.fighter_env
"""

from __future__ import annotations

import random
from typing import Any, Dict, Optional, Union

import numpy as np
import gymnasium as gym
from gymnasium import spaces
from loguru import logger

from .config import FighterConfig, REWARD_CONFIG
from .entities import Action, InputIntent
from .session import Session
from .utils import clamp


class FighterEnv(gym.Env):
    """Vertical shooter environment driven by the fixed-tick simulation"""

    metadata = {"render_modes": ["human"], "render_fps": 60}

    def __init__(
        self,
        render_mode: Optional[str] = None,
        config: Union[FighterConfig, Dict[str, Any], None] = None,
        max_steps: int = 3600,  # 60s at 60 FPS
        k_enemies: int = 5,
        reward_config: Optional[Dict[str, float]] = None,
    ):
        super().__init__()

        assert render_mode is None or render_mode in self.metadata["render_modes"]
        self.render_mode = render_mode

        if isinstance(config, dict):
            config = FighterConfig.from_dict(config)
        self.config = (config or FighterConfig()).validate()
        self.metadata = dict(self.metadata, render_fps=self.config.frame_rate)
        self.max_steps = max_steps
        self.k_enemies = k_enemies
        self.reward_config = dict(REWARD_CONFIG, **(reward_config or {}))

        self.action_space = spaces.MultiBinary(len(Action))

        # Player: pos(2) projectile load(1)
        # Each enemy: rel pos(2)
        obs_dim = 2 + 1 + self.k_enemies * 2
        self.observation_space = spaces.Box(
            low=-1.0, high=1.0, shape=(obs_dim,), dtype=np.float32
        )

        self.session: Session = None  # type: ignore
        self._step_count = 0
        self._window = None

    # ----------------------------
    # Gym API
    # ----------------------------

    def _sim_time(self) -> float:
        return self._step_count / self.config.frame_rate

    def reset(self, seed: Optional[int] = None, options: Optional[dict] = None):
        super().reset(seed=seed)

        self._step_count = 0
        self.session = Session(self.config, rng=random.Random(seed), clock=self._sim_time)
        self.session.start_session()

        if self._window is not None:
            self._window.session = self.session

        return self._get_obs(), self._get_info()

    def step(self, action):
        prev_score = self.session.score

        self.session.set_intent(InputIntent.from_action(action))
        state = self.session.tick()
        self._step_count += 1

        reward = self._compute_reward(state.score - prev_score, state.is_game_over)

        terminated = state.is_game_over
        truncated = self._step_count >= self.max_steps

        obs = self._get_obs()
        info = self._get_info()

        if self.render_mode == "human":
            self.render()

        return obs, reward, terminated, truncated, info

    # ----------------------------
    # Observation / reward / info
    # ----------------------------

    def _get_obs(self) -> np.ndarray:
        cfg = self.config
        state = self.session.state
        player = state.player

        px = player.x / max(1e-6, cfg.max_player_x)
        py = player.y / max(1e-6, cfg.max_player_y)
        load = len(state.projectiles) / max(1, cfg.max_bullets)

        obs_parts = [px * 2 - 1, py * 2 - 1, clamp(load * 2 - 1, -1, 1)]

        # Enemies: top-K nearest, measured center to center
        cx = player.x + cfg.player_width / 2
        cy = player.y + cfg.player_height / 2

        def rel(e):
            return (
                e.x + cfg.enemy_width / 2 - cx,
                e.y + cfg.enemy_height / 2 - cy,
            )

        enemies_sorted = sorted(
            state.enemies,
            key=lambda e: rel(e)[0] ** 2 + rel(e)[1] ** 2,
        )
        for i in range(self.k_enemies):
            if i < len(enemies_sorted):
                dx, dy = rel(enemies_sorted[i])
                obs_parts += [
                    clamp(dx / cfg.width, -1, 1),
                    clamp(dy / cfg.height, -1, 1),
                ]
            else:
                obs_parts += [0.0, 0.0]

        return np.array(obs_parts, dtype=np.float32)

    def _compute_reward(self, score_delta: int, game_over: bool) -> float:
        rc = self.reward_config
        kills = score_delta / self.config.kill_score if self.config.kill_score else 0.0

        reward = rc["R_KILL"] * kills
        if game_over:
            reward -= rc["R_DEATH"]
        else:
            reward += rc["R_SURVIVE"]
        return float(reward)

    def _get_info(self) -> Dict[str, Any]:
        state = self.session.state
        return {
            "score": state.score,
            "num_enemies": len(state.enemies),
            "num_projectiles": len(state.projectiles),
            "num_explosions": len(state.explosions),
            "step": self._step_count,
        }

    # ----------------------------
    # Rendering with Arcade
    # ----------------------------

    def render(self):
        if self.render_mode is None:
            return None

        if self._window is None:
            from .window import FighterWindow
            self._window = FighterWindow(self.session, interactive=False)

        self._window.on_draw()
        return None

    def close(self):
        if self._window is not None:
            self._window.close()
            self._window = None


# ----------------------------
# Quick sanity test
# ----------------------------

def run_random_episode(render: bool = True, seed: Optional[int] = 42) -> float:
    """Run a random episode and return its total reward"""
    env = FighterEnv(render_mode="human" if render else None)
    obs, info = env.reset(seed=seed)
    env.action_space.seed(seed)

    terminated = False
    truncated = False
    total = 0.0

    import time
    while not (terminated or truncated):
        action = env.action_space.sample()
        obs, reward, terminated, truncated, info = env.step(action)
        total += reward

        if render and env._window:
            env._window.dispatch_events()
            env._window.flip()
            time.sleep(1 / env.config.frame_rate)

    logger.info(f"Random episode return: {total:.3f}  score: {info['score']}  steps: {info['step']}")

    env.close()
    return total


if __name__ == "__main__":
    run_random_episode(render=True)
