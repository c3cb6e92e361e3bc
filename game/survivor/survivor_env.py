"""
SurvivorEnv - the survival game as a Gymnasium environment
----------------------------------------------------------
- Wraps SurvivorGame with a simulated clock (dt seconds per step)
- Auto-attack is handled by the game; the agent only moves
- Vector observation: player state + top-K nearest enemies + top-M nearest
  orbs + top-B nearest enemy bullets
- MultiDiscrete action space: [horizontal(3), vertical(3)]

Quick test:
    python -m game.survivor.survivor_env
"""

from __future__ import annotations

import random
from typing import Any, Dict, List, Optional, Tuple

import numpy as np
import gymnasium as gym
from gymnasium import spaces

from .entities import Archetype, InputState
from .combat import INVULNERABLE_TICKS
from .session import SurvivorGame, GAME_DURATION
from .utils import clamp
from .world import GameResult

ARCHETYPE_CODES = {
    Archetype.BASIC: 1 / 3,
    Archetype.SHOOTER: 2 / 3,
    Archetype.TANK: 1.0,
}

DEFAULT_REWARDS = {
    "R_KILL": 1.0,
    "R_EXP": 0.01,       # per experience point
    "R_LEVEL": 1.0,
    "R_DAMAGE": 0.05,    # per health point lost
    "R_TIME": 0.001,     # survival bonus per step
    "R_DEATH": 10.0,
    "R_WIN": 10.0,
}


class SurvivorEnv(gym.Env):
    """Arena survival game exposed through the Gymnasium API"""

    metadata = {"render_modes": ["human"], "render_fps": 60}

    def __init__(
        self,
        render_mode: Optional[str] = None,
        width: int = 800,
        height: int = 800,
        dt: float = 1 / 60,
        duration: float = GAME_DURATION,
        max_steps: Optional[int] = None,
        k_enemies: int = 5,
        m_orbs: int = 3,
        b_bullets: int = 3,
        reward_config: Optional[Dict[str, float]] = None,
    ):
        super().__init__()

        assert render_mode is None or render_mode in self.metadata["render_modes"]
        assert dt > 0, "dt must be positive."
        self.render_mode = render_mode

        self.width = width
        self.height = height
        self.dt = dt
        self.duration = duration
        # One step past the match length so a win is reported as termination
        self.max_steps = max_steps if max_steps is not None else int(duration / dt) + 2

        self.k_enemies = k_enemies
        self.m_orbs = m_orbs
        self.b_bullets = b_bullets

        self.rewards = dict(DEFAULT_REWARDS)
        if reward_config:
            self.rewards.update({k: v for k, v in reward_config.items() if k.startswith("R_")})

        # 0 none, 1 left, 2 right / 0 none, 1 up, 2 down
        self.action_space = spaces.MultiDiscrete([3, 3])

        # Player: pos(2) health(1) invulnerability(1) exp(1) level(1) time(1)
        # Each enemy: rel pos(2) archetype(1) health(1)
        # Each orb / enemy bullet: rel pos(2)
        obs_dim = 7 + self.k_enemies * 4 + self.m_orbs * 2 + self.b_bullets * 2
        self.observation_space = spaces.Box(
            low=-1.0, high=1.0, shape=(obs_dim,), dtype=np.float32
        )

        self._now = 0.0
        self.game = SurvivorGame(width=width, height=height, duration=duration,
                                 clock=self._clock, rng=random.Random())
        self._step_count = 0
        self._started = False
        self._window = None

    def _clock(self) -> float:
        return self._now

    # ----------------------------
    # Gym API
    # ----------------------------

    def reset(self, seed: Optional[int] = None, options: Optional[dict] = None):
        super().reset(seed=seed)
        if seed is not None:
            self.game.rng.seed(seed)

        self._now = 0.0
        self._step_count = 0
        self.game.reset()
        self._started = True

        return self._get_obs(), self._get_info()

    def step(self, action):
        if not self._started:
            raise RuntimeError("Call reset() before step().")

        keys = self._action_to_keys(action)

        self._now += self.dt
        result = self.game.tick(keys)
        self._step_count += 1

        reward = self._compute_reward(result)
        terminated = result is not None
        truncated = not terminated and self._step_count >= self.max_steps

        if self.render_mode == "human":
            self.render()

        return self._get_obs(), reward, terminated, truncated, self._get_info()

    @staticmethod
    def _action_to_keys(action) -> InputState:
        h, v = int(action[0]), int(action[1])
        return InputState(left=h == 1, right=h == 2, up=v == 1, down=v == 2)

    # ----------------------------
    # Observation / reward / info
    # ----------------------------

    def _rel(self, x: float, y: float) -> List[float]:
        p = self.game.world.player
        return [clamp((x - p.x) / self.game.width, -1, 1),
                clamp((y - p.y) / self.game.height, -1, 1)]

    def _nearest(self, items, n: int):
        p = self.game.world.player
        return sorted(items, key=lambda e: (e.x - p.x) ** 2 + (e.y - p.y) ** 2)[:n]

    def _get_obs(self) -> np.ndarray:
        world = self.game.world
        p = world.player

        obs_parts = [
            p.x / self.game.width * 2 - 1,
            p.y / self.game.height * 2 - 1,
            clamp(p.health / 100.0, 0, 1) * 2 - 1,
            p.invulnerable_time / INVULNERABLE_TICKS * 2 - 1,
            p.experience / p.experience_to_next * 2 - 1,
            clamp((p.level - 1) / 10.0, 0, 1) * 2 - 1,
            clamp(self.game.elapsed() / self.duration, 0, 1) * 2 - 1,
        ]

        enemies = self._nearest(world.enemies, self.k_enemies)
        for i in range(self.k_enemies):
            if i < len(enemies):
                e = enemies[i]
                health = e.health / e.max_health if e.has_health_pool else 1.0
                obs_parts += self._rel(e.x, e.y) + [ARCHETYPE_CODES[e.archetype], health]
            else:
                obs_parts += [0.0, 0.0, 0.0, 0.0]

        orbs = self._nearest(world.orbs, self.m_orbs)
        for i in range(self.m_orbs):
            obs_parts += self._rel(orbs[i].x, orbs[i].y) if i < len(orbs) else [0.0, 0.0]

        bullets = self._nearest([b for b in world.bullets if b.from_enemy], self.b_bullets)
        for i in range(self.b_bullets):
            obs_parts += self._rel(bullets[i].x, bullets[i].y) if i < len(bullets) else [0.0, 0.0]

        obs = np.clip(np.array(obs_parts, dtype=np.float32), -1.0, 1.0)
        return obs

    def _compute_reward(self, result: Optional[GameResult]) -> float:
        ev = self.game.world.events
        r = self.rewards

        reward = 0.0
        reward += r["R_KILL"] * ev.get("kills", 0.0)
        reward += r["R_EXP"] * ev.get("exp_gained", 0.0)
        reward += r["R_LEVEL"] * ev.get("level_ups", 0.0)
        reward -= r["R_DAMAGE"] * ev.get("damage_taken", 0.0)
        reward += r["R_TIME"]

        if result is GameResult.LOSS:
            reward -= r["R_DEATH"]
        elif result is GameResult.WIN:
            reward += r["R_WIN"]

        return float(reward)

    def _get_info(self) -> Dict[str, Any]:
        world = self.game.world
        p = world.player
        return {
            "health": p.health,
            "level": p.level,
            "experience": p.experience,
            "num_enemies": len(world.enemies),
            "num_orbs": len(world.orbs),
            "num_bullets": len(world.bullets),
            "time_remaining": self.game.time_remaining(),
            "result": world.result.name.lower() if world.result else None,
            "step": self._step_count,
        }

    # ----------------------------
    # Rendering with Arcade
    # ----------------------------

    def render(self):
        if self.render_mode is None:
            return None

        if self._window is None:
            from .window import SurvivorWindow
            self._window = SurvivorWindow(self.game, self.width, self.height, interactive=False)

        self._window.dispatch_events()
        self._window.on_draw()
        self._window.flip()
        return None

    def close(self):
        if self._window is not None:
            self._window.close()
            self._window = None


def run_random_episode(render: bool = True, seed: Optional[int] = 42) -> Tuple[float, Dict[str, Any]]:
    """Run a random episode for testing"""
    env = SurvivorEnv(render_mode="human" if render else None)
    obs, info = env.reset(seed=seed)

    terminated = False
    truncated = False
    total = 0.0

    while not (terminated or truncated):
        action = env.action_space.sample()
        obs, reward, terminated, truncated, info = env.step(action)
        total += reward

    print(f"Random episode return: {total:.2f} ({info['result']}, level {info['level']})")
    env.close()
    return total, info


if __name__ == "__main__":
    run_random_episode(render=True)
