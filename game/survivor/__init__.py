"""Arena survival game - simulation core and Gymnasium environment"""

from .entities import Archetype, InputState, Player, Bullet, Enemy, ExpOrb
from .world import World, GameResult
from .session import SurvivorGame
from .survivor_env import SurvivorEnv, run_random_episode

__all__ = [
    'Archetype', 'InputState', 'Player', 'Bullet', 'Enemy', 'ExpOrb',
    'World', 'GameResult', 'SurvivorGame', 'SurvivorEnv', 'run_random_episode',
]
