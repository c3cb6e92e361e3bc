"""
Session state shared by every update step
"""

from __future__ import annotations

import random
from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, List, Optional

from .entities import Player, Bullet, Enemy, ExpOrb

EVENT_KEYS = ("shots", "hits", "kills", "damage_taken", "exp_gained", "level_ups", "orbs_collected")


class GameResult(Enum):
    WIN = "You Win!"
    LOSS = "Game Over!"

    @property
    def message(self) -> str:
        return self.value


def player_speed_for_width(width: float) -> float:
    """Player speed scales with the arena width"""
    return max(3.0, width * 0.004)


@dataclass
class World:
    """Everything a tick reads and mutates.

    Owned by SurvivorGame; update functions receive it explicitly.
    """
    width: float
    height: float
    player: Player
    bullets: List[Bullet] = field(default_factory=list)
    enemies: List[Enemy] = field(default_factory=list)
    orbs: List[ExpOrb] = field(default_factory=list)
    spawn_counter: int = 0
    start_time: float = 0.0
    last_shot_time: Optional[float] = None
    result: Optional[GameResult] = None
    rng: random.Random = field(default_factory=random.Random)
    events: Dict[str, float] = field(default_factory=dict)

    @property
    def terminal(self) -> bool:
        return self.result is not None

    def end(self, result: GameResult):
        if self.result is None:
            self.result = result

    def clear_events(self):
        self.events = {k: 0.0 for k in EVENT_KEYS}

    def record(self, key: str, amount: float = 1.0):
        self.events[key] = self.events.get(key, 0.0) + amount

    @classmethod
    def create(cls, width: float, height: float, start_time: float = 0.0,
               rng: Optional[random.Random] = None) -> "World":
        """Fresh session with the player centred"""
        player = Player(x=width * 0.5, y=height * 0.5, speed=player_speed_for_width(width))
        world = cls(width=width, height=height, player=player, start_time=start_time)
        if rng is not None:
            world.rng = rng
        world.clear_events()
        return world
