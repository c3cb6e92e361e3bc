"""
SurvivorGame - per-tick orchestration of one survival session
-------------------------------------------------------------
- Wall-clock match timer (300 s) and auto-attack cooldown
- Tick-counted invulnerability, enemy shoot cadence and spawn cadence
- Fixed update order: player, bullets, enemies (combat), orbs, spawner
- Win when the timer runs out, loss the tick the player's health hits 0

Rendering and input live in window.py; this module only mutates state.
"""

from __future__ import annotations

import math
import random
import time
from typing import Callable, Optional

from .combat import update_player, update_bullets, update_enemies
from .entities import InputState
from .progression import update_orbs
from .spawner import spawn_tick
from .world import World, GameResult

GAME_DURATION = 5 * 60  # seconds


class SurvivorGame:
    """Owns the World and advances it one tick at a time"""

    def __init__(
        self,
        width: float = 800,
        height: float = 800,
        duration: float = GAME_DURATION,
        clock: Callable[[], float] = time.monotonic,
        on_end: Optional[Callable[[str], None]] = None,
        rng: Optional[random.Random] = None,
        verbose: int = 0,
    ):
        assert width > 0 and height > 0, "Arena must have a positive size."
        assert duration > 0, "Match duration must be positive."

        self.width = width
        self.height = height
        self.duration = duration
        self.clock = clock
        self.on_end = on_end
        self.rng = rng if rng is not None else random.Random()
        self.verbose = verbose

        self.ticks = 0
        self.world: World = None  # type: ignore
        self.reset()

    # ----------------------------
    # Lifecycle
    # ----------------------------

    def reset(self):
        """Start a fresh session at the current clock time"""
        self.ticks = 0
        self.world = World.create(self.width, self.height,
                                  start_time=self.clock(), rng=self.rng)

    def resize(self, width: float, height: float):
        """New arena bounds. Re-centres the player if the session is live."""
        self.width = width
        self.height = height
        self.world.width = width
        self.world.height = height
        if not self.world.terminal:
            self.world.player.x = width / 2
            self.world.player.y = height / 2

    @property
    def terminal(self) -> bool:
        return self.world.terminal

    @property
    def result(self) -> Optional[GameResult]:
        return self.world.result

    # ----------------------------
    # Clock
    # ----------------------------

    def elapsed(self, now: Optional[float] = None) -> float:
        if now is None:
            now = self.clock()
        return now - self.world.start_time

    def time_remaining(self, now: Optional[float] = None) -> float:
        return max(0.0, self.duration - self.elapsed(now))

    def formatted_time(self, now: Optional[float] = None) -> str:
        """Remaining time as M:SS, counting whole elapsed seconds"""
        remaining = max(0, int(self.duration) - math.floor(self.elapsed(now)))
        return f"{remaining // 60}:{remaining % 60:02d}"

    # ----------------------------
    # Tick
    # ----------------------------

    def tick(self, keys: Optional[InputState] = None) -> Optional[GameResult]:
        """Advance the world by one tick.

        Returns the result once the session has ended, otherwise None.
        A terminal session is frozen; further ticks do nothing.
        """
        world = self.world
        if world.terminal:
            return world.result

        world.clear_events()
        now = self.clock()

        if self.time_remaining(now) <= 0:
            return self._finish(GameResult.WIN, now)

        self.ticks += 1
        update_player(world, keys or InputState(), now)
        update_bullets(world)
        update_enemies(world)
        if world.terminal:
            return self._finish(world.result, now)

        update_orbs(world)
        spawn_tick(world)
        return None

    def _finish(self, result: GameResult, now: float) -> GameResult:
        self.world.end(result)
        if self.verbose > 0:
            p = self.world.player
            print(f"[SurvivorGame] {result.message} level={p.level} "
                  f"elapsed={self.elapsed(now):.1f}s ticks={self.ticks}")
        if self.on_end is not None:
            self.on_end(result.message)
        return result
