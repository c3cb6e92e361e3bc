"""
Enemy spawning at the arena edges
"""

from __future__ import annotations

import random
from typing import Optional, Tuple

from .entities import Archetype, Enemy
from .utils import circles_overlap
from .world import World

SPAWN_RATE = 35  # ticks between spawn attempts

EDGES = ("top", "right", "bottom", "left")


def pick_edge_position(width: float, height: float, rng: random.Random) -> Tuple[float, float]:
    """Uniform random edge, uniform random point along it"""
    side = EDGES[rng.randrange(4)]
    if side == "top":
        return rng.random() * width, 0.0
    if side == "right":
        return width, rng.random() * height
    if side == "bottom":
        return rng.random() * width, height
    return 0.0, rng.random() * height


def pick_archetype(u: float) -> Archetype:
    # 40% basic, 30% shooter, 30% tank
    if u < 0.4:
        return Archetype.BASIC
    if u < 0.7:
        return Archetype.SHOOTER
    return Archetype.TANK


def can_place(world: World, enemy: Enemy) -> bool:
    """True when the enemy's circle overlaps no live enemy"""
    for other in world.enemies:
        if not other.alive:
            continue
        if circles_overlap(enemy.x, enemy.y, enemy.radius, other.x, other.y, other.radius):
            return False
    return True


def try_spawn_enemy(world: World) -> Optional[Enemy]:
    """Attempt one spawn. Returns the enemy, or None if it was rejected."""
    x, y = pick_edge_position(world.width, world.height, world.rng)
    enemy = Enemy.spawn(pick_archetype(world.rng.random()), x, y)
    if not can_place(world, enemy):
        return None
    world.enemies.append(enemy)
    return enemy


def spawn_tick(world: World) -> Optional[Enemy]:
    """Advance the spawn counter; attempt a spawn every SPAWN_RATE ticks"""
    world.spawn_counter += 1
    if world.spawn_counter < SPAWN_RATE:
        return None
    # Counter resets whether or not the attempt succeeds
    world.spawn_counter = 0
    return try_spawn_enemy(world)
