"""
Experience, levelling and orb collection
"""

from __future__ import annotations

import math

from .entities import ExpOrb, Player
from .utils import distance, direction
from .world import World

EXP_REQUIRED_BASE = 100
EXP_GROWTH = 1.5
ORB_ATTRACTION_RADIUS = 150.0
ORB_SPEED = 5.0


def experience_threshold(level: int) -> int:
    """Experience needed to leave the given level"""
    return math.floor(EXP_REQUIRED_BASE * EXP_GROWTH ** (level - 1))


def gain_experience(player: Player, amount: int) -> int:
    """Add experience and apply every level-up it pays for.

    Returns the number of levels gained. Afterwards
    ``player.experience < player.experience_to_next`` always holds.
    """
    player.experience += amount
    levels = 0
    while player.experience >= player.experience_to_next:
        player.experience -= player.experience_to_next
        player.level += 1
        player.experience_to_next = experience_threshold(player.level)
        levels += 1
    return levels


def spawn_orb(world: World, x: float, y: float, value: int) -> ExpOrb:
    orb = ExpOrb(x=x, y=y, value=value)
    world.orbs.append(orb)
    return orb


def _in_reach(orb: ExpOrb, player: Player) -> bool:
    return distance(orb.x, orb.y, player.x, player.y) <= player.radius + orb.radius


def _collect(world: World, orb: ExpOrb):
    orb.alive = False
    world.record("orbs_collected")
    world.record("exp_gained", orb.value)
    world.record("level_ups", gain_experience(world.player, orb.value))


def update_orbs(world: World):
    player = world.player

    for orb in world.orbs:
        if not orb.alive:
            continue

        d = distance(orb.x, orb.y, player.x, player.y)
        if d <= ORB_ATTRACTION_RADIUS:
            orb.moving_to_player = True

        if _in_reach(orb, player):
            _collect(world, orb)
            continue

        if orb.moving_to_player:
            # Never step past the player's centre
            step = min(ORB_SPEED, d)
            nx, ny = direction(orb.x, orb.y, player.x, player.y)
            orb.x += nx * step
            orb.y += ny * step
            if _in_reach(orb, player):
                _collect(world, orb)

    world.orbs = [o for o in world.orbs if o.alive]
