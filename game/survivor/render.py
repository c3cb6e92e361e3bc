"""
Arcade drawing for a World

The simulation uses y-down coordinates (top edge is y=0); arcade is y-up,
so every position goes through to_screen().
"""

from __future__ import annotations

from typing import Tuple

import arcade

from .entities import Archetype, Enemy, Player
from .utils import clamp
from .world import World

BG = (18, 18, 22)
ARENA_C = (0, 0, 0)
PLAYER_C = (40, 90, 255)
PLAYER_HURT_C = (40, 90, 255, 128)
PLAYER_BULLET_C = (230, 50, 50)
ENEMY_BULLET_C = (250, 230, 60)
ORB_C = (0, 230, 230)
ORB_HOMING_C = (170, 215, 240)
HUD_C = (230, 230, 230)
BAR_BG_C = (200, 40, 40)
BAR_FILL_C = (40, 200, 60)
EXP_BG_C = (128, 128, 128)
EXP_FILL_C = (255, 200, 0)

ARCHETYPE_COLORS = {
    Archetype.BASIC: (40, 170, 60),
    Archetype.SHOOTER: (140, 60, 190),
    Archetype.TANK: (255, 150, 30),
}


def to_screen(world: World, x: float, y: float, origin: Tuple[float, float] = (0, 0)):
    ox, oy = origin
    return ox + x, oy + world.height - y


def _bar(cx: float, top: float, width: float, frac: float, bg, fg, height: float = 5):
    left = cx - width / 2
    arcade.draw_lrbt_rectangle_filled(left, left + width, top - height, top, bg)
    fill = width * clamp(frac, 0.0, 1.0)
    if fill > 0:
        arcade.draw_lrbt_rectangle_filled(left, left + fill, top - height, top, fg)


def draw_player(world: World, player: Player, origin=(0, 0)):
    x, y = to_screen(world, player.x, player.y, origin)
    color = PLAYER_HURT_C if player.invulnerable else PLAYER_C
    arcade.draw_circle_filled(x, y, player.radius, color)
    _bar(x, y + 40, 50, player.health / 100.0, BAR_BG_C, BAR_FILL_C)


def draw_enemy(world: World, enemy: Enemy, origin=(0, 0)):
    x, y = to_screen(world, enemy.x, enemy.y, origin)
    arcade.draw_circle_filled(x, y, enemy.radius, ARCHETYPE_COLORS[enemy.archetype])
    if enemy.has_health_pool:
        _bar(x, y + 30, 40, enemy.health / enemy.max_health, BAR_BG_C, BAR_FILL_C)


def draw_hud(world: World, time_text: str, origin=(0, 0)):
    ox, oy = origin
    p = world.player
    arcade.draw_text(f"Time: {time_text}", ox + world.width / 2, oy + world.height - 30,
                     HUD_C, 24, anchor_x="center")
    arcade.draw_text(f"Level: {p.level}", ox + 20, oy + 40, HUD_C, 20)

    # Experience bar
    left, bottom = ox + 20, oy + 10
    arcade.draw_lrbt_rectangle_filled(left, left + 300, bottom, bottom + 15, EXP_BG_C)
    frac = clamp(p.experience / p.experience_to_next, 0.0, 1.0)
    if frac > 0:
        arcade.draw_lrbt_rectangle_filled(left, left + 300 * frac, bottom, bottom + 15, EXP_FILL_C)
    arcade.draw_text(f"{p.experience} / {p.experience_to_next} EXP", left + 150, bottom + 2,
                     HUD_C, 10, anchor_x="center")


def draw_world(world: World, time_text: str, origin=(0, 0), message: str = ""):
    """Draw one frame: arena, orbs, bullets, enemies, player, HUD"""
    ox, oy = origin
    arcade.draw_lrbt_rectangle_filled(ox, ox + world.width, oy, oy + world.height, ARENA_C)

    for orb in world.orbs:
        x, y = to_screen(world, orb.x, orb.y, origin)
        arcade.draw_circle_filled(x, y, orb.radius,
                                  ORB_HOMING_C if orb.moving_to_player else ORB_C)
        arcade.draw_circle_outline(x, y, orb.radius, HUD_C, 2)

    for b in world.bullets:
        x, y = to_screen(world, b.x, b.y, origin)
        arcade.draw_circle_filled(x, y, b.radius,
                                  ENEMY_BULLET_C if b.from_enemy else PLAYER_BULLET_C)

    for e in world.enemies:
        draw_enemy(world, e, origin)

    draw_player(world, world.player, origin)
    draw_hud(world, time_text, origin)

    if message:
        arcade.draw_text(message, ox + world.width / 2, oy + world.height / 2,
                         HUD_C, 36, anchor_x="center", anchor_y="center")
