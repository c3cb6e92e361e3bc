"""
Player movement, shooting and collision resolution
"""

from __future__ import annotations

from typing import Optional

from .entities import Bullet, Enemy, InputState
from .progression import spawn_orb
from .utils import clamp, distance, direction, circles_overlap
from .world import World, GameResult

BULLET_SPEED = 10.0
ENEMY_BULLET_SPEED = 6.0
FIRE_INTERVAL = 0.5  # seconds, wall-clock
INVULNERABLE_TICKS = 60
ENEMY_BULLET_DAMAGE = 10.0


# ----------------------------
# Player
# ----------------------------

def find_closest_enemy(world: World) -> Optional[Enemy]:
    """Nearest live enemy; the first one found wins ties"""
    p = world.player
    closest = None
    closest_d = float("inf")
    for e in world.enemies:
        if not e.alive:
            continue
        d = distance(p.x, p.y, e.x, e.y)
        if d < closest_d:
            closest_d = d
            closest = e
    return closest


def fire_bullet(world: World, x: float, y: float, tx: float, ty: float,
                speed: float, from_enemy: bool) -> Bullet:
    nx, ny = direction(x, y, tx, ty)
    bullet = Bullet(x=x, y=y, dx=nx * speed, dy=ny * speed, from_enemy=from_enemy)
    world.bullets.append(bullet)
    return bullet


def update_player(world: World, keys: InputState, now: float):
    p = world.player

    # Diagonals are not normalized
    if keys.left:
        p.x -= p.speed
    if keys.right:
        p.x += p.speed
    if keys.up:
        p.y -= p.speed
    if keys.down:
        p.y += p.speed

    # Keep in bounds
    p.x = clamp(p.x, p.radius, world.width - p.radius)
    p.y = clamp(p.y, p.radius, world.height - p.radius)

    if p.invulnerable_time > 0:
        p.invulnerable_time -= 1

    # Auto-attack
    if world.last_shot_time is None or now - world.last_shot_time >= FIRE_INTERVAL:
        target = find_closest_enemy(world)
        if target is not None:
            fire_bullet(world, p.x, p.y, target.x, target.y, BULLET_SPEED, from_enemy=False)
            world.last_shot_time = now
            world.record("shots")


# ----------------------------
# Bullets
# ----------------------------

def update_bullets(world: World):
    for b in world.bullets:
        b.x += b.dx
        b.y += b.dy
        if b.x < 0 or b.x > world.width or b.y < 0 or b.y > world.height:
            b.alive = False

    world.bullets = [b for b in world.bullets if b.alive]


# ----------------------------
# Enemies
# ----------------------------

def damage_player(world: World, amount: float) -> bool:
    """Apply damage and start the invulnerability window.

    Returns True when the hit ends the session.
    """
    p = world.player
    p.health = max(0.0, p.health - amount)
    p.invulnerable_time = INVULNERABLE_TICKS
    world.record("damage_taken", amount)
    if p.dead:
        world.end(GameResult.LOSS)
        return True
    return False


def _blocked(world: World, enemy: Enemy, x: float, y: float) -> bool:
    for other in world.enemies:
        if other is enemy or not other.alive:
            continue
        if circles_overlap(x, y, enemy.radius, other.x, other.y, other.radius):
            return True
    return False


def _move_enemy(world: World, enemy: Enemy):
    p = world.player
    nx, ny = direction(enemy.x, enemy.y, p.x, p.y)
    new_x = enemy.x + nx * enemy.speed
    new_y = enemy.y + ny * enemy.speed
    # Hold position rather than push into another enemy
    if not _blocked(world, enemy, new_x, new_y):
        enemy.x = new_x
        enemy.y = new_y


def _enemy_shoot(world: World, enemy: Enemy):
    enemy.shoot_counter += 1
    if enemy.shoot_counter >= enemy.shoot_rate:
        p = world.player
        fire_bullet(world, enemy.x, enemy.y, p.x, p.y, ENEMY_BULLET_SPEED, from_enemy=True)
        enemy.shoot_counter = 0


def _hit_by_bullet(world: World, enemy: Enemy):
    for b in world.bullets:
        if b.from_enemy or not b.alive:
            continue
        if distance(b.x, b.y, enemy.x, enemy.y) < enemy.radius + b.radius:
            b.alive = False
            world.record("hits")
            if enemy.has_health_pool:
                enemy.health -= 1
                killed = enemy.health <= 0
            else:
                killed = True
            if killed:
                enemy.alive = False
                spawn_orb(world, enemy.x, enemy.y, enemy.exp_value)
                world.record("kills")
            # One bullet per enemy per tick
            return


def _enemy_bullets_vs_player(world: World):
    p = world.player
    for b in world.bullets:
        if not b.from_enemy or not b.alive:
            continue
        if p.invulnerable:
            # Bullets pass through while invulnerable
            return
        if distance(b.x, b.y, p.x, p.y) < p.radius + b.radius:
            b.alive = False
            if damage_player(world, ENEMY_BULLET_DAMAGE):
                return


def update_enemies(world: World):
    """Move enemies, fire, and resolve every collision for this tick.

    Dead enemies and spent bullets are flagged during the pass and compacted
    afterwards. Returns early, leaving the session terminal, on a loss.
    """
    p = world.player

    for enemy in list(world.enemies):
        if not enemy.alive:
            continue

        _move_enemy(world, enemy)

        if enemy.can_shoot:
            _enemy_shoot(world, enemy)

        _hit_by_bullet(world, enemy)
        if not enemy.alive:
            continue

        if not p.invulnerable and circles_overlap(p.x, p.y, p.radius,
                                                  enemy.x, enemy.y, enemy.radius):
            if damage_player(world, enemy.damage):
                break

    if not world.terminal:
        _enemy_bullets_vs_player(world)

    world.enemies = [e for e in world.enemies if e.alive]
    world.bullets = [b for b in world.bullets if b.alive]
