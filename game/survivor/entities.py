"""
Game entity dataclasses
"""

from dataclasses import dataclass
from enum import Enum
from typing import Dict, Optional


PLAYER_RADIUS = 20.0
PLAYER_MAX_HEALTH = 100.0
BULLET_RADIUS = 5.0
ORB_RADIUS = 8.0


class Archetype(Enum):
    """Enemy behaviour profile"""
    BASIC = "basic"
    SHOOTER = "shooter"
    TANK = "tank"


@dataclass(frozen=True)
class ArchetypeProfile:
    radius: float
    speed: float
    damage: float
    exp_value: int
    max_health: Optional[int] = None  # None: dies on first hit
    shoot_rate: Optional[int] = None  # ticks between shots; None: melee only


ARCHETYPES: Dict[Archetype, ArchetypeProfile] = {
    Archetype.BASIC: ArchetypeProfile(radius=15.0, speed=2.0, damage=25.0, exp_value=20),
    Archetype.SHOOTER: ArchetypeProfile(radius=15.0, speed=1.5, damage=20.0, exp_value=30,
                                        shoot_rate=120),
    Archetype.TANK: ArchetypeProfile(radius=25.0, speed=1.0, damage=40.0, exp_value=50,
                                     max_health=5),
}


@dataclass
class InputState:
    """Snapshot of the held movement keys"""
    up: bool = False
    down: bool = False
    left: bool = False
    right: bool = False


@dataclass
class Player:
    """Player avatar"""
    x: float
    y: float
    speed: float
    radius: float = PLAYER_RADIUS
    health: float = PLAYER_MAX_HEALTH
    invulnerable_time: int = 0  # ticks
    level: int = 1
    experience: int = 0
    experience_to_next: int = 100

    @property
    def invulnerable(self) -> bool:
        return self.invulnerable_time > 0

    @property
    def dead(self) -> bool:
        return self.health <= 0


@dataclass
class Bullet:
    """Bullet projectile entity"""
    x: float
    y: float
    dx: float
    dy: float
    from_enemy: bool = False
    radius: float = BULLET_RADIUS
    alive: bool = True


@dataclass
class Enemy:
    """Enemy entity that chases the player"""
    x: float
    y: float
    archetype: Archetype
    radius: float
    speed: float
    damage: float
    health: Optional[int] = None
    max_health: Optional[int] = None
    shoot_rate: Optional[int] = None
    shoot_counter: int = 0
    alive: bool = True

    @property
    def can_shoot(self) -> bool:
        return self.shoot_rate is not None

    @property
    def has_health_pool(self) -> bool:
        return self.max_health is not None

    @property
    def exp_value(self) -> int:
        return ARCHETYPES[self.archetype].exp_value

    @classmethod
    def spawn(cls, archetype: Archetype, x: float, y: float) -> "Enemy":
        """Build an enemy with the archetype's stats"""
        p = ARCHETYPES[archetype]
        return cls(
            x=x,
            y=y,
            archetype=archetype,
            radius=p.radius,
            speed=p.speed,
            damage=p.damage,
            health=p.max_health,
            max_health=p.max_health,
            shoot_rate=p.shoot_rate,
        )


@dataclass
class ExpOrb:
    """Experience orb dropped by a killed enemy"""
    x: float
    y: float
    value: int
    radius: float = ORB_RADIUS
    moving_to_player: bool = False
    alive: bool = True
