"""Unit tests for entity construction and archetype profiles."""

from __future__ import annotations

import pytest

from game.survivor.entities import Archetype, Enemy, Player
from game.survivor.world import World, GameResult


class TestEnemyArchetypes:
    def test_basic(self):
        e = Enemy.spawn(Archetype.BASIC, 10.0, 0.0)
        assert (e.x, e.y) == (10.0, 0.0)
        assert e.radius == 15
        assert e.speed == 2
        assert e.damage == 25
        assert e.health is None
        assert not e.has_health_pool
        assert not e.can_shoot
        assert e.exp_value == 20

    def test_shooter(self):
        e = Enemy.spawn(Archetype.SHOOTER, 0.0, 0.0)
        assert e.radius == 15
        assert e.speed == 1.5
        assert e.damage == 20
        assert e.can_shoot
        assert e.shoot_rate == 120
        assert e.shoot_counter == 0
        assert not e.has_health_pool
        assert e.exp_value == 30

    def test_tank(self):
        e = Enemy.spawn(Archetype.TANK, 0.0, 0.0)
        assert e.radius == 25
        assert e.speed == 1
        assert e.damage == 40
        assert e.has_health_pool
        assert e.health == e.max_health == 5
        assert not e.can_shoot
        assert e.exp_value == 50

    def test_unknown_archetype_rejected(self):
        with pytest.raises(ValueError):
            Archetype("boss")


class TestPlayer:
    def test_invulnerable_flag(self):
        p = Player(x=0.0, y=0.0, speed=3.0)
        assert not p.invulnerable
        p.invulnerable_time = 1
        assert p.invulnerable

    def test_dead_at_zero(self):
        p = Player(x=0.0, y=0.0, speed=3.0, health=0.0)
        assert p.dead


class TestWorld:
    def test_create_centres_player(self):
        w = World.create(800, 600)
        assert (w.player.x, w.player.y) == (400, 300)
        assert w.player.speed == pytest.approx(3.2)
        assert w.player.level == 1
        assert w.player.experience_to_next == 100
        assert w.last_shot_time is None
        assert not w.terminal

    def test_small_arena_has_minimum_speed(self):
        assert World.create(300, 300).player.speed == 3.0

    def test_end_keeps_first_result(self):
        w = World.create(800, 800)
        w.end(GameResult.LOSS)
        w.end(GameResult.WIN)
        assert w.result is GameResult.LOSS
        assert w.result.message == "Game Over!"
