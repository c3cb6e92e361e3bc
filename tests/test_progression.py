"""Unit tests for levelling and experience orbs."""

from __future__ import annotations

import random

import pytest

from game.survivor.entities import ExpOrb, Player
from game.survivor.progression import (
    ORB_SPEED, experience_threshold, gain_experience, spawn_orb, update_orbs,
)


class TestThresholds:
    @pytest.mark.parametrize("level,expected", [(1, 100), (2, 150), (3, 225), (4, 337), (5, 506)])
    def test_growth(self, level, expected):
        assert experience_threshold(level) == expected


class TestGainExperience:
    def test_single_level_up(self):
        p = Player(x=0.0, y=0.0, speed=3.0, experience=90)
        assert gain_experience(p, 50) == 1
        assert p.experience == 40
        assert p.level == 2
        assert p.experience_to_next == 150

    def test_no_level_up(self):
        p = Player(x=0.0, y=0.0, speed=3.0)
        assert gain_experience(p, 99) == 0
        assert p.level == 1
        assert p.experience == 99

    def test_multiple_level_ups_in_one_gain(self):
        p = Player(x=0.0, y=0.0, speed=3.0)
        assert gain_experience(p, 400) == 2
        assert p.level == 3
        assert p.experience == 150
        assert p.experience_to_next == 225

    def test_invariant_holds_after_any_gain(self):
        rng = random.Random(3)
        p = Player(x=0.0, y=0.0, speed=3.0)
        for _ in range(300):
            gain_experience(p, rng.choice([20, 30, 50, 500]))
            assert 0 <= p.experience < p.experience_to_next
            assert p.experience_to_next == experience_threshold(p.level)


class TestOrbs:
    def test_far_orb_stays_put(self, world):
        orb = spawn_orb(world, 400.0, 600.0, 20)
        update_orbs(world)
        assert (orb.x, orb.y) == (400.0, 600.0)
        assert not orb.moving_to_player

    def test_attraction_radius_latches(self, world):
        orb = spawn_orb(world, 400.0, 540.0, 20)
        update_orbs(world)
        assert orb.moving_to_player
        assert orb.y == pytest.approx(540.0 - ORB_SPEED)

        # Player walks away; the orb keeps homing
        world.player.y = 100.0
        update_orbs(world)
        assert orb.moving_to_player
        assert orb.y == pytest.approx(540.0 - 2 * ORB_SPEED)

    def test_collected_in_reach(self, world):
        world.player.experience = 90
        spawn_orb(world, 400.0, 420.0, 50)
        update_orbs(world)
        p = world.player
        assert world.orbs == []
        assert p.experience == 40
        assert p.level == 2
        assert p.experience_to_next == 150
        assert world.events["level_ups"] == 1
        assert world.events["exp_gained"] == 50

    def test_collected_after_final_step(self, world):
        spawn_orb(world, 400.0, 430.0, 20)
        update_orbs(world)
        assert world.orbs == []
        assert world.player.experience == 20

    def test_step_never_passes_player(self, world):
        world.player.radius = 1.0
        orb = ExpOrb(x=400.0, y=413.0, value=20, radius=1.0)
        world.orbs.append(orb)
        update_orbs(world)
        assert orb.y == pytest.approx(408.0)
        update_orbs(world)
        assert orb.y == pytest.approx(403.0)
        assert world.orbs == [orb]

        # Last step is shortened to land on the player
        update_orbs(world)
        assert orb.y == pytest.approx(400.0)
        assert world.orbs == []
        assert world.player.experience == 20

    def test_orb_on_player_position(self, world):
        spawn_orb(world, 400.0, 400.0, 30)
        update_orbs(world)
        assert world.player.experience == 30

    def test_counted_once(self, world):
        spawn_orb(world, 400.0, 410.0, 20)
        update_orbs(world)
        update_orbs(world)
        assert world.player.experience == 20
        assert world.events["orbs_collected"] == 1
