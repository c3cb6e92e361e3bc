"""Tests for the per-tick loop: ordering, timer, win/loss, reset, resize."""

from __future__ import annotations

import random

import pytest

from game.survivor.entities import Archetype, Enemy, InputState
from game.survivor.progression import spawn_orb
from game.survivor.session import SurvivorGame
from game.survivor.world import GameResult


class TestLifecycle:
    def test_fresh_session(self, game, clock):
        w = game.world
        assert (w.player.x, w.player.y) == (400, 400)
        assert w.start_time == clock.t
        assert not game.terminal
        assert game.formatted_time() == "5:00"

    def test_tick_advances_spawn_counter(self, game):
        assert game.tick() is None
        assert game.world.spawn_counter == 1
        assert game.ticks == 1

    def test_keys_move_player(self, game):
        speed = game.world.player.speed
        game.tick(InputState(right=True))
        assert game.world.player.x == pytest.approx(400 + speed)

    def test_formatted_time(self, game, clock):
        clock.advance(61.5)
        assert game.formatted_time() == "3:59"
        assert game.time_remaining() == pytest.approx(238.5)

    def test_invalid_arena_rejected(self):
        with pytest.raises(AssertionError):
            SurvivorGame(width=0, height=100)


class TestWin:
    def test_win_at_duration(self, game, clock):
        ended = []
        game.on_end = ended.append
        clock.advance(299.9)
        assert game.tick() is None

        clock.t = game.world.start_time + 300
        assert game.tick() is GameResult.WIN
        assert game.result is GameResult.WIN
        assert ended == ["You Win!"]

    def test_terminal_session_is_frozen(self, game, clock):
        ended = []
        game.on_end = ended.append
        clock.advance(300)
        game.tick()
        counter = game.world.spawn_counter
        for _ in range(5):
            assert game.tick() is GameResult.WIN
        assert game.world.spawn_counter == counter
        assert ended == ["You Win!"]

    def test_reset_after_win(self, game, clock):
        clock.advance(300)
        game.tick()
        game.reset()
        assert not game.terminal
        assert game.world.start_time == clock.t
        assert game.world.enemies == []
        assert game.tick() is None


class TestLoss:
    def test_loss_skips_orbs_and_spawner(self, game):
        ended = []
        game.on_end = ended.append
        w = game.world
        w.player.health = 10
        w.enemies.append(Enemy.spawn(Archetype.TANK, 400.0, 400.0))
        spawn_orb(w, 400.0, 420.0, 20)

        assert game.tick() is GameResult.LOSS
        assert ended == ["Game Over!"]
        assert w.player.health == 0
        assert len(w.orbs) == 1
        assert w.player.experience == 0
        assert w.spawn_counter == 0

    def test_health_and_enemy_pools_never_increase(self, clock):
        game = SurvivorGame(800, 800, clock=clock, rng=random.Random(11))
        health = game.world.player.health
        pools = {}

        for _ in range(6000):
            clock.advance(1 / 60)
            result = game.tick()
            p = game.world.player
            assert p.health <= health
            health = p.health
            if p.health <= 0:
                assert result is GameResult.LOSS
            for e in game.world.enemies:
                if e.has_health_pool:
                    assert e.health > 0
                    _, last = pools.get(id(e), (e, e.max_health))
                    assert e.health <= last
                    # Keep a reference so ids are not reused
                    pools[id(e)] = (e, e.health)
            if result is not None:
                break


class TestResize:
    def test_recentres_player_only(self, game):
        enemy = Enemy.spawn(Archetype.BASIC, 100.0, 0.0)
        game.world.enemies.append(enemy)
        game.resize(600, 600)
        assert (game.world.player.x, game.world.player.y) == (300, 300)
        assert (game.world.width, game.world.height) == (600, 600)
        assert (enemy.x, enemy.y) == (100.0, 0.0)

    def test_terminal_session_not_recentred(self, game, clock):
        game.world.player.x = 50.0
        clock.advance(300)
        game.tick()
        game.resize(600, 600)
        assert game.world.player.x == 50.0

    def test_reset_uses_new_size(self, game):
        game.resize(500, 500)
        game.reset()
        assert game.world.player.x == 250
        assert game.world.player.speed == 3.0
