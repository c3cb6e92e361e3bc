"""Shared fixtures: a controllable clock and ready-made worlds."""

from __future__ import annotations

import random

import pytest

from game.survivor.session import SurvivorGame
from game.survivor.world import World


class FakeClock:
    """Wall clock the test advances by hand."""

    def __init__(self, t: float = 1000.0) -> None:
        self.t = t

    def __call__(self) -> float:
        return self.t

    def advance(self, seconds: float) -> None:
        self.t += seconds


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def world() -> World:
    return World.create(800, 800, start_time=0.0, rng=random.Random(0))


@pytest.fixture
def game(clock) -> SurvivorGame:
    return SurvivorGame(800, 800, clock=clock, rng=random.Random(0))
