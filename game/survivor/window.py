"""
Playable arcade window: keyboard input, resizing and the restart cycle

Run:
    python -m game.survivor.window
"""

from __future__ import annotations

import argparse
import random
from typing import Dict, Optional, Tuple

import arcade

from .entities import InputState
from .render import BG, draw_world
from .session import SurvivorGame

RESTART_DELAY = 0.1  # seconds

KEY_MAP = {
    arcade.key.UP: "up",
    arcade.key.W: "up",
    arcade.key.DOWN: "down",
    arcade.key.S: "down",
    arcade.key.LEFT: "left",
    arcade.key.A: "left",
    arcade.key.RIGHT: "right",
    arcade.key.D: "right",
}


def arena_size_for_viewport(width: float, height: float) -> float:
    """Square arena filling 95% of the smaller window side"""
    return min(width * 0.95, height * 0.95)


class SurvivorWindow(arcade.Window):
    """Arcade window that drives a SurvivorGame.

    With interactive=False the window only draws; something else ticks the game.
    """

    def __init__(self, game: Optional[SurvivorGame] = None, width: int = 800, height: int = 800,
                 interactive: bool = True, restart_delay: float = RESTART_DELAY):
        # Set before the base window exists; it may dispatch on_resize
        if game is None:
            size = arena_size_for_viewport(width, height)
            game = SurvivorGame(width=size, height=size)
        self.game = game
        self.game.on_end = self._on_game_end
        self.interactive = interactive
        self.restart_delay = restart_delay
        self.held: Dict[str, bool] = {"up": False, "down": False, "left": False, "right": False}
        self.message = ""

        super().__init__(width, height, "Arena Survivor", resizable=interactive)
        self.background_color = BG

    # ----------------------------
    # Input
    # ----------------------------

    def snapshot(self) -> InputState:
        return InputState(**self.held)

    def on_key_press(self, key, modifiers):
        name = KEY_MAP.get(key)
        if name is not None:
            self.held[name] = True
        elif key == arcade.key.ESCAPE:
            self.close()

    def on_key_release(self, key, modifiers):
        name = KEY_MAP.get(key)
        if name is not None:
            self.held[name] = False

    def on_resize(self, width: int, height: int):
        super().on_resize(width, height)
        if not self.interactive:
            return
        size = arena_size_for_viewport(width, height)
        self.game.resize(size, size)

    # ----------------------------
    # Loop
    # ----------------------------

    def on_update(self, delta_time: float):
        if not self.interactive or self.game.terminal:
            return
        self.game.tick(self.snapshot())

    def _on_game_end(self, message: str):
        self.message = message
        print(f"[SurvivorWindow] {message}")
        if self.interactive:
            arcade.schedule_once(self._restart, self.restart_delay)

    def _restart(self, delta_time: float):
        self.message = ""
        self.game.reset()

    def arena_origin(self) -> Tuple[float, float]:
        return (self.width - self.game.width) / 2, (self.height - self.game.height) / 2

    def on_draw(self):
        self.clear()
        draw_world(self.game.world, self.game.formatted_time(),
                   origin=self.arena_origin(), message=self.message)


def main():
    parser = argparse.ArgumentParser(description="Play Arena Survivor")
    parser.add_argument(
        "--size",
        type=int,
        default=800,
        help="Initial window width and height in pixels (default: 800)",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Seed for enemy spawning (default: unseeded)",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Print a summary line when each session ends",
    )
    args = parser.parse_args()

    arena = arena_size_for_viewport(args.size, args.size)
    game = SurvivorGame(width=arena, height=arena, rng=random.Random(args.seed),
                        verbose=1 if args.verbose else 0)
    SurvivorWindow(game, args.size, args.size)
    arcade.run()


if __name__ == "__main__":
    main()
