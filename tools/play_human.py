"""
Human Play Mode
================

Play Fruit Catch interactively in a pygame window.

Controls:
    - Left/Up, Right/Down: Move basket
    - Mouse drag / touch: Basket follows the pointer
    - Space/Enter/Click: Start
    - R/Click: Restart after game over
    - ESC: Quit

Usage:
    python -m tools.play_human [--seed SEED] [--width WIDTH] [--height HEIGHT]
"""

from __future__ import annotations

import argparse
import sys
from typing import Optional

try:
    import pygame
    PYGAME_AVAILABLE = True
except ImportError:
    PYGAME_AVAILABLE = False

from fruit_catch.catch_core.config_loader import load_config, GameConfig
from fruit_catch.catch_core.game import CatchGame, SessionState, TickResult


KEY_NAMES = {}
if PYGAME_AVAILABLE:
    KEY_NAMES = {
        pygame.K_LEFT: "left",
        pygame.K_RIGHT: "right",
        pygame.K_UP: "up",
        pygame.K_DOWN: "down",
    }


class HumanPlayer:
    """
    Human-playable Fruit Catch.

    The pygame clock is the display-synchronized tick driver; each frame
    pumps the game's scheduler (spawn trigger) and then ticks it.
    """

    def __init__(
        self,
        config: Optional[GameConfig] = None,
        seed: Optional[int] = None,
        window_width: Optional[int] = None,
        window_height: Optional[int] = None,
        target_fps: int = 60
    ):
        if not PYGAME_AVAILABLE:
            raise ImportError("pygame required. Install: pip install pygame")

        from fruit_catch.catch_core.render_full_pygame import (
            PygameHud,
            PygameRenderSurface,
            load_images,
        )

        if config is None:
            config = load_config()

        self._config = config
        self._target_fps = target_fps
        width = window_width or config.playfield.width
        height = window_height or config.playfield.height

        pygame.init()
        self._screen = pygame.display.set_mode((width, height), pygame.RESIZABLE)
        pygame.display.set_caption("Fruit Catch")
        self._clock = pygame.time.Clock()

        images = load_images(["basket", "heart"] + [t.name for t in config.fruit_types])
        self._hud = PygameHud(heart_image=images.pop("heart", None))
        self._surface = PygameRenderSurface(
            self._screen,
            background=config.session.background,
            images=images
        )

        self._game = CatchGame(config=config, seed=seed, display=self._hud)
        self._game.resize(width, height)
        self._hud.set_lives(self._game.lives)

        self._running = True

    def run(self) -> int:
        """Run the game loop. Returns final score."""
        print("=== Fruit Catch ===")
        print("Arrows or mouse drag to move, Space to start")
        print("R to restart, ESC to quit")
        print()

        while self._running:
            self._handle_events()
            result = self._game.update()
            self._report(result)
            self._render()
            self._clock.tick(self._target_fps)

        pygame.quit()
        return self._game.score

    def _handle_events(self) -> None:
        """Process pygame events."""
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                self._running = False

            elif event.type == pygame.VIDEORESIZE:
                self._on_resize(event.w, event.h)

            elif event.type == pygame.KEYDOWN:
                if event.key == pygame.K_ESCAPE:
                    self._running = False
                elif event.key in (pygame.K_SPACE, pygame.K_RETURN):
                    if self._game.state is SessionState.IDLE:
                        self._start()
                elif event.key == pygame.K_r:
                    if self._game.is_over:
                        self._restart()
                elif event.key in KEY_NAMES:
                    self._game.key_down(KEY_NAMES[event.key])

            elif event.type == pygame.KEYUP:
                if event.key in KEY_NAMES:
                    self._game.key_up(KEY_NAMES[event.key])

            elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
                if self._game.state is SessionState.IDLE:
                    self._start()
                elif self._game.is_over:
                    self._restart()
                else:
                    self._game.pointer_moved(event.pos[0])

            elif event.type == pygame.MOUSEMOTION and event.buttons[0]:
                self._game.pointer_moved(event.pos[0])

            elif event.type == pygame.FINGERMOTION:
                width, _ = self._game.playfield_size
                self._game.pointer_moved(event.x * width)

    def _on_resize(self, width: int, height: int) -> None:
        try:
            self._game.resize(width, height)
        except ValueError as e:
            print(f"Ignoring resize: {e}")
            return
        self._screen = pygame.display.get_surface()
        self._surface.set_surface(self._screen)

    def _start(self) -> None:
        self._game.start()
        print("=== Game Started ===")

    def _restart(self) -> None:
        self._game.restart()
        print("\n=== Game Restarted ===\n")

    def _report(self, result: TickResult) -> None:
        if result.difficulty_change is not None:
            print(result.difficulty_change.describe())
        for event in result.caught:
            print(f"  +{event.points} {event.fruit_name} (Total: {self._game.score})")
        for event in result.missed:
            print(f"  missed {event.fruit_name} (Lives: {self._game.lives})")
        if result.game_over:
            print(f"\nGAME OVER - Score: {self._game.score}")

    def _render(self) -> None:
        self._game.render(self._surface)
        self._hud.draw(self._screen, started=self._game.state is not SessionState.IDLE)
        pygame.display.flip()


def main():
    parser = argparse.ArgumentParser(description="Play Fruit Catch interactively")
    parser.add_argument("--seed", type=int, default=None, help="Random seed")
    parser.add_argument("--width", type=int, default=None, help="Window width (default: playfield width)")
    parser.add_argument("--height", type=int, default=None, help="Window height (default: playfield height)")
    parser.add_argument("--fps", type=int, default=60, help="Target FPS")
    parser.add_argument("--config", type=str, default=None, help="Path to game_config.yaml")

    args = parser.parse_args()

    try:
        config = load_config(args.config)
        player = HumanPlayer(
            config=config,
            seed=args.seed,
            window_width=args.width,
            window_height=args.height,
            target_fps=args.fps
        )
        score = player.run()
        print(f"\nFinal Score: {score}")
        return 0
    except (ImportError, FileNotFoundError, ValueError) as e:
        print(f"Error: {e}")
        return 1


if __name__ == "__main__":
    sys.exit(main())
