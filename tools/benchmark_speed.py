"""
Performance Benchmark
=====================

Measures headless simulation throughput. A scripted player chases the
lowest fruit so sessions last long enough to reach higher difficulty levels.

Usage:
    python -m tools.benchmark_speed [--ticks N] [--seed S] [--render]
"""

from __future__ import annotations

import argparse
import sys
import time
from typing import Optional

from fruit_catch.catch_core.config_loader import load_config, GameConfig
from fruit_catch.catch_core.clock import ManualClock
from fruit_catch.catch_core.game import CatchGame
from fruit_catch.catch_core.render_solid import ArrayRenderSurface


FRAME_MS = 1000.0 / 60.0


def chase_lowest_fruit(game: CatchGame) -> None:
    """Press left/right toward the fruit nearest the bottom."""
    target = game.snapshot().lowest_fruit()
    basket = game.basket

    for key in ("left", "right"):
        game.key_up(key)

    if target is None:
        return

    target_center = target.x + target.width / 2
    if target_center < basket.center_x - basket.width / 4:
        game.key_down("left")
    elif target_center > basket.center_x + basket.width / 4:
        game.key_down("right")


def benchmark_game(
    num_ticks: int = 10000,
    seed: int = 42,
    render: bool = False,
    config: Optional[GameConfig] = None
) -> dict:
    """
    Run the simulation at 60 simulated frames per second, as fast as possible.

    Args:
        num_ticks: Number of ticks to run.
        seed: Spawner seed.
        render: Also draw every frame into a numpy surface.
        config: Game configuration. Uses default if None.

    Returns:
        Dict with timing and gameplay results.
    """
    if config is None:
        config = load_config()

    clock = ManualClock()
    game = CatchGame(config=config, seed=seed, clock=clock)
    surface = None
    if render:
        surface = ArrayRenderSurface(
            config.playfield.width,
            config.playfield.height,
            background=config.session.background
        )

    game.start()
    sessions = 1
    best_score = 0
    max_level = 1

    start = time.perf_counter()
    for _ in range(num_ticks):
        chase_lowest_fruit(game)
        result = game.update(clock.advance(FRAME_MS))
        if surface is not None:
            game.render(surface)

        max_level = max(max_level, game.level)
        if result.game_over:
            best_score = max(best_score, game.score)
            game.restart()
            sessions += 1
    elapsed = time.perf_counter() - start

    best_score = max(best_score, game.score)

    return {
        "num_ticks": num_ticks,
        "render": render,
        "elapsed_seconds": elapsed,
        "ticks_per_second": num_ticks / elapsed,
        "ms_per_tick": (elapsed * 1000) / num_ticks,
        "sessions": sessions,
        "best_score": best_score,
        "max_level": max_level,
    }


def print_results(results: dict) -> None:
    mode = "with render" if results["render"] else "simulation only"
    print(f"=== Fruit Catch benchmark ({mode}) ===")
    print(f"Ticks:        {results['num_ticks']:,}")
    print(f"Elapsed:      {results['elapsed_seconds']:.3f}s")
    print(f"Throughput:   {results['ticks_per_second']:,.0f} ticks/s")
    print(f"Per tick:     {results['ms_per_tick']:.4f} ms")
    print(f"Sessions:     {results['sessions']}")
    print(f"Best score:   {results['best_score']}")
    print(f"Max level:    {results['max_level']}")


def main():
    parser = argparse.ArgumentParser(description="Benchmark Fruit Catch simulation performance")
    parser.add_argument("--ticks", type=int, default=10000, help="Ticks to simulate")
    parser.add_argument("--seed", type=int, default=42, help="Random seed")
    parser.add_argument("--render", action="store_true", help="Render each tick to a numpy buffer")
    parser.add_argument("--config", type=str, default=None, help="Path to game_config.yaml")

    args = parser.parse_args()

    if args.ticks <= 0:
        print("Error: --ticks must be positive")
        return 1

    try:
        config = load_config(args.config)
    except (FileNotFoundError, ValueError) as e:
        print(f"Error: {e}")
        return 1

    results = benchmark_game(
        num_ticks=args.ticks,
        seed=args.seed,
        render=args.render,
        config=config
    )
    print_results(results)
    return 0


if __name__ == "__main__":
    sys.exit(main())
