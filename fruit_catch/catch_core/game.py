"""
Core Game
=========

Main game orchestrator combining spawning, difficulty, movement, collision
and scoring.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional, List, Tuple, Union

from fruit_catch.catch_core.config_loader import GameConfig, get_config
from fruit_catch.catch_core.clock import MonotonicClock
from fruit_catch.catch_core.collision import boxes_overlap, is_below
from fruit_catch.catch_core.difficulty import DifficultyController, DifficultyChange
from fruit_catch.catch_core.entities import Basket, EntityStore, Fruit
from fruit_catch.catch_core.fruit_catalog import FruitCatalog, FruitType, get_catalog
from fruit_catch.catch_core.input_state import InputState
from fruit_catch.catch_core.render_surface import DisplaySink, NullDisplay, RenderSurface, draw_scene
from fruit_catch.catch_core.scheduler import CooperativeScheduler, TimerHandle
from fruit_catch.catch_core.scoring import ScoreEvent, ScoreTracker
from fruit_catch.catch_core.spawner import FruitSpawner
from fruit_catch.catch_core.state_snapshot import BasketView, FruitView, GameSnapshot


class SessionState(Enum):
    IDLE = "idle"
    ACTIVE = "active"
    OVER = "over"


@dataclass
class TickResult:
    """Result of a single simulation tick."""
    elapsed_ms: float
    events: List[ScoreEvent] = field(default_factory=list)
    difficulty_change: Optional[DifficultyChange] = None
    game_over: bool = False

    @property
    def caught(self) -> List[ScoreEvent]:
        return [e for e in self.events if e.is_catch]

    @property
    def missed(self) -> List[ScoreEvent]:
        return [e for e in self.events if not e.is_catch]

    @property
    def delta_score(self) -> int:
        return sum(e.points for e in self.events)


class CatchGame:
    """
    Main game simulation class.

    Orchestrates:
    - Spawn trigger (periodic timer on a cooperative scheduler)
    - Difficulty ramp
    - Basket and fruit movement
    - Catch / miss adjudication and scoring
    - Session state machine (idle -> active -> over -> active ...)

    The front end drives it by calling update() once per display refresh,
    which fires any due spawn trigger and then runs one tick.
    """

    def __init__(
        self,
        config: Optional[GameConfig] = None,
        seed: Optional[int] = None,
        clock=None,
        display: Optional[DisplaySink] = None
    ):
        """
        Initialize game in the idle state.

        Args:
            config: Game configuration. Uses default if None.
            seed: Random seed for the spawner.
            clock: Object with now() -> milliseconds. Monotonic wall clock if None.
            display: Score / lives sink. Updates are dropped if None.
        """
        if config is None:
            config = get_config()

        self._config = config
        self._seed = seed
        self._clock = clock if clock is not None else MonotonicClock()
        self._display = display if display is not None else NullDisplay()

        # Subsystems
        self._catalog = get_catalog(config)
        self._spawner = FruitSpawner(config, seed=seed, catalog=self._catalog)
        self._difficulty = DifficultyController(config)
        self._scorer = ScoreTracker(config)
        self._scheduler = CooperativeScheduler()
        self._input = InputState()

        # Playfield can change on resize
        self._width = float(config.playfield.width)
        self._height = float(config.playfield.height)

        basket_cfg = config.basket
        self._entities = EntityStore(
            basket=Basket(
                x=0.0,
                y=0.0,
                width=basket_cfg.width,
                height=basket_cfg.height,
                speed=basket_cfg.speed
            )
        )
        self._reset_basket()

        # Session state
        self._state = SessionState.IDLE
        self._spawn_timer: Optional[TimerHandle] = None
        self._game_time_ms: float = 0.0
        self._last_time_ms: float = 0.0

    # ------------------------------------------------------------------
    # Properties
    # ------------------------------------------------------------------

    @property
    def config(self) -> GameConfig:
        return self._config

    @property
    def catalog(self) -> FruitCatalog:
        return self._catalog

    @property
    def state(self) -> SessionState:
        return self._state

    @property
    def is_active(self) -> bool:
        return self._state is SessionState.ACTIVE

    @property
    def is_over(self) -> bool:
        return self._state is SessionState.OVER

    @property
    def score(self) -> int:
        return self._scorer.score

    @property
    def lives(self) -> int:
        return self._scorer.lives

    @property
    def level(self) -> int:
        return self._difficulty.level

    @property
    def max_fruit_speed(self) -> float:
        return self._difficulty.max_speed

    @property
    def spawn_interval_ms(self) -> float:
        return self._difficulty.spawn_interval_ms

    @property
    def game_time_ms(self) -> float:
        """Accumulated active session time."""
        return self._game_time_ms

    @property
    def basket(self) -> Basket:
        return self._entities.basket

    @property
    def fruits(self) -> Tuple[Fruit, ...]:
        """Active fruit in spawn order (read-only copy)."""
        return tuple(self._entities.fruits)

    @property
    def fruit_count(self) -> int:
        return len(self._entities)

    @property
    def input_state(self) -> InputState:
        return self._input

    @property
    def scheduler(self) -> CooperativeScheduler:
        return self._scheduler

    @property
    def spawn_timer(self) -> Optional[TimerHandle]:
        """Live spawn trigger, or None when no session is running."""
        return self._spawn_timer

    @property
    def playfield_size(self) -> Tuple[float, float]:
        return (self._width, self._height)

    # ------------------------------------------------------------------
    # Session commands
    # ------------------------------------------------------------------

    def start(self, now_ms: Optional[float] = None) -> GameSnapshot:
        """
        Begin a new session.

        Re-initializes score, lives, difficulty, fruit and held input,
        centres the basket and starts the spawn trigger. A seeded game
        replays the same fruit sequence on every start.

        Args:
            now_ms: Session start instant. Reads the clock if None.

        Returns:
            Initial game snapshot.
        """
        now = self._now(now_ms)

        self._scorer.reset()
        self._difficulty.reset()
        self._spawner.reset(self._seed)
        self._entities.clear_fruits()
        self._input.release_all()
        self._reset_basket()

        self._game_time_ms = 0.0
        self._last_time_ms = now
        self._state = SessionState.ACTIVE

        self._stop_spawn_timer()
        self._spawn_timer = self._scheduler.call_every(
            self._difficulty.spawn_interval_ms,
            self._on_spawn_trigger,
            now
        )

        self._display.set_score(self._scorer.score)
        self._display.set_lives(self._scorer.lives)

        return self.snapshot()

    def restart(self, now_ms: Optional[float] = None) -> GameSnapshot:
        """Start over after game over (same as start)."""
        return self.start(now_ms)

    # ------------------------------------------------------------------
    # Driving
    # ------------------------------------------------------------------

    def update(self, now_ms: Optional[float] = None) -> TickResult:
        """
        One display refresh: fire due timers, then tick.

        Args:
            now_ms: Current timestamp. Reads the clock if None.
        """
        now = self._now(now_ms)
        self._scheduler.run_pending(now)
        return self.tick(now)

    def tick(self, now_ms: Optional[float] = None) -> TickResult:
        """
        Advance the simulation to now_ms.

        Order: difficulty update, basket move, fruit fall, catch / miss.
        Does nothing unless the session is active.

        Args:
            now_ms: Current timestamp. Reads the clock if None.

        Returns:
            TickResult describing what happened.
        """
        now = self._now(now_ms)
        if not self.is_active:
            return TickResult(elapsed_ms=0.0)

        elapsed = max(0.0, now - self._last_time_ms)
        self._last_time_ms = now
        self._game_time_ms += elapsed

        change = self._difficulty.update(self._game_time_ms)
        if change is not None:
            self._reschedule_spawns(now)

        frames = elapsed / self._config.session.frame_unit_ms
        self._move_basket(frames)
        for fruit in self._entities:
            fruit.fall(frames)

        events = self._resolve_fruits()

        return TickResult(
            elapsed_ms=elapsed,
            events=events,
            difficulty_change=change,
            game_over=self.is_over
        )

    def spawn_fruit(self) -> Optional[Fruit]:
        """
        Spawn trigger body: add one random fruit if the session is active.

        Returns:
            The new fruit, or None if the session is not active.
        """
        if not self.is_active:
            return None
        fruit = self._spawner.spawn(self._width, self._difficulty.max_speed)
        return self._entities.add_fruit(fruit)

    def add_fruit(
        self,
        fruit_type: Union[FruitType, str],
        x: float,
        y: Optional[float] = None,
        speed: Optional[float] = None
    ) -> Fruit:
        """
        Place a specific fruit (for scripted scenarios and tests).

        Args:
            fruit_type: FruitType or its name.
            x: Left edge.
            y: Top edge. Just above the playfield if None.
            speed: Fall speed. Lower bound of the speed band if None.
        """
        if isinstance(fruit_type, str):
            found = self._catalog.get_by_name(fruit_type)
            if found is None:
                raise KeyError(f"Unknown fruit type: {fruit_type!r}")
            fruit_type = found

        size = self._config.fruit.size
        fruit = Fruit(
            x=float(x),
            y=float(-size if y is None else y),
            width=size,
            height=size,
            speed=float(self._config.fruit.min_speed if speed is None else speed),
            fruit_type=fruit_type
        )
        return self._entities.add_fruit(fruit)

    # ------------------------------------------------------------------
    # Input events
    # ------------------------------------------------------------------

    def key_down(self, key: str) -> None:
        """Movement key pressed. Ignored unless active; takes control from the pointer."""
        if not self.is_active:
            return
        self._input.set_key(key, True)
        self._input.pointer_x = None

    def key_up(self, key: str) -> None:
        """Movement key released. Always honoured so keys never stick."""
        self._input.set_key(key, False)

    def pointer_moved(self, x: float) -> None:
        """Pointer / touch moved to playfield x. Ignored unless active."""
        if not self.is_active:
            return
        self._input.pointer_x = float(x)
        self.basket.center_on(x, self._width)

    # ------------------------------------------------------------------
    # Playfield and output
    # ------------------------------------------------------------------

    def resize(self, width: float, height: float) -> None:
        """
        Change the playfield bounds.

        The basket is re-anchored to the new bottom and clamped to the new
        width. Fruit keep their positions.

        Raises:
            ValueError: If the playfield would be narrower than the basket
                or a fruit, or has non-positive height.
        """
        if width < self.basket.width or width < self._config.fruit.size:
            raise ValueError(
                f"Playfield width {width} is narrower than the basket or fruit"
            )
        if height <= 0:
            raise ValueError(f"Playfield height must be positive, got {height}")

        self._width = float(width)
        self._height = float(height)
        basket = self.basket
        basket.y = self._height - basket.height - self._config.basket.bottom_margin
        basket.clamp_to(self._width)

    def render(self, surface: RenderSurface) -> None:
        """Draw the current frame onto a render surface."""
        draw_scene(surface, self.basket, self._entities.fruits, self._config)

    def snapshot(self) -> GameSnapshot:
        basket = self.basket
        return GameSnapshot(
            state=self._state.value,
            score=self._scorer.score,
            lives=self._scorer.lives,
            level=self._difficulty.level,
            max_fruit_speed=self._difficulty.max_speed,
            spawn_interval_ms=self._difficulty.spawn_interval_ms,
            game_time_ms=self._game_time_ms,
            playfield_width=self._width,
            playfield_height=self._height,
            basket=BasketView(basket.x, basket.y, basket.width, basket.height),
            fruits=tuple(
                FruitView(
                    uid=f.uid,
                    name=f.fruit_type.name if f.fruit_type is not None else "",
                    points=f.points,
                    x=f.x,
                    y=f.y,
                    width=f.width,
                    height=f.height,
                    speed=f.speed
                )
                for f in self._entities
            )
        )

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _now(self, now_ms: Optional[float]) -> float:
        return float(self._clock.now() if now_ms is None else now_ms)

    def _reset_basket(self) -> None:
        basket = self.basket
        basket.x = self._width / 2 - basket.width / 2
        basket.y = self._height - basket.height - self._config.basket.bottom_margin

    def _move_basket(self, frames: float) -> None:
        basket = self.basket
        if self._input.pointer_active:
            basket.center_on(self._input.pointer_x, self._width)
            return
        basket.x += self._input.direction * basket.speed * frames
        basket.clamp_to(self._width)

    def _resolve_fruits(self) -> List[ScoreEvent]:
        """
        Catch or miss each fruit. Catch wins when both apply.

        The pass always covers every fruit, even after the final miss, so
        no fruit is left overlapping the basket or below the playfield.
        """
        events: List[ScoreEvent] = []
        basket = self.basket

        for fruit in list(self._entities):
            name = fruit.fruit_type.name if fruit.fruit_type is not None else ""
            if boxes_overlap(fruit, basket):
                events.append(self._scorer.apply_catch(fruit.uid, name, fruit.points))
                self._entities.remove_fruit(fruit)
                self._display.set_score(self._scorer.score)
            elif is_below(fruit, self._height):
                events.append(self._scorer.apply_miss(fruit.uid, name))
                self._entities.remove_fruit(fruit)
                self._display.set_lives(self._scorer.lives)

        # Final score includes catches later in the same pass
        if self._scorer.out_of_lives:
            self._game_over()

        return events

    def _game_over(self) -> None:
        if self._state is SessionState.OVER:
            return
        self._state = SessionState.OVER
        self._stop_spawn_timer()
        self._display.show_game_over(self._scorer.score)

    def _on_spawn_trigger(self) -> None:
        self.spawn_fruit()

    def _reschedule_spawns(self, now: float) -> None:
        # Pending countdown is discarded; the new period starts now
        if self._spawn_timer is None:
            return
        self._spawn_timer = self._scheduler.reschedule(
            self._spawn_timer,
            self._difficulty.spawn_interval_ms,
            now
        )

    def _stop_spawn_timer(self) -> None:
        if self._spawn_timer is not None:
            self._scheduler.cancel(self._spawn_timer)
            self._spawn_timer = None
