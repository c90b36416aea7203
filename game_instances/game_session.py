import logging
import random
import threading as th

from constants.direction import Direction
from constants.game_state import GameState
from entities.type import Food, Snake
from schemas.entities import FrameMessage, SegmentMessage
from schemas.settings import GameSettings
from systems.game_logic import GameLogicSystem, TickOutcome
from systems.system import GameListener

logger = logging.getLogger(__name__)


class GameSession:
    """
    Holds the snake, the food, the score and the game state.

    Every mutation goes through this object and is serialized by a single
    lock, so the ticking thread and the input handlers never interleave.
    Listener notifications are queued while the lock is held and delivered
    after it has been released, under a dispatch lock that keeps them in the
    order the changes were made.
    """

    def __init__(self, settings: GameSettings = None, rng: random.Random = None):
        self.settings = settings if settings is not None else GameSettings()
        self._rng = rng if rng is not None else random.Random()
        self._lock = th.RLock()
        self._dispatch_lock = th.RLock()
        self._listeners: list[GameListener] = []

        self.snake = Snake(
            columns=self.settings.columns,
            rows=self.settings.rows,
            initial_length=self.settings.initial_length,
            exempt_segments=self.settings.exempt_segments,
        )
        self.food = Food()
        self.game_logic_system = GameLogicSystem(self.settings.rows, self.settings.columns, self._rng)

        self._state = GameState.INITIALIZED
        self._score = 0

    # Listeners
    def add_listener(self, listener: GameListener):
        if listener in self._listeners:
            raise ValueError("Listener already added!")
        self._listeners.append(listener)

    def remove_listener(self, listener: GameListener):
        self._listeners.remove(listener)

    def _notify(self, notifications: list[tuple[str, tuple]]):
        for hook_name, args in notifications:
            for listener in list(self._listeners):
                getattr(listener, hook_name)(*args)

    # State
    @property
    def state(self) -> GameState:
        return self._state

    @property
    def score(self) -> int:
        return self._score

    def is_running(self) -> bool:
        with self._lock:
            return self._state != GameState.DESTROYED

    def _set_state(self, state: GameState):
        if not isinstance(state, GameState):
            raise ValueError(f"Game state must be of type {GameState.__name__}")
        logger.info(f"Game state {self._state.name} -> {state.name}")
        self._state = state

    def _set_score(self, score: int, notifications: list):
        self._score = score
        notifications.append(("on_score_changed", (score,)))

    # Controls
    def start(self) -> bool:
        return self._control(self._start)

    def toggle_pause(self) -> bool:
        return self._control(self._toggle_pause)

    def toggle(self) -> bool:
        """Start a new round if none is running, otherwise pause or resume it."""
        return self._control(self._toggle)

    def stop(self) -> bool:
        return self._control(self._stop)

    def new_game(self) -> bool:
        return self._control(self._new_game)

    def _control(self, action) -> bool:
        notifications = []
        with self._dispatch_lock:
            with self._lock:
                accepted = action(notifications)
            self._notify(notifications)
        return accepted

    def _start(self, notifications: list) -> bool:
        if self._state not in (GameState.INITIALIZED, GameState.GAMEOVER):
            return False

        self.snake.regenerate(self._rng)
        self.game_logic_system.spawn_food(self.snake, self.food)
        self._set_state(GameState.PLAYING)
        notifications.append(("on_control_click", ()))
        self._set_score(0, notifications)
        return True

    def _toggle_pause(self, notifications: list) -> bool:
        if self._state == GameState.PLAYING:
            self._set_state(GameState.PAUSED)
        elif self._state == GameState.PAUSED:
            self._set_state(GameState.PLAYING)
        else:
            return False
        notifications.append(("on_control_click", ()))
        return True

    def _toggle(self, notifications: list) -> bool:
        if self._state in (GameState.INITIALIZED, GameState.GAMEOVER):
            return self._start(notifications)
        return self._toggle_pause(notifications)

    def _stop(self, notifications: list) -> bool:
        if self._state not in (GameState.PLAYING, GameState.PAUSED):
            return False

        self._set_state(GameState.GAMEOVER)
        notifications.append(("on_control_click", ()))
        self._set_score(0, notifications)
        return True

    def _new_game(self, notifications: list) -> bool:
        if self._state in (GameState.PLAYING, GameState.PAUSED):
            self._set_state(GameState.GAMEOVER)
        return self._start(notifications)

    def destroy(self):
        with self._lock:
            if self._state != GameState.DESTROYED:
                self._set_state(GameState.DESTROYED)

    def set_direction(self, direction: Direction) -> bool:
        with self._lock:
            if self._state != GameState.PLAYING:
                return False
            return self.snake.set_direction(direction)

    # Simulation
    def tick(self) -> TickOutcome:
        """Advance the game by one step. Returns None when no round is being played."""
        notifications = []
        outcome = None
        with self._dispatch_lock:
            with self._lock:
                if self._state == GameState.PLAYING:
                    outcome = self.game_logic_system.run(self.snake, self.food)

                    if outcome == TickOutcome.ATE:
                        notifications.append(("on_eat", ()))
                        self._set_score(self._score + 1, notifications)
                    elif outcome.is_fatal:
                        logger.info(f"Snake died ({outcome.name}) with score {self._score}")
                        notifications.append(("on_die", ()))
                        self._set_score(0, notifications)
                        self._set_state(GameState.GAMEOVER)

                if self._state not in (GameState.INITIALIZED, GameState.DESTROYED):
                    notifications.append(("render", (self.snapshot(),)))
            self._notify(notifications)
        return outcome

    def snapshot(self) -> FrameMessage:
        with self._lock:
            if self._state == GameState.INITIALIZED:
                return FrameMessage(segments=[], food=None, state=self._state, score=self._score)

            segments = [
                SegmentMessage(head=segment.head, length=segment.length, direction=segment.direction)
                for segment in self.snake.segments
            ]
            return FrameMessage(
                segments=segments,
                food=self.food.position,
                state=self._state,
                score=self._score,
            )
