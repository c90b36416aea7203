import threading as th

import pytest

from constants.direction import Direction
from constants.game_state import GameState
from game_instances.game_session import GameSession
from schemas.settings import GameSettings
from systems.game_logic import TickOutcome
from systems.system import GameListener


class RecordingListener(GameListener):
    def __init__(self):
        self.events = []
        self.frames = []

    def on_eat(self):
        self.events.append("eat")

    def on_die(self):
        self.events.append("die")

    def on_control_click(self):
        self.events.append("click")

    def on_score_changed(self, score: int):
        self.events.append(("score", score))

    def render(self, frame):
        self.frames.append(frame)


@pytest.fixture
def listener():
    return RecordingListener()


@pytest.fixture
def session(rng, listener):
    session = GameSession(GameSettings(), rng)
    session.add_listener(listener)
    return session


def place(session: GameSession, head, direction, food, length=3):
    session.snake.place(head, direction, length)
    session.food.position = food


class TestControls:
    def test_initial_state(self, session, listener):
        """A new session waits to be started and does not render."""
        assert session.state == GameState.INITIALIZED
        assert session.tick() is None
        assert listener.frames == []
        assert session.snapshot().segments == []

    def test_start(self, session, listener):
        """Starting regenerates the snake and places food off the snake."""
        assert session.start()

        assert session.state == GameState.PLAYING
        assert session.score == 0
        assert session.snake.length == 3
        assert not session.snake.contains(*session.food.position)
        assert listener.events == ["click", ("score", 0)]

    def test_start_while_playing_is_ignored(self, session):
        session.start()
        assert not session.start()
        assert session.state == GameState.PLAYING

    def test_pause_and_resume(self, session):
        """Ticks do nothing while paused."""
        session.start()
        assert session.toggle_pause()
        assert session.state == GameState.PAUSED

        head = session.snake.head
        assert session.tick() is None
        assert session.snake.head == head

        assert session.toggle_pause()
        assert session.state == GameState.PLAYING

    def test_toggle_pause_needs_a_round(self, session):
        """Pause has no effect before the game is started."""
        assert not session.toggle_pause()
        assert session.state == GameState.INITIALIZED

    def test_toggle_starts_then_pauses(self, session):
        """The single start/pause control starts, pauses and resumes."""
        assert session.toggle()
        assert session.state == GameState.PLAYING
        assert session.toggle()
        assert session.state == GameState.PAUSED
        assert session.toggle()
        assert session.state == GameState.PLAYING

    @pytest.mark.parametrize("pause_first", [False, True])
    def test_stop(self, session, listener, pause_first):
        """Stopping ends the round and resets the score."""
        session.start()
        if pause_first:
            session.toggle_pause()

        assert session.stop()
        assert session.state == GameState.GAMEOVER
        assert session.score == 0
        assert listener.events[-2:] == ["click", ("score", 0)]

    def test_stop_without_round_is_ignored(self, session):
        assert not session.stop()
        assert session.state == GameState.INITIALIZED

    def test_restart_after_game_over(self, session):
        session.start()
        session.stop()
        assert session.toggle()
        assert session.state == GameState.PLAYING

    def test_new_game_replaces_running_round(self, session):
        """New game works both during a round and after it."""
        session.start()
        place(session, (10, 10), Direction.RIGHT, (0, 0), length=6)

        assert session.new_game()
        assert session.state == GameState.PLAYING
        assert session.snake.length == 3

    def test_destroy(self, session):
        """A destroyed session ignores every control."""
        session.destroy()
        assert session.state == GameState.DESTROYED
        assert not session.is_running()
        assert not session.start()
        assert session.tick() is None

    def test_direction_only_while_playing(self, session):
        """Turns are ignored when the round is paused."""
        session.start()
        place(session, (10, 10), Direction.RIGHT, (0, 0))
        session.toggle_pause()

        assert not session.set_direction(Direction.UP)
        session.toggle_pause()
        assert session.set_direction(Direction.UP)

    def test_listener_added_once(self, session, listener):
        with pytest.raises(ValueError):
            session.add_listener(listener)


class TestTick:
    def test_move(self, session):
        """A plain tick moves the snake one cell, length unchanged."""
        session.start()
        place(session, (10, 10), Direction.RIGHT, (0, 0))

        assert session.tick() == TickOutcome.MOVED
        assert session.state == GameState.PLAYING
        cells = {tuple(cell) for segment in session.snake.segments for cell in segment.cells()}
        assert cells == {(11, 10), (10, 10), (9, 10)}

    def test_turn_then_tick(self, session):
        """A turn takes effect on the next tick at the head cell."""
        session.start()
        place(session, (10, 10), Direction.RIGHT, (0, 0))

        session.set_direction(Direction.DOWN)
        session.tick()
        assert session.snake.head == (10, 11)
        assert session.snake.length == 3

    def test_eat(self, session, listener):
        """Eating grows the snake, moves the food and scores a point."""
        session.start()
        place(session, (10, 10), Direction.RIGHT, (11, 10))

        assert session.tick() == TickOutcome.ATE
        assert session.snake.length == 4
        assert session.score == 1
        assert session.food.position != (11, 10)
        assert not session.snake.contains(*session.food.position)
        assert listener.events[-2:] == ["eat", ("score", 1)]

    def test_hit_wall(self, session, listener):
        """Leaving the pit ends the round and resets the score."""
        session.start()
        place(session, (1, 10), Direction.LEFT, (0, 10))
        session.tick()
        assert session.score == 1

        assert session.tick() == TickOutcome.HIT_WALL
        assert session.snake.head == (-1, 10)
        assert session.state == GameState.GAMEOVER
        assert session.score == 0
        assert "die" in listener.events
        assert listener.events[-1] == ("score", 0)

    def test_hit_right_wall(self, session):
        session.start()
        place(session, (39, 10), Direction.RIGHT, (0, 0))
        assert session.tick() == TickOutcome.HIT_WALL
        assert session.snake.head == (40, 10)
        assert session.state == GameState.GAMEOVER

    def test_hit_itself(self, session):
        """Biting the body ends the round."""
        session.start()
        place(session, (10, 10), Direction.RIGHT, (0, 0), length=5)

        for direction in [Direction.UP, Direction.LEFT, Direction.DOWN]:
            session.set_direction(direction)
            outcome = session.tick()
        assert outcome == TickOutcome.HIT_ITSELF
        assert session.state == GameState.GAMEOVER

    def test_no_ticks_after_game_over(self, session):
        session.start()
        place(session, (39, 10), Direction.RIGHT, (0, 0))
        session.tick()

        head = session.snake.head
        assert session.tick() is None
        assert session.snake.head == head


class TestFrames:
    def test_frame_after_tick(self, session, listener):
        """Every tick pushes the current geometry to the listeners."""
        session.start()
        place(session, (10, 10), Direction.RIGHT, (0, 0))
        session.set_direction(Direction.UP)
        session.tick()

        frame = listener.frames[-1]
        assert [(s.head, s.length, s.direction) for s in frame.segments] == [
            ((10, 9), 1, Direction.UP),
            ((10, 10), 2, Direction.RIGHT),
        ]
        assert frame.head == (10, 9)
        assert frame.food == (0, 0)
        assert frame.state == GameState.PLAYING
        assert not frame.game_over

    def test_frame_flags_game_over(self, session, listener):
        session.start()
        place(session, (39, 10), Direction.RIGHT, (0, 0))
        session.tick()
        assert listener.frames[-1].game_over

    def test_snapshot_is_a_copy(self, session):
        """Snapshots do not change when the game moves on."""
        session.start()
        place(session, (10, 10), Direction.RIGHT, (0, 0))
        frame = session.snapshot()
        session.tick()
        assert frame.head == (10, 10)
        assert session.snapshot().head == (11, 10)


class TestConcurrency:
    def test_input_and_ticks_from_different_threads(self, rng):
        """Turns from one thread and ticks from another keep the body consistent."""
        session = GameSession(GameSettings(rows=200, columns=200), rng)
        session.start()
        place(session, (100, 100), Direction.RIGHT, (0, 0))

        errors = []
        turns = [Direction.UP, Direction.LEFT, Direction.DOWN, Direction.RIGHT]

        def steer():
            try:
                for i in range(2000):
                    session.set_direction(turns[i % len(turns)])
            except Exception as e:  # noqa: BLE001
                errors.append(e)

        thread = th.Thread(target=steer)
        thread.start()
        for _ in range(500):
            session.tick()
        thread.join()

        assert errors == []
        assert session.snake.length >= 3
        assert session.snake.segments[0].direction == session.snake.direction

    def test_stop_waits_for_tick_notifications(self, session, listener):
        """A stop during a tick's delivery is reported after it, so the last score is 0."""
        entered = th.Event()
        release = th.Event()

        class SlowListener(GameListener):
            def on_eat(self):
                entered.set()
                release.wait(timeout=5)

        session.add_listener(SlowListener())
        session.start()
        place(session, (10, 10), Direction.RIGHT, (11, 10))

        ticker = th.Thread(target=session.tick)
        ticker.start()
        assert entered.wait(timeout=5)

        stopper = th.Thread(target=session.stop)
        stopper.start()
        stopper.join(timeout=0.1)
        release.set()
        ticker.join(timeout=5)
        stopper.join(timeout=5)

        assert session.state == GameState.GAMEOVER
        assert session.score == 0
        assert listener.events[-4:] == ["eat", ("score", 1), "click", ("score", 0)]

        session.tick()
        assert listener.frames[-1].game_over
        assert listener.frames[-1].score == 0
