import logging
import threading as th

from constants.defaults import MIN_SLEEP_SEC, UPDATE_PER_SEC
from game_instances.game_session import GameSession
from utils.timer import Timer

logger = logging.getLogger(__name__)


class GameLoop:
    """
    Ticks a game session at a fixed rate on a background thread.

    Each tick measures its own work and waits for the rest of the period,
    never less than `min_sleep`. A slow tick delays the next one; missed
    ticks are not caught up.
    """

    def __init__(
        self,
        session: GameSession,
        ticks_per_second: float = UPDATE_PER_SEC,
        min_sleep: float = MIN_SLEEP_SEC,
    ):
        if ticks_per_second <= 0:
            raise ValueError(f"Ticks per second must be positive, got {ticks_per_second}")

        self.session = session
        self.min_sleep = min_sleep
        self._period = 1 / ticks_per_second

        self._stop_event = th.Event()
        self._thread = None
        self.tick_count = 0

    @property
    def period(self) -> float:
        return self._period

    def start(self):
        if self.is_alive():
            raise RuntimeError("Game loop is already running")

        self._stop_event.clear()
        self._thread = th.Thread(target=self._run, name=self.__class__.__name__, daemon=True)
        self._thread.start()

    def stop(self, timeout: float = None):
        logger.info(f"[{self.__class__.__name__}] Shutting down game loop...")
        self._stop_event.set()
        if self._thread is not None:
            self._thread.join(timeout=timeout)
            if self._thread.is_alive():
                logger.warning(f"[{self.__class__.__name__}] Game loop did not stop in time")
            else:
                logger.info(f"[{self.__class__.__name__}] Game loop closed gracefully")
        self._thread = None

    def is_alive(self) -> bool:
        return self._thread is not None and self._thread.is_alive()

    def sleep_time(self, elapsed: float) -> float:
        return max(self._period - elapsed, self.min_sleep)

    def _run(self):
        timer = Timer()
        while not self._stop_event.is_set() and self.session.is_running():
            timer.reset()

            self.session.tick()
            self.tick_count += 1

            elapsed = timer.elapsed_sec()
            if elapsed > self._period:
                logger.debug(f"Tick {self.tick_count} overran its period: {round(elapsed * 1000, 1)} ms")
            # Waiting on the event lets stop() interrupt the sleep
            self._stop_event.wait(self.sleep_time(elapsed))
