import logging
import random
from enum import Enum, auto

from entities.type import Food, Snake
from systems.system import System

logger = logging.getLogger(__name__)


class TickOutcome(Enum):
    MOVED = auto()
    ATE = auto()
    HIT_WALL = auto()
    HIT_ITSELF = auto()

    @property
    def is_fatal(self) -> bool:
        return self in (TickOutcome.HIT_WALL, TickOutcome.HIT_ITSELF)


class Arena:
    def __init__(self, rows: int, columns: int):
        self.rows = rows
        self.columns = columns

    @property
    def cell_count(self) -> int:
        return self.rows * self.columns

    def contains(self, x: int, y: int) -> bool:
        return 0 <= x < self.columns and 0 <= y < self.rows


class GameLogicSystem(System):
    """Moves the snake one step and resolves food, wall and body collisions."""

    def __init__(self, rows: int, columns: int, rng: random.Random = None) -> None:
        self.arena = Arena(rows, columns)
        self._rng = rng if rng is not None else random.Random()

    def setup(self):
        pass

    def run(self, snake: Snake, food: Food) -> TickOutcome:
        snake.update()

        head_x, head_y = snake.head
        if food.contains(head_x, head_y):
            outcome = TickOutcome.ATE
            self.spawn_food(snake, food)
        else:
            # Not eaten, the tail follows the head
            outcome = TickOutcome.MOVED
            snake.shrink()

        if not self.arena.contains(head_x, head_y):
            logger.debug(f"Snake left the pit at {snake.head}")
            return TickOutcome.HIT_WALL

        if snake.eats_itself():
            logger.debug(f"Snake bit itself at {snake.head}")
            return TickOutcome.HIT_ITSELF

        return outcome

    def spawn_food(self, snake: Snake, food: Food):
        """Move the food to a random cell that is not covered by the snake."""
        assert snake.length < self.arena.cell_count, "No free cell left for the food"

        food.regenerate(self._rng, self.arena.columns, self.arena.rows)
        while snake.contains(*food.position):
            food.regenerate(self._rng, self.arena.columns, self.arena.rows)
        logger.debug(f"Food placed at {food.position}")
