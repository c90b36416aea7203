import random

from components.body.component import BodyComponent
from components.body.segment import Segment
from components.body.snake import SnakeBody
from components.movement.snake import SnakeMovement
from constants.defaults import (
    COLUMNS,
    INITIAL_LENGTH,
    ROWS,
    SELF_COLLISION_EXEMPT_SEGMENTS,
)
from constants.direction import Direction
from entities.base import Entity
from entities.entity_id import EntityID


# Define the player snake
class Snake(Entity):
    """
    A snake is made of one or more segments. As it moves, the head segment
    grows by one cell and the tail segment is shrunk afterwards. When the
    snake eats, the tail is left alone.
    """

    def __init__(
        self,
        columns: int = COLUMNS,
        rows: int = ROWS,
        initial_length: int = INITIAL_LENGTH,
        exempt_segments: int = SELF_COLLISION_EXEMPT_SEGMENTS,
    ):
        super().__init__(EntityID.SNAKE)

        self.columns = columns
        self.rows = rows
        self.initial_length = initial_length

        self.body_component = SnakeBody(exempt_segments)
        self.movement_component = SnakeMovement(self.body_component)

    def regenerate(self, rng: random.Random):
        """Place a fresh snake at a random spot inside the pit."""
        length = self.initial_length
        assert self.columns > 2 * length and self.rows > 2 * length, (
            f"A snake of length {length} does not fit a {self.columns}x{self.rows} grid"
        )

        direction = rng.choice(list(Direction))
        head_x = rng.randrange(length, self.columns - length)
        head_y = rng.randrange(length, self.rows - length)
        self.place((head_x, head_y), direction, length)

    def place(self, head: tuple[int, int], direction: Direction, length: int = None):
        if length is None:
            length = self.initial_length

        dx, dy = direction.offset
        tail = (head[0] - dx * (length - 1), head[1] - dy * (length - 1))
        for x, y in (head, tail):
            assert 0 <= x < self.columns and 0 <= y < self.rows, f"Snake does not fit the pit: {head} -> {tail}"

        self.body_component.reset(head, length, direction)
        self.movement_component.reset(direction)

    def set_direction(self, direction: Direction) -> bool:
        return self.movement_component.set_direction(direction)

    def update(self):
        self.movement_component.update()

    def shrink(self):
        self.body_component.shrink()

    def contains(self, x: int, y: int) -> bool:
        return self.body_component.contains(x, y)

    def eats_itself(self) -> bool:
        return self.body_component.eats_itself()

    @property
    def head(self) -> tuple[int, int]:
        return self.body_component.head

    @property
    def direction(self) -> Direction:
        return self.movement_component.direction

    @property
    def direction_pending(self) -> bool:
        return self.movement_component.direction_pending

    @property
    def length(self) -> int:
        return self.body_component.length

    @property
    def segments(self) -> tuple[Segment, ...]:
        return tuple(self.body_component)

    def __repr__(self) -> str:
        segments = "".join(f"\n   {segment}" for segment in self.body_component)
        return f"Snake[dir={self.direction.name if self.direction else None}{segments}\n]"


# Define the food
class Food(Entity):
    def __init__(self, start_position: tuple[int, int] = (0, 0)):
        super().__init__(EntityID.FOOD)

        self.body_component = BodyComponent(start_position)

    def regenerate(self, rng: random.Random, columns: int = COLUMNS, rows: int = ROWS):
        self.position = (rng.randrange(columns), rng.randrange(rows))

    def contains(self, x: int, y: int) -> bool:
        return self.body_component.contains(x, y)

    @property
    def position(self) -> tuple[int, int]:
        return self.body_component.position

    @position.setter
    def position(self, new_position: tuple[int, int]):
        self.body_component.position = new_position
