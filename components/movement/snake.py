from components.body.snake import SnakeBody
from components.movement.component import MovementComponent
from constants.direction import Direction


class SnakeMovement(MovementComponent):
    def __init__(self, snake_body: SnakeBody, direction: Direction = Direction.RIGHT):
        super().__init__()
        self.snake_body = snake_body
        self.direction = direction
        self.direction_pending = False

    def reset(self, direction: Direction):
        self.direction = direction
        self.direction_pending = False

    def set_direction(self, new_direction: Direction) -> bool:
        if not isinstance(new_direction, Direction):
            raise ValueError(f"Snake direction must be of type {Direction.__name__}")

        # Only one turn per update, and no 180 degrees turn
        if self.direction_pending:
            return False
        if new_direction == self.direction or self.direction.is_opposite(new_direction):
            return False

        self.snake_body.turn(new_direction)
        self.direction = new_direction
        self.direction_pending = True
        return True

    def update(self):
        self.snake_body.head_segment.grow()
        self.direction_pending = False
