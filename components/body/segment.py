import numpy as np

from constants.direction import Direction


class Segment:
    """
    One horizontal or vertical run of snake cells.

    The segment starts at ``head`` and covers ``length`` cells going backwards
    from ``direction``, until it reaches the tail. A segment of length 0 covers
    no cells; it only marks a direction change that has not moved yet.
    """

    def __init__(self, head: tuple[int, int], length: int, direction: Direction):
        if not isinstance(direction, Direction):
            raise ValueError(f"Segment direction must be of type {Direction.__name__}")
        assert length >= 0, f"Segment length cannot be negative, got {length}"

        self._head_x, self._head_y = head
        self._length = length
        self.direction = direction

    @property
    def head(self) -> tuple[int, int]:
        return (self._head_x, self._head_y)

    @property
    def length(self) -> int:
        return self._length

    @property
    def tail(self):
        if self._length == 0:
            return None

        dx, dy = self.direction.offset
        return (
            self._head_x - dx * (self._length - 1),
            self._head_y - dy * (self._length - 1),
        )

    def grow(self):
        """Add one cell in front of the head, the tail stays where it is."""
        dx, dy = self.direction.offset
        self._head_x += dx
        self._head_y += dy
        self._length += 1

    def shrink(self):
        """Remove the tail cell. The head does not move."""
        assert self._length > 0, f"Cannot shrink an empty segment: {self}"
        self._length -= 1

    def contains(self, x: int, y: int) -> bool:
        if self._length == 0:
            return False

        tail_x, tail_y = self.tail
        if self.direction == Direction.LEFT:
            return y == self._head_y and self._head_x <= x <= tail_x
        elif self.direction == Direction.RIGHT:
            return y == self._head_y and tail_x <= x <= self._head_x
        elif self.direction == Direction.UP:
            return x == self._head_x and self._head_y <= y <= tail_y
        else:
            return x == self._head_x and tail_y <= y <= self._head_y

    def cells(self) -> np.ndarray:
        """Occupied cells as a (length, 2) integer array, head first."""
        steps = np.arange(self._length).reshape(-1, 1)
        offset = np.array(self.direction.offset, dtype=int)
        return np.array(self.head, dtype=int) - steps * offset

    def __repr__(self) -> str:
        return f"Segment(head={self.head}, length={self._length}, direction={self.direction.name})"
