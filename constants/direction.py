from enum import Enum


class Direction(Enum):
    UP = (0, -1)
    LEFT = (-1, 0)
    DOWN = (0, 1)
    RIGHT = (1, 0)

    @property
    def offset(self) -> tuple[int, int]:
        return self.value

    @property
    def opposite(self) -> "Direction":
        dx, dy = self.value
        return Direction((-dx, -dy))

    def is_opposite(self, other: "Direction") -> bool:
        if not isinstance(other, Direction):
            raise ValueError(f"Direction can only be compared to other directions, got {other!r}")
        return other == self.opposite
