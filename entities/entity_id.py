from enum import Enum, auto


class EntityID(Enum):
    SNAKE = auto()
    FOOD = auto()
