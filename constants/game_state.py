from enum import Enum, auto


class GameState(Enum):
    INITIALIZED = auto()
    PLAYING = auto()
    PAUSED = auto()
    GAMEOVER = auto()
    DESTROYED = auto()
