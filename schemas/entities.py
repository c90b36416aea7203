from typing import List, Optional

from pydantic import BaseModel

from constants.direction import Direction
from constants.game_state import GameState
from constants.message_types import MessageTypes


class SegmentMessage(BaseModel):
    head: tuple[int, int]
    length: int
    direction: Direction


class FrameMessage(BaseModel):
    type: str = MessageTypes.FRAME.value
    segments: List[SegmentMessage]
    food: Optional[tuple[int, int]] = None
    state: GameState
    score: int = 0

    @property
    def game_over(self) -> bool:
        return self.state == GameState.GAMEOVER

    @property
    def head(self) -> Optional[tuple[int, int]]:
        if not self.segments:
            return None
        return self.segments[0].head
