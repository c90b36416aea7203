from enum import Enum

from pydantic import BaseModel

from constants.direction import Direction
from constants.message_types import MessageTypes


class ControlAction(Enum):
    TOGGLE = "toggle"  # Start, or pause/resume a running game
    STOP = "stop"
    NEW_GAME = "new_game"
    MUTE = "mute"
    HELP = "help"
    QUIT = "quit"


class DirectionCommand(BaseModel):
    type: str = MessageTypes.DIRECTION_COMMAND.value
    direction: Direction


class ControlCommand(BaseModel):
    type: str = MessageTypes.CONTROL_COMMAND.value
    action: ControlAction
