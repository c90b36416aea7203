from enum import Enum


class MessageTypes(Enum):
    # Player input
    DIRECTION_COMMAND = "direction_command"
    CONTROL_COMMAND = "control_command"

    # Game output
    FRAME = "frame"
