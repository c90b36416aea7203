from .entities import FrameMessage, SegmentMessage
from .game import ControlAction, ControlCommand, DirectionCommand
from .settings import GameSettings
