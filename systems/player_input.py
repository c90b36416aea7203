import logging
from typing import Union

import pygame

from constants.direction import Direction
from schemas.game import ControlAction, ControlCommand, DirectionCommand
from systems.system import System

logger = logging.getLogger(__name__)

PlayerCommand = Union[DirectionCommand, ControlCommand]


class InputSystem(System):
    key_directions = {
        pygame.K_UP: Direction.UP,
        pygame.K_DOWN: Direction.DOWN,
        pygame.K_LEFT: Direction.LEFT,
        pygame.K_RIGHT: Direction.RIGHT,
    }

    key_controls = {
        pygame.K_p: ControlAction.TOGGLE,
        pygame.K_SPACE: ControlAction.TOGGLE,
        pygame.K_x: ControlAction.STOP,
        pygame.K_n: ControlAction.NEW_GAME,
        pygame.K_s: ControlAction.MUTE,
        pygame.K_h: ControlAction.HELP,
        pygame.K_F1: ControlAction.HELP,
        pygame.K_ESCAPE: ControlAction.QUIT,
    }

    def setup(self):
        pass

    def run(self) -> list[PlayerCommand]:
        # Every pending event is translated, so quick key presses are not lost
        commands = []
        for event in pygame.event.get():
            command = self.translate_event(event)
            if command is not None:
                logger.debug(f"Player command: {command}")
                commands.append(command)
        return commands

    def translate_event(self, event) -> PlayerCommand:
        if event.type == pygame.QUIT:
            return ControlCommand(action=ControlAction.QUIT)
        elif event.type != pygame.KEYDOWN:
            return None

        if event.key in self.key_directions:
            return DirectionCommand(direction=self.key_directions[event.key])
        elif event.key in self.key_controls:
            return ControlCommand(action=self.key_controls[event.key])
        return None
