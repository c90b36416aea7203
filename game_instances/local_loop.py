import logging
import random

import pygame

from constants.defaults import HELP_TEXT
from game_instances.game_loop import GameLoop
from game_instances.game_session import GameSession
from schemas.game import ControlAction, ControlCommand, DirectionCommand
from schemas.settings import GameSettings
from systems.player_input import InputSystem
from systems.render import RenderSystem
from systems.sound import SoundSystem, Volume

logger = logging.getLogger(__name__)


class LocalLoop:
    """
    Single player game in a pygame window.

    The game session ticks on its own thread. This loop owns the window: it
    reads input, forwards it to the session and redraws the latest frame at
    the display rate.
    """

    def __init__(self, settings: GameSettings = None, seed: int = None, muted: bool = False, fps: int = 60):
        self.settings = settings if settings is not None else GameSettings()
        self.fps = fps

        self.session = GameSession(self.settings, random.Random(seed))
        self.game_loop = GameLoop(self.session, self.settings.ticks_per_second, self.settings.min_sleep)

        self.input_system = InputSystem()
        self.rendering_system = RenderSystem(self.settings)
        self.sound_system = SoundSystem(Volume.MUTE if muted else Volume.LOW)

        self._running = False

    def setup(self):
        pygame.init()

        self.input_system.setup()
        self.rendering_system.setup()
        self.sound_system.setup()

        self.session.add_listener(self.rendering_system)
        self.session.add_listener(self.sound_system)

        self._clock = pygame.time.Clock()
        self._running = True

    def close(self):
        self.session.destroy()
        self.game_loop.stop(timeout=1)
        self.sound_system.close()
        pygame.quit()
        logger.info(f"[{self.__class__.__name__}] Closed")

    def run(self):
        self.setup()

        # Start playing right away
        self.session.start()
        self.game_loop.start()

        try:
            while self._running:
                for command in self.input_system.run():
                    self.handle_command(command)

                if not self._running:
                    break

                self.rendering_system.run()
                self._clock.tick(self.fps)
        finally:
            self.close()

    def handle_command(self, command):
        if isinstance(command, DirectionCommand):
            self.session.set_direction(command.direction)
        elif isinstance(command, ControlCommand):
            self._handle_control(command.action)
        else:
            raise ValueError(f"Unknown player command: {command!r}")

    def _handle_control(self, action: ControlAction):
        if action == ControlAction.TOGGLE:
            self.session.toggle()
        elif action == ControlAction.STOP:
            self.session.stop()
        elif action == ControlAction.NEW_GAME:
            self.session.new_game()
        elif action == ControlAction.MUTE:
            self.sound_system.toggle_mute()
        elif action == ControlAction.HELP:
            logger.info(f"Instructions:\n{HELP_TEXT}")
        elif action == ControlAction.QUIT:
            self._running = False
