import threading as th

import pygame

from constants.defaults import (
    BACKGROUND_COLOR,
    BODY_COLOR,
    FOOD_COLOR,
    GAME_OVER_COLOR,
    HEAD_COLOR,
    STATUS_BAR_COLOR,
    STATUS_BAR_HEIGHT,
    TEXT_COLOR,
)
from constants.game_state import GameState
from schemas.entities import FrameMessage, SegmentMessage
from schemas.settings import GameSettings
from systems.system import GameListener, System
from utils.timer import log_func_time


class RenderSystem(System, GameListener):
    """
    Draws the latest frame pushed by the game session.

    Frames arrive from the ticking thread through `render`; drawing happens on
    the thread that owns the window, when `run` is called.
    """

    def __init__(self, settings: GameSettings):
        self.settings = settings
        self.cell_size = settings.cell_size
        self.pit_width, self.pit_height = settings.screen_size

        self.window = None
        self._small_font = None
        self._big_font = None

        self._frame_lock = th.Lock()
        self._frame: FrameMessage = None

    def setup(self):
        # Set the screen size, the status bar goes below the pit
        self.window = pygame.display.set_mode((self.pit_width, self.pit_height + STATUS_BAR_HEIGHT))
        pygame.display.set_caption(self.settings.title)

        pygame.font.init()
        self._small_font = pygame.font.SysFont("dialog", 14)
        self._big_font = pygame.font.SysFont("verdana", 30, bold=True)

        self.window.fill(BACKGROUND_COLOR)
        pygame.display.flip()

    # Listener hook, called from the ticking thread
    def render(self, frame: FrameMessage):
        with self._frame_lock:
            self._frame = frame

    @property
    def frame(self) -> FrameMessage:
        with self._frame_lock:
            return self._frame

    @log_func_time
    def run(self, frame: FrameMessage = None):
        if frame is None:
            frame = self.frame

        self.window.fill(BACKGROUND_COLOR)
        if frame is not None:
            self._draw_frame(frame)
        self._draw_status_bar(self.status_text(frame))

        pygame.display.flip()

    def _draw_frame(self, frame: FrameMessage):
        for segment in frame.segments:
            self._draw_segment(segment)

        if frame.head is not None:
            self._draw_cell(frame.head, HEAD_COLOR)
            head_text = self._small_font.render(f"Snake: ({frame.head[0]},{frame.head[1]})", True, TEXT_COLOR)
            self.window.blit(head_text, (5, 10))

        if frame.food is not None:
            self._draw_cell(frame.food, FOOD_COLOR)

        if frame.game_over:
            self._draw_banner("GAME OVER!", GAME_OVER_COLOR)
        elif frame.state == GameState.PAUSED:
            self._draw_banner("PAUSED", TEXT_COLOR)

    def _draw_segment(self, segment: SegmentMessage):
        dx, dy = segment.direction.offset
        x, y = segment.head
        for _ in range(segment.length):
            self._draw_cell((x, y), BODY_COLOR)
            x -= dx
            y -= dy

    def _draw_cell(self, cell: tuple[int, int], color: tuple[int, int, int]):
        pygame.draw.rect(
            self.window,
            color,
            (
                cell[0] * self.cell_size,
                cell[1] * self.cell_size,
                self.cell_size - 1,
                self.cell_size - 1,
            ),
        )

    def _draw_banner(self, text: str, color: tuple[int, int, int]):
        banner = self._big_font.render(text, True, color)
        rect = banner.get_rect(center=(self.pit_width // 2, self.pit_height // 2))
        self.window.blit(banner, rect)

    def status_text(self, frame: FrameMessage) -> str:
        # The score comes from the same snapshot as the geometry
        score = frame.score if frame is not None else 0
        return f"Score: {score}"

    def _draw_status_bar(self, text: str):
        pygame.draw.rect(self.window, STATUS_BAR_COLOR, (0, self.pit_height, self.pit_width, STATUS_BAR_HEIGHT))
        score_text = self._small_font.render(text, True, TEXT_COLOR)
        rect = score_text.get_rect(center=(self.pit_width // 2, self.pit_height + STATUS_BAR_HEIGHT // 2))
        self.window.blit(score_text, rect)
