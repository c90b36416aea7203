from collections import deque

from components.body.segment import Segment
from constants.defaults import SELF_COLLISION_EXEMPT_SEGMENTS
from constants.direction import Direction


class SnakeBody:
    """
    Snake body as directional runs of cells. The first segment is the head
    of the snake, the last one is the tail.
    """

    def __init__(self, exempt_segments: int = SELF_COLLISION_EXEMPT_SEGMENTS):
        self.segments: deque[Segment] = deque()
        self.exempt_segments = exempt_segments

    @property
    def head_segment(self) -> Segment:
        return self.segments[0]

    @property
    def tail_segment(self) -> Segment:
        return self.segments[-1]

    @property
    def head(self) -> tuple[int, int]:
        return self.head_segment.head

    @property
    def length(self) -> int:
        return sum(segment.length for segment in self.segments)

    def reset(self, head: tuple[int, int], length: int, direction: Direction):
        self.segments.clear()
        self.segments.append(Segment(head, length, direction))

    def turn(self, direction: Direction):
        # The new head segment starts empty and grows on the next update
        self.segments.appendleft(Segment(self.head, 0, direction))

    def shrink(self):
        assert self.segments, "Cannot shrink a snake without segments"

        tail = self.tail_segment
        tail.shrink()
        if tail.length == 0:
            self.segments.pop()

    def contains(self, x: int, y: int) -> bool:
        return any(segment.contains(x, y) for segment in self.segments)

    def eats_itself(self) -> bool:
        head_x, head_y = self.head
        for index, segment in enumerate(self.segments):
            if index < self.exempt_segments:
                continue
            if segment.contains(head_x, head_y):
                return True
        return False

    def __len__(self):
        return len(self.segments)

    def __iter__(self):
        return iter(self.segments)
