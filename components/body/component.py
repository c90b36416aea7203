class BodyComponent:
    def __init__(self, starting_position: tuple[int, int] = (0, 0)):
        self.segments: list[tuple[int, int]] = [tuple(starting_position)]

    @property
    def position(self) -> tuple[int, int]:
        return self.segments[0]

    @position.setter
    def position(self, new_position: tuple[int, int]):
        self.segments[0] = tuple(new_position)

    def contains(self, x: int, y: int) -> bool:
        return (x, y) in self.segments
