class MovementComponent:
    def __init__(self):
        self.direction = None

    def update(self):
        raise NotImplementedError(f"Child component MUST implement {self.update.__name__}")
