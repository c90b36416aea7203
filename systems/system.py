from schemas.entities import FrameMessage


class System:
    def setup(self):
        raise NotImplementedError(f"Child system MUST implement {self.setup.__name__}")

    def run(self, *args, **kwargs):
        raise NotImplementedError(f"Child system MUST implement {self.run.__name__}")


class GameListener:
    """
    Receives game notifications. All hooks are fire-and-forget: the game
    ignores their return values. They are called on the thread that made the
    change, one notification at a time and in order.
    """

    def on_eat(self):
        pass

    def on_die(self):
        pass

    def on_control_click(self):
        pass

    def on_score_changed(self, score: int):
        pass

    def render(self, frame: FrameMessage):
        pass
