import os
import random

import pytest

# Run pygame backed systems without a display or an audio device
os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")


@pytest.fixture
def rng():
    return random.Random(1234)
