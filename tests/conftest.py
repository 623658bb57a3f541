import os

os.environ.setdefault('SDL_VIDEODRIVER', 'dummy')
os.environ.setdefault('SDL_AUDIODRIVER', 'dummy')
os.environ['PYGAME_HIDE_SUPPORT_PROMPT'] = '1'

import pytest
import pygame

from bouncers.config import SimulationConfig, Viewport
from bouncers.loop import SimulationLoop
from bouncers.registry import BouncerRegistry
from bouncers.rng import RandomSource
from bouncers.triggers import ScriptedTriggers


@pytest.fixture(autouse=True)
def pygame_ready():
    # Window.close() shuts pygame down; bring it back for every test
    pygame.init()
    yield


@pytest.fixture
def viewport():
    return Viewport.from_display(240, 160)


@pytest.fixture
def registry():
    return BouncerRegistry(RandomSource(seed=1))


def _build_loop(n_bouncers=5, **kwargs):
    """Loop whose first frames add bouncers until ``n_bouncers`` exist."""
    config = SimulationConfig(**kwargs)
    loop = SimulationLoop(config, ScriptedTriggers(add_frames=range(n_bouncers - 1)))
    loop.run(n_bouncers - 1)
    return loop


@pytest.fixture
def loop_factory():
    return _build_loop


@pytest.fixture
def loop():
    return _build_loop()
