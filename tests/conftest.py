from __future__ import annotations

import os

# Must be set before pygame opens a display anywhere in the test run
os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

import numpy as np
import pygame
import pytest

from slice_arcade.env import GameEnv
from slice_arcade.session import GameSession

WIDTH, HEIGHT = 320, 240


@pytest.fixture()
def rng() -> np.random.Generator:
    return np.random.default_rng(1234)


@pytest.fixture()
def session(rng: np.random.Generator) -> GameSession:
    s = GameSession(WIDTH, HEIGHT, rng)
    s.start()
    return s


@pytest.fixture()
def env():
    e = GameEnv(width=WIDTH, height=HEIGHT)
    yield e
    e.close()


@pytest.fixture()
def surface() -> pygame.Surface:
    pygame.init()
    s = pygame.Surface((200, 200))
    s.fill((0, 0, 0))
    return s
