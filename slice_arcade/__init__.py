from slice_arcade.env import GameEnv
from slice_arcade.objects import FlyingObject, ObjectKind, Shape, spawn_bomb, spawn_fruit
from slice_arcade.particles import Particle, ParticleBurst
from slice_arcade.scheduler import FrameScheduler
from slice_arcade.session import GameSession, GameState
from slice_arcade.slicer import SliceResult, SliceTrail, slice_objects

__version__ = "0.1.0"

__all__ = [
    "FlyingObject",
    "FrameScheduler",
    "GameEnv",
    "GameSession",
    "GameState",
    "ObjectKind",
    "Particle",
    "ParticleBurst",
    "Shape",
    "SliceResult",
    "SliceTrail",
    "slice_objects",
    "spawn_bomb",
    "spawn_fruit",
]
