import logging
from enum import Enum

from slice_arcade.constants import BOMB_CHANCE, CULL_MARGIN, SLICE_SCORE, SPAWN_CHANCE
from slice_arcade.objects import spawn_bomb, spawn_fruit
from slice_arcade.particles import ParticleBurst
from slice_arcade.slicer import SliceResult, SliceTrail, slice_objects

logger = logging.getLogger(__name__)


class GameState(Enum):
    IDLE = "idle"
    RUNNING = "running"
    OVER = "over"


class GameSession:
    """Everything that lives for one game: flying objects, bursts, trail and score.

    The session is driven from a single thread. Pointer handlers and
    ``step_frame`` each run to completion, so both may mutate ``objects``
    without coordination. Leaving RUNNING makes every later frame a no-op.
    """

    def __init__(self, width, height, np_random):
        self.width = width
        self.height = height
        self.np_random = np_random

        self.state = GameState.IDLE
        self.objects = []
        self.bursts = []
        self.trail = SliceTrail()
        self.score = 0
        self.frame = 0

    @property
    def running(self):
        return self.state is GameState.RUNNING

    def start(self):
        if self.running:
            logger.warning("Restarting a game that is still running (score %d)", self.score)
        self.score = 0
        self.frame = 0
        self.objects = []
        self.bursts = []
        self.trail.end()
        self.state = GameState.RUNNING
        self.spawn()
        logger.info("Game started on a %dx%d surface", self.width, self.height)

    def end(self):
        if not self.running:
            return
        self.state = GameState.OVER
        self.trail.end()
        logger.info("Game over, final score %d after %d frames", self.score, self.frame)

    # --- Frame step ---

    def step_frame(self):
        if not self.running:
            return

        for burst in self.bursts:
            burst.update()
        self.bursts = [b for b in self.bursts if b.is_alive()]

        for obj in self.objects:
            obj.update()
        self.cull()

        if self.np_random.random() < SPAWN_CHANCE:
            self.spawn()

        self.frame += 1

    def cull(self):
        limit = self.height + CULL_MARGIN
        kept = [obj for obj in self.objects if obj.y < limit]
        removed = len(self.objects) - len(kept)
        if removed:
            self.objects = kept
        return removed

    def spawn(self):
        if self.np_random.random() < 1 - BOMB_CHANCE:
            obj = spawn_fruit(self.np_random, self.width, self.height)
        else:
            obj = spawn_bomb(self.np_random, self.width, self.height)
        self.objects.append(obj)
        return obj

    # --- Pointer input ---

    def pointer_down(self, x, y):
        if not self.running:
            return
        self.trail.begin(x, y)

    def pointer_move(self, x, y):
        if not (self.trail.active and self.running):
            return SliceResult()

        self.trail.add(x, y)
        result = slice_objects(self.objects, x, y)
        for fruit in result.sliced:
            self.bursts.append(ParticleBurst(fruit.x, fruit.y, fruit.color, self.np_random))
        result.points = SLICE_SCORE * len(result.sliced)
        self.score += result.points
        if result.sliced:
            logger.debug("Sliced %d object(s) at (%.1f, %.1f), score %d",
                         len(result.sliced), x, y, self.score)

        if result.detonated:
            self.end()
        return result

    def pointer_up(self):
        self.trail.end()

    def pointer_leave(self):
        self.trail.end()
