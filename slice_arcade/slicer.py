import logging

import pygame

from slice_arcade.constants import COLOR_TRAIL, TRAIL_WIDTH

logger = logging.getLogger(__name__)


class SliceTrail:
    """Recent pointer samples of the current slice gesture.

    Only drawn, never used for hit testing. Each drawn frame drops the oldest
    point so the trail shrinks back to the pointer when it stops moving.
    """

    def __init__(self):
        self.points = []
        self.active = False

    def __len__(self):
        return len(self.points)

    def begin(self, x, y):
        self.points = [(x, y)]
        self.active = True

    def add(self, x, y):
        self.points.append((x, y))

    def end(self):
        self.points = []
        self.active = False

    def contract(self):
        if len(self.points) >= 2:
            self.points.pop(0)

    def draw(self, surface):
        if len(self.points) < 2:
            return
        overlay = pygame.Surface(surface.get_size(), pygame.SRCALPHA)
        points = [(int(x), int(y)) for x, y in self.points]
        pygame.draw.lines(overlay, COLOR_TRAIL, False, points, TRAIL_WIDTH)
        surface.blit(overlay, (0, 0))


class SliceResult:
    def __init__(self, sliced=None, points=0, detonated=False):
        self.sliced = sliced if sliced is not None else []
        self.points = points
        self.detonated = detonated

    def __bool__(self):
        return bool(self.sliced) or self.detonated

    def __repr__(self):
        return (f"SliceResult(sliced={len(self.sliced)}, points={self.points}, "
                f"detonated={self.detonated})")


def slice_objects(objects, x, y):
    """Remove every fruit under the pointer at (x, y) from ``objects``.

    The list is walked from the back so removals keep the remaining indices
    valid. Touching a bomb stops the pass; fruit already cut earlier in the
    same pass stay cut.
    """
    result = SliceResult()
    for i in range(len(objects) - 1, -1, -1):
        obj = objects[i]
        if not obj.contains(x, y):
            continue
        if obj.is_bomb:
            logger.debug("Bomb hit at (%.1f, %.1f)", obj.x, obj.y)
            result.detonated = True
            break
        result.sliced.append(objects.pop(i))
    return result
