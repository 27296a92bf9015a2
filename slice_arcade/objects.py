import math
from enum import Enum

import pygame
import pygame.gfxdraw

from slice_arcade.constants import (
    BOMB_MAX_SPIN,
    BOMB_RADIUS,
    COLOR_BOMB,
    COLOR_BOMB_FUSE,
    COLOR_BOMB_SPARK,
    FRUIT_COLORS,
    FRUIT_MAX_SPIN,
    FRUIT_MAX_VX,
    FRUIT_RADIUS_MAX,
    FRUIT_RADIUS_MIN,
    GRAVITY,
    SPAWN_MARGIN,
)


class Shape(Enum):
    CIRCLE = "circle"
    SQUARE = "square"
    TRIANGLE = "triangle"


class ObjectKind(Enum):
    FRUIT = "fruit"
    BOMB = "bomb"


# Outline of each polygon shape around the origin, before rotation, scaled by radius
SHAPE_OUTLINES = {
    Shape.SQUARE: [(-1, -1), (1, -1), (1, 1), (-1, 1)],
    Shape.TRIANGLE: [(0, -1), (1, 1), (-1, 1)],
}


class FlyingObject:
    """A thrown object: a point mass under constant gravity with a drawn shape.

    Fruit and bombs share this class; ``kind`` tells them apart.
    """

    def __init__(self, x, y, vx, vy, radius, color, shape=Shape.CIRCLE, spin=0.0,
                 kind=ObjectKind.FRUIT):
        self.x, self.y = x, y
        self.vx, self.vy = vx, vy
        self.radius = radius
        self.color = color
        self.shape = shape
        self.rotation = 0.0
        self.spin = spin
        self.kind = kind

    @property
    def is_bomb(self):
        return self.kind is ObjectKind.BOMB

    def update(self):
        self.x += self.vx
        self.y += self.vy
        self.vy += GRAVITY
        self.rotation += self.spin

    def apex_y(self):
        """Height (screen y) at which the upward motion stops."""
        return self.y - (self.vy * self.vy) / (2 * GRAVITY)

    def contains(self, x, y):
        return math.hypot(self.x - x, self.y - y) < self.radius

    def polygon(self):
        cos_r, sin_r = math.cos(self.rotation), math.sin(self.rotation)
        points = []
        for ux, uy in SHAPE_OUTLINES[self.shape]:
            px, py = ux * self.radius, uy * self.radius
            points.append((
                self.x + px * cos_r - py * sin_r,
                self.y + px * sin_r + py * cos_r,
            ))
        return points

    def draw(self, surface):
        cx, cy, r = int(self.x), int(self.y), int(self.radius)
        if self.shape is Shape.CIRCLE:
            pygame.gfxdraw.filled_circle(surface, cx, cy, r, self.color)
            pygame.gfxdraw.aacircle(surface, cx, cy, r, self.color)
        else:
            points = [(int(px), int(py)) for px, py in self.polygon()]
            pygame.gfxdraw.filled_polygon(surface, points, self.color)
            pygame.gfxdraw.aapolygon(surface, points, self.color)

        if self.is_bomb:
            # Fuse sticks out of the top and turns with the bomb
            angle = self.rotation - math.pi / 2
            base = (cx + math.cos(angle) * r, cy + math.sin(angle) * r)
            tip = (cx + math.cos(angle) * (r + 10), cy + math.sin(angle) * (r + 10))
            pygame.draw.line(surface, COLOR_BOMB_FUSE, base, tip, 3)
            pygame.gfxdraw.filled_circle(surface, int(tip[0]), int(tip[1]), 3, COLOR_BOMB_SPARK)


def _launch(np_random, width, height):
    """Pick a start point below the screen and the velocity that peaks in the upper half."""
    x = np_random.uniform(0, width)
    y = height + SPAWN_MARGIN
    target_peak_y = np_random.uniform(0, height * 0.5)
    # v^2 = 2 * g * d, negative to go up
    vy = -math.sqrt(2 * GRAVITY * (y - target_peak_y))
    vx = np_random.uniform(-FRUIT_MAX_VX, FRUIT_MAX_VX)
    return x, y, vx, vy


def spawn_fruit(np_random, width, height):
    x, y, vx, vy = _launch(np_random, width, height)
    shapes = list(Shape)
    return FlyingObject(
        x, y, vx, vy,
        radius=np_random.uniform(FRUIT_RADIUS_MIN, FRUIT_RADIUS_MAX),
        color=FRUIT_COLORS[int(np_random.integers(len(FRUIT_COLORS)))],
        shape=shapes[int(np_random.integers(len(shapes)))],
        spin=np_random.uniform(-FRUIT_MAX_SPIN, FRUIT_MAX_SPIN),
    )


def spawn_bomb(np_random, width, height):
    x, y, vx, vy = _launch(np_random, width, height)
    return FlyingObject(
        x, y, vx, vy,
        radius=BOMB_RADIUS,
        color=COLOR_BOMB,
        shape=Shape.CIRCLE,
        spin=np_random.uniform(-BOMB_MAX_SPIN, BOMB_MAX_SPIN),
        kind=ObjectKind.BOMB,
    )
