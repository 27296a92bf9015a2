import pygame.gfxdraw

from slice_arcade.constants import (
    BURST_LIFE,
    BURST_PARTICLES,
    PARTICLE_MAX_SPEED,
    PARTICLE_RADIUS_MAX,
    PARTICLE_RADIUS_MIN,
)


class Particle:
    __slots__ = ("x", "y", "vx", "vy", "radius", "alpha")

    def __init__(self, x, y, vx, vy, radius, alpha=1.0):
        self.x, self.y = x, y
        self.vx, self.vy = vx, vy
        self.radius = radius
        self.alpha = alpha


class ParticleBurst:
    """Juice splash left behind by a sliced fruit.

    All particles share the burst's life counter, so they fade out together
    and the burst dies after ``BURST_LIFE`` updates.
    """

    def __init__(self, x, y, color, np_random):
        self.x, self.y = x, y
        self.color = color
        self.life = BURST_LIFE
        self.particles = []
        for _ in range(BURST_PARTICLES):
            self.particles.append(Particle(
                x, y,
                np_random.uniform(-PARTICLE_MAX_SPEED, PARTICLE_MAX_SPEED),
                np_random.uniform(-PARTICLE_MAX_SPEED, PARTICLE_MAX_SPEED),
                np_random.uniform(PARTICLE_RADIUS_MIN, PARTICLE_RADIUS_MAX),
            ))

    def is_alive(self):
        return self.life > 0

    def update(self):
        self.life -= 1
        for p in self.particles:
            p.x += p.vx
            p.y += p.vy
            p.alpha = self.life / BURST_LIFE

    def draw(self, surface):
        # Alpha travels with each color, the surface itself stays opaque
        for p in self.particles:
            alpha = max(0, min(255, int(255 * p.alpha)))
            if alpha == 0:
                continue
            pygame.gfxdraw.filled_circle(
                surface, int(p.x), int(p.y), max(1, int(p.radius)), (*self.color, alpha)
            )
