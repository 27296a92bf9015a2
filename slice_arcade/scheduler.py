import logging

import pygame

logger = logging.getLogger(__name__)


class FrameScheduler:
    """Runs a frame callback once per display refresh on the calling thread.

    The callback returns True to be scheduled again; anything falsy, or a call
    to ``stop()``, ends the loop after the current frame. Nothing runs between
    frames except the scheduler itself waiting on the clock.
    """

    def __init__(self, fps, clock=None):
        self.fps = fps
        self.clock = clock if clock is not None else pygame.time.Clock()
        self.frames = 0
        self._running = False

    @property
    def running(self):
        return self._running

    def stop(self):
        self._running = False

    def run(self, callback):
        self._running = True
        logger.debug("Frame loop started at %d fps", self.fps)
        try:
            while self._running:
                keep_going = callback()
                self.frames += 1
                if not keep_going:
                    break
                self.clock.tick(self.fps)
        finally:
            self._running = False
            logger.debug("Frame loop stopped after %d frames", self.frames)
        return self.frames
