"""Human play in a pygame window.

Usage:
  python -m slice_arcade --width 1024 --height 768 --seed 7

Screens: start menu -> (instructions) -> game -> game over -> restart.
Mouse events are fed to the session as they arrive; the frame itself is
advanced once per display refresh by ``FrameScheduler``.
"""
import argparse
import logging

import pygame

from slice_arcade.constants import (
    COLOR_BUTTON,
    COLOR_BUTTON_HOVER,
    COLOR_OVERLAY,
    COLOR_TEXT,
    FPS,
    HEIGHT,
    TITLE,
    WIDTH,
)
from slice_arcade.env import GameEnv
from slice_arcade.scheduler import FrameScheduler

logger = logging.getLogger(__name__)

# Pointer released: the env only advances the frame, input comes from events
IDLE_ACTION = [0.0, 0.0, 0.0]

MENU = "menu"
INSTRUCTIONS = "instructions"
PLAYING = "playing"
OVER = "over"


class Button:
    def __init__(self, center, text, font, size=(220, 56)):
        self.rect = pygame.Rect((0, 0), size)
        self.rect.center = center
        self.text = text
        self.font = font

    def is_hovered(self, pos):
        return self.rect.collidepoint(pos)

    def draw(self, surface, mouse_pos):
        color = COLOR_BUTTON_HOVER if self.is_hovered(mouse_pos) else COLOR_BUTTON
        pygame.draw.rect(surface, color, self.rect, border_radius=10)
        pygame.draw.rect(surface, COLOR_TEXT, self.rect, 2, border_radius=10)
        text_surf = self.font.render(self.text, True, COLOR_TEXT)
        surface.blit(text_surf, text_surf.get_rect(center=self.rect.center))


class ArcadeApp:
    def __init__(self, width=WIDTH, height=HEIGHT, seed=None):
        pygame.init()
        self.window = pygame.display.set_mode((width, height))
        pygame.display.set_caption(TITLE)

        self.env = GameEnv(render_mode="rgb_array", width=width, height=height)
        self.seed = seed
        self.width, self.height = width, height
        self.screen = MENU

        self.font_title = pygame.font.Font(None, 84)
        self.font_button = pygame.font.Font(None, 40)
        self.font_text = pygame.font.Font(None, 30)

        cx, cy = width // 2, height // 2
        self.start_button = Button((cx, cy + 10), "Start", self.font_button)
        self.help_button = Button((cx, cy + 86), "How to play", self.font_button)
        self.close_button = Button((cx, cy + 120), "Close", self.font_button)
        self.restart_button = Button((cx, cy + 110), "Restart", self.font_button)

        self.scheduler = FrameScheduler(FPS)

    @property
    def session(self):
        return self.env.session

    def run(self):
        logger.info("Opening %s window (%dx%d)", TITLE, self.width, self.height)
        try:
            self.scheduler.run(self.frame)
        finally:
            self.env.close()

    def start_game(self):
        self.env.reset(seed=self.seed)
        self.seed = None  # Only the first game is reproducible
        self.screen = PLAYING

    # --- Per-frame callback ---

    def frame(self):
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                return False
            if event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE:
                return False
            self.handle_event(event)

        if self.screen == PLAYING:
            _, _, terminated, _, info = self.env.step(IDLE_ACTION)
            if terminated:
                logger.info("Final score: %d", info["final_score"])
                self.screen = OVER

        self.draw()
        pygame.display.flip()
        return True

    def handle_event(self, event):
        if self.screen == PLAYING:
            if event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
                self.session.pointer_down(*event.pos)
            elif event.type == pygame.MOUSEMOTION:
                self.session.pointer_move(*event.pos)
            elif event.type == pygame.MOUSEBUTTONUP and event.button == 1:
                self.session.pointer_up()
            elif event.type == pygame.WINDOWLEAVE:
                self.session.pointer_leave()
            return

        if not (event.type == pygame.MOUSEBUTTONUP and event.button == 1):
            return
        if self.screen == MENU:
            if self.start_button.is_hovered(event.pos):
                self.start_game()
            elif self.help_button.is_hovered(event.pos):
                self.screen = INSTRUCTIONS
        elif self.screen == INSTRUCTIONS:
            if self.close_button.is_hovered(event.pos):
                self.screen = MENU
        elif self.screen == OVER:
            if self.restart_button.is_hovered(event.pos):
                self.start_game()

    # --- Screens ---

    def draw(self):
        mouse_pos = pygame.mouse.get_pos()
        if self.screen in (PLAYING, OVER):
            # The env surface already carries the score and the game over banner
            self.window.blit(self.env.screen, (0, 0))
            if self.screen == OVER:
                self.restart_button.draw(self.window, mouse_pos)
            return

        self.window.blit(self.env.background, (0, 0))
        title_surf = self.font_title.render(TITLE, True, COLOR_TEXT)
        self.window.blit(title_surf, title_surf.get_rect(center=(self.width / 2, self.height / 2 - 110)))

        if self.screen == MENU:
            self.start_button.draw(self.window, mouse_pos)
            self.help_button.draw(self.window, mouse_pos)
        else:
            self._draw_instructions(mouse_pos)

    def _draw_instructions(self, mouse_pos):
        panel = pygame.Surface((self.width, self.height), pygame.SRCALPHA)
        panel.fill(COLOR_OVERLAY)
        self.window.blit(panel, (0, 0))

        lines = [
            GameEnv.game_description,
            GameEnv.user_guide,
            "Every fruit is worth 10 points.",
        ]
        y = self.height / 2 - 60
        for line in lines:
            text_surf = self.font_text.render(line, True, COLOR_TEXT)
            self.window.blit(text_surf, text_surf.get_rect(center=(self.width / 2, y)))
            y += 40
        self.close_button.draw(self.window, mouse_pos)


def main(argv=None):
    ap = argparse.ArgumentParser(prog="slice_arcade", description=GameEnv.game_description)
    ap.add_argument("--width", type=int, default=WIDTH)
    ap.add_argument("--height", type=int, default=HEIGHT)
    ap.add_argument("--seed", type=int, default=None)
    ap.add_argument("--log-level", default="INFO",
                    choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    args = ap.parse_args(argv)

    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    ArcadeApp(args.width, args.height, seed=args.seed).run()
    return 0
