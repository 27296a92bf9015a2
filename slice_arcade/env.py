import logging
import os

import gymnasium as gym
from gymnasium.spaces import Box
import numpy as np
import pygame

from slice_arcade.constants import (
    COLOR_BG_BOTTOM,
    COLOR_BG_TOP,
    COLOR_GAME_OVER,
    COLOR_OVERLAY,
    COLOR_TEXT,
    COLOR_TEXT_SHADOW,
    FPS,
    HEIGHT,
    TITLE,
    WIDTH,
)
from slice_arcade.session import GameSession, GameState

logger = logging.getLogger(__name__)


class GameEnv(gym.Env):
    """
    Slice Arcade: fruit and bombs are thrown up from below the screen and the
    player cuts them with pointer drags.

    **Action:** one pointer sample per frame, ``[x, y, pressed]``. A press
    starts a slice gesture, every held frame moves the blade to (x, y) and
    cuts whatever is under it, a release ends the gesture.

    **Reward:** the points scored this frame (10 per fruit).

    **Termination:** touching a bomb ends the episode. There is no step limit.
    """
    metadata = {"render_modes": ["rgb_array", "human"], "render_fps": FPS}

    # Must be a short, user-facing control string:
    user_guide = (
        "Controls: Hold the mouse button and drag across fruit to slice it. Never touch the bombs."
    )

    # Must be a short, user-facing description of the game:
    game_description = (
        "Slice the fruit thrown up from below for points. Slicing a bomb ends the game."
    )

    # Should frames auto-advance or wait for user input?
    auto_advance = True

    def __init__(self, render_mode="rgb_array", width=WIDTH, height=HEIGHT):
        super().__init__()
        if render_mode not in self.metadata["render_modes"]:
            raise ValueError(f"Unsupported render mode {render_mode!r}")
        self.render_mode = render_mode
        self.WIDTH, self.HEIGHT = int(width), int(height)

        # EXACT spaces:
        self.observation_space = Box(
            low=0, high=255, shape=(self.HEIGHT, self.WIDTH, 3), dtype=np.uint8
        )
        self.action_space = Box(
            low=np.array([0, 0, 0], dtype=np.float32),
            high=np.array([self.WIDTH, self.HEIGHT, 1], dtype=np.float32),
            dtype=np.float32,
        )

        # Pygame setup
        if render_mode == "rgb_array" and not pygame.display.get_init():
            os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
        pygame.init()
        pygame.font.init()
        self.screen = pygame.Surface((self.WIDTH, self.HEIGHT))
        self.window = None
        self.clock = pygame.time.Clock()
        self.font_large = pygame.font.Font(None, 64)
        self.font_small = pygame.font.Font(None, 36)

        # Pre-render background for performance
        self.background = self._create_gradient_background()

        # State is (re)built in reset()
        self.session = None
        self.steps = 0
        self.pointer_held = False

        self.reset()
        self.validate_implementation()
        # Validation steps with a sampled action, start clean
        self.reset()

    def _create_gradient_background(self):
        bg = pygame.Surface((self.WIDTH, self.HEIGHT))
        for y in range(self.HEIGHT):
            color = [
                COLOR_BG_TOP[i] + (COLOR_BG_BOTTOM[i] - COLOR_BG_TOP[i]) * (y / self.HEIGHT)
                for i in range(3)
            ]
            pygame.draw.line(bg, color, (0, y), (self.WIDTH, y))
        return bg

    def reset(self, seed=None, options=None):
        super().reset(seed=seed)

        self.session = GameSession(self.WIDTH, self.HEIGHT, self.np_random)
        self.session.start()
        self.steps = 0
        self.pointer_held = False

        return self._get_observation(), self._get_info()

    def step(self, action):
        if self.session.state is not GameState.RUNNING:
            return self._get_observation(), 0, True, False, self._get_info()

        x, y, pressed = self._parse_action(action)
        self.steps += 1
        score_before = self.session.score

        self._handle_pointer(x, y, pressed)
        self.session.step_frame()

        reward = self.session.score - score_before
        terminated = self.session.state is GameState.OVER

        obs = self._get_observation()
        self.session.trail.contract()
        if self.render_mode == "human":
            self.render()

        return (
            obs,
            reward,
            terminated,
            False,
            self._get_info()
        )

    def _parse_action(self, action):
        arr = np.asarray(action, dtype=np.float32)
        if arr.shape != (3,):
            raise ValueError(f"Expected an action of shape (3,), got {arr.shape}")
        if not np.all(np.isfinite(arr)):
            raise ValueError(f"Action must be finite, got {arr.tolist()}")
        x = float(np.clip(arr[0], 0, self.WIDTH))
        y = float(np.clip(arr[1], 0, self.HEIGHT))
        return x, y, bool(arr[2] >= 0.5)

    def _handle_pointer(self, x, y, pressed):
        if pressed and not self.pointer_held:
            self.session.pointer_down(x, y)
        elif pressed:
            self.session.pointer_move(x, y)
        elif self.pointer_held:
            self.session.pointer_up()
        self.pointer_held = pressed

    def _get_observation(self):
        self.screen.blit(self.background, (0, 0))
        self._render_game()
        self._render_ui()
        arr = pygame.surfarray.array3d(self.screen)
        return np.transpose(arr, (1, 0, 2)).astype(np.uint8)

    def _render_game(self):
        for burst in self.session.bursts:
            burst.draw(self.screen)
        for obj in self.session.objects:
            obj.draw(self.screen)

    def _render_ui(self):
        score = f"Score: {self.session.score}"
        self.screen.blit(self.font_small.render(score, True, COLOR_TEXT_SHADOW), (22, 22))
        self.screen.blit(self.font_small.render(score, True, COLOR_TEXT), (20, 20))

        self.session.trail.draw(self.screen)

        if self.session.state is GameState.OVER:
            self._render_game_over()

    def _render_game_over(self):
        overlay = pygame.Surface((self.WIDTH, self.HEIGHT), pygame.SRCALPHA)
        overlay.fill(COLOR_OVERLAY)
        self.screen.blit(overlay, (0, 0))

        title_surf = self.font_large.render("GAME OVER", True, COLOR_GAME_OVER)
        title_rect = title_surf.get_rect(center=(self.WIDTH / 2, self.HEIGHT / 2 - 30))
        self.screen.blit(title_surf, title_rect)

        score_surf = self.font_small.render(f"Final score: {self.session.score}", True, COLOR_TEXT)
        score_rect = score_surf.get_rect(center=(self.WIDTH / 2, self.HEIGHT / 2 + 25))
        self.screen.blit(score_surf, score_rect)

    def _get_info(self):
        info = {
            "score": self.session.score,
            "steps": self.steps,
            "objects": len(self.session.objects),
            "bursts": len(self.session.bursts),
            "state": self.session.state.value,
        }
        if self.session.state is GameState.OVER:
            info["final_score"] = self.session.score
        return info

    def render(self):
        if self.render_mode == "rgb_array":
            return self._get_observation()
        if self.window is None:
            pygame.display.init()
            self.window = pygame.display.set_mode((self.WIDTH, self.HEIGHT))
            pygame.display.set_caption(TITLE)
        self.window.blit(self.screen, (0, 0))
        pygame.event.pump()
        pygame.display.flip()
        self.clock.tick(self.metadata["render_fps"])
        return None

    def close(self):
        if self.window is not None:
            pygame.display.quit()
            self.window = None
        pygame.quit()

    def validate_implementation(self):
        '''
        Call this at the end of __init__ to verify implementation:
        '''
        # Test action space
        assert self.action_space.shape == (3,)
        assert self.action_space.dtype == np.float32

        # Test observation space
        test_obs = self._get_observation()
        assert test_obs.shape == (self.HEIGHT, self.WIDTH, 3)
        assert test_obs.dtype == np.uint8

        # Test reset
        obs, info = self.reset()
        assert obs.shape == (self.HEIGHT, self.WIDTH, 3)
        assert isinstance(info, dict)

        # Test step
        test_action = self.action_space.sample()
        obs, reward, term, trunc, info = self.step(test_action)
        assert obs.shape == (self.HEIGHT, self.WIDTH, 3)
        assert isinstance(reward, (int, float))
        assert isinstance(term, bool)
        assert trunc == False
        assert isinstance(info, dict)

        logger.debug("Implementation validated successfully")
