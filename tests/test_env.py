from __future__ import annotations

import numpy as np
import pytest

from slice_arcade.constants import SLICE_SCORE
from slice_arcade.env import GameEnv
from slice_arcade.objects import FlyingObject, ObjectKind
from slice_arcade.policy import policy
from slice_arcade.session import GameState

WIDTH, HEIGHT = 320, 240


def place(env: GameEnv, *objects: FlyingObject) -> None:
    env.session.objects = list(objects)


def fruit(x: float = 100, y: float = 100) -> FlyingObject:
    return FlyingObject(x, y, 0.0, 0.0, 60, (220, 53, 69))


def bomb(x: float = 100, y: float = 100) -> FlyingObject:
    return FlyingObject(x, y, 0.0, 0.0, 30, (51, 51, 51), kind=ObjectKind.BOMB)


def test_spaces(env: GameEnv) -> None:
    assert env.observation_space.shape == (HEIGHT, WIDTH, 3)
    assert env.observation_space.dtype == np.uint8
    assert env.action_space.shape == (3,)
    assert env.action_space.high.tolist() == [WIDTH, HEIGHT, 1]


def test_reset_starts_a_fresh_game(env: GameEnv) -> None:
    obs, info = env.reset(seed=0)
    assert obs.shape == (HEIGHT, WIDTH, 3)
    assert obs.dtype == np.uint8
    assert info["score"] == 0
    assert info["objects"] == 1
    assert info["state"] == "running"
    assert "final_score" not in info


def test_seeded_reset_is_deterministic() -> None:
    envs = [GameEnv(width=WIDTH, height=HEIGHT) for _ in range(2)]
    try:
        results = []
        for e in envs:
            obs, _ = e.reset(seed=7)
            for _ in range(120):
                obs, reward, terminated, truncated, info = e.step([0.0, 0.0, 0.0])
            results.append((obs, info))
        assert np.array_equal(results[0][0], results[1][0])
        assert results[0][1] == results[1][1]
    finally:
        for e in envs:
            e.close()


def test_press_hold_release_map_to_gesture(env: GameEnv) -> None:
    env.reset(seed=0)
    place(env)

    env.step([50, 50, 1])
    assert env.session.trail.active
    assert env.session.trail.points == [(50, 50)]

    env.step([60, 60, 1])
    # Drawn with both points, then contracted to the newest
    assert env.session.trail.points == [(60, 60)]

    env.step([70, 70, 0])
    assert not env.session.trail.active
    assert env.session.trail.points == []


def test_drag_across_fruit_scores(env: GameEnv) -> None:
    env.reset(seed=0)
    place(env, fruit(100, 100))

    _, reward, terminated, _, _ = env.step([100, 100, 1])
    # A press alone never cuts
    assert reward == 0
    assert len([o for o in env.session.objects if not o.is_bomb and o.y < HEIGHT]) == 1

    _, reward, terminated, truncated, info = env.step([140, 100, 1])
    assert reward == SLICE_SCORE
    assert info["score"] == SLICE_SCORE
    assert info["bursts"] == 1
    assert not terminated
    assert truncated is False


def test_bomb_terminates(env: GameEnv) -> None:
    env.reset(seed=0)
    place(env, bomb(100, 100))

    env.step([0, 0, 1])
    _, reward, terminated, _, info = env.step([105, 100, 1])
    assert terminated
    assert reward == 0
    assert info["state"] == "over"
    assert info["final_score"] == 0
    assert env.session.state is GameState.OVER

    steps = info["steps"]
    _, reward, terminated, _, info = env.step([0, 0, 0])
    assert terminated
    assert reward == 0
    assert info["steps"] == steps


def test_bad_action_shape_raises(env: GameEnv) -> None:
    env.reset(seed=0)
    with pytest.raises(ValueError):
        env.step([1, 2])


@pytest.mark.parametrize("bad", [np.nan, np.inf, -np.inf])
def test_non_finite_action_raises_without_touching_state(env: GameEnv, bad: float) -> None:
    env.reset(seed=0)
    place(env)
    env.step([10, 10, 1])
    steps = env.steps
    frame = env.session.frame
    trail = list(env.session.trail.points)

    with pytest.raises(ValueError):
        env.step([bad, 10, 1])
    assert env.steps == steps
    assert env.session.frame == frame
    assert env.session.trail.points == trail

    # The gesture carries on normally afterwards
    env.step([20, 20, 1])
    assert env.session.trail.points == [(20.0, 20.0)]


def test_new_env_starts_clean() -> None:
    e = GameEnv(width=WIDTH, height=HEIGHT)
    try:
        assert e.steps == 0
        assert not e.pointer_held
        assert not e.session.trail.active
        assert e.session.score == 0
        assert len(e.session.objects) == 1
    finally:
        e.close()


def test_human_mode_opens_and_closes_window() -> None:
    e = GameEnv(render_mode="human", width=WIDTH, height=HEIGHT)
    try:
        e.reset(seed=0)
        for _ in range(3):
            obs, _, _, _, _ = e.step([50, 50, 1])
            assert obs.shape == (HEIGHT, WIDTH, 3)
        assert e.window is not None
        assert e.window.get_size() == (WIDTH, HEIGHT)
        assert e.render() is None
    finally:
        e.close()
    assert e.window is None


def test_unknown_render_mode_raises() -> None:
    with pytest.raises(ValueError):
        GameEnv(render_mode="ansi", width=WIDTH, height=HEIGHT)


def test_render_returns_frame(env: GameEnv) -> None:
    env.reset(seed=0)
    frame = env.render()
    assert frame.shape == (HEIGHT, WIDTH, 3)


def test_out_of_bounds_pointer_is_clipped(env: GameEnv) -> None:
    env.reset(seed=0)
    place(env)
    env.step([-50, 10_000, 1])
    assert env.session.trail.points == [(0.0, float(HEIGHT))]


def test_policy_never_aims_at_a_bomb(env: GameEnv) -> None:
    env.reset(seed=3)
    info = {}
    terminated = False
    for _ in range(900):
        action = policy(env)
        if action[2]:
            for obj in env.session.objects:
                if obj.is_bomb:
                    assert not obj.contains(action[0], action[1])
        _, _, terminated, _, info = env.step(action)
        if terminated:
            break
    assert info["score"] > 0
