"""
Unit tests for the run-state game engine

Tests the Idle/Running/Paused state machine, no-op ticks outside Running,
reset semantics and snapshots.
"""

import dataclasses

import numpy as np
import pytest

from poong.core.entities import PaddleIntent
from poong.core.entities import PlayerInput
from poong.core.entities import RunState
from poong.core.game_engine import GameEngine


def physical_state(engine: GameEngine) -> tuple:
    """Everything a tick may change, ignoring the tick counter"""
    snapshot = engine.snapshot()
    return (snapshot.player, snapshot.opponent, snapshot.ball, snapshot.score)


class TestRunStates:
    """Test run-state transitions"""

    def test_starts_idle(self, engine: GameEngine):
        assert engine.run_state == RunState.IDLE
        assert not engine.is_running()
        assert not engine.is_paused()

    def test_start_serves_ball(self, engine: GameEngine):
        assert engine.start() == RunState.RUNNING
        ball = engine.snapshot().ball
        assert (ball.x, ball.y) == (400.0, 250.0)
        assert ball.vx != 0.0
        assert ball.vx**2 + ball.vy**2 == pytest.approx(25.0)

    def test_start_while_running_is_noop(self, engine: GameEngine):
        engine.start()
        engine.step()
        before = physical_state(engine)

        assert engine.start() == RunState.RUNNING
        assert physical_state(engine) == before

    def test_pause_and_resume_keep_positions(self, engine: GameEngine):
        engine.start()
        for _ in range(10):
            engine.step(PlayerInput(PaddleIntent.DOWN))

        assert engine.pause() == RunState.PAUSED
        paused = physical_state(engine)

        assert engine.start() == RunState.RUNNING
        assert physical_state(engine) == paused

    def test_pause_outside_running_is_noop(self, engine: GameEngine):
        assert engine.pause() == RunState.IDLE
        engine.start()
        engine.pause()
        assert engine.pause() == RunState.PAUSED

    def test_toggle_pause(self, engine: GameEngine):
        assert engine.toggle_pause() == RunState.IDLE
        engine.start()
        assert engine.toggle_pause() == RunState.PAUSED
        assert engine.is_paused()
        assert engine.toggle_pause() == RunState.RUNNING
        assert engine.is_running()

    def test_resume_only_from_paused(self, engine: GameEngine):
        assert engine.resume() == RunState.IDLE
        engine.start()
        engine.pause()
        assert engine.resume() == RunState.RUNNING

    @pytest.mark.parametrize("prepare", ["idle", "running", "paused"])
    def test_reset_from_any_state(self, engine: GameEngine, prepare: str):
        if prepare != "idle":
            engine.start()
        if prepare == "paused":
            engine.pause()
        assert engine.reset() == RunState.IDLE


class TestStep:
    """Test ticking"""

    def test_step_is_noop_when_idle(self, engine: GameEngine):
        before = engine.snapshot()
        for _ in range(20):
            events = engine.step(PlayerInput(PaddleIntent.UP))
            assert events == {"wall_bounces": [], "paddle_hits": [], "goals": []}
        assert engine.snapshot() == before

    def test_step_is_noop_when_paused(self, engine: GameEngine):
        engine.start()
        for _ in range(5):
            engine.step()
        engine.pause()
        before = engine.snapshot()

        for _ in range(20):
            engine.step(PlayerInput(target_y=0.0))

        assert engine.snapshot() == before

    def test_step_advances_when_running(self, engine: GameEngine):
        engine.start()
        ball = engine.snapshot().ball
        engine.step()
        after = engine.snapshot()
        assert after.tick == 1
        assert after.ball.x == pytest.approx(ball.x + ball.vx)

    def test_step_accepts_shorthand_inputs(self, engine: GameEngine):
        engine.start()
        engine.step(PaddleIntent.UP)
        assert engine.snapshot().player.y == 194.0
        engine.step(100.0)
        assert engine.snapshot().player.y == 50.0

    @pytest.mark.parametrize(
        "bad",
        ["sideways", object(), float("nan"), [1, 2], True, 10**400, -(10**309), np.complex128(1 + 1j)],
    )
    def test_malformed_input_is_noop(self, engine: GameEngine, bad: object):
        engine.start()
        engine.step(bad)
        assert engine.snapshot().player.y == 200.0


class TestReset:
    """Test reset mid-rally"""

    def test_reset_mid_rally(self, engine: GameEngine):
        engine.start()
        for _ in range(30):
            engine.step(PlayerInput(PaddleIntent.DOWN))
        engine.physics_engine.score = [3, 2]

        engine.reset()
        snapshot = engine.snapshot()

        assert snapshot.score == (0, 0)
        assert snapshot.run_state == RunState.IDLE
        assert snapshot.player.y == 200.0
        assert snapshot.opponent.y == 200.0
        assert (snapshot.ball.x, snapshot.ball.y) == (400.0, 250.0)
        assert (snapshot.ball.vx, snapshot.ball.vy) == (0.0, 0.0)
        assert snapshot.tick == 0

    def test_ball_stays_still_until_start(self, engine: GameEngine):
        engine.start()
        engine.reset()
        for _ in range(10):
            engine.step()
        assert engine.snapshot().ball.vx == 0.0

        engine.start()
        assert engine.snapshot().ball.vx != 0.0


class TestSnapshot:
    """Test the read-only snapshot"""

    def test_snapshot_has_no_side_effects(self, engine: GameEngine):
        engine.start()
        assert engine.snapshot() == engine.snapshot()

    def test_snapshot_cannot_mutate_engine(self, engine: GameEngine):
        snapshot = engine.snapshot()
        with pytest.raises(dataclasses.FrozenInstanceError):
            snapshot.player.y = 0.0  # type: ignore[misc]
        assert engine.physics_engine.player.position.y == 200.0

    def test_snapshot_is_a_point_in_time_copy(self, engine: GameEngine):
        engine.start()
        snapshot = engine.snapshot()
        engine.step(PlayerInput(PaddleIntent.UP))
        assert snapshot.player.y == 200.0
        assert snapshot.run_state == RunState.RUNNING

    def test_get_game_state(self, engine: GameEngine):
        state = engine.get_game_state()
        assert state["run_state"] == "idle"
        assert state["score"] == (0, 0)
        assert state["field_size"] == (800.0, 500.0)


class TestStats:
    """Test session statistics"""

    def test_goal_and_hits_are_counted(self, engine: GameEngine):
        engine.start()
        physics = engine.physics_engine

        # Dead-center return by the opponent, then a miss on the left line
        physics.ball.position.x, physics.ball.position.y = 755.0, 250.0
        physics.ball.velocity.x, physics.ball.velocity.y = 5.0, 0.0
        physics.ball.speed = 5.0
        engine.step()
        assert engine.get_stats()["current_rally"] == 1

        physics.ball.position.x, physics.ball.position.y = 12.0, 100.0
        physics.ball.velocity.x, physics.ball.velocity.y = -5.0, 0.0
        engine.step()

        stats = engine.get_stats()
        assert stats["points_played"] == 1
        assert stats["longest_rally"] == 1
        assert stats["current_rally"] == 0
        assert stats["top_speed"] == pytest.approx(5.3)
        assert stats["ticks"] == 2

    def test_reset_clears_stats(self, engine: GameEngine):
        engine.start()
        engine.stats["points_played"] = 4
        engine.reset()
        assert engine.get_stats()["points_played"] == 0
