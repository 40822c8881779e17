"""
Poong main game engine
"""

from typing import Any

import numpy as np

from poong.core.entities import BallSnapshot
from poong.core.entities import GameSnapshot
from poong.core.entities import PaddleSnapshot
from poong.core.entities import PlayerInput
from poong.core.entities import RunState
from poong.core.interfaces.physics import PhysicsBackend
from poong.core.physics import PhysicsEngine
from poong.utils.config import GameConfig


class GameEngine:
    """Engine that drives the physics through the Idle/Running/Paused run states

    Control actions (:meth:`start`, :meth:`pause`, :meth:`toggle_pause`,
    :meth:`reset`) return the new run state. They are meant to be called
    between ticks, so they always take effect at a tick boundary.
    """

    def __init__(
        self,
        config: GameConfig | None = None,
        rng: np.random.Generator | None = None,
        physics_engine: PhysicsBackend | None = None,
    ):
        self.physics_engine: PhysicsBackend = (
            physics_engine if physics_engine is not None else PhysicsEngine(config, rng)
        )
        self.run_state = RunState.IDLE
        self.tick_count = 0
        self.reset_stats()

    def start(self) -> RunState:
        """Starts a new session from Idle, or resumes a paused one"""
        if self.run_state == RunState.IDLE:
            self.physics_engine.serve_ball()
            self.run_state = RunState.RUNNING
        elif self.run_state == RunState.PAUSED:
            self.run_state = RunState.RUNNING
        return self.run_state

    def pause(self) -> RunState:
        """Freezes a running session"""
        if self.run_state == RunState.RUNNING:
            self.run_state = RunState.PAUSED
        return self.run_state

    def resume(self) -> RunState:
        """Resumes a paused session, without effect in any other state"""
        if self.run_state == RunState.PAUSED:
            self.run_state = RunState.RUNNING
        return self.run_state

    def toggle_pause(self) -> RunState:
        """Pauses / resumes the game; ignored while Idle"""
        if self.run_state == RunState.RUNNING:
            return self.pause()
        return self.resume()

    def reset(self) -> RunState:
        """Back to Idle with zero scores, centered paddles and the ball at rest"""
        self.physics_engine.reset_game()
        self.run_state = RunState.IDLE
        self.tick_count = 0
        self.reset_stats()
        return self.run_state

    def step(self, player_input: Any = None) -> dict[str, list]:
        """
        Advances the game by one tick

        Args:
            player_input: PlayerInput, a PaddleIntent, an absolute target y or None.
                Anything else is treated as no input.

        Returns:
            Dict of events that occurred during the tick (empty lists when not running)
        """
        if self.run_state != RunState.RUNNING:
            return {"wall_bounces": [], "paddle_hits": [], "goals": []}

        events: dict[str, list] = self.physics_engine.update(PlayerInput.coerce(player_input))
        self.tick_count += 1
        self._update_stats(events)
        return events

    def snapshot(self) -> GameSnapshot:
        """Returns an immutable view of the current state"""
        physics = self.physics_engine
        return GameSnapshot(
            player=PaddleSnapshot.from_paddle(physics.player),
            opponent=PaddleSnapshot.from_paddle(physics.opponent),
            ball=BallSnapshot.from_ball(physics.ball),
            score=(physics.score[0], physics.score[1]),
            run_state=self.run_state,
            field_size=(physics.field_width, physics.field_height),
            tick=self.tick_count,
        )

    def _update_stats(self, events: dict[str, list]) -> None:
        """Updates rally statistics from the events of one tick"""
        for hit in events["paddle_hits"]:
            self.current_rally += 1
            self.stats["top_speed"] = max(self.stats["top_speed"], hit["speed"])

        if events["goals"]:
            self.stats["points_played"] += 1
            self.stats["longest_rally"] = max(self.stats["longest_rally"], self.current_rally)
            self.current_rally = 0

    def get_stats(self) -> dict[str, Any]:
        """Returns session statistics"""
        stats: dict[str, Any] = self.stats.copy()
        stats["current_rally"] = self.current_rally
        stats["ticks"] = self.tick_count
        return stats

    def reset_stats(self) -> None:
        """Resets statistics to zero"""
        self.current_rally = 0
        self.stats: dict[str, Any] = {
            "points_played": 0,
            "longest_rally": 0,
            "top_speed": 0.0,
        }

    def is_running(self) -> bool:
        """Checks if the game is running"""
        return self.run_state == RunState.RUNNING

    def is_paused(self) -> bool:
        """Checks if the game is paused"""
        return self.run_state == RunState.PAUSED

    def get_game_state(self) -> dict[str, Any]:
        """Returns the snapshot as a plain dictionary"""
        return self.snapshot().to_dict()
