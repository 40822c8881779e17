"""
Human player input for Poong
"""

import pygame

from poong.core.entities import PaddleIntent
from poong.core.entities import PlayerInput

UP_KEYS = (pygame.K_UP,)
DOWN_KEYS = (pygame.K_DOWN,)


class InputManager:
    """Buffers raw pygame events into the player's pending input

    Events never touch the paddle: they only update the buffer, which the
    frame loop reads once per tick through :meth:`poll`.
    """

    def __init__(self) -> None:
        self.keys_held: dict[int, bool] = {}
        self.pending_target_y: float | None = None

    def handle_event(self, event: pygame.event.Event) -> str | None:
        """
        Handle pygame events

        Returns:
            String naming a control command (start, pause, reset, quit) or None
        """
        if event.type == pygame.KEYDOWN:
            if event.key in UP_KEYS or event.key in DOWN_KEYS:
                self.keys_held[event.key] = True

            # Global game controls
            elif event.key == pygame.K_RETURN:
                return "start"
            elif event.key == pygame.K_p or event.key == pygame.K_SPACE:
                return "pause"
            elif event.key == pygame.K_r:
                return "reset"
            elif event.key == pygame.K_ESCAPE:
                return "quit"

        elif event.type == pygame.KEYUP:
            if event.key in UP_KEYS or event.key in DOWN_KEYS:
                self.keys_held[event.key] = False

        elif event.type == pygame.MOUSEMOTION:
            self.pending_target_y = float(event.pos[1])

        elif event.type == pygame.QUIT:
            return "quit"

        return None

    def current_intent(self) -> PaddleIntent:
        """Discrete intent from the arrow keys currently held (up wins when both are held)"""
        if any(self.keys_held.get(key, False) for key in UP_KEYS):
            return PaddleIntent.UP
        if any(self.keys_held.get(key, False) for key in DOWN_KEYS):
            return PaddleIntent.DOWN
        return PaddleIntent.NONE

    def poll(self) -> PlayerInput:
        """Input for the next tick; a pointer target is consumed once"""
        player_input = PlayerInput(intent=self.current_intent(), target_y=self.pending_target_y)
        self.pending_target_y = None
        return player_input

    def clear(self) -> None:
        """Forget held keys and pointer moves"""
        self.keys_held.clear()
        self.pending_target_y = None
