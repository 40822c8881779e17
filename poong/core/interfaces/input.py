"""
Input source protocol - defines interface for player input providers
"""

from typing import Protocol

from poong.core.entities import PlayerInput


class InputSourceProtocol(Protocol):
    """
    Protocol for anything that feeds the player paddle (keyboard, pointer, scripts).

    Raw events are buffered by the source; the frame loop polls exactly once
    per tick so the engine step stays the only place positions change.
    """

    def poll(self) -> PlayerInput:
        """
        Get the input to apply during the next tick.

        Returns:
            PlayerInput with a discrete intent and/or an absolute target y
        """
        ...
