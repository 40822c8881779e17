"""
Renderer protocol - defines interface for presentation adapters
"""

from typing import Protocol

from poong.core.entities import GameSnapshot


class RendererProtocol(Protocol):
    """
    Protocol for renderer implementations.

    A renderer only ever sees immutable snapshots, it cannot mutate the engine.
    """

    def render(self, snapshot: GameSnapshot) -> None:
        """
        Render a single frame of the game.

        Args:
            snapshot: State of the game after the last tick
        """
        ...
