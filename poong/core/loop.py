"""
Frame loop for Poong: one engine step then one render per frame
"""

from collections.abc import Callable

from poong.core.entities import GameSnapshot
from poong.core.entities import PlayerInput
from poong.core.game_engine import GameEngine
from poong.core.interfaces.input import InputSourceProtocol
from poong.core.interfaces.renderer import RendererProtocol


class GameLoop:
    """Owns the ticking cadence; the engine itself knows nothing about time"""

    def __init__(
        self,
        engine: GameEngine,
        renderer: RendererProtocol,
        input_source: InputSourceProtocol | None = None,
    ):
        self.engine = engine
        self.renderer = renderer
        self.input_source = input_source
        self.frames = 0

    def tick(self) -> GameSnapshot:
        """Runs one frame and returns the snapshot that was rendered"""
        player_input = self.input_source.poll() if self.input_source else PlayerInput()
        self.engine.step(player_input)

        snapshot = self.engine.snapshot()
        self.renderer.render(snapshot)
        self.frames += 1
        return snapshot

    def run(
        self,
        max_frames: int | None = None,
        should_continue: Callable[[], bool] | None = None,
    ) -> int:
        """
        Repeats :meth:`tick` until told to stop

        Args:
            max_frames: Stop after this many frames (None for no limit)
            should_continue: Checked before every frame, the loop ends when it returns False

        Returns:
            int: Number of frames run by this call
        """
        frames = 0
        while max_frames is None or frames < max_frames:
            if should_continue is not None and not should_continue():
                break
            self.tick()
            frames += 1
        return frames
