"""
Main game application with PyGame GUI
"""

import sys
import traceback

import pygame

from poong.core.entities import RunState
from poong.core.game_engine import GameEngine
from poong.core.loop import GameLoop
from poong.gui.human_player import InputManager
from poong.gui.pygame_renderer import PygameRenderer
from poong.utils.config import GameConfig
from poong.utils.config import game_config
from poong.utils.config import load_config_from_file


class PoongApp:
    """Main application class for Poong with PyGame GUI"""

    def __init__(self, config: GameConfig | None = None) -> None:
        """Initialize the application"""
        self.config = config if config is not None else game_config

        # Initialize game components
        self.game_engine = GameEngine(self.config)
        self.renderer = PygameRenderer(self.config)
        self.input_manager = InputManager()
        self.loop = GameLoop(self.game_engine, self.renderer, self.input_manager)
        self.running = True

        print("Poong initialized successfully!")
        print("ENTER: start  P/SPACE: pause  R: reset  ESC: quit")

    def handle_command(self, command: str | None) -> None:
        """Apply a control command coming from the input manager"""
        if command is None:
            return

        if command == "start":
            previous = self.game_engine.run_state
            state = self.game_engine.start()
            if previous != state:
                print("Game resumed" if previous == RunState.PAUSED else "Game started")
        elif command == "pause":
            state = self.game_engine.toggle_pause()
            if state == RunState.PAUSED:
                print("Game paused")
            elif state == RunState.RUNNING:
                print("Game resumed")
        elif command == "reset":
            self.game_engine.reset()
            self.input_manager.clear()
            print("Game reset")
        elif command == "quit":
            self.running = False

    def process_events(self) -> None:
        """Route pending pygame events to the input buffer"""
        for event in pygame.event.get():
            self.handle_command(self.input_manager.handle_event(event))

    def run(self) -> None:
        """Main application loop"""
        print("Starting Poong...")

        try:
            while self.running:
                self.process_events()
                if not self.running:
                    break

                # One engine step, one render
                self.loop.tick()
                self.renderer.present()

                # Control frame rate
                self.renderer.update()

        except Exception as e:
            print(f"Error during execution: {e}")
            traceback.print_exc()

        finally:
            self.cleanup()

    def cleanup(self) -> None:
        """Clean up resources"""
        print("Cleaning up resources...")
        stats = self.game_engine.get_stats()
        print(
            f"Session: {stats['points_played']} points, "
            f"longest rally {stats['longest_rally']} hits, "
            f"top speed {stats['top_speed']:.1f}"
        )
        self.renderer.cleanup()
        pygame.quit()
        print("Poong closed properly.")


def main() -> None:
    """Main entry point"""
    try:
        if len(sys.argv) > 1:
            if load_config_from_file(sys.argv[1]):
                print(f"Configuration loaded from {sys.argv[1]}")
            else:
                print(f"Configuration file not found: {sys.argv[1]}, using defaults")

        app = PoongApp()
        app.run()
    except KeyboardInterrupt:
        print("\nUser interruption")
    except Exception as e:
        print(f"Fatal error: {e}")
        traceback.print_exc()
    finally:
        pygame.quit()


if __name__ == "__main__":
    main()
