"""
PyGame renderer for Poong game
"""

import pygame

from poong.core.entities import BallSnapshot
from poong.core.entities import GameSnapshot
from poong.core.entities import PaddleSnapshot
from poong.core.entities import RunState
from poong.utils.config import GameConfig
from poong.utils.config import game_config


class PygameRenderer:
    """PyGame-based presentation adapter for Poong"""

    def __init__(self, config: GameConfig | None = None):
        """Initialize the PyGame renderer"""
        self.config = config if config is not None else game_config
        self.width = self.config.FIELD_WIDTH
        self.height = self.config.FIELD_HEIGHT

        # Initialize PyGame
        pygame.init()

        # Create the display
        self.screen = pygame.display.set_mode((self.width, self.height))
        pygame.display.set_caption("Poong")

        # Clock for controlling frame rate
        self.clock = pygame.time.Clock()

        # Colors
        self.background_color: tuple[int, int, int] = self.config.BACKGROUND_COLOR
        self.ball_color: tuple[int, int, int] = self.config.BALL_COLOR
        self.paddle_color: tuple[int, int, int] = self.config.PADDLE_COLOR
        self.text_color: tuple[int, int, int] = (255, 255, 255)
        self.line_color: tuple[int, int, int] = (40, 46, 56)
        self.hud_color: tuple[int, int, int] = (22, 28, 38)

        # Font for text rendering
        self.font_large = pygame.font.Font(None, 74)
        self.font_small = pygame.font.Font(None, 36)

        self.frames_rendered = 0

    def clear_screen(self) -> None:
        """Clear the screen with background color"""
        self.screen.fill(self.background_color)

    def draw_field(self) -> None:
        """Draw the dashed center line and the HUD strip"""
        center_x = self.width // 2
        dash, gap = 12, 8
        for y in range(0, self.height, dash + gap):
            pygame.draw.line(self.screen, self.line_color, (center_x, y), (center_x, y + dash), 4)

        pygame.draw.rect(self.screen, self.hud_color, pygame.Rect(0, self.height - 28, self.width, 28))

    def draw_ball(self, ball: BallSnapshot) -> None:
        """Draw the game ball"""
        pos = (int(ball.x), int(ball.y))
        pygame.draw.circle(self.screen, self.ball_color, pos, int(ball.radius))

    def draw_paddle(self, paddle: PaddleSnapshot) -> None:
        """Draw a paddle"""
        rect = pygame.Rect(int(paddle.x), int(paddle.y), int(paddle.width), int(paddle.height))
        pygame.draw.rect(self.screen, self.paddle_color, rect, border_radius=6)

    def draw_score(self, score: tuple[int, int]) -> None:
        """Draw the current score"""
        score_text = f"{score[0]}  -  {score[1]}"
        text_surface = self.font_large.render(score_text, True, self.text_color)
        text_rect = text_surface.get_rect()
        text_rect.centerx = self.width // 2
        text_rect.top = 20
        self.screen.blit(text_surface, text_rect)

    def draw_overlay(self, title: str, instructions: str) -> None:
        """Draw a dimmed overlay with a title and a hint line"""
        overlay = pygame.Surface((self.width, self.height))
        overlay.set_alpha(128)
        overlay.fill((0, 0, 0))
        self.screen.blit(overlay, (0, 0))

        title_surface = self.font_large.render(title, True, self.text_color)
        title_rect = title_surface.get_rect()
        title_rect.center = (self.width // 2, self.height // 2)
        self.screen.blit(title_surface, title_rect)

        inst_surface = self.font_small.render(instructions, True, self.text_color)
        inst_rect = inst_surface.get_rect()
        inst_rect.center = (self.width // 2, self.height // 2 + 60)
        self.screen.blit(inst_surface, inst_rect)

    def render(self, snapshot: GameSnapshot) -> None:
        """Render the complete game state"""
        self.clear_screen()
        self.draw_field()

        self.draw_paddle(snapshot.player)
        self.draw_paddle(snapshot.opponent)
        self.draw_ball(snapshot.ball)
        self.draw_score(snapshot.score)

        if snapshot.run_state == RunState.IDLE:
            self.draw_overlay("POONG", "Press ENTER to start")
        elif snapshot.run_state == RunState.PAUSED:
            self.draw_overlay("PAUSE", "Press P or SPACE to continue")

        self.frames_rendered += 1

    def present(self) -> None:
        """Present the rendered frame"""
        pygame.display.flip()

    def update(self, fps: int | None = None) -> None:
        """Maintain frame rate"""
        fps = fps or self.config.FPS
        self.clock.tick(fps)

    def cleanup(self) -> None:
        """Clean up renderer resources"""
        pygame.display.quit()
