"""
PyGame renderer for Synth Pong game
"""

import pygame

from synth_pong.core.entities import Ball
from synth_pong.core.entities import GameState
from synth_pong.core.entities import Paddle
from synth_pong.utils.config import game_config

NET_SEGMENT = 12
NET_WIDTH = 4


class PygameRenderer:
    """PyGame-based renderer for Synth Pong"""

    def __init__(
        self,
        width: int | None = None,
        height: int | None = None,
        surface: pygame.Surface | None = None,
    ):
        """
        Initialize the renderer.

        Args:
            width: Board width, defaults to the configured field width
            height: Board height, defaults to the configured field height
            surface: Draw onto this surface instead of opening a window
        """
        self.width = width or game_config.FIELD_WIDTH
        self.height = height or game_config.FIELD_HEIGHT

        # Video and fonts only, the audio backend opens the mixer itself
        pygame.font.init()
        if surface is None:
            pygame.display.init()
            self.screen = pygame.display.set_mode((self.width, self.height))
            pygame.display.set_caption("Synth Pong")
        else:
            self.screen = surface

        # Clock for controlling frame rate
        self.clock = pygame.time.Clock()

        self.background_color = game_config.BACKGROUND_COLOR
        self.net_color = game_config.NET_COLOR
        self.ball_color = game_config.BALL_COLOR
        self.text_color = game_config.TEXT_COLOR

        self.font_large = pygame.font.Font(None, 64)
        self.font_medium = pygame.font.Font(None, 40)
        self.font_small = pygame.font.Font(None, 24)

    def clear_screen(self) -> None:
        self.screen.fill(self.background_color)

    def draw_net(self) -> None:
        """Draw the dashed center net"""
        x = self.width // 2 - NET_WIDTH // 2
        for y in range(10, self.height, NET_SEGMENT * 2):
            pygame.draw.rect(self.screen, self.net_color, (x, y, NET_WIDTH, NET_SEGMENT))

    def draw_paddle(self, paddle: Paddle) -> None:
        rect = pygame.Rect(
            int(paddle.position.x), int(paddle.position.y), int(paddle.width), int(paddle.height)
        )
        pygame.draw.rect(self.screen, paddle.color, rect)

    def draw_ball(self, ball: Ball) -> None:
        center = ball.center
        pos = (int(center.x), int(center.y))
        pygame.draw.circle(self.screen, self.ball_color, pos, int(ball.size / 2))

    def draw_score(self, score: tuple[int, int]) -> None:
        """Draw each player's score above their half of the board"""
        for value, center_x in ((score[0], self.width // 4), (score[1], self.width * 3 // 4)):
            text_surface = self.font_large.render(str(value), True, self.text_color)
            text_rect = text_surface.get_rect()
            text_rect.centerx = center_x
            text_rect.top = 16
            self.screen.blit(text_surface, text_rect)

    def draw_status(self, status: dict[str, str]) -> None:
        """Draw a one-line status bar at the bottom of the board"""
        line = "   ".join(f"{key}: {value}" for key, value in status.items())
        text_surface = self.font_small.render(line, True, self.text_color)
        text_rect = text_surface.get_rect()
        text_rect.centerx = self.width // 2
        text_rect.bottom = self.height - 8
        self.screen.blit(text_surface, text_rect)

    def draw_pause_hint(self) -> None:
        text_surface = self.font_medium.render(
            "ENTER to start, SPACE to pause", True, self.text_color
        )
        text_rect = text_surface.get_rect()
        text_rect.center = (self.width // 2, self.height // 2 + 60)
        self.screen.blit(text_surface, text_rect)

    def draw_end_message(self, message: str) -> None:
        """Draw the end-of-game message over the board"""
        overlay = pygame.Surface((self.width, self.height))
        overlay.set_alpha(180)
        overlay.fill((0, 0, 0))
        self.screen.blit(overlay, (0, 0))

        message_surface = self.font_large.render(message, True, self.text_color)
        message_rect = message_surface.get_rect()
        message_rect.center = (self.width // 2, self.height // 2 - 20)
        self.screen.blit(message_surface, message_rect)

        hint_surface = self.font_small.render("Click or press ENTER", True, self.text_color)
        hint_rect = hint_surface.get_rect()
        hint_rect.center = (self.width // 2, self.height // 2 + 30)
        self.screen.blit(hint_surface, hint_rect)

    def render_frame(self, state: GameState, status: dict[str, str] | None = None) -> None:
        """Render the complete game state, paused or not"""
        self.clear_screen()
        self.draw_net()
        self.draw_paddle(state.left_paddle)
        self.draw_paddle(state.right_paddle)
        self.draw_ball(state.ball)
        self.draw_score(state.score.to_tuple())

        if status:
            self.draw_status(status)

        if state.end_message:
            self.draw_end_message(state.end_message)
        elif not state.running:
            self.draw_pause_hint()

    def present(self) -> None:
        """Present the rendered frame"""
        pygame.display.flip()

    def update(self, fps: int | None = None) -> None:
        """Wait for the next frame"""
        self.clock.tick(fps or game_config.FPS)

    def cleanup(self) -> None:
        pygame.quit()
