"""
Human player input for Synth Pong
"""

import pygame

KEY_ACTIONS = {
    pygame.K_ESCAPE: "quit",
    pygame.K_RETURN: "start",
    pygame.K_KP_ENTER: "start",
    pygame.K_s: "start",
    pygame.K_SPACE: "pause",
    pygame.K_p: "pause",
    pygame.K_r: "reset",
    pygame.K_m: "toggle_sfx",
    pygame.K_MINUS: "volume_down",
    pygame.K_KP_MINUS: "volume_down",
    pygame.K_EQUALS: "volume_up",
    pygame.K_PLUS: "volume_up",
    pygame.K_KP_PLUS: "volume_up",
    pygame.K_LEFTBRACKET: "ai_slower",
    pygame.K_RIGHTBRACKET: "ai_faster",
}


def pointer_to_board_y(event: pygame.event.Event, board_height: float) -> float | None:
    """
    Vertical pointer position in board pixels, or None for non-pointer events.

    Finger events carry coordinates normalized to [0, 1].
    """
    if event.type == pygame.MOUSEMOTION:
        return float(event.pos[1])
    if event.type in (pygame.FINGERMOTION, pygame.FINGERDOWN):
        return float(event.y) * board_height
    return None


class InputManager:
    """Maps pygame events to application actions"""

    def __init__(self, key_actions: dict[int, str] | None = None) -> None:
        self.key_actions = key_actions if key_actions is not None else KEY_ACTIONS.copy()

    def handle_event(self, event: pygame.event.Event) -> str | None:
        """
        Handle pygame events

        Returns:
            String indicating the requested action (start, pause, quit, etc.) or None
        """
        if event.type == pygame.QUIT:
            return "quit"
        if event.type == pygame.KEYDOWN:
            return self.key_actions.get(event.key)
        if event.type == pygame.MOUSEBUTTONDOWN:
            return "acknowledge"
        return None
