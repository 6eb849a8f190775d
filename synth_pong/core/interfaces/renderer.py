"""
Renderer protocol - defines interface for different rendering backends
"""

from typing import Protocol

from synth_pong.core.entities import GameState


class RendererProtocol(Protocol):
    """
    Protocol for renderer implementations.

    Rendering is a pure read of the game state and runs every frame,
    paused or not.
    """

    def render_frame(self, state: GameState, status: dict[str, str] | None = None) -> None:
        """
        Render a single frame of the game.

        Args:
            state: Current game state
            status: Optional extra labels to display (sound, AI speed, etc.)
        """
        ...

    def present(self) -> None:
        """Show the rendered frame"""
        ...

    def update(self, fps: int | None = None) -> None:
        """Wait until the next frame is due"""
        ...

    def cleanup(self) -> None:
        """Clean up renderer resources"""
        ...
