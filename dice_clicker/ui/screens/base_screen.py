import pygame
from typing import Protocol


class Screen(Protocol):
    """What App needs from a screen: input, a millisecond tick, and drawing."""
    def handle_event(self, event: pygame.event.Event) -> None: ...
    def update(self, dt_ms: int) -> None: ...
    def draw(self, surface: pygame.Surface) -> None: ...
