import pygame
from dice_clicker.game import Game


class GameScreen:
    """Screen wrapper around the core `Game` object.

    The only screen; closing the window ends the App loop.
    """
    def __init__(self, game: Game):
        self.game = game

    def handle_event(self, event: pygame.event.Event) -> None:
        self.game.handle_event(event)

    def update(self, dt_ms: int) -> None:
        self.game.update(dt_ms)

    def draw(self, surface: pygame.Surface) -> None:
        self.game.draw()
