import logging
import os
import pygame
from typing import Dict, Optional
from .base_screen import Screen
from .game_screen import GameScreen
from dice_clicker.game import Game
from dice_clicker.ui.settings import WIDTH, HEIGHT, FPS, FONT_SIZE_HUD

logger = logging.getLogger(__name__)

LOG_LEVEL_ENV = "DICE_CLICKER_LOG_LEVEL"


class App:
    """High-level application controller managing screens.

    Screens:
      - 'game': the dice clicker itself
    """
    def __init__(self, screen: pygame.Surface, font: pygame.font.Font, clock: pygame.time.Clock, *, rng_seed: Optional[int] = None):
        self.screen = screen
        self.font = font
        self.clock = clock
        self.game = Game(screen, font, clock, rng_seed=rng_seed)
        self.current_name = 'game'
        self.screens: Dict[str, Screen] = {'game': GameScreen(self.game)}

    def run(self):
        clock = self.clock
        running = True
        logger.info("Starting main loop at %d FPS", FPS)
        while running:
            dt_ms = clock.tick(FPS)
            active = self.screens[self.current_name]
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False; break
                active.handle_event(event)
            active.update(dt_ms)
            active.draw(self.screen)
            pygame.display.flip()
        logger.info("Main loop finished")
        pygame.quit()


def configure_logging():
    level_name = os.environ.get(LOG_LEVEL_ENV, "INFO").upper()
    logging.basicConfig(
        level=getattr(logging, level_name, logging.INFO),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )


def main():
    configure_logging()
    pygame.init()
    screen = pygame.display.set_mode((WIDTH, HEIGHT))
    pygame.display.set_caption("Dice Clicker")
    font = pygame.font.SysFont("Arial", FONT_SIZE_HUD)
    clock = pygame.time.Clock()
    App(screen, font, clock).run()
