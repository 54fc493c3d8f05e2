import pygame
from enum import IntEnum

class Layer(IntEnum):
    BACKGROUND = 0
    CANVAS = 50
    UI = 200
    PANEL = 300
    MODAL = 400
    TOAST = 450

class BaseSprite(pygame.sprite.Sprite):
    """Minimal sprite base with layer + reference to its logical object.

    Rendering placement (image/rect) stays separate from the logical object
    (button, HUD). Visibility follows the logical object's visible_predicate.
    """
    def __init__(self, layer: int, logical=None, game=None, *groups):
        super().__init__(*groups)
        self._layer = layer  # honored by LayeredUpdates
        self.logical = logical
        self.game = game
        self.image = pygame.Surface((1,1), pygame.SRCALPHA)
        self.rect = self.image.get_rect()

    def sync_from_logical(self):  # to be overridden by subclasses
        pass

    def hide(self):
        if self.image.get_width() != 1 or self.image.get_height() != 1:
            self.image = pygame.Surface((1,1), pygame.SRCALPHA)
        else:
            self.image.fill((0,0,0,0))
        self.rect = self.image.get_rect(topleft=(-1000,-1000))

    def update(self, *args, **kwargs):  # pygame calls each frame via group.update()
        logical = self.logical
        if logical is not None and self.game is not None and hasattr(logical, 'should_draw'):
            if not logical.should_draw(self.game):
                self.hide()
                return
        self.sync_from_logical()

__all__ = ["Layer", "BaseSprite"]
