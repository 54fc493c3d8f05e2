import pygame
from dice_clicker.ui.sprites.sprite_base import BaseSprite, Layer
from dice_clicker.ui.settings import BTN_TEXT

class UIButtonSprite(BaseSprite):
    """Sprite wrapper for a logical UIButton."""
    def __init__(self, button, game, *groups):
        layer = Layer.PANEL + 1 if button.panel else Layer.UI
        super().__init__(layer, button, game, *groups)
        self.button = button
        try:
            setattr(button, 'sprite', self)
        except AttributeError:
            pass
        self.update()

    def sync_from_logical(self):
        btn = self.button
        g = self.game
        if self.image.get_size() != btn.rect.size:
            self.image = pygame.Surface(btn.rect.size, pygame.SRCALPHA)
        self.rect = self.image.get_rect(topleft=btn.rect.topleft)
        self.image.fill((0,0,0,0))
        enabled = btn.is_enabled_fn(g)
        color = btn.base_color if enabled else tuple(int(c * 0.6) for c in btn.base_color)
        pygame.draw.rect(self.image, color, self.image.get_rect(), border_radius=btn.border_radius)
        if enabled:
            pygame.draw.rect(self.image, (240,240,240), self.image.get_rect(), width=2, border_radius=btn.border_radius)
        font = getattr(g, 'small_font', None) or g.font
        text = font.render(btn.current_label(g), True, BTN_TEXT)
        self.image.blit(text, text.get_rect(center=self.image.get_rect().center))
        # Panel buttons fade along with their panel
        if btn.panel is not None:
            self.image.set_alpha(g.panels.alpha(btn.panel))
