import pygame
from dice_clicker.ui.sprites.sprite_base import BaseSprite, Layer
from dice_clicker.ui.settings import (
    HUD_BG, HUD_BORDER, TEXT_PRIMARY, TEXT_MUTED, MARGIN, BORDER_RADIUS_HUD
)

class PlayerHUDSprite(BaseSprite):
    """Coins / level / xp counters, re-read from GameState every frame."""
    def __init__(self, game, *groups):
        super().__init__(Layer.UI, None, game, *groups)
        self.sync_from_logical()

    def lines(self) -> list[tuple[str, str]]:
        s = self.game.state
        return [
            ("Coins", str(s.coins)),
            ("Level", str(s.level)),
            ("XP", s.xp_label),
        ]

    def sync_from_logical(self):
        g = self.game
        pad = 10
        gap = 28
        font = g.font
        cells = []
        for label, value in self.lines():
            cells.append((g.small_font.render(label, True, TEXT_MUTED), font.render(value, True, TEXT_PRIMARY)))
        width = sum(max(l.get_width(), v.get_width()) for l, v in cells) + gap * (len(cells) - 1) + pad * 2
        height = max(l.get_height() + v.get_height() for l, v in cells) + pad * 2
        self.image = pygame.Surface((width, height), pygame.SRCALPHA)
        self.rect = self.image.get_rect(topleft=(MARGIN, MARGIN))
        pygame.draw.rect(self.image, HUD_BG, self.image.get_rect(), border_radius=BORDER_RADIUS_HUD)
        pygame.draw.rect(self.image, HUD_BORDER, self.image.get_rect(), width=2, border_radius=BORDER_RADIUS_HUD)
        x = pad
        for label_surf, value_surf in cells:
            self.image.blit(label_surf, (x, pad))
            self.image.blit(value_surf, (x, pad + label_surf.get_height()))
            x += max(label_surf.get_width(), value_surf.get_width()) + gap
