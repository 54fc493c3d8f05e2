import pygame
from dice_clicker.progression.shop import SHOP_ITEMS, SKILLS
from dice_clicker.progression import balance
from dice_clicker.ui.settings import (
    BG_COLOR, CANVAS_POS, PANEL_RECT, PANEL_BG, PANEL_BORDER, PANEL_ROW_HEIGHT,
    PANEL_HEADER_HEIGHT, TEXT_PRIMARY, TEXT_MUTED, BORDER_RADIUS_PANEL, WIDTH
)

PANEL_TITLES = {
    'shop': "Shop",
    'skills': "Skills",
    'combat': "Combat",
    'settings': "Settings",
}


class GameRenderer:
    def __init__(self, game):
        self.game = game
        # LayeredUpdates respects each sprite._layer
        self.layered = pygame.sprite.LayeredUpdates()
        self.canvas_rect = game.dice_renderer.surface.get_rect(topleft=CANVAS_POS)

    def handle_click(self, game, pos) -> bool:
        """Route a left click: modal first, then panel widgets, then main buttons.

        A click that lands on no panel and no button closes every open panel.
        """
        g = game
        if g.confirm_dialog.handle_click(g, pos):
            return True
        if g.volume_slider.handle_click(g, pos):
            return True
        for btn in g.panel_buttons:
            if btn.handle_click(g, pos):
                return True
        for btn in g.ui_buttons:
            if btn.handle_click(g, pos):
                return True
        if any(g.panels.get(n).shown for n in g.panels.panels) and PANEL_RECT.collidepoint(*pos):
            return True
        g.panels.close_all()
        return False

    def draw(self):
        g = self.game
        screen = g.screen
        screen.fill(BG_COLOR)
        title = g.font.render("Dice Clicker", True, TEXT_PRIMARY)
        screen.blit(title, title.get_rect(midtop=(WIDTH // 2, 24)))
        screen.blit(g.dice_renderer.surface, self.canvas_rect)
        for name in g.panels.visible_panels():
            self._draw_panel(screen, name)
        self.layered.update()
        self.layered.draw(screen)
        if g.volume_slider.should_draw(g):
            g.volume_slider.draw(screen)
        g.toasts.draw(screen)
        g.confirm_dialog.draw(screen, g.font)

    def _draw_panel(self, screen: pygame.Surface, name: str):
        g = self.game
        surf = pygame.Surface(PANEL_RECT.size, pygame.SRCALPHA)
        local = surf.get_rect()
        pygame.draw.rect(surf, PANEL_BG, local, border_radius=BORDER_RADIUS_PANEL)
        pygame.draw.rect(surf, PANEL_BORDER, local, width=2, border_radius=BORDER_RADIUS_PANEL)
        heading = g.font.render(PANEL_TITLES.get(name, name.title()), True, TEXT_PRIMARY)
        surf.blit(heading, (16, (PANEL_HEADER_HEIGHT - heading.get_height()) // 2))
        for i, (text, sub) in enumerate(self._panel_rows(name)):
            y = PANEL_HEADER_HEIGHT + i * PANEL_ROW_HEIGHT + 10
            surf.blit(g.small_font.render(text, True, TEXT_PRIMARY), (16, y))
            if sub:
                surf.blit(g.small_font.render(sub, True, TEXT_MUTED), (16, y + 22))
        surf.set_alpha(g.panels.alpha(name))
        screen.blit(surf, PANEL_RECT)

    def _panel_rows(self, name: str) -> list[tuple[str, str]]:
        g = self.game
        if name == 'shop':
            return [(f"{item.name} ({item.cost} coins)", item.effect_text or "") for item in SHOP_ITEMS]
        if name == 'skills':
            return [(skill.name, f"Cost {skill.cost} coins") for skill in SKILLS]
        if name == 'combat':
            return [("Training Dummy", f"Attacks deal {balance.ATTACK_MIN_DAMAGE}-{balance.ATTACK_MAX_DAMAGE} damage"),
                    ("", "")]
        if name == 'settings':
            auto = "Purchase in the shop" if not g.engine.auto_roller_owned else "Rolls every 2 seconds"
            return [(f"Volume {g.volume_slider.label}", ""),
                    ("Auto Roller", auto),
                    ("Reset progress", "This cannot be undone")]
        return []
