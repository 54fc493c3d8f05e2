from __future__ import annotations
from typing import Optional

import pygame

from dice_clicker.core.game_event import GameEvent, GameEventType
from dice_clicker.core.game_object import GameObject
from dice_clicker.ui.settings import (
    CONFIRM_RECT, PANEL_BG, PANEL_BORDER, MODAL_DIM, TEXT_PRIMARY, BTN_TEXT,
    BTN_CONFIRM_COLOR, BTN_RESET_COLOR, BORDER_RADIUS_PANEL, BORDER_RADIUS_BUTTON
)


class ConfirmDialog(GameObject):
    """Modal yes/no prompt. While open it swallows every click and key press.

    Confirming publishes ``confirm_event``; declining just closes the dialog.
    """
    def __init__(self):
        super().__init__(name="ConfirmDialog")
        self.prompt: str = ""
        self.confirm_event: Optional[GameEventType] = None
        self.is_open = False
        self.rect = CONFIRM_RECT
        btn_w, btn_h = 120, 44
        y = self.rect.bottom - btn_h - 20
        self.yes_rect = pygame.Rect(self.rect.centerx - btn_w - 10, y, btn_w, btn_h)
        self.no_rect = pygame.Rect(self.rect.centerx + 10, y, btn_w, btn_h)

    def open(self, prompt: str, confirm_event: GameEventType):
        self.prompt = prompt
        self.confirm_event = confirm_event
        self.is_open = True

    def close(self):
        self.is_open = False
        self.confirm_event = None

    def answer(self, game, yes: bool):
        event_type = self.confirm_event
        self.close()
        if yes and event_type is not None:
            game.event_listener.publish(GameEvent(event_type, source=self))

    def handle_click(self, game, pos) -> bool:  # type: ignore[override]
        if not self.is_open:
            return False
        if self.yes_rect.collidepoint(*pos):
            self.answer(game, True)
        elif self.no_rect.collidepoint(*pos):
            self.answer(game, False)
        return True

    def handle_key(self, game, key) -> bool:
        if not self.is_open:
            return False
        if key in (pygame.K_RETURN, pygame.K_y):
            self.answer(game, True)
        elif key in (pygame.K_ESCAPE, pygame.K_n):
            self.answer(game, False)
        return True

    def draw(self, surface: pygame.Surface, font: pygame.font.Font | None = None) -> None:  # type: ignore[override]
        if not self.is_open or font is None:
            return
        dim = pygame.Surface(surface.get_size(), pygame.SRCALPHA)
        dim.fill(MODAL_DIM)
        surface.blit(dim, (0, 0))
        pygame.draw.rect(surface, PANEL_BG, self.rect, border_radius=BORDER_RADIUS_PANEL)
        pygame.draw.rect(surface, PANEL_BORDER, self.rect, width=2, border_radius=BORDER_RADIUS_PANEL)
        y = self.rect.top + 20
        for line in _wrap(self.prompt, font, self.rect.width - 40):
            surf = font.render(line, True, TEXT_PRIMARY)
            surface.blit(surf, surf.get_rect(midtop=(self.rect.centerx, y)))
            y += surf.get_height() + 4
        for rect, label, color in ((self.yes_rect, "Yes", BTN_CONFIRM_COLOR), (self.no_rect, "No", BTN_RESET_COLOR)):
            pygame.draw.rect(surface, color, rect, border_radius=BORDER_RADIUS_BUTTON)
            text = font.render(label, True, BTN_TEXT)
            surface.blit(text, text.get_rect(center=rect.center))


def _wrap(text: str, font: pygame.font.Font, width: int) -> list[str]:
    lines: list[str] = []
    current = ""
    for word in text.split():
        trial = f"{current} {word}".strip()
        if current and font.size(trial)[0] > width:
            lines.append(current)
            current = word
        else:
            current = trial
    if current:
        lines.append(current)
    return lines
