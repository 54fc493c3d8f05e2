from __future__ import annotations
from dataclasses import dataclass

import pygame

from dice_clicker.core.game_event import GameEvent, GameEventType
from dice_clicker.core.game_object import GameObject
from dice_clicker.ui.settings import (
    TOAST_COLORS, TOAST_DEFAULT_COLOR, TOAST_DURATION_MS, TOAST_RISE_PX, WIDTH, HEIGHT
)


@dataclass
class FloatingText:
    text: str
    color: tuple[int, int, int]
    age_ms: int = 0

    @property
    def progress(self) -> float:
        return min(1.0, self.age_ms / TOAST_DURATION_MS)

    @property
    def expired(self) -> bool:
        return self.age_ms >= TOAST_DURATION_MS

    def offset_y(self) -> int:
        return -round(TOAST_RISE_PX * self.progress)

    def alpha(self) -> int:
        return round(255 * (1.0 - self.progress))


class ToastManager(GameObject):
    """Collects MESSAGE events as rising, fading floating text."""
    def __init__(self, font: pygame.font.Font | None = None):
        super().__init__(name="ToastManager")
        self.font = font
        self.toasts: list[FloatingText] = []

    def on_event(self, event: GameEvent) -> None:  # type: ignore[override]
        if event.type == GameEventType.MESSAGE:
            text = event.get("text")
            if text:
                color = TOAST_COLORS.get(event.get("tone"), TOAST_DEFAULT_COLOR)
                self.toasts.append(FloatingText(text, color))

    def clear(self):
        self.toasts.clear()

    def update(self, dt_ms: int):
        for t in self.toasts:
            t.age_ms += dt_ms
        self.toasts = [t for t in self.toasts if not t.expired]

    def latest(self) -> str | None:
        return self.toasts[-1].text if self.toasts else None

    def draw(self, surface: pygame.Surface) -> None:
        if not self.font:
            return
        # Stack concurrent toasts upward so they do not overlap
        base_y = int(HEIGHT * 0.4)
        for i, t in enumerate(reversed(self.toasts)):
            shadow = self.font.render(t.text, True, (0, 0, 0))
            text = self.font.render(t.text, True, t.color)
            shadow.set_alpha(t.alpha() // 2)
            text.set_alpha(t.alpha())
            rect = text.get_rect(center=(WIDTH // 2, base_y + t.offset_y() - i * 36))
            surface.blit(shadow, rect.move(2, 2))
            surface.blit(text, rect)
