from __future__ import annotations
import pygame
from typing import Callable, Optional, Any
from dice_clicker.core.game_object import GameObject
from dice_clicker.core.game_event import GameEvent, GameEventType
from dice_clicker.progression.shop import SHOP_ITEMS, SKILLS
from dice_clicker.ui.settings import (
    BTN_ROLL_COLOR, BTN_MENU_COLOR, BTN_COMBAT_COLOR, BTN_BUY_COLOR, BTN_UPGRADE_COLOR,
    BTN_RESET_COLOR, ROLL_BTN, SHOP_BTN, SKILLS_BTN, COMBAT_BTN, SETTINGS_BTN,
    PANEL_RECT, PANEL_ROW_HEIGHT, PANEL_HEADER_HEIGHT, BORDER_RADIUS_BUTTON,
    SLIDER_TRACK, SLIDER_FILL, SLIDER_KNOB
)

Color = tuple[int,int,int]


class UIButton(GameObject):
    def __init__(self, name: str, rect: pygame.Rect, label: str, base_color: Color,
                 event_type: Optional[GameEventType], payload: Optional[dict] = None,
                 is_enabled_fn: Callable[[Any], bool] = lambda g: True,
                 label_fn: Optional[Callable[[Any], str]] = None,
                 panel: Optional[str] = None):
        super().__init__(name)
        self.sprite = None  # populated by UIButtonSprite
        self.rect = rect
        self.label = label
        self.base_color = base_color
        self.event_type = event_type
        self.payload = payload
        self.is_enabled_fn = is_enabled_fn
        self.label_fn = label_fn
        self.border_radius = BORDER_RADIUS_BUTTON
        # Buttons that live inside a panel are drawn only while their panel is the top one
        self.panel = panel
        if panel is not None:
            self.visible_predicate = lambda g, p=panel: g.panels.is_top(p)

    def current_label(self, game) -> str:
        return self.label_fn(game) if self.label_fn else self.label

    def draw(self, surface: pygame.Surface) -> None:  # sprite handles visual
        return

    def is_interactable(self, game) -> bool:
        if not self.should_draw(game):
            return False
        if self.panel is not None and not game.panels.get(self.panel).shown:
            return False
        return True

    def handle_click(self, game, pos) -> bool:
        if not self.is_interactable(game):
            return False
        if not self.rect.collidepoint(*pos):
            return False
        # Disabled buttons still consume the click so it does not close panels
        if not self.is_enabled_fn(game):
            return True
        if self.event_type:
            game.event_listener.publish(GameEvent(self.event_type, source=self, payload=dict(self.payload or {})))
        return True


class VolumeSlider(GameObject):
    """Horizontal 0..100 slider shown in the settings panel. Display only."""
    def __init__(self, rect: pygame.Rect, value: int = 50, panel: str = 'settings'):
        super().__init__(name="volume")
        self.rect = rect
        self.value = value
        self.panel = panel
        self.dragging = False
        self.visible_predicate = lambda g: g.panels.is_top(panel)

    @property
    def label(self) -> str:
        return f"{self.value}%"

    def set_from_x(self, x: int):
        frac = (x - self.rect.left) / max(1, self.rect.width)
        self.value = max(0, min(100, round(frac * 100)))

    def handle_click(self, game, pos) -> bool:  # type: ignore[override]
        if not self.should_draw(game) or not game.panels.get(self.panel).shown:
            return False
        if self.rect.inflate(0, 16).collidepoint(*pos):
            self.dragging = True
            self.set_from_x(pos[0])
            return True
        return False

    def handle_drag(self, pos):
        if self.dragging:
            self.set_from_x(pos[0])

    def release(self):
        self.dragging = False

    def draw(self, surface: pygame.Surface) -> None:
        track = self.rect.inflate(0, -self.rect.height + 6)
        pygame.draw.rect(surface, SLIDER_TRACK, track, border_radius=3)
        filled = track.copy()
        filled.width = round(track.width * self.value / 100)
        pygame.draw.rect(surface, SLIDER_FILL, filled, border_radius=3)
        pygame.draw.circle(surface, SLIDER_KNOB, (track.left + filled.width, track.centery), 9)


def panel_row_rect(index: int, width: int = 120, height: int = 40) -> pygame.Rect:
    """Right-aligned action button rect for row ``index`` of a panel."""
    top = PANEL_RECT.top + PANEL_HEADER_HEIGHT + index * PANEL_ROW_HEIGHT + (PANEL_ROW_HEIGHT - height) // 2
    return pygame.Rect(PANEL_RECT.right - width - 16, top, width, height)


# Factory to build the always-present buttons
def build_core_buttons(game) -> list[UIButton]:
    def toggle(panel):
        return {"panel": panel}
    roll = UIButton('roll', ROLL_BTN, 'Roll Dice', BTN_ROLL_COLOR, GameEventType.REQUEST_ROLL)
    shop = UIButton('shop', SHOP_BTN, 'Shop', BTN_MENU_COLOR, GameEventType.REQUEST_TOGGLE_PANEL, toggle('shop'))
    skills = UIButton('skills', SKILLS_BTN, 'Skills', BTN_MENU_COLOR, GameEventType.REQUEST_TOGGLE_PANEL, toggle('skills'))
    combat = UIButton('combat', COMBAT_BTN, 'Combat', BTN_COMBAT_COLOR, GameEventType.REQUEST_TOGGLE_PANEL, toggle('combat'))
    # Combat entry appears only after unlock; hidden again on reset
    combat.visible_predicate = lambda g: g.state.combat_unlocked
    settings = UIButton('settings', SETTINGS_BTN, 'Settings', BTN_MENU_COLOR, GameEventType.REQUEST_TOGGLE_PANEL, toggle('settings'))
    return [roll, shop, skills, combat, settings]


def build_panel_buttons(game) -> list[UIButton]:
    buttons: list[UIButton] = []
    for i, item in enumerate(SHOP_ITEMS):
        # Unaffordable clicks still go through so the engine can report "Not enough coins!"
        buttons.append(UIButton(f'buy_{item.id}', panel_row_rect(i), f"Buy {item.cost}", BTN_BUY_COLOR,
                                GameEventType.REQUEST_BUY, {"index": i}, panel='shop'))
    for i, skill in enumerate(SKILLS):
        buttons.append(UIButton(f'upgrade_{skill.id}', panel_row_rect(i), f"Upgrade {skill.cost}", BTN_UPGRADE_COLOR,
                                GameEventType.REQUEST_UPGRADE_SKILL, {"index": i}, panel='skills'))
    buttons.append(UIButton('attack', panel_row_rect(1, width=160), 'Attack', BTN_COMBAT_COLOR,
                            GameEventType.REQUEST_ATTACK, panel='combat'))
    def auto_label(g):
        return "Auto Roll: On" if g.state.auto_roller else "Auto Roll: Off"
    def auto_enabled(g):
        return g.engine.auto_roller_owned
    buttons.append(UIButton('auto_roll', panel_row_rect(1, width=180), 'Auto Roll', BTN_MENU_COLOR,
                            GameEventType.REQUEST_TOGGLE_AUTO_ROLL, None, auto_enabled, auto_label, panel='settings'))
    buttons.append(UIButton('reset', panel_row_rect(2, width=180), 'Reset Game', BTN_RESET_COLOR,
                            GameEventType.REQUEST_RESET, panel='settings'))
    return buttons


def build_volume_slider() -> VolumeSlider:
    row = panel_row_rect(0, width=200, height=20)
    return VolumeSlider(row)
