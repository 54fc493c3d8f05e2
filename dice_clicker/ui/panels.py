from __future__ import annotations
from enum import Enum, auto
from typing import Callable, Iterable, Optional

from dice_clicker.ui.settings import PANEL_FADE_MS

PANEL_NAMES = ('shop', 'skills', 'combat', 'settings')


class PanelPhase(Enum):
    HIDDEN = auto()
    OPENING = auto()   # fading in
    OPEN = auto()
    CLOSING = auto()   # fading out, still drawn


PanelChangeCallback = Callable[[str, PanelPhase, PanelPhase], None]


class Panel:
    def __init__(self, name: str, fade_ms: int = PANEL_FADE_MS):
        self.name = name
        self.fade_ms = fade_ms
        self.phase = PanelPhase.HIDDEN
        self.elapsed_ms = 0

    @property
    def visible(self) -> bool:
        return self.phase is not PanelPhase.HIDDEN

    @property
    def shown(self) -> bool:
        """True while open or opening (what a toggle considers 'visible')."""
        return self.phase in (PanelPhase.OPENING, PanelPhase.OPEN)

    def alpha(self) -> int:
        if self.phase is PanelPhase.HIDDEN:
            return 0
        if self.phase is PanelPhase.OPEN:
            return 255
        t = min(1.0, self.elapsed_ms / self.fade_ms) if self.fade_ms else 1.0
        return round(255 * (t if self.phase is PanelPhase.OPENING else 1.0 - t))


class PanelManager:
    """Open/close bookkeeping for the side panels.

    Opening fades a panel in over PANEL_FADE_MS; closing fades it out and hides it
    once the fade completes. Panels are independent: opening one leaves others as
    they are, and the newly opened panel is stacked on top. The optional callback fires as (name, old_phase, new_phase).
    """
    def __init__(self, names: Iterable[str] = PANEL_NAMES, on_change: Optional[PanelChangeCallback] = None):
        self.panels: dict[str, Panel] = {n: Panel(n) for n in names}
        # Stacking order, bottom to top; the most recently opened panel is drawn last
        self._order: list[str] = list(self.panels)
        self._on_change = on_change

    def _set(self, panel: Panel, phase: PanelPhase):
        if phase is panel.phase:
            return
        old = panel.phase
        panel.phase = phase
        panel.elapsed_ms = 0
        if self._on_change:
            self._on_change(panel.name, old, phase)

    def get(self, name: str) -> Panel:
        try:
            return self.panels[name]
        except KeyError:
            raise ValueError(f"unknown panel {name!r}") from None

    def is_visible(self, name: str) -> bool:
        return self.get(name).visible

    def alpha(self, name: str) -> int:
        return self.get(name).alpha()

    def open(self, name: str):
        panel = self.get(name)
        if not panel.shown:
            self._order.remove(name)
            self._order.append(name)
            self._set(panel, PanelPhase.OPENING)

    def close(self, name: str):
        panel = self.get(name)
        if panel.shown:
            self._set(panel, PanelPhase.CLOSING)

    def toggle(self, name: str):
        if self.get(name).shown:
            self.close(name)
        else:
            self.open(name)

    def close_all(self):
        for name in self.panels:
            self.close(name)

    def hide_all(self):
        """Hide immediately, skipping the fade."""
        for panel in self.panels.values():
            self._set(panel, PanelPhase.HIDDEN)

    def visible_panels(self) -> list[str]:
        return [n for n in self._order if self.panels[n].visible]

    def top(self) -> Optional[str]:
        """Name of the panel drawn above all others, or None when none is visible."""
        visible = self.visible_panels()
        return visible[-1] if visible else None

    def is_top(self, name: str) -> bool:
        return self.top() == name

    def update(self, dt_ms: int):
        for panel in self.panels.values():
            if panel.phase in (PanelPhase.OPENING, PanelPhase.CLOSING):
                panel.elapsed_ms += dt_ms
                if panel.elapsed_ms >= panel.fade_ms:
                    self._set(panel, PanelPhase.OPEN if panel.phase is PanelPhase.OPENING else PanelPhase.HIDDEN)
