from __future__ import annotations
from abc import ABC, abstractmethod
import pygame
from dice_clicker.core.game_event import GameEvent

class GameObject(ABC):
    _id_seq = 0

    def __init__(self, name: str):
        GameObject._id_seq += 1
        self.id: int = GameObject._id_seq
        self.name = name
        # Optional predicate for dynamic gating (lambda game: bool); None -> always visible
        self.visible_predicate = None  # type: ignore[attr-defined]
        self.active: bool = True
        # (callback, events_or_None) registered through activate(); removed on deactivate
        self._subscriptions: list[tuple] = []  # type: ignore[attr-defined]

    @abstractmethod
    def draw(self, surface: pygame.Surface) -> None:
        """Draw object on given surface. Objects not needing drawing can no-op."""
        raise NotImplementedError

    def on_event(self, event: GameEvent) -> None:  # default no-op
        pass

    def on_activate(self, game) -> None:  # default no-op
        pass

    def on_deactivate(self, game) -> None:  # default no-op
        pass

    def activate(self, game, *, events=None) -> None:
        """Subscribe self.on_event (optionally filtered to 'events') and mark active."""
        if self.active and self._subscriptions:
            return
        self.active = True
        game.event_listener.subscribe(self.on_event, events)
        self._subscriptions.append((self.on_event, events))
        self.on_activate(game)

    def deactivate(self, game) -> None:
        """Deactivate this object, unsubscribing callbacks registered via activate()."""
        if not self.active:
            return
        self.active = False
        for cb, _events in list(self._subscriptions):
            game.event_listener.unsubscribe(cb)
        self._subscriptions.clear()
        self.on_deactivate(game)

    # Click handling (return True if consumed)
    def handle_click(self, game, pos) -> bool:  # type: ignore[override]
        return False

    def should_draw(self, game) -> bool:
        if self.visible_predicate and not self.visible_predicate(game):
            return False
        return True
