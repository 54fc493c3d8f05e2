from __future__ import annotations
from dataclasses import dataclass
from enum import Enum, auto
from typing import Any, Optional

class GameEventType(Enum):
    # Roll lifecycle
    DIE_ROLLED = auto()
    COINS_GAINED = auto()
    LEVEL_UP = auto()
    COMBAT_UNLOCKED = auto()
    ANIMATION_STARTED = auto()
    ANIMATION_FINISHED = auto()
    # Spending
    ITEM_PURCHASED = auto()
    SKILL_UPGRADED = auto()
    PURCHASE_DENIED = auto()
    AUTO_ROLLER_ENABLED = auto()
    AUTO_ROLLER_DISABLED = auto()
    # Combat
    ATTACK = auto()
    # Session
    GAME_RESET = auto()
    STATE_CHANGED = auto()
    # UI / intent layer
    REQUEST_ROLL = auto()
    REQUEST_BUY = auto()
    REQUEST_UPGRADE_SKILL = auto()
    REQUEST_ATTACK = auto()
    REQUEST_RESET = auto()
    REQUEST_RESET_CONFIRMED = auto()
    REQUEST_TOGGLE_PANEL = auto()
    REQUEST_TOGGLE_AUTO_ROLL = auto()
    REQUEST_DENIED = auto()
    MESSAGE = auto()
    # Panels
    PANEL_OPENED = auto()
    PANEL_CLOSED = auto()

@dataclass(slots=True)
class GameEvent:
    type: GameEventType
    source: Any | None = None
    payload: Optional[dict[str, Any]] = None

    def get(self, key: str, default: Any = None) -> Any:
        return self.payload.get(key, default) if self.payload else default

    def __repr__(self) -> str:  # Helpful for debugging
        return f"GameEvent(type={self.type}, payload={self.payload})"
