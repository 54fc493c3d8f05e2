"""Mutable game record shared by the progression engine and the UI."""
from __future__ import annotations
from dataclasses import dataclass, asdict
from typing import Any

from dice_clicker.progression import balance


@dataclass
class GameState:
    """Coins, level and unlock flags for a single play session.

    One instance is owned by Game and handed to ProgressionEngine; nothing else
    mutates it. State lives in memory only and is lost when the window closes.
    """
    coins: int = balance.START_COINS
    level: int = balance.START_LEVEL
    xp: int = balance.START_XP
    xp_to_next: int = balance.START_XP_TO_NEXT
    combat_unlocked: bool = False
    dice_max: int = balance.START_DICE_MAX
    auto_roller: bool = False

    def reset(self) -> None:
        """Restore every field to its default value in place."""
        defaults = GameState()
        for key, value in asdict(defaults).items():
            setattr(self, key, value)

    def snapshot(self) -> dict[str, Any]:
        return asdict(self)

    @property
    def xp_label(self) -> str:
        return f"{self.xp}/{self.xp_to_next}"

    def can_afford(self, cost: int) -> bool:
        return self.coins >= cost
