"""Progression rules: rolling, levelling, spending.

All mutations of GameState go through ProgressionEngine. Each operation publishes
domain events plus a MESSAGE event carrying the toast text; insufficient funds is
reported through a PurchaseResult, never an exception.
"""
from __future__ import annotations
import logging
import math
from dataclasses import dataclass
from typing import Callable, Optional

from dice_clicker.core.game_event import GameEvent, GameEventType
from dice_clicker.core.game_state import GameState
from dice_clicker.core.scheduler import Scheduler, TaskHandle
from dice_clicker.progression import balance
from dice_clicker.progression.shop import SHOP_ITEMS, SKILLS, ShopItem, skill_cost

logger = logging.getLogger(__name__)

NOT_ENOUGH_COINS = "Not enough coins!"


@dataclass(frozen=True)
class RollOutcome:
    face: int
    coins_earned: int
    leveled_up: bool = False
    level: int = 1


@dataclass(frozen=True)
class PurchaseResult:
    ok: bool
    name: str
    cost: int
    reason: Optional[str] = None

    def __bool__(self) -> bool:
        return self.ok


class ProgressionEngine:
    def __init__(self, state: GameState, rng, event_listener, scheduler: Scheduler):
        self.state = state
        self.rng = rng
        self.event_listener = event_listener
        self.scheduler = scheduler
        # Invoked by the auto-roll timer; Game points this at its own roll() so the
        # animation plays for automatic rolls too.
        self.on_auto_roll: Callable[[], object] = self.roll_die
        self._auto_roll_task: TaskHandle | None = None
        self.auto_roller_owned = False

    # ------------------------------------------------------------------
    # Rolling & levelling
    # ------------------------------------------------------------------
    def roll_die(self) -> RollOutcome:
        s = self.state
        face = self.rng.randint(1, s.dice_max)
        coins_earned = face * s.level
        s.coins += coins_earned
        s.xp += face
        leveled = False
        # At most one level-up per roll, even if xp overflows several thresholds
        if s.xp >= s.xp_to_next:
            self.level_up()
            leveled = True
        logger.debug("Rolled %d (d%d): +%d coins, xp %s", face, s.dice_max, coins_earned, s.xp_label)
        self._publish(GameEventType.DIE_ROLLED, {"face": face, "dice_max": s.dice_max})
        self._publish(GameEventType.COINS_GAINED, {"amount": coins_earned, "total": s.coins})
        self._message(f"+{coins_earned} coins", "coins")
        return RollOutcome(face, coins_earned, leveled, s.level)

    def level_up(self) -> None:
        s = self.state
        s.level += 1
        s.xp = max(0, s.xp - s.xp_to_next)
        s.xp_to_next = math.floor(s.xp_to_next * balance.XP_GROWTH)
        logger.info("Level up: level %d, xp %s", s.level, s.xp_label)
        # Exact match: levels gained through the shop never pass through here
        if s.level == balance.COMBAT_UNLOCK_LEVEL:
            self.unlock_combat()
        self._publish(GameEventType.LEVEL_UP, {"level": s.level, "xp_to_next": s.xp_to_next})
        self._message(f"Level Up! Level {s.level}", "level")

    def unlock_combat(self) -> None:
        if self.state.combat_unlocked:
            return
        self.state.combat_unlocked = True
        logger.info("Combat unlocked at level %d", self.state.level)
        self._publish(GameEventType.COMBAT_UNLOCKED, {"level": self.state.level})

    def sync_unlocks(self) -> None:
        """Start-up check for a record that already sits at or beyond the unlock level."""
        if self.state.level >= balance.COMBAT_UNLOCK_LEVEL:
            self.unlock_combat()

    # ------------------------------------------------------------------
    # Spending
    # ------------------------------------------------------------------
    def buy_shop_item(self, index: int) -> PurchaseResult:
        item = self._shop_item(index)
        if not self.state.can_afford(item.cost):
            return self._deny(item.name, item.cost, kind="shop")
        self.state.coins -= item.cost
        item.apply(self)
        logger.info("Bought %s for %d coins", item.name, item.cost)
        self._publish(GameEventType.ITEM_PURCHASED, {"item": item.id, "index": index, "cost": item.cost})
        self._message(f"Bought {item.name}!", "coins")
        return PurchaseResult(True, item.name, item.cost)

    def upgrade_skill(self, index: int) -> PurchaseResult:
        if not 0 <= index < len(SKILLS):
            raise ValueError(f"unknown skill index {index}")
        skill = SKILLS[index]
        cost = skill_cost(index)
        if not self.state.can_afford(cost):
            return self._deny(skill.name, cost, kind="skill")
        self.state.coins -= cost
        logger.info("Upgraded skill %s for %d coins", skill.name, cost)
        self._publish(GameEventType.SKILL_UPGRADED, {"skill": skill.id, "index": index, "cost": cost})
        self._message("Skill upgraded!", "skill")
        return PurchaseResult(True, skill.name, cost)

    def attack(self) -> int:
        damage = self.rng.randint(balance.ATTACK_MIN_DAMAGE, balance.ATTACK_MAX_DAMAGE)
        self._publish(GameEventType.ATTACK, {"damage": damage})
        self._message(f"Dealt {damage} damage!", "error")
        return damage

    # ------------------------------------------------------------------
    # Auto roller
    # ------------------------------------------------------------------
    def grant_auto_roller(self) -> None:
        """Shop effect: remember ownership and start rolling. Idempotent."""
        self.auto_roller_owned = True
        self.enable_auto_roller()

    def toggle_auto_roller(self) -> bool:
        """Switch an owned auto roller on or off; returns the new flag."""
        if not self.auto_roller_owned:
            return False
        if self.state.auto_roller:
            self.disable_auto_roller()
        else:
            self.enable_auto_roller()
        return self.state.auto_roller

    def enable_auto_roller(self) -> None:
        task = self._auto_roll_task
        if self.state.auto_roller and task is not None and task.active:
            return
        if task is not None:
            task.cancel()
        self.state.auto_roller = True
        self._auto_roll_task = self.scheduler.call_every(
            balance.AUTO_ROLL_INTERVAL_MS, self._auto_roll_tick, name="auto_roll")
        self._auto_roll_task.on_drop = self._auto_roll_dropped
        logger.info("Auto roller enabled (every %d ms)", balance.AUTO_ROLL_INTERVAL_MS)
        self._publish(GameEventType.AUTO_ROLLER_ENABLED, {"interval_ms": balance.AUTO_ROLL_INTERVAL_MS})

    def disable_auto_roller(self) -> None:
        was_enabled = self.state.auto_roller
        self.state.auto_roller = False
        if self._auto_roll_task is not None:
            self._auto_roll_task.cancel()
            self._auto_roll_task = None
        if was_enabled:
            logger.info("Auto roller disabled")
            self._publish(GameEventType.AUTO_ROLLER_DISABLED)

    @property
    def auto_roll_task(self) -> TaskHandle | None:
        return self._auto_roll_task

    def _auto_roll_tick(self) -> None:
        if self.state.auto_roller:
            self.on_auto_roll()

    def _auto_roll_dropped(self, handle: TaskHandle) -> None:
        if handle is not self._auto_roll_task:
            return
        self._auto_roll_task = None
        self.state.auto_roller = False
        logger.warning("Auto roller stopped after a failed roll")
        self._publish(GameEventType.AUTO_ROLLER_DISABLED, {"reason": "error"})
        self._message("Auto roller stopped.", "error")

    # ------------------------------------------------------------------
    # Session
    # ------------------------------------------------------------------
    def reset(self) -> None:
        if self._auto_roll_task is not None:
            self._auto_roll_task.cancel()
            self._auto_roll_task = None
        self.auto_roller_owned = False
        self.state.reset()
        logger.info("Game reset to defaults")
        self._publish(GameEventType.GAME_RESET)
        self._message("Game Reset!", "error")

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------
    def _shop_item(self, index: int) -> ShopItem:
        if not 0 <= index < len(SHOP_ITEMS):
            raise ValueError(f"unknown shop item index {index}")
        return SHOP_ITEMS[index]

    def _deny(self, name: str, cost: int, kind: str) -> PurchaseResult:
        logger.warning("Cannot afford %s (%d coins, have %d)", name, cost, self.state.coins)
        self._publish(GameEventType.PURCHASE_DENIED, {"name": name, "cost": cost, "coins": self.state.coins, "kind": kind})
        self._message(NOT_ENOUGH_COINS, "error")
        return PurchaseResult(False, name, cost, NOT_ENOUGH_COINS)

    def _publish(self, etype: GameEventType, payload=None):
        self.event_listener.publish(GameEvent(etype, source=self, payload=payload or {}))

    def _message(self, text: str, tone: str):
        self._publish(GameEventType.MESSAGE, {"text": text, "tone": tone})
