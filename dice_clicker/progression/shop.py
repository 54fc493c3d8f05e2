from __future__ import annotations
from dataclasses import dataclass, field
from typing import Callable, Optional, TYPE_CHECKING

from dice_clicker.progression import balance

if TYPE_CHECKING:
    from dice_clicker.progression.engine import ProgressionEngine


@dataclass(frozen=True)
class ShopItem:
    """An item offered in the shop.

    ``apply`` receives the progression engine once the cost has been deducted.
    """
    id: str
    name: str
    cost: int
    apply: Callable[["ProgressionEngine"], None]
    effect_text: Optional[str] = field(default=None)


@dataclass(frozen=True)
class Skill:
    id: str
    name: str
    cost: int
    description: str = ""


def _better_dice(engine: "ProgressionEngine") -> None:
    engine.state.dice_max += balance.BETTER_DICE_STEP

def _lucky_charm(engine: "ProgressionEngine") -> None:
    # Direct level bump: skips level_up() and its unlock check
    engine.state.level += 1

def _auto_roller(engine: "ProgressionEngine") -> None:
    engine.grant_auto_roller()


SHOP_ITEMS: tuple[ShopItem, ...] = (
    ShopItem('better_dice', 'Better Dice', balance.BETTER_DICE_COST, _better_dice, f"+{balance.BETTER_DICE_STEP} die faces"),
    ShopItem('lucky_charm', 'Lucky Charm', balance.LUCKY_CHARM_COST, _lucky_charm, "+1 level"),
    ShopItem('auto_roller', 'Auto Roller', balance.AUTO_ROLLER_COST, _auto_roller, "Rolls every 2 seconds"),
)


def skill_cost(index: int) -> int:
    return (index + 1) * balance.SKILL_COST_STEP


_SKILL_NAMES = (
    ('steady_hand', 'Steady Hand'),
    ('coin_sense', 'Coin Sense'),
    ('battle_focus', 'Battle Focus'),
)

SKILLS: tuple[Skill, ...] = tuple(
    Skill(sid, name, skill_cost(i)) for i, (sid, name) in enumerate(_SKILL_NAMES)
)
