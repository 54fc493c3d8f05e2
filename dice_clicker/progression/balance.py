"""Game balance numbers.

Kept in one place so tuning never requires touching engine code.
"""

# Starting record
START_COINS = 0
START_LEVEL = 1
START_XP = 0
START_XP_TO_NEXT = 100
START_DICE_MAX = 6

# Levelling
XP_GROWTH = 1.5
COMBAT_UNLOCK_LEVEL = 3

# Shop
BETTER_DICE_COST = 100
BETTER_DICE_STEP = 2
LUCKY_CHARM_COST = 250
AUTO_ROLLER_COST = 500
AUTO_ROLL_INTERVAL_MS = 2000

# Skills: cost = (index + 1) * SKILL_COST_STEP
SKILL_COST_STEP = 50

# Combat
ATTACK_MIN_DAMAGE = 10
ATTACK_MAX_DAMAGE = 29
