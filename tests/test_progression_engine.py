import unittest
from dice_clicker.core.game_event import GameEventType
from dice_clicker.core.game_state import GameState
from dice_clicker.core.random_source import RandomSource
from dice_clicker.core.event_listener import EventListener
from dice_clicker.core.scheduler import Scheduler
from dice_clicker.progression.engine import ProgressionEngine
from tests.test_utils import make_engine


class RollTests(unittest.TestCase):
    def test_first_roll_of_four_at_level_one(self):
        engine, _ = make_engine(rolls=[4])
        outcome = engine.roll_die()
        s = engine.state
        self.assertEqual(outcome.face, 4)
        self.assertEqual(outcome.coins_earned, 4)
        self.assertFalse(outcome.leveled_up)
        self.assertEqual((s.coins, s.xp, s.level), (4, 4, 1))

    def test_coins_scale_with_level(self):
        engine, _ = make_engine(rolls=[5], state=GameState(level=4, xp_to_next=500))
        outcome = engine.roll_die()
        self.assertEqual(outcome.coins_earned, 20)
        self.assertEqual(engine.state.coins, 20)
        self.assertEqual(engine.state.xp, 5)

    def test_faces_stay_within_die_and_coins_match(self):
        state = GameState(dice_max=8)
        engine = ProgressionEngine(state, RandomSource(seed=7), EventListener(), Scheduler())
        seen = set()
        for _ in range(400):
            before = state.coins
            level = state.level
            outcome = engine.roll_die()
            self.assertTrue(1 <= outcome.face <= 8)
            self.assertEqual(outcome.coins_earned, outcome.face * level)
            self.assertEqual(state.coins - before, outcome.coins_earned)
            seen.add(outcome.face)
        self.assertEqual(seen, set(range(1, 9)))

    def test_roll_publishes_die_rolled_and_coin_message(self):
        engine, collector = make_engine(rolls=[3])
        engine.roll_die()
        types = collector.types()
        self.assertIn(GameEventType.DIE_ROLLED, types)
        self.assertIn(GameEventType.COINS_GAINED, types)
        self.assertIn("+3 coins", collector.messages())


class LevelUpTests(unittest.TestCase):
    def test_level_up_reaching_three_unlocks_combat(self):
        engine, collector = make_engine(rolls=[5], state=GameState(level=2, xp=98, xp_to_next=100))
        outcome = engine.roll_die()
        s = engine.state
        self.assertTrue(outcome.leveled_up)
        self.assertEqual(s.level, 3)
        self.assertEqual(s.xp, 3)
        self.assertEqual(s.xp_to_next, 150)
        self.assertTrue(s.combat_unlocked)
        self.assertIn(GameEventType.LEVEL_UP, collector.types())
        self.assertEqual(collector.types().count(GameEventType.COMBAT_UNLOCKED), 1)
        self.assertIn("Level Up! Level 3", collector.messages())

    def test_no_level_up_below_threshold(self):
        engine, collector = make_engine(rolls=[1], state=GameState(xp=98))
        engine.roll_die()
        self.assertEqual(engine.state.level, 1)
        self.assertEqual(engine.state.xp, 99)
        self.assertNotIn(GameEventType.LEVEL_UP, collector.types())

    def test_exact_threshold_levels_up(self):
        engine, _ = make_engine(rolls=[2], state=GameState(xp=98))
        engine.roll_die()
        self.assertEqual(engine.state.level, 2)
        self.assertEqual(engine.state.xp, 0)

    def test_threshold_growth_is_floored(self):
        engine, _ = make_engine(state=GameState(xp=151, xp_to_next=151))
        engine.level_up()
        self.assertEqual(engine.state.xp_to_next, 226)  # floor(226.5)

    def test_at_most_one_level_up_per_roll(self):
        engine, collector = make_engine(rolls=[6], state=GameState(xp=250))
        engine.roll_die()
        s = engine.state
        self.assertEqual(s.level, 2)
        self.assertEqual(s.xp, 156)
        self.assertEqual(s.xp_to_next, 150)
        self.assertEqual(collector.types().count(GameEventType.LEVEL_UP), 1)

    def test_level_up_never_leaves_negative_xp(self):
        engine, _ = make_engine(state=GameState(xp=10, xp_to_next=100))
        engine.level_up()
        self.assertEqual(engine.state.xp, 0)

    def test_unlock_fires_once_only(self):
        engine, collector = make_engine(state=GameState(level=2, xp=100))
        engine.level_up()
        engine.state.level = 2
        engine.level_up()
        self.assertEqual(collector.types().count(GameEventType.COMBAT_UNLOCKED), 1)

    def test_skipping_level_three_via_lucky_charm_never_unlocks(self):
        engine, _ = make_engine(rolls=[1], state=GameState(level=2, coins=250, xp=99, xp_to_next=100))
        self.assertTrue(engine.buy_shop_item(1))
        self.assertEqual(engine.state.level, 3)
        self.assertFalse(engine.state.combat_unlocked)
        engine.roll_die()
        self.assertEqual(engine.state.level, 4)
        self.assertFalse(engine.state.combat_unlocked)

    def test_sync_unlocks_uses_threshold(self):
        engine, _ = make_engine(state=GameState(level=5))
        engine.sync_unlocks()
        self.assertTrue(engine.state.combat_unlocked)


class AttackTests(unittest.TestCase):
    def test_attack_damage_range_and_no_mutation(self):
        state = GameState(coins=12, level=3, combat_unlocked=True)
        engine = ProgressionEngine(state, RandomSource(seed=3), EventListener(), Scheduler())
        before = state.snapshot()
        damages = {engine.attack() for _ in range(500)}
        self.assertTrue(all(10 <= d <= 29 for d in damages))
        self.assertIn(10, damages)
        self.assertIn(29, damages)
        self.assertEqual(state.snapshot(), before)

    def test_attack_message(self):
        engine, collector = make_engine(rolls=[17])
        self.assertEqual(engine.attack(), 17)
        self.assertIn("Dealt 17 damage!", collector.messages())
        self.assertIn(GameEventType.ATTACK, collector.types())


if __name__ == '__main__':
    unittest.main()
