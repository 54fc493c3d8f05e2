import math
import unittest
import pygame
from dice_clicker.core.scheduler import Scheduler
from dice_clicker.dice.animation import DiceFrame
from dice_clicker.dice.renderer import DiceRenderer
from dice_clicker.ui.settings import CANVAS_BG, DICE_FACE, DICE_PIPS
from tests.test_utils import ScriptedRandom


class DiceRendererTests(unittest.TestCase):
    @classmethod
    def setUpClass(cls):
        pygame.init()

    def setUp(self):
        self.scheduler = Scheduler()
        self.renderer = DiceRenderer(self.scheduler, ScriptedRandom(seed=2))

    def _rgb(self, pos):
        return tuple(self.renderer.surface.get_at(pos))[:3]

    def test_static_face_is_centered(self):
        self.renderer.draw_static(1)
        self.assertEqual(self.renderer.die_origin(), (250.0, 150.0))
        self.assertEqual(self._rgb((300, 200)), DICE_PIPS)
        self.assertEqual(self._rgb((260, 160)), DICE_FACE)
        self.assertEqual(self._rgb((100, 101)), CANVAS_BG)

    def test_background_grid_dots(self):
        self.renderer.draw_background()
        self.assertNotEqual(self._rgb((50, 50)), CANVAS_BG)
        self.assertEqual(self._rgb((51, 50)), CANVAS_BG)

    def test_play_draws_first_frame_immediately(self):
        self.renderer.play(5)
        self.assertEqual(self.renderer.frames_drawn, 1)
        self.assertTrue(self.renderer.animating)
        self.assertEqual(self.scheduler.pending("roll_animation"), 1)

    def test_animation_settles_on_result(self):
        finished = []
        self.renderer.on_finished = finished.append
        self.renderer.play(5)
        for _ in range(20):
            self.scheduler.advance(16)
        self.assertEqual(self.renderer.frames_drawn, 21)
        self.assertEqual(self.renderer.face, 5)
        self.assertFalse(self.renderer.animating)
        self.assertEqual(finished, [5])
        self.assertEqual(self.scheduler.pending("roll_animation"), 0)
        self.scheduler.advance(16)
        self.assertEqual(self.renderer.frames_drawn, 21)

    def test_new_roll_preempts_running_animation(self):
        first = self.renderer.play(2)
        for _ in range(5):
            self.scheduler.advance(16)
        second = self.renderer.play(6)
        self.assertTrue(first.done)
        self.assertEqual(self.scheduler.pending("roll_animation"), 1)
        for _ in range(20):
            self.scheduler.advance(16)
        self.assertTrue(second.done)
        self.assertEqual(self.renderer.face, 6)

    def test_stop_cancels_task(self):
        self.renderer.play(3)
        self.renderer.stop()
        self.assertFalse(self.renderer.animating)
        self.assertEqual(self.scheduler.pending(), 0)

    def test_rotated_frame_moves_die_corner(self):
        self.renderer.draw_frame(DiceFrame(1, 0.0))
        self.assertEqual(self._rgb((253, 153)), DICE_FACE)
        self.renderer.draw_frame(DiceFrame(1, math.pi / 4))
        self.assertEqual(self._rgb((253, 153)), CANVAS_BG)
        self.assertEqual(self._rgb((300, 200)), DICE_PIPS)

    def test_large_face_drawn_as_number(self):
        self.renderer.draw_static(8)
        self.assertEqual(self.renderer.face, 8)
        self.assertEqual(self._rgb((260, 160)), DICE_FACE)


if __name__ == '__main__':
    unittest.main()
