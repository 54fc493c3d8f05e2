import unittest
import pygame
from dice_clicker.dice.faces import (
    CENTER, MID_LEFT, MID_RIGHT, pip_layout, pip_centers, render_face
)
from dice_clicker.ui.settings import DICE_FACE, DICE_PIPS

DARK = DICE_PIPS
WHITE = DICE_FACE


class DiceFaceTests(unittest.TestCase):
    @classmethod
    def setUpClass(cls):
        pygame.init()

    def _render(self, face):
        surf = pygame.Surface((100, 100))
        surf.fill((0, 0, 0))
        render_face(surf, 0, 0, 100, face)
        return surf

    def _rgb(self, surf, pos):
        return tuple(surf.get_at(pos))[:3]

    def test_pip_counts_match_face(self):
        for face in range(1, 7):
            self.assertEqual(len(pip_layout(face)), face)

    def test_five_and_six_extend_four(self):
        self.assertEqual(pip_layout(5), pip_layout(4) + [CENTER])
        self.assertEqual(pip_layout(6), pip_layout(4) + [MID_LEFT, MID_RIGHT])

    def test_unknown_face_raises(self):
        with self.assertRaises(KeyError):
            pip_layout(7)
        with self.assertRaises(KeyError):
            pip_layout(0)

    def test_pip_centers_scale_with_size(self):
        self.assertEqual(pip_centers(10, 20, 100, 1), [(60.0, 70.0)])

    def test_face_one_has_single_center_pip(self):
        surf = self._render(1)
        self.assertEqual(self._rgb(surf, (50, 50)), DARK)
        self.assertEqual(self._rgb(surf, (25, 25)), WHITE)
        self.assertEqual(self._rgb(surf, (75, 75)), WHITE)

    def test_face_two_uses_diagonal_corners(self):
        surf = self._render(2)
        self.assertEqual(self._rgb(surf, (25, 25)), DARK)
        self.assertEqual(self._rgb(surf, (75, 75)), DARK)
        self.assertEqual(self._rgb(surf, (75, 25)), WHITE)
        self.assertEqual(self._rgb(surf, (50, 50)), WHITE)

    def test_face_six_has_side_pips(self):
        surf = self._render(6)
        self.assertEqual(self._rgb(surf, (25, 50)), DARK)
        self.assertEqual(self._rgb(surf, (75, 50)), DARK)
        self.assertEqual(self._rgb(surf, (50, 50)), WHITE)

    def test_border_drawn(self):
        surf = self._render(3)
        self.assertEqual(self._rgb(surf, (1, 50)), DARK)
        self.assertEqual(self._rgb(surf, (5, 50)), WHITE)


if __name__ == '__main__':
    unittest.main()
