"""Die face layout and static face drawing.

Pip positions are fractions of the die size on a 3x3 grid (corners, centre and
edge midpoints at 1/4, 1/2, 3/4). Faces 5 and 6 are composed from the four
corner pips of face 4 plus their extra dots.
"""
from __future__ import annotations
import pygame
from dice_clicker.ui.settings import (
    DICE_FACE, DICE_BORDER, DICE_PIPS, DICE_DOT_RADIUS, DICE_BORDER_WIDTH
)

Pip = tuple[float, float]

CENTER: Pip = (0.5, 0.5)
TOP_LEFT: Pip = (0.25, 0.25)
TOP_RIGHT: Pip = (0.75, 0.25)
BOTTOM_LEFT: Pip = (0.25, 0.75)
BOTTOM_RIGHT: Pip = (0.75, 0.75)
MID_LEFT: Pip = (0.25, 0.5)
MID_RIGHT: Pip = (0.75, 0.5)

_BASE_FACES: dict[int, list[Pip]] = {
    1: [CENTER],
    2: [TOP_LEFT, BOTTOM_RIGHT],
    3: [TOP_LEFT, CENTER, BOTTOM_RIGHT],
    4: [TOP_LEFT, TOP_RIGHT, BOTTOM_LEFT, BOTTOM_RIGHT],
}
# Composite faces: (base face, extra pips)
_COMPOSED_FACES: dict[int, tuple[int, list[Pip]]] = {
    5: (4, [CENTER]),
    6: (4, [MID_LEFT, MID_RIGHT]),
}


def pip_layout(face: int) -> list[Pip]:
    """Fractional pip positions for ``face`` (1..6). Other values raise KeyError."""
    if face in _COMPOSED_FACES:
        base, extra = _COMPOSED_FACES[face]
        return pip_layout(base) + extra
    return list(_BASE_FACES[face])


def pip_centers(x: float, y: float, size: float, face: int) -> list[tuple[float, float]]:
    return [(x + fx * size, y + fy * size) for fx, fy in pip_layout(face)]


def draw_dots(surface: pygame.Surface, x: float, y: float, size: float, face: int) -> None:
    for cx, cy in pip_centers(x, y, size, face):
        pygame.draw.circle(surface, DICE_PIPS, (round(cx), round(cy)), DICE_DOT_RADIUS)


def render_face(surface: pygame.Surface, x: float, y: float, size: int, face: int) -> pygame.Rect:
    """Draw a die body with outline and the dot pattern for ``face``; returns the body rect."""
    body = pygame.Rect(round(x), round(y), size, size)
    pygame.draw.rect(surface, DICE_FACE, body)
    pygame.draw.rect(surface, DICE_BORDER, body, DICE_BORDER_WIDTH)
    draw_dots(surface, x, y, size, face)
    return body
