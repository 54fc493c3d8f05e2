"""Dice canvas: static face drawing and the animated roll."""
from __future__ import annotations
import logging
import math
from typing import Callable, Optional

import pygame

from dice_clicker.core.scheduler import Scheduler, TaskHandle
from dice_clicker.dice.animation import DiceFrame, RollAnimation
from dice_clicker.dice.faces import render_face
from dice_clicker.ui.settings import (
    CANVAS_WIDTH, CANVAS_HEIGHT, CANVAS_BG, CANVAS_GRID_DOT, CANVAS_GRID_SPACING,
    DICE_SIZE, DICE_BORDER_WIDTH, DICE_FACE, DICE_BORDER, DICE_PIPS, FONT_SIZE_HUD
)

logger = logging.getLogger(__name__)

MAX_PIP_FACE = 6


def _blend(base, overlay):
    r, g, b, a = overlay
    k = a / 255.0
    return tuple(round(c * (1 - k) + o * k) for c, o in zip(base, (r, g, b)))


class DiceRenderer:
    """Owns the dice canvas surface and the roll animation task.

    A new play() preempts the animation in progress: the running task is
    cancelled and the new roll starts from frame 0.
    """
    def __init__(self, scheduler: Scheduler, rng, size: tuple[int, int] = (CANVAS_WIDTH, CANVAS_HEIGHT)):
        self.scheduler = scheduler
        self.rng = rng
        self.surface = pygame.Surface(size)
        self.die_size = DICE_SIZE
        self.face = 1
        self.animation: Optional[RollAnimation] = None
        self._task: Optional[TaskHandle] = None
        self._font: Optional[pygame.font.Font] = None
        self.frames_drawn = 0
        # Called with the settled face once the final frame is drawn
        self.on_finished: Optional[Callable[[int], None]] = None

    # --- Geometry -----------------------------------------------------
    def die_origin(self) -> tuple[float, float]:
        w, h = self.surface.get_size()
        return (w - self.die_size) / 2, (h - self.die_size) / 2

    # --- Drawing ------------------------------------------------------
    def draw_background(self) -> None:
        surf = self.surface
        surf.fill(CANVAS_BG)
        dot = _blend(CANVAS_BG, CANVAS_GRID_DOT)
        w, h = surf.get_size()
        for x in range(0, w, CANVAS_GRID_SPACING):
            for y in range(0, h, CANVAS_GRID_SPACING):
                surf.fill(dot, (x, y, 1, 1))

    def draw_static(self, face: int = 1) -> None:
        self.face = face
        self.draw_background()
        x, y = self.die_origin()
        self._draw_die(self.surface, x, y, face)

    def draw_frame(self, frame: DiceFrame) -> None:
        self.face = frame.face
        self.draw_background()
        if frame.angle == 0:
            x, y = self.die_origin()
            self._draw_die(self.surface, x, y, frame.face)
        else:
            pad = DICE_BORDER_WIDTH
            die = pygame.Surface((self.die_size + pad * 2, self.die_size + pad * 2), pygame.SRCALPHA)
            self._draw_die(die, pad, pad, frame.face)
            # pygame rotates counter-clockwise for positive degrees
            rotated = pygame.transform.rotate(die, -math.degrees(frame.angle))
            w, h = self.surface.get_size()
            self.surface.blit(rotated, rotated.get_rect(center=(w // 2, h // 2)))
        self.frames_drawn += 1

    def _draw_die(self, surface: pygame.Surface, x: float, y: float, face: int) -> None:
        if face <= MAX_PIP_FACE:
            render_face(surface, x, y, self.die_size, face)
            return
        # Faces beyond six (Better Dice) have no pip pattern: show the number
        body = pygame.Rect(round(x), round(y), self.die_size, self.die_size)
        pygame.draw.rect(surface, DICE_FACE, body)
        pygame.draw.rect(surface, DICE_BORDER, body, DICE_BORDER_WIDTH)
        if self._font is None:
            self._font = pygame.font.Font(None, FONT_SIZE_HUD * 2)
        text = self._font.render(str(face), True, DICE_PIPS)
        surface.blit(text, text.get_rect(center=body.center))

    # --- Animation ----------------------------------------------------
    @property
    def animating(self) -> bool:
        return self.animation is not None and not self.animation.done

    def play(self, result: int) -> RollAnimation:
        """Start the roll animation towards ``result``, replacing one in progress."""
        if self.animating:
            logger.debug("Roll animation preempted by new roll (%d)", result)
            self.stop()
        anim = RollAnimation(result, self.rng)
        self.animation = anim
        # First frame draws immediately; the rest advance once per frame tick
        self._step()
        self._task = self.scheduler.call_each_frame(self._step, name="roll_animation")
        return anim

    def stop(self) -> None:
        if self.animation is not None:
            self.animation.cancel()
        if self._task is not None:
            self._task.cancel()
            self._task = None

    def _step(self) -> bool:
        anim = self.animation
        if anim is None:
            return False
        frame = anim.advance()
        if frame is None:
            return False
        self.draw_frame(frame)
        if frame.final and self.on_finished is not None:
            self.on_finished(frame.face)
        return not frame.final
