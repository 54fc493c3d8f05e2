from __future__ import annotations
import math
from dataclasses import dataclass
from typing import Optional

from dice_clicker.ui.settings import ROLL_ANIMATION_FRAMES

TUMBLE_FACES = 6


@dataclass(frozen=True)
class DiceFrame:
    face: int
    angle: float  # radians, clockwise
    final: bool = False


class RollAnimation:
    """Finite tumble sequence ending on the rolled face.

    Frames 0..N-1 each show a fresh random face (1..6) rotated by frame/N of a
    full turn; frame N shows ``result`` upright and ends the animation. Only the
    tumble uses six faces: the settled face may exceed 6 once Better Dice raised
    the die size, in which case the renderer shows it as a number.
    """
    def __init__(self, result: int, rng, frames: int = ROLL_ANIMATION_FRAMES):
        self.result = result
        self.rng = rng
        self.max_frames = frames
        self.frame = 0
        self.cancelled = False
        self.last: Optional[DiceFrame] = None

    @property
    def done(self) -> bool:
        return self.cancelled or (self.last is not None and self.last.final)

    def rotation(self, frame: int) -> float:
        return (frame / self.max_frames) * math.pi * 2

    def advance(self) -> Optional[DiceFrame]:
        """Produce the next frame, or None once finished/cancelled."""
        if self.done:
            return None
        if self.frame < self.max_frames:
            out = DiceFrame(self.rng.randint(1, TUMBLE_FACES), self.rotation(self.frame))
            self.frame += 1
        else:
            out = DiceFrame(self.result, 0.0, final=True)
        self.last = out
        return out

    def cancel(self) -> None:
        self.cancelled = True
