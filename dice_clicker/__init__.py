"""Dice Clicker package public API.

Exports the packaged Game implementation.
"""
from __future__ import annotations

from .game import Game

__all__ = ["Game"]
