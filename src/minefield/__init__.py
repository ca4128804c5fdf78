"""
Minefield game module.

Provides the field of boxes, its game actions and a Gymnasium wrapper.
"""
from .box import Box, BoxKind, BoxState
from .field import (
    Field,
    FieldConfig,
    GameAction,
    Point,
    calculate_hints,
    mine_range,
)
from .environment import MinesweeperEnv

__all__ = [
    "Box",
    "BoxKind",
    "BoxState",
    "Field",
    "FieldConfig",
    "GameAction",
    "Point",
    "calculate_hints",
    "mine_range",
    "MinesweeperEnv",
]
