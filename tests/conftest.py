"""
Pytest configuration and shared fixtures.
"""
import random
import sys
from pathlib import Path
from typing import Callable, Iterable, Tuple

import pytest

# Add src to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from minefield import Box, BoxKind, Field, FieldConfig, Point


def build_field(
    rows: int, cols: int, mines: Iterable[Tuple[int, int]]
) -> Field:
    """Build a walled field with mines at fixed points."""
    field = Field(rows, cols)
    field.place_mines_at(Point(x, y) for x, y in mines)
    field.compute_adjacency()
    field.add_walls()
    return field


# ============================================================================
# Field Fixtures
# ============================================================================

@pytest.fixture
def make_field() -> Callable[..., Field]:
    """Factory for fields with a fixed mine layout."""
    return build_field


@pytest.fixture
def empty_field() -> Field:
    """Create a 4x5 field with no mines for flood fill testing."""
    return build_field(4, 5, [])


@pytest.fixture
def corner_field() -> Field:
    """Create a 4x5 field with a single mine in the top-left corner."""
    return build_field(4, 5, [(1, 1)])


@pytest.fixture
def dense_field() -> Field:
    """Create a 4x5 field whose top two rows are mines (9 hints)."""
    return build_field(4, 5, [(x, y) for x in (1, 2) for y in range(1, 6)])


@pytest.fixture
def seeded_field() -> Field:
    """Create a 9x9 field with 10 mines from a fixed seed."""
    return Field.from_config(FieldConfig(9, 9, 10), random.Random(1234))


# ============================================================================
# Box Fixtures
# ============================================================================

@pytest.fixture
def hidden_box() -> Box:
    """Create a hidden box."""
    return Box()


@pytest.fixture
def mine_box() -> Box:
    """Create a box containing a mine."""
    return Box(kind=BoxKind.MINE)


@pytest.fixture
def wall_box() -> Box:
    """Create a wall box."""
    return Box.wall()


# ============================================================================
# Configuration Fixtures
# ============================================================================

@pytest.fixture
def valid_config() -> FieldConfig:
    """Create a valid field configuration."""
    return FieldConfig(9, 9, 10)


@pytest.fixture
def smallest_config() -> FieldConfig:
    """Smallest allowed field with the fewest mines."""
    return FieldConfig(4, 5, 2)
