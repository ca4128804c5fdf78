"""
Terminal game loop for Minefield.

Reads numbers from the player, runs actions on a Field and prints
the field until the game is won or a mine goes off.
"""
from typing import Callable

from .field import (
    MAX_COLS,
    MAX_ROWS,
    MIN_COLS,
    MIN_ROWS,
    Field,
    FieldConfig,
    GameAction,
    Point,
    mine_range,
)

InputFn = Callable[[str], str]

ACTION_PROMPT = (
    "Enter action number:\n"
    f"\t{GameAction.UNCOVER:d} to uncover\n"
    f"\t{GameAction.MARK:d} to mark\n"
    f"\t{GameAction.SUSPECT:d} to suspect\n"
    f"\t{GameAction.UNCOVER_NEIGHBORS:d} to uncover all adjacent boxes\n"
    f"\t{GameAction.HINT:d} to use hint (safe uncover)\n"
    ">> "
)


def scan_int(
    name: str, minimum: int, maximum: int, input_fn: InputFn = input
) -> int:
    """Prompt until an integer in [minimum, maximum] is entered."""
    while True:
        text = input_fn(f"Enter number of {name}  [{minimum}-{maximum}]: ")
        try:
            value = int(text.strip())
        except ValueError:
            continue
        if minimum <= value <= maximum:
            return value


def scan_point(input_fn: InputFn = input) -> Point:
    """Prompt until two integers are entered."""
    while True:
        parts = input_fn("Enter x and y: ").split()
        if len(parts) != 2:
            continue
        try:
            return Point(int(parts[0]), int(parts[1]))
        except ValueError:
            continue


def scan_action(input_fn: InputFn = input) -> int:
    """Prompt until an integer action code is entered."""
    while True:
        try:
            return int(input_fn(ACTION_PROMPT).strip())
        except ValueError:
            continue


def setup_config(input_fn: InputFn = input) -> FieldConfig:
    """Ask the player for the field size and mine count."""
    rows = scan_int("rows", MIN_ROWS, MAX_ROWS, input_fn)
    cols = scan_int("cols", MIN_COLS, MAX_COLS, input_fn)
    low, high = mine_range(rows, cols)
    mines = scan_int("mines", low, high, input_fn)
    return FieldConfig(rows, cols, mines)


def play(field: Field, input_fn: InputFn = input) -> bool:
    """
    Run a game until it is won or lost.

    Args:
        field: A ready-to-play field.
        input_fn: Source of player input.

    Returns:
        True if the game was won.
    """
    while not field.is_game_won():
        print(field.render())
        print(f"You have {field.hints} hints left")
        print(f"You have {field.remaining_mines} mines left")
        point = scan_point(input_fn)
        action = scan_action(input_fn)
        if not field.run_action(point, action):
            print(field.render_all())
            print("Oops! Game Over...")
            return False

    print(field.render_all())
    print("Great! You Win!")
    return True
