import os
import sys

import pytest

# Ensure src is on path for test imports
ROOT = os.path.dirname(os.path.dirname(__file__))
SRC = os.path.join(ROOT, "src")
if SRC not in sys.path:
    sys.path.insert(0, SRC)

from block_puzzle_engine.game import Board  # noqa: E402
from tests.helpers import board_from_rows  # noqa: E402


@pytest.fixture
def empty_board():
    return Board()


@pytest.fixture
def full_board():
    return board_from_rows(["#" * 8] * 8)
