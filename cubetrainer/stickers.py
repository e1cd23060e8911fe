"""
Author: Elia Savino
github: github.com/EliaSavino

Happy Hacking!

Descr: Sticker-level tables for the 3x3x3 cube: faces, colors, the adjacent
strip table driving every face turn, and the cubie groupings used for piece
lookups.

"""
from __future__ import annotations

from enum import Enum
from typing import Dict, List, Tuple


class Face(Enum):
    U = "U"
    D = "D"
    F = "F"
    B = "B"
    L = "L"
    R = "R"


class Color(Enum):
    W = "W"
    Y = "Y"
    G = "G"
    B = "B"
    O = "O"
    R = "R"


# Storage order of the (6, 3, 3) sticker grid
FACE_ORDER: List[str] = ["U", "D", "F", "B", "L", "R"]
FACE_INDEX: Dict[str, int] = {f: i for i, f in enumerate(FACE_ORDER)}
FACE_NAMES: Dict[str, str] = {
    "U": "Up", "D": "Down", "F": "Front", "B": "Back", "L": "Left", "R": "Right",
}

COLOR_ORDER: List[str] = ["W", "Y", "G", "B", "O", "R"]
COLOR_INDEX: Dict[str, int] = {c: i for i, c in enumerate(COLOR_ORDER)}
COLOR_NAMES: Dict[str, str] = {
    "W": "white", "Y": "yellow", "G": "green", "B": "blue", "O": "orange", "R": "red",
}
COLOR_HEX: Dict[str, str] = {
    "W": "#ffffff",
    "Y": "#ffd600",
    "G": "#43a047",
    "B": "#1e88e5",
    "O": "#ff6f00",
    "R": "#e53935",
}

# Solved-state mapping, fixed
FACE_COLORS: Dict[str, str] = {"U": "W", "D": "Y", "F": "G", "B": "B", "L": "O", "R": "R"}

Cell = Tuple[int, int]
Strip = Tuple[str, Tuple[Cell, Cell, Cell]]

_ROW0: Tuple[Cell, Cell, Cell] = ((0, 0), (0, 1), (0, 2))
_ROW2: Tuple[Cell, Cell, Cell] = ((2, 0), (2, 1), (2, 2))
_COL0: Tuple[Cell, Cell, Cell] = ((0, 0), (1, 0), (2, 0))
_COL2: Tuple[Cell, Cell, Cell] = ((0, 2), (1, 2), (2, 2))

# Each face is viewed from outside, like the unfolded net:
#
#            [U]            U: B edge on top
#        [L] [F] [R] [B]    F, R, B, L: U edge on top
#            [D]            D: F edge on top
#
# For every face, the four neighbouring strips are listed in the order the
# stickers travel on a clockwise quarter turn: cell i of strip k lands on
# cell i of strip k+1.
ADJACENT_STRIPS: Dict[str, Tuple[Strip, Strip, Strip, Strip]] = {
    "U": (
        ("F", _ROW0),
        ("L", _ROW0),
        ("B", _ROW0),
        ("R", _ROW0),
    ),
    "D": (
        ("F", _ROW2),
        ("R", _ROW2),
        ("B", _ROW2),
        ("L", _ROW2),
    ),
    "F": (
        ("U", ((2, 0), (2, 1), (2, 2))),
        ("R", ((0, 0), (1, 0), (2, 0))),
        ("D", ((0, 2), (0, 1), (0, 0))),
        ("L", ((2, 2), (1, 2), (0, 2))),
    ),
    "B": (
        ("U", ((0, 0), (0, 1), (0, 2))),
        ("L", ((2, 0), (1, 0), (0, 0))),
        ("D", ((2, 2), (2, 1), (2, 0))),
        ("R", ((0, 2), (1, 2), (2, 2))),
    ),
    "L": (
        ("U", _COL0),
        ("F", _COL0),
        ("D", _COL0),
        ("B", ((2, 2), (1, 2), (0, 2))),
    ),
    "R": (
        ("U", _COL2),
        ("B", ((2, 0), (1, 0), (0, 0))),
        ("D", _COL2),
        ("F", _COL2),
    ),
}

# Outward normals, +x = R, +y = U, +z = F
FACE_NORMALS: Dict[str, Tuple[int, int, int]] = {
    "U": (0, 1, 0),
    "D": (0, -1, 0),
    "F": (0, 0, 1),
    "B": (0, 0, -1),
    "L": (-1, 0, 0),
    "R": (1, 0, 0),
}


def facelet_position(face: str, row: int, col: int) -> Tuple[int, int, int]:
    """
    Position (x, y, z) in {-1, 0, 1}^3 of the cubie carrying sticker
    ``face[row][col]``, following the net layout above.
    """
    if face == "U":
        return (col - 1, 1, row - 1)
    if face == "D":
        return (col - 1, -1, 1 - row)
    if face == "F":
        return (col - 1, 1 - row, 1)
    if face == "B":
        return (1 - col, 1 - row, -1)
    if face == "L":
        return (-1, 1 - row, col - 1)
    if face == "R":
        return (1, 1 - row, 1 - col)
    raise ValueError(f"Unknown face {face!r}")


def _group_cubies() -> Dict[Tuple[int, int, int], List[Tuple[str, int, int]]]:
    groups: Dict[Tuple[int, int, int], List[Tuple[str, int, int]]] = {}
    for face in FACE_ORDER:
        for r in range(3):
            for c in range(3):
                groups.setdefault(facelet_position(face, r, c), []).append((face, r, c))
    return groups


# cubie position -> its stickers, in FACE_ORDER
CUBIE_FACELETS: Dict[Tuple[int, int, int], List[Tuple[str, int, int]]] = _group_cubies()

EDGE_CUBIES: List[List[Tuple[str, int, int]]] = [
    cells for cells in CUBIE_FACELETS.values() if len(cells) == 2
]
CORNER_CUBIES: List[List[Tuple[str, int, int]]] = [
    cells for cells in CUBIE_FACELETS.values() if len(cells) == 3
]


def sticker_neighbours(face: str, row: int, col: int) -> List[Tuple[str, int, int]]:
    """
    The other stickers sharing a cubie with ``face[row][col]``: one for an
    edge sticker, two for a corner sticker, none for a centre.
    """
    cells = CUBIE_FACELETS[facelet_position(face, row, col)]
    return [cell for cell in cells if cell != (face, row, col)]
