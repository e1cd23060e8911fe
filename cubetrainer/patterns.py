"""
Author: Elia Savino
github: github.com/EliaSavino

Happy Hacking!

Descr: Named move sequences that draw patterns on a solved cube.

"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, List, Tuple

from cubetrainer.cube import CubeEngine
from cubetrainer.notation import parse_move


@dataclass(frozen=True)
class Pattern:
    name: str
    moves: Tuple[str, ...]
    description: str

    def __post_init__(self):
        for m in self.moves:
            parse_move(m)


_PATTERN_LIST: List[Pattern] = [
    Pattern(
        "Checkerboard",
        ("M2", "E2", "S2"),
        "Creates a checkerboard pattern on all faces",
    ),
    Pattern(
        "Cube in Cube",
        ("F", "L", "F", "U'", "R", "U", "F2", "L2", "U'", "L'", "B", "D'", "B'", "L2", "U"),
        "Creates a cube pattern within the cube",
    ),
    Pattern(
        "Flower Pattern",
        ("R", "U", "R'", "F", "R", "F'", "U2", "R'", "U'", "R", "U", "R'"),
        "Creates flower-like patterns on faces",
    ),
    Pattern(
        "Cross Pattern",
        ("R2", "L'", "D", "F2", "R'", "D'", "R'", "L", "U'", "D", "R", "D", "B2", "R'", "U", "D2"),
        "Creates cross patterns on multiple faces",
    ),
    Pattern(
        "Flower Twist",
        ("R", "U", "R'", "F", "R", "F'", "U2", "R'", "U'", "R", "U", "R'",
         "F", "R2", "U'", "R'", "U'", "R", "U", "R'", "F'"),
        "Flower pattern carried on by an F-framed edge and corner cycle",
    ),
]

PATTERNS: Dict[str, Pattern] = {p.name: p for p in _PATTERN_LIST}


def get_pattern(name: str) -> Pattern:
    """Look a pattern up by name (case-insensitive)."""
    for key, pattern in PATTERNS.items():
        if key.lower() == name.strip().lower():
            return pattern
    raise ValueError(f"Unknown pattern {name!r}, expected one of {list(PATTERNS)}")


def apply_pattern(cube: CubeEngine, name: str) -> Pattern:
    """
    Reset ``cube`` and apply the named pattern, recording its moves with
    phase 'pattern'.
    """
    pattern = get_pattern(name)
    cube.reset()
    with cube.history_phase("pattern"):
        for m in pattern.moves:
            cube.apply_move(m)
    return pattern
