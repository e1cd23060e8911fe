"""
Author: Elia Savino
github: github.com/EliaSavino

Happy Hacking!

Descr: Move token grammar. Face turns U D F B L R and slice turns M E S, each
optionally suffixed with ' (counter-clockwise) or 2 (half turn). A string
holding whitespace is a sequence literal.

"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, List, Tuple

from cubetrainer.stickers import FACE_NAMES

FACE_LETTERS = "UDFBLR"
SLICE_LETTERS = "MES"
SUFFIXES = ("", "'", "2")

# slice -> (face, opposite face); X is face then opposite' (e.g. M = R L')
SLICE_COMPOSITION = {
    "M": ("R", "L"),
    "E": ("U", "D"),
    "S": ("F", "B"),
}

ALL_MOVES: List[str] = [l + s for l in FACE_LETTERS + SLICE_LETTERS for s in SUFFIXES]
SCRAMBLE_MOVES: List[str] = [f + s for f in FACE_LETTERS for s in ["", "'"]]


class InvalidMoveToken(ValueError):
    """Raised for a token outside the move grammar."""

    def __init__(self, token: str):
        self.token = token
        super().__init__(f"Invalid move token: {token!r}")


@dataclass(frozen=True)
class MoveToken:
    """
    A parsed atomic move.

    Attributes:
        layer: One of U D F B L R M E S.
        suffix: "", "'" or "2".
    """
    layer: str
    suffix: str = ""

    @property
    def is_slice(self) -> bool:
        return self.layer in SLICE_LETTERS

    @property
    def clockwise(self) -> bool:
        return self.suffix != "'"

    @property
    def quarter_turns(self) -> int:
        return 2 if self.suffix == "2" else 1

    def inverse(self) -> "MoveToken":
        if self.suffix == "'":
            return MoveToken(self.layer, "")
        if self.suffix == "2":
            return self
        return MoveToken(self.layer, "'")

    def face_turns(self) -> List[Tuple[str, bool]]:
        """
        Expand into primitive quarter turns ``(face, clockwise)``.

        Slice turns go through their two-face composition, half turns repeat
        the quarter-turn expansion.
        """
        if self.is_slice:
            face, opposite = SLICE_COMPOSITION[self.layer]
            cw = self.clockwise
            quarter = [(face, cw), (opposite, not cw)]
        else:
            quarter = [(self.layer, self.clockwise)]
        return quarter * self.quarter_turns

    def __str__(self) -> str:
        return self.layer + self.suffix


def is_sequence_literal(token: str) -> bool:
    return any(ch.isspace() for ch in token.strip())


def parse_move(token: str) -> MoveToken:
    """
    Parse a single atomic token.

    Raises:
        InvalidMoveToken: if ``token`` is not ``<layer><suffix>?``.
    """
    if not isinstance(token, str) or len(token) not in (1, 2):
        raise InvalidMoveToken(token)
    layer, suffix = token[0], token[1:]
    if layer not in FACE_LETTERS + SLICE_LETTERS or suffix not in SUFFIXES:
        raise InvalidMoveToken(token)
    return MoveToken(layer, suffix)


def split_sequence(text: str) -> List[str]:
    """Split a sequence literal on whitespace; each piece must be a valid token."""
    tokens = text.split()
    for tok in tokens:
        parse_move(tok)
    return tokens


def invert_move(token: str) -> str:
    """``X'`` -> ``X``, ``X2`` -> ``X2``, ``X`` -> ``X'``."""
    return str(parse_move(token).inverse())


def invert_sequence(moves: Iterable[str]) -> List[str]:
    """Reverse the order and invert each token."""
    return [invert_move(m) for m in reversed(list(moves))]


def describe_move(token: str) -> str:
    """Plain-language reading of a token, e.g. ``R'`` -> 'Right face counter-clockwise'."""
    move = parse_move(token)
    if move.is_slice:
        name = {"M": "Middle slice", "E": "Equator slice", "S": "Standing slice"}[move.layer]
    else:
        name = f"{FACE_NAMES[move.layer]} face"
    if move.suffix == "2":
        return f"{name} half turn"
    return f"{name} {'clockwise' if move.clockwise else 'counter-clockwise'}"
