"""
Author: Elia Savino
github: github.com/EliaSavino

Happy Hacking!

Descr: Sticker-grid cube engine. Owns the 6x3x3 grid and the move history,
applies face/slice/double turns and sequence literals, scrambles and reverses.

"""
import copy
import random
from contextlib import contextmanager
from functools import wraps
from typing import Any, Callable, Dict, List, Optional, Sequence, Tuple

import numpy as np
import pandas as pd
import matplotlib.pyplot as plt
from mpl_toolkits.mplot3d.art3d import Poly3DCollection

from cubetrainer.notation import (
    SCRAMBLE_MOVES,
    InvalidMoveToken,
    invert_move,
    invert_sequence,
    is_sequence_literal,
    parse_move,
    split_sequence,
)
from cubetrainer.stickers import (
    ADJACENT_STRIPS,
    COLOR_HEX,
    COLOR_INDEX,
    COLOR_ORDER,
    CORNER_CUBIES,
    EDGE_CUBIES,
    FACE_COLORS,
    FACE_INDEX,
    FACE_ORDER,
    Color,
    Face,
    sticker_neighbours,
)
from cubetrainer.visualisation.net import net_rows, sticker_quad, to_plot_coords

HISTORY_COLUMNS = ["step", "move", "phase"]


class CubeInvariantError(AssertionError):
    """The sticker grid left the space of reachable states: an engine bug."""


def _strip_index(face: str) -> Tuple[np.ndarray, np.ndarray, np.ndarray]:
    """Fancy-index arrays (4, 3) for the four strips around ``face``."""
    strips = ADJACENT_STRIPS[face]
    faces = np.array([[FACE_INDEX[f]] * 3 for f, _ in strips])
    rows = np.array([[r for r, _ in cells] for _, cells in strips])
    cols = np.array([[c for _, c in cells] for _, cells in strips])
    return faces, rows, cols


_STRIP_INDEX = {face: _strip_index(face) for face in FACE_ORDER}


def solved_grid() -> np.ndarray:
    """The (6, 3, 3) color-index grid of the solved cube."""
    grid = np.empty((6, 3, 3), dtype=np.int8)
    for f, face in enumerate(FACE_ORDER):
        grid[f, :, :] = COLOR_INDEX[FACE_COLORS[face]]
    return grid


def track_history(method: Callable[..., Any]) -> Callable[..., Any]:
    """
    Decorator for CubeEngine.apply_move: logs every atomic token into
    `self._history`, unless history is disabled. Sequence literals are not
    logged themselves; their sub-tokens go through apply_move and are.
    Phase is taken from `self._phase`.
    """
    @wraps(method)
    def wrapper(self, token: str) -> Any:
        # state change first; an invalid token raises before anything is logged
        result = method(self, token)

        if self._history_enabled and not is_sequence_literal(token):
            step = int(self._history.shape[0])
            self._history.loc[step] = [step, token.strip(), self._phase]
        return result
    return wrapper


class CubeEngine:
    """
    Rubik's Cube state container on the sticker level.

    The state is a single numpy array ``grid[6, 3, 3]`` of color indices, faces
    in ``FACE_ORDER`` (U, D, F, B, L, R), each face read as seen from outside
    (see the net in ``cubetrainer.stickers``). Moves permute stickers only,
    so color counts and centres never change.

    Design principles
    -----------------
    • One primitive, `rotate(face, clockwise)`: rotate the face grid and cycle
      the four adjacent strips listed in ``ADJACENT_STRIPS``. Slice turns and
      half turns are compositions of it, never separate code paths.

    • `apply_move(token)` is the only entry point that records history, and
      it records atomic tokens verbatim ("M", "R2", "U'").

    • Consumers get copies: `grid`, `state()`, `copy()`.

    Attributes
    ----------
    history : list[str]
        Atomic tokens applied since the last reset/scramble.

    Key methods
    ------------
    apply_move(token)
        Apply a face/slice/double token or a whitespace-separated sequence.
    scramble(length, seed)
        Random face quarter-turns, recorded with phase "scramble".
    reverse_from_history()
        Apply the inverse of the recorded history.
    undo()
        Revert the last recorded move.
    is_solved()
        Every face uniform.

    Example
    -------
        c = CubeEngine()
        c.apply_move("R U R' U'")
        c.print_net()
    """

    def __init__(self):
        self._grid: np.ndarray = solved_grid()
        self._history_enabled = True
        self._phase = "solve"
        self._init_history_fields()

    def _init_history_fields(self) -> None:
        self._history = pd.DataFrame(columns=HISTORY_COLUMNS)

    @contextmanager
    def history_phase(self, phase: str):
        """
        Temporarily set the history 'phase' for recorded moves.
        Usage:
            with cube.history_phase('pattern'):
                cube.apply_move('M2 E2 S2')
        """
        prev = self._phase
        self._phase = phase
        try:
            yield
        finally:
            self._phase = prev

    @contextmanager
    def no_history(self):
        """Temporarily disable history recording."""
        prev = self._history_enabled
        self._history_enabled = False
        try:
            yield
        finally:
            self._history_enabled = prev

    def clear_history(self) -> None:
        self._init_history_fields()

    # ---------- ACCESS ----------
    @property
    def grid(self) -> np.ndarray:
        """Copy of the (6, 3, 3) color-index grid."""
        return self._grid.copy()

    @property
    def history(self) -> List[str]:
        return [str(m) for m in self._history["move"]]

    def get_history(self) -> pd.DataFrame:
        """
        Return a copy of the move history DataFrame.

        Columns:
            step (int)   : 0-based move index
            move (str)   : atomic token as applied
            phase (str)  : 'scramble', 'solve', 'pattern' or 'reverse'
        """
        return self._history.copy()

    def state(self) -> Dict[str, List[List[str]]]:
        """Snapshot as {face letter: 3x3 color letters}."""
        return {
            face: [[COLOR_ORDER[int(v)] for v in row] for row in self._grid[f]]
            for f, face in enumerate(FACE_ORDER)
        }

    def face(self, face: Face | str) -> List[List[Color]]:
        letter = face.value if isinstance(face, Face) else face
        return [[Color(COLOR_ORDER[int(v)]) for v in row] for row in self._grid[FACE_INDEX[letter]]]

    def copy(self) -> "CubeEngine":
        """Deep copy of grid and history, for branching off the current state."""
        return copy.deepcopy(self)

    # ---------- MOVES ----------
    def rotate(self, face: str, clockwise: bool = True) -> None:
        """
        Apply a quarter turn of one outer face. Not recorded in history.

        The face grid turns in place: clockwise takes output (i, j) from input
        (2-j, i), counter-clockwise from (j, 2-i). The four adjacent strips then
        shift one step along ``ADJACENT_STRIPS[face]`` (backwards when
        counter-clockwise).

        Args:
            face: Face identifier ("U", "D", "F", "B", "L", "R").
            clockwise: If False, performs the counter-clockwise turn.
        """
        if face not in FACE_INDEX:
            raise ValueError(f"Unknown face {face!r}, expected one of {FACE_ORDER}")
        f = FACE_INDEX[face]
        self._grid[f] = np.rot90(self._grid[f], k=-1 if clockwise else 1).copy()

        idx = _STRIP_INDEX[face]
        strips = self._grid[idx]
        self._grid[idx] = np.roll(strips, 1 if clockwise else -1, axis=0)

    @track_history
    def apply_move(self, token: str) -> None:
        """
        Apply one token or a whitespace-separated sequence of tokens.

        Args:
            token: "R", "U'", "F2", "M", "E'", "S2", ... or "R U R' U'".

        Raises:
            InvalidMoveToken: if the token (or any token of the sequence) is not
                in the grammar. Nothing is applied in that case.
        """
        if not isinstance(token, str):
            raise InvalidMoveToken(token)
        if is_sequence_literal(token):
            for tok in split_sequence(token):
                self.apply_move(tok)
            return

        move = parse_move(token.strip())
        for face, clockwise in move.face_turns():
            self.rotate(face, clockwise)

    def apply_sequence(self, moves: Sequence[str]) -> None:
        """Apply a list of tokens in order, validating all of them first."""
        for m in moves:
            parse_move(m)
        for m in moves:
            self.apply_move(m)

    def reset(self) -> None:
        """Solved grid, empty history."""
        self._grid = solved_grid()
        self.clear_history()

    def scramble(self, length: int = 20, seed: int | None = None) -> List[str]:
        """
        Clear the history, then apply `length` random face quarter-turns.

        Tokens are drawn uniformly with replacement from the 12 quarter-turn
        tokens; immediately cancelling pairs like R R' can occur.

        Args:
            length: Number of quarter-turns to apply.
            seed: Optional RNG seed for reproducibility.

        Returns:
            The drawn sequence.
        """
        if length < 0:
            raise ValueError(f"'length' must be >= 0, got {length}")
        rng = random.Random(seed)
        self.clear_history()
        moves = [rng.choice(SCRAMBLE_MOVES) for _ in range(length)]
        with self.history_phase("scramble"):
            for m in moves:
                self.apply_move(m)
        return moves

    def reverse_from_history(self) -> List[str]:
        """
        Apply the inverse of the recorded history: reversed order, each token
        inverted. Recorded with phase 'reverse'.

        Returns:
            The inverse sequence that was applied.
        """
        inverse = invert_sequence(self.history)
        with self.history_phase("reverse"):
            for m in inverse:
                self.apply_move(m)
        return inverse

    def undo(self) -> Optional[str]:
        """
        Revert the last recorded move and drop it from the history.

        Returns:
            The undone token, or None when there is nothing to undo.
        """
        if self._history.empty:
            return None
        last = str(self._history["move"].iloc[-1])
        with self.no_history():
            self.apply_move(invert_move(last))
        self._history = self._history.iloc[:-1].copy()
        return last

    # ---------- QUERIES ----------
    def is_solved(self) -> bool:
        """Every face's nine stickers equal each other."""
        flat = self._grid.reshape(6, 9)
        return bool(np.all(flat == flat[:, :1]))

    def color_counts(self) -> Dict[str, int]:
        counts = np.bincount(self._grid.ravel().astype(np.int64), minlength=len(COLOR_ORDER))
        return {COLOR_ORDER[i]: int(n) for i, n in enumerate(counts)}

    def assert_invariants(self) -> None:
        """
        Verify the grid is structurally reachable: 54 stickers, every color
        exactly nine times, centres in their solved colors.

        Raises:
            CubeInvariantError
        """
        if self._grid.shape != (6, 3, 3):
            raise CubeInvariantError(f"grid has shape {self._grid.shape}, expected (6, 3, 3)")
        counts = self.color_counts()
        if any(n != 9 for n in counts.values()):
            raise CubeInvariantError(f"color counts {counts}")
        for f, face in enumerate(FACE_ORDER):
            centre = COLOR_ORDER[int(self._grid[f, 1, 1])]
            if centre != FACE_COLORS[face]:
                raise CubeInvariantError(f"centre of {face} is {centre}, expected {FACE_COLORS[face]}")

    def solved_fraction(self) -> float:
        """Fraction of the 54 stickers matching their face's centre."""
        flat = self._grid.reshape(6, 9)
        return float(np.sum(flat == flat[:, 4:5])) / 54.0

    def face_summary(self) -> str:
        """One-line state summary, e.g. 'U face: 9/9 correct (center: W), ...'."""
        parts = []
        for f, face in enumerate(FACE_ORDER):
            centre = self._grid[f, 1, 1]
            correct = int(np.sum(self._grid[f] == centre))
            parts.append(f"{face} face: {correct}/9 correct (center: {COLOR_ORDER[int(centre)]})")
        return ", ".join(parts)

    # ---------- PIECES ----------
    def _color_at(self, face: str, row: int, col: int) -> str:
        return COLOR_ORDER[int(self._grid[FACE_INDEX[face], row, col])]

    def edge_colors(self, face: str, row: int, col: int) -> Tuple[str, str]:
        """Colors of the edge piece owning sticker face[row][col], that sticker first."""
        neighbours = sticker_neighbours(face, row, col)
        if len(neighbours) != 1:
            raise ValueError(f"{face}[{row}][{col}] is not an edge sticker")
        return self._color_at(face, row, col), self._color_at(*neighbours[0])

    def corner_colors(self, face: str, row: int, col: int) -> Tuple[str, str, str]:
        """Colors of the corner piece owning sticker face[row][col], that sticker first."""
        neighbours = sticker_neighbours(face, row, col)
        if len(neighbours) != 2:
            raise ValueError(f"{face}[{row}][{col}] is not a corner sticker")
        a, b = neighbours
        return self._color_at(face, row, col), self._color_at(*a), self._color_at(*b)

    def _find_piece(self, cubies, colors: Sequence[str]) -> Optional[Tuple[str, int, int]]:
        wanted = sorted(colors)
        for cells in cubies:
            here = [self._color_at(*cell) for cell in cells]
            if sorted(here) == wanted:
                return cells[here.index(colors[0])]
        return None

    def find_edge(self, colors: Sequence[str]) -> Optional[Tuple[str, int, int]]:
        """
        Locate the edge piece with the two given colors.

        Returns:
            (face, row, col) of the sticker showing ``colors[0]``, or None.
        """
        return self._find_piece(EDGE_CUBIES, colors)

    def find_corner(self, colors: Sequence[str]) -> Optional[Tuple[str, int, int]]:
        """
        Locate the corner piece with the three given colors.

        Returns:
            (face, row, col) of the sticker showing ``colors[0]``, or None.
        """
        return self._find_piece(CORNER_CUBIES, colors)

    # ---------- VIEWS ----------
    def net_string(self, use_color: bool = True) -> str:
        """
        Text cube net:

              [U]
        [L] [F] [R] [B]
              [D]
        """
        COLOR_CODES = {
            "W": "\033[97m",
            "Y": "\033[93m",
            "G": "\033[92m",
            "B": "\033[94m",
            "O": "\033[33m",
            "R": "\033[91m",
        }
        RESET = "\033[0m"

        lines = []
        for row in net_rows(self._grid):
            cells = []
            for val in row:
                if val is None:
                    cells.append(" ")
                    continue
                letter = COLOR_ORDER[val]
                cells.append(f"{COLOR_CODES[letter]}{letter}{RESET}" if use_color else letter)
            lines.append(" ".join(cells).rstrip())
        return "\n".join(lines)

    def print_net(self, use_color: bool = True) -> None:
        print(self.net_string(use_color=use_color))

    def plot_3d(self, ax: plt.Axes | None = None, figsize: tuple[int, int] = (6, 6), edgecolor: str = "k") -> plt.Axes:
        """
        Render the cube in a 3D matplotlib view.

        The cube is centred at the origin spanning [-1.5, 1.5]; U points up.

        Args:
            ax: Optional matplotlib 3D axis to plot on. If None, creates a new figure and shows it.
            figsize: Size of the figure (if created internally).
            edgecolor: Edge color for square outlines.
        """
        fig = None
        if ax is None:
            fig = plt.figure(figsize=figsize)
            ax = fig.add_subplot(111, projection="3d")

        ax.set_box_aspect([1, 1, 1])
        for f, face in enumerate(FACE_ORDER):
            for r in range(3):
                for c in range(3):
                    quad = to_plot_coords(sticker_quad(face, r, c))
                    poly = Poly3DCollection([quad])
                    poly.set_facecolor(COLOR_HEX[COLOR_ORDER[int(self._grid[f, r, c])]])
                    poly.set_edgecolor(edgecolor)
                    ax.add_collection3d(poly)

        ax.set_axis_off()
        ax.set_xlim(-1.5, 1.5)
        ax.set_ylim(-1.5, 1.5)
        ax.set_zlim(-1.5, 1.5)
        if fig is not None:
            plt.show()
        return ax
