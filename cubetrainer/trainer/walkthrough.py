"""
Author: Elia Savino
github: github.com/EliaSavino

Happy Hacking!

Descr: Step-by-step walkthrough of a staged move list, replayed on a copy of
the cube so the source engine is never touched.

"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional, Sequence, Tuple

from cubetrainer.cube import CubeEngine
from cubetrainer.notation import parse_move


@dataclass
class SolveStep:
    """A named stage and the moves that belong to it."""
    stage: str
    moves: List[str] = field(default_factory=list)
    explanation: str = ""


def reversal_steps(cube: CubeEngine, stage_size: int = 4) -> List[SolveStep]:
    """
    Stages that walk ``cube`` back along its recorded history.

    The inverse of the history is computed on a copy and cut into stages of
    ``stage_size`` moves. With an empty history a single 'Solved' stage with
    no moves is returned.
    """
    if stage_size <= 0:
        raise ValueError(f"'stage_size' must be > 0, got {stage_size}")
    inverse = cube.copy().reverse_from_history()
    if not inverse:
        return [SolveStep("Solved", [], "The cube is already solved!")]

    steps = []
    for start in range(0, len(inverse), stage_size):
        chunk = inverse[start:start + stage_size]
        first, last = start + 1, start + len(chunk)
        steps.append(SolveStep(
            stage=f"Undo moves {first}-{last}" if last > first else f"Undo move {first}",
            moves=chunk,
            explanation=f"Undo {len(chunk)} move{'s' if len(chunk) > 1 else ''}: {' '.join(chunk)}",
        ))
    return steps


class Walkthrough:
    """
    Replays ``steps`` one move at a time on a private copy of ``cube``.

    Parameters
    ----------
    cube : CubeEngine
        Start state. Copied on construction; never mutated.
    steps : Sequence[SolveStep]
        Stages to walk through, in order. At least one stage.

    Notes
    -----
    - ``position`` counts the moves already applied to ``self.cube`` (0..total_moves).
    - ``prev()`` and ``seek()`` rebuild from a fresh copy of the start state
      rather than applying inverse moves.

    Examples
    --------
    >>> c = CubeEngine(); _ = c.scramble(6, seed=1)
    >>> w = Walkthrough(c, reversal_steps(c))
    >>> while not w.finished:
    ...     _ = w.next()
    >>> w.cube.is_solved()
    True
    """

    def __init__(self, cube: CubeEngine, steps: Sequence[SolveStep]) -> None:
        if not steps:
            raise ValueError("'steps' must contain at least one stage")
        for step in steps:
            for m in step.moves:
                parse_move(m)
        self._start: CubeEngine = cube.copy()
        self.cube: CubeEngine = cube.copy()
        self.steps: List[SolveStep] = list(steps)
        # (stage index, move index within stage, token)
        self._flat: List[Tuple[int, int, str]] = [
            (si, mi, m) for si, step in enumerate(self.steps) for mi, m in enumerate(step.moves)
        ]
        self.position: int = 0

    @property
    def total_moves(self) -> int:
        return len(self._flat)

    @property
    def finished(self) -> bool:
        return self.position >= self.total_moves

    @property
    def stage_index(self) -> int:
        if not self._flat:
            return 0
        if self.finished:
            return self._flat[-1][0]
        return self._flat[self.position][0]

    @property
    def current_step(self) -> SolveStep:
        return self.steps[self.stage_index]

    @property
    def current_move(self) -> Optional[str]:
        """The move ``next()`` will apply, or None when finished."""
        if self.finished:
            return None
        return self._flat[self.position][2]

    @property
    def move_index(self) -> int:
        """Index of the current move inside its stage."""
        if self.finished:
            return len(self.current_step.moves)
        return self._flat[self.position][1]

    @property
    def move_number(self) -> int:
        """1-based number of the current move across all stages."""
        return min(self.position + 1, self.total_moves)

    @property
    def progress(self) -> int:
        """Percentage of moves applied, 0-100."""
        if self.total_moves == 0:
            return 100
        return round(100 * self.position / self.total_moves)

    def previous_moves(self) -> List[str]:
        return [m for _, _, m in self._flat[:self.position]]

    def next(self) -> Optional[str]:
        """
        Apply the current move to the walkthrough cube and advance.

        Returns:
            The applied token, or None when already finished.
        """
        move = self.current_move
        if move is None:
            return None
        self.cube.apply_move(move)
        self.position += 1
        return move

    def prev(self) -> Optional[str]:
        """
        Step back one move.

        Returns:
            The token that was taken back, or None at the start.
        """
        if self.position == 0:
            return None
        move = self._flat[self.position - 1][2]
        self.seek(self.position - 1)
        return move

    def seek(self, position: int) -> None:
        """Rebuild the walkthrough cube with the first ``position`` moves applied."""
        if not 0 <= position <= self.total_moves:
            raise ValueError(f"'position' must be in [0, {self.total_moves}], got {position}")
        cube = self._start.copy()
        for _, _, m in self._flat[:position]:
            cube.apply_move(m)
        self.cube = cube
        self.position = position
