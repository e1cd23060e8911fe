"""
Author: Elia Savino
github: github.com/EliaSavino

Happy Hacking!

Descr: Practice session: one cube, a solve timer, running solve statistics,
and the narration collaborators wired in explicitly.

"""
from __future__ import annotations

import random
import time
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, Optional

import pandas as pd

from cubetrainer.cube import CubeEngine
from cubetrainer.trainer.narration import (
    DIFFICULTIES,
    Explainer,
    MoveExplanation,
    SilentSpeech,
    SpeechSink,
    TemplateExplainer,
)
from cubetrainer.trainer.walkthrough import Walkthrough, reversal_steps


@dataclass
class SessionConfig:
    """
    Configuration for a TrainerSession.

    Key ideas:
    - Scrambles are reproducible when `seed` is set: every scramble draws its
      own seed from one session RNG.
    - `verbose` gates the progress lines printed by the session.
    """

    scramble_length: int = 20
    # Quarter turns per scramble.

    seed: Optional[int] = None
    # Session RNG seed; None → fresh randomness every run.

    difficulty: str = "beginner"
    # Register of the explanations: beginner / intermediate / advanced.

    stage_size: int = 4
    # Moves per stage when building a walkthrough from the history.

    narrate: bool = False
    # Send explanations to the speech sink.

    verbose: bool = True
    # Print session events (scramble, solve, fallbacks).

    def __post_init__(self):
        if self.scramble_length < 0:
            raise ValueError(f"'scramble_length' must be >= 0, got {self.scramble_length}")
        if self.difficulty not in DIFFICULTIES:
            raise ValueError(f"'difficulty' must be one of {DIFFICULTIES}, got {self.difficulty!r}")
        if self.stage_size <= 0:
            raise ValueError(f"'stage_size' must be > 0, got {self.stage_size}")


@dataclass
class SolveStats:
    """
    Running solve statistics, kept in memory.

    Attributes:
        total_solves: Number of recorded solves.
        average_time: Mean solve time in seconds (0 before the first solve).
        best_time: Fastest solve in seconds (0 before the first solve).
        scramble_count: Number of scrambles performed.
        log: One row per solve: solve, seconds, moves.
    """
    total_solves: int = 0
    average_time: float = 0.0
    best_time: float = 0.0
    scramble_count: int = 0
    log: pd.DataFrame = field(default_factory=lambda: pd.DataFrame(columns=["solve", "seconds", "moves"]))

    def record_solve(self, seconds: float, moves: int = 0) -> None:
        if seconds < 0:
            raise ValueError(f"'seconds' must be >= 0, got {seconds}")
        n = self.total_solves
        self.total_solves = n + 1
        self.best_time = seconds if n == 0 else min(self.best_time, seconds)
        self.average_time = (self.average_time * n + seconds) / self.total_solves
        self.log.loc[n] = [n + 1, float(seconds), int(moves)]

    def to_dict(self) -> Dict[str, Any]:
        return {
            "totalSolves": self.total_solves,
            "averageTime": self.average_time,
            "bestTime": self.best_time,
            "scrambleCount": self.scramble_count,
        }


def format_time(seconds: float) -> str:
    """Seconds -> 'MM:SS.cc'."""
    centis = int(round(seconds * 100))
    minutes, rest = divmod(centis, 6000)
    secs, cs = divmod(rest, 100)
    return f"{minutes:02d}:{secs:02d}.{cs:02d}"


class TrainerSession:
    """
    One practice cube plus timer, stats and narration.

    Parameters
    ----------
    config : SessionConfig, optional
    explainer : Explainer, optional
        Defaults to TemplateExplainer.
    speech : SpeechSink, optional
        Defaults to SilentSpeech.
    clock : Callable[[], float], default=time.perf_counter
        Monotonic seconds, injectable for tests.

    Notes
    -----
    - When the timer runs and a move leaves the cube solved, the timer stops
      and the solve is recorded.
    """

    def __init__(
        self,
        config: SessionConfig | None = None,
        explainer: Explainer | None = None,
        speech: SpeechSink | None = None,
        clock: Callable[[], float] = time.perf_counter,
    ) -> None:
        self.cfg = config or SessionConfig()
        self.explainer: Explainer = explainer or TemplateExplainer()
        self.fallback_explainer = TemplateExplainer()
        self.speech: SpeechSink = speech or SilentSpeech()
        self.clock = clock
        self.cube = CubeEngine()
        self.stats = SolveStats()
        self._rng = random.Random(self.cfg.seed)
        self._t0: Optional[float] = None

    def _log(self, msg: str) -> None:
        if self.cfg.verbose:
            print(msg)

    # ---------- cube ----------
    def scramble(self):
        self.cube.reset()
        moves = self.cube.scramble(self.cfg.scramble_length, seed=self._rng.randrange(2**32))
        self.stats.scramble_count += 1
        self._t0 = None
        self._log(f"Scramble #{self.stats.scramble_count}: {' '.join(moves)}")
        return moves

    def reset(self) -> None:
        self.cube.reset()
        self._t0 = None

    def move(self, token: str) -> bool:
        """
        Apply ``token`` to the session cube.

        Returns:
            True if the cube is solved afterwards.
        """
        self.cube.apply_move(token)
        solved = self.cube.is_solved()
        if solved and self.timer_running:
            self.stop_timer()
        return solved

    # ---------- timer ----------
    @property
    def timer_running(self) -> bool:
        return self._t0 is not None

    @property
    def elapsed(self) -> float:
        return 0.0 if self._t0 is None else self.clock() - self._t0

    def start_timer(self) -> None:
        self._t0 = self.clock()

    def stop_timer(self) -> float:
        """Stop the timer and record the solve; returns its duration in seconds."""
        if self._t0 is None:
            raise RuntimeError("Timer is not running")
        seconds = self.clock() - self._t0
        self._t0 = None
        hist = self.cube.get_history()
        moves = int((hist["phase"] == "solve").sum())
        self.stats.record_solve(seconds, moves)
        self._log(f"Solve #{self.stats.total_solves}: {format_time(seconds)} in {moves} moves "
                  f"| best {format_time(self.stats.best_time)} | avg {format_time(self.stats.average_time)}")
        return seconds

    # ---------- learn mode ----------
    def walkthrough(self) -> Walkthrough:
        """Walkthrough of the reversal of the current history, on a copy of the cube."""
        return Walkthrough(self.cube, reversal_steps(self.cube, self.cfg.stage_size))

    def explain(self, walk: Walkthrough) -> Optional[MoveExplanation]:
        """
        Explain the walkthrough's current move, narrating it if configured.

        Falls back to the template explainer when the configured explainer is
        not configured or raises.

        Returns:
            The explanation, or None when the walkthrough is finished.
        """
        move = walk.current_move
        if move is None:
            return None
        args = dict(
            move=move,
            stage=walk.current_step.stage,
            state_summary=walk.cube.face_summary(),
            move_index=walk.move_index,
            total_moves=len(walk.current_step.moves),
            previous_moves=walk.previous_moves(),
            difficulty=self.cfg.difficulty,
        )
        explainer = self.explainer if self.explainer.is_configured() else self.fallback_explainer
        try:
            explanation = explainer.explain_move(**args)
        except Exception as e:
            self._log(f"  ! Explainer failed ({e}); using template explanation.")
            explanation = self.fallback_explainer.explain_move(**args)

        if self.cfg.narrate:
            self.speech.speak(explanation.explanation)
        return explanation

    def stage_overview(self, walk: Walkthrough) -> str:
        step = walk.current_step
        explainer = self.explainer if self.explainer.is_configured() else self.fallback_explainer
        try:
            return explainer.stage_overview(step.stage, step.moves)
        except Exception as e:
            self._log(f"  ! Stage overview failed ({e}); using template overview.")
            return self.fallback_explainer.stage_overview(step.stage, step.moves)
