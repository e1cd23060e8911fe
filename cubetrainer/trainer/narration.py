"""
Author: Elia Savino
github: github.com/EliaSavino

Happy Hacking!

Descr: Narration collaborators. An Explainer turns (move, stage, state
summary) into tutoring text, a SpeechSink reads text out. Both are passed in
explicitly; the template/print implementations here work offline.

"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Protocol, Sequence, runtime_checkable

from cubetrainer.notation import describe_move, parse_move
from cubetrainer.stickers import FACE_NAMES

DIFFICULTIES = ("beginner", "intermediate", "advanced")


@dataclass
class MoveExplanation:
    explanation: str
    tips: List[str] = field(default_factory=list)
    visual_cues: List[str] = field(default_factory=list)


@runtime_checkable
class Explainer(Protocol):
    """
    Minimal interface for move explainers (template, LLM-backed, ...).

    Implementations must provide:
    - ``is_configured() -> bool``
    - ``explain_move(...) -> MoveExplanation`` for one move of a stage.
    - ``stage_overview(stage, moves) -> str`` one-sentence stage summary.
    """

    def is_configured(self) -> bool:
        ...

    def explain_move(
        self,
        move: str,
        stage: str,
        state_summary: str,
        move_index: int,
        total_moves: int,
        previous_moves: Sequence[str],
        difficulty: str = "beginner",
    ) -> MoveExplanation:
        ...

    def stage_overview(self, stage: str, moves: Sequence[str]) -> str:
        ...


@runtime_checkable
class SpeechSink(Protocol):
    """Anything that can read text out and be interrupted."""

    def speak(self, text: str) -> None:
        ...

    def stop(self) -> None:
        ...


class TemplateExplainer(Explainer):
    """
    Offline explainer built from the move grammar alone.

    The text is deterministic: the same arguments always give the same
    explanation, which keeps it usable in tests and as a fallback when a
    remote explainer fails.
    """

    def is_configured(self) -> bool:
        return True

    def explain_move(
        self,
        move: str,
        stage: str,
        state_summary: str,
        move_index: int,
        total_moves: int,
        previous_moves: Sequence[str],
        difficulty: str = "beginner",
    ) -> MoveExplanation:
        if difficulty not in DIFFICULTIES:
            raise ValueError(f"'difficulty' must be one of {DIFFICULTIES}, got {difficulty!r}")
        token = parse_move(move)
        reading = describe_move(move)

        if difficulty == "beginner":
            text = (f"Move {move_index + 1} of {total_moves} in '{stage}': {move}. "
                    f"Turn the {reading}.")
        elif difficulty == "intermediate":
            text = f"{move} ({reading}), move {move_index + 1}/{total_moves} of {stage}."
        else:
            text = f"{stage}: {move}."

        tips = []
        if token.suffix == "'":
            tips.append("A prime (') means counter-clockwise, looking straight at that face.")
        elif token.suffix == "2":
            tips.append("A 2 means a half turn; direction does not matter.")
        else:
            tips.append("No suffix means clockwise, looking straight at that face.")
        if previous_moves and parse_move(previous_moves[-1]).layer == token.layer:
            tips.append(f"Same layer as the previous move ({previous_moves[-1]}); keep your grip.")

        cues = []
        if token.is_slice:
            cues.append("The middle layer stays put; both outer layers turn against it.")
        else:
            cues.append(f"Watch the {FACE_NAMES[token.layer]} face centre: it never moves.")
        if state_summary:
            cues.append(state_summary.split(", ")[0])

        return MoveExplanation(explanation=text, tips=tips, visual_cues=cues)

    def stage_overview(self, stage: str, moves: Sequence[str]) -> str:
        if not moves:
            return f"{stage}: nothing to do."
        return f"{stage}: {len(moves)} move{'s' if len(moves) != 1 else ''}, {' '.join(moves)}."


class PrintSpeech(SpeechSink):
    """
    Speech sink that prints what it would say.

    New speech cuts off the previous utterance; every cut is counted in
    `interruptions`.
    """

    def __init__(self, prefix: str = "🔊 "):
        self.prefix = prefix
        self.spoken: List[str] = []
        self.interruptions: int = 0
        self._speaking = False

    def speak(self, text: str) -> None:
        self.stop()
        self.spoken.append(text)
        self._speaking = True
        print(f"{self.prefix}{text}")

    def stop(self) -> None:
        if self._speaking:
            self.interruptions += 1
        self._speaking = False


class SilentSpeech(SpeechSink):
    """Speech sink that discards everything."""

    def speak(self, text: str) -> None:
        pass

    def stop(self) -> None:
        pass
