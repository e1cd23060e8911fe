'''
Author: Elia Savino
github: github.com/EliaSavino

Happy Hacking!

Descr: Interactive terminal cube. Type move tokens or sequences; q quits.

'''
#!/usr/bin/env python3
import argparse
import sys
from typing import Iterable, List, Optional

from cubetrainer.notation import InvalidMoveToken
from cubetrainer.patterns import PATTERNS, apply_pattern
from cubetrainer.trainer.narration import PrintSpeech
from cubetrainer.trainer.session import SessionConfig, TrainerSession, format_time

COMMANDS = "moves (R U' F2 M ...), undo, reset, scramble, reverse, learn, pattern <name>, timer, stats, q"


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser("Play with a virtual Rubik's cube")
    p.add_argument("--scramble", type=int, default=0, help="scramble length to start from (0 = solved)")
    p.add_argument("--seed", type=int, default=None)
    p.add_argument("--moves", type=str, default="", help="sequence applied before the prompt, e.g. \"R U R' U'\"")
    p.add_argument("--difficulty", type=str, default="beginner", choices=["beginner", "intermediate", "advanced"])
    p.add_argument("--narrate", action="store_true", help="print narration for learn mode")
    p.add_argument("--no-color", action="store_false", dest="color")
    p.add_argument("--quiet", action="store_false", dest="verbose")
    return p


def handle(session: TrainerSession, line: str, use_color: bool = True) -> bool:
    """
    Run one input line against the session.

    Returns:
        False when the user asked to quit.
    """
    value = line.strip()
    if not value:
        return True
    if value == "q":
        return False

    cube = session.cube
    if value == "undo":
        undone = cube.undo()
        print(f"undid {undone}" if undone else "nothing to undo")
    elif value == "reset":
        session.reset()
    elif value == "scramble":
        session.scramble()
    elif value == "reverse":
        print("applied:", " ".join(cube.reverse_from_history()) or "-")
    elif value == "learn":
        walk = session.walkthrough()
        while not walk.finished:
            exp = session.explain(walk)
            print(f"[{walk.progress:3d}%] {exp.explanation}")
            walk.next()
        print(session.stage_overview(walk))
    elif value.startswith("pattern"):
        name = value[len("pattern"):].strip()
        if not name:
            print("patterns:", ", ".join(PATTERNS))
            return True
        try:
            pattern = apply_pattern(cube, name)
        except ValueError as e:
            print(e)
            return True
        print(f"{pattern.name}: {pattern.description}")
    elif value == "timer":
        if session.timer_running:
            session.stop_timer()
        else:
            session.start_timer()
            print("timer started")
    elif value == "stats":
        s = session.stats
        print(f"solves={s.total_solves} best={format_time(s.best_time)} "
              f"avg={format_time(s.average_time)} scrambles={s.scramble_count}")
        return True
    else:
        try:
            solved = session.move(value)
        except InvalidMoveToken as e:
            print(f"Invalid move: {e.token!r}")
            return True
        if solved:
            print("Solved!")

    cube.print_net(use_color=use_color)
    return True


def run(argv: Optional[List[str]] = None, stdin: Optional[Iterable[str]] = None, prompt: bool = True) -> TrainerSession:
    parser = build_parser()
    args = parser.parse_args(argv)
    try:
        cfg = SessionConfig(
            scramble_length=args.scramble,
            seed=args.seed,
            difficulty=args.difficulty,
            narrate=args.narrate,
            verbose=args.verbose,
        )
    except ValueError as e:
        parser.error(str(e))
    session = TrainerSession(cfg, speech=PrintSpeech() if args.narrate else None)
    if args.scramble > 0:
        session.scramble()
    if args.moves:
        try:
            session.move(args.moves)
        except InvalidMoveToken as e:
            parser.error(f"--moves: invalid move {e.token!r}")
    session.cube.print_net(use_color=args.color)
    print(COMMANDS)

    lines: Iterable[str] = stdin if stdin is not None else sys.stdin
    for line in lines:
        if not handle(session, line, use_color=args.color):
            break
        if prompt:
            print("move:", end=" ", flush=True)
    return session


def main():
    run()


if __name__ == "__main__":
    main()
