"""Terminal front end: the text prompt loop of the original game."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import Callable, List, Optional

from dotenv import load_dotenv

from .game_session import GameSession
from .loaders import list_cases
from .models import AccusationResult, NavigationOutcome, StepResult, Verdict

Reader = Callable[[str], str]
Writer = Callable[[str], None]

_DIRECTION_KEYS = {"left": "l", "right": "r"}


def _describe_room(result: StepResult, write: Writer) -> None:
    write(f"\nYou are in: {result.location}")
    if result.clue:
        write(f"You found a clue: {result.clue}")
    else:
        write("No clue here.")


def _menu(session: GameSession) -> str:
    options = [
        f"[{_DIRECTION_KEYS[direction.value]}] {direction.value} ({name})"
        for direction, name in session.navigation.available_moves()
    ]
    options.append("[q] quit (end the exploration)")
    menu = "Options: " + " ".join(options)
    location = session.navigation.location
    if location is not None and location.is_dead_end():
        menu = "You reached a dead end. There are no more paths.\n" + menu
    return menu


def explore(session: GameSession, read: Reader = input, write: Writer = print) -> None:
    """Run the exploration loop until the player quits or input ends."""
    write("Commands: 'l' = left, 'r' = right, 'q' = quit")
    _describe_room(session.start_result, write)

    while not session.is_over:
        write(_menu(session))
        try:
            raw = read("Choice: ")
        except EOFError:
            write("Input closed. Leaving the mansion.")
            session.apply_command("quit")
            break

        result = session.apply_command(raw)
        if result.outcome is NavigationOutcome.MOVED:
            _describe_room(result, write)
        else:
            write(result.message)


def judge(
    session: GameSession,
    read: Reader = input,
    write: Writer = print,
    attempts: int = 2,
) -> Optional[AccusationResult]:
    """
    审判阶段：列出线索并请玩家指控

    A blank name is re-prompted until ``attempts`` runs out.
    """
    write("\n----- FINAL JUDGEMENT -----")
    clues = session.collected_clues()
    if not clues:
        result = session.accuse("")
        write(result.message)
        return result

    write("Collected clues (alphabetical order):")
    for clue in clues:
        write(f" - {clue}")

    for _ in range(attempts):
        try:
            name = read("\nWho do you accuse? ")
        except EOFError:
            write("Input closed. No accusation made.")
            return None

        result = session.accuse(name)
        if result.verdict is Verdict.REJECTED:
            write(result.message)
            continue

        write(f"\nClues pointing to '{result.accused}': {result.count}")
        write(result.message)
        return result

    return None


def run(session: GameSession, read: Reader = input, write: Writer = print) -> Optional[AccusationResult]:
    title = session.case.title or "Detective Quest"
    write(f"=== Welcome to {title} ===")
    if session.case.intro:
        write(session.case.intro)
    explore(session, read, write)
    result = judge(session, read, write)
    write("\nThanks for playing Detective Quest!")
    return result


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="detective-quest",
        description="Explore the mansion, collect clues and accuse the culprit.",
    )
    parser.add_argument("--case", help="case id to play (default: from config)")
    parser.add_argument(
        "--list-cases",
        action="store_true",
        help="list the available cases and exit",
    )
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    env_file = Path.cwd() / ".env"
    if env_file.exists():
        load_dotenv(env_file)

    args = build_parser().parse_args(argv)

    if args.list_cases:
        for info in list_cases():
            print(f"{info['id']:<12} {info['title']}")
        return 0

    try:
        session = GameSession.from_case(args.case)
    except (FileNotFoundError, ValueError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    run(session)
    return 0


if __name__ == "__main__":
    sys.exit(main())
