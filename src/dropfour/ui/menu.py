from __future__ import annotations

import time
from typing import Callable

from dropfour.ai.pick import DIFFICULTIES, difficulty_description, make_agent
from dropfour.game.controller import run_game
from dropfour.types import Difficulty
from dropfour.ui.human import HumanAgent
from dropfour.ui.prompts import parse_difficulty


def ask_difficulty(read_input: Callable[[str], str] = input) -> Difficulty:
    print("\nSelect difficulty:")
    for i, d in enumerate(DIFFICULTIES, start=1):
        print(f"{i}) {d.title():<7} {difficulty_description(d)}")
    while True:
        try:
            return parse_difficulty(read_input("Difficulty (default medium): "))
        except ValueError as e:
            print(e)


def run_menu(read_input: Callable[[str], str] = input) -> None:
    print("Select mode:")
    print("1) Human vs Human")
    print("2) Human vs AI")
    print("3) Run AI arena (all difficulties)")

    choice = read_input("Choice: ").strip()

    if choice == "1":
        print("\nStarting game: Human vs Human\n")
        time.sleep(1)
        run_game(HumanAgent(), HumanAgent(), read_input=read_input)
        return

    if choice == "2":
        difficulty = ask_difficulty(read_input)
        ai = make_agent(difficulty)
        first = read_input("Play first? [Y/n]: ").strip().lower()
        print(f"\nStarting game: Human vs {ai.name}\n")
        time.sleep(1)
        if first in {"n", "no"}:
            run_game(ai, HumanAgent(), read_input=read_input)
        else:
            run_game(HumanAgent(), ai, read_input=read_input)
        return

    if choice == "3":
        from dropfour.scripts.arena import main as arena_main
        arena_main([])
        return

    print("\nInvalid choice. Defaulting to Human vs Human.\n")
    time.sleep(1)
    run_game(HumanAgent(), HumanAgent(), read_input=read_input)
