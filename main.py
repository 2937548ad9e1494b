#!/usr/bin/env python3
"""Taiwanese 16-tile Mahjong - Terminal scoring trainer"""

import argparse
import logging
import random

from rich.console import Console
from rich.panel import Panel

from taiwan_mahjong.engine.quiz import QuizSession
from taiwan_mahjong.engine.session_logger import SessionLogger, fan_summary
from taiwan_mahjong.ui.i18n import SUPPORTED_LANGUAGES, set_language, t
from taiwan_mahjong.ui.renderer import render_question, render_sheets

console = Console()
logger = logging.getLogger(__name__)

MODES = ("quiz", "answer")


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="Taiwanese Mahjong scoring trainer")
    parser.add_argument("--lang", choices=SUPPORTED_LANGUAGES, default="zh",
                        help="display language (default: zh)")
    parser.add_argument("--seed", type=int, default=None,
                        help="random seed for reproducible hands")
    parser.add_argument("--mode", choices=MODES, default=None,
                        help="start directly in this mode and skip the menu")
    parser.add_argument("--no-log", action="store_true",
                        help="do not write a session log to logs/")
    parser.add_argument("-v", "--verbose", action="store_true",
                        help="show diagnostic logging")
    return parser.parse_args(argv)


def change_language():
    """Show language selection submenu."""
    console.print(f"\n  {t('lang.select')}")
    console.print(f"    1. {t('lang.zh')}")
    console.print(f"    2. {t('lang.en')}")
    console.print()

    while True:
        try:
            choice = int(console.input("  > 1/2: ").strip())
            if choice == 1:
                set_language("zh")
                return
            elif choice == 2:
                set_language("en")
                return
        except ValueError:
            pass
        console.print("  [red]Invalid / 無效[/red]")


def show_menu() -> int:
    """Show mode selection menu and return choice."""
    console.print()
    console.print(Panel(
        f"[bold cyan]{t('label.title')}[/bold cyan]\n"
        f"[dim]{t('label.subtitle')}[/dim]",
        border_style="cyan",
        padding=(1, 4),
    ))
    console.print()
    console.print(f"  {t('mode.select')}")
    console.print(f"    1. {t('mode.quiz')}")
    console.print(f"    2. {t('mode.answer')}")
    console.print(f"    3. {t('mode.language')}")
    console.print(f"    0. {t('mode.quit')}")
    console.print()

    while True:
        try:
            choice = int(console.input(f"  > {t('prompt.choose', n=3)} ").strip())
            if 0 <= choice <= 3:
                return choice
        except ValueError:
            pass
        console.print(f"  [red]{t('prompt.invalid_input')}[/red]")


def ask_guess(prompt: str):
    """Read a 台 total; returns an int, or 's' (skip) / 'q' (quit)."""
    while True:
        raw = console.input(f"  > {prompt} ").strip().lower()
        if raw in ("s", "q"):
            return raw
        try:
            value = int(raw)
            if value >= 0:
                return value
        except ValueError:
            pass
        console.print(f"  [red]{t('prompt.invalid_input')}[/red]")


def _quiz_answer(session: QuizSession, question):
    """Ask for the total(s) of the current question. Returns the outcome or 's' / 'q'."""
    if question.is_split:
        console.print(f"  [yellow]{t('msg.split_hint')}[/yellow]")
        dealer_guess = ask_guess(t("prompt.guess_dealer"))
        if isinstance(dealer_guess, str):
            return dealer_guess
        others_guess = ask_guess(t("prompt.guess_non_dealer"))
        if isinstance(others_guess, str):
            return others_guess
        return session.submit_split(dealer_guess, others_guess)

    guess = ask_guess(t("prompt.guess"))
    if isinstance(guess, str):
        return guess
    return session.submit(guess)


def run_session(mode: str, rng: random.Random, write_log: bool = True):
    """Deal hands until the player quits."""
    session = QuizSession(rng=rng)
    session_log = None
    if write_log:
        session_log = SessionLogger(mode, dict(vars(session.config)))
        logger.info("session %s started (%s mode)", session_log.session_id, mode)

    question = session.next_question()
    while True:
        if session_log:
            session_log.log_question(question)
        logger.debug("answer: %s", " | ".join(fan_summary(s.fans) for s in question.sheets))
        render_question(console, question.hand, question.context)

        if mode == "quiz":
            outcome = _quiz_answer(session, question)
            if outcome == "q":
                break
            if outcome == "s":
                if session_log:
                    session_log.log_skip()
                console.print(f"  [dim]{t('msg.skipped')}[/dim]")
                question = session.skip()
                continue
            if outcome.is_correct:
                console.print(f"  [bold green]{t('msg.correct')}[/bold green]")
            else:
                console.print(f"  [bold red]{t('msg.incorrect')}[/bold red]")
            if session_log:
                session_log.log_outcome(outcome)

        render_sheets(console, question.sheets)
        if mode == "quiz":
            console.print(f"  {t('msg.tally', correct=session.correct, incorrect=session.incorrect)}")

        choice = console.input(f"  > {t('prompt.next')} ").strip().lower()
        if choice == "q":
            break
        if choice == "s":
            console.print(f"  [dim]{t('msg.skipped')}[/dim]")
            question = session.skip()
        else:
            question = session.next_question()

    if session_log:
        log_path = session_log.save(session.correct, session.incorrect)
        logger.info("session %s saved to %s", session_log.session_id, log_path)
        console.print(f"  [dim]{t('msg.log_saved', path=log_path)}[/dim]")


def main(argv=None):
    """Main entry point."""
    args = parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(name)s %(levelname)s: %(message)s",
    )
    rng = random.Random(args.seed)

    try:
        set_language(args.lang)
        if args.mode:
            run_session(args.mode, rng, write_log=not args.no_log)
            console.print(f"\n  {t('msg.goodbye')}\n")
            return
        while True:
            choice = show_menu()
            if choice == 0:
                console.print(f"\n  {t('msg.goodbye')}\n")
                break
            elif choice == 3:
                change_language()
                continue
            run_session(MODES[choice - 1], rng, write_log=not args.no_log)
            console.print()
    except KeyboardInterrupt:
        console.print(f"\n\n  [dim]{t('msg.exit')}[/dim]\n")
    except EOFError:
        console.print(f"\n\n  [dim]{t('msg.exit')}[/dim]\n")


if __name__ == "__main__":
    main()
