"""Quiz session: deal a scored hand, check the player's 台 guess, keep the tally."""

import logging
import random
from dataclasses import dataclass
from typing import List, Optional

from taiwan_mahjong.core.hand import Hand
from taiwan_mahjong.core.table import TableContext
from taiwan_mahjong.engine.generator import GeneratorConfig, synthesize_context, synthesize_hand
from taiwan_mahjong.rules.scoring import evaluate

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Question:
    """One hand to score, with its answer sheets."""
    hand: Hand
    context: TableContext
    sheets: tuple  # (ScoreSheet,) or (dealer ScoreSheet, non-dealer ScoreSheet)

    @property
    def is_split(self) -> bool:
        return len(self.sheets) == 2

    @property
    def answers(self) -> List[int]:
        return [s.total for s in self.sheets]


@dataclass(frozen=True)
class QuizOutcome:
    question: Question
    guesses: tuple
    is_correct: bool


class QuizSession:
    """Holds the current question and the correct / incorrect tally.

    Attributes:
        config: Generator probabilities for new hands
        rng: Random source shared by all questions
        correct: Number of correctly answered questions
        incorrect: Number of wrongly answered questions
        current: Question being asked (None before the first one)
        answered: Whether the current question has been answered
    """

    def __init__(self, config: Optional[GeneratorConfig] = None,
                 rng: Optional[random.Random] = None):
        self.config = config or GeneratorConfig()
        self.rng = rng or random.Random()
        self.correct = 0
        self.incorrect = 0
        self.current: Optional[Question] = None
        self.answered = False
        self.history: List[QuizOutcome] = []

    def next_question(self) -> Question:
        """Deal a new hand and table situation and score it."""
        context = synthesize_context(self.rng)
        hand = synthesize_hand(self.config, self.rng)
        return self.ask(hand, context)

    def ask(self, hand: Hand, context: TableContext) -> Question:
        """Make the given hand the current question."""
        self.current = Question(hand, context, tuple(evaluate(hand, context)))
        self.answered = False
        logger.debug("new question: %s points (split=%s)",
                     self.current.answers, self.current.is_split)
        return self.current

    def skip(self) -> Question:
        """Move on without touching the tally."""
        return self.next_question()

    def submit(self, guess: int) -> QuizOutcome:
        """Answer a single-total question."""
        question = self._require_open()
        if question.is_split:
            raise ValueError("this hand needs separate dealer and non-dealer totals")
        return self._record(question, (guess,))

    def submit_split(self, dealer_guess: int, non_dealer_guess: int) -> QuizOutcome:
        """Answer a non-dealer self-draw: totals paid by the dealer and by the others."""
        question = self._require_open()
        if not question.is_split:
            raise ValueError("this hand has a single total")
        return self._record(question, (dealer_guess, non_dealer_guess))

    @property
    def answered_count(self) -> int:
        return self.correct + self.incorrect

    def _require_open(self) -> Question:
        if self.current is None:
            raise RuntimeError("no question has been dealt")
        if self.answered:
            raise RuntimeError("the current question was already answered")
        return self.current

    def _record(self, question: Question, guesses: tuple) -> QuizOutcome:
        is_correct = list(guesses) == question.answers
        if is_correct:
            self.correct += 1
        else:
            self.incorrect += 1
        self.answered = True
        outcome = QuizOutcome(question, guesses, is_correct)
        self.history.append(outcome)
        return outcome

