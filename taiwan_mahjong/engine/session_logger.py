"""Session logger - records every trainer question and answer for later review."""

import json
import os
import uuid
from datetime import datetime
from typing import List, Optional

from taiwan_mahjong.engine.quiz import Question, QuizOutcome
from taiwan_mahjong.rules.fan import FanResult

LOG_DIR = os.path.join(os.path.dirname(os.path.dirname(os.path.dirname(
    os.path.abspath(__file__)))), "logs")


def _fans_data(fans) -> List[dict]:
    return [
        {"id": f.fan_id.value, "name": f.name, "points": f.points}
        for f in fans
    ]


def _question_data(question: Question) -> dict:
    return {
        "question_id": uuid.uuid4().hex[:8],
        "context": question.context.to_dict(),
        "hand": question.hand.to_dict(),
        "sheets": [
            {
                "variant": "dealer" if s.is_dealer_variant else "non_dealer",
                "fans": _fans_data(s.fans),
                "total": s.total,
            }
            for s in question.sheets
        ],
    }


class SessionLogger:
    """Records a trainer session to a JSON log file."""

    def __init__(self, mode: str, config_info: dict, log_dir: Optional[str] = None):
        self.session_id = uuid.uuid4().hex[:12]
        self.timestamp = datetime.now().isoformat()
        self.mode = mode
        self.config_info = config_info
        self.log_dir = log_dir or LOG_DIR

        self.questions: List[dict] = []
        self._current: Optional[dict] = None

        os.makedirs(self.log_dir, exist_ok=True)

    def log_question(self, question: Question):
        """Record a newly dealt question."""
        self._current = _question_data(question)
        self._current["answer"] = None
        self.questions.append(self._current)

    def log_outcome(self, outcome: QuizOutcome):
        """Attach the player's answer to the current question."""
        if self._current is None:
            return
        self._current["answer"] = {
            "guesses": list(outcome.guesses),
            "is_correct": outcome.is_correct,
        }
        self._current = None

    def log_skip(self):
        if self._current is None:
            return
        self._current["answer"] = {"skipped": True}
        self._current = None

    def save(self, correct: int, incorrect: int) -> str:
        """Save the complete session log to a JSON file."""
        log_data = {
            "session_id": self.session_id,
            "timestamp": self.timestamp,
            "mode": self.mode,
            "config": self.config_info,
            "tally": {"correct": correct, "incorrect": incorrect},
            "questions": self.questions,
        }

        filename = f"session_{self.session_id}.json"
        filepath = os.path.join(self.log_dir, filename)

        with open(filepath, "w", encoding="utf-8") as f:
            json.dump(log_data, f, ensure_ascii=False, indent=2)

        return filepath


def fan_summary(fans: List[FanResult]) -> str:
    """One-line 'name N台, ...' summary."""
    return ", ".join(f"{f.name} {f.points}台" for f in fans)
