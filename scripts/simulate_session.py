"""
Play one game session against a generated in-memory catalog.
Run: python scripts/simulate_session.py --seed 7 --cash-out-at 6
"""

from __future__ import annotations

import argparse
import random
import sys
from datetime import datetime, timedelta, timezone
from pathlib import Path

import structlog

sys.path.insert(0, str(Path(__file__).parent.parent))

from millionaire.core.logging import configure_logging  # noqa: E402
from millionaire.game.hints.types import HintKind  # noqa: E402
from millionaire.game.questions.bank import InMemoryCatalog, QuestionBank  # noqa: E402
from millionaire.game.questions.types import Question  # noqa: E402
from millionaire.game.sessions.config import EngineConfig  # noqa: E402
from millionaire.game.sessions.rules import (  # noqa: E402
    answer_current_question,
    new_session,
    request_hint,
    resolve_status,
    take_money,
)
from millionaire.game.sessions.types import LETTERS, SessionStatus  # noqa: E402

UTC = timezone.utc
logger = structlog.get_logger("millionaire.scripts.simulate_session")


def _generated_catalog(levels: int, per_level: int) -> InMemoryCatalog:
    questions = []
    for level in range(levels):
        for index in range(per_level):
            question_id = level * 100 + index
            questions.append(
                Question(
                    question_id=question_id,
                    level=level,
                    text=f"Question {question_id} (level {level + 1})",
                    options=("first", "second", "third", "fourth"),
                    correct_option=(level + index) % 4,
                )
            )
    return InMemoryCatalog(questions)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Simulate a money-ladder game session.")
    parser.add_argument("--seed", type=int, default=None)
    parser.add_argument("--accuracy", type=float, default=0.85, help="chance of answering correctly")
    parser.add_argument("--cash-out-at", type=int, default=None, help="take the money at this level")
    parser.add_argument("--hints", action="store_true", help="use every hint on the first question")
    parser.add_argument("--log-level", default="INFO")
    args = parser.parse_args(argv)

    configure_logging(args.log_level, json_output=False)
    rng = random.Random(args.seed)
    config = EngineConfig(rng=rng)
    bank = QuestionBank(_generated_catalog(config.prize_table.levels_count, per_level=3), rng=rng)

    now_utc = datetime.now(UTC)
    snapshot = new_session(
        user_id=1,
        questions=bank.pick_questions_for_session(max_level=config.max_level),
        started_at=now_utc,
        config=config,
    )

    if args.hints:
        for kind in HintKind:
            snapshot, payload = request_hint(snapshot, kind, config=config)
            logger.info("simulated_hint", hint_kind=kind.value, payload=payload)

    while resolve_status(snapshot, config=config) is SessionStatus.IN_PROGRESS:
        now_utc += timedelta(seconds=30)
        if args.cash_out_at is not None and snapshot.current_level >= args.cash_out_at:
            snapshot = take_money(snapshot, now_utc=now_utc, config=config)
            break
        question = snapshot.questions[snapshot.current_level]
        if rng.random() < args.accuracy:
            letter = question.correct_letter
        else:
            letter = rng.choice([item for item in LETTERS if item != question.correct_letter])
        logger.info("simulated_answer", level=snapshot.current_level, letter=letter)
        snapshot = answer_current_question(snapshot, letter, now_utc=now_utc, config=config)

    logger.info(
        "simulated_session_finished",
        status=resolve_status(snapshot, config=config).value,
        current_level=snapshot.current_level,
        prize=snapshot.prize,
    )
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
