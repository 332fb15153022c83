from __future__ import annotations

import random

import pytest

from millionaire.game.hints.generator import (
    apply_hint,
    audience_help,
    fifty_fifty,
    friend_call,
    generate_hint,
)
from millionaire.game.hints.personas import DEFAULT_PERSONA_NAMES, PersonaNames, parse_persona_names
from millionaire.game.hints.types import HintData, HintKind, parse_hint_kind
from millionaire.game.sessions.config import EngineConfig
from millionaire.game.sessions.errors import UnknownHintKindError
from millionaire.game.sessions.types import LETTERS, SessionQuestion
from tests.game.engine_fixtures import FixedPersona, FixedRoll, make_question

KEYS = ["key1", "key2", "key3", "key4"]


def _session_question(permutation: tuple[int, int, int, int] = (2, 0, 3, 1)) -> SessionQuestion:
    return SessionQuestion(level=4, question=make_question(4, correct_option=0), permutation=permutation)


def test_friend_call_names_correct_key_on_low_roll() -> None:
    message = friend_call(
        KEYS,
        "key1",
        rng=FixedRoll(70),
        persona_source=FixedPersona(),
        confidence=75,
    )

    assert message == "Default Friend считает, что это вариант KEY1"


def test_friend_call_names_wrong_key_on_high_roll() -> None:
    message = friend_call(
        KEYS,
        "key1",
        rng=FixedRoll(90),
        persona_source=FixedPersona(),
        confidence=75,
    )

    assert message.startswith("Default Friend считает, что это вариант KEY")
    assert message[-4:] in {"KEY2", "KEY3", "KEY4"}


def test_friend_call_threshold_is_strict() -> None:
    right = friend_call(KEYS, "key1", rng=FixedRoll(74), persona_source=FixedPersona(), confidence=75)
    wrong = friend_call(KEYS, "key1", rng=FixedRoll(75), persona_source=FixedPersona(), confidence=75)

    assert right.endswith("KEY1")
    assert not wrong.endswith("KEY1")


def test_fifty_fifty_keeps_correct_and_one_wrong_sorted() -> None:
    session_question = _session_question()
    rng = random.Random(3)

    for _ in range(30):
        pair = fifty_fifty(session_question, rng=rng)

        assert len(pair) == 2
        assert session_question.correct_letter in pair
        assert list(pair) == sorted(pair)
        assert pair[0] != pair[1]


def test_audience_help_favours_correct_letter() -> None:
    session_question = _session_question()
    rng = random.Random(5)

    for _ in range(30):
        votes = audience_help(session_question, rng=rng)

        assert set(votes) == set(LETTERS)
        assert all(0 <= percent <= 100 for percent in votes.values())
        assert sum(votes.values()) <= 100
        correct = votes[session_question.correct_letter]
        assert all(correct >= percent for percent in votes.values())


def test_generate_hint_friend_call_uses_config_personas() -> None:
    config = EngineConfig(rng=FixedRoll(0), persona_source=FixedPersona("Бабушка Зина"))
    session_question = _session_question(permutation=(0, 1, 2, 3))

    payload = generate_hint(session_question, HintKind.FRIEND_CALL, config=config)

    assert payload == "Бабушка Зина считает, что это вариант A"


def test_apply_hint_returns_stored_payload_on_repeat() -> None:
    config = EngineConfig(rng=random.Random(9), persona_source=FixedPersona())
    session_question = _session_question()

    hinted, first = apply_hint(session_question, HintKind.AUDIENCE_HELP, config=config)
    again, second = apply_hint(hinted, HintKind.AUDIENCE_HELP, config=config)

    assert first == second
    assert again is hinted
    assert hinted.hint_data.get(HintKind.AUDIENCE_HELP) == first


@pytest.mark.parametrize("raw", ["fifty_fifty", "Audience_Help", " friend_call "])
def test_parse_hint_kind_accepts_known_names(raw: str) -> None:
    assert parse_hint_kind(raw).value == raw.strip().lower()


def test_parse_hint_kind_rejects_unknown_name() -> None:
    with pytest.raises(UnknownHintKindError):
        parse_hint_kind("phone_a_stranger")


def test_persona_names_parsing_falls_back_to_defaults() -> None:
    assert parse_persona_names("") == DEFAULT_PERSONA_NAMES
    assert parse_persona_names(" Ann , ,Bob ") == ("Ann", "Bob")

    personas = PersonaNames(["Ann"], rng=random.Random(1))
    assert personas.random_persona_name() == "Ann"

    with pytest.raises(ValueError):
        PersonaNames([" "], rng=random.Random(1))


def test_audience_payload_copies_do_not_leak_into_stored_hint() -> None:
    config = EngineConfig(rng=random.Random(9), persona_source=FixedPersona())
    hinted, payload = apply_hint(_session_question(), HintKind.AUDIENCE_HELP, config=config)
    stored = hinted.hint_data.get(HintKind.AUDIENCE_HELP)

    payload["a"] = 999
    stored["b"] = 999
    _, cached = apply_hint(hinted, HintKind.AUDIENCE_HELP, config=config)
    cached["c"] = 999

    assert hinted.hint_data.get(HintKind.AUDIENCE_HELP) not in (payload, stored, cached)
    assert all(percent <= 100 for percent in hinted.hint_data.get(HintKind.AUDIENCE_HELP).values())


def test_session_question_with_audience_hint_is_hashable() -> None:
    config = EngineConfig(rng=random.Random(9), persona_source=FixedPersona())
    hinted, _ = apply_hint(_session_question(), HintKind.AUDIENCE_HELP, config=config)
    twin = SessionQuestion(
        level=hinted.level,
        question=hinted.question,
        permutation=hinted.permutation,
        hint_data=HintData.from_dict(hinted.hint_data.to_dict()),
    )

    assert hash(hinted) == hash(twin)
    assert {hinted, twin} == {hinted}
