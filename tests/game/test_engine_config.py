from __future__ import annotations

import random
from datetime import timedelta

import pytest

from millionaire.core.config import Settings
from millionaire.game.hints.personas import DEFAULT_PERSONA_NAMES, PersonaNames
from millionaire.game.prizes import PrizeTable
from millionaire.game.sessions.config import EngineConfig


def test_defaults_match_classic_rules() -> None:
    config = EngineConfig()

    assert config.time_limit == timedelta(minutes=35)
    assert config.friend_call_confidence == 75
    assert config.max_level == 14
    assert isinstance(config.personas, PersonaNames)
    assert config.personas.names == DEFAULT_PERSONA_NAMES


@pytest.mark.parametrize("confidence", [-1, 101])
def test_confidence_out_of_range_is_rejected(confidence: int) -> None:
    with pytest.raises(ValueError):
        EngineConfig(friend_call_confidence=confidence)


def test_non_positive_time_limit_is_rejected() -> None:
    with pytest.raises(ValueError):
        EngineConfig(time_limit=timedelta(0))


def test_from_settings_reads_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("GAME_TIME_LIMIT_MINUTES", "10")
    monkeypatch.setenv("FRIEND_CALL_CONFIDENCE", "60")
    monkeypatch.setenv("PERSONA_NAMES", "Ann,Bob")

    config = EngineConfig.from_settings(Settings(), rng=random.Random(1))

    assert config.time_limit == timedelta(minutes=10)
    assert config.friend_call_confidence == 60
    assert config.personas.random_persona_name() in {"Ann", "Bob"}
    assert config.prize_table == PrizeTable()
