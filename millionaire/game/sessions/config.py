from __future__ import annotations

import random
from dataclasses import dataclass, field
from datetime import timedelta
from functools import lru_cache

from millionaire.core.config import Settings, get_settings
from millionaire.game.hints.personas import (
    DEFAULT_PERSONA_NAMES,
    PersonaNames,
    PersonaSource,
    parse_persona_names,
)
from millionaire.game.prizes import PrizeTable

DEFAULT_TIME_LIMIT = timedelta(minutes=35)
DEFAULT_FRIEND_CALL_CONFIDENCE = 75


@dataclass(frozen=True, slots=True)
class EngineConfig:
    prize_table: PrizeTable = field(default_factory=PrizeTable)
    time_limit: timedelta = DEFAULT_TIME_LIMIT
    friend_call_confidence: int = DEFAULT_FRIEND_CALL_CONFIDENCE
    rng: random.Random = field(default_factory=random.SystemRandom)
    persona_source: PersonaSource | None = None

    def __post_init__(self) -> None:
        if not 0 <= self.friend_call_confidence <= 100:
            raise ValueError("friend_call_confidence must be within 0..100")
        if self.time_limit <= timedelta(0):
            raise ValueError("time_limit must be positive")
        if self.persona_source is None:
            object.__setattr__(
                self,
                "persona_source",
                PersonaNames(DEFAULT_PERSONA_NAMES, rng=self.rng),
            )

    @property
    def max_level(self) -> int:
        return self.prize_table.max_level

    @property
    def personas(self) -> PersonaSource:
        if self.persona_source is None:
            raise RuntimeError("engine config has no persona source")
        return self.persona_source

    @classmethod
    def from_settings(cls, settings: Settings, *, rng: random.Random | None = None) -> EngineConfig:
        source_rng = rng or random.SystemRandom()
        return cls(
            time_limit=timedelta(minutes=settings.game_time_limit_minutes),
            friend_call_confidence=settings.friend_call_confidence,
            rng=source_rng,
            persona_source=PersonaNames(parse_persona_names(settings.persona_names), rng=source_rng),
        )


@lru_cache(maxsize=1)
def get_engine_config() -> EngineConfig:
    return EngineConfig.from_settings(get_settings())
