from __future__ import annotations

import random
from collections.abc import Sequence
from typing import Protocol

DEFAULT_PERSONA_NAMES: tuple[str, ...] = (
    "Василий Петрович",
    "Анна Сергеевна",
    "Дядя Коля",
    "Бабушка Зина",
    "Одноклассник Игорь",
    "Профессор Лебедев",
    "Соседка Марина",
    "Коллега Дмитрий",
)


class PersonaSource(Protocol):
    def random_persona_name(self) -> str: ...


class PersonaNames:
    def __init__(self, names: Sequence[str], *, rng: random.Random) -> None:
        cleaned = tuple(name.strip() for name in names if name.strip())
        if not cleaned:
            raise ValueError("persona name list must not be empty")
        self.names = cleaned
        self._rng = rng

    def random_persona_name(self) -> str:
        return self._rng.choice(self.names)


def parse_persona_names(raw: str) -> tuple[str, ...]:
    names = tuple(part.strip() for part in raw.split(",") if part.strip())
    return names or DEFAULT_PERSONA_NAMES
