from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, replace
from enum import Enum
from typing import Any

from millionaire.game.sessions.errors import UnknownHintKindError


class HintKind(str, Enum):
    FIFTY_FIFTY = "fifty_fifty"
    AUDIENCE_HELP = "audience_help"
    FRIEND_CALL = "friend_call"


def parse_hint_kind(value: HintKind | str) -> HintKind:
    if isinstance(value, HintKind):
        return value
    try:
        return HintKind(str(value).strip().lower())
    except ValueError as exc:
        raise UnknownHintKindError(f"unknown hint kind: {value!r}") from exc


HintPayload = tuple[str, str] | Mapping[str, int] | str


@dataclass(frozen=True, slots=True)
class HintData:
    fifty_fifty: tuple[str, str] | None = None
    # Sorted (letter, percent) pairs; get() hands out a fresh dict.
    audience_help: tuple[tuple[str, int], ...] | Mapping[str, int] | None = None
    friend_call: str | None = None

    def __post_init__(self) -> None:
        if self.fifty_fifty is not None:
            object.__setattr__(self, "fifty_fifty", tuple(self.fifty_fifty))
        if isinstance(self.audience_help, Mapping):
            object.__setattr__(
                self,
                "audience_help",
                tuple(sorted((str(letter), int(percent)) for letter, percent in self.audience_help.items())),
            )

    def get(self, kind: HintKind) -> HintPayload | None:
        if kind is HintKind.AUDIENCE_HELP:
            return dict(self.audience_help) if self.audience_help is not None else None
        return getattr(self, kind.value)

    def has(self, kind: HintKind) -> bool:
        return self.get(kind) is not None

    def with_payload(self, kind: HintKind, payload: HintPayload) -> HintData:
        if self.has(kind):
            raise ValueError(f"hint {kind.value} is already recorded")
        return replace(self, **{kind.value: payload})

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {}
        if self.fifty_fifty is not None:
            data[HintKind.FIFTY_FIFTY.value] = list(self.fifty_fifty)
        if self.audience_help is not None:
            data[HintKind.AUDIENCE_HELP.value] = dict(self.audience_help)
        if self.friend_call is not None:
            data[HintKind.FRIEND_CALL.value] = self.friend_call
        return data

    @classmethod
    def from_dict(cls, data: Mapping[str, Any] | None) -> HintData:
        if not data:
            return cls()
        fifty_fifty = data.get(HintKind.FIFTY_FIFTY.value)
        audience_help = data.get(HintKind.AUDIENCE_HELP.value)
        return cls(
            fifty_fifty=tuple(fifty_fifty) if fifty_fifty is not None else None,
            audience_help=(
                {str(letter): int(votes) for letter, votes in audience_help.items()}
                if audience_help is not None
                else None
            ),
            friend_call=data.get(HintKind.FRIEND_CALL.value),
        )
