from __future__ import annotations

from dataclasses import dataclass


@dataclass(slots=True)
class PrizeCreditResult:
    amount: int
    balance_after: int
    idempotent_replay: bool
