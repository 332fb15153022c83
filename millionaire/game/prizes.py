from __future__ import annotations

from dataclasses import dataclass

PRIZES: tuple[int, ...] = (
    100,
    200,
    300,
    500,
    1_000,
    2_000,
    4_000,
    8_000,
    16_000,
    32_000,
    64_000,
    125_000,
    250_000,
    500_000,
    1_000_000,
)
# Zero-based level indices: the 5th, 10th and 15th questions.
FIREPROOF_LEVELS: tuple[int, ...] = (4, 9, 14)


@dataclass(frozen=True, slots=True)
class PrizeTable:
    prizes: tuple[int, ...] = PRIZES
    fireproof_levels: tuple[int, ...] = FIREPROOF_LEVELS

    def __post_init__(self) -> None:
        if not self.prizes:
            raise ValueError("prize table must not be empty")
        if any(lower >= higher for lower, higher in zip(self.prizes, self.prizes[1:])):
            raise ValueError("prizes must be strictly increasing")
        if list(self.fireproof_levels) != sorted(set(self.fireproof_levels)):
            raise ValueError("fireproof levels must be ascending and unique")
        if any(level < 0 or level > self.max_level for level in self.fireproof_levels):
            raise ValueError("fireproof levels must lie within the prize table")

    @property
    def max_level(self) -> int:
        return len(self.prizes) - 1

    @property
    def levels_count(self) -> int:
        return len(self.prizes)

    @property
    def top_prize(self) -> int:
        return self.prizes[-1]

    def prize_for_level(self, level: int) -> int:
        if level < 0 or level > self.max_level:
            raise ValueError(f"level {level} is outside 0..{self.max_level}")
        return self.prizes[level]

    def checkpoint_prize(self, level: int) -> int:
        """Prize kept when the game stops at ``level`` without the player cashing out.

        Only checkpoints strictly below ``level`` count: the question at
        ``level`` itself was not completed.
        """
        completed = [checkpoint for checkpoint in self.fireproof_levels if checkpoint <= level - 1]
        if not completed:
            return 0
        return self.prizes[completed[-1]]

    def cash_out_prize(self, level: int) -> int:
        if level <= 0:
            return 0
        return self.prizes[min(level, self.levels_count) - 1]
