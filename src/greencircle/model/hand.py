# src/greencircle/model/hand.py
from dataclasses import dataclass
from typing import Iterator, Sequence, Tuple

from greencircle.constants import CARD_KINDS_COUNT, CardType


@dataclass(frozen=True)
class Hand:
    """
    Card counts for one location (hand, draw, discard, automated),
    indexed by card-kind ordinal. Always CARD_KINDS_COUNT long.
    """
    counts: Tuple[int, ...] = (0,) * CARD_KINDS_COUNT

    def __post_init__(self) -> None:
        if len(self.counts) != CARD_KINDS_COUNT:
            raise ValueError(
                f"hand needs {CARD_KINDS_COUNT} slots, got {len(self.counts)}"
            )

    def __getitem__(self, kind: int) -> int:
        return self.counts[int(kind)]

    def __iter__(self) -> Iterator[int]:
        return iter(self.counts)

    def __len__(self) -> int:
        return CARD_KINDS_COUNT

    @property
    def bonus(self) -> int:
        return self.counts[CardType.BONUS]

    def has(self, kind: int) -> bool:
        return self.counts[int(kind)] > 0

    @staticmethod
    def of(counts: Sequence[int]) -> "Hand":
        """Build from a possibly short sequence; missing slots are zero."""
        if len(counts) > CARD_KINDS_COUNT:
            raise ValueError(f"too many card counts: {len(counts)}")
        padded = list(int(c) for c in counts) + [0] * (CARD_KINDS_COUNT - len(counts))
        return Hand(tuple(padded))

    @staticmethod
    def from_mapping(cards: dict) -> "Hand":
        counts = [0] * CARD_KINDS_COUNT
        for kind, n in cards.items():
            counts[int(kind)] = int(n)
        return Hand(tuple(counts))
