# src/greencircle/model/card.py
from dataclasses import dataclass

from greencircle.constants import CardType


@dataclass(frozen=True)
class Card:
    card_type: CardType
    bonus_actions: int = 0
    good_actions: int = 0
    bad_actions: int = 0

    @property
    def is_resource(self) -> bool:
        return self.card_type not in (CardType.BONUS, CardType.TECHNICAL_DEBT)

    @property
    def debt_absorbed(self) -> int:
        """
        Technical debt one copy of this card can soak up when an
        application is released (its bad actions).
        """
        return self.bad_actions

    @staticmethod
    def make(card_type: CardType) -> "Card":
        card_type = CardType(card_type)
        if card_type == CardType.BONUS:
            return Card(card_type, bonus_actions=1, good_actions=0, bad_actions=1)
        if card_type == CardType.TECHNICAL_DEBT:
            return Card(card_type)
        return Card(card_type, bonus_actions=0, good_actions=2, bad_actions=2)


# One profile per card kind, indexed by ordinal
CARD_PROFILES = tuple(Card.make(t) for t in CardType)
