from dataclasses import dataclass, field

from greencircle.model.hand import Hand

@dataclass
class PlayerState:
    # Zone index; -1 before the first move of the game
    location: int = -1
    score: int = 0

    # Permanent skills (automated DAILY_ROUTINE / ARCHITECTURE_STUDY cards)
    permanent_daily_routine: int = 0
    permanent_architecture_study: int = 0

    # Card locations
    hand: Hand = field(default_factory=Hand)
    draw: Hand = field(default_factory=Hand)
    discard: Hand = field(default_factory=Hand)
    automated: Hand = field(default_factory=Hand)
