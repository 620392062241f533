# src/greencircle/constants.py
from enum import IntEnum


class CardType(IntEnum):
    # Resource kinds first: ordinal == zone index on the board.
    TRAINING = 0
    CODING = 1
    DAILY_ROUTINE = 2
    TASK_PRIORITIZATION = 3
    ARCHITECTURE_STUDY = 4
    CONTINUOUS_INTEGRATION = 5
    CODE_REVIEW = 6
    REFACTORING = 7
    # Non-resource cards share the same ordinal space (hand vectors only)
    BONUS = 8
    TECHNICAL_DEBT = 9


RESOURCES_COUNT = 8
CARD_KINDS_COUNT = len(CardType)
ZONES_COUNT = 8

RESOURCES = tuple(CardType(i) for i in range(RESOURCES_COUNT))

# Game phases as announced on the first line of every turn
MOVE_PHASE = "MOVE"
GIVE_PHASE = "GIVE_CARD"
THROW_PHASE = "THROW_CARD"
PLAY_PHASE = "PLAY_CARD"
RELEASE_PHASE = "RELEASE"

# Card locations we keep for ourselves; anything else is read and dropped
HAND = "HAND"
DRAW = "DRAW"
DISCARD = "DISCARD"
AUTOMATED = "AUTOMATED"
PLAYER_LOCATIONS = (HAND, DRAW, DISCARD, AUTOMATED)
