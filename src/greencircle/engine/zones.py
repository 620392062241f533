# src/greencircle/engine/zones.py
from __future__ import annotations
import logging
from typing import Dict, List, Optional, Sequence

from greencircle.config import Config
from greencircle.constants import RESOURCES, ZONES_COUNT, CardType
from greencircle.engine.eval import sum_needed_resources
from greencircle.errors import NotApplicableError
from greencircle.model.application import Application

logger = logging.getLogger(__name__)

_DEFAULT_CFG = Config()

# ----------------------------
# Ranking
# ----------------------------

def _free_key(score: int, taken: Dict[int, CardType]) -> int:
    # closest non-colliding key at or below score
    while score in taken:
        score -= 1
    return score

def _rank(raw_scores: Sequence[int]) -> List[CardType]:
    """
    Order resources best first. Scores are keyed in resource order; a key
    already taken slides down one unit at a time until it is free, so equal
    raw scores keep resource order and the result is a strict total order.
    """
    keyed: Dict[int, CardType] = {}
    for res, score in zip(RESOURCES, raw_scores):
        keyed[_free_key(score, keyed)] = res
    return [keyed[k] for k in sorted(keyed, reverse=True)]

def need_scores(applications: Sequence[Application], discard: Sequence[int],
                cfg: Config = _DEFAULT_CFG) -> List[int]:
    demand = sum_needed_resources(applications)
    return [cfg.need_weight * (demand[r] - discard[r]) for r in RESOURCES]

def end_game_scores(applications: Sequence[Application], discard: Sequence[int],
                    cfg: Config = _DEFAULT_CFG) -> List[int]:
    scores = need_scores(applications, discard, cfg)
    # bias heavily toward resources we never picked up
    return [
        s + (cfg.missing_resource_bonus if discard[r] == 0 else 0)
        for r, s in zip(RESOURCES, scores)
    ]

def rank_zones_middle(applications: Sequence[Application], discard: Sequence[int],
                      cfg: Config = _DEFAULT_CFG) -> List[CardType]:
    return _rank(need_scores(applications, discard, cfg))

def rank_zones_end_game(applications: Sequence[Application], discard: Sequence[int],
                        cfg: Config = _DEFAULT_CFG) -> List[CardType]:
    return _rank(end_game_scores(applications, discard, cfg))

# ----------------------------
# Selection
# ----------------------------

def is_adjacent(zone: int, other: int) -> bool:
    """Neighbours on the ring of ZONES_COUNT zones."""
    d = abs(zone - other)
    return d == 1 or d == ZONES_COUNT - 1

def _is_safe(zone: int, my_location: int, opponent_location: int) -> bool:
    return (
        zone != my_location
        and zone != opponent_location
        and not is_adjacent(zone, opponent_location)
    )

def find_best_zone(my_location: int, opponent_location: int, my_score: int,
                   applications: Sequence[Application], discard: Sequence[int],
                   cfg: Config = _DEFAULT_CFG) -> CardType:
    """
    Pick the zone to move to.

    Ranks zones with the mid-game or end-game scoring depending on
    `my_score`, defaults to the best zone we are not standing on, then
    prefers the first zone in ranking order that keeps us off the
    opponent's zone and its two neighbours.
    """
    if not applications:
        raise NotApplicableError("cannot rank zones without applications")

    end_game = my_score >= cfg.end_game_score
    ordered = (rank_zones_end_game if end_game else rank_zones_middle)(applications, discard, cfg)

    logger.debug("discard=%s", list(discard))
    logger.debug("zones(%s)=%s", "end" if end_game else "mid", [z.name for z in ordered])

    result = ordered[0] if ordered[0] != my_location else ordered[1]
    safe: Optional[CardType] = next(
        (z for z in ordered if _is_safe(z, my_location, opponent_location)), None
    )
    return safe if safe is not None else result
