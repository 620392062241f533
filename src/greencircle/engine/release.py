# src/greencircle/engine/release.py
from __future__ import annotations
import logging
from dataclasses import dataclass
from typing import Optional, Sequence, Tuple

from greencircle.config import Config
from greencircle.engine.eval import debt_capacity, missing_resources, technical_debt_cost
from greencircle.errors import NotApplicableError
from greencircle.model.application import Application

logger = logging.getLogger(__name__)

_DEFAULT_CFG = Config()


@dataclass(frozen=True)
class ReleaseCandidate:
    app: Application
    technical_debt_cost: int
    missing_resources: Tuple[int, ...]

    @staticmethod
    def build(app: Application, hand: Sequence[int]) -> "ReleaseCandidate":
        return ReleaseCandidate(
            app=app,
            technical_debt_cost=technical_debt_cost(app, hand),
            missing_resources=tuple(missing_resources(app, hand)),
        )


def find_best_release(hand: Sequence[int],
                      candidates: Sequence[ReleaseCandidate]) -> Optional[ReleaseCandidate]:
    """
    Cheapest candidate the hand can pay for, first one winning ties.
    Returns None when every candidate costs more debt than the hand absorbs.
    """
    if not candidates:
        raise NotApplicableError("no application candidates for best release")

    capacity = debt_capacity(hand)
    best: Optional[ReleaseCandidate] = None
    for c in candidates:
        cost = c.technical_debt_cost
        if cost <= capacity and (best is None or cost < best.technical_debt_cost):
            best = c

    if logger.isEnabledFor(logging.DEBUG):
        for c in candidates:
            logger.debug("candidate %s debt=%d", c.app.describe(), c.technical_debt_cost)
    logger.debug(
        "release capacity=%d -> %s",
        capacity,
        best.app.id if best else None,
    )
    return best


def debt_tolerance(turn: int, cfg: Config = _DEFAULT_CFG) -> int:
    """Debt accepted before the end game: grows with turns, capped."""
    return min(turn, cfg.release_debt_cap)


def should_release(candidate: ReleaseCandidate, score: int, turn: int,
                   cfg: Config = _DEFAULT_CFG) -> bool:
    if score >= cfg.end_game_score:
        return True
    return candidate.technical_debt_cost <= debt_tolerance(turn, cfg)
