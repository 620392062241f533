# src/greencircle/engine/eval.py
"""
Pure scoring helpers shared by the zone selector and the release evaluator.

Two shortfall formulas live here and must not be swapped:

* technical_debt_cost: each held resource card covers TWO units of the
  requirement, BONUS cards cancel debt one for one. This is what a release
  actually costs.
* missing_resources: one held card covers ONE unit. Display/diagnostic only.
"""
from __future__ import annotations
from typing import Iterable, List, Sequence

from greencircle.constants import RESOURCES_COUNT, CardType
from greencircle.model.application import Application
from greencircle.model.card import CARD_PROFILES

# Units of requirement one held resource card satisfies on release
CARD_COVERAGE = 2


def sum_needed_resources(applications: Iterable[Application]) -> List[int]:
    """Per-resource sum of requirements over all applications (zeros if none)."""
    total = [0] * RESOURCES_COUNT
    for app in applications:
        for r in range(RESOURCES_COUNT):
            total[r] += app.resources[r]
    return total


def technical_debt_cost(app: Application, hand: Sequence[int]) -> int:
    """
    Debt generated by releasing `app` now with `hand`.
    """
    debt = 0
    for r in range(RESOURCES_COUNT):
        debt += max(0, app.resources[r] - CARD_COVERAGE * hand[r])
    # bonuses can remove 1 technical debt each
    return max(0, debt - hand[CardType.BONUS])


def missing_resources(app: Application, hand: Sequence[int]) -> List[int]:
    """Per-resource shortfall counting one unit per held card."""
    return [max(0, app.resources[r] - hand[r]) for r in range(RESOURCES_COUNT)]


def debt_capacity(hand: Sequence[int]) -> int:
    """
    Max technical debt the hand can absorb this turn: TECHNICAL_DEBT cards
    count 0, BONUS 1, every resource card 2.
    """
    return sum(hand[kind] * CARD_PROFILES[kind].debt_absorbed for kind in CardType)
