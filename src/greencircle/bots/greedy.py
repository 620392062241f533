# src/greencircle/bots/greedy.py
from __future__ import annotations
import logging
from typing import Optional, Tuple

from greencircle.constants import (
    GIVE_PHASE, MOVE_PHASE, PLAY_PHASE, RELEASE_PHASE, THROW_PHASE, CardType,
)
from greencircle.engine.release import find_best_release, should_release
from greencircle.engine.zones import find_best_zone
from greencircle.model.game import GameSession, TurnState

logger = logging.getLogger(__name__)

Action = Tuple[str, Optional[tuple]]

WAIT: Action = ("wait", None)
RANDOM: Action = ("random", None)

# Cards worth playing from hand, in order, when another copy is still in the draw pile
PLAYABLE = (CardType.ARCHITECTURE_STUDY, CardType.REFACTORING)

# ----------------------------
# Phase policies
# ----------------------------

def _move(session: GameSession, state: TurnState) -> Action:
    turn = session.start_move_turn()
    apps = state.application_list
    if not apps:
        logger.warning("turn %d: no applications on the board, deferring move", turn)
        return RANDOM
    zone = find_best_zone(
        state.me.location,
        state.opponent.location,
        state.me.score,
        apps,
        state.me.discard,
        session.cfg,
    )
    return ("move", (zone,))

def _give(session: GameSession, state: TurnState) -> Action:
    # BONUS cards are the cheapest thing to hand over
    if state.me.hand.has(CardType.BONUS):
        return ("give", (CardType.BONUS,))
    return RANDOM

def _play(session: GameSession, state: TurnState) -> Action:
    for card in PLAYABLE:
        if state.me.hand.has(card) and state.me.draw.has(card):
            return ("play", (card,))
    return WAIT

def _release(session: GameSession, state: TurnState) -> Action:
    if not state.release_candidates:
        return WAIT
    best = find_best_release(state.me.hand, state.release_candidates)
    if best is None:
        logger.debug("turn %d: no affordable release", session.turn)
        return WAIT
    if not should_release(best, state.me.score, session.turn, session.cfg):
        logger.debug(
            "turn %d: holding app %d (debt %d, score %d)",
            session.turn, best.app.id, best.technical_debt_cost, state.me.score,
        )
        return WAIT
    return ("release", (best.app.id,))

_POLICIES = {
    MOVE_PHASE: _move,
    GIVE_PHASE: _give,
    THROW_PHASE: lambda session, state: RANDOM,
    PLAY_PHASE: _play,
    RELEASE_PHASE: _release,
}

# ----------------------------
# Main policy
# ----------------------------

def choose_action(session: GameSession, state: TurnState) -> Action:
    policy = _POLICIES.get(state.phase)
    if policy is None:
        logger.info("unknown phase %r, deferring to a random move", state.phase)
        action = RANDOM
    else:
        action = policy(session, state)

    rec = {"a": action[0], "t": session.turn, "phase": state.phase}
    if action[0] == "release":
        app_id = action[1][0]
        rec["app"] = app_id
        rec["debt"] = next(
            c.technical_debt_cost for c in state.release_candidates if c.app.id == app_id
        )
    elif action[1] is not None:
        rec["arg"] = int(action[1][0])
    session.emit(rec)
    return action
