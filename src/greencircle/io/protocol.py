# src/greencircle/io/protocol.py
"""
Turn block reader and command writer for the referee's text protocol.

A turn block is:

    <phase>
    <n>            then n x `APP <id> <r0> .. <r7>`
    <zone> <score> <daily_routine> <architecture_study>     (me)
    <zone> <score> <daily_routine> <architecture_study>     (opponent)
    <n>            then n x `<LOCATION> <c0> .. <c9>`
    <n>            then n x <move>
"""
from __future__ import annotations
import logging
from typing import Dict, Iterator, List, Optional, Tuple

from greencircle.constants import (
    AUTOMATED, CARD_KINDS_COUNT, DISCARD, DRAW, HAND, PLAYER_LOCATIONS,
)
from greencircle.engine.release import ReleaseCandidate
from greencircle.errors import ProtocolError
from greencircle.model.application import Application
from greencircle.model.game import TurnState
from greencircle.model.hand import Hand
from greencircle.model.player import PlayerState

logger = logging.getLogger(__name__)

Action = Tuple[str, Optional[tuple]]

# ----------------------------
# Line helpers
# ----------------------------

def _next(lines: Iterator[str], what: str) -> str:
    try:
        return next(lines).strip()
    except StopIteration:
        raise ProtocolError(f"input ended while reading {what}") from None

def _as_int(token: str, line: str) -> int:
    try:
        return int(token)
    except ValueError:
        raise ProtocolError(f"expected an integer, got {token!r}", line) from None

def _read_count(lines: Iterator[str], what: str) -> int:
    line = _next(lines, what)
    n = _as_int(line, line)
    if n < 0:
        raise ProtocolError(f"negative {what}", line)
    return n

# ----------------------------
# Section parsers
# ----------------------------

def parse_player(line: str) -> PlayerState:
    tokens = line.split()
    if len(tokens) != 4:
        raise ProtocolError("player line needs 4 fields", line)
    location, score, daily, arch = (_as_int(t, line) for t in tokens)
    return PlayerState(
        location=location,
        score=score,
        permanent_daily_routine=daily,
        permanent_architecture_study=arch,
    )

def parse_cards(line: str) -> Tuple[str, Hand]:
    tokens = line.split()
    if not tokens or len(tokens) > CARD_KINDS_COUNT + 1:
        raise ProtocolError("malformed card location line", line)
    counts = [_as_int(t, line) for t in tokens[1:]]
    if any(n < 0 for n in counts):
        raise ProtocolError("negative card count", line)
    return tokens[0], Hand.of(counts)

def _with_cards(player: PlayerState, location: str, hand: Hand) -> None:
    if location == HAND:
        player.hand = hand
    elif location == DRAW:
        player.draw = hand
    elif location == DISCARD:
        player.discard = hand
    elif location == AUTOMATED:
        player.automated = hand

def parse_release_move(move: str, applications: Dict[int, Application]) -> Optional[int]:
    """Application id of a `RELEASE <id>` move, None for any other move."""
    tokens = move.split()
    if not tokens or tokens[0] != "RELEASE":
        return None
    if len(tokens) != 2:
        raise ProtocolError("malformed release move", move)
    app_id = _as_int(tokens[1], move)
    if app_id not in applications:
        raise ProtocolError(f"release of unknown application {app_id}", move)
    return app_id

# ----------------------------
# Turn reader
# ----------------------------

def read_turn(lines: Iterator[str]) -> Optional[TurnState]:
    """
    Read one full turn block. Returns None on a clean end of input
    (nothing but blank lines left before the phase line); raises
    ProtocolError otherwise.
    """
    phase = ""
    while not phase:
        try:
            phase = next(lines).strip()
        except StopIteration:
            return None

    applications: Dict[int, Application] = {}
    for _ in range(_read_count(lines, "application count")):
        app = Application.from_line(_next(lines, "application"))
        applications[app.id] = app

    me = parse_player(_next(lines, "player"))
    opponent = parse_player(_next(lines, "opponent"))

    for _ in range(_read_count(lines, "card location count")):
        location, hand = parse_cards(_next(lines, "card location"))
        if location in PLAYER_LOCATIONS:
            _with_cards(me, location, hand)
        else:
            logger.debug("ignoring card location %s", location)

    moves: List[str] = []
    candidates: List[ReleaseCandidate] = []
    for _ in range(_read_count(lines, "move count")):
        move = _next(lines, "move")
        moves.append(move)
        app_id = parse_release_move(move, applications)
        if app_id is not None:
            candidates.append(ReleaseCandidate.build(applications[app_id], me.hand))

    return TurnState(
        phase=phase,
        applications=applications,
        me=me,
        opponent=opponent,
        moves=moves,
        release_candidates=candidates,
    )

# ----------------------------
# Command writer
# ----------------------------

def format_action(action: Action) -> str:
    kind, payload = action
    if kind == "move":
        return f"MOVE {int(payload[0])}"
    if kind == "give":
        return f"GIVE {int(payload[0])}"
    if kind == "release":
        return f"RELEASE {int(payload[0])}"
    if kind == "play":
        return payload[0].name
    if kind == "wait":
        return "WAIT"
    if kind == "random":
        return "RANDOM"
    raise ValueError(f"unknown action kind {kind!r}")
