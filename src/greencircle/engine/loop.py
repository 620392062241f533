# src/greencircle/engine/loop.py
from __future__ import annotations
import logging
from typing import Any, Dict, Iterator, Optional, TextIO

from greencircle.bots.greedy import choose_action
from greencircle.config import Config
from greencircle.io.protocol import format_action, read_turn
from greencircle.io.summaries import write_summaries
from greencircle.model.game import GameSession

logger = logging.getLogger(__name__)

def _lines(stream: TextIO) -> Iterator[str]:
    # readline (not iteration) so we never block waiting on a read-ahead buffer
    return iter(stream.readline, "")

def play_turn(session: GameSession, lines: Iterator[str]) -> Optional[str]:
    """Read one turn and return the command to send, or None at end of input."""
    state = read_turn(lines)
    if state is None:
        return None
    return format_action(choose_action(session, state))

def run(cfg: Config, stdin: TextIO, stdout: TextIO,
        session: Optional[GameSession] = None) -> Dict[str, Any]:
    """
    Answer turns until the referee closes stdin. Parse errors propagate:
    a turn we cannot read is a turn we cannot answer.
    """
    session = session or GameSession(cfg=cfg)
    lines = _lines(stdin)
    session.emit({"a": "game_start", "session": cfg.session_id})

    answered = 0
    while True:
        command = play_turn(session, lines)
        if command is None:
            break
        stdout.write(command + "\n")
        stdout.flush()
        answered += 1
        logger.debug("turn %d -> %s", session.turn, command)

    session.emit({"a": "game_end", "t": session.turn, "answered": answered})
    logger.info("input closed after %d commands (%d move turns)", answered, session.turn)

    out: Dict[str, Any] = {"answered": answered, "turns": session.turn, "summary": None}
    if cfg.summaries:
        out["summary"] = write_summaries(cfg, session.log.records)
        logger.info("[summaries] wrote %s", out["summary"])
    return out
