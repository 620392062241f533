# src/greencircle/model/game.py
from __future__ import annotations
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, Dict, List

from greencircle.config import Config
from greencircle.model.application import Application
from greencircle.model.player import PlayerState
from greencircle.utils.logging import EventLog

if TYPE_CHECKING:
    from greencircle.engine.release import ReleaseCandidate


@dataclass
class TurnState:
    """Everything observable for one turn. Thrown away once the command is sent."""
    phase: str
    # Keyed by id, input order preserved
    applications: Dict[int, Application] = field(default_factory=dict)
    me: PlayerState = field(default_factory=PlayerState)
    opponent: PlayerState = field(default_factory=PlayerState)
    moves: List[str] = field(default_factory=list)
    release_candidates: List["ReleaseCandidate"] = field(default_factory=list)

    @property
    def application_list(self) -> List[Application]:
        return list(self.applications.values())


@dataclass
class GameSession:
    """
    Per-game context handed to the policy each turn. `turn` is the only
    state carried from one turn to the next: it counts MOVE phases.
    """
    cfg: Config = field(default_factory=Config)
    turn: int = 0

    # Logging
    log: EventLog = field(default_factory=EventLog)

    def emit(self, rec: Dict[str, Any]) -> None:
        self.log.emit(rec)

    def start_move_turn(self) -> int:
        self.turn += 1
        self.emit({"a": "turn_start", "t": self.turn})
        return self.turn
