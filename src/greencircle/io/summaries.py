# src/greencircle/io/summaries.py
from __future__ import annotations
import os
from collections import defaultdict
from typing import Any, Dict, List

import pandas as pd

PHASES = ("MOVE", "GIVE_CARD", "THROW_CARD", "PLAY_CARD", "RELEASE")
COMMANDS = ("move", "give", "play", "release", "wait", "random")

DECISION_COLS = (
    ["phase", "decisions"]
    + [f"n_{c}" for c in COMMANDS]
    + ["release_debt_min", "release_debt_mean", "release_debt_max", "last_turn"]
)

def _key(a: Dict[str,Any]) -> str:
    return a.get("a", "")

def build_decision_rows(events: List[Dict[str,Any]]) -> List[Dict[str,Any]]:
    """One row per phase seen in the event log (known phases first)."""
    per_phase = defaultdict(lambda: {
        "decisions": 0,
        **{f"n_{c}": 0 for c in COMMANDS},
        "debts": [],
        "last_turn": 0,
    })

    for e in events:
        kind = _key(e)
        if kind not in COMMANDS:
            continue
        m = per_phase[e.get("phase", "?")]
        m["decisions"] += 1
        m[f"n_{kind}"] += 1
        m["last_turn"] = max(m["last_turn"], int(e.get("t", 0) or 0))
        if kind == "release" and e.get("debt") is not None:
            m["debts"].append(int(e["debt"]))

    order = [p for p in PHASES if p in per_phase] + sorted(p for p in per_phase if p not in PHASES)
    rows: List[Dict[str,Any]] = []
    for phase in order:
        m = per_phase[phase]
        debts = m.pop("debts")
        row = {"phase": phase, **m}
        row["release_debt_min"] = min(debts) if debts else None
        row["release_debt_mean"] = (sum(debts) / len(debts)) if debts else None
        row["release_debt_max"] = max(debts) if debts else None
        rows.append(row)
    return rows

def decisions_frame(events: List[Dict[str,Any]]) -> pd.DataFrame:
    rows = build_decision_rows(events)
    if not rows:
        return pd.DataFrame(columns=DECISION_COLS)
    return pd.DataFrame(rows)[DECISION_COLS]

def write_summaries(cfg, events: List[Dict[str,Any]]) -> str:
    os.makedirs(cfg.summaries_dir, exist_ok=True)
    path = os.path.join(cfg.summaries_dir, f"summary_decisions_{cfg.session_id}.csv")
    decisions_frame(events).to_csv(path, index=False)
    return path
