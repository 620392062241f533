from dataclasses import dataclass
import argparse

@dataclass(frozen=True)
class Config:
    # Score from which the bot switches to end-game zone scoring and
    # stops gating releases on technical debt
    end_game_score: int = 4

    # Release gating: debt tolerated is min(turn, release_debt_cap)
    release_debt_cap: int = 3

    # Zone scoring weights
    need_weight: int = 10              # per missing unit of aggregate demand
    missing_resource_bonus: int = 100  # end game, resource never discarded yet

    # Diagnostics (stderr only; stdout is the game protocol)
    log_level: str = "WARNING"

    # Offline decision summaries written at EOF
    summaries: bool = False
    summaries_dir: str = "summaries"
    session_id: str = "session"


def build_config_from_cli(argv=None):
    ap = argparse.ArgumentParser(description="Green Circle decision bot (stdin/stdout)")
    ap.add_argument("--log-level", default="WARNING", help="stderr log level (DEBUG, INFO, ...)")
    ap.add_argument("--end-game-score", type=int, default=4)
    ap.add_argument("--release-debt-cap", type=int, default=3)
    ap.add_argument("--need-weight", type=int, default=10)
    ap.add_argument("--missing-resource-bonus", type=int, default=100)
    ap.add_argument("--summaries", action="store_true", help="Write a decision summary CSV at EOF")
    ap.add_argument("--summaries-dir", default="summaries")
    ap.add_argument("--session-id", default="session", help="Suffix of the summary file name")

    args = ap.parse_args(argv)

    cfg = Config(
        end_game_score=args.end_game_score,
        release_debt_cap=args.release_debt_cap,
        need_weight=args.need_weight,
        missing_resource_bonus=args.missing_resource_bonus,
        log_level=args.log_level,
        summaries=args.summaries,
        summaries_dir=args.summaries_dir,
        session_id=args.session_id,
    )
    return cfg, args
