#!/usr/bin/env python3
import sys

from greencircle.config import build_config_from_cli
from greencircle.engine.loop import run
from greencircle.utils.logging import setup_logging

if __name__ == "__main__":
    cfg, args = build_config_from_cli()
    setup_logging(cfg.log_level)
    run(cfg, sys.stdin, sys.stdout)
