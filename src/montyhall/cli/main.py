# src/montyhall/cli/main.py
"""
Command line interface for the :mod:`montyhall` package.

``montyhall run`` plays a batch and prints the stay/switch proportion table,
``montyhall play`` plays a single game and ``montyhall watch`` narrates one.
"""
from __future__ import annotations

import argparse
import logging
from pathlib import Path
from typing import Any, Mapping, Sequence

from montyhall.config import AppConfig, apply_dot_overrides, load_app_config
from montyhall.simulation.simulation import aggregate_metrics, play_game, play_n_games
from montyhall.simulation.watch_game import watch_game
from montyhall.utils.logging import setup_info_logging

LOGGER = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# Argument parser
# ---------------------------------------------------------------------------


def build_parser() -> argparse.ArgumentParser:
    """Construct the top-level CLI parser."""
    parser = argparse.ArgumentParser(prog="montyhall")
    parser.add_argument("--config", type=Path, help="Path to YAML configuration")
    parser.add_argument(
        "--set",
        dest="overrides",
        action="append",
        default=[],
        metavar="KEY=VALUE",
        help="Override configuration values, e.g. sim.n_games=500",
    )
    parser.add_argument(
        "--log-level",
        default="INFO",
        help="Root logging level",
    )

    sub = parser.add_subparsers(dest="command", required=True)

    # run
    run_parser = sub.add_parser("run", help="Play many games and summarize stay vs switch")
    run_parser.add_argument(
        "--n-games",
        dest="n_games",
        type=int,
        default=None,
        help="Number of games to play (default: sim.n_games, 100)",
    )
    run_parser.add_argument("--seed", type=int, default=None, help="Seed for reproducible runs")
    run_parser.add_argument("--jobs", type=int, default=None, help="Worker processes")

    # play
    play_parser = sub.add_parser("play", help="Play a single game")
    play_parser.add_argument("--seed", type=int, default=None, help="Seed for deterministic play")

    # watch
    watch_parser = sub.add_parser("watch", help="Narrate a single game step by step")
    watch_parser.add_argument("--seed", type=int, default=None, help="Seed for deterministic play")

    return parser


# ---------------------------------------------------------------------------
# Entry point
# ---------------------------------------------------------------------------


def _parse_level(level: str | int) -> int:
    """Normalize a logging level string or integer to ``logging`` constants."""
    if isinstance(level, str):
        return getattr(logging, level.upper(), logging.INFO)
    return int(level)


def format_summary(metrics: Mapping[str, Any], alpha: float) -> str:
    """Render :func:`aggregate_metrics` output as a few aligned lines."""
    pct = round((1.0 - alpha) * 100)
    lines = [f"games: {metrics['games']}"]
    for name, m in metrics["strategies"].items():
        lines.append(
            f"{name:<6} win rate {m['win_rate']:.3f} "
            f"({pct}% CI {m['ci_low']:.3f}-{m['ci_high']:.3f}, {m['wins']}/{m['games']})"
        )
    return "\n".join(lines)


def main(argv: Sequence[str] | None = None) -> None:
    """Entry point for the ``montyhall`` CLI dispatcher."""
    parser = build_parser()
    args = parser.parse_args(argv)

    setup_info_logging()
    root_logger = logging.getLogger()
    root_logger.setLevel(_parse_level(args.log_level))

    cfg = load_app_config(args.config) if args.config is not None else AppConfig()
    cfg = apply_dot_overrides(cfg, list(args.overrides or []))

    LOGGER.info(
        "CLI arguments parsed",
        extra={
            "stage": "cli",
            "command": args.command,
            "config_path": str(args.config) if args.config is not None else None,
            "overrides": list(args.overrides or []),
            "log_level": logging.getLevelName(root_logger.level),
        },
    )

    if args.command == "run":
        if args.n_games is not None:
            cfg.sim.n_games = args.n_games
        if args.seed is not None:
            cfg.sim.seed = args.seed
        if args.jobs is not None:
            cfg.sim.n_jobs = args.jobs
        LOGGER.info(
            "Dispatching run command",
            extra={
                "stage": "cli",
                "command": "run",
                "n_games": cfg.sim.n_games,
                "seed": cfg.sim.seed,
                "n_jobs": cfg.sim.n_jobs,
            },
        )
        batch = play_n_games(
            cfg.sim.n_games,
            seed=cfg.sim.seed,
            n_jobs=cfg.sim.n_jobs,
            digits=cfg.report.digits,
        )
        print(format_summary(aggregate_metrics(batch.results, cfg.report.alpha), cfg.report.alpha))
        LOGGER.info("Run command completed", extra={"stage": "cli", "command": "run"})
    elif args.command == "play":
        seed = args.seed if args.seed is not None else cfg.sim.seed
        for result in play_game(seed=seed):
            print(f"{result.strategy.value:<6} {result.outcome.value}")
    elif args.command == "watch":
        seed = args.seed if args.seed is not None else cfg.sim.seed
        LOGGER.info(
            "Dispatching watch_game",
            extra={"stage": "cli", "command": "watch", "seed": seed},
        )
        watch_game(seed=seed)
    else:  # pragma: no cover - argparse enforces valid choices
        parser.error(f"Unknown command {args.command}")


if __name__ == "__main__":  # pragma: no cover
    main()
