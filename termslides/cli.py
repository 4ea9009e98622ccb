"""Command line entry point: play the demo deck."""

from __future__ import annotations

import argparse
from dataclasses import replace
from pathlib import Path

from rich.console import Console
from rich.markup import escape

from termslides.config import load_settings
from termslides.demo import demo_slides
from termslides.exceptions import TermslidesError
from termslides.observability import LOG_LEVELS, LogConfig
from termslides.runner import Presentation
from termslides.timer import TIMER_KINDS


def _parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="termslides",
        description="Play the termslides demo presentation",
    )
    parser.add_argument(
        "--config", type=Path, default=None,
        help="Directory holding termslides.toml (default: current directory)",
    )
    parser.add_argument("--timer", choices=TIMER_KINDS, default=None)
    parser.add_argument(
        "--speed", type=float, default=None,
        help="Playback speed; 2 types twice as fast",
    )
    parser.add_argument(
        "--log-level", choices=LOG_LEVELS, default=None,
        help="Enable logging at this level",
    )
    parser.add_argument("--log-file", type=str, default=None)
    return parser


def main(argv: list[str] | None = None) -> int:
    args = _parser().parse_args(argv)
    err = Console(stderr=True)

    try:
        settings = load_settings(project_dir=args.config)
        if args.timer is not None:
            settings = replace(settings, timer=args.timer)
        if args.speed is not None:
            settings = replace(settings, speed=args.speed)
        if args.log_level is not None or args.log_file is not None:
            base = settings.logging or LogConfig()
            settings = replace(settings, logging=replace(
                base,
                level=args.log_level or base.level,
                file=args.log_file or base.file,
            ))

        Presentation(
            demo_slides(),
            sleeper=settings.sleeper(),
            logging=settings.logging,
            name="demo",
        ).play()
    except TermslidesError as exc:
        err.print(f"[red]error:[/red] {escape(str(exc))}")
        return 1
    except KeyboardInterrupt:
        return 130

    return 0
