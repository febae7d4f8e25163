"""
main.py — Bootstrap

1. Parse command-line flags
2. Load tuning and apply flag overrides
3. Create the app
4. Push the play scene
5. Run
"""

from __future__ import annotations
import argparse
import random

from core import tuning
from core.app import App
from components.resources import BOMB_MODES
from scenes.play_scene import PlayScene


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(description="Star Catcher — collect stars, dodge bombs.")
    ap.add_argument("--tuning", metavar="PATH", default=None,
                    help="Tuning file (default: data/tuning.toml)")
    ap.add_argument("--seed", type=int, default=None,
                    help="Seed for star and bomb placement")
    ap.add_argument("--mute", action="store_true", help="Start with sound off")
    ap.add_argument("--debug", action="store_true", help="Show body outlines")
    ap.add_argument("--rules", choices=BOMB_MODES, default=None,
                    help="What a bomb hit does")
    return ap


def apply_args(args: argparse.Namespace) -> None:
    """Load tuning from ``args.tuning`` and layer the other flags on top."""
    tuning.load(args.tuning)
    if args.debug:
        tuning.override("physics", "debug", True)
    if args.rules:
        tuning.override("rules", "bomb_mode", args.rules)
    if args.seed is not None:
        random.seed(args.seed)


def main(argv: list[str] | None = None):
    args = build_parser().parse_args(argv)
    apply_args(args)

    app = App(
        title=str(tuning.get("game", "title", "Star Catcher")),
        width=int(tuning.get("game", "width", 1024)),
        height=int(tuning.get("game", "height", 640)),
        fps=int(tuning.get("game", "fps", 60)),
    )
    app.push_scene(PlayScene(muted=args.mute))
    app.run()


if __name__ == "__main__":
    main()
