import argparse
import logging
import os
os.environ['PYGAME_HIDE_SUPPORT_PROMPT'] = "hide"

from whack.app.loop import run_game

LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR"]


def parse_screen(parser: argparse.ArgumentParser, text: str) -> tuple[int, int]:
    try:
        w, h = map(int, text.lower().split("x"))
    except ValueError:
        parser.error(f"--screen must look like WxH, got {text!r}")
    if w < 1 or h < 1:
        parser.error(f"--screen must be positive, got {text!r}")
    return w, h


def main(argv=None):
    parser = argparse.ArgumentParser(description="Whack-a-Button")
    parser.add_argument("--game", default="whack-a-button", help="Game folder name under whack/games/")
    parser.add_argument("--screen", default="640x560", help="Screen size WxH, e.g. 640x560")
    parser.add_argument("--fps", type=int, default=60, help="Frame rate cap")
    parser.add_argument("--mirror", action="store_true", help="Mirror the game window horizontally")
    parser.add_argument("--duration", type=int, help="Round length in seconds (overrides the manifest)")
    parser.add_argument("--log-level", default="INFO", type=str.upper, choices=LOG_LEVELS,
                        help="Logging level")
    args = parser.parse_args(argv)

    screen_size = parse_screen(parser, args.screen)
    if args.duration is not None and args.duration < 1:
        parser.error("--duration must be at least 1")

    logging.basicConfig(level=args.log_level,
                        format="%(asctime)s %(levelname)s %(name)s: %(message)s")

    resources = {}
    if args.duration is not None:
        resources["duration"] = args.duration

    run_game(
        game_id=args.game,
        screen_size=screen_size,
        fps=args.fps,
        mirror=args.mirror,
        resources=resources,
    )


if __name__ == "__main__":
    main()
