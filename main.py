# main.py
import argparse

from config import AppConfig
from runners.run_snake import main as snake

def parse_args(argv=None):
    d = AppConfig()
    p = argparse.ArgumentParser(prog="snake", description="Classic Snake")
    p.add_argument("--width", type=int, default=d.board_width, help="board width in pixels")
    p.add_argument("--height", type=int, default=None, help="board height in pixels (default: width)")
    p.add_argument("--tick-ms", type=int, default=d.tick_ms, help="simulation step in milliseconds")
    p.add_argument("--fps", type=int, default=d.fps)
    p.add_argument("--seed", type=int, default=None)
    return p.parse_args(argv)

def build_config(args) -> AppConfig:
    return AppConfig().with_(
        board_width=args.width,
        board_height=args.height,
        tick_ms=args.tick_ms,
        fps=args.fps,
        seed=args.seed,
    )

def main(argv=None):
    args = parse_args(argv)
    snake(build_config(args))

if __name__ == "__main__":
    main()
