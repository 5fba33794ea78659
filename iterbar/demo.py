#!/usr/bin/env python3
"""
iterbar/demo.py - walk through N dummy items with a progress line on stderr.

Usage example:
  python -m iterbar.demo --count 1000 --delay 10 --title test --mininterval 10
  iterbar-demo --width 0          (size the bar to the terminal)
"""
import argparse
import sys
import time

import iterbar.config as config
from iterbar.core import track
from iterbar.utils import get_logger, get_terminal_width, setup_logging

logger = get_logger()

# room for title, brackets, percent, counter and times
_LINE_OVERHEAD = 45

def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="Progress bar demo over a dummy workload.")
    parser.add_argument("--count", "-n", type=int, default=getattr(config, "DEMO_COUNT", 1000), help="Number of items (default from config).")
    parser.add_argument("--delay", type=int, default=getattr(config, "DEMO_DELAY_MS", 10), help="Sleep per item in ms (default from config).")
    parser.add_argument("--title", "-t", default="test", help="Label printed before the bar.")
    parser.add_argument("--mininterval", type=int, default=getattr(config, "DEFAULT_MININTERVAL_MS", 100), help="Minimum ms between redraws.")
    parser.add_argument("--width", type=int, default=getattr(config, "DEFAULT_WIDTH", 10), help="Bar width in cells; 0 fits the terminal.")
    parser.add_argument("--ascii", action="store_true", help="Use '#' and ' ' instead of block glyphs.")
    parser.add_argument("--log-file", default=None, help="Write debug log to this file.")
    return parser.parse_args(argv)

def main(argv=None):
    args = parse_args(argv)
    if args.log_file:
        setup_logging(args.log_file)
    width = args.width
    if width <= 0:
        width = max(1, get_terminal_width() - len(args.title) - _LINE_OVERHEAD)
    glyphs = config.ASCII_GLYPHS if args.ascii else config.DEFAULT_GLYPHS
    logger.info("demo started: count=%d delay=%dms width=%d", args.count, args.delay, width)

    for _ in track(range(args.count), args.title, sys.stderr, args.mininterval, width, glyphs):
        time.sleep(args.delay / 1000.0)
    return 0

def run(argv=None):
    try:
        return main(argv)
    except KeyboardInterrupt:
        print("\nInterrupted by user.")
        return 1

if __name__ == "__main__":
    sys.exit(run())
