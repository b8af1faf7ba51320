#!/usr/bin/env python3
'''
Copyright 2025 Aaron Vose (avose@aaronvose.net)
Licensed under the LGPL v2.1; see the file 'LICENSE' for details.
'''

import sys
import argparse

from core.storage import default_board_path


def run():
    parser = argparse.ArgumentParser(description="StackNotes note-card canvas")
    parser.add_argument(
        "--board",
        default=str(default_board_path()),
        help="Board file to open (created on first save)."
    )
    parser.add_argument(
        "--verbosity",
        type=int, default=0,
        help="Set verbosity level (0=quiet, 1=normal, 2=verbose, 3+=debug)"
    )
    parser.add_argument(
        "--stdexp",
        action="store_true",
        help="Use standard exception handling to stdout / stderr."
    )
    args = parser.parse_args()

    # Imported late so --help works without a display.
    from app import main
    return main(board_path=args.board, verbosity=args.verbosity, stdexp=args.stdexp)


if __name__ == "__main__":
    sys.exit(run())
