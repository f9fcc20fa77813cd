"""
Check words against a letter grid from the command line.

Usage:
    python -m scripts.check_words [--board ROWS] [WORD ...] [--expect LIST]

Examples:
    python -m scripts.check_words
    python -m scripts.check_words --board "CAT/ORE/DOG" COD TAR
    python -m scripts.check_words EAR EARS --expect true,false

With no arguments the reference board EARA/NLEC/IAIS/BYOR is checked against
its reference words and expected answers.
"""
import argparse
import sys
from pathlib import Path

# Ensure project root is on path
PROJECT_ROOT = Path(__file__).resolve().parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

from wordcheck.settings import settings
from wordcheck.board import parse_board, format_board
from wordcheck.solver import Boggle, InvalidGridError

REFERENCE_BOARD = "EARA/NLEC/IAIS/BYOR"
REFERENCE_WORDS = ["C", "EAR", "EARS", "BAILER", "RSCAREIOYBAILNEA", "CEREAL", "ROBES"]
REFERENCE_EXPECTED = [True, True, False, True, True, False, False]


def _parse_expect(text: str) -> list[bool]:
    values = []
    for item in text.split(","):
        item = item.strip().lower()
        if item not in ("true", "false"):
            raise argparse.ArgumentTypeError(f"expected true/false, got {item!r}")
        values.append(item == "true")
    return values


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(description="Word Grid Checker")
    parser.add_argument("words", nargs="*", help="Words to look for (default: reference words)")
    parser.add_argument("--board", default=REFERENCE_BOARD,
                        help=f"Board rows separated by '/', ',' or spaces (default: {REFERENCE_BOARD})")
    parser.add_argument("--expect", type=_parse_expect, default=None,
                        help="Comma-separated true/false per word; exit 1 on any mismatch")
    parser.add_argument("--keep-case", action="store_true",
                        help="Compare letters exactly instead of upper-casing board and words")
    args = parser.parse_args(argv)

    normalize = settings.NORMALIZE_CASE and not args.keep_case

    try:
        board = parse_board(args.board, normalize)
    except InvalidGridError as e:
        print(f"Error: invalid board: {e}")
        return 2

    words = args.words
    expected = args.expect
    if not words:
        words = REFERENCE_WORDS
        if expected is None and args.board == REFERENCE_BOARD:
            expected = REFERENCE_EXPECTED
    if normalize:
        words = [w.upper() for w in words]

    if expected is not None and len(expected) != len(words):
        print(f"Error: --expect has {len(expected)} values for {len(words)} words")
        return 2

    print(f"Board {len(board)}x{len(board[0])}: {format_board(board)}")
    print()

    mismatches = 0
    for i, word in enumerate(words):
        found = Boggle(board, word).check()
        line = f"  {word:<20} {'FOUND' if found else 'not found'}"
        if expected is not None and expected[i] != found:
            mismatches += 1
            line += f"  (expected {'FOUND' if expected[i] else 'not found'})"
        print(line)

    if expected is not None:
        print()
        print(f"Mismatches: {mismatches}")
    return 1 if mismatches else 0


if __name__ == "__main__":
    sys.exit(main())
