import re

from wordcheck.solver import InvalidGridError, validate_board

# Rows in a board string may be separated by slashes, commas or whitespace
ROW_SEPARATORS = re.compile(r"[/,\s]+")


def parse_board(value, normalize_case: bool = True) -> list[list[str]]:
    """Turn board input into a validated list of rows of single-character cells.

    Accepts ``"EARA/NLEC/IAIS/BYOR"`` (any of ``/ , whitespace`` between rows),
    a list of row strings, or a list of lists of cells.
    """
    if isinstance(value, str):
        rows = [r for r in ROW_SEPARATORS.split(value.strip()) if r]
    elif isinstance(value, (list, tuple)):
        rows = list(value)
    else:
        raise InvalidGridError(f"Unsupported board type: {type(value).__name__}")

    board: list[list[str]] = []
    for r, row in enumerate(rows):
        if isinstance(row, str):
            cells = list(row)
        elif isinstance(row, (list, tuple)):
            cells = list(row)
        else:
            raise InvalidGridError(f"Row {r} must be a string or a list of cells")

        for c, cell in enumerate(cells):
            if not isinstance(cell, str) or len(cell) != 1:
                raise InvalidGridError(f"Cell ({r},{c}) must be a single character, got {cell!r}")

        board.append([cell.upper() for cell in cells] if normalize_case else cells)

    validate_board(board)
    return board


def format_board(board: list[list[str]]) -> str:
    return " / ".join(" ".join(row) for row in board)
