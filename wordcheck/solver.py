from __future__ import annotations

import logging

logger = logging.getLogger("wordcheck")

# Neighbour offsets in search order: W, NW, N, NE, E, SE, S, SW
DIRECTIONS: tuple[tuple[int, int], ...] = (
    (0, -1), (-1, -1), (-1, 0), (-1, 1),
    (0, 1), (1, 1), (1, 0), (1, -1),
)


class InvalidGridError(ValueError):
    """Raised when a board is empty or its rows differ in length."""


class TrieNode:
    __slots__ = ("children", "is_word")

    def __init__(self):
        self.children: dict[str, TrieNode] = {}
        self.is_word: bool = False


class Trie:
    def __init__(self):
        self.root = TrieNode()

    def insert(self, word: str):
        # An empty word leaves the root non-terminal, so nothing is ever found
        if not word:
            return
        node = self.root
        for ch in word:
            if ch not in node.children:
                node.children[ch] = TrieNode()
            node = node.children[ch]
        node.is_word = True

    @staticmethod
    def step(node: TrieNode, symbol: str) -> TrieNode | None:
        return node.children.get(symbol)

    @staticmethod
    def is_terminal(node: TrieNode) -> bool:
        return node.is_word


def new_index(word: str) -> Trie:
    """Build a trie holding exactly one word."""
    trie = Trie()
    trie.insert(word)
    return trie


def validate_board(board: list[list[str]]) -> tuple[int, int]:
    """Return (rows, cols) for a rectangular, non-empty board."""
    if not board or not board[0]:
        raise InvalidGridError("Board must have at least one row and one column")
    cols = len(board[0])
    for r, row in enumerate(board):
        if len(row) != cols:
            raise InvalidGridError(f"Row {r} has {len(row)} cells, expected {cols}")
    return len(board), cols


def find(board: list[list[str]], trie: Trie) -> bool:
    """Search the board for the word stored in the trie.

    Every cell is tried as a start in row-major order. The DFS walks the trie
    one cell at a time and marks cells on the current path in ``visited``;
    a cell is unmarked again when all of its neighbours fail, so other paths
    may still use it.

    The path is kept on an explicit stack of ``[node, row, col, next direction]``
    frames, so its length is not bounded by the interpreter's recursion limit.
    """
    rows, cols = len(board), len(board[0])
    visited = [[False] * cols for _ in range(rows)]

    def enter(node: TrieNode, r: int, c: int) -> TrieNode | None:
        if r < 0 or r >= rows or c < 0 or c >= cols or visited[r][c]:
            return None
        child = trie.step(node, board[r][c])
        if child is not None:
            visited[r][c] = True
        return child

    def dfs(r: int, c: int) -> bool:
        child = enter(trie.root, r, c)
        if child is None:
            return False
        if trie.is_terminal(child):
            return True

        stack = [[child, r, c, 0]]
        while stack:
            frame = stack[-1]
            node, fr, fc, i = frame
            if i == len(DIRECTIONS):
                visited[fr][fc] = False
                stack.pop()
                continue

            frame[3] = i + 1
            dr, dc = DIRECTIONS[i]
            child = enter(node, fr + dr, fc + dc)
            if child is None:
                continue
            if trie.is_terminal(child):
                return True
            stack.append([child, fr + dr, fc + dc, 0])
        return False

    for r in range(rows):
        for c in range(cols):
            if dfs(r, c):
                return True
    return False


def check(board: list[list[str]], word: str) -> bool:
    """Return True if ``word`` traces a path of adjacent, unrepeated cells."""
    rows, cols = validate_board(board)
    # No simple path on the board is longer than the number of cells
    if len(word) > rows * cols:
        logger.debug("Word %r longer than %dx%d board", word, rows, cols)
        return False

    result = find(board, new_index(word))
    logger.debug("check %dx%d word=%r found=%s", rows, cols, word, result)
    return result


class Boggle:
    """A board paired with one target word; ``check()`` may be called repeatedly."""

    def __init__(self, board: list[list[str]], word: str):
        self.rows, self.cols = validate_board(board)
        self.board = board
        self.word = word
        self.trie = new_index(word)

    def check(self) -> bool:
        if len(self.word) > self.rows * self.cols:
            return False
        return find(self.board, self.trie)
