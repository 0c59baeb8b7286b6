"""Find dictionary words laid out on a grid of letters."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field

_STEPS = ((1, 0), (-1, 0), (0, 1), (0, -1))


@dataclass(eq=False)
class TrieNode:
    """A prefix-tree node counting how many live words pass through it."""

    children: dict[str, TrieNode] = field(default_factory=dict)
    is_word: bool = False
    refs: int = 0

    def add_word(self, word: str) -> None:
        """Insert ``word`` below this node."""
        node = self
        node.refs += 1
        for ch in word:
            node = node.children.setdefault(ch, TrieNode())
            node.refs += 1
        node.is_word = True

    def remove_word(self, word: str) -> None:
        """Release one reference along the path of ``word``.

        Nodes stay in place; letters with no matching child are skipped.
        """
        node = self
        node.refs -= 1
        for ch in word:
            child = node.children.get(ch)
            if child is not None:
                node = child
                node.refs -= 1


def find_words(board: Sequence[Sequence[str]], words: Iterable[str]) -> list[str]:
    """Return the words that can be traced on ``board`` through adjacent cells.

    Each cell is used at most once per word. Words come back in the order found.
    Raises ValueError for a board with no rows.
    """
    if not board:
        raise ValueError("board has no rows")
    root = TrieNode()
    for word in words:
        root.add_word(word)

    rows, cols = len(board), len(board[0])
    found: dict[str, None] = {}
    visited: set[tuple[int, int]] = set()

    def dfs(r: int, c: int, node: TrieNode, prefix: str) -> None:
        if not (0 <= r < rows and 0 <= c < cols) or (r, c) in visited:
            return
        letter = board[r][c]
        child = node.children.get(letter)
        if child is None or child.refs < 1:
            return
        visited.add((r, c))
        prefix += letter
        if child.is_word:
            child.is_word = False
            found[prefix] = None
            root.remove_word(prefix)
        for dr, dc in _STEPS:
            dfs(r + dr, c + dc, child, prefix)
        visited.discard((r, c))

    for r in range(rows):
        for c in range(cols):
            dfs(r, c, root, "")
    return list(found)