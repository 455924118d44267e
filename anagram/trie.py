import re
from typing import Iterable, Self

# Code 0 never spells a letter: the child at code 0 marks the end of a word.
TERMINAL_CODE = 0

NON_WORD = re.compile(r"\W+")


def clean(text: str) -> str:
    """Default cleaner: drop non-word characters and lowercase."""
    return NON_WORD.sub("", text).lower()


def to_codes(text: str) -> list[int]:
    """Character codes for text. Whitespace and NUL never become codes."""
    return [ord(ch) for ch in text if ch != "\0" and not ch.isspace()]


class LexiconTrie:
    _children: dict[int, Self]

    def __init__(self):
        self._children = {}

    def descend(self, code: int) -> Self | None:
        return self._children.get(code)

    def is_word(self):
        return TERMINAL_CODE in self._children

    # ---

    def add_word(self, codes: list[int]) -> Self:
        node = self
        for code in codes:
            child = node._children.get(code)
            if child is None:
                child = node._children[code] = LexiconTrie()
            node = child
        node._children.setdefault(TERMINAL_CODE, TERMINAL)
        return node

    def size(self):
        if self is TERMINAL:
            return 1
        return sum(c.size() for c in self._children.values())

    def num_nodes(self):
        return 1 + sum(
            c.num_nodes() for code, c in self._children.items() if code
        )

    def find_word(self, word: str):
        node = self
        for code in to_codes(word):
            node = node.descend(code)
            if node is None:
                return None
        return node if node.is_word() else None

    @staticmethod
    def create_from_wordlist(words: Iterable[str]) -> tuple[Self, frozenset[int]]:
        """words should already be cleaned. Returns the root and its known codes."""
        trie = LexiconTrie()
        known = set[int]()
        for word in words:
            codes = to_codes(word or "")
            if not codes:
                continue
            known.update(codes)
            trie.add_word(codes)
        if not known:
            raise ValueError("no words")
        return trie, frozenset(known)


# Shared by every word in every trie; it has no children and is never mutated.
TERMINAL = LexiconTrie()


def all_words(t: LexiconTrie, prefix="") -> list[str]:
    """Every word spelled below t, in insertion order of the branches."""
    out = []
    for code, child in t._children.items():
        if code == TERMINAL_CODE:
            out.append(prefix)
        else:
            out.extend(all_words(child, prefix + chr(code)))
    return out
