"""Pull every word out of a trie that can be spelled from a count vector."""

from anagram.counts import NO_MORE
from anagram.trie import LexiconTrie


class WordCache:
    """Interns words as small ints for the duration of one search."""

    def __init__(self):
        self._ids = dict[str, int]()
        self._words = list[str]()

    def intern(self, word: str) -> int:
        word_id = self._ids.get(word)
        if word_id is None:
            word_id = self._ids[word] = len(self._words)
            self._words.append(word)
        return word_id

    def word(self, word_id: int) -> str:
        return self._words[word_id]

    def __len__(self):
        return len(self._words)


def words_in(
    trie: LexiconTrie,
    jumps: list[int],
    word_cache: WordCache,
    counts: list[int],
    total: int,
) -> list[tuple[int, list[int]]]:
    """Find (word id, residual counts) for every word spellable from counts.

    counts is modified during the walk but restored before returning. Each
    frame on the stack is [cursor code, trie node]; the cursor of every frame
    below the top is the letter consumed to reach the frame above it.
    """
    words = []
    stack = [[0, trie]]
    while True:
        frame = stack[-1]
        c, level = frame
        if c == NO_MORE:
            if len(stack) == 1:
                break
            stack.pop()
            total += 1
            parent = stack[-1]
            counts[parent[0]] += 1
            parent[0] = jumps[parent[0]]
            continue

        child = level.descend(c)
        if child is None:
            frame[0] = jumps[c]
        elif c:
            if counts[c]:
                stack.append([0, child])
                counts[c] -= 1
                total -= 1
            else:
                frame[0] = jumps[c]
        else:
            word = "".join(chr(f[0]) for f in stack[:-1])
            words.append((word_cache.intern(word), [*counts]))
            if total:
                frame[0] = jumps[c]
            else:
                # Nothing left to spell with, so nothing can extend this word.
                stack.pop()
                total += 1
                parent = stack[-1]
                counts[parent[0]] += 1
                parent[0] = jumps[parent[0]]
    return words
