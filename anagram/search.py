"""Memoized decomposition of letter counts into words.

A step pulls out every word spellable from the remaining letters (see
walker.words_in) and recurses on what each leaves behind. Two rules keep this
tractable:

1. If some remaining letter is not used by any of the words found, no
   sequence of words can ever use it, so the state is a dead end.
2. Every complete decomposition contains a word using the lowest remaining
   letter. Branching only on those words still finds every decomposition; the
   other words are found again in the residuals.

Results for small residual states (at most `limit` letters) are cached, keyed
by the counts at the phrase's letters.
"""

from dataclasses import dataclass, field

from anagram.counts import build_jumps, indices
from anagram.trie import LexiconTrie
from anagram.walker import WordCache, words_in

Anagram = tuple[int, ...]


@dataclass
class SearchContext:
    """Everything one search of one tier needs. Not shared between searches."""

    trie: LexiconTrie
    jumps: list[int]
    indices: list[int]
    limit: int
    cache: dict[tuple[int, ...], list[Anagram]] = field(default_factory=dict)
    word_cache: WordCache = field(default_factory=WordCache)

    @staticmethod
    def for_phrase(trie: LexiconTrie, counts: list[int], limit: int):
        return SearchContext(
            trie=trie, jumps=build_jumps(counts), indices=indices(counts), limit=limit
        )


def all_touched(
    ctx: SearchContext, counts: list[int], words: list[tuple[int, list[int]]]
) -> list[tuple[int, list[int]]] | None:
    """Apply both pruning rules.

    Returns None for a dead end, otherwise the words using the lowest
    remaining letter.
    """
    first_index = None
    for i in ctx.indices:
        c = counts[i]
        if not c:
            continue
        if first_index is None:
            first_index = i
        if not any(residual[i] < c for _, residual in words):
            return None

    c = counts[first_index]
    return [(w, residual) for w, residual in words if residual[first_index] < c]


def anagramize(ctx: SearchContext, counts: list[int]) -> list[Anagram]:
    total = sum(counts[i] for i in ctx.indices)
    if not total:
        return [()]

    key = None
    if total <= ctx.limit:
        key = tuple(counts[i] for i in ctx.indices)
        cached = ctx.cache.get(key)
        if cached is not None:
            return cached

    anagrams = []
    words = words_in(ctx.trie, ctx.jumps, ctx.word_cache, counts, total)
    words = all_touched(ctx, counts, words)
    if words is not None:
        seen = set()
        for word, residual in words:
            for rest in anagramize(ctx, residual):
                anagram = (word, *rest)
                signature = tuple(sorted(anagram))
                if signature not in seen:
                    seen.add(signature)
                    anagrams.append(anagram)

    if key is not None:
        ctx.cache[key] = anagrams
    return anagrams
