"""Find all the anagrams of a phrase using one or more cascading word lists."""

import logging
import sys
from typing import Callable, Iterator, Sequence

from anagram.counts import all_known, build_counts
from anagram.search import Anagram, SearchContext, anagramize
from anagram.trie import LexiconTrie, clean

logger = logging.getLogger(__name__)

# Don't cache anagrams for residual states with more letters than this.
LIMIT = 20


class Tier:
    """One cumulative word list: its trie and every code its words use."""

    trie: LexiconTrie
    known: frozenset[int]
    num_words: int

    def __init__(self, words: Sequence[str]):
        self.trie, self.known = LexiconTrie.create_from_wordlist(words)
        self.num_words = len(words)


class Anagrammer:
    """Anagram engine over a word list, or a list of word lists.

    Each list after the first is an augmentation of those before it. A search
    starts with the first (smallest) tier and only moves on to the next when
    it finds no anagrams, or fewer than `min_anagrams`. Put long words first
    and short words last: short words multiply the number of anagrams, and
    the time and memory it takes to find them, much faster.
    """

    tiers: list[Tier]

    def __init__(
        self,
        word_lists: Sequence[str] | Sequence[Sequence[str]],
        *,
        limit: int = LIMIT,
        clean: Callable[[str], str] = clean,
        sort: bool = False,
        min_anagrams: int | None = None,
    ):
        if not isinstance(word_lists, (list, tuple)):
            raise TypeError("word_lists expected to be a list of words or of word lists")
        if not callable(clean):
            raise TypeError("clean expected to be callable")
        if not isinstance(limit, int) or limit < 0:
            raise ValueError(f"limit expected to be a non-negative int, got {limit!r}")
        check_min_anagrams(min_anagrams)

        self.limit = limit
        self.clean = clean
        self.sort = sort
        self.min_anagrams = min_anagrams

        if word_lists and not isinstance(word_lists[0], str):
            lists = word_lists
        else:
            lists = [word_lists]

        self.tiers = []
        all_words = dict[str, None]()
        for words in lists:
            if isinstance(words, str) or not isinstance(words, (list, tuple)):
                raise TypeError("word lists expected to be lists of words")
            if not words:
                continue
            before = len(all_words)
            for word in words:
                if not isinstance(word, str):
                    raise TypeError(f"items in lists expected to be words, got {word!r}")
                word = clean(word)
                if word:
                    all_words.setdefault(word)
            if len(all_words) == before:
                continue
            self.tiers.append(Tier([*all_words]))
        if not self.tiers:
            raise ValueError("no words")

    def anagrams(
        self,
        phrase: str,
        *,
        sort: bool | None = None,
        min_anagrams: int | None = None,
    ) -> list[list[str]]:
        """All the anagrams of phrase, each a list of words.

        sort and min_anagrams override the constructor's values when given.
        """
        if sort is None:
            sort = self.sort
        if min_anagrams is None:
            min_anagrams = self.min_anagrams
        check_min_anagrams(min_anagrams)

        counts = build_counts(self.clean(phrase))
        if not counts:
            return []

        # anagramize recurses once per word taken, so at most once per letter.
        depth = sys.getrecursionlimit()
        sys.setrecursionlimit(depth + sum(counts))
        try:
            ctx, found = self._search(counts, min_anagrams)
        finally:
            sys.setrecursionlimit(depth)

        if ctx is None:
            return []
        out = [[ctx.word_cache.word(w) for w in anagram] for anagram in found]
        if sort:
            out = sort_anagrams(out)
        return out

    def _search(
        self, counts: list[int], min_anagrams: int | None
    ) -> tuple[SearchContext | None, list[Anagram]]:
        found: list[Anagram] = []
        ctx = None
        for i, tier in enumerate(self.tiers):
            if not all_known(counts, tier.known):
                logger.debug("Skipping tier %d: phrase uses unknown characters", i)
                continue
            ctx = SearchContext.for_phrase(tier.trie, counts, self.limit)
            found = anagramize(ctx, counts)
            logger.debug(
                "Tier %d (%d words): %d anagrams, %d cached states",
                i,
                tier.num_words,
                len(found),
                len(ctx.cache),
            )
            if found and (not min_anagrams or len(found) >= min_anagrams):
                break
            if i + 1 < len(self.tiers):
                logger.debug("Too few anagrams in tier %d, trying the next tier", i)
        return ctx, found

    def iter_anagrams(self, phrase: str, **kwargs) -> Iterator[list[str]]:
        """Yield the anagrams of phrase one at a time.

        The whole result is computed before the first anagram is yielded, so
        stopping early saves no work.
        """
        yield from self.anagrams(phrase, **kwargs)


def check_min_anagrams(min_anagrams):
    if min_anagrams is not None and (
        not isinstance(min_anagrams, int) or min_anagrams < 1
    ):
        raise ValueError(f"min_anagrams expected to be a positive int, got {min_anagrams!r}")


def sort_anagrams(anagrams: list[list[str]]) -> list[list[str]]:
    """Sort the words in each anagram, then fewest words first, then alphabetically."""
    return sorted((sorted(words) for words in anagrams), key=lambda ws: (len(ws), ws))
